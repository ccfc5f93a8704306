"""On-chain account layouts of the Shadow Drive storage program."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, ClassVar

from .codec import key_to_string

__all__ = ["ShdwAccountError", "StorageAccountV2", "UserInfo"]


class ShdwAccountError(ValueError):
    """Raised when account data does not match the expected layout."""


_STORAGE_HEADER = struct.Struct("<BBIQ32sIIIII")


@dataclass
class StorageAccountV2:
    """A version 2 storage account."""

    DISCRIMINATOR: ClassVar[bytes] = bytes([133, 53, 253, 82, 212, 5, 201, 218])

    immutable: bool
    to_be_deleted: bool
    delete_request_epoch: int
    storage: int
    owner1: str
    account_counter_seed: int
    creation_time: int
    creation_epoch: int
    last_fee_epoch: int
    identifier: str

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> StorageAccountV2:
        data = bytes(data)
        header_end = len(cls.DISCRIMINATOR) + _STORAGE_HEADER.size
        if len(data) < header_end:
            raise ShdwAccountError("Invalid Storage Account")
        if data[:len(cls.DISCRIMINATOR)] != cls.DISCRIMINATOR:
            raise ShdwAccountError("Account is not StorageAccountV2.")

        (
            immutable,
            to_be_deleted,
            delete_request_epoch,
            storage,
            owner1,
            account_counter_seed,
            creation_time,
            creation_epoch,
            last_fee_epoch,
            identifier_size,
        ) = _STORAGE_HEADER.unpack_from(data, len(cls.DISCRIMINATOR))

        identifier_bytes = data[header_end:]
        if len(identifier_bytes) < identifier_size:
            raise ShdwAccountError("Invalid Storage Account")
        identifier = identifier_bytes.split(b"\x00", 1)[0].decode("latin-1")

        return cls(
            immutable=bool(immutable),
            to_be_deleted=bool(to_be_deleted),
            delete_request_epoch=delete_request_epoch,
            storage=storage,
            owner1=key_to_string(owner1),
            account_counter_seed=account_counter_seed,
            creation_time=creation_time,
            creation_epoch=creation_epoch,
            last_fee_epoch=last_fee_epoch,
            identifier=identifier,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "immutable": self.immutable,
            "to_be_deleted": self.to_be_deleted,
            "delete_request_epoch": self.delete_request_epoch,
            "storage": self.storage,
            "owner1": self.owner1,
            "account_counter_seed": self.account_counter_seed,
            "creation_time": self.creation_time,
            "creation_epoch": self.creation_epoch,
            "last_fee_epoch": self.last_fee_epoch,
            "identifier": self.identifier,
        }


_USER_INFO_BODY = struct.Struct("<IIBB")


@dataclass
class UserInfo:
    """Per-user bookkeeping account of the storage program."""

    DISCRIMINATOR: ClassVar[bytes] = bytes([83, 134, 200, 56, 144, 56, 10, 62])
    SIZE: ClassVar[int] = 18

    account_counter: int
    delete_counter: int
    agreed_to_terms: bool
    had_bad_scam_scan: bool

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> UserInfo:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ShdwAccountError("Invalid user account size.")
        if data[:len(cls.DISCRIMINATOR)] != cls.DISCRIMINATOR:
            raise ShdwAccountError("Account is not UserInfo.")
        account_counter, delete_counter, agreed, scam_scan = _USER_INFO_BODY.unpack_from(
            data, len(cls.DISCRIMINATOR)
        )
        return cls(
            account_counter=account_counter,
            delete_counter=delete_counter,
            agreed_to_terms=agreed == 1,
            had_bad_scam_scan=scam_scan == 1,
        )