"""Address lookup table entries of versioned transaction messages."""

from __future__ import annotations

from dataclasses import dataclass

from .codec import bs58_decode, key_to_string

__all__ = ["AddressLookupTable"]

_KEY_SIZE = 32


@dataclass(frozen=True)
class AddressLookupTable:
    """A lookup table address with the writable and read-only indices it contributes."""

    address: bytes
    writable_indices: bytes = b""
    readonly_indices: bytes = b""

    def __post_init__(self) -> None:
        address = self.address
        if isinstance(address, str):
            address = bs58_decode(address)
        address = bytes(address)
        if len(address) != _KEY_SIZE:
            raise ValueError(f"lookup table address must be {_KEY_SIZE} bytes")
        writable = bytes(self.writable_indices)
        readonly = bytes(self.readonly_indices)
        if len(writable) > 255 or len(readonly) > 255:
            raise ValueError("a lookup table holds at most 255 indices of each kind")
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "writable_indices", writable)
        object.__setattr__(self, "readonly_indices", readonly)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> AddressLookupTable:
        """Parse a table from the start of ``data``; trailing bytes are ignored."""
        data = bytes(data)
        cursor = _KEY_SIZE
        if len(data) < cursor + 1:
            raise ValueError("lookup table data is truncated")
        address = data[:cursor]

        writable_size = data[cursor]
        cursor += 1
        writable = data[cursor:cursor + writable_size]
        cursor += writable_size
        if len(writable) != writable_size or cursor >= len(data):
            raise ValueError("lookup table data is truncated")

        readonly_size = data[cursor]
        cursor += 1
        readonly = data[cursor:cursor + readonly_size]
        if len(readonly) != readonly_size:
            raise ValueError("lookup table data is truncated")

        return cls(address, writable, readonly)

    @property
    def encoded_size(self) -> int:
        """Number of bytes the table occupies when serialized."""
        return _KEY_SIZE + 2 + len(self.writable_indices) + len(self.readonly_indices)

    @property
    def address_string(self) -> str:
        return key_to_string(self.address)

    def serialize(self) -> bytes:
        return b"".join(
            (
                self.address,
                bytes([len(self.writable_indices)]),
                self.writable_indices,
                bytes([len(self.readonly_indices)]),
                self.readonly_indices,
            )
        )