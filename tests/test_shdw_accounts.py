import struct

import pytest

from soltoolkit.codec import bs58_encode
from soltoolkit.shdw_accounts import ShdwAccountError, StorageAccountV2, UserInfo

STORAGE_DISCRIMINATOR = bytes([133, 53, 253, 82, 212, 5, 201, 218])
USER_INFO_DISCRIMINATOR = bytes([83, 134, 200, 56, 144, 56, 10, 62])
OWNER = bytes(range(100, 132))


def _storage_bytes(identifier=b"my-storage", padding=b"", discriminator=STORAGE_DISCRIMINATOR):
    return (
        discriminator
        + struct.pack("<BBIQ", 1, 0, 42, 1_000_000)
        + OWNER
        + struct.pack("<IIIII", 3, 1_700_000_000, 500, 510, len(identifier))
        + identifier
        + padding
    )


def test_storage_account_fields():
    account = StorageAccountV2.from_bytes(_storage_bytes())
    assert account.immutable is True
    assert account.to_be_deleted is False
    assert account.delete_request_epoch == 42
    assert account.storage == 1_000_000
    assert account.owner1 == bs58_encode(OWNER)
    assert account.account_counter_seed == 3
    assert account.creation_time == 1_700_000_000
    assert account.creation_epoch == 500
    assert account.last_fee_epoch == 510
    assert account.identifier == "my-storage"


def test_storage_identifier_stops_at_nul_padding():
    account = StorageAccountV2.from_bytes(_storage_bytes(b"files", padding=bytes(8)))
    assert account.identifier == "files"


def test_storage_to_dict():
    result = StorageAccountV2.from_bytes(_storage_bytes()).to_dict()
    assert set(result) == {
        "immutable",
        "to_be_deleted",
        "delete_request_epoch",
        "storage",
        "owner1",
        "account_counter_seed",
        "creation_time",
        "creation_epoch",
        "last_fee_epoch",
        "identifier",
    }
    assert result["identifier"] == "my-storage"
    assert result["owner1"] == bs58_encode(OWNER)


def test_storage_wrong_discriminator():
    with pytest.raises(ShdwAccountError, match="not StorageAccountV2"):
        StorageAccountV2.from_bytes(_storage_bytes(discriminator=USER_INFO_DISCRIMINATOR))


def test_storage_too_short():
    with pytest.raises(ShdwAccountError):
        StorageAccountV2.from_bytes(_storage_bytes()[:40])


def test_storage_identifier_shorter_than_declared():
    data = _storage_bytes(b"abcdef")[:-3]
    with pytest.raises(ShdwAccountError):
        StorageAccountV2.from_bytes(data)


def _user_info_bytes(counter=7, deletes=2, agreed=1, scam=0):
    return USER_INFO_DISCRIMINATOR + struct.pack("<IIBB", counter, deletes, agreed, scam)


def test_user_info_fields():
    info = UserInfo.from_bytes(_user_info_bytes())
    assert info.account_counter == 7
    assert info.delete_counter == 2
    assert info.agreed_to_terms is True
    assert info.had_bad_scam_scan is False


def test_user_info_flags_require_exactly_one():
    info = UserInfo.from_bytes(_user_info_bytes(agreed=2, scam=1))
    assert info.agreed_to_terms is False
    assert info.had_bad_scam_scan is True


@pytest.mark.parametrize("extra", [b"", b"\x00"])
def test_user_info_wrong_size(extra):
    data = _user_info_bytes()
    data = data[:-1] if not extra else data + extra
    with pytest.raises(ShdwAccountError, match="size"):
        UserInfo.from_bytes(data)


def test_user_info_wrong_discriminator():
    data = STORAGE_DISCRIMINATOR + _user_info_bytes()[8:]
    with pytest.raises(ShdwAccountError, match="not UserInfo"):
        UserInfo.from_bytes(data)