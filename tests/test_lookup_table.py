import pytest

from soltoolkit.codec import bs58_encode
from soltoolkit.lookup_table import AddressLookupTable

ZERO_ENCODED_32 = "11111111111111111111111111111111"


def _address():
    return bytes(range(1, 33))


def test_serialize_layout():
    table = AddressLookupTable(_address(), b"\x01\x02", b"\x05")
    data = table.serialize()
    assert data[:32] == _address()
    assert data[32] == 2
    assert data[33:35] == b"\x01\x02"
    assert data[35] == 1
    assert data[36:] == b"\x05"
    assert len(data) == table.encoded_size


def test_round_trip():
    table = AddressLookupTable(_address(), bytes([3, 4, 9]), bytes([7, 8]))
    assert AddressLookupTable.from_bytes(table.serialize()) == table


def test_from_bytes_ignores_trailing_data():
    table = AddressLookupTable(_address(), b"\x00", b"")
    data = table.serialize() + b"\xff\xff\xff"
    parsed = AddressLookupTable.from_bytes(data)
    assert parsed == table
    assert parsed.encoded_size == len(table.serialize())


def test_empty_indices():
    table = AddressLookupTable(bytes(32))
    assert table.serialize() == bytes(32) + b"\x00\x00"
    assert table.address_string == ZERO_ENCODED_32


def test_address_from_string():
    table = AddressLookupTable(bs58_encode(_address()), b"\x01")
    assert table.address == _address()


@pytest.mark.parametrize(
    "data",
    [
        bytes(10),
        bytes(32),
        bytes(32) + b"\x03\x01",
        bytes(32) + b"\x01\x01",
        bytes(32) + b"\x00\x02\x01",
    ],
)
def test_truncated_data_raises(data):
    with pytest.raises(ValueError):
        AddressLookupTable.from_bytes(data)


def test_invalid_address_length():
    with pytest.raises(ValueError):
        AddressLookupTable(bytes(31))


def test_too_many_indices():
    with pytest.raises(ValueError):
        AddressLookupTable(bytes(32), bytes(256))