"""Instruction data and size parsing for the Shadow Drive storage program."""

from __future__ import annotations

import struct

__all__ = [
    "SHDW_DRIVE_PROGRAM_ID",
    "SHDW_TOKEN_MINT",
    "SHDW_UPLOADER",
    "SYSVAR_RENT",
    "STORAGE_ACCOUNT_ENDPOINT",
    "UPLOAD_ENDPOINT",
    "INITIALIZE_ACCOUNT_V2_DISCRIMINATOR",
    "human_size_to_bytes",
    "initialize_account_data",
]

SHDW_DRIVE_PROGRAM_ID = "2e1wdyNhUvE76y6yUCvah2KaviavMJYKoRun8acMRBZZ"
SHDW_TOKEN_MINT = "SHDWyBxihqiCj6YekG2GUr7wqKLeLAMK1gHZck9pL6y"
SHDW_UPLOADER = "972oJTFyjmVNsWM4GHEGPWUomAiJf2qrVotLtwnKmWem"
SYSVAR_RENT = "SysvarRent111111111111111111111111111111111"

STORAGE_ACCOUNT_ENDPOINT = "https://shadow-storage.genesysgo.net:443/storage-account"
UPLOAD_ENDPOINT = "https://shadow-storage.genesysgo.net:443/upload"

INITIALIZE_ACCOUNT_V2_DISCRIMINATOR = bytes([8, 182, 149, 144, 185, 31, 209, 105])

_SIZE_UNITS = {
    "kb": 1000,
    "KB": 1000,
    "mb": 1000000,
    "MB": 1000000,
    "gb": 1000000000,
    "GB": 1000000000,
}

_SIZE_HELP = "Example input 10000, 10KB, 300mb, 1GB"


def human_size_to_bytes(human_size: str) -> int:
    """Convert a size such as ``"10KB"`` or ``"300mb"`` to a byte count.

    Units are decimal (kB = 1000 bytes) and must be all lower or all upper
    case. Raises ValueError for anything else.
    """
    unit = human_size[-2:]
    multiplier = _SIZE_UNITS.get(unit)
    if multiplier is None:
        raise ValueError(_SIZE_HELP)
    number = human_size[:-2].strip()
    if not number.isdigit():
        raise ValueError(_SIZE_HELP)
    return int(number) * multiplier


def initialize_account_data(name: str, storage: int) -> bytes:
    """Return the instruction data that creates a version 2 storage account.

    Layout: discriminator, little-endian u32 name length, ASCII name,
    little-endian u64 storage size in bytes.
    """
    try:
        name_bytes = name.encode("ascii")
    except UnicodeEncodeError:
        raise ValueError("storage name must be ASCII") from None
    if not 0 <= storage < 1 << 64:
        raise ValueError("storage size must fit in an unsigned 64-bit integer")
    return b"".join(
        (
            INITIALIZE_ACCOUNT_V2_DISCRIMINATOR,
            struct.pack("<I", len(name_bytes)),
            name_bytes,
            struct.pack("<Q", storage),
        )
    )