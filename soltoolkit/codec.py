"""Base58, base64 and compact-u16 encodings used by the Solana wire format."""

from __future__ import annotations

import base64

__all__ = [
    "bs58_encode",
    "bs58_decode",
    "bs64_encode",
    "bs64_decode",
    "short_u16_encode",
    "short_u16_decode",
    "key_to_string",
]

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_INDEX = {char: index for index, char in enumerate(_B58_ALPHABET)}


def bs58_encode(data: bytes | bytearray) -> str:
    """Encode bytes as a base58 string.

    Every leading zero byte except the last one becomes a leading ``1``;
    the remaining value always yields at least one digit, so empty input
    encodes to ``"1"``.
    """
    data = bytes(data)
    zeros = 0
    for byte in data[:-1]:
        if byte:
            break
        zeros += 1

    number = int.from_bytes(data, "big")
    digits = []
    while True:
        number, remainder = divmod(number, 58)
        digits.append(_B58_ALPHABET[remainder])
        if not number:
            break
    return "1" * zeros + "".join(reversed(digits))


def bs58_decode(text: str) -> bytes:
    """Decode a base58 string; raise ValueError on characters outside the alphabet."""
    if not text:
        return b""
    number = 0
    for char in text:
        try:
            number = number * 58 + _B58_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character: {char!r}") from None
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * zeros + body


def bs64_encode(data: bytes | bytearray) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def bs64_decode(text: str) -> bytes:
    """Decode standard base64; missing padding is tolerated.

    Raises ValueError (binascii.Error) on malformed input.
    """
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, validate=True)


def short_u16_encode(value: int) -> bytes:
    """Encode an integer in the compact-u16 format (at most three bytes)."""
    if value < 0:
        raise ValueError("compact-u16 values must not be negative")
    out = bytearray()
    remaining = value
    for _ in range(3):
        byte = remaining & 0x7F
        remaining >>= 7
        if remaining == 0:
            out.append(byte)
            break
        out.append(byte | 0x80)
    return bytes(out)


def short_u16_decode(data: bytes | bytearray, cursor: int = 0) -> tuple[int, int]:
    """Decode a compact-u16 value starting at ``cursor``.

    Returns the value and the cursor just past the bytes that were read.
    """
    value = 0
    for shift in range(3):
        if cursor >= len(data):
            break
        byte = data[cursor]
        value |= (byte & 0x7F) << (7 * shift)
        cursor += 1
        if not byte & 0x80:
            break
    return value, cursor


def key_to_string(key: str | bytes | bytearray | object) -> str:
    """Return the base58 text form of a public key given as text, bytes or a bytes-convertible object."""
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bs58_encode(bytes(key))
    if hasattr(key, "__bytes__"):
        return bs58_encode(bytes(key))
    raise TypeError(f"cannot interpret {type(key).__name__} as a public key")