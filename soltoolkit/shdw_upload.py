"""Signed multipart uploads to Shadow Drive storage accounts."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .codec import bs58_encode, key_to_string

__all__ = [
    "BOUNDARY",
    "UploadForm",
    "filename_hash",
    "upload_message",
    "build_upload_form",
]

BOUNDARY = "--SOLTOOLKITFORMBOUNDARY"
_CRLF = b"\r\n"

_MESSAGE_TEMPLATE = (
    "Shadow Drive Signed Message:\n"
    "Storage Account: {0}\n"
    "Upload files with hash: {1}"
)


@dataclass(frozen=True)
class UploadForm:
    """A ready-to-send multipart upload request."""

    filename: str
    headers: tuple[str, ...]
    body: bytes


def _ascii(text: str) -> bytes:
    return text.encode("ascii", errors="replace")


def _base_name(filename: str) -> str:
    parts = [part for part in filename.split("/") if part]
    return parts[-1] if len(parts) > 1 else filename


def filename_hash(filename: str) -> str:
    """Return the lowercase hex SHA-256 of the file name's ASCII bytes."""
    return hashlib.sha256(_ascii(filename)).hexdigest()


def upload_message(storage_account: object, file_hash: str) -> str:
    """Return the text the storage owner signs to authorise an upload."""
    return _MESSAGE_TEMPLATE.format(key_to_string(storage_account), file_hash)


def _line(content: str | bytes) -> bytes:
    if isinstance(content, str):
        content = content.encode("utf-8")
    return content + _CRLF


def _field(name: str, value: str) -> list[bytes]:
    return [
        _line(BOUNDARY),
        _line(f'Content-Disposition: form-data; name="{name}"'),
        _line(""),
        _line(value),
    ]


def build_upload_form(
    filename: str,
    file_content: bytes | bytearray,
    signature: bytes | bytearray,
    signer: object,
    storage_account: object,
) -> UploadForm:
    """Build the multipart body and headers for uploading one file.

    Directory components are stripped from ``filename``; ``signature`` is the
    signer's signature over :func:`upload_message` for the file.
    Raises ValueError if the file content is empty.
    """
    content = bytes(file_content)
    if not content:
        raise ValueError("Failed to read file contents.")

    name = _base_name(filename)
    parts = [
        _line(BOUNDARY),
        _line(f'Content-Disposition: form-data; name="file"; filename="{name}"'),
        _line("Content-Type: application/octet-stream"),
        _line(""),
        _line(content),
    ]
    parts += _field("message", bs58_encode(bytes(signature)))
    parts += _field("signer", key_to_string(signer))
    parts += _field("storage_account", key_to_string(storage_account))
    parts += _field("fileNames", name)
    parts.append(_line(BOUNDARY + "--"))
    body = b"".join(parts)

    headers = (
        "Content-Type: multipart/form-data;boundary=" + BOUNDARY[2:],
        "accept: */*",
        "accept-encoding: gzip, br, deflate",
        f"content-length: {len(body)}",
    )
    return UploadForm(filename=name, headers=headers, body=body)