"""Hex and base64url conversions for keys, signatures and token segments."""

import base64
import binascii
import re

from .errors import EncodingError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def hex_to_bytes(value: str, expected_length: int = 32) -> bytes:
    """Decode a fixed-length hex string.

    Args:
        value: Hex string, optionally prefixed with ``0x``, any case
        expected_length: Required number of decoded bytes

    Returns:
        Decoded bytes

    Raises:
        EncodingError: If the string is not exactly ``2 * expected_length``
            hex characters
    """
    if not isinstance(value, str):
        raise EncodingError("hex value must be a string")

    if value[:2] in ("0x", "0X"):
        value = value[2:]

    if len(value) != expected_length * 2:
        raise EncodingError(
            f"expected {expected_length * 2} hex characters, got {len(value)}"
        )
    if not _HEX_RE.fullmatch(value):
        raise EncodingError("invalid hex character")

    return bytes.fromhex(value)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return data.hex()


def bytes_to_base64url(data: bytes) -> str:
    """Encode bytes as unpadded base64url (RFC 4648 section 5)."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_to_bytes(value: str) -> bytes:
    """Decode an unpadded base64url string.

    Padding characters, characters outside the URL-safe alphabet and
    non-canonical encodings (stray trailing bits) are rejected.

    Raises:
        EncodingError: If the value is not canonical unpadded base64url
    """
    if not isinstance(value, str):
        raise EncodingError("base64url value must be a string")
    if not _B64URL_RE.fullmatch(value):
        raise EncodingError("invalid base64url character")
    if len(value) % 4 == 1:
        raise EncodingError("invalid base64url length")

    padded = value + "=" * (-len(value) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise EncodingError(f"invalid base64url: {e}") from e

    # Two different strings must never decode to the same bytes
    if bytes_to_base64url(data) != value:
        raise EncodingError("non-canonical base64url encoding")

    return data
