"""Compact JWS structural parsing."""

import json
from typing import Any

from ..core.encoding import base64url_to_bytes
from ..core.errors import EncodingError, TokenFormatError
from ..core.models import ParsedToken

ED25519_SIGNATURE_LENGTH = 64


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _decode_json_segment(segment: str, name: str) -> dict[str, Any]:
    try:
        raw = base64url_to_bytes(segment)
        data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (EncodingError, UnicodeDecodeError, ValueError, RecursionError) as e:
        raise TokenFormatError(f"malformed {name}") from e

    # json only produces string keys, so an object check is enough
    if not isinstance(data, dict):
        raise TokenFormatError(f"malformed {name}")
    return data


def parse(raw: str) -> ParsedToken:
    """Split a compact-serialized token and decode its segments.

    No cryptography runs here. The signing input is kept as the exact
    transmitted ``header.payload`` bytes so verification never depends on
    re-encoding.

    Args:
        raw: Token string ``header.payload.signature``

    Returns:
        ParsedToken

    Raises:
        TokenFormatError: If the structure or any segment encoding is invalid
    """
    if not isinstance(raw, str) or not raw:
        raise TokenFormatError("empty token")

    segments = raw.split(".")
    if len(segments) != 3:
        raise TokenFormatError("token must have three segments")

    header_segment, payload_segment, signature_segment = segments
    if not header_segment or not payload_segment or not signature_segment:
        raise TokenFormatError("empty token segment")

    header = _decode_json_segment(header_segment, "header")
    if "crit" in header:
        raise TokenFormatError("unsupported critical header parameters")

    payload = _decode_json_segment(payload_segment, "payload")

    try:
        signature = base64url_to_bytes(signature_segment)
    except EncodingError as e:
        raise TokenFormatError("malformed signature") from e
    if len(signature) != ED25519_SIGNATURE_LENGTH:
        raise TokenFormatError(f"signature must be {ED25519_SIGNATURE_LENGTH} bytes")

    # Segments already passed the base64url alphabet check
    signing_input = f"{header_segment}.{payload_segment}".encode("ascii")

    return ParsedToken(
        header=header,
        payload=payload,
        signing_input=signing_input,
        signature=signature,
    )
