"""Tests for compact token parsing."""

import pytest

from agent_auth.core.encoding import bytes_to_base64url
from agent_auth.core.errors import ErrorKind, TokenFormatError
from agent_auth.validator import parse
from conftest import encode_segment, make_token

SIGNATURE = bytes_to_base64url(b"\x00" * 64)


def _token(header=None, payload=None, signature=SIGNATURE) -> str:
    header = {"alg": "EdDSA"} if header is None else header
    payload = {"sub": "agent-7", "exp": 1} if payload is None else payload
    return f"{encode_segment(header)}.{encode_segment(payload)}.{signature}"


def test_parse_valid_token(private_key, claims):
    """Header, payload and signature are decoded; signing input is kept as sent."""
    token = make_token(private_key, claims)
    parsed = parse(token)

    header_segment, payload_segment, _ = token.split(".")
    assert parsed.header == {"alg": "EdDSA", "typ": "JWT"}
    assert parsed.payload == claims
    assert parsed.signing_input == f"{header_segment}.{payload_segment}".encode()
    assert len(parsed.signature) == 64


def test_signing_input_is_not_reserialized():
    """Whitespace and key order in the transmitted JSON survive parsing."""
    header_segment = bytes_to_base64url(b'{ "alg" : "EdDSA" }')
    payload_segment = bytes_to_base64url(b'{"exp":1,  "sub":"a"}')
    parsed = parse(f"{header_segment}.{payload_segment}.{SIGNATURE}")

    assert parsed.signing_input == f"{header_segment}.{payload_segment}".encode()


@pytest.mark.parametrize(
    "token,detail",
    [
        ("", "empty token"),
        ("abc", "token must have three segments"),
        ("a.b", "token must have three segments"),
        ("a.b.c.d", "token must have three segments"),
        ("..", "empty token segment"),
    ],
)
def test_parse_rejects_bad_structure(token, detail):
    with pytest.raises(TokenFormatError) as exc_info:
        parse(token)
    assert exc_info.value.detail == detail
    assert exc_info.value.kind == ErrorKind.FORMAT


def test_parse_rejects_empty_segment():
    header, payload, signature = _token().split(".")
    for token in (f".{payload}.{signature}", f"{header}..{signature}", f"{header}.{payload}."):
        with pytest.raises(TokenFormatError, match="empty token segment"):
            parse(token)


def test_parse_rejects_non_string():
    with pytest.raises(TokenFormatError):
        parse(None)


def test_parse_rejects_malformed_header_and_payload():
    """Segments must be base64url JSON objects."""
    _, payload, signature = _token().split(".")
    not_json = bytes_to_base64url(b"not json")
    array = bytes_to_base64url(b'["alg"]')
    nan = bytes_to_base64url(b'{"exp": NaN}')

    for bad in ("a+b", not_json, array, bytes_to_base64url(b"\xff\xfe")):
        with pytest.raises(TokenFormatError, match="malformed header"):
            parse(f"{bad}.{payload}.{signature}")

    header = _token().split(".")[0]
    for bad in (not_json, array, nan):
        with pytest.raises(TokenFormatError, match="malformed payload"):
            parse(f"{header}.{bad}.{signature}")


def test_parse_rejects_bad_signature_segment():
    with pytest.raises(TokenFormatError, match="malformed signature"):
        parse(_token(signature="a/b"))

    with pytest.raises(TokenFormatError, match="signature must be 64 bytes"):
        parse(_token(signature=bytes_to_base64url(b"\x00" * 63)))


def test_parse_rejects_critical_header():
    with pytest.raises(TokenFormatError, match="critical"):
        parse(_token(header={"alg": "EdDSA", "crit": ["exp"]}))


def test_parse_does_not_check_algorithm():
    """Algorithm policy is applied later; the parser only checks structure."""
    parsed = parse(_token(header={"alg": "HS256"}))
    assert parsed.header["alg"] == "HS256"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
