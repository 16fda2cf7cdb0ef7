"""Tests for Ed25519 signature verification."""

import pytest

from agent_auth.core.crypto import verify
from agent_auth.core.keys import PublicKey
from conftest import public_key_hex


def test_verify_valid_signature(private_key):
    key = PublicKey.from_hex(public_key_hex(private_key))
    message = b"header.payload"

    assert verify(message, private_key.sign(message), key) is True


def test_verify_returns_false_on_mismatch(private_key, other_private_key):
    """Wrong key, wrong message or a flipped bit all return False without raising."""
    key = PublicKey.from_hex(public_key_hex(private_key))
    message = b"header.payload"
    signature = private_key.sign(message)

    other_key = PublicKey.from_hex(public_key_hex(other_private_key))
    assert verify(message, signature, other_key) is False
    assert verify(b"header.payloae", signature, key) is False

    tampered = bytearray(signature)
    tampered[10] ^= 0x01
    assert verify(message, bytes(tampered), key) is False


def test_verify_accepts_loaded_key(private_key, other_private_key):
    """An already-loaded cryptography key can be passed directly."""
    message = b"header.payload"
    signature = private_key.sign(message)

    assert verify(message, signature, private_key.public_key()) is True
    assert verify(message, signature, other_private_key.public_key()) is False


def test_verify_rfc8032_test_vector():
    """RFC 8032 section 7.1, TEST 1 (empty message)."""
    key = PublicKey.from_hex(
        "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
    )
    signature = bytes.fromhex(
        "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
        "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
    )
    assert verify(b"", signature, key) is True
    assert verify(b"x", signature, key) is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
