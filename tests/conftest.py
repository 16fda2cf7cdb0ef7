"""Shared fixtures: Ed25519 keypairs and a minimal token signer for tests."""

import json
import time

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from agent_auth.core.encoding import bytes_to_base64url


def public_key_hex(private_key: ed25519.Ed25519PrivateKey) -> str:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw
    ).hex()


def encode_segment(data: dict) -> str:
    return bytes_to_base64url(json.dumps(data, separators=(",", ":")).encode("utf-8"))


def make_token(
    private_key: ed25519.Ed25519PrivateKey,
    payload: dict,
    header: dict | None = None,
) -> str:
    """Sign ``payload`` as a compact EdDSA JWT."""
    header = header if header is not None else {"alg": "EdDSA", "typ": "JWT"}
    signing_input = f"{encode_segment(header)}.{encode_segment(payload)}"
    signature = private_key.sign(signing_input.encode("ascii"))
    return f"{signing_input}.{bytes_to_base64url(signature)}"


@pytest.fixture
def private_key() -> ed25519.Ed25519PrivateKey:
    # Fixed seed so failures are reproducible
    return ed25519.Ed25519PrivateKey.from_private_bytes(bytes([1]) * 32)


@pytest.fixture
def other_private_key() -> ed25519.Ed25519PrivateKey:
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def now() -> float:
    return float(int(time.time()))


@pytest.fixture
def claims(now) -> dict:
    return {"sub": "agent-7", "exp": int(now) + 60, "aud": "agent-infrastructure"}
