#!/usr/bin/env python3
"""
Basic example demonstrating agent token verification:
1. Auth server signs a short-lived token for an agent
2. Service builds a verifier from the auth server's public key
3. Service verifies the token and reads the agent identity
"""

import json
import time

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from agent_auth import AgentAuthVerifier, TokenValidationError, VerifierConfig
from agent_auth.core.encoding import bytes_to_base64url


def sign_token(private_key: ed25519.Ed25519PrivateKey, claims: dict) -> str:
    """Stand-in for the auth server, which issues tokens in production."""
    header = bytes_to_base64url(json.dumps({"alg": "EdDSA", "typ": "JWT"}).encode())
    payload = bytes_to_base64url(json.dumps(claims).encode())
    signature = private_key.sign(f"{header}.{payload}".encode())
    return f"{header}.{payload}.{bytes_to_base64url(signature)}"


def main():
    print("=== Agent Auth - Basic Example ===\n")

    # ============================================================================
    # STEP 1: Auth server keypair
    # ============================================================================
    print("1. Auth server generating keypair...")
    server_key = ed25519.Ed25519PrivateKey.generate()
    public_key_hex = server_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw, format=serialization.PublicFormat.Raw
    ).hex()
    print(f"   ✓ Public key: {public_key_hex[:16]}...\n")

    # ============================================================================
    # STEP 2: Auth server issues an ephemeral token
    # ============================================================================
    print("2. Issuing token for agent-7...")
    token = sign_token(
        server_key,
        {"sub": "agent-7", "exp": int(time.time()) + 60, "aud": "agent-infrastructure"},
    )
    print(f"   ✓ Token: {token[:32]}...\n")

    # ============================================================================
    # STEP 3: Service verifies the token
    # ============================================================================
    print("3. Verifying token...")
    verifier = AgentAuthVerifier(
        public_key_hex,
        VerifierConfig(expected_audience="agent-infrastructure", clock_skew_tolerance=5),
    )
    result = verifier.verify(token)
    print(f"   ✓ Agent: {result.subject}")
    print(f"   ✓ Expires: {result.expires_at.isoformat()}\n")

    # ============================================================================
    # STEP 4: A tampered token is rejected
    # ============================================================================
    print("4. Verifying a tampered token...")
    header, _, signature = token.split(".")
    forged_payload = bytes_to_base64url(
        json.dumps({"sub": "admin", "exp": int(time.time()) + 3600}).encode()
    )
    try:
        verifier.verify(f"{header}.{forged_payload}.{signature}")
    except TokenValidationError as e:
        print(f"   ✗ Rejected ({e.kind.value}): {e}\n")


if __name__ == "__main__":
    main()
