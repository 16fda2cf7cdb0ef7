"""Ed25519 signature verification."""

from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from .keys import PublicKey


def verify(
    signing_input: bytes,
    signature: bytes,
    public_key: Union[PublicKey, ed25519.Ed25519PublicKey],
) -> bool:
    """Verify an Ed25519 signature (RFC 8032).

    Length checks happen upstream: ``public_key`` is always 32 bytes and
    ``signature`` is expected to be 64 bytes.

    Args:
        signing_input: Exact bytes that were signed
        signature: Signature to verify
        public_key: Signer's public key, raw or already loaded

    Returns:
        True if signature is valid, False otherwise
    """
    if isinstance(public_key, PublicKey):
        public_key = public_key.to_ed25519()
    try:
        public_key.verify(signature, signing_input)
    except InvalidSignature:
        return False
    return True
