"""Ed25519 public key model."""

from cryptography.hazmat.primitives.asymmetric import ed25519
from pydantic import BaseModel, Field, field_validator

from .encoding import base64url_to_bytes, bytes_to_base64url, bytes_to_hex, hex_to_bytes
from .errors import ConfigurationError, EncodingError

ED25519_KEY_LENGTH = 32


class PublicKey(BaseModel):
    """An Ed25519 public key held as 32 raw bytes."""

    raw: bytes = Field(description="Raw Ed25519 public key bytes")

    model_config = {"frozen": True}

    @field_validator("raw")
    @classmethod
    def check_length(cls, v: bytes) -> bytes:
        """Require exactly 32 bytes."""
        if len(v) != ED25519_KEY_LENGTH:
            raise ValueError(
                f"Ed25519 public key must be {ED25519_KEY_LENGTH} bytes, got {len(v)}"
            )
        return v

    @classmethod
    def from_bytes(cls, raw: bytes) -> "PublicKey":
        """Build a key from raw bytes.

        Raises:
            ConfigurationError: If ``raw`` is not 32 bytes
        """
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != ED25519_KEY_LENGTH:
            raise ConfigurationError(
                "Invalid public key format. Expected 32 raw bytes."
            )
        return cls(raw=bytes(raw))

    @classmethod
    def from_hex(cls, value: str) -> "PublicKey":
        """Build a key from a 64-character hex string (``0x`` prefix allowed).

        Raises:
            ConfigurationError: If the string is not 64 hex characters
        """
        try:
            raw = hex_to_bytes(value, expected_length=ED25519_KEY_LENGTH)
        except EncodingError as e:
            raise ConfigurationError(
                f"Invalid public key format. Expected 64-character hex string ({e.detail})."
            ) from e
        return cls(raw=raw)

    @classmethod
    def from_base64url(cls, value: str) -> "PublicKey":
        """Build a key from unpadded base64url, as found in a JWK ``x`` member.

        Raises:
            ConfigurationError: If the value does not decode to 32 bytes
        """
        try:
            raw = base64url_to_bytes(value)
        except EncodingError as e:
            raise ConfigurationError(
                f"Invalid public key format. Expected base64url ({e.detail})."
            ) from e
        return cls.from_bytes(raw)

    def to_hex(self) -> str:
        return bytes_to_hex(self.raw)

    def to_base64url(self) -> str:
        return bytes_to_base64url(self.raw)

    def to_ed25519(self) -> ed25519.Ed25519PublicKey:
        """Load the key into a ``cryptography`` key object.

        Raises:
            ConfigurationError: If the bytes are not a usable Ed25519 key
        """
        try:
            return ed25519.Ed25519PublicKey.from_public_bytes(self.raw)
        except ValueError as e:
            raise ConfigurationError("Invalid Ed25519 public key.") from e

    def fingerprint(self) -> str:
        """Short, non-secret identifier for log lines."""
        return self.to_hex()[:8]

    def __repr__(self) -> str:
        return f"PublicKey({self.fingerprint()}...)"

    __str__ = __repr__
