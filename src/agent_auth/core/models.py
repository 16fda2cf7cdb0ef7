"""Core data models for agent-auth."""

from datetime import datetime, timezone
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

EDDSA = "EdDSA"


class VerifierConfig(BaseModel):
    """Verification policy, fixed when a verifier is built."""

    expected_audience: Optional[str] = Field(
        default=None, description="Required `aud` value (no check if unset)"
    )
    expected_issuer: Optional[str] = Field(
        default=None, description="Required `iss` value (no check if unset)"
    )
    clock_skew_tolerance: int = Field(
        default=0, ge=0, description="Allowed clock drift in seconds"
    )
    required_algorithm: Literal["EdDSA"] = Field(
        default=EDDSA, description="Pinned JWS algorithm"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class ParsedToken(BaseModel):
    """A structurally valid token, not yet verified."""

    header: dict[str, Any] = Field(description="Decoded JOSE header")
    payload: dict[str, Any] = Field(description="Decoded claims set")
    signing_input: bytes = Field(
        description="header and payload segments exactly as transmitted"
    )
    signature: bytes = Field(description="Raw Ed25519 signature (64 bytes)")

    model_config = {"frozen": True}

    def __repr__(self) -> str:
        return f"ParsedToken(alg={self.header.get('alg')!r}, sub={self.payload.get('sub')!r})"


class ValidatedClaims(BaseModel):
    """Claims that passed policy checks."""

    subject: str
    expires_at: float
    audience: Optional[Union[str, list[str]]] = None
    issuer: Optional[str] = None
    not_before: Optional[float] = None

    model_config = {"frozen": True}


class VerificationResult(BaseModel):
    """Result of verifying an agent token."""

    valid: bool = Field(description="Whether verification succeeded")
    subject: Optional[str] = Field(default=None, description="Agent identifier (`sub`)")
    expires_at: Optional[datetime] = Field(
        default=None, description="Token expiry (`exp`) in UTC"
    )
    raw_payload: dict[str, Any] = Field(
        default_factory=dict, description="Full verified claims set"
    )

    model_config = {"frozen": True}

    @property
    def agent_id(self) -> Optional[str]:
        return self.subject

    def __bool__(self) -> bool:
        """Allow using VerificationResult in boolean context."""
        return self.valid


def timestamp_to_datetime(value: float) -> datetime:
    """Convert a NumericDate claim to an aware UTC datetime.

    Values outside the datetime range clamp to ``datetime.max`` or
    ``datetime.min``.
    """
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        bound = datetime.max if value > 0 else datetime.min
        return bound.replace(tzinfo=timezone.utc)
