"""Exception hierarchy for agent-auth.

Every error carries a machine-readable ``kind`` and a short ``detail``.
Callers should dispatch on ``kind``; the subclasses exist so the usual
``except`` clauses keep working.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Machine-readable failure categories."""

    ENCODING = "encoding"
    CONFIGURATION = "configuration"
    FORMAT = "format"
    ALGORITHM = "algorithm"
    SIGNATURE = "signature"
    CLAIMS = "claims"


class AgentAuthError(Exception):
    """Base exception for all agent-auth errors.

    Subclasses fix ``kind``; the base classes take it as an argument.
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        detail: str,
        message: Optional[str] = None,
        *,
        kind: Optional[ErrorKind] = None,
    ):
        if kind is not None:
            self.kind = kind
        if self.kind is None:
            raise TypeError(f"{type(self).__name__} requires a kind")
        super().__init__(message or detail)
        self.detail = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, detail={self.detail!r})"


class EncodingError(AgentAuthError, ValueError):
    """Input is not valid hex or base64url."""

    kind = ErrorKind.ENCODING


class ConfigurationError(AgentAuthError):
    """Verifier setup is invalid (bad key, bad config file)."""

    kind = ErrorKind.CONFIGURATION


# Token errors
class TokenValidationError(AgentAuthError):
    """Base exception for a rejected token."""


class TokenFormatError(TokenValidationError):
    """Token structure or encoding is malformed."""

    kind = ErrorKind.FORMAT


class AlgorithmError(TokenValidationError):
    """Token declares an algorithm other than the pinned one."""

    kind = ErrorKind.ALGORITHM


class SignatureError(TokenValidationError):
    """Signature does not verify against the configured key."""

    kind = ErrorKind.SIGNATURE

    def __init__(self, detail: str = "signature mismatch"):
        super().__init__(detail, "Cryptographic signature verification failed.")


class ClaimsError(TokenValidationError):
    """Token is signed but its claims are rejected."""

    kind = ErrorKind.CLAIMS

    def __init__(self, detail: str):
        message = None
        if detail == "token expired":
            message = "Agent token has expired. Request a new ephemeral token."
        super().__init__(detail, message)
