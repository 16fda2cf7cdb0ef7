"""Core functionality for agent-auth."""

from .crypto import verify
from .encoding import (
    base64url_to_bytes,
    bytes_to_base64url,
    bytes_to_hex,
    hex_to_bytes,
)
from .errors import (
    AgentAuthError,
    AlgorithmError,
    ClaimsError,
    ConfigurationError,
    EncodingError,
    ErrorKind,
    SignatureError,
    TokenFormatError,
    TokenValidationError,
)
from .keys import PublicKey
from .models import ParsedToken, ValidatedClaims, VerificationResult, VerifierConfig

__all__ = [
    # Crypto
    "verify",
    # Encoding
    "base64url_to_bytes",
    "bytes_to_base64url",
    "bytes_to_hex",
    "hex_to_bytes",
    # Errors
    "AgentAuthError",
    "AlgorithmError",
    "ClaimsError",
    "ConfigurationError",
    "EncodingError",
    "ErrorKind",
    "SignatureError",
    "TokenFormatError",
    "TokenValidationError",
    # Keys
    "PublicKey",
    # Models
    "ParsedToken",
    "ValidatedClaims",
    "VerificationResult",
    "VerifierConfig",
]
