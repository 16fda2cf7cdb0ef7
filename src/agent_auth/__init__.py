"""Agent Auth - Ed25519 token verification for machine-to-machine agents."""

from .core import (
    AgentAuthError,
    AlgorithmError,
    ClaimsError,
    ConfigurationError,
    EncodingError,
    ErrorKind,
    PublicKey,
    SignatureError,
    TokenFormatError,
    TokenValidationError,
    VerificationResult,
    VerifierConfig,
)
from .validator import AgentAuthVerifier

__version__ = "0.1.0"

__all__ = [
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
    # Models
    "PublicKey",
    "VerificationResult",
    "VerifierConfig",
    # Validator
    "AgentAuthVerifier",
]
