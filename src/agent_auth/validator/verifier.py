"""Token verifier for authenticating agents."""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..core.crypto import verify as verify_signature
from ..core.errors import ConfigurationError, SignatureError, TokenValidationError
from ..core.keys import PublicKey
from ..core.models import VerificationResult, VerifierConfig, timestamp_to_datetime
from .claims import check_algorithm, validate
from .parser import parse

logger = logging.getLogger(__name__)

ED25519_KEY_PREFIX = "ed25519:"


def _to_timestamp(now: Union[datetime, float, None]) -> float:
    if now is None:
        return time.time()
    if isinstance(now, datetime):
        # Naive datetimes are taken as UTC
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now.timestamp()
    return float(now)


class AgentAuthVerifier:
    """Verifies EdDSA-signed agent tokens against a single public key.

    Instances are immutable once built and hold no per-call state, so one
    verifier can be shared between threads.
    """

    def __init__(
        self,
        public_key_hex: Union[str, PublicKey],
        config: Optional[VerifierConfig] = None,
    ):
        """Initialize verifier.

        Args:
            public_key_hex: Ed25519 public key as 64 hex characters (``0x``
                prefix allowed), or a PublicKey
            config: Verification policy (default: no audience check, zero skew)

        Raises:
            ConfigurationError: If the key is not a valid Ed25519 public key
        """
        if isinstance(public_key_hex, PublicKey):
            public_key = public_key_hex
        else:
            public_key = PublicKey.from_hex(public_key_hex)

        # Loaded once; fails at construction rather than on the first verify call
        self._ed25519_key = public_key.to_ed25519()
        self._public_key = public_key
        self._config = config or VerifierConfig()

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    @property
    def config(self) -> VerifierConfig:
        return self._config

    def verify(
        self, token: str, now: Union[datetime, float, None] = None
    ) -> VerificationResult:
        """Verify an agent token.

        Steps run in a fixed order: structure, algorithm pinning, signature,
        then claims. Claims are never read from a token whose signature has
        not verified.

        Args:
            token: Compact-serialized JWT presented by the agent
            now: Current time (default: time.time()), read once; naive
                datetimes are UTC

        Returns:
            VerificationResult with ``valid=True``

        Raises:
            TokenFormatError: If the token is malformed
            AlgorithmError: If the header does not declare EdDSA
            SignatureError: If the signature does not verify
            ClaimsError: If the claims are rejected
        """
        timestamp = _to_timestamp(now)

        try:
            parsed = parse(token)
            check_algorithm(parsed.header, self._config)
            if not verify_signature(
                parsed.signing_input, parsed.signature, self._ed25519_key
            ):
                raise SignatureError()
            claims = validate(parsed.payload, self._config, timestamp)
        except TokenValidationError as e:
            logger.info(
                "Rejected agent token (key %s): %s: %s",
                self._public_key.fingerprint(),
                e.kind.value,
                e.detail,
            )
            raise

        logger.debug("Verified agent token for subject %s", claims.subject)

        return VerificationResult(
            valid=True,
            subject=claims.subject,
            expires_at=timestamp_to_datetime(claims.expires_at),
            raw_payload=parsed.payload,
        )

    async def verify_async(
        self, token: str, now: Union[datetime, float, None] = None
    ) -> VerificationResult:
        """Async entry point; verification itself never suspends."""
        return self.verify(token, now)

    def is_valid(self, token: str, now: Union[datetime, float, None] = None) -> bool:
        """Check if a token verifies.

        Args:
            token: Token to check
            now: Current time (default: time.time())

        Returns:
            True if the token is valid, False if it is rejected
        """
        try:
            self.verify(token, now)
            return True
        except TokenValidationError:
            return False

    @classmethod
    def from_config(cls, config_path: Union[str, Path]) -> "AgentAuthVerifier":
        """Load a verifier from a YAML configuration file.

        The file holds ``public_key`` (hex, or ``ed25519:<base64url>``) and
        any VerifierConfig fields.

        Args:
            config_path: Path to YAML config file

        Returns:
            AgentAuthVerifier instance

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                data: Any = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load verifier config: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Verifier config must be a mapping")

        data = dict(data)
        public_key_str = data.pop("public_key", None)
        if not isinstance(public_key_str, str):
            raise ConfigurationError("Verifier config is missing public_key")

        if public_key_str.startswith(ED25519_KEY_PREFIX):
            public_key = PublicKey.from_base64url(public_key_str[len(ED25519_KEY_PREFIX):])
        else:
            public_key = PublicKey.from_hex(public_key_str)

        try:
            config = VerifierConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid verifier config: {e}") from e

        return cls(public_key, config)

    def __repr__(self) -> str:
        return f"AgentAuthVerifier(key={self._public_key.fingerprint()}, config={self._config!r})"
