"""Claims and header policy checks."""

import math
from typing import Any, Mapping, Optional

from ..core.errors import AlgorithmError, ClaimsError
from ..core.models import ValidatedClaims, VerifierConfig


def _numeric_date(value: Any) -> Optional[float]:
    """Return ``value`` as a usable NumericDate, or None."""
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def check_algorithm(header: Mapping[str, Any], config: VerifierConfig) -> None:
    """Require the header ``alg`` to be exactly the pinned algorithm.

    Runs before any signature check so a token can never choose how it is
    verified.

    Raises:
        AlgorithmError: If ``alg`` is missing or differs from the pinned value
    """
    if header.get("alg") != config.required_algorithm:
        raise AlgorithmError("unsupported algorithm")


def _is_audience(aud: Any) -> bool:
    if isinstance(aud, list):
        return all(isinstance(a, str) for a in aud)
    return isinstance(aud, str)


def _audience_matches(aud: Any, expected: str) -> bool:
    if isinstance(aud, str):
        return aud == expected
    if isinstance(aud, list):
        return expected in aud
    return False


def validate(
    payload: Mapping[str, Any], config: VerifierConfig, now: float
) -> ValidatedClaims:
    """Enforce claim semantics on an already signature-checked payload.

    Checks run in a fixed order and the first failure is raised.

    Args:
        payload: Decoded claims set
        config: Verification policy
        now: Current time as a Unix timestamp, read once by the caller

    Returns:
        ValidatedClaims

    Raises:
        ClaimsError: missing subject, missing expiration, token expired,
            audience mismatch, invalid not-before, token not yet valid or
            issuer mismatch
    """
    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        raise ClaimsError("missing subject")

    exp = _numeric_date(payload.get("exp"))
    if exp is None:
        raise ClaimsError("missing expiration")

    skew = config.clock_skew_tolerance
    if now > exp + skew:
        raise ClaimsError("token expired")

    aud = payload.get("aud")
    if config.expected_audience is not None and not _audience_matches(
        aud, config.expected_audience
    ):
        raise ClaimsError("audience mismatch")

    nbf = None
    if "nbf" in payload:
        nbf = _numeric_date(payload["nbf"])
        if nbf is None:
            raise ClaimsError("invalid not-before")
        if now + skew < nbf:
            raise ClaimsError("token not yet valid")

    iss = payload.get("iss")
    if config.expected_issuer is not None and iss != config.expected_issuer:
        raise ClaimsError("issuer mismatch")

    return ValidatedClaims(
        subject=sub,
        expires_at=exp,
        audience=aud if _is_audience(aud) else None,
        issuer=iss if isinstance(iss, str) else None,
        not_before=nbf,
    )
