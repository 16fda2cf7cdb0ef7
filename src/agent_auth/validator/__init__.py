"""Validator-side functionality for verifying agent tokens."""

from .claims import check_algorithm, validate
from .parser import parse
from .verifier import AgentAuthVerifier

__all__ = ["AgentAuthVerifier", "check_algorithm", "parse", "validate"]
