"""Symmetric signature verification."""

from .algorithms import AlgorithmTable, HmacStrategy, SignatureStrategy, default_algorithms
from .providers import HashlibHmacProvider, KeyedHashProvider
from .types import VerificationResult, VerificationStatus
from .verifier import SignatureVerifier, signing_input

__all__ = [
    "AlgorithmTable",
    "HmacStrategy",
    "SignatureStrategy",
    "default_algorithms",
    "HashlibHmacProvider",
    "KeyedHashProvider",
    "VerificationResult",
    "VerificationStatus",
    "SignatureVerifier",
    "signing_input",
]
