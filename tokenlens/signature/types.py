"""Signature verification datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VerificationStatus(str, Enum):
    """Outcome of a signature verification call."""

    VALID = "VALID"
    INVALID = "INVALID"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"
    MISSING_SECRET = "MISSING_SECRET"
    NOT_DECODED = "NOT_DECODED"
    CRYPTO_PROVIDER_ERROR = "CRYPTO_PROVIDER_ERROR"


_PROCEDURAL = frozenset(
    {
        VerificationStatus.MISSING_SECRET,
        VerificationStatus.NOT_DECODED,
        VerificationStatus.CRYPTO_PROVIDER_ERROR,
    }
)


@dataclass(frozen=True)
class VerificationResult:
    status: VerificationStatus
    message: str

    @property
    def valid(self) -> bool:
        return self.status is VerificationStatus.VALID

    @property
    def is_error(self) -> bool:
        """True for procedural failures, as opposed to a signature verdict."""
        return self.status in _PROCEDURAL

    @classmethod
    def not_decoded(cls) -> "VerificationResult":
        return cls(VerificationStatus.NOT_DECODED, "Please decode a token first.")
