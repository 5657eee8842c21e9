"""Two-phase decode then verify workflow over a single current token."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import InspectorConfig
from .exporters.base import Exporter
from .logging import get_logger
from .record import InspectionRecord
from .signature.types import VerificationResult
from .signature.verifier import SignatureVerifier
from .token.parser import Clock, DecodeOutcome, TokenParser
from .token.types import DecodedToken, DecodeError
from .utils.hashing import token_fingerprint

logger = get_logger("tokenlens.session")


class SessionState(str, Enum):
    IDLE = "IDLE"
    DECODED = "DECODED"
    VERIFIED = "VERIFIED"


@dataclass(frozen=True)
class InspectionReport:
    """Merged view of the latest decode and verification outcomes."""

    token: Optional[DecodedToken] = None
    decode_error: Optional[DecodeError] = None
    verification: Optional[VerificationResult] = None

    @property
    def decoded(self) -> bool:
        return self.token is not None

    @property
    def is_expired(self) -> bool:
        return self.token is not None and self.token.is_expired

    @property
    def signature_valid(self) -> bool:
        return self.verification is not None and self.verification.valid

    def to_dict(self) -> dict:
        return {
            "token": self.token.to_dict() if self.token else None,
            "decode_error": (
                {
                    "kind": self.decode_error.kind.value,
                    "segment": self.decode_error.segment,
                    "message": self.decode_error.message,
                }
                if self.decode_error
                else None
            ),
            "verification": (
                {"status": self.verification.status.value, "message": self.verification.message}
                if self.verification
                else None
            ),
        }


class InspectionSession:
    """State machine ``IDLE -> DECODED -> VERIFIED`` around one current token.

    Each successful :meth:`decode` replaces the token and drops any earlier
    verification result. :meth:`verify` needs a decoded token and awaits the
    keyed-hash provider exactly once.
    """

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        *,
        verifier: Optional[SignatureVerifier] = None,
        exporter: Optional[Exporter] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or InspectorConfig()
        self.parser = TokenParser(self.config, clock=clock)
        self.verifier = verifier or SignatureVerifier()
        self.exporter = exporter
        self.state = SessionState.IDLE
        self.token: Optional[DecodedToken] = None
        self.verification: Optional[VerificationResult] = None
        self.last_error: Optional[DecodeError] = None
        self._generation = 0

    def decode(self, token_text: str) -> DecodeOutcome:
        outcome = self.parser.decode(token_text)
        self._generation += 1
        self.verification = None
        if isinstance(outcome, DecodeError):
            self.token = None
            self.last_error = outcome
            self.state = SessionState.IDLE
            logger.info("decode_failed", kind=outcome.kind.value, segment=outcome.segment)
            return outcome

        self.token = outcome
        self.last_error = None
        self.state = SessionState.DECODED
        logger.debug(
            "token_decoded",
            fingerprint=token_fingerprint(outcome.text),
            algorithm=outcome.algorithm,
            is_expired=outcome.is_expired,
        )
        return outcome

    async def verify(self, secret: str) -> VerificationResult:
        token = self.token
        if token is None:
            return VerificationResult.not_decoded()

        generation = self._generation
        result = await self.verifier.verify(
            token.header_raw,
            token.payload_raw,
            token.signature_raw,
            token.header.get("alg"),
            secret,
        )
        if generation != self._generation:
            logger.info("stale_verification_discarded", status=result.status.value)
            return result

        self.verification = result
        self.state = SessionState.VERIFIED
        if self.exporter is not None:
            await self.exporter.export(
                InspectionRecord(
                    fingerprint=token_fingerprint(token.text),
                    algorithm=token.algorithm,
                    status=result.status.value,
                    is_expired=token.is_expired,
                )
            )
        return result

    def report(self) -> InspectionReport:
        return InspectionReport(token=self.token, decode_error=self.last_error, verification=self.verification)

    async def inspect(self, token_text: str, secret: str) -> InspectionReport:
        """Decode ``token_text`` and, if that succeeds, verify it with ``secret``."""
        outcome = self.decode(token_text)
        if isinstance(outcome, DecodedToken):
            await self.verify(secret)
        return self.report()
