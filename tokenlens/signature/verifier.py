"""Recompute and compare keyed-hash signatures of compact tokens."""

from __future__ import annotations

import hmac
from typing import Any, Optional

from ..codec import base64url
from ..logging import get_logger
from .algorithms import AlgorithmTable, default_algorithms
from .providers import HashlibHmacProvider, KeyedHashProvider
from .types import VerificationResult, VerificationStatus

logger = get_logger("tokenlens.signature")


def signing_input(header_raw: str, payload_raw: str) -> bytes:
    """The exact bytes a compact token signature covers."""
    return f"{header_raw}.{payload_raw}".encode("utf-8", "surrogatepass")


class SignatureVerifier:
    """Verify the signature segment of a token against a caller-supplied secret.

    The secret is only read for the duration of :meth:`verify`; it is never
    stored on the verifier, logged, or placed in a result message.
    """

    def __init__(
        self,
        *,
        algorithms: Optional[AlgorithmTable] = None,
        provider: Optional[KeyedHashProvider] = None,
    ) -> None:
        self.algorithms = algorithms if algorithms is not None else default_algorithms()
        self.provider = provider or HashlibHmacProvider()

    async def verify(
        self,
        header_raw: str,
        payload_raw: str,
        signature_raw: str,
        algorithm: Any,
        secret: str,
    ) -> VerificationResult:
        """Check ``signature_raw`` against the MAC of ``header_raw.payload_raw``.

        ``algorithm`` is the header's ``alg`` value as decoded (``None`` when
        absent). Unknown algorithms are rejected before the secret is looked at.
        """
        strategy = self.algorithms.get(algorithm)
        if strategy is None:
            logger.info("unsupported_algorithm", algorithm=algorithm)
            supported = ", ".join(self.algorithms.supported()) or "none"
            if algorithm is None:
                message = f"The token header has no 'alg' field. Supported algorithms: {supported}."
            else:
                message = f"Only {supported} signatures can be verified. The token uses {algorithm}."
            return VerificationResult(VerificationStatus.UNSUPPORTED_ALGORITHM, message)

        if not secret:
            return VerificationResult(
                VerificationStatus.MISSING_SECRET,
                "Please enter a secret key to verify the signature.",
            )

        try:
            mac = await strategy.sign(self.provider, signing_input(header_raw, payload_raw), secret)
        except Exception as exc:
            logger.warning("crypto_provider_failed", algorithm=algorithm, error_type=type(exc).__name__)
            return VerificationResult(
                VerificationStatus.CRYPTO_PROVIDER_ERROR,
                f"Error verifying signature: {exc}",
            )

        expected = base64url.encode(mac)
        if hmac.compare_digest(expected.encode("utf-8"), signature_raw.encode("utf-8", "surrogatepass")):
            logger.debug("signature_checked", algorithm=algorithm, status=VerificationStatus.VALID.value)
            return VerificationResult(VerificationStatus.VALID, "Signature is valid!")

        logger.debug("signature_checked", algorithm=algorithm, status=VerificationStatus.INVALID.value)
        return VerificationResult(
            VerificationStatus.INVALID,
            "Signature verification failed. The signature does not match.",
        )
