"""tokenlens package.

Decode compact signed tokens, annotate their timestamp claims and verify
HS256 signatures against a caller-supplied secret.
"""

from .config import InspectorConfig
from .session import InspectionReport, InspectionSession, SessionState
from .signature import SignatureVerifier, VerificationResult, VerificationStatus
from .token import DecodedToken, DecodeError, DecodeErrorKind, TokenIssuer, TokenParser, decode_token

__all__ = [
    "InspectorConfig",
    "InspectionReport",
    "InspectionSession",
    "SessionState",
    "SignatureVerifier",
    "VerificationResult",
    "VerificationStatus",
    "DecodedToken",
    "DecodeError",
    "DecodeErrorKind",
    "TokenIssuer",
    "TokenParser",
    "decode_token",
]
