"""Compact token decoding and issuance."""

from .issuer import TokenIssuer
from .parser import DecodeOutcome, TokenParser, decode_token
from .types import DecodedToken, DecodeError, DecodeErrorKind

__all__ = [
    "TokenIssuer",
    "TokenParser",
    "DecodeOutcome",
    "decode_token",
    "DecodedToken",
    "DecodeError",
    "DecodeErrorKind",
]
