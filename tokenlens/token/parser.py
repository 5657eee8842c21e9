"""Compact token parsing: split, Base64URL-decode and JSON-parse segments."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Union

from ..claims.evaluator import evaluate_claims
from ..codec import base64url
from ..config import InspectorConfig
from ..logging import get_logger
from ..utils.hashing import token_fingerprint
from ..utils.time import utc_now
from .types import DecodedToken, DecodeError, DecodeErrorKind

logger = get_logger("tokenlens.parser")

DecodeOutcome = Union[DecodedToken, DecodeError]
Clock = Callable[[], datetime]


class _SegmentError(Exception):
    pass


def _decode_segment(segment: str) -> Dict[str, Any]:
    try:
        text = base64url.decode(segment).decode("utf-8")
    except base64url.InvalidEncoding as exc:
        raise _SegmentError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise _SegmentError(f"segment is not valid UTF-8 ({exc.reason})") from exc
    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise _SegmentError(f"invalid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise _SegmentError(f"expected a JSON object, got {type(value).__name__}")
    return value


class TokenParser:
    """Turn compact token text into a :class:`DecodedToken` or a :class:`DecodeError`."""

    def __init__(self, config: Optional[InspectorConfig] = None, *, clock: Optional[Clock] = None) -> None:
        self.config = config or InspectorConfig()
        self._clock = clock or utc_now

    def decode(self, token_text: str) -> DecodeOutcome:
        text = token_text.strip()
        if not text:
            return DecodeError(DecodeErrorKind.MALFORMED_TOKEN, "Please enter a token to decode.")
        if not text.isascii():
            return DecodeError(DecodeErrorKind.MALFORMED_TOKEN, "Invalid token: tokens contain ASCII characters only.")

        parts = text.split(".")
        if len(parts) != 3 or not all(parts):
            logger.debug("token_malformed", segments=len(parts), fingerprint=token_fingerprint(text))
            return DecodeError(
                DecodeErrorKind.MALFORMED_TOKEN,
                "Invalid token format. Expected format: header.payload.signature",
            )
        header_raw, payload_raw, signature_raw = parts

        try:
            header = _decode_segment(header_raw)
        except _SegmentError as exc:
            logger.debug("segment_decode_failed", segment="header", fingerprint=token_fingerprint(text))
            return DecodeError(DecodeErrorKind.HEADER_DECODE_ERROR, f"Error decoding header: {exc}", "header")

        try:
            payload = _decode_segment(payload_raw)
        except _SegmentError as exc:
            logger.debug("segment_decode_failed", segment="payload", fingerprint=token_fingerprint(text))
            return DecodeError(DecodeErrorKind.PAYLOAD_DECODE_ERROR, f"Error decoding payload: {exc}", "payload")

        evaluation = evaluate_claims(
            payload,
            now=self._clock(),
            tz=self.config.tz(),
            fmt=self.config.timestamp_format,
        )
        return DecodedToken(
            header=header,
            payload=evaluation.payload,
            header_raw=header_raw,
            payload_raw=payload_raw,
            signature_raw=signature_raw,
            is_expired=evaluation.is_expired,
        )


def decode_token(token_text: str, *, config: Optional[InspectorConfig] = None) -> DecodeOutcome:
    """Decode ``token_text`` with a default :class:`TokenParser`."""
    return TokenParser(config).decode(token_text)
