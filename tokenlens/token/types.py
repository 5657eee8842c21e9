"""Decoded token datatypes."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class DecodeErrorKind(str, Enum):
    """Why a compact token could not be decoded."""

    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    HEADER_DECODE_ERROR = "HEADER_DECODE_ERROR"
    PAYLOAD_DECODE_ERROR = "PAYLOAD_DECODE_ERROR"


@dataclass(frozen=True)
class DecodeError:
    """Tagged decode failure. ``segment`` is ``None`` for structural errors."""

    kind: DecodeErrorKind
    message: str
    segment: Optional[str] = None


@dataclass(frozen=True)
class DecodedToken:
    """A successfully parsed compact token.

    ``payload`` carries the original claims plus the display-only
    ``*_formatted`` fields added by the claim evaluator.
    """

    header: Mapping[str, Any]
    payload: Mapping[str, Any]
    header_raw: str
    payload_raw: str
    signature_raw: str
    is_expired: bool = False

    def __post_init__(self) -> None:
        # Read-only views over private copies.
        object.__setattr__(self, "header", MappingProxyType(copy.deepcopy(dict(self.header))))
        object.__setattr__(self, "payload", MappingProxyType(copy.deepcopy(dict(self.payload))))

    @property
    def algorithm(self) -> Optional[str]:
        alg = self.header.get("alg")
        return alg if isinstance(alg, str) else None

    @property
    def signature(self) -> str:
        return self.signature_raw

    @property
    def segments(self) -> tuple[str, str, str]:
        return (self.header_raw, self.payload_raw, self.signature_raw)

    @property
    def text(self) -> str:
        """The compact serialization this token was parsed from."""
        return ".".join(self.segments)

    def to_dict(self) -> dict:
        """Serialize for display."""
        return {
            "header": copy.deepcopy(dict(self.header)),
            "payload": copy.deepcopy(dict(self.payload)),
            "signature": self.signature_raw,
            "is_expired": self.is_expired,
        }
