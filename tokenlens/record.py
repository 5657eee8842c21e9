"""Audit record emitted for each completed signature verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from .utils.time import utc_now


def _new_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class InspectionRecord:
    """What was verified and how it turned out.

    Holds a fingerprint of the token rather than the token itself; neither
    the secret nor any claim values are recorded.
    """

    fingerprint: str
    algorithm: Optional[str]
    status: str
    is_expired: bool
    record_id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        """Serialize the record for exporters."""
        return {
            "record_id": self.record_id,
            "fingerprint": self.fingerprint,
            "algorithm": self.algorithm,
            "status": self.status,
            "is_expired": self.is_expired,
            "created_at": self.created_at,
        }
