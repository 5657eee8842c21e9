"""Derive display and expiration facts from payload claims."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, Mapping, Optional

from ..utils.time import epoch_millis, utc_now

TIMESTAMP_CLAIMS = ("exp", "iat", "nbf")
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"
INVALID_TIMESTAMP = "Invalid Date"


@dataclass(frozen=True)
class ClaimEvaluation:
    """Annotated payload plus the expiration flag."""

    payload: Dict[str, Any]
    is_expired: bool


def _numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_timestamp(
    seconds: float,
    *,
    tz: Optional[tzinfo] = None,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Render seconds since epoch; ``tz=None`` renders in the host's local zone."""
    try:
        moment = datetime.fromtimestamp(seconds, tz) if tz is not None else datetime.fromtimestamp(seconds).astimezone()
    except (OverflowError, OSError, ValueError):
        return INVALID_TIMESTAMP
    return moment.strftime(fmt).strip()


def is_expired(payload: Mapping[str, Any], *, now: Optional[datetime] = None) -> bool:
    """True when ``exp`` is present and the current time is past it.

    ``nbf`` is deliberately not consulted.
    """
    exp = payload.get("exp")
    if not _numeric(exp):
        return False
    current = now or utc_now()
    return epoch_millis(current) > exp * 1000


def evaluate_claims(
    payload: Mapping[str, Any],
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> ClaimEvaluation:
    """Return a copy of ``payload`` with ``<claim>_formatted`` fields and the expiration flag."""
    annotated = dict(payload)
    for claim in TIMESTAMP_CLAIMS:
        value = payload.get(claim)
        if _numeric(value):
            annotated[f"{claim}_formatted"] = format_timestamp(value, tz=tz, fmt=fmt)
    return ClaimEvaluation(payload=annotated, is_expired=is_expired(payload, now=now))
