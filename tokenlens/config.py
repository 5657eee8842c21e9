"""Runtime configuration for token inspection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Optional

_TIMEZONES = ("local", "utc")


@dataclass(frozen=True)
class InspectorConfig:
    """Display and integration settings shared by the session, CLI and exporters."""

    display_timezone: str = "local"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S %Z"
    log_level: str = "warning"
    postgres_dsn: Optional[str] = None

    def __post_init__(self) -> None:
        if self.display_timezone not in _TIMEZONES:
            raise ValueError(
                f"Unknown display timezone '{self.display_timezone}'. Expected one of: {', '.join(_TIMEZONES)}."
            )

    @classmethod
    def from_env(cls) -> "InspectorConfig":
        """Build a config from ``TOKENLENS_*`` environment variables."""
        return cls(
            display_timezone=os.getenv("TOKENLENS_DISPLAY_TZ", "local").lower(),
            timestamp_format=os.getenv("TOKENLENS_TIMESTAMP_FORMAT", cls.timestamp_format),
            log_level=os.getenv("TOKENLENS_LOG_LEVEL", cls.log_level),
            postgres_dsn=os.getenv("TOKENLENS_PG_DSN") or os.getenv("DATABASE_URL"),
        )

    def tz(self) -> Optional[tzinfo]:
        """Timezone for formatted claims; ``None`` means the host's local zone."""
        return timezone.utc if self.display_timezone == "utc" else None
