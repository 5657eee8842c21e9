from datetime import timezone

import pytest

from tokenlens.config import InspectorConfig


def test_defaults() -> None:
    config = InspectorConfig()
    assert config.display_timezone == "local"
    assert config.tz() is None
    assert config.postgres_dsn is None


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKENLENS_DISPLAY_TZ", "UTC")
    monkeypatch.setenv("TOKENLENS_TIMESTAMP_FORMAT", "%H:%M")
    monkeypatch.setenv("TOKENLENS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TOKENLENS_PG_DSN", "postgresql://localhost/tokens")
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/other")

    config = InspectorConfig.from_env()
    assert config.display_timezone == "utc"
    assert config.tz() is timezone.utc
    assert config.timestamp_format == "%H:%M"
    assert config.log_level == "debug"
    assert config.postgres_dsn == "postgresql://localhost/tokens"


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValueError):
        InspectorConfig(display_timezone="mars")
