import pytest

from tokenlens.logging import configure_logging, redact_sensitive


def test_unknown_level_raises_value_error() -> None:
    with pytest.raises(ValueError):
        configure_logging("bogus")


def test_redacts_secret_and_token_fields() -> None:
    event = redact_sensitive(None, "info", {"event": "x", "secret": "hunter2", "token": "a.b.c", "status": "VALID"})
    assert event == {"event": "x", "secret": "***", "token": "***", "status": "VALID"}
