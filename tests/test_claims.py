from datetime import datetime, timedelta, timezone

from tokenlens.claims import evaluate_claims, format_timestamp, is_expired

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
NOW_S = int(NOW.timestamp())


def test_expiration_in_the_past_is_expired() -> None:
    assert is_expired({"exp": NOW_S - 1}, now=NOW) is True


def test_expiration_in_the_future_is_not_expired() -> None:
    assert is_expired({"exp": NOW_S + 3600}, now=NOW) is False


def test_missing_expiration_is_not_expired() -> None:
    assert is_expired({"sub": "1234567890"}, now=NOW) is False


def test_expiration_equal_to_now_is_not_expired() -> None:
    assert is_expired({"exp": NOW_S}, now=NOW) is False
    assert is_expired({"exp": NOW_S}, now=NOW + timedelta(milliseconds=1)) is True


def test_not_before_is_displayed_but_not_enforced() -> None:
    evaluation = evaluate_claims({"nbf": NOW_S + 86400, "exp": NOW_S + 3600}, now=NOW, tz=timezone.utc)
    assert evaluation.is_expired is False
    assert "nbf_formatted" in evaluation.payload


def test_formatted_fields_are_added_without_removing_claims() -> None:
    payload = {"sub": "1234567890", "iat": 1516239022, "exp": 1516242622}
    evaluation = evaluate_claims(payload, now=NOW, tz=timezone.utc)
    assert evaluation.payload["iat"] == 1516239022
    assert evaluation.payload["iat_formatted"] == "2018-01-18 01:30:22 UTC"
    assert evaluation.payload["exp_formatted"] == "2018-01-18 02:30:22 UTC"
    assert "nbf_formatted" not in evaluation.payload
    assert evaluation.is_expired is True
    assert "iat_formatted" not in payload


def test_non_numeric_timestamp_claims_are_ignored() -> None:
    evaluation = evaluate_claims({"exp": "tomorrow", "iat": True}, now=NOW, tz=timezone.utc)
    assert evaluation.is_expired is False
    assert "exp_formatted" not in evaluation.payload
    assert "iat_formatted" not in evaluation.payload


def test_out_of_range_timestamp_formats_as_invalid() -> None:
    assert format_timestamp(1e20, tz=timezone.utc) == "Invalid Date"


def test_custom_format() -> None:
    assert format_timestamp(0, tz=timezone.utc, fmt="%Y-%m-%dT%H:%M:%S") == "1970-01-01T00:00:00"
