"""타임아웃 정책 유틸 테스트."""

from app.core.config import Settings
from app.core.timeout_policy import build_timeout_policy, to_requests_timeout


def test_build_timeout_policy_disabled_by_default() -> None:
    settings = Settings(WEBHOOK_URL="https://hooks.example.com/itinerary")

    policy = build_timeout_policy(settings)

    assert policy.webhook_timeout_seconds is None


def test_build_timeout_policy_treats_non_positive_as_disabled() -> None:
    settings = Settings(WEBHOOK_URL="https://hooks.example.com/itinerary", WEBHOOK_TIMEOUT_SECONDS=0)

    assert build_timeout_policy(settings).webhook_timeout_seconds is None


def test_build_timeout_policy_keeps_configured_seconds() -> None:
    settings = Settings(WEBHOOK_URL="https://hooks.example.com/itinerary", WEBHOOK_TIMEOUT_SECONDS=30)

    policy = build_timeout_policy(settings)

    assert policy.webhook_timeout_seconds == 30


def test_to_requests_timeout_returns_connect_and_read_timeout() -> None:
    connect_timeout, read_timeout = to_requests_timeout(10)

    assert connect_timeout == 3.0
    assert read_timeout == 7.0


def test_to_requests_timeout_caps_connect_timeout() -> None:
    assert to_requests_timeout(60) == (5.0, 55.0)


def test_to_requests_timeout_none_means_unbounded() -> None:
    assert to_requests_timeout(None) is None
