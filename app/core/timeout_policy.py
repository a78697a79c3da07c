"""웹훅 호출 타임아웃 정책 정의.

기본값은 타임아웃 없음이며, `WEBHOOK_TIMEOUT_SECONDS`가 설정된 경우에만
requests용 (connect, read) 튜플을 만든다.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, get_settings

_MIN_TIMEOUT_SECONDS = 1
_MAX_CONNECT_TIMEOUT_SECONDS = 5.0
_CONNECT_TIMEOUT_RATIO = 0.3


def _normalize_timeout(value: int | float | None) -> int | None:
    """타임아웃 값을 정수 초 단위로 정규화합니다. 비어 있거나 0 이하이면 None."""
    if value is None:
        return None
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return None

    if seconds <= 0:
        return None
    return max(_MIN_TIMEOUT_SECONDS, seconds)


@dataclass(frozen=True, slots=True)
class TimeoutPolicy:
    """웹훅 요청 타임아웃 정책."""

    webhook_timeout_seconds: int | None


def build_timeout_policy(settings: Settings) -> TimeoutPolicy:
    """설정값으로부터 타임아웃 정책을 생성합니다."""
    return TimeoutPolicy(webhook_timeout_seconds=_normalize_timeout(settings.WEBHOOK_TIMEOUT_SECONDS))


def get_timeout_policy(settings: Settings | None = None) -> TimeoutPolicy:
    """현재 설정을 기반으로 타임아웃 정책을 반환합니다."""
    resolved_settings = settings or get_settings()
    return build_timeout_policy(resolved_settings)


def to_requests_timeout(total_timeout_seconds: int | None) -> tuple[float, float] | None:
    """requests용 (connect, read) 타임아웃 튜플을 생성합니다. None이면 무제한."""
    if total_timeout_seconds is None:
        return None

    total = float(max(_MIN_TIMEOUT_SECONDS, int(total_timeout_seconds)))
    connect_timeout = min(_MAX_CONNECT_TIMEOUT_SECONDS, max(1.0, total * _CONNECT_TIMEOUT_RATIO))
    read_timeout = max(1.0, total - connect_timeout) if total > connect_timeout else max(0.5, total * 0.5)
    return (connect_timeout, read_timeout)
