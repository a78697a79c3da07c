"""여행 일정 폼 필드 검증."""

from __future__ import annotations

import math
import re

from app.schemas.itinerary import ItineraryFormFields, ValidationResult

DESTINATION_REQUIRED = "Please enter a destination."
DAYS_OUT_OF_RANGE = "Days must be between 1 and 30."
BUDGET_INVALID = "Please enter a valid budget."
TRAVEL_MODE_REQUIRED = "Please select mode of travel."
TRAVELERS_OUT_OF_RANGE = "Travelers must be between 1 and 20."
EMAIL_INVALID = "Please enter a valid email address."

MIN_DAYS, MAX_DAYS = 1, 30
MIN_TRAVELERS, MAX_TRAVELERS = 1, 20

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|Infinity))")


def parse_int_prefix(value: str) -> int | None:
    """문자열 앞쪽의 정수 부분만 읽습니다. (`"12 days"` -> 12, `"3.9"` -> 3)"""
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_float_prefix(value: str) -> float | None:
    """문자열 앞쪽의 실수 부분만 읽습니다. 숫자로 시작하지 않으면 None."""
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return None
    token = match.group(1)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _in_range(value: int | None, low: int, high: int) -> bool:
    return value is not None and low <= value <= high


def validate_form(fields: ItineraryFormFields) -> ValidationResult:
    """필드 규칙을 고정된 순서로 적용하고 첫 번째 위반에서 중단합니다.

    순서: destination -> days -> budget -> travelMode -> travelers -> email.
    preferences는 검증하지 않는다.
    """
    if not fields.destination.strip():
        return ValidationResult.failure(DESTINATION_REQUIRED)

    if not _in_range(parse_int_prefix(fields.days), MIN_DAYS, MAX_DAYS):
        return ValidationResult.failure(DAYS_OUT_OF_RANGE)

    budget = parse_float_prefix(fields.budget)
    if budget is None or budget < 0:
        return ValidationResult.failure(BUDGET_INVALID)

    if not fields.travel_mode:
        return ValidationResult.failure(TRAVEL_MODE_REQUIRED)

    if not _in_range(parse_int_prefix(fields.travelers), MIN_TRAVELERS, MAX_TRAVELERS):
        return ValidationResult.failure(TRAVELERS_OUT_OF_RANGE)

    if not EMAIL_PATTERN.match(fields.email.strip()):
        return ValidationResult.failure(EMAIL_INVALID)

    return ValidationResult.success()
