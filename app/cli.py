"""여행 일정 폼 CLI.

사용법:
  python -m app.cli --destination Paris --days 3 --budget 1500 \\
      --travel-mode flight --travelers 2 --email me@example.com
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from app.core.timeout_policy import get_timeout_policy
from app.schemas.itinerary import ItineraryFormFields
from app.services.form_controller import FormController
from app.services.form_validation import validate_form

EXIT_OK = 0
EXIT_WEBHOOK_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_CONFIG_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Submit an itinerary request to the configured webhook.")
    parser.add_argument("--destination", type=str, default="", help="Trip destination.")
    parser.add_argument("--days", type=str, default="", help="Number of days (1-30).")
    parser.add_argument("--budget", type=str, default="", help="Budget (0 or more).")
    parser.add_argument("--travel-mode", type=str, default="", help="Mode of travel.")
    parser.add_argument("--travelers", type=str, default="", help="Number of travelers (1-20).")
    parser.add_argument("--email", type=str, default="", help="Email address for the itinerary.")
    parser.add_argument("--preferences", type=str, default="", help="Optional free-text preferences.")
    parser.add_argument(
        "--webhook-url",
        type=str,
        default="",
        help="Override WEBHOOK_URL from the environment.",
    )
    return parser


def _build_controller(webhook_url: str) -> FormController:
    if not webhook_url:
        return FormController.from_settings()
    return FormController(webhook_url, timeout_seconds=_optional_timeout_from_env())


def _optional_timeout_from_env() -> int | None:
    # --webhook-url만 주어지면 WEBHOOK_URL 미설정으로 설정 로딩이 실패할 수 있다.
    try:
        return get_timeout_policy().webhook_timeout_seconds
    except ValidationError:
        return None


def _render_overlay(controller: FormController) -> str:
    overlay = controller.view.overlay
    title = "Itinerary" if not overlay.is_error else "Itinerary request failed"
    rule = "=" * 50
    return "\n".join([title, rule, overlay.content, rule])


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    fields = ItineraryFormFields(
        destination=args.destination,
        days=args.days,
        budget=args.budget,
        travel_mode=args.travel_mode,
        travelers=args.travelers,
        email=args.email,
        preferences=args.preferences,
    )

    validation = validate_form(fields)
    if not validation.is_valid:
        print(validation.error_message, file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        controller = _build_controller(args.webhook_url.strip())
    except ValidationError:
        print("WEBHOOK_URL is not configured; set it or pass --webhook-url.", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    result = asyncio.run(controller.submit(fields))
    print(_render_overlay(controller))
    controller.close_overlay()
    return EXIT_OK if result.ok else EXIT_WEBHOOK_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
