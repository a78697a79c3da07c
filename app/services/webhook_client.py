"""일정 생성 웹훅 전송 유틸리티."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import requests

from app.core.logger import get_logger
from app.core.timeout_policy import to_requests_timeout
from app.schemas.itinerary import NO_RESPONSE_TEXT, ItineraryRequest, SubmissionResult

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class WebhookTransportError(Exception):
    """웹훅에 도달하지 못한 경우 (DNS, 타임아웃, 연결 거부, 잘못된 URL)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Webhook request to {url} failed: {cause}")


def _ensure_text_encoding(response: requests.Response, content_type: str | None) -> None:
    """charset이 없는 응답은 ISO-8859-1 대신 UTF-8로 디코딩합니다."""
    if content_type and "charset=" in content_type.lower():
        return
    response.encoding = "utf-8"


def _is_json_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def render_response_text(status_code: int, content_type: str | None, body: str) -> str:
    """응답 본문을 오버레이 표시용 텍스트로 변환합니다.

    - 204 또는 빈 본문: 안내 문구
    - JSON Content-Type: 2칸 들여쓰기로 정렬한 JSON (파싱 실패 시 원문)
    - 그 외: 원문 텍스트
    """
    if status_code == 204 or not body:
        return NO_RESPONSE_TEXT

    if _is_json_content_type(content_type):
        try:
            parsed: Any = json.loads(body)
        except ValueError:
            logger.warning("JSON Content-Type 응답을 파싱하지 못해 원문을 표시합니다.")
            return body
        return json.dumps(parsed, indent=2, ensure_ascii=False)

    return body


async def post_itinerary(
    *,
    webhook_url: str,
    payload: ItineraryRequest,
    timeout_seconds: int | None = None,
) -> SubmissionResult:
    """일정 요청을 웹훅으로 한 번 전송하고 응답을 표시용 결과로 반환합니다.

    재시도하지 않는다. HTTP 오류 상태도 받은 그대로 반환하며 `ok`로만 구분한다.

    Raises:
        WebhookTransportError: 응답을 받지 못한 경우.
    """
    request_timeout = to_requests_timeout(timeout_seconds)

    def _send() -> requests.Response:
        return requests.post(
            webhook_url,
            json=payload.to_wire(),
            headers=JSON_HEADERS,
            timeout=request_timeout,
        )

    try:
        response = await asyncio.to_thread(_send)
    except requests.RequestException as exc:
        logger.error("Webhook delivery failed: url=%s error=%s", webhook_url, exc)
        raise WebhookTransportError(webhook_url, exc) from exc

    ok = 200 <= response.status_code < 300
    content_type = response.headers.get("Content-Type")
    _ensure_text_encoding(response, content_type)
    text = render_response_text(response.status_code, content_type, response.text)

    if ok:
        logger.info("Webhook responded: status_code=%d content_type=%s", response.status_code, content_type)
    else:
        logger.warning(
            "Webhook responded with error status: status_code=%d content_type=%s",
            response.status_code,
            content_type,
        )

    return SubmissionResult(
        text=text,
        ok=ok,
        status_code=response.status_code,
        content_type=content_type,
    )
