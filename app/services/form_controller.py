"""여행 일정 폼 컨트롤러.

제출 이벤트를 받아 필드를 검증하고, 웹훅으로 JSON을 전송한 뒤 결과를
오버레이에 표시한다. 제출 중에는 버튼이 비활성화되어 동시 요청이 없다.
"""

from __future__ import annotations

from app.core.config import Settings, get_settings
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy
from app.schemas.itinerary import (
    CONNECTION_ERROR_TEXT,
    ItineraryFormFields,
    ItineraryRequest,
    SubmissionResult,
    ValidationResult,
)
from app.services.form_validation import validate_form
from app.services.form_view import BUSY_MESSAGE, DismissReason, FormView
from app.services.webhook_client import WebhookTransportError, post_itinerary

logger = get_logger(__name__)

ESCAPE_KEY = "Escape"
BACKDROP_TARGET = "backdrop"


class InvalidFormError(ValueError):
    """검증을 통과하지 못한 필드로 제출한 경우."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SubmissionInProgressError(RuntimeError):
    """제출 버튼이 비활성화된 상태에서 다시 제출한 경우."""


class FormController:
    """폼 하나에 바인딩되는 제출/표시 컨트롤러."""

    def __init__(
        self,
        webhook_url: str,
        *,
        submit_label: str = "Generate Itinerary",
        timeout_seconds: int | None = None,
        view: FormView | None = None,
    ) -> None:
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self.view = view or FormView.create(submit_label)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> FormController:
        """환경 설정의 웹훅 URL과 타임아웃으로 컨트롤러를 생성합니다."""
        resolved = settings or get_settings()
        policy = get_timeout_policy(resolved)
        return cls(
            resolved.WEBHOOK_URL,
            submit_label=resolved.SUBMIT_LABEL,
            timeout_seconds=policy.webhook_timeout_seconds,
        )

    def validate(self, fields: ItineraryFormFields) -> ValidationResult:
        return validate_form(fields)

    async def handle_submit(self, fields: ItineraryFormFields) -> SubmissionResult | None:
        """제출 이벤트 처리. 검증에 실패하면 요청 없이 None을 반환합니다."""
        self.view.message.clear()

        validation = self.validate(fields)
        if not validation.is_valid:
            logger.info("Form validation failed: %s", validation.error_message)
            self.view.message.show(validation.error_message or "", "error")
            return None

        return await self.submit(fields)

    async def submit(self, fields: ItineraryFormFields) -> SubmissionResult:
        """검증된 필드를 웹훅으로 전송하고 결과를 오버레이에 표시합니다.

        Raises:
            InvalidFormError: 필드가 검증 규칙을 위반한 경우. 요청은 전송되지 않는다.
            SubmissionInProgressError: 이전 제출이 아직 끝나지 않은 경우.
        """
        submit_control = self.view.submit
        if submit_control.disabled:
            raise SubmissionInProgressError("이전 제출이 아직 처리 중입니다.")

        validation = self.validate(fields)
        if not validation.is_valid:
            raise InvalidFormError(validation.error_message or "")

        payload = ItineraryRequest.from_fields(fields)

        submit_control.start_busy()
        self.view.message.show(BUSY_MESSAGE, "success")
        try:
            try:
                result = await post_itinerary(
                    webhook_url=self.webhook_url,
                    payload=payload,
                    timeout_seconds=self.timeout_seconds,
                )
            except WebhookTransportError:
                result = SubmissionResult(text=CONNECTION_ERROR_TEXT, ok=False)
            self.show_result(result.text, result.ok)
            return result
        finally:
            submit_control.finish_busy()
            self.view.message.clear()

    def show_result(self, text: str, ok: bool) -> None:
        """결과 텍스트를 오버레이에 표시하고 스크롤을 잠급니다."""
        self.view.overlay.open(text, ok)
        self.view.page.scroll_locked = True

    def close_overlay(self, reason: DismissReason = "close") -> None:
        """오버레이를 닫고 스크롤을 복원합니다. 닫는 경로와 무관하게 동일하다."""
        logger.debug("Result overlay dismissed: reason=%s", reason)
        self.view.overlay.close()
        self.view.page.scroll_locked = False

    def handle_close_click(self) -> None:
        self.close_overlay("close")

    def handle_overlay_click(self, target: str) -> bool:
        """오버레이 배경을 직접 클릭한 경우에만 닫습니다."""
        if target != BACKDROP_TARGET:
            return False
        self.close_overlay("backdrop")
        return True

    def handle_keydown(self, key: str) -> bool:
        """오버레이가 열려 있을 때 Escape 키로 닫습니다."""
        if key != ESCAPE_KEY or not self.view.overlay.is_open:
            return False
        self.close_overlay("escape")
        return True
