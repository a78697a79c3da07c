"""여행 일정 폼 릴레이 API."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.logger import get_logger
from app.schemas.itinerary import ItineraryFormFields, ItinerarySubmitResponse
from app.services.form_controller import FormController

router = APIRouter(prefix="/api/v1", tags=["itinerary"])
logger = get_logger(__name__)

ITINERARY_RESPONSE_EXAMPLES = {
    "json_success": {
        "summary": "JSON 응답",
        "description": "웹훅이 JSON을 반환한 경우 정렬된 JSON 텍스트를 표시",
        "value": {
            "ok": True,
            "status_code": 200,
            "content_type": "application/json",
            "text": '{\n  "plan": "Day 1..."\n}',
            "popup_class": "popup-open",
        },
    },
    "webhook_error": {
        "summary": "웹훅 오류 상태",
        "description": "웹훅이 오류 상태를 반환해도 본문을 그대로 표시",
        "value": {
            "ok": False,
            "status_code": 500,
            "content_type": "text/plain",
            "text": "Server error",
            "popup_class": "popup-open popup-error",
        },
    },
    "connection_error": {
        "summary": "웹훅 연결 실패",
        "description": "웹훅에 도달하지 못한 경우 안내 문구를 표시",
        "value": {
            "ok": False,
            "status_code": None,
            "content_type": None,
            "text": "Error connecting to server. Please try again later.",
            "popup_class": "popup-open popup-error",
        },
    },
}


def get_form_controller() -> FormController:
    """요청마다 새 폼 상태를 가진 컨트롤러를 제공합니다."""
    return FormController.from_settings()


@router.post(
    "/itinerary",
    response_model=ItinerarySubmitResponse,
    responses={
        200: {
            "description": "웹훅 응답 (성공/실패 모두 본문으로 전달)",
            "content": {"application/json": {"examples": ITINERARY_RESPONSE_EXAMPLES}},
        },
        422: {
            "description": "폼 검증 실패",
            "content": {
                "application/json": {
                    "example": {"detail": "Days must be between 1 and 30."},
                }
            },
        },
    },
)
async def submit_itinerary(
    fields: ItineraryFormFields,
    controller: FormController = Depends(get_form_controller),  # noqa: B008
) -> ItinerarySubmitResponse:
    """폼 값을 검증한 뒤 웹훅으로 전달하고 오버레이 표시 정보를 반환한다."""
    result = await controller.handle_submit(fields)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=controller.view.message.text,
        )

    logger.info("Itinerary relayed: ok=%s status_code=%s", result.ok, result.status_code)
    return ItinerarySubmitResponse(
        ok=result.ok,
        status_code=result.status_code,
        content_type=result.content_type,
        text=result.text,
        popup_class=controller.view.overlay.css_class,
    )
