"""여행 일정 요청 폼 스키마."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_RESPONSE_TEXT = "No response received from server."
CONNECTION_ERROR_TEXT = "Error connecting to server. Please try again later."


class ItineraryFormFields(BaseModel):
    """폼에 입력된 원본 값 모델.

    모든 값은 사용자가 입력한 그대로의 문자열이며, 비어 있거나 숫자로 해석되지
    않을 수 있다. 누락된 키는 빈 문자열로 취급한다.
    """

    model_config = ConfigDict(populate_by_name=True)

    destination: str = Field("", description="여행지")
    days: str = Field("", description="여행 일수 (1-30)")
    budget: str = Field("", description="예산 (0 이상)")
    travel_mode: str = Field("", alias="travelMode", description="이동 수단")
    travelers: str = Field("", description="여행 인원 (1-20)")
    email: str = Field("", description="결과를 받을 이메일")
    preferences: str = Field("", description="추가 선호 사항")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)


class ItineraryRequest(BaseModel):
    """웹훅으로 전송되는 일정 생성 요청 페이로드.

    Fields:
        `destination`: 앞뒤 공백을 제거한 여행지
        `days`: 입력 그대로의 여행 일수
        `budget`: 입력 그대로의 예산
        `travelMode`: 선택된 이동 수단
        `travelers`: 입력 그대로의 인원 수
        `email`: 앞뒤 공백을 제거한 이메일
        `preferences`: 앞뒤 공백을 제거한 선호 사항 (선택)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    destination: str = Field(..., min_length=1, description="여행지")
    days: str = Field(..., description="여행 일수")
    budget: str = Field(..., description="예산")
    travel_mode: str = Field(..., alias="travelMode", min_length=1, description="이동 수단")
    travelers: str = Field(..., description="여행 인원")
    email: str = Field(..., description="이메일")
    preferences: str = Field("", description="추가 선호 사항")

    @classmethod
    def from_fields(cls, fields: ItineraryFormFields) -> ItineraryRequest:
        """폼 원본 값에서 전송용 페이로드를 구성합니다."""
        return cls(
            destination=fields.destination.strip(),
            days=fields.days,
            budget=fields.budget,
            travel_mode=fields.travel_mode,
            travelers=fields.travelers,
            email=fields.email.strip(),
            preferences=fields.preferences.strip(),
        )

    def to_wire(self) -> dict[str, str]:
        """웹훅 JSON 본문 형태(camelCase 키)로 직렬화합니다."""
        return self.model_dump(by_alias=True)


class ValidationResult(BaseModel):
    """폼 검증 결과."""

    is_valid: bool = Field(..., description="모든 필드가 규칙을 통과했는지 여부")
    error_message: str | None = Field(None, description="첫 번째 위반 필드의 오류 메시지")

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(is_valid=False, error_message=message)


class SubmissionResult(BaseModel):
    """웹훅 호출 결과. 결과 오버레이에 그대로 표시된다."""

    text: str = Field(..., description="오버레이에 표시할 텍스트")
    ok: bool = Field(..., description="2xx 응답 여부")
    status_code: int | None = Field(None, description="HTTP 상태 코드 (전송 실패 시 None)")
    content_type: str | None = Field(None, description="응답 Content-Type")


class ItinerarySubmitResponse(BaseModel):
    """릴레이 API 응답 모델."""

    ok: bool = Field(..., description="웹훅 2xx 응답 여부")
    status_code: int | None = Field(None, description="웹훅 HTTP 상태 코드")
    content_type: str | None = Field(None, description="웹훅 응답 Content-Type")
    text: str = Field(..., description="오버레이에 표시할 텍스트")
    popup_class: str = Field(..., description="오버레이에 적용할 CSS 클래스")
