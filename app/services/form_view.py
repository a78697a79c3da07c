"""폼 화면 상태 모델.

브라우저 DOM 대신 제출 버튼, 안내 메시지, 결과 오버레이, 페이지 스크롤 상태를
파이썬 객체로 보관한다. 컨트롤러와 릴레이 API, CLI가 같은 상태를 공유한다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

BUSY_LABEL = "Generating..."
BUSY_MESSAGE = "Generating your itinerary, please wait..."

POPUP_OPEN_CLASS = "popup-open"
POPUP_ERROR_CLASS = "popup-error"

MessageKind = Literal["success", "error"]
DismissReason = Literal["close", "backdrop", "escape"]


@dataclass
class SubmitControl:
    """제출 버튼 상태."""

    label: str
    disabled: bool = False
    _idle_label: str | None = field(default=None, repr=False)

    def start_busy(self) -> None:
        self._idle_label = self.label
        self.label = BUSY_LABEL
        self.disabled = True

    def finish_busy(self) -> None:
        if self._idle_label is not None:
            self.label = self._idle_label
            self._idle_label = None
        self.disabled = False


@dataclass
class StatusMessage:
    """폼 옆에 표시되는 인라인 안내 메시지."""

    text: str = ""
    kind: MessageKind | None = None
    visible: bool = False

    def show(self, text: str, kind: MessageKind) -> None:
        self.text = text
        self.kind = kind
        self.visible = True

    def clear(self) -> None:
        self.text = ""
        self.kind = None
        self.visible = False


@dataclass
class ResultOverlay:
    """웹훅 응답을 보여주는 모달 오버레이."""

    content: str = ""
    classes: set[str] = field(default_factory=set)
    aria_hidden: bool = True
    close_focused: bool = False

    @property
    def is_open(self) -> bool:
        return POPUP_OPEN_CLASS in self.classes

    @property
    def is_error(self) -> bool:
        return POPUP_ERROR_CLASS in self.classes

    @property
    def css_class(self) -> str:
        """`popup-open popup-error`처럼 고정 순서로 정렬된 클래스 문자열."""
        ordered = [name for name in (POPUP_OPEN_CLASS, POPUP_ERROR_CLASS) if name in self.classes]
        return " ".join(ordered)

    def open(self, text: str, ok: bool) -> None:
        self.content = text
        self.classes.discard(POPUP_ERROR_CLASS)
        if not ok:
            self.classes.add(POPUP_ERROR_CLASS)
        self.classes.add(POPUP_OPEN_CLASS)
        self.aria_hidden = False
        self.close_focused = True

    def close(self) -> None:
        self.classes.discard(POPUP_OPEN_CLASS)
        self.classes.discard(POPUP_ERROR_CLASS)
        self.aria_hidden = True
        self.close_focused = False


@dataclass
class PageState:
    """오버레이가 열려 있는 동안 본문 스크롤을 잠근다."""

    scroll_locked: bool = False


@dataclass
class FormView:
    """폼 화면 전체 상태."""

    submit: SubmitControl
    message: StatusMessage = field(default_factory=StatusMessage)
    overlay: ResultOverlay = field(default_factory=ResultOverlay)
    page: PageState = field(default_factory=PageState)

    @classmethod
    def create(cls, submit_label: str) -> FormView:
        return cls(submit=SubmitControl(label=submit_label))
