"""여행 일정 폼 스키마 계약 테스트."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.schemas.itinerary import ItineraryFormFields, ItineraryRequest


def test_form_fields_accept_camel_case_and_coerce_to_text() -> None:
    fields = ItineraryFormFields.model_validate(
        {"destination": "Tokyo", "days": 4, "budget": 0.5, "travelMode": "train", "travelers": None}
    )

    assert fields.travel_mode == "train"
    assert fields.days == "4"
    assert fields.budget == "0.5"
    assert fields.travelers == ""
    assert fields.email == ""


def test_request_from_fields_trims_text_values() -> None:
    fields = ItineraryFormFields(
        destination="  Cairo ",
        days="7",
        budget="300",
        travel_mode="flight",
        travelers="2",
        email=" a@b.io ",
        preferences="\tpyramids\n",
    )

    wire = ItineraryRequest.from_fields(fields).to_wire()

    assert list(wire) == ["destination", "days", "budget", "travelMode", "travelers", "email", "preferences"]
    assert wire["destination"] == "Cairo"
    assert wire["email"] == "a@b.io"
    assert wire["preferences"] == "pyramids"


def test_request_requires_destination_and_travel_mode() -> None:
    with pytest.raises(ValidationError):
        ItineraryRequest(destination="", days="1", budget="0", travel_mode="car", travelers="1", email="a@b.io")

    with pytest.raises(ValidationError):
        ItineraryRequest(destination="Rome", days="1", budget="0", travel_mode="", travelers="1", email="a@b.io")
