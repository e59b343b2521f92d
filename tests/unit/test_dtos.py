"""Unit tests for application DTOs and event construction."""

from typing import Any

import pytest

from seating.application import build_event
from seating.domain.services import (
    ConsolePlacementChanged,
    DiscountApplied,
    FabricChanged,
    LoungerEdited,
    PillowsEdited,
    SectionEdited,
    ShapeChanged,
)


class TestBuildEvent:
    """Tests for build_event."""

    def test_builds_event(self) -> None:
        event = build_event("console_placement_changed", {"index": 1, "section": "front", "after_seat": 2})
        assert event == ConsolePlacementChanged(1, "front", 2)

    def test_optional_fields_accept_null(self) -> None:
        event = build_event("section_edited", {"tag": "F", "seater": None, "quantity": 2})
        assert event == SectionEdited("F", None, 2)

    def test_default_fields(self) -> None:
        assert build_event("lounger_edited") == LoungerEdited()
        assert build_event("shape_changed", {"shape": "U SHAPE"}) == ShapeChanged("U SHAPE")

    def test_add_on_events(self) -> None:
        assert build_event("pillows_edited", {"required": True, "pillow_type": "Tassels"}) == PillowsEdited(
            required=True, pillow_type="Tassels"
        )
        assert build_event("fabric_changed", {"structure_code": "LIN-01"}) == FabricChanged(
            structure_code="LIN-01"
        )
        assert build_event("discount_applied", {"code": None}) == DiscountApplied()

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown event type 'sofa_exploded'"):
            build_event("sofa_exploded", {})

    def test_unexpected_field(self) -> None:
        with pytest.raises(ValueError, match="Unexpected fields for shape_changed: colour"):
            build_event("shape_changed", {"colour": "red"})

    def test_missing_field(self) -> None:
        with pytest.raises(ValueError, match="Invalid payload for console_toggled"):
            build_event("console_toggled", {})

    @pytest.mark.parametrize(
        "event_type,payload",
        [
            ("console_placement_changed", {"index": "0"}),
            ("console_placement_changed", {"index": None}),
            ("console_placement_changed", {"index": True}),
            ("console_placement_changed", {"index": 0, "after_seat": "2"}),
            ("console_accessory_changed", {"index": 1.0}),
            ("console_toggled", {"required": "yes"}),
            ("shape_changed", {"shape": 3}),
            ("lounger_edited", {"storage": 1}),
            ("seat_width_changed", {"seat_width": [24]}),
        ],
    )
    def test_wrong_value_type(self, event_type: str, payload: dict[str, Any]) -> None:
        with pytest.raises(ValueError, match=f"Invalid value for {event_type}"):
            build_event(event_type, payload)
