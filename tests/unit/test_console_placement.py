"""Unit tests for console slot enumeration and placement reconciliation.

These tests verify:
- Legal slots sit strictly between seats of active zones
- The placement list is resized to exactly max_consoles entries
- Illegal and duplicate placements become placeholders at the same index
- Accessories follow their placement and are checked against the catalog
"""

import pytest

from seating.domain.services import (
    ConsolePlacementEngine,
    normalize_sections,
    parse_placement,
    parse_placements,
)
from seating.domain.value_objects import (
    BaseShape,
    ConsolePlacement,
    ConsoleSlot,
    ConsoleZone,
)

FRONT = ConsoleZone.FRONT
LEFT = ConsoleZone.LEFT
RIGHT = ConsoleZone.RIGHT


@pytest.fixture
def engine() -> ConsolePlacementEngine:
    return ConsolePlacementEngine()


def place(zone: ConsoleZone, seat: int, accessory: str | None = None) -> ConsolePlacement:
    return ConsolePlacement(section=zone, after_seat=seat, accessory_id=accessory)


class TestParsePlacement:
    """Tests for reading stored placement entries."""

    def test_record(self) -> None:
        placement = parse_placement({"section": "front", "afterSeat": 2, "accessoryId": "cup-holder"})
        assert placement == place(FRONT, 2, "cup-holder")

    def test_value_form(self) -> None:
        assert parse_placement("left_1") == place(LEFT, 1)

    def test_after_form_with_section_code(self) -> None:
        assert parse_placement({"section": "F", "position": "after_2"}) == place(FRONT, 2)

    @pytest.mark.parametrize("raw", [None, "none", {"section": "front"}, {"afterSeat": 0, "section": "front"}])
    def test_unreadable_is_placeholder(self, raw: object) -> None:
        assert parse_placement(raw).is_empty

    def test_none_accessory_string(self) -> None:
        assert parse_placement({"section": "front", "afterSeat": 1, "accessoryId": "none"}).accessory_id is None

    def test_parallel_accessories_merged(self) -> None:
        placements = parse_placements(
            {"placements": ["front_1", "front_2"], "accessories": ["cup-holder"]}
        )
        assert placements == [place(FRONT, 1, "cup-holder"), place(FRONT, 2)]

    def test_missing_console(self) -> None:
        assert parse_placements(None) == []
        assert parse_placements({"placements": "front_1"}) == []


class TestLegalSlots:
    """Tests for ConsolePlacementEngine.legal_slots."""

    def test_two_seater_standard(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "2-Seater"})
        slots = engine.legal_slots(sections, BaseShape.STANDARD)
        assert slots == [ConsoleSlot(FRONT, 1)]
        assert slots[0].label == "Front: After 1st Seat from Left"
        assert slots[0].value == "front_1"

    def test_u_shape(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(
            BaseShape.U_SHAPE, {"F": "3-Seater", "L2": "2-Seater", "R2": "2-Seater"}
        )
        slots = engine.legal_slots(sections, BaseShape.U_SHAPE)
        assert slots == [
            ConsoleSlot(FRONT, 1),
            ConsoleSlot(FRONT, 2),
            ConsoleSlot(LEFT, 1),
            ConsoleSlot(RIGHT, 1),
        ]

    def test_one_seater_has_no_slots(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "1-Seater"})
        assert engine.legal_slots(sections, BaseShape.STANDARD) == []

    def test_quantity_does_not_add_slots(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": {"seater": "2-Seater", "qty": 3}})
        assert engine.legal_slots(sections, BaseShape.STANDARD) == [ConsoleSlot(FRONT, 1)]


class TestReconcile:
    """Tests for ConsolePlacementEngine.reconcile."""

    def test_pads_to_max_consoles(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "4-Seater"})
        result = engine.reconcile([place(FRONT, 2)], sections, BaseShape.STANDARD)
        assert len(result) == 3
        assert result[0] == place(FRONT, 2)
        assert result[1].is_empty and result[2].is_empty

    def test_truncates_from_tail(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "2-Seater"})
        result = engine.reconcile(
            [place(FRONT, 1), place(FRONT, 2), place(FRONT, 3)], sections, BaseShape.STANDARD
        )
        assert result == (place(FRONT, 1),)

    def test_illegal_slot_becomes_placeholder(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "3-Seater"})
        result = engine.reconcile(
            [place(RIGHT, 1, "cup-holder"), place(FRONT, 2)], sections, BaseShape.STANDARD
        )
        assert result == (ConsolePlacement.empty(), place(FRONT, 2))

    def test_seat_past_last_is_illegal(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "3-Seater"})
        result = engine.reconcile([place(FRONT, 3)], sections, BaseShape.STANDARD)
        assert all(p.is_empty for p in result)

    def test_first_duplicate_wins(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "4-Seater"})
        result = engine.reconcile(
            [place(FRONT, 2, "a"), place(FRONT, 1), place(FRONT, 2, "b")],
            sections,
            BaseShape.STANDARD,
        )
        assert result == (place(FRONT, 2, "a"), place(FRONT, 1), ConsolePlacement.empty())

    def test_zero_seats_clears_everything(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "1-Seater"})
        assert engine.reconcile([place(FRONT, 1)], sections, BaseShape.STANDARD) == ()

    def test_invalid_accessory_cleared(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "3-Seater"})
        result = engine.reconcile(
            [place(FRONT, 1, "cup-holder"), place(FRONT, 2, "gone")],
            sections,
            BaseShape.STANDARD,
            valid_accessories=frozenset({"cup-holder"}),
        )
        assert result[0].accessory_id == "cup-holder"
        assert result[1] == place(FRONT, 2)

    def test_accessories_kept_without_catalog(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "2-Seater"})
        result = engine.reconcile([place(FRONT, 1, "anything")], sections, BaseShape.STANDARD)
        assert result[0].accessory_id == "anything"

    def test_placeholder_drops_accessory(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(BaseShape.STANDARD, {"F": "2-Seater"})
        result = engine.reconcile(
            [ConsolePlacement(accessory_id="cup-holder")], sections, BaseShape.STANDARD
        )
        assert result == (ConsolePlacement.empty(),)

    def test_idempotent_and_order_preserving(self, engine: ConsolePlacementEngine) -> None:
        sections = normalize_sections(
            BaseShape.U_SHAPE, {"F": "4-Seater", "L2": "3-Seater", "R2": "2-Seater"}
        )
        raw = [place(LEFT, 2), place(FRONT, 9), place(FRONT, 3), place(LEFT, 2), place(RIGHT, 1)]
        once = engine.reconcile(raw, sections, BaseShape.U_SHAPE)
        twice = engine.reconcile(once, sections, BaseShape.U_SHAPE)
        assert once == twice
        active = [p.key for p in once if not p.is_empty]
        assert active == [(LEFT, 2), (FRONT, 3), (RIGHT, 1)]
        assert len(active) == len(set(active))
