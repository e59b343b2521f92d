"""Unit tests for configuration validation and repair advisories."""

from typing import Any

import pytest

from seating.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from seating.domain.catalog import Catalogs, OptionCatalog, OptionField, PriceTable


def warning_paths(result: ValidationResult) -> list[str]:
    return [w.path for w in result.warnings]


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_result(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_errors_exit_one(self) -> None:
        result = ValidationResult().add_error("sections", "bad").add_warning("pricing", "meh")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_warnings_exit_two(self) -> None:
        assert ValidationResult().add_warning("pricing", "meh").exit_code == 2

    def test_merge(self) -> None:
        left = ValidationResult().add_warning("a", "first")
        right = ValidationResult().add_error("b", "second")
        left.merge(right)
        assert [e.path for e in left.errors] == ["b"]
        assert warning_paths(left) == ["a"]


class TestValidateConfig:
    """Tests for validate_config."""

    def test_clean_configuration(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {"baseShape": "STANDARD", "sections": {"F": {"seater": "3-Seater", "qty": 1}}},
            priced_catalogs,
        )
        assert result.errors == []
        assert result.warnings == []
        assert result.exit_code == 0

    def test_accepts_parsed_input(self, priced_catalogs: Catalogs) -> None:
        config = load_config_from_dict({"sections": {"F": "2-Seater"}})
        assert validate_config(config, priced_catalogs).exit_code == 0

    def test_schema_errors(self, priced_catalogs: Catalogs) -> None:
        result = validate_config({"sections": ["F"]}, priced_catalogs)
        assert result.exit_code == 1
        assert result.errors[0].path == "sections"
        assert result.warnings == []

    def test_missing_base_price_warns(self) -> None:
        result = validate_config({"sections": {"F": "2-Seater"}})
        assert result.exit_code == 2
        assert warning_paths(result) == ["pricing"]
        assert "base_price" in result.warnings[0].message

    def test_unknown_shape(self, priced_catalogs: Catalogs) -> None:
        result = validate_config({"baseShape": "hexagon"}, priced_catalogs)
        assert warning_paths(result) == ["baseShape"]
        assert result.warnings[0].suggestion is not None

    def test_shape_alias_is_not_a_repair(self, priced_catalogs: Catalogs) -> None:
        assert validate_config({"baseShape": "l-shape"}, priced_catalogs).warnings == []

    @pytest.mark.parametrize(
        "sections,expected",
        [
            ({"L1": "Corner"}, "sections.L1"),
            ({"F": "Corner"}, "sections.F.seater"),
            ({"F": {"seater": "2-Seater", "qty": 0}}, "sections.F.qty"),
            ({"Z9": "2-Seater"}, "sections.Z9"),
        ],
    )
    def test_section_repairs(
        self, priced_catalogs: Catalogs, sections: dict[str, Any], expected: str
    ) -> None:
        result = validate_config({"sections": sections}, priced_catalogs)
        assert warning_paths(result) == [expected]
        assert result.exit_code == 2

    def test_console_on_one_seat(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {"sections": {"F": "1-Seater"}, "console": {"required": True}}, priced_catalogs
        )
        assert warning_paths(result) == ["console.required"]

    def test_console_placement_repairs(self, catalogs: Catalogs) -> None:
        result = validate_config(
            {
                "sections": {"F": "3-Seater"},
                "console": {
                    "required": "Yes",
                    "size": "Console-99 in",
                    "placements": [
                        {"section": "front", "afterSeat": 1, "accessoryId": "retired-tray"},
                        "right_1",
                        "front_2",
                    ],
                },
            },
            catalogs,
        )
        assert warning_paths(result) == [
            "console.size",
            "console.placements[0].accessoryId",
            "console.placements[1]",
            "console.placements[2]",
        ]
        assert result.is_valid

    def test_lounger_repairs(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {
                "baseShape": "L SHAPE",
                "lounger": {
                    "required": True,
                    "numberOfLoungers": "2 Nos.",
                    "placement": "RHS",
                    "size": "Lounger-12 ft",
                },
            },
            priced_catalogs,
        )
        assert warning_paths(result) == [
            "lounger.numberOfLoungers",
            "lounger.placement",
            "lounger.size",
        ]

    def test_lounger_not_required_is_silent(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {"lounger": {"required": "No", "numberOfLoungers": 9, "placement": "middle"}},
            priced_catalogs,
        )
        assert result.warnings == []

    def test_recliner_in_inactive_zone(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {"recliner": {"R": {"required": True}, "X": {"required": True}}}, priced_catalogs
        )
        assert warning_paths(result) == ["recliner.R", "recliner.X"]

    def test_seat_width(self, priced_catalogs: Catalogs) -> None:
        result = validate_config({"dimensions": {"seatWidth": 23}}, priced_catalogs)
        assert warning_paths(result) == ["dimensions.seatWidth"]

    def test_missing_console_price(self) -> None:
        catalogs = Catalogs(prices=PriceTable(base_price=10000, console_prices={}))
        result = validate_config(
            {"sections": {"F": "3-Seater"}, "console": {"required": True, "placements": ["front_1"]}},
            catalogs,
        )
        assert warning_paths(result) == ["pricing"]
        assert "console_prices:Console-6 in" in result.warnings[0].message

    def test_seat_depth(self, priced_catalogs: Catalogs) -> None:
        result = validate_config({"dimensions": {"seatDepth": 40}}, priced_catalogs)
        assert warning_paths(result) == ["dimensions.seatDepth"]
        assert "using 22" in result.warnings[0].message

    def test_pillow_repairs(self, priced_catalogs: Catalogs) -> None:
        result = validate_config(
            {"additionalPillows": {"required": True, "quantity": 0, "type": "feather"}},
            priced_catalogs,
        )
        assert warning_paths(result) == ["additionalPillows.quantity", "additionalPillows.type"]
        assert "using 'Simple'" in result.warnings[1].message

    def test_unknown_foam_and_legs(self) -> None:
        options = OptionCatalog(
            fields={
                "foam_type": OptionField.from_values("foam_type", ("Standard", "HR"), "Standard"),
                "leg_type": OptionField.from_values("leg_type", ("Wooden",), "Wooden"),
            }
        )
        catalogs = Catalogs(
            options=options,
            prices=PriceTable(base_price=10000, foam_prices={"Standard": 0}, leg_prices={"Wooden": 0}),
        )
        result = validate_config({"foam": {"type": "Memory"}, "legs": {"type": "wooden"}}, catalogs)
        assert warning_paths(result) == ["foam.type"]
        assert result.warnings[0].suggestion == "Choose one of: Standard, HR"

    def test_unknown_discount_code(self, priced_catalogs: Catalogs) -> None:
        result = validate_config({"discount": {"code": "HALFOFF"}}, priced_catalogs)
        assert warning_paths(result) == ["pricing"]
        assert "discount_percent:HALFOFF" in result.warnings[0].message

    def test_unreadable_catalog_value(self) -> None:
        catalogs = Catalogs(
            prices=PriceTable(base_price=10000, invalid_entries=("prices.corner_percent",))
        )
        result = validate_config({"sections": {"F": "2-Seater"}}, catalogs)
        assert warning_paths(result) == ["prices.corner_percent"]
        assert result.exit_code == 2
