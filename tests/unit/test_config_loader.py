"""Unit tests for configuration loading and schema checks."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from seating.application.config import (
    ConfigError,
    ConfigurationInput,
    format_json_path,
    load_config,
    load_config_from_dict,
)


class TestFormatJsonPath:
    """Tests for format_json_path."""

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("console", "placements", 0, "afterSeat"), "console.placements[0].afterSeat"),
            (("sections", "F", "seater"), "sections.F.seater"),
            ((0,), "[0]"),
            ((), ""),
        ],
    )
    def test_paths(self, loc: tuple[str | int, ...], expected: str) -> None:
        assert format_json_path(loc) == expected


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_file(self, write_json: Callable[[str, Any], Path]) -> None:
        path = write_json("sofa.json", {"baseShape": "L SHAPE", "sections": {"F": "3-Seater"}})
        config = load_config(path)
        assert isinstance(config, ConfigurationInput)
        assert config.base_shape == "L SHAPE"
        assert config.sections["F"].seater == "3-Seater"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "sofa.json"
        path.write_text('{\n  "baseShape": "STANDARD",\n}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3
        assert "Invalid JSON" in str(error)

    def test_schema_error(self, write_json: Callable[[str, Any], Path]) -> None:
        path = write_json("sofa.json", {"sections": ["F", "L1"]})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "sections"
        assert str(error).startswith("Configuration validation failed:")


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict and the lenient schema."""

    def test_loose_values_accepted(self) -> None:
        config = load_config_from_dict(
            {
                "baseShape": "l-shape",
                "sections": {"F": 3, "L1": None, "L2": {"seater": "2 seater", "qty": "2"}},
                "console": {"required": "Yes", "placements": ["front_1", None]},
                "lounger": {"required": 1, "numberOfLoungers": "2 Nos."},
                "recliner": {"F": {"required": "true"}},
            }
        )
        assert config.sections["F"].seater == 3
        assert config.sections["L2"].qty == "2"
        assert config.console is not None
        assert config.console.placements[0].position == "front_1"
        assert config.lounger is not None
        assert config.lounger.number_of_loungers == "2 Nos."

    def test_nested_value_where_scalar_expected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"sections": {"F": {"seater": {"label": "3-Seater"}}}})
        assert exc_info.value.details[0]["path"] == "sections.F.seater"

    def test_placement_path_in_details(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"console": {"placements": [{"section": "front", "afterSeat": [1, 2]}]}}
            )
        assert exc_info.value.details[0]["path"] == "console.placements[0].afterSeat"

    def test_to_raw_keeps_aliases_and_legacy_keys(self) -> None:
        config = load_config_from_dict(
            {
                "shape": "U SHAPE",
                "frontSeatCount": 3,
                "dimensions": {"seatWidth": 24},
                "lounger": {"required": True, "numberOfLoungers": 2},
            }
        )
        raw = config.to_raw()
        assert raw["shape"] == "U SHAPE"
        assert raw["frontSeatCount"] == 3
        assert raw["dimensions"] == {"seatWidth": 24}
        assert raw["lounger"] == {"required": True, "numberOfLoungers": 2}
        assert "baseShape" not in raw
