"""Unit tests for the text and JSON output formatters."""

from __future__ import annotations

import json

from seating.domain.catalog import Catalogs, PriceTable
from seating.domain.services import ConfigurationNormalizer, derive_pricing
from seating.infrastructure.formatters import (
    ConfigurationFormatter,
    JsonFormatter,
    PriceBreakdownFormatter,
    SlotFormatter,
)


class TestConfigurationFormatter:
    def test_console_rows(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize(
            {"sections": {"F": "3-Seater"}, "console": {"required": True, "placements": ["front_1"]}}
        )
        text = ConfigurationFormatter().format(config)
        assert "1 of 2 slot(s) placed" in text
        assert "  [0] front after seat 1" in text
        assert "  [1] none" in text
        assert "Lounger: not required" in text
        assert "Recliners: none" in text

    def test_inactive_sections_hidden(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize({"baseShape": "STANDARD", "sections": {"F": "2-Seater"}})
        text = ConfigurationFormatter().format(config)
        assert "F          2-Seater" in text
        assert "L1 " not in text


class TestSlotFormatter:
    def test_no_slots_for_one_seater(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize({"sections": {"F": "1-Seater"}})
        text = SlotFormatter().format(normalizer.summarize(config))
        assert "Max consoles: 0" in text
        assert "No legal console slots." in text


class TestPriceBreakdownFormatter:
    def test_total_row(self, normalizer: ConfigurationNormalizer, priced_catalogs: Catalogs) -> None:
        config = normalizer.normalize({"sections": {"F": "2-Seater"}})
        text = PriceBreakdownFormatter().format(derive_pricing(config, priced_catalogs))
        assert "F 2-Seater" in text
        assert "TOTAL" in text
        assert "10,000.00" in text
        assert "WARNING" not in text

    def test_missing_entries_listed(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize({"sections": {"F": "2-Seater"}})
        text = PriceBreakdownFormatter().format(derive_pricing(config))
        assert "WARNING: pricing incomplete" in text
        assert "  - base_price" in text


class TestJsonFormatter:
    def test_uses_to_dict(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize({"sections": {"F": "2-Seater"}})
        data = json.loads(JsonFormatter().format(config))
        assert data["sections"]["F"] == {"seater": "2-Seater", "qty": 1}

    def test_plain_data(self) -> None:
        assert JsonFormatter(indent=0).format({"a": 1}) == '{\n"a": 1\n}'


class TestAddOnLines:
    def test_configuration_lines(self, normalizer: ConfigurationNormalizer) -> None:
        config = normalizer.normalize(
            {
                "sections": {"F": "2-Seater"},
                "lounger": {"required": True, "numberOfLoungers": 1},
                "additionalPillows": {"required": True, "quantity": 2, "type": "Tassels"},
                "fabric": {"structureCode": "LIN-01"},
                "foam": {"type": "HR Foam"},
                "discount": {"code": "SAVE10"},
            }
        )
        text = ConfigurationFormatter().format(config)
        assert "seat 22 x 22 in" in text
        assert "Lounger: 1 No. x Lounger-5 ft 6 in" in text
        assert "Pillows: 2 x Tassels" in text
        assert "Fabric: structure LIN-01" in text
        assert "Foam: HR Foam" in text
        assert "Legs:" not in text
        assert "Discount code: SAVE10" in text

    def test_breakdown_lines(self, normalizer: ConfigurationNormalizer) -> None:
        catalogs = Catalogs(
            prices=PriceTable(
                base_price=10000,
                seat_width_percent={"26": 5.0},
                discount_percent={"save10": 10.0},
            )
        )
        config = normalizer.normalize(
            {
                "sections": {"F": "2-Seater"},
                "dimensions": {"seatWidth": 26},
                "additionalPillows": {"required": True, "quantity": 1},
                "discount": {"code": "SAVE10"},
            }
        )
        text = PriceBreakdownFormatter().format(derive_pricing(config, catalogs))
        assert "Pillows Simple" in text
        assert "Seat size +5%" in text
        assert "560.00" in text
        assert "SUBTOTAL" in text
        assert "11,760.00" in text
        assert "Discount SAVE10 -10%" in text
        assert "-1,176.00" in text
        assert "10,584.00" in text
