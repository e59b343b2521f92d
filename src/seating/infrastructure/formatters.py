"""Output formatters for configurations, console slots and price breakdowns."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from seating.domain.labels import format_lounger_count
from seating.domain.services import ConfigurationSummary, PriceBreakdown
from seating.domain.value_objects import ReclinerZone, SofaConfiguration

if TYPE_CHECKING:
    from seating.application.dtos import ConfigurationOutput, ShapeOptionsOutput


def _money(amount: float) -> str:
    return f"{amount:,.2f}"


RECLINER_ZONE_LABELS: dict[ReclinerZone, str] = {
    ReclinerZone.F: "Front",
    ReclinerZone.L: "Left",
    ReclinerZone.R: "Right",
    ReclinerZone.C: "Combo",
}


class ConfigurationFormatter:
    """Formats a normalized configuration as a table of selections."""

    def format(self, config: SofaConfiguration) -> str:
        lines = [
            f"CONFIGURATION ({config.shape.value}, seat {config.seat_width} x {config.seat_depth} in)",
            "=" * 60,
            f"{'Section':<10} {'Seater':<22} {'Qty':<5}",
            "-" * 60,
        ]
        for section in config.sections.values():
            if not section.is_active:
                continue
            lines.append(f"{section.tag.value:<10} {section.seater_value:<22} {section.quantity:<5}")

        lines.append("-" * 60)
        console = config.console
        if console.required:
            placed = len(console.active_placements)
            lines.append(f"Console: {console.size}, {placed} of {console.quantity} slot(s) placed")
            for index, placement in enumerate(console.placements):
                if placement.is_empty:
                    lines.append(f"  [{index}] none")
                    continue
                accessory = f", accessory {placement.accessory_id}" if placement.accessory_id else ""
                lines.append(
                    f"  [{index}] {placement.section.value} after seat {placement.after_seat}{accessory}"  # type: ignore[union-attr]
                )
        else:
            lines.append("Console: not required")

        lounger = config.lounger
        if lounger.required:
            storage = " with storage" if lounger.storage else ""
            lines.append(
                f"Lounger: {format_lounger_count(lounger.number_of_loungers)} x {lounger.size}, "
                f"{lounger.placement.value}{storage}"
            )
        else:
            lines.append("Lounger: not required")

        recliners = [
            f"{RECLINER_ZONE_LABELS[zone]}: {cfg.number_of_recliners} ({cfg.positioning.value})"
            for zone, cfg in config.recliners.items()
            if cfg.required
        ]
        lines.append(f"Recliners: {', '.join(recliners) if recliners else 'none'}")

        pillows = config.pillows
        if pillows.required:
            lines.append(f"Pillows: {pillows.count} x {pillows.pillow_type}")
        else:
            lines.append("Pillows: not required")
        fabric = config.fabric
        codes = [
            f"{label} {code}"
            for label, code in (
                ("structure", fabric.structure_code),
                ("backrest", fabric.backrest_code),
                ("seat", fabric.seat_code),
                ("headrest", fabric.headrest_code),
            )
            if code
        ]
        lines.append(f"Fabric: {', '.join(codes) if codes else 'not chosen'}")
        if config.foam_type:
            lines.append(f"Foam: {config.foam_type}")
        if config.leg_type:
            lines.append(f"Legs: {config.leg_type}")
        if config.discount_code:
            lines.append(f"Discount code: {config.discount_code}")
        return "\n".join(lines)


class SlotFormatter:
    """Formats seat totals and the legal console slots."""

    def format(self, summary: ConfigurationSummary) -> str:
        lines = [
            "CONSOLE SLOTS",
            "=" * 60,
            f"Total seats: {summary.total_seats}",
            f"Max consoles: {summary.max_consoles}",
            "-" * 60,
        ]
        if not summary.legal_slots:
            lines.append("No legal console slots.")
        for slot in summary.legal_slots:
            lines.append(f"{slot.value:<12} {slot.label}")
        return "\n".join(lines)


class PriceBreakdownFormatter:
    """Formats a price breakdown as a table with totals."""

    def format(self, breakdown: PriceBreakdown) -> str:
        lines = [
            "PRICE BREAKDOWN",
            "=" * 72,
            f"{'Item':<24} {'Qty':<5} {'Price':>14} {'Fabric (m)':>12} {'Width':>8}",
            "-" * 72,
        ]
        for section in breakdown.sections:
            item = f"{section.tag.value} {section.seater_value}"
            lines.append(
                f"{item:<24} {section.quantity:<5} {_money(section.price):>14} "
                f"{section.fabric_meters:>12.2f} {section.width_in:>8}"
            )

        lounger = breakdown.lounger
        if lounger.quantity:
            lines.append(
                f"{'Lounger ' + lounger.size:<24} {lounger.quantity:<5} "
                f"{_money(lounger.price):>14} {lounger.fabric_meters:>12.2f}"
            )
        recliner = breakdown.recliner
        if recliner.units:
            lines.append(f"{'Recliner mechanism':<24} {recliner.units:<5} {_money(recliner.price):>14}")
        for line in breakdown.console.lines:
            item = f"Console {line.section.value} #{line.after_seat}"
            lines.append(
                f"{item:<24} {1:<5} {_money(line.price):>14} {line.fabric_meters:>12.2f}"
            )
        pillows = breakdown.pillows
        if pillows.quantity:
            lines.append(
                f"{'Pillows ' + pillows.pillow_type:<24} {pillows.quantity:<5} {_money(pillows.price):>14}"
            )
        charge = breakdown.fabric_charge
        if charge.code is not None:
            lines.append(f"{'Fabric ' + charge.code:<24} {'':<5} {_money(charge.price):>14}")
        upgrades = breakdown.upgrades
        if upgrades.foam_type:
            lines.append(f"{'Foam ' + upgrades.foam_type:<24} {'':<5} {_money(upgrades.foam_price):>14}")
        if upgrades.dimension_price:
            percent = upgrades.seat_depth_percent + upgrades.seat_width_percent
            item = f"Seat size +{percent:g}%"
            lines.append(f"{item:<24} {'':<5} {_money(upgrades.dimension_price):>14}")
        if upgrades.leg_type:
            lines.append(f"{'Legs ' + upgrades.leg_type:<24} {'':<5} {_money(upgrades.leg_price):>14}")
        discount = breakdown.discount
        if discount.amount:
            lines.append(f"{'SUBTOTAL':<24} {'':<5} {_money(breakdown.subtotal_price):>14}")
            item = f"Discount {discount.code} -{discount.percent:g}%"
            lines.append(f"{item:<24} {'':<5} {_money(-discount.amount):>14}")

        lines.append("-" * 72)
        lines.append(
            f"{'TOTAL':<24} {'':<5} {_money(breakdown.total_price):>14} "
            f"{breakdown.total_fabric_meters:>12.2f} {breakdown.approximate_width_in:>8}"
        )
        if breakdown.incomplete:
            lines.append("")
            lines.append("WARNING: pricing incomplete, missing catalog entries:")
            for entry in breakdown.missing:
                lines.append(f"  - {entry}")
        return "\n".join(lines)


class ShapeOptionsFormatter:
    """Formats the options a base shape allows."""

    def format(self, output: "ShapeOptionsOutput") -> str:
        lines = [f"SHAPE {output.shape.value}", "=" * 60]
        for tag, options in output.allowed_options.items():
            lines.append(f"{tag.value:<4} {', '.join(options)}")
        lines.append("-" * 60)
        lines.append(f"Console zones: {', '.join(zone.value for zone in output.console_zones)}")
        lines.append(f"Recliner zones: {', '.join(zone.value for zone in output.recliner_zones)}")
        for count, sides in output.lounger_placements.items():
            lines.append(f"Loungers x{count}: {', '.join(side.value for side in sides)}")
        lines.append(f"Console sizes: {', '.join(output.console_sizes)}")
        lines.append(f"Lounger sizes: {', '.join(output.lounger_sizes)}")
        lines.append(f"Seat widths: {', '.join(str(width) for width in output.seat_widths)}")
        lines.append(f"Seat depths: {', '.join(str(depth) for depth in output.seat_depths)}")
        lines.append(f"Pillow types: {', '.join(output.pillow_types)}")
        return "\n".join(lines)


class TextFormatter:
    """Combines the table formatters for a full configuration report."""

    def __init__(self) -> None:
        self.configuration = ConfigurationFormatter()
        self.slots = SlotFormatter()
        self.pricing = PriceBreakdownFormatter()
        self.shape_options = ShapeOptionsFormatter()

    def format(self, output: "ConfigurationOutput") -> str:
        parts = [self.configuration.format(output.configuration), self.slots.format(output.summary)]
        if output.breakdown is not None:
            parts.append(self.pricing.format(output.breakdown))
        return "\n\n".join(parts)


class JsonFormatter:
    """Formats any output exposing ``to_dict`` as indented JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format(self, data: Any) -> str:
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

