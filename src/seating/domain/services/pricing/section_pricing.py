"""Per-section price, fabric and width rules.

Price and fabric use separate rules even where they look alike: the price
rules are percentages of the 2-seater base price, while fabric comes from
its own tabulated constants.
"""

from __future__ import annotations

from ...catalog import FabricTable, PriceTable
from ...labels import parse_seater
from ...value_objects import SeaterKind, Section
from .constants import (
    BACKREST_WIDTH,
    BASE_SEATS,
    SEATER_FABRIC_REFERENCE_IN,
    corner_width,
)


def seater_multiplier(seats: int, additional_seat_percent: float) -> float:
    """Multiplier of the base price for a plain seater with ``seats`` seats.

    Each seat above or below the 2-seater reference moves the price by
    ``additional_seat_percent``; an unreadable seat count prices as 0.
    """
    if seats < 1:
        return 0.0
    return 1.0 + (additional_seat_percent / 100.0) * (seats - BASE_SEATS)


def section_unit_price(seater_value: str, base_price: float, prices: PriceTable) -> float:
    """Price of one unit of a section."""
    value = parse_seater(seater_value)
    if value.kind is SeaterKind.NONE:
        return 0.0
    if value.kind is SeaterKind.BACKREST:
        return round(base_price * prices.backrest_percent / 100.0, 2)
    if value.kind is SeaterKind.CORNER:
        return round(base_price * prices.corner_percent / 100.0, 2)
    return round(base_price * seater_multiplier(value.seats, prices.additional_seat_percent), 2)


def section_price(section: Section, base_price: float, prices: PriceTable) -> float:
    return round(section_unit_price(section.seater_value, base_price, prices) * section.quantity, 2)


def section_width(section: Section, seat_width: int) -> int:
    """Overall width of a section in inches, quantity included."""
    value = parse_seater(section.seater_value)
    if value.kind is SeaterKind.CORNER:
        unit = corner_width(seat_width)
    elif value.kind is SeaterKind.BACKREST:
        unit = BACKREST_WIDTH
    elif value.kind is SeaterKind.SEATER:
        unit = value.seats * seat_width
    else:
        unit = 0
    return unit * section.quantity


def section_fabric(section: Section, seat_width: int, fabric: FabricTable) -> float:
    """Fabric meters consumed by a section, quantity included."""
    value = parse_seater(section.seater_value)
    if value.kind is SeaterKind.CORNER:
        meters = fabric.corner_meters * section.quantity
    elif value.kind is SeaterKind.BACKREST:
        meters = fabric.backrest_meters * section.quantity
    elif value.kind is SeaterKind.SEATER:
        width = value.seats * seat_width * section.quantity
        meters = (width / SEATER_FABRIC_REFERENCE_IN) * fabric.seater_meters_per_120_in
    else:
        meters = 0.0
    return round(meters, 2)
