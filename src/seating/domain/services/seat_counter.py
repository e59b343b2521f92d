"""Seat counting over a normalized section map."""

from __future__ import annotations

from collections.abc import Mapping

from ..labels import parse_seat_count
from ..value_objects import SEAT_BEARING_TAGS, Section, SectionTag


def section_seats(section: Section) -> int:
    """Seats contributed by one section, quantity included."""
    if section.tag not in SEAT_BEARING_TAGS:
        return 0
    return parse_seat_count(section.seater_value) * section.quantity


def total_seats(sections: Mapping[SectionTag, Section]) -> int:
    """Total physical seats across the seat-bearing sections.

    Corner and backrest sections never contribute seats.
    """
    return sum(
        section_seats(sections[tag]) for tag in SEAT_BEARING_TAGS if tag in sections
    )


def max_consoles(seats: int) -> int:
    """Consoles sit between seats, so there is one fewer slot than seats."""
    return max(0, seats - 1)
