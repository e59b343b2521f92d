"""Console slot enumeration and placement reconciliation.

A console sits between two adjacent seats of one seat-bearing zone, so a
zone whose seater value holds ``n`` seats offers the slots "after seat 1"
through "after seat n-1". The number of consoles is bounded by the total
seat count of the product, not by the number of legal slots: a placement
list can therefore hold more entries than there are distinct slots, and
the surplus entries stay as empty placeholders.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..labels import parse_console_position, parse_console_zone, parse_seat_count
from ..topology import console_zones
from ..value_objects import (
    ZONE_SECTION,
    BaseShape,
    ConsolePlacement,
    ConsoleSlot,
    ConsoleZone,
    Section,
    SectionTag,
)
from .seat_counter import max_consoles, total_seats

logger = logging.getLogger(__name__)


def parse_placement(raw: Any, accessory: Any = None) -> ConsolePlacement:
    """Read one stored placement entry.

    Accepts placement records (``{"section": "front", "afterSeat": 2}``),
    position values (``"front_2"``) and records whose position is given as
    ``"after_2"`` next to a section code. Anything unreadable becomes the
    empty placeholder.
    """
    if isinstance(raw, ConsolePlacement):
        return raw

    zone: ConsoleZone | None = None
    seat: int | None = None
    accessory_id = accessory

    if isinstance(raw, Mapping):
        zone = parse_console_zone(raw.get("section"))
        seat_raw = raw.get("afterSeat", raw.get("after_seat"))
        if seat_raw is None:
            seat_raw = raw.get("position", raw.get("value"))
        position_zone, seat = parse_console_position(seat_raw)
        zone = zone or position_zone
        accessory_id = raw.get("accessoryId", raw.get("accessory_id", accessory))
    elif raw is not None:
        zone, seat = parse_console_position(raw)

    if seat is not None and seat < 1:
        seat = None
    if accessory_id is not None:
        accessory_id = str(accessory_id).strip() or None
        if accessory_id is not None and accessory_id.lower() == "none":
            accessory_id = None

    if zone is None or seat is None:
        return ConsolePlacement(accessory_id=accessory_id)
    return ConsolePlacement(section=zone, after_seat=seat, accessory_id=accessory_id)


def parse_placements(raw_console: Mapping[str, Any] | None) -> list[ConsolePlacement]:
    """Read the placement list of a stored console record.

    Older records keep accessories in a separate list aligned by index with
    the placements; both lists are merged into composite placements here.
    """
    if not raw_console:
        return []
    raw_placements = raw_console.get("placements") or []
    raw_accessories = raw_console.get("accessories") or []
    if not isinstance(raw_placements, Sequence) or isinstance(raw_placements, str):
        raw_placements = []
    if not isinstance(raw_accessories, Sequence) or isinstance(raw_accessories, str):
        raw_accessories = []

    placements: list[ConsolePlacement] = []
    for index, raw in enumerate(raw_placements):
        accessory = raw_accessories[index] if index < len(raw_accessories) else None
        placements.append(parse_placement(raw, accessory))
    return placements


class ConsolePlacementEngine:
    """Enumerates legal console slots and reconciles stored placements."""

    def legal_slots(
        self, sections: Mapping[SectionTag, Section], shape: BaseShape
    ) -> list[ConsoleSlot]:
        """Every legal slot, in zone order then seat order."""
        slots: list[ConsoleSlot] = []
        for zone in console_zones(shape):
            section = sections.get(ZONE_SECTION[zone])
            if section is None:
                continue
            seats = parse_seat_count(section.seater_value)
            for after_seat in range(1, seats):
                slots.append(ConsoleSlot(section=zone, after_seat=after_seat))
        return slots

    def reconcile(
        self,
        placements: Iterable[ConsolePlacement],
        sections: Mapping[SectionTag, Section],
        shape: BaseShape,
        valid_accessories: frozenset[str] | None = None,
    ) -> tuple[ConsolePlacement, ...]:
        """Repair a placement list against the current configuration.

        1. Resize to exactly ``max_consoles`` entries, padding with empty
           placeholders and truncating from the tail.
        2. Replace placements outside the legal slot set with placeholders.
        3. Keep only the first occurrence of each slot, in index order.
        4. Drop accessories from placeholders, and accessories not present
           in ``valid_accessories`` when a catalog list is given.

        Non-empty placements keep their index and relative order.
        """
        target = max_consoles(total_seats(sections))
        current = list(placements)[:target]
        if len(current) < target:
            current.extend(ConsolePlacement.empty() for _ in range(target - len(current)))

        legal = {(slot.section, slot.after_seat) for slot in self.legal_slots(sections, shape)}
        seen: set[tuple[ConsoleZone, int]] = set()
        reconciled: list[ConsolePlacement] = []

        for index, placement in enumerate(current):
            key = placement.key
            if key is None:
                reconciled.append(ConsolePlacement.empty())
                continue
            if key not in legal:
                logger.debug(
                    f"Console placement {index} ({key[0].value} after seat {key[1]}) "
                    f"is not a legal slot; clearing"
                )
                reconciled.append(ConsolePlacement.empty())
                continue
            if key in seen:
                logger.debug(
                    f"Console placement {index} duplicates {key[0].value} after "
                    f"seat {key[1]}; clearing"
                )
                reconciled.append(ConsolePlacement.empty())
                continue
            seen.add(key)

            accessory_id = placement.accessory_id
            if (
                accessory_id is not None
                and valid_accessories is not None
                and accessory_id not in valid_accessories
            ):
                logger.debug(f"Console accessory {accessory_id!r} not in catalog; clearing")
                accessory_id = None
            reconciled.append(
                ConsolePlacement(
                    section=placement.section,
                    after_seat=placement.after_seat,
                    accessory_id=accessory_id,
                )
            )

        return tuple(reconciled)
