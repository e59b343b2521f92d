"""Parsing of loosely formatted labels into domain values.

Stored configurations carry years of hand-typed and legacy-formatted
strings ("L SHAPE", "l-shape", "3 seater", "2 Nos.", "Yes"). Every such
string is folded here, once, into a closed domain type. The rest of the
engine only sees the parsed values.

All functions are total: they return a fallback instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .value_objects import (
    NONE_VALUE,
    BaseShape,
    ConsoleZone,
    SeaterKind,
    SeaterValue,
    SectionTag,
    Side,
)


_SEPARATORS = re.compile(r"[\s_\-.]+")
_LEADING_INT = re.compile(r"^\s*(\d+)")
_NO_MECH = re.compile(r"no\s*[-_]?\s*mech", re.IGNORECASE)
_FEET = re.compile(r"(\d+(?:\.\d+)?)\s*(?:ft|feet|foot|')", re.IGNORECASE)
_INCHES = re.compile(r"(\d+(?:\.\d+)?)\s*(?:in\b|inch|inches|\")", re.IGNORECASE)

_SHAPE_ALIASES: dict[str, BaseShape] = {
    "standard": BaseShape.STANDARD,
    "straight": BaseShape.STANDARD,
    "lshape": BaseShape.L_SHAPE,
    "l": BaseShape.L_SHAPE,
    "lshaped": BaseShape.L_SHAPE,
    "ushape": BaseShape.U_SHAPE,
    "u": BaseShape.U_SHAPE,
    "ushaped": BaseShape.U_SHAPE,
    "combo": BaseShape.COMBO,
}

_TRUE_STRINGS = frozenset({"yes", "y", "true", "1", "on", "required"})

_SIDE_ALIASES: dict[str, Side] = {
    "lhs": Side.LHS,
    "left": Side.LHS,
    "l": Side.LHS,
    "rhs": Side.RHS,
    "right": Side.RHS,
    "r": Side.RHS,
    "both": Side.BOTH,
}

_ZONE_ALIASES: dict[str, ConsoleZone] = {
    "front": ConsoleZone.FRONT,
    "f": ConsoleZone.FRONT,
    "left": ConsoleZone.LEFT,
    "l": ConsoleZone.LEFT,
    "l2": ConsoleZone.LEFT,
    "right": ConsoleZone.RIGHT,
    "r": ConsoleZone.RIGHT,
    "r2": ConsoleZone.RIGHT,
    "combo": ConsoleZone.COMBO,
    "c": ConsoleZone.COMBO,
    "c2": ConsoleZone.COMBO,
}


def fold(text: Any) -> str:
    """Reduce a label to a case- and separator-insensitive key.

    >>> fold("Lounger-6 ft 6 in")
    'lounger6ft6in'
    """
    if text is None:
        return ""
    return _SEPARATORS.sub("", str(text).strip().lower())


def normalize_shape(raw: Any) -> BaseShape:
    """Map any textual shape variant to a BaseShape; unknown values become STANDARD."""
    if isinstance(raw, BaseShape):
        return raw
    return _SHAPE_ALIASES.get(fold(raw), BaseShape.STANDARD)


def is_known_shape(raw: Any) -> bool:
    return isinstance(raw, BaseShape) or fold(raw) in _SHAPE_ALIASES


def parse_section_tag(raw: Any) -> SectionTag | None:
    if isinstance(raw, SectionTag):
        return raw
    key = str(raw).strip().upper() if raw is not None else ""
    try:
        return SectionTag(key)
    except ValueError:
        return None


def parse_seater(raw: Any) -> SeaterValue:
    """Parse a seater label into a tagged SeaterValue.

    Integers are read as plain seat counts, which is how the older sofa
    configurator stored its ``frontSeatCount`` fields. A label that names
    no role and carries no leading integer parses as a zero-seat seater.
    """
    if raw is None or isinstance(raw, bool):
        return SeaterValue(kind=SeaterKind.NONE)
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return SeaterValue(kind=SeaterKind.NONE)
        seats = max(0, int(raw))
        if seats == 0:
            return SeaterValue(kind=SeaterKind.NONE)
        return SeaterValue(
            kind=SeaterKind.SEATER, seats=seats, label=seater_label(seats)
        )

    text = str(raw).strip()
    lowered = text.lower()
    if not lowered or lowered == NONE_VALUE:
        return SeaterValue(kind=SeaterKind.NONE)
    if "backrest" in lowered:
        return SeaterValue(kind=SeaterKind.BACKREST, label="Backrest")
    if "corner" in lowered:
        return SeaterValue(kind=SeaterKind.CORNER, label="Corner")

    match = _LEADING_INT.match(text)
    if not match:
        return SeaterValue(kind=SeaterKind.SEATER, seats=0, label=text)
    seats = int(match.group(1))
    has_mechanism = _NO_MECH.search(text) is None
    return SeaterValue(
        kind=SeaterKind.SEATER,
        seats=seats,
        has_mechanism=has_mechanism,
        label=seater_label(seats, has_mechanism) if seats > 0 else text,
    )


def seater_label(seats: int, has_mechanism: bool = True) -> str:
    label = f"{seats}-Seater"
    if not has_mechanism:
        label += " No Mech"
    return label


def parse_seat_count(raw: Any) -> int:
    """Leading seat count of a seater label; 0 for none, roles and junk."""
    value = parse_seater(raw)
    return value.seats if value.is_seater else 0


def parse_bool(raw: Any) -> bool:
    """Coerce the heterogeneous yes/no encodings of stored data to a bool."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    if isinstance(raw, (int, float)):
        return bool(raw) and not (isinstance(raw, float) and math.isnan(raw))
    return str(raw).strip().lower() in _TRUE_STRINGS


def parse_count(raw: Any, default: int = 0) -> int:
    """Read an integer count from values like ``2``, ``"2 Nos."`` or ``"1 No."``."""
    if isinstance(raw, bool) or raw is None:
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else default
    text = str(raw).strip()
    match = re.match(r"^-?\d+", text)
    if not match:
        return default
    return int(match.group(0))


def format_lounger_count(count: int) -> str:
    return "1 No." if count == 1 else f"{count} Nos."


def parse_side(raw: Any) -> Side | None:
    if isinstance(raw, Side):
        return raw
    return _SIDE_ALIASES.get(fold(raw))


def parse_console_zone(raw: Any) -> ConsoleZone | None:
    if isinstance(raw, ConsoleZone):
        return raw
    return _ZONE_ALIASES.get(fold(raw))


def parse_console_position(raw: Any) -> tuple[ConsoleZone | None, int | None]:
    """Split a position value such as ``"front_2"`` or ``"after_2"``.

    The ``after_N`` form carries no zone; the caller supplies it.
    """
    if raw is None:
        return None, None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return None, raw
    if isinstance(raw, float):
        return (None, int(raw)) if raw.is_integer() else (None, None)
    text = str(raw).strip().lower()
    if not text or text == NONE_VALUE:
        return None, None
    if text.isdigit():
        return None, int(text)
    head, _, tail = text.rpartition("_")
    if not head or not tail.isdigit():
        return None, None
    seat = int(tail)
    if head == "after":
        return None, seat
    return parse_console_zone(head), seat


def parse_size_inches(raw: Any) -> int | None:
    """Total inches of a size label such as ``"Lounger-6 ft 6 in"``.

    Returns None when the label carries no feet or inch figure.
    """
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return int(raw) if math.isfinite(raw) else None
    text = str(raw)
    feet = _FEET.search(text)
    inches = _INCHES.search(text)
    if feet is None and inches is None:
        return None
    total = 0.0
    if feet is not None:
        total += float(feet.group(1)) * 12
    if inches is not None:
        total += float(inches.group(1))
    return int(round(total))


def parse_int(raw: Any) -> int | None:
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None
