"""Static shape topology tables.

For each base shape this module answers which structural sections exist,
which seater values each section may take, and which console, lounger and
recliner zones are available. Everything here is a pure lookup.
"""

from __future__ import annotations

from typing import Any

from .labels import fold, normalize_shape, parse_section_tag, parse_seater
from .value_objects import (
    NONE_VALUE,
    BaseShape,
    ConsoleZone,
    ReclinerZone,
    SectionTag,
    Side,
)


# First entry of every option list is the default for that section
SEATER_OPTIONS: tuple[str, ...] = (
    "2-Seater",
    "3-Seater",
    "4-Seater",
    "1-Seater",
    "2-Seater No Mech",
    "3-Seater No Mech",
    "4-Seater No Mech",
)
CORNER_OPTIONS: tuple[str, ...] = ("Corner", "Backrest")
BACKREST_OPTIONS: tuple[str, ...] = ("Backrest",)
NONE_OPTIONS: tuple[str, ...] = (NONE_VALUE,)

TAG_OPTIONS: dict[SectionTag, tuple[str, ...]] = {
    SectionTag.F: SEATER_OPTIONS,
    SectionTag.L1: CORNER_OPTIONS,
    SectionTag.L2: SEATER_OPTIONS,
    SectionTag.R1: CORNER_OPTIONS,
    SectionTag.R2: SEATER_OPTIONS,
    SectionTag.C1: BACKREST_OPTIONS,
    SectionTag.C2: SEATER_OPTIONS,
}

ACTIVE_SECTIONS: dict[BaseShape, frozenset[SectionTag]] = {
    BaseShape.STANDARD: frozenset({SectionTag.F}),
    BaseShape.L_SHAPE: frozenset({SectionTag.F, SectionTag.L1, SectionTag.L2}),
    BaseShape.U_SHAPE: frozenset(
        {SectionTag.F, SectionTag.L1, SectionTag.L2, SectionTag.R1, SectionTag.R2}
    ),
    BaseShape.COMBO: frozenset(SectionTag),
}

CONSOLE_ZONES: dict[BaseShape, tuple[ConsoleZone, ...]] = {
    BaseShape.STANDARD: (ConsoleZone.FRONT,),
    BaseShape.L_SHAPE: (ConsoleZone.FRONT, ConsoleZone.LEFT),
    BaseShape.U_SHAPE: (ConsoleZone.FRONT, ConsoleZone.LEFT, ConsoleZone.RIGHT),
    BaseShape.COMBO: tuple(ConsoleZone),
}

RECLINER_ZONES: dict[BaseShape, tuple[ReclinerZone, ...]] = {
    BaseShape.STANDARD: (ReclinerZone.F,),
    BaseShape.L_SHAPE: (ReclinerZone.F, ReclinerZone.L),
    BaseShape.U_SHAPE: (ReclinerZone.F, ReclinerZone.L, ReclinerZone.R),
    BaseShape.COMBO: tuple(ReclinerZone),
}

# An L shape has a single free flank, so it takes one lounger on the left
MAX_LOUNGERS: dict[BaseShape, int] = {
    BaseShape.STANDARD: 2,
    BaseShape.L_SHAPE: 1,
    BaseShape.U_SHAPE: 2,
    BaseShape.COMBO: 2,
}


def active_sections(shape: BaseShape | str) -> frozenset[SectionTag]:
    return ACTIVE_SECTIONS[normalize_shape(shape)]


def is_active(shape: BaseShape | str, tag: SectionTag | str) -> bool:
    section_tag = parse_section_tag(tag)
    return section_tag is not None and section_tag in active_sections(shape)


def allowed_options(shape: BaseShape | str, tag: SectionTag | str) -> list[str]:
    """Ordered legal seater values for a section; the first is the default.

    Inactive and unknown tags return ``["none"]``.
    """
    section_tag = parse_section_tag(tag)
    if section_tag is None or section_tag not in active_sections(shape):
        return list(NONE_OPTIONS)
    return list(TAG_OPTIONS[section_tag])


def default_option(shape: BaseShape | str, tag: SectionTag | str) -> str:
    return allowed_options(shape, tag)[0]


def match_option(
    shape: BaseShape | str, tag: SectionTag | str, raw: Any
) -> str | None:
    """Canonical allowed value matching ``raw``, or None if it is not legal.

    Matching ignores case and spacing, so "3 seater" and "3-SEATER" both
    resolve to "3-Seater".
    """
    options = allowed_options(shape, tag)
    parsed = parse_seater(raw)
    if parsed.label in options:
        return parsed.label
    key = fold(raw)
    for option in options:
        if fold(option) == key:
            return option
    return None


def console_zones(shape: BaseShape | str) -> tuple[ConsoleZone, ...]:
    return CONSOLE_ZONES[normalize_shape(shape)]


def recliner_zones(shape: BaseShape | str) -> tuple[ReclinerZone, ...]:
    return RECLINER_ZONES[normalize_shape(shape)]


def max_loungers(shape: BaseShape | str) -> int:
    return MAX_LOUNGERS[normalize_shape(shape)]


def lounger_placements(shape: BaseShape | str, count: int) -> list[Side]:
    """Legal lounger placements for a shape and lounger count."""
    resolved = normalize_shape(shape)
    if resolved is BaseShape.L_SHAPE:
        return [Side.LHS]
    if count >= 2:
        return [Side.BOTH]
    return [Side.LHS, Side.RHS]
