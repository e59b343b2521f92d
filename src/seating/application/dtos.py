"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

from seating.domain.services import (
    ConfigurationEvent,
    ConfigurationSummary,
    ConsoleAccessoryChanged,
    ConsolePlacementChanged,
    ConsoleSizeChanged,
    ConsoleToggled,
    DiscountApplied,
    FabricChanged,
    FoamChanged,
    LegsChanged,
    LoungerEdited,
    PillowsEdited,
    PriceBreakdown,
    ReclinerEdited,
    SeatDepthChanged,
    SeatWidthChanged,
    SectionEdited,
    ShapeChanged,
)
from seating.domain.value_objects import (
    BaseShape,
    ConsoleZone,
    ReclinerZone,
    SectionTag,
    Side,
    SofaConfiguration,
)


EVENT_TYPES: dict[str, type] = {
    "shape_changed": ShapeChanged,
    "section_edited": SectionEdited,
    "console_toggled": ConsoleToggled,
    "console_size_changed": ConsoleSizeChanged,
    "console_placement_changed": ConsolePlacementChanged,
    "console_accessory_changed": ConsoleAccessoryChanged,
    "lounger_edited": LoungerEdited,
    "recliner_edited": ReclinerEdited,
    "seat_width_changed": SeatWidthChanged,
    "seat_depth_changed": SeatDepthChanged,
    "pillows_edited": PillowsEdited,
    "fabric_changed": FabricChanged,
    "foam_changed": FoamChanged,
    "legs_changed": LegsChanged,
    "discount_applied": DiscountApplied,
}


def _matches_type(value: Any, hint: Any) -> bool:
    """Check a JSON payload value against an event field annotation."""
    if get_origin(hint) in (Union, UnionType):
        return any(_matches_type(value, arg) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)


def build_event(event_type: str, payload: Mapping[str, Any] | None = None) -> ConfigurationEvent:
    """Build a configuration event from its type name and payload.

    Raises:
        ValueError: If the event type is unknown or the payload does not
            match the event's fields.
    """
    event_class = EVENT_TYPES.get(event_type)
    if event_class is None:
        raise ValueError(
            f"Unknown event type '{event_type}'. Expected one of: {', '.join(EVENT_TYPES)}"
        )
    data = dict(payload or {})
    allowed = {f.name for f in fields(event_class)}
    unexpected = sorted(set(data) - allowed)
    if unexpected:
        raise ValueError(f"Unexpected fields for {event_type}: {', '.join(unexpected)}")
    hints = get_type_hints(event_class)
    for name, value in data.items():
        if not _matches_type(value, hints[name]):
            raise ValueError(f"Invalid value for {event_type}.{name}: {value!r}")
    try:
        return event_class(**data)
    except TypeError as e:
        raise ValueError(f"Invalid payload for {event_type}: {e}") from e


@dataclass
class ConfigurationOutput:
    """Output DTO for a normalized configuration and its derived values."""

    configuration: SofaConfiguration
    summary: ConfigurationSummary
    breakdown: PriceBreakdown | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "configuration": self.configuration.to_dict(),
            "summary": self.summary.to_dict(),
        }
        if self.breakdown is not None:
            data["pricing"] = self.breakdown.to_dict()
        return data


@dataclass
class ShapeOptionsOutput:
    """Output DTO describing what a base shape allows."""

    shape: BaseShape
    active_sections: list[SectionTag]
    allowed_options: dict[SectionTag, list[str]]
    console_zones: list[ConsoleZone]
    recliner_zones: list[ReclinerZone]
    max_loungers: int
    lounger_placements: dict[int, list[Side]]
    console_sizes: list[str] = field(default_factory=list)
    lounger_sizes: list[str] = field(default_factory=list)
    seat_widths: list[int] = field(default_factory=list)
    seat_depths: list[int] = field(default_factory=list)
    pillow_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.value,
            "active_sections": [tag.value for tag in self.active_sections],
            "allowed_options": {
                tag.value: options for tag, options in self.allowed_options.items()
            },
            "console_zones": [zone.value for zone in self.console_zones],
            "recliner_zones": [zone.value for zone in self.recliner_zones],
            "max_loungers": self.max_loungers,
            "lounger_placements": {
                str(count): [side.value for side in sides]
                for count, sides in self.lounger_placements.items()
            },
            "console_sizes": self.console_sizes,
            "lounger_sizes": self.lounger_sizes,
            "seat_widths": self.seat_widths,
            "seat_depths": self.seat_depths,
            "pillow_types": self.pillow_types,
        }
