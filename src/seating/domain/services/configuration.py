"""Full normalization pipeline and event reducer.

The pipeline runs SectionNormalizer, then seat counting, then console
reconciliation and the accessory normalizers. Every stage consumes only
the output of the previous stage plus the read-only catalogs, so running
the pipeline on its own output returns the same configuration.

UI mutations are expressed as events. ``reduce`` applies one event to the
serialized state and re-runs the whole pipeline; derived fields are never
patched in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from ..catalog import CONSOLE_ACCESSORY_FIELD, Catalogs, OptionField
from ..labels import normalize_shape, parse_bool, parse_int, parse_section_tag
from ..topology import (
    active_sections,
    allowed_options,
    lounger_placements,
    recliner_zones,
)
from ..value_objects import (
    ALL_SECTION_TAGS,
    BaseShape,
    ConsoleConfig,
    ConsoleSlot,
    FabricSelection,
    ReclinerZone,
    SectionTag,
    Side,
    SofaConfiguration,
)
from .accessories import LoungerNormalizer, PillowNormalizer, ReclinerNormalizer
from .console_placement import ConsolePlacementEngine, parse_placements
from .section_normalizer import SectionNormalizer
from .seat_counter import max_consoles, total_seats

logger = logging.getLogger(__name__)


# Flat keys written by the older sofa configurator, per section tag
LEGACY_SECTION_KEYS: dict[SectionTag, tuple[str, ...]] = {
    SectionTag.F: ("frontSeatCount", "frontSeats"),
    SectionTag.L1: ("l1Option", "l1"),
    SectionTag.L2: ("l2SeatCount", "l2"),
    SectionTag.R1: ("r1Option", "r1"),
    SectionTag.R2: ("r2SeatCount", "r2"),
    SectionTag.C1: ("c1Option", "c1"),
    SectionTag.C2: ("c2SeatCount", "c2"),
}


# --- Events ---


@dataclass(frozen=True)
class ShapeChanged:
    shape: str


@dataclass(frozen=True)
class SectionEdited:
    tag: str
    seater: str | None = None
    quantity: int | None = None


@dataclass(frozen=True)
class ConsoleToggled:
    required: bool


@dataclass(frozen=True)
class ConsoleSizeChanged:
    size: str


@dataclass(frozen=True)
class ConsolePlacementChanged:
    """Point console slot ``index`` at a zone and seat, or clear it with None."""

    index: int
    section: str | None = None
    after_seat: int | None = None


@dataclass(frozen=True)
class ConsoleAccessoryChanged:
    index: int
    accessory_id: str | None = None


@dataclass(frozen=True)
class LoungerEdited:
    required: bool | None = None
    number_of_loungers: int | None = None
    size: str | None = None
    placement: str | None = None
    storage: bool | None = None


@dataclass(frozen=True)
class ReclinerEdited:
    zone: str
    required: bool | None = None
    number_of_recliners: int | None = None
    positioning: str | None = None


@dataclass(frozen=True)
class SeatWidthChanged:
    seat_width: int


@dataclass(frozen=True)
class SeatDepthChanged:
    seat_depth: int


@dataclass(frozen=True)
class PillowsEdited:
    required: bool | None = None
    quantity: int | None = None
    pillow_type: str | None = None


@dataclass(frozen=True)
class FabricChanged:
    """Set fabric codes; an empty string clears a code, None leaves it."""

    structure_code: str | None = None
    backrest_code: str | None = None
    seat_code: str | None = None
    headrest_code: str | None = None


@dataclass(frozen=True)
class FoamChanged:
    foam_type: str


@dataclass(frozen=True)
class LegsChanged:
    leg_type: str


@dataclass(frozen=True)
class DiscountApplied:
    """Apply a discount code, or remove it with None."""

    code: str | None = None


ConfigurationEvent = Union[
    ShapeChanged,
    SectionEdited,
    ConsoleToggled,
    ConsoleSizeChanged,
    ConsolePlacementChanged,
    ConsoleAccessoryChanged,
    LoungerEdited,
    ReclinerEdited,
    SeatWidthChanged,
    SeatDepthChanged,
    PillowsEdited,
    FabricChanged,
    FoamChanged,
    LegsChanged,
    DiscountApplied,
]


@dataclass(frozen=True)
class ConfigurationSummary:
    """Derived values the UI renders next to a configuration."""

    shape: BaseShape
    total_seats: int
    max_consoles: int
    legal_slots: tuple[ConsoleSlot, ...]
    allowed_options: dict[SectionTag, list[str]]
    allowed_lounger_placements: list[Side]
    active_recliner_zones: tuple[ReclinerZone, ...]
    console_sizes: list[str] = field(default_factory=list)
    lounger_sizes: list[str] = field(default_factory=list)
    seat_widths: list[int] = field(default_factory=list)
    seat_depths: list[int] = field(default_factory=list)
    pillow_types: list[str] = field(default_factory=list)
    foam_types: list[str] = field(default_factory=list)
    leg_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.value,
            "total_seats": self.total_seats,
            "max_consoles": self.max_consoles,
            "legal_slots": [
                {
                    "section": slot.section.value,
                    "after_seat": slot.after_seat,
                    "value": slot.value,
                    "label": slot.label,
                }
                for slot in self.legal_slots
            ],
            "allowed_options": {
                tag.value: options for tag, options in self.allowed_options.items()
            },
            "allowed_lounger_placements": [side.value for side in self.allowed_lounger_placements],
            "active_recliner_zones": [zone.value for zone in self.active_recliner_zones],
            "console_sizes": self.console_sizes,
            "lounger_sizes": self.lounger_sizes,
            "seat_widths": self.seat_widths,
            "seat_depths": self.seat_depths,
            "pillow_types": self.pillow_types,
            "foam_types": self.foam_types,
            "leg_types": self.leg_types,
        }


def _raw_mapping(raw: Any) -> dict[str, Any]:
    if isinstance(raw, SofaConfiguration):
        return raw.to_dict()
    if isinstance(raw, Mapping):
        return dict(raw)
    return {}


def _sub_mapping(raw: Mapping[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    return dict(value) if isinstance(value, Mapping) else {}


def read_code(raw: Any) -> str | None:
    """Opaque catalog code from a stored value; blank or non-scalar values are None."""
    if raw is None or isinstance(raw, (bool, Mapping, list)):
        return None
    text = str(raw).strip()
    return text or None


# FabricSelection attribute per stored fabric key
FABRIC_CODE_KEYS: dict[str, str] = {
    "structure_code": "structureCode",
    "backrest_code": "backrestCode",
    "seat_code": "seatCode",
    "headrest_code": "headrestCode",
}


class ConfigurationNormalizer:
    """Runs the full normalization pipeline over a raw configuration.

    Args:
        catalogs: Catalog snapshot used when a call does not pass its own.
        section_normalizer: Section repair stage.
        console_engine: Console slot and placement stage.
        recliner_normalizer: Recliner repair stage.
    """

    def __init__(
        self,
        catalogs: Catalogs | None = None,
        section_normalizer: SectionNormalizer | None = None,
        console_engine: ConsolePlacementEngine | None = None,
        recliner_normalizer: ReclinerNormalizer | None = None,
    ) -> None:
        self.catalogs = catalogs or Catalogs()
        self.section_normalizer = section_normalizer or SectionNormalizer()
        self.console_engine = console_engine or ConsolePlacementEngine()
        self.recliner_normalizer = recliner_normalizer or ReclinerNormalizer()

    def normalize(
        self,
        raw: Mapping[str, Any] | SofaConfiguration | None,
        shape: BaseShape | str | None = None,
        catalogs: Catalogs | None = None,
    ) -> SofaConfiguration:
        """Normalize a raw configuration.

        Args:
            raw: Stored configuration mapping or an already normalized value.
            shape: Base shape overriding the one stored in ``raw``.
            catalogs: Catalog snapshot overriding the normalizer's own.

        Returns:
            A shape-consistent SofaConfiguration. Never raises for malformed
            configuration data.
        """
        catalogs = catalogs or self.catalogs
        options = catalogs.options
        data = _raw_mapping(raw)

        raw_shape = shape if shape is not None else data.get("baseShape", data.get("shape"))
        resolved_shape = normalize_shape(raw_shape)

        sections = self.section_normalizer.normalize(
            resolved_shape, self.collect_sections(data)
        )

        console = self._normalize_console(_sub_mapping(data, "console"), sections, resolved_shape, catalogs)
        lounger = LoungerNormalizer(options).normalize(_sub_mapping(data, "lounger"), resolved_shape)
        recliners = self.recliner_normalizer.normalize(
            resolved_shape, _sub_mapping(data, "recliner")
        )

        return SofaConfiguration(
            shape=resolved_shape,
            sections=sections,
            console=console,
            lounger=lounger,
            recliners=recliners,
            seat_width=self._normalize_dimension(
                data, "seatWidth", options.seat_widths, options.default_seat_width
            ),
            seat_depth=self._normalize_dimension(
                data, "seatDepth", options.seat_depths, options.default_seat_depth
            ),
            pillows=PillowNormalizer(options).normalize(_sub_mapping(data, "additionalPillows")),
            fabric=self._normalize_fabric(_sub_mapping(data, "fabric")),
            foam_type=self._normalize_choice(
                options.foam_types, _sub_mapping(data, "foam").get("type", data.get("foamType")), "Foam type"
            ),
            leg_type=self._normalize_choice(
                options.leg_types, _sub_mapping(data, "legs").get("type", data.get("legsCode")), "Leg type"
            ),
            discount_code=read_code(
                _sub_mapping(data, "discount").get("code", data.get("discountCode"))
            ),
        )

    def reduce(
        self,
        state: SofaConfiguration | Mapping[str, Any],
        event: ConfigurationEvent,
        catalogs: Catalogs | None = None,
    ) -> SofaConfiguration:
        """Apply one event to a configuration and re-run the pipeline."""
        data = _raw_mapping(state)
        data.setdefault("sections", {})
        data.setdefault("console", {})
        data.setdefault("lounger", {})
        data.setdefault("recliner", {})
        data.setdefault("dimensions", {})

        if isinstance(event, ShapeChanged):
            data["baseShape"] = event.shape
        elif isinstance(event, SectionEdited):
            tag = parse_section_tag(event.tag)
            if tag is None:
                logger.debug(f"Ignoring edit of unknown section {event.tag!r}")
            else:
                sections = dict(data["sections"])
                entry = dict(sections.get(tag.value) or {})
                if event.seater is not None:
                    entry["seater"] = event.seater
                if event.quantity is not None:
                    entry["qty"] = event.quantity
                sections[tag.value] = entry
                data["sections"] = sections
        elif isinstance(event, ConsoleToggled):
            data["console"] = {**data["console"], "required": event.required}
        elif isinstance(event, ConsoleSizeChanged):
            data["console"] = {**data["console"], "size": event.size}
        elif isinstance(event, (ConsolePlacementChanged, ConsoleAccessoryChanged)):
            data["console"] = self._patch_placement(data["console"], event)
        elif isinstance(event, LoungerEdited):
            lounger = dict(data["lounger"])
            if event.required is not None:
                lounger["required"] = event.required
            if event.number_of_loungers is not None:
                lounger["numberOfLoungers"] = event.number_of_loungers
            if event.size is not None:
                lounger["size"] = event.size
            if event.placement is not None:
                lounger["placement"] = event.placement
            if event.storage is not None:
                lounger["storage"] = event.storage
            data["lounger"] = lounger
        elif isinstance(event, ReclinerEdited):
            recliner = dict(data["recliner"])
            zone_key = str(event.zone).strip().upper()
            entry = dict(recliner.get(zone_key) or {})
            if event.required is not None:
                entry["required"] = event.required
            if event.number_of_recliners is not None:
                entry["numberOfRecliners"] = event.number_of_recliners
            if event.positioning is not None:
                entry["positioning"] = event.positioning
            recliner[zone_key] = entry
            data["recliner"] = recliner
        elif isinstance(event, SeatWidthChanged):
            data["dimensions"] = {**data["dimensions"], "seatWidth": event.seat_width}
        elif isinstance(event, SeatDepthChanged):
            data["dimensions"] = {**data["dimensions"], "seatDepth": event.seat_depth}
        elif isinstance(event, PillowsEdited):
            pillows = _sub_mapping(data, "additionalPillows")
            if event.required is not None:
                pillows["required"] = event.required
            if event.quantity is not None:
                pillows["quantity"] = event.quantity
            if event.pillow_type is not None:
                pillows["type"] = event.pillow_type
            data["additionalPillows"] = pillows
        elif isinstance(event, FabricChanged):
            fabric = _sub_mapping(data, "fabric")
            for attribute, key in FABRIC_CODE_KEYS.items():
                value = getattr(event, attribute)
                if value is not None:
                    fabric[key] = value
            data["fabric"] = fabric
        elif isinstance(event, FoamChanged):
            data["foam"] = {"type": event.foam_type}
        elif isinstance(event, LegsChanged):
            data["legs"] = {"type": event.leg_type}
        elif isinstance(event, DiscountApplied):
            data["discount"] = {"code": event.code}
        else:
            logger.debug(f"Ignoring unknown event {event!r}")

        return self.normalize(data, catalogs=catalogs)

    def summarize(self, config: SofaConfiguration, catalogs: Catalogs | None = None) -> ConfigurationSummary:
        """Derive seat totals, console slots and allowed options for a configuration."""
        catalogs = catalogs or self.catalogs
        options = catalogs.options
        seats = total_seats(config.sections)
        return ConfigurationSummary(
            shape=config.shape,
            total_seats=seats,
            max_consoles=max_consoles(seats),
            legal_slots=tuple(self.console_engine.legal_slots(config.sections, config.shape)),
            allowed_options={
                tag: allowed_options(config.shape, tag) for tag in ALL_SECTION_TAGS
            },
            allowed_lounger_placements=lounger_placements(
                config.shape, config.lounger.number_of_loungers
            ),
            active_recliner_zones=recliner_zones(config.shape),
            console_sizes=options.console_sizes.values,
            lounger_sizes=options.lounger_sizes.values,
            seat_widths=options.seat_widths,
            seat_depths=options.seat_depths,
            pillow_types=options.pillow_types.values,
            foam_types=options.foam_types.values,
            leg_types=options.leg_types.values,
        )

    def collect_sections(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Merge the sections map with legacy flat keys for tags it lacks."""
        raw_sections = data.get("sections")
        collected: dict[str, Any] = {}
        if isinstance(raw_sections, Mapping):
            for key, value in raw_sections.items():
                tag = parse_section_tag(key)
                if tag is not None:
                    collected[tag.value] = value
                else:
                    collected[str(key)] = value

        for tag, keys in LEGACY_SECTION_KEYS.items():
            if tag.value in collected:
                continue
            for key in keys:
                if key in data and data[key] is not None:
                    logger.debug(f"Reading section {tag.value} from legacy key {key!r}")
                    collected[tag.value] = {"seater": data[key]}
                    break
        return collected

    def _normalize_console(
        self,
        raw_console: Mapping[str, Any],
        sections: Mapping[SectionTag, Any],
        shape: BaseShape,
        catalogs: Catalogs,
    ) -> ConsoleConfig:
        options = catalogs.options
        default_size = options.console_sizes.default or ""
        if not parse_bool(raw_console.get("required")):
            return ConsoleConfig(required=False, size=default_size)

        if max_consoles(total_seats(sections)) == 0:
            logger.debug("Console disabled: fewer than two seats")
            return ConsoleConfig(required=False, size=default_size)

        size = options.console_sizes.match(raw_console.get("size"))
        if size is None:
            size = default_size
            if raw_console.get("size") is not None:
                logger.debug(f"Console size {raw_console.get('size')!r} unknown, using {size!r}")

        valid_accessories: frozenset[str] | None = None
        if options.has_field(CONSOLE_ACCESSORY_FIELD):
            valid_accessories = frozenset(options.console_accessories.values)

        placements = self.console_engine.reconcile(
            parse_placements(raw_console), sections, shape, valid_accessories
        )
        return ConsoleConfig(required=True, size=size, placements=placements)

    @staticmethod
    def _normalize_dimension(
        data: Mapping[str, Any], key: str, allowed: list[int], default: int
    ) -> int:
        dimensions = _sub_mapping(data, "dimensions")
        raw_value = dimensions.get(key, data.get(key))
        inches = parse_int(raw_value)
        if inches is None or inches not in allowed:
            if raw_value is not None:
                logger.debug(f"{key} {raw_value!r} unknown, using default")
            return default
        return inches

    @staticmethod
    def _normalize_fabric(raw: Mapping[str, Any]) -> FabricSelection:
        return FabricSelection(
            **{attribute: read_code(raw.get(key)) for attribute, key in FABRIC_CODE_KEYS.items()}
        )

    @staticmethod
    def _normalize_choice(choices: OptionField, raw: Any, label: str) -> str:
        """Catalog value for ``raw``, or the field default.

        Fields the catalog does not list keep the stripped text as an
        opaque code, empty when nothing was chosen.
        """
        if not choices.entries:
            return read_code(raw) or ""
        matched = choices.match(raw) if read_code(raw) else None
        if matched is None:
            if read_code(raw):
                logger.debug(f"{label} {raw!r} unknown, using default")
            return choices.default or ""
        return matched

    @staticmethod
    def _patch_placement(
        console: Mapping[str, Any],
        event: ConsolePlacementChanged | ConsoleAccessoryChanged,
    ) -> dict[str, Any]:
        patched = dict(console)
        placements = [
            dict(p) if isinstance(p, Mapping) else p
            for p in (console.get("placements") or [])
        ]
        index = parse_int(event.index)
        if index is None or not 0 <= index < len(placements):
            logger.debug(f"Console slot {event.index!r} does not exist; ignoring")
            return patched

        current = placements[index]
        entry = dict(current) if isinstance(current, Mapping) else {}
        if isinstance(event, ConsolePlacementChanged):
            entry["section"] = event.section
            entry["afterSeat"] = event.after_seat
            entry.pop("position", None)
        else:
            entry["accessoryId"] = event.accessory_id
        placements[index] = entry
        patched["placements"] = placements
        patched.pop("accessories", None)
        return patched


def normalize_configuration(
    shape: BaseShape | str | None,
    raw: Mapping[str, Any] | SofaConfiguration | None,
    catalogs: Catalogs | None = None,
) -> SofaConfiguration:
    """Normalize ``raw`` for ``shape`` (None keeps the stored shape)."""
    return ConfigurationNormalizer(catalogs).normalize(raw, shape=shape)


def active_section_tags(shape: BaseShape | str) -> list[SectionTag]:
    """Active tags of a shape in tag order."""
    active = active_sections(shape)
    return [tag for tag in ALL_SECTION_TAGS if tag in active]
