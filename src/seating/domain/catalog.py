"""Read-only catalog snapshots consumed by the engine.

Catalog entries arrive from the remote table store with optional, loosely
typed metadata. The application layer fills every fallback before building
these types, so domain code only ever sees fully-defaulted values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from .labels import fold, parse_int


LOUNGER_SIZE_FIELD = "lounger_size"
CONSOLE_SIZE_FIELD = "console_size"
CONSOLE_ACCESSORY_FIELD = "console_accessory"
SEAT_WIDTH_FIELD = "seat_width"
SEAT_DEPTH_FIELD = "seat_depth"
PILLOW_TYPE_FIELD = "pillow_type"
FOAM_TYPE_FIELD = "foam_type"
LEG_TYPE_FIELD = "leg_type"

DEFAULT_LOUNGER_SIZES: tuple[str, ...] = (
    "Lounger-5 ft",
    "Lounger-5 ft 6 in",
    "Lounger-6 ft",
    "Lounger-6 ft 6 in",
    "Lounger-7 ft",
)
DEFAULT_LOUNGER_SIZE = "Lounger-5 ft 6 in"

DEFAULT_CONSOLE_SIZES: tuple[str, ...] = ("Console-6 in", "Console-10 in")
DEFAULT_CONSOLE_SIZE = "Console-6 in"

DEFAULT_SEAT_WIDTHS: tuple[int, ...] = (22, 24, 26, 28, 30)
DEFAULT_SEAT_WIDTH = 22

DEFAULT_SEAT_DEPTHS: tuple[int, ...] = (22, 24, 26, 28)
DEFAULT_SEAT_DEPTH = 22

DEFAULT_PILLOW_TYPES: tuple[str, ...] = ("Simple", "Diamond Quilted", "Belt Quilted", "Tassels")
DEFAULT_PILLOW_TYPE = "Simple"


@dataclass(frozen=True)
class OptionEntry:
    """One selectable catalog value.

    Attributes:
        value: Stored option value.
        display_label: Label shown to the shopper.
        sort_order: Position within the field.
        metadata: Free-form extra data (default flag, prices, widths).
    """

    value: str
    display_label: str
    sort_order: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        return bool(self.metadata.get("default"))

    def number(self, *keys: str) -> float | None:
        """First finite, non-negative metadata number among ``keys``."""
        for key in keys:
            value = self.metadata.get(key)
            if value is None or isinstance(value, bool):
                continue
            try:
                number = float(value)
            except (TypeError, ValueError):
                continue
            if math.isfinite(number) and number >= 0:
                return number
        return None


@dataclass(frozen=True)
class OptionField:
    """Ordered entries of one catalog field."""

    name: str
    entries: tuple[OptionEntry, ...] = ()

    @classmethod
    def from_values(cls, name: str, values: tuple[str, ...], default: str) -> OptionField:
        return cls(
            name=name,
            entries=tuple(
                OptionEntry(
                    value=value,
                    display_label=value,
                    sort_order=index,
                    metadata={"default": value == default},
                )
                for index, value in enumerate(values)
            ),
        )

    @property
    def values(self) -> list[str]:
        return [entry.value for entry in self.entries]

    @property
    def default(self) -> str | None:
        for entry in self.entries:
            if entry.is_default:
                return entry.value
        return self.entries[0].value if self.entries else None

    def match(self, raw: Any) -> str | None:
        """Stored value matching ``raw`` ignoring case and separators."""
        if raw is None:
            return None
        key = fold(raw)
        for entry in self.entries:
            if fold(entry.value) == key or fold(entry.display_label) == key:
                return entry.value
        return None

    def get(self, value: str) -> OptionEntry | None:
        for entry in self.entries:
            if entry.value == value:
                return entry
        return None


_BUILTIN_FIELDS: dict[str, OptionField] = {
    LOUNGER_SIZE_FIELD: OptionField.from_values(
        LOUNGER_SIZE_FIELD, DEFAULT_LOUNGER_SIZES, DEFAULT_LOUNGER_SIZE
    ),
    CONSOLE_SIZE_FIELD: OptionField.from_values(
        CONSOLE_SIZE_FIELD, DEFAULT_CONSOLE_SIZES, DEFAULT_CONSOLE_SIZE
    ),
    SEAT_WIDTH_FIELD: OptionField.from_values(
        SEAT_WIDTH_FIELD,
        tuple(str(width) for width in DEFAULT_SEAT_WIDTHS),
        str(DEFAULT_SEAT_WIDTH),
    ),
    SEAT_DEPTH_FIELD: OptionField.from_values(
        SEAT_DEPTH_FIELD,
        tuple(str(depth) for depth in DEFAULT_SEAT_DEPTHS),
        str(DEFAULT_SEAT_DEPTH),
    ),
    PILLOW_TYPE_FIELD: OptionField.from_values(
        PILLOW_TYPE_FIELD, DEFAULT_PILLOW_TYPES, DEFAULT_PILLOW_TYPE
    ),
}


@dataclass(frozen=True)
class OptionCatalog:
    """Option lists for one product category.

    Fields the remote catalog does not supply fall back to the built-in
    lists, except for console accessories, which have no built-in list.
    """

    category: str = "sofa"
    fields: dict[str, OptionField] = field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields and bool(self.fields[name].entries)

    def get_field(self, name: str) -> OptionField:
        if self.has_field(name):
            return self.fields[name]
        return _BUILTIN_FIELDS.get(name, OptionField(name=name))

    @property
    def lounger_sizes(self) -> OptionField:
        return self.get_field(LOUNGER_SIZE_FIELD)

    @property
    def console_sizes(self) -> OptionField:
        return self.get_field(CONSOLE_SIZE_FIELD)

    @property
    def console_accessories(self) -> OptionField:
        return self.get_field(CONSOLE_ACCESSORY_FIELD)

    @property
    def pillow_types(self) -> OptionField:
        return self.get_field(PILLOW_TYPE_FIELD)

    @property
    def foam_types(self) -> OptionField:
        return self.get_field(FOAM_TYPE_FIELD)

    @property
    def leg_types(self) -> OptionField:
        return self.get_field(LEG_TYPE_FIELD)

    def inches(self, name: str) -> list[int]:
        """Integer values of a dimension field such as ``seat_width``.

        Values like ``'24"'`` or ``"24 in"`` are read as 24; unreadable
        rows are skipped.
        """
        values = [parse_int(value) for value in self.get_field(name).values]
        return [value for value in values if value is not None]

    def inch_entry(self, name: str, inches: int) -> OptionEntry | None:
        for entry in self.get_field(name).entries:
            if parse_int(entry.value) == inches:
                return entry
        return None

    @property
    def seat_widths(self) -> list[int]:
        return self.inches(SEAT_WIDTH_FIELD) or list(DEFAULT_SEAT_WIDTHS)

    @property
    def default_seat_width(self) -> int:
        return parse_int(self.get_field(SEAT_WIDTH_FIELD).default) or DEFAULT_SEAT_WIDTH

    @property
    def seat_depths(self) -> list[int]:
        return self.inches(SEAT_DEPTH_FIELD) or list(DEFAULT_SEAT_DEPTHS)

    @property
    def default_seat_depth(self) -> int:
        return parse_int(self.get_field(SEAT_DEPTH_FIELD).default) or DEFAULT_SEAT_DEPTH


@dataclass(frozen=True)
class FabricTable:
    """Fabric consumption constants, in meters."""

    seater_meters_per_120_in: float = 21.0
    corner_meters: float = 7.0
    backrest_meters: float = 2.0
    lounger_base_meters: float = 5.0
    lounger_additional_meters: float = 3.0
    console_meters: dict[str, float] = field(
        default_factory=lambda: {"Console-6 in": 1.5, "Console-10 in": 2.0}
    )


@dataclass(frozen=True)
class PriceTable:
    """Numeric pricing constants for one product.

    Percentages are expressed against ``base_price``, the price of a
    2-seater unit. A missing ``base_price`` degrades pricing to zeros.
    ``invalid_entries`` names catalog values that were unreadable and
    replaced by their defaults when the table was loaded.
    """

    base_price: float | None = None
    corner_percent: float = 65.0
    backrest_percent: float = 14.0
    additional_seat_percent: float = 35.0
    lounger_base_percent: float = 40.0
    lounger_additional_percent: float = 4.0
    lounger_storage_price: float = 3000.0
    recliner_unit_price: float = 14000.0
    console_prices: dict[str, float] = field(
        default_factory=lambda: {"Console-6 in": 8000.0, "Console-10 in": 12000.0}
    )
    accessory_prices: dict[str, float] = field(default_factory=dict)
    pillow_prices: dict[str, float] = field(
        default_factory=lambda: {
            "Simple": 1200.0,
            "Diamond Quilted": 3500.0,
            "Belt Quilted": 4000.0,
            "Tassels": 2500.0,
        }
    )
    # Per meter, keyed by fabric code
    fabric_prices: dict[str, float] = field(default_factory=dict)
    foam_prices: dict[str, float] = field(default_factory=dict)
    leg_prices: dict[str, float] = field(default_factory=dict)
    seat_depth_percent: dict[str, float] = field(default_factory=dict)
    seat_width_percent: dict[str, float] = field(default_factory=dict)
    # Keyed by lower-case discount code
    discount_percent: dict[str, float] = field(default_factory=dict)
    fabric: FabricTable = field(default_factory=FabricTable)
    invalid_entries: tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalogs:
    """Option catalog and price table snapshot passed through the pipeline.

    Price lookups check the price table first and then the option entry's
    metadata, the way the storefront stores surcharges next to each option.
    """

    options: OptionCatalog = field(default_factory=OptionCatalog)
    prices: PriceTable = field(default_factory=PriceTable)

    def accessory_price(self, accessory_id: str) -> float | None:
        """Price of a console accessory from the price table or its catalog entry."""
        if accessory_id in self.prices.accessory_prices:
            return self.prices.accessory_prices[accessory_id]
        entry = self.options.console_accessories.get(accessory_id)
        return entry.number("sale_price") if entry is not None else None

    def pillow_price(self, pillow_type: str) -> float | None:
        if pillow_type in self.prices.pillow_prices:
            return self.prices.pillow_prices[pillow_type]
        entry = self.options.pillow_types.get(pillow_type)
        return entry.number("price", "sale_price") if entry is not None else None

    def foam_price(self, foam_type: str) -> float | None:
        """Flat foam upgrade; a listed foam without a surcharge costs nothing extra."""
        if foam_type in self.prices.foam_prices:
            return self.prices.foam_prices[foam_type]
        entry = self.options.foam_types.get(foam_type)
        if entry is None:
            return None
        return entry.number("price_adjustment") or 0.0

    def leg_price(self, leg_type: str) -> float | None:
        if leg_type in self.prices.leg_prices:
            return self.prices.leg_prices[leg_type]
        entry = self.options.leg_types.get(leg_type)
        return entry.number("price", "sale_price") if entry is not None else None

    def dimension_percent(self, name: str, inches: int) -> float:
        """Percentage surcharge of a seat depth or width; 0 when none is listed."""
        table = (
            self.prices.seat_depth_percent
            if name == SEAT_DEPTH_FIELD
            else self.prices.seat_width_percent
        )
        if str(inches) in table:
            return table[str(inches)]
        entry = self.options.inch_entry(name, inches)
        if entry is None:
            return 0.0
        return entry.number("percentage") or 0.0

    def discount_rate(self, code: str) -> float | None:
        return self.prices.discount_percent.get(code.strip().lower())

    def with_base_price(self, base_price: float | None) -> Catalogs:
        """Copy of these catalogs with ``base_price`` replaced."""
        return replace(self, prices=replace(self.prices, base_price=base_price))
