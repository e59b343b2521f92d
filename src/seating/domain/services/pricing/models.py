"""Price breakdown data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...value_objects import ConsoleZone, ReclinerZone, SectionTag


@dataclass(frozen=True)
class SectionPrice:
    """Price, fabric and width contribution of one active section."""

    tag: SectionTag
    seater_value: str
    quantity: int
    unit_price: float
    price: float
    fabric_meters: float
    width_in: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag.value,
            "seater": self.seater_value,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "price": self.price,
            "fabric_meters": self.fabric_meters,
            "width_in": self.width_in,
        }


@dataclass(frozen=True)
class LoungerPrice:
    """Lounger contribution; all zero when no lounger is required."""

    quantity: int = 0
    size: str = ""
    increments: int = 0
    unit_price: float = 0.0
    storage_price: float = 0.0
    price: float = 0.0
    fabric_meters: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "quantity": self.quantity,
            "size": self.size,
            "increments": self.increments,
            "unit_price": self.unit_price,
            "storage_price": self.storage_price,
            "price": self.price,
            "fabric_meters": self.fabric_meters,
        }


@dataclass(frozen=True)
class ReclinerPrice:
    """Recliner mechanism contribution across required zones."""

    units: int = 0
    unit_price: float = 0.0
    price: float = 0.0
    zones: dict[ReclinerZone, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "units": self.units,
            "unit_price": self.unit_price,
            "price": self.price,
            "zones": {zone.value: count for zone, count in self.zones.items()},
        }


@dataclass(frozen=True)
class ConsoleLinePrice:
    """One non-empty console placement and its accessory."""

    section: ConsoleZone
    after_seat: int
    size: str
    console_price: float
    accessory_id: str | None
    accessory_price: float
    fabric_meters: float

    @property
    def price(self) -> float:
        return round(self.console_price + self.accessory_price, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "section": self.section.value,
            "after_seat": self.after_seat,
            "size": self.size,
            "console_price": self.console_price,
            "accessory_id": self.accessory_id,
            "accessory_price": self.accessory_price,
            "price": self.price,
            "fabric_meters": self.fabric_meters,
        }


@dataclass(frozen=True)
class ConsolePrice:
    lines: tuple[ConsoleLinePrice, ...] = ()

    @property
    def price(self) -> float:
        return round(sum(line.price for line in self.lines), 2)

    @property
    def fabric_meters(self) -> float:
        return round(sum(line.fabric_meters for line in self.lines), 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "price": self.price,
            "fabric_meters": self.fabric_meters,
        }


@dataclass(frozen=True)
class PillowPrice:
    quantity: int = 0
    pillow_type: str = ""
    unit_price: float = 0.0
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "quantity": self.quantity,
            "type": self.pillow_type,
            "unit_price": self.unit_price,
            "price": self.price,
        }


@dataclass(frozen=True)
class FabricCharge:
    """Structure fabric charged per meter of the total consumption."""

    code: str | None = None
    meters: float = 0.0
    rate: float = 0.0
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "meters": self.meters,
            "rate": self.rate,
            "price": self.price,
        }


@dataclass(frozen=True)
class UpgradePrice:
    """Foam, seat dimension and leg upgrades.

    ``dimension_price`` applies the seat depth and width percentages to
    everything priced before it. Legs are added after.
    """

    foam_type: str = ""
    foam_price: float = 0.0
    seat_depth_percent: float = 0.0
    seat_width_percent: float = 0.0
    dimension_price: float = 0.0
    leg_type: str = ""
    leg_price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "foam_type": self.foam_type,
            "foam_price": self.foam_price,
            "seat_depth_percent": self.seat_depth_percent,
            "seat_width_percent": self.seat_width_percent,
            "dimension_price": self.dimension_price,
            "leg_type": self.leg_type,
            "leg_price": self.leg_price,
        }


@dataclass(frozen=True)
class DiscountPrice:
    code: str | None = None
    percent: float = 0.0
    amount: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "percent": self.percent, "amount": self.amount}


@dataclass(frozen=True)
class PriceBreakdown:
    """Full price and fabric breakdown of a normalized configuration.

    Attributes:
        sections: Contributions of the active sections, in tag order.
        lounger: Lounger contribution.
        recliner: Recliner contribution.
        console: Console and accessory contribution.
        pillows: Additional pillow contribution.
        fabric_charge: Per-meter charge of the structure fabric.
        upgrades: Foam, seat dimension and leg upgrades.
        discount: Discount taken off the subtotal.
        approximate_width_in: Sum of the section widths.
        missing: Catalog entries that were absent and priced as 0.
    """

    sections: tuple[SectionPrice, ...] = ()
    lounger: LoungerPrice = field(default_factory=LoungerPrice)
    recliner: ReclinerPrice = field(default_factory=ReclinerPrice)
    console: ConsolePrice = field(default_factory=ConsolePrice)
    pillows: PillowPrice = field(default_factory=PillowPrice)
    fabric_charge: FabricCharge = field(default_factory=FabricCharge)
    upgrades: UpgradePrice = field(default_factory=UpgradePrice)
    discount: DiscountPrice = field(default_factory=DiscountPrice)
    approximate_width_in: int = 0
    missing: tuple[str, ...] = ()

    @property
    def incomplete(self) -> bool:
        return len(self.missing) > 0

    @property
    def sections_price(self) -> float:
        return round(sum(section.price for section in self.sections), 2)

    @property
    def running_price(self) -> float:
        """Total the seat dimension percentages apply to."""
        return round(
            self.sections_price
            + self.lounger.price
            + self.recliner.price
            + self.console.price
            + self.pillows.price
            + self.fabric_charge.price
            + self.upgrades.foam_price,
            2,
        )

    @property
    def subtotal_price(self) -> float:
        return round(
            self.running_price + self.upgrades.dimension_price + self.upgrades.leg_price, 2
        )

    @property
    def total_price(self) -> float:
        return round(self.subtotal_price - self.discount.amount, 2)

    @property
    def total_fabric_meters(self) -> float:
        return round(
            sum(section.fabric_meters for section in self.sections)
            + self.lounger.fabric_meters
            + self.console.fabric_meters,
            2,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sections": [section.to_dict() for section in self.sections],
            "lounger": self.lounger.to_dict(),
            "recliner": self.recliner.to_dict(),
            "console": self.console.to_dict(),
            "pillows": self.pillows.to_dict(),
            "fabric_charge": self.fabric_charge.to_dict(),
            "upgrades": self.upgrades.to_dict(),
            "discount": self.discount.to_dict(),
            "subtotal_price": self.subtotal_price,
            "total_price": self.total_price,
            "total_fabric_meters": self.total_fabric_meters,
            "approximate_width_in": self.approximate_width_in,
            "incomplete": self.incomplete,
            "missing": list(self.missing),
        }
