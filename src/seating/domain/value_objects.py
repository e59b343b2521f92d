"""Value objects for the seating configuration domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BaseShape(str, Enum):
    """Overall product silhouette.

    The shape decides which structural sections exist at all.
    """

    STANDARD = "STANDARD"
    L_SHAPE = "L SHAPE"
    U_SHAPE = "U SHAPE"
    COMBO = "COMBO"


class SectionTag(str, Enum):
    """Fixed identifiers of the structural sections of a modular sofa.

    F is the front run. L1/R1 are the left and right corner (or backrest)
    joints, L2/R2 the runs behind them. C1/C2 are the combo module's
    backrest and run.
    """

    F = "F"
    L1 = "L1"
    L2 = "L2"
    R1 = "R1"
    R2 = "R2"
    C1 = "C1"
    C2 = "C2"


class ConsoleZone(str, Enum):
    """Seat-bearing zones a console can be inserted into."""

    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"
    COMBO = "combo"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ReclinerZone(str, Enum):
    """Structural zones that can carry recliner mechanisms."""

    F = "F"
    L = "L"
    R = "R"
    C = "C"


class Side(str, Enum):
    """Flank placement for loungers and recliner mechanisms."""

    LHS = "LHS"
    RHS = "RHS"
    BOTH = "Both"


class SeaterKind(Enum):
    """Role encoded by a seater label."""

    NONE = "none"
    SEATER = "seater"
    CORNER = "corner"
    BACKREST = "backrest"


NONE_VALUE = "none"

ALL_SECTION_TAGS: tuple[SectionTag, ...] = tuple(SectionTag)

# Tags whose seater value encodes a seat count
SEAT_BEARING_TAGS: tuple[SectionTag, ...] = (
    SectionTag.F,
    SectionTag.L2,
    SectionTag.R2,
    SectionTag.C2,
)

ZONE_SECTION: dict[ConsoleZone, SectionTag] = {
    ConsoleZone.FRONT: SectionTag.F,
    ConsoleZone.LEFT: SectionTag.L2,
    ConsoleZone.RIGHT: SectionTag.R2,
    ConsoleZone.COMBO: SectionTag.C2,
}


@dataclass(frozen=True)
class SeaterValue:
    """Parsed form of a seater label.

    Attributes:
        kind: Role of the section (plain seater, corner, backrest or none).
        seats: Number of seats for plain seaters, 0 otherwise.
        has_mechanism: False for "No Mech" seater variants.
        label: Canonical label the value was parsed from.
    """

    kind: SeaterKind
    seats: int = 0
    has_mechanism: bool = True
    label: str = NONE_VALUE

    @property
    def is_none(self) -> bool:
        return self.kind is SeaterKind.NONE

    @property
    def is_seater(self) -> bool:
        return self.kind is SeaterKind.SEATER


@dataclass(frozen=True)
class Section:
    """One structural section of the product.

    Attributes:
        tag: Section identifier.
        seater_value: Canonical seater label, or "none" when inactive.
        quantity: Number of identical units, always at least 1.
    """

    tag: SectionTag
    seater_value: str = NONE_VALUE
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Section quantity must be at least 1")

    @property
    def is_active(self) -> bool:
        return self.seater_value != NONE_VALUE

    def to_dict(self) -> dict[str, Any]:
        return {"seater": self.seater_value, "qty": self.quantity}


@dataclass(frozen=True)
class ConsolePlacement:
    """A console slot and the accessory mounted in it.

    A fully-null placement is the "none" placeholder; it keeps its index in
    the placement list so UI bindings stay stable.
    """

    section: ConsoleZone | None = None
    after_seat: int | None = None
    accessory_id: str | None = None

    @classmethod
    def empty(cls) -> ConsolePlacement:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.section is None or self.after_seat is None

    @property
    def key(self) -> tuple[ConsoleZone, int] | None:
        if self.is_empty:
            return None
        return (self.section, self.after_seat)  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        return {
            "section": self.section.value if self.section else None,
            "afterSeat": self.after_seat,
            "accessoryId": self.accessory_id,
        }


@dataclass(frozen=True)
class ConsoleSlot:
    """A legal console position: between seat N and N+1 of a zone."""

    section: ConsoleZone
    after_seat: int

    @property
    def label(self) -> str:
        return f"{self.section.label}: After {ordinal(self.after_seat)} Seat from Left"

    @property
    def value(self) -> str:
        return f"{self.section.value}_{self.after_seat}"


@dataclass(frozen=True)
class ConsoleConfig:
    """Console selection for the whole product."""

    required: bool = False
    size: str = ""
    placements: tuple[ConsolePlacement, ...] = ()

    @property
    def quantity(self) -> int:
        return len(self.placements)

    @property
    def accessories(self) -> tuple[str | None, ...]:
        return tuple(p.accessory_id for p in self.placements)

    @property
    def active_placements(self) -> tuple[ConsolePlacement, ...]:
        return tuple(p for p in self.placements if not p.is_empty)

    def to_dict(self) -> dict[str, Any]:
        return {
            "required": self.required,
            "size": self.size,
            "quantity": self.quantity,
            "placements": [p.to_dict() for p in self.placements],
            "accessories": list(self.accessories),
        }


@dataclass(frozen=True)
class LoungerConfig:
    """Lounger (chaise) selection."""

    required: bool = False
    number_of_loungers: int = 1
    size: str = ""
    placement: Side = Side.LHS
    storage: bool = False

    @property
    def quantity(self) -> int:
        return self.number_of_loungers if self.required else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "required": self.required,
            "numberOfLoungers": self.number_of_loungers,
            "quantity": self.quantity,
            "size": self.size,
            "placement": self.placement.value,
            "storage": self.storage,
        }


@dataclass(frozen=True)
class ReclinerSectionConfig:
    """Recliner mechanisms fitted to one structural zone."""

    required: bool = False
    number_of_recliners: int = 0
    positioning: Side = Side.LHS

    def to_dict(self) -> dict[str, Any]:
        return {
            "required": self.required,
            "numberOfRecliners": self.number_of_recliners,
            "positioning": self.positioning.value,
        }


@dataclass(frozen=True)
class PillowConfig:
    """Additional scatter pillows."""

    required: bool = False
    count: int = 1
    pillow_type: str = ""

    @property
    def quantity(self) -> int:
        return self.count if self.required else 0

    def to_dict(self) -> dict[str, Any]:
        return {"required": self.required, "quantity": self.count, "type": self.pillow_type}


@dataclass(frozen=True)
class FabricSelection:
    """Fabric codes per upholstery part; None where no fabric was chosen.

    Only the structure fabric is charged per meter. The other codes are
    carried for production.
    """

    structure_code: str | None = None
    backrest_code: str | None = None
    seat_code: str | None = None
    headrest_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "structureCode": self.structure_code,
            "backrestCode": self.backrest_code,
            "seatCode": self.seat_code,
            "headrestCode": self.headrest_code,
        }


def _default_recliners() -> dict[ReclinerZone, ReclinerSectionConfig]:
    return {zone: ReclinerSectionConfig() for zone in ReclinerZone}


@dataclass(frozen=True)
class SofaConfiguration:
    """A fully normalized seating configuration.

    Every section tag is present; inactive ones carry "none". Instances are
    produced by ConfigurationNormalizer and should not be patched by hand:
    derived fields (console quantity, lounger quantity) are recomputed on
    every normalization pass.
    """

    shape: BaseShape = BaseShape.STANDARD
    sections: dict[SectionTag, Section] = field(default_factory=dict)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    lounger: LoungerConfig = field(default_factory=LoungerConfig)
    recliners: dict[ReclinerZone, ReclinerSectionConfig] = field(
        default_factory=_default_recliners
    )
    seat_width: int = 22
    seat_depth: int = 22
    pillows: PillowConfig = field(default_factory=PillowConfig)
    fabric: FabricSelection = field(default_factory=FabricSelection)
    foam_type: str = ""
    leg_type: str = ""
    discount_code: str | None = None

    def section(self, tag: SectionTag) -> Section:
        return self.sections.get(tag, Section(tag=tag))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the storefront's stored configuration format."""
        return {
            "baseShape": self.shape.value,
            "sections": {
                tag.value: self.section(tag).to_dict() for tag in ALL_SECTION_TAGS
            },
            "console": self.console.to_dict(),
            "lounger": self.lounger.to_dict(),
            "recliner": {
                zone.value: self.recliners[zone].to_dict() for zone in ReclinerZone
            },
            "dimensions": {"seatWidth": self.seat_width, "seatDepth": self.seat_depth},
            "additionalPillows": self.pillows.to_dict(),
            "fabric": self.fabric.to_dict(),
            "foam": {"type": self.foam_type},
            "legs": {"type": self.leg_type},
            "discount": {"code": self.discount_code},
        }


def ordinal(number: int) -> str:
    """Format a positive integer as an English ordinal ("1st", "12th")."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"
