"""Domain services for configuration normalization and pricing."""

from .accessories import (
    LoungerNormalizer,
    PillowNormalizer,
    ReclinerNormalizer,
    normalize_lounger,
    normalize_pillows,
    normalize_recliner,
)
from .configuration import (
    LEGACY_SECTION_KEYS,
    ConfigurationEvent,
    ConfigurationNormalizer,
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
    ReclinerEdited,
    SeatDepthChanged,
    SeatWidthChanged,
    SectionEdited,
    ShapeChanged,
    active_section_tags,
    normalize_configuration,
)
from .console_placement import ConsolePlacementEngine, parse_placement, parse_placements
from .pricing import PriceBreakdown, PricingCalculator, derive_pricing
from .seat_counter import max_consoles, section_seats, total_seats
from .section_normalizer import SectionNormalizer, normalize_sections

__all__ = [
    # Accessories
    "LoungerNormalizer",
    "PillowNormalizer",
    "ReclinerNormalizer",
    "normalize_lounger",
    "normalize_pillows",
    "normalize_recliner",
    # Pipeline
    "LEGACY_SECTION_KEYS",
    "ConfigurationEvent",
    "ConfigurationNormalizer",
    "ConfigurationSummary",
    "ConsoleAccessoryChanged",
    "ConsolePlacementChanged",
    "ConsoleSizeChanged",
    "ConsoleToggled",
    "DiscountApplied",
    "FabricChanged",
    "FoamChanged",
    "LegsChanged",
    "LoungerEdited",
    "PillowsEdited",
    "ReclinerEdited",
    "SeatDepthChanged",
    "SeatWidthChanged",
    "SectionEdited",
    "ShapeChanged",
    "active_section_tags",
    "normalize_configuration",
    # Consoles
    "ConsolePlacementEngine",
    "parse_placement",
    "parse_placements",
    # Pricing
    "PriceBreakdown",
    "PricingCalculator",
    "derive_pricing",
    # Seats
    "max_consoles",
    "section_seats",
    "total_seats",
    # Sections
    "SectionNormalizer",
    "normalize_sections",
]
