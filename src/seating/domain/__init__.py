"""Domain layer - configuration rules and pricing."""

from .catalog import Catalogs, FabricTable, OptionCatalog, OptionEntry, OptionField, PriceTable
from .services import (
    ConfigurationNormalizer,
    ConfigurationSummary,
    ConsolePlacementEngine,
    PriceBreakdown,
    PricingCalculator,
    SectionNormalizer,
    derive_pricing,
    max_consoles,
    normalize_configuration,
    total_seats,
)
from .topology import active_sections, allowed_options
from .value_objects import (
    BaseShape,
    ConsoleConfig,
    ConsolePlacement,
    ConsoleSlot,
    ConsoleZone,
    FabricSelection,
    LoungerConfig,
    PillowConfig,
    ReclinerSectionConfig,
    ReclinerZone,
    Section,
    SectionTag,
    Side,
    SofaConfiguration,
)

__all__ = [
    "BaseShape",
    "Catalogs",
    "ConfigurationNormalizer",
    "ConfigurationSummary",
    "ConsoleConfig",
    "ConsolePlacement",
    "ConsolePlacementEngine",
    "ConsoleSlot",
    "ConsoleZone",
    "FabricSelection",
    "FabricTable",
    "LoungerConfig",
    "OptionCatalog",
    "OptionEntry",
    "OptionField",
    "PillowConfig",
    "PriceBreakdown",
    "PriceTable",
    "PricingCalculator",
    "ReclinerSectionConfig",
    "ReclinerZone",
    "Section",
    "SectionNormalizer",
    "SectionTag",
    "Side",
    "SofaConfiguration",
    "active_sections",
    "allowed_options",
    "derive_pricing",
    "max_consoles",
    "normalize_configuration",
    "total_seats",
]
