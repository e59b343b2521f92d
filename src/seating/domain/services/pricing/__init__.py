"""Pricing and fabric estimation for normalized configurations.

This package provides:
- Dimensional constants (corner widths, lounger reference size)
- Breakdown data models
- Section price, width and fabric rules
- Lounger, recliner and console pricing
- Pillow, fabric, upgrade and discount pricing
- PricingCalculator facade
"""

from __future__ import annotations

from .constants import (
    BACKREST_WIDTH,
    CORNER_WIDTHS,
    DEFAULT_CORNER_WIDTH,
    LOUNGER_INCREMENT_IN,
    LOUNGER_REFERENCE_IN,
    corner_width,
    lounger_increments,
)
from .models import (
    ConsoleLinePrice,
    ConsolePrice,
    DiscountPrice,
    FabricCharge,
    LoungerPrice,
    PillowPrice,
    PriceBreakdown,
    ReclinerPrice,
    SectionPrice,
    UpgradePrice,
)
from .section_pricing import (
    seater_multiplier,
    section_fabric,
    section_price,
    section_unit_price,
    section_width,
)
from .accessory_pricing import price_console, price_lounger, price_recliners
from .upgrade_pricing import price_discount, price_fabric, price_pillows, price_upgrades
from .pricing_facade import PricingCalculator, derive_pricing

__all__ = [
    # Constants
    "BACKREST_WIDTH",
    "CORNER_WIDTHS",
    "DEFAULT_CORNER_WIDTH",
    "LOUNGER_INCREMENT_IN",
    "LOUNGER_REFERENCE_IN",
    "corner_width",
    "lounger_increments",
    # Models
    "ConsoleLinePrice",
    "ConsolePrice",
    "DiscountPrice",
    "FabricCharge",
    "LoungerPrice",
    "PillowPrice",
    "PriceBreakdown",
    "ReclinerPrice",
    "SectionPrice",
    "UpgradePrice",
    # Rules
    "seater_multiplier",
    "section_fabric",
    "section_price",
    "section_unit_price",
    "section_width",
    "price_console",
    "price_lounger",
    "price_recliners",
    "price_discount",
    "price_fabric",
    "price_pillows",
    "price_upgrades",
    # Facade
    "PricingCalculator",
    "derive_pricing",
]
