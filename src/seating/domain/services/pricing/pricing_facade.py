"""Pricing facade combining the section and accessory rules."""

from __future__ import annotations

import logging

from ...catalog import Catalogs
from ...value_objects import ALL_SECTION_TAGS, SofaConfiguration
from .accessory_pricing import price_console, price_lounger, price_recliners
from .models import PriceBreakdown, SectionPrice
from .upgrade_pricing import price_discount, price_fabric, price_pillows, price_upgrades
from .section_pricing import (
    section_fabric,
    section_price,
    section_unit_price,
    section_width,
)

logger = logging.getLogger(__name__)


class PricingCalculator:
    """Derives a PriceBreakdown from a normalized configuration.

    Missing catalog data never raises. Each missing entry contributes 0 and
    is listed in ``PriceBreakdown.missing``, which marks the breakdown as
    incomplete.

    Example:
        >>> calculator = PricingCalculator()
        >>> breakdown = calculator.derive(config, catalogs)
        >>> breakdown.total_price
    """

    def derive(self, config: SofaConfiguration, catalogs: Catalogs | None = None) -> PriceBreakdown:
        catalogs = catalogs or Catalogs()
        prices = catalogs.prices
        missing: list[str] = []

        base_price = prices.base_price
        if base_price is None:
            missing.append("base_price")
            base_price = 0.0

        sections: list[SectionPrice] = []
        width = 0
        for tag in ALL_SECTION_TAGS:
            section = config.section(tag)
            if not section.is_active:
                continue
            section_width_in = section_width(section, config.seat_width)
            width += section_width_in
            sections.append(
                SectionPrice(
                    tag=tag,
                    seater_value=section.seater_value,
                    quantity=section.quantity,
                    unit_price=section_unit_price(section.seater_value, base_price, prices),
                    price=section_price(section, base_price, prices),
                    fabric_meters=section_fabric(section, config.seat_width, prices.fabric),
                    width_in=section_width_in,
                )
            )

        lounger = price_lounger(config.lounger, base_price, prices, missing)
        recliner = price_recliners(config.recliners, prices)
        console = price_console(config.console, catalogs, missing)
        pillows = price_pillows(config.pillows, catalogs, missing)

        meters = (
            sum(section.fabric_meters for section in sections)
            + lounger.fabric_meters
            + console.fabric_meters
        )
        fabric_charge = price_fabric(config.fabric, meters, catalogs, missing)

        running = (
            sum(section.price for section in sections)
            + lounger.price
            + recliner.price
            + console.price
            + pillows.price
            + fabric_charge.price
        )
        upgrades = price_upgrades(config, catalogs, running, missing)
        subtotal = running + upgrades.foam_price + upgrades.dimension_price + upgrades.leg_price
        discount = price_discount(config.discount_code, subtotal, catalogs, missing)
        missing.extend(f"invalid:{entry}" for entry in prices.invalid_entries)

        breakdown = PriceBreakdown(
            sections=tuple(sections),
            lounger=lounger,
            recliner=recliner,
            console=console,
            pillows=pillows,
            fabric_charge=fabric_charge,
            upgrades=upgrades,
            discount=discount,
            approximate_width_in=width,
            missing=tuple(dict.fromkeys(missing)),
        )
        if breakdown.incomplete:
            logger.warning(
                f"Incomplete pricing, missing catalog entries: {', '.join(breakdown.missing)}"
            )
        return breakdown


def derive_pricing(config: SofaConfiguration, catalogs: Catalogs | None = None) -> PriceBreakdown:
    return PricingCalculator().derive(config, catalogs)
