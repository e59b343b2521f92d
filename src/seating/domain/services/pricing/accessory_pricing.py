"""Lounger, recliner and console pricing."""

from __future__ import annotations

import logging

from ...catalog import Catalogs, FabricTable, PriceTable
from ...labels import parse_size_inches
from ...value_objects import ConsoleConfig, LoungerConfig, ReclinerSectionConfig, ReclinerZone
from .constants import lounger_increments
from .models import ConsoleLinePrice, ConsolePrice, LoungerPrice, ReclinerPrice

logger = logging.getLogger(__name__)


def price_lounger(
    lounger: LoungerConfig,
    base_price: float,
    prices: PriceTable,
    missing: list[str],
) -> LoungerPrice:
    """Price a lounger selection.

    Unit price is the base percentage of the 2-seater price plus the
    additional percentage for every full 6 inches above 5 ft 6 in. Storage
    is a flat surcharge per lounger.
    """
    if not lounger.required:
        return LoungerPrice()

    quantity = lounger.quantity
    inches = parse_size_inches(lounger.size)
    if inches is None:
        missing.append(f"lounger_size:{lounger.size}")
        increments = 0
    else:
        increments = lounger_increments(inches)

    unit_price = round(
        base_price * prices.lounger_base_percent / 100.0
        + base_price * prices.lounger_additional_percent / 100.0 * increments,
        2,
    )
    storage_price = round(prices.lounger_storage_price * quantity, 2) if lounger.storage else 0.0
    fabric = prices.fabric
    fabric_meters = round(
        (fabric.lounger_base_meters + fabric.lounger_additional_meters * increments) * quantity,
        2,
    )
    return LoungerPrice(
        quantity=quantity,
        size=lounger.size,
        increments=increments,
        unit_price=unit_price,
        storage_price=storage_price,
        price=round(unit_price * quantity + storage_price, 2),
        fabric_meters=fabric_meters,
    )


def price_recliners(
    recliners: dict[ReclinerZone, ReclinerSectionConfig], prices: PriceTable
) -> ReclinerPrice:
    zones = {
        zone: config.number_of_recliners
        for zone, config in recliners.items()
        if config.required and config.number_of_recliners > 0
    }
    units = sum(zones.values())
    return ReclinerPrice(
        units=units,
        unit_price=prices.recliner_unit_price,
        price=round(prices.recliner_unit_price * units, 2),
        zones=zones,
    )


def price_console(
    console: ConsoleConfig, catalogs: Catalogs, missing: list[str]
) -> ConsolePrice:
    """Price every non-empty console placement and its accessory."""
    if not console.required:
        return ConsolePrice()

    prices = catalogs.prices
    fabric: FabricTable = prices.fabric
    lines: list[ConsoleLinePrice] = []
    for placement in console.active_placements:
        rate = prices.console_prices.get(console.size)
        if rate is None:
            missing.append(f"console_prices:{console.size}")
            rate = 0.0
        meters = fabric.console_meters.get(console.size)
        if meters is None:
            missing.append(f"fabric.console_meters:{console.size}")
            meters = 0.0

        accessory_price = 0.0
        if placement.accessory_id is not None:
            found = catalogs.accessory_price(placement.accessory_id)
            if found is None:
                missing.append(f"accessory_prices:{placement.accessory_id}")
            else:
                accessory_price = found

        lines.append(
            ConsoleLinePrice(
                section=placement.section,  # type: ignore[arg-type]
                after_seat=placement.after_seat,  # type: ignore[arg-type]
                size=console.size,
                console_price=round(rate, 2),
                accessory_id=placement.accessory_id,
                accessory_price=round(accessory_price, 2),
                fabric_meters=round(meters, 2),
            )
        )
    return ConsolePrice(lines=tuple(lines))
