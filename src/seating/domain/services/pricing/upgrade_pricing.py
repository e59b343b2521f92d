"""Pillow, fabric, upgrade and discount pricing.

These lines are optional: an unselected add-on contributes 0 and a
selected one without a catalog price is listed as missing.
"""

from __future__ import annotations

from ...catalog import SEAT_DEPTH_FIELD, SEAT_WIDTH_FIELD, Catalogs
from ...value_objects import FabricSelection, PillowConfig, SofaConfiguration
from .models import DiscountPrice, FabricCharge, PillowPrice, UpgradePrice


def price_pillows(pillows: PillowConfig, catalogs: Catalogs, missing: list[str]) -> PillowPrice:
    if pillows.quantity == 0:
        return PillowPrice()
    unit_price = catalogs.pillow_price(pillows.pillow_type)
    if unit_price is None:
        missing.append(f"pillow_prices:{pillows.pillow_type}")
        unit_price = 0.0
    return PillowPrice(
        quantity=pillows.quantity,
        pillow_type=pillows.pillow_type,
        unit_price=round(unit_price, 2),
        price=round(unit_price * pillows.quantity, 2),
    )


def price_fabric(
    fabric: FabricSelection, meters: float, catalogs: Catalogs, missing: list[str]
) -> FabricCharge:
    """Charge the structure fabric over the whole consumption estimate."""
    code = fabric.structure_code
    if code is None:
        return FabricCharge(meters=round(meters, 2))
    rate = catalogs.prices.fabric_prices.get(code)
    if rate is None:
        missing.append(f"fabric_prices:{code}")
        rate = 0.0
    return FabricCharge(
        code=code,
        meters=round(meters, 2),
        rate=round(rate, 2),
        price=round(rate * meters, 2),
    )


def price_upgrades(
    config: SofaConfiguration,
    catalogs: Catalogs,
    running_price: float,
    missing: list[str],
) -> UpgradePrice:
    """Price foam and legs, and the seat dimension surcharge on ``running_price``.

    ``running_price`` covers everything priced before the foam.
    """
    foam_price = 0.0
    if config.foam_type:
        found = catalogs.foam_price(config.foam_type)
        if found is None:
            missing.append(f"foam_prices:{config.foam_type}")
        else:
            foam_price = found

    depth_percent = catalogs.dimension_percent(SEAT_DEPTH_FIELD, config.seat_depth)
    width_percent = catalogs.dimension_percent(SEAT_WIDTH_FIELD, config.seat_width)
    dimension_price = round((running_price + foam_price) * (depth_percent + width_percent) / 100.0, 2)

    leg_price = 0.0
    if config.leg_type:
        found = catalogs.leg_price(config.leg_type)
        if found is None:
            missing.append(f"leg_prices:{config.leg_type}")
        else:
            leg_price = found

    return UpgradePrice(
        foam_type=config.foam_type,
        foam_price=round(foam_price, 2),
        seat_depth_percent=depth_percent,
        seat_width_percent=width_percent,
        dimension_price=dimension_price,
        leg_type=config.leg_type,
        leg_price=round(leg_price, 2),
    )


def price_discount(
    code: str | None, subtotal: float, catalogs: Catalogs, missing: list[str]
) -> DiscountPrice:
    if code is None:
        return DiscountPrice()
    percent = catalogs.discount_rate(code)
    if percent is None:
        missing.append(f"discount_percent:{code}")
        return DiscountPrice(code=code)
    return DiscountPrice(code=code, percent=percent, amount=round(subtotal * percent / 100.0, 2))
