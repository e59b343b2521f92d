"""Pydantic models for option catalogs and price tables.

Option rows come from the remote table store and carry optional, loosely
typed columns; every fallback (display label, sort order, active flag,
metadata) is applied here so the domain receives fully-defaulted values.

Catalogs are edited by hand in the admin tool, so one bad cell must not
take the storefront down. Unreadable rates and option rows are dropped
before validation, their defaults apply, and their paths are kept in
``invalid_entries`` for the validator and the price breakdown.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from seating.domain.catalog import (
    Catalogs,
    FabricTable,
    OptionCatalog,
    OptionEntry,
    OptionField,
    PriceTable,
)


def read_rate(value: Any, limit: float | None = None) -> float | None:
    """Finite, non-negative number from a catalog cell, or None if unreadable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    if limit is not None and number > limit:
        return None
    return number


def drop_invalid_rates(
    data: Any,
    scalars: tuple[str, ...],
    tables: dict[str, float | None],
) -> Any:
    """Remove unreadable rates from raw table data so their defaults apply.

    ``tables`` maps each keyed table to its upper bound. Dropped paths are
    stored under ``invalid_entries``. None in a scalar means "not set".
    """
    if not isinstance(data, dict):
        return data
    cleaned = dict(data)
    invalid: list[str] = []
    for name in scalars:
        if name not in cleaned:
            continue
        if cleaned[name] is None:
            del cleaned[name]
        elif read_rate(cleaned[name]) is None:
            invalid.append(name)
            del cleaned[name]
    for name, limit in tables.items():
        if name not in cleaned:
            continue
        table = cleaned[name]
        if table is None:
            del cleaned[name]
            continue
        if not isinstance(table, dict):
            invalid.append(name)
            del cleaned[name]
            continue
        kept: dict[str, float] = {}
        for key, value in table.items():
            rate = read_rate(value, limit)
            if rate is None:
                invalid.append(f"{name}.{key}")
            else:
                kept[str(key)] = rate
        cleaned[name] = kept
    cleaned["invalid_entries"] = invalid
    return cleaned


class OptionEntrySchema(BaseModel):
    """One row of an option table."""

    model_config = ConfigDict(extra="ignore")

    option_value: str = Field(..., min_length=1, description="Stored option value")
    display_label: str | None = Field(default=None, description="Label shown to shoppers")
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("option_value", mode="before")
    @classmethod
    def _stringify_value(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value)) if float(value).is_integer() else str(value)
        return value

    @field_validator("metadata", mode="before")
    @classmethod
    def _default_metadata(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_domain(self) -> OptionEntry:
        return OptionEntry(
            value=self.option_value,
            display_label=self.display_label or self.option_value,
            sort_order=self.sort_order,
            metadata=dict(self.metadata),
        )


class OptionCatalogSchema(BaseModel):
    """Option lists of one product category, keyed by field name.

    Rows that fail validation are left out of their field.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    category: str = Field(default="sofa")
    option_fields: dict[str, list[OptionEntrySchema]] = Field(
        default_factory=dict, alias="fields", description="Option rows keyed by field name"
    )
    invalid_entries: list[str] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_rows(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        key = "fields" if "fields" in cleaned else "option_fields"
        raw_fields = cleaned.pop(key, None)
        invalid: list[str] = []
        rows_by_field: dict[str, list[OptionEntrySchema]] = {}
        if raw_fields is not None and not isinstance(raw_fields, dict):
            invalid.append("fields")
        elif raw_fields:
            for name, rows in raw_fields.items():
                if not isinstance(rows, list):
                    invalid.append(f"fields.{name}")
                    continue
                kept: list[OptionEntrySchema] = []
                for index, row in enumerate(rows):
                    try:
                        kept.append(OptionEntrySchema.model_validate(row))
                    except ValidationError:
                        invalid.append(f"fields.{name}[{index}]")
                rows_by_field[str(name)] = kept
        if not isinstance(cleaned.get("category", "sofa"), str):
            invalid.append("category")
            del cleaned["category"]
        cleaned["fields"] = rows_by_field
        cleaned["invalid_entries"] = invalid
        return cleaned

    def to_domain(self) -> OptionCatalog:
        fields: dict[str, OptionField] = {}
        for name, rows in self.option_fields.items():
            active = [row for row in rows if row.is_active]
            active.sort(key=lambda row: row.sort_order)
            fields[name] = OptionField(
                name=name, entries=tuple(row.to_domain() for row in active)
            )
        return OptionCatalog(category=self.category, fields=fields)


_FABRIC_SCALARS = (
    "seater_meters_per_120_in",
    "corner_meters",
    "backrest_meters",
    "lounger_base_meters",
    "lounger_additional_meters",
)


class FabricTableSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    seater_meters_per_120_in: float = Field(default=21.0, ge=0)
    corner_meters: float = Field(default=7.0, ge=0)
    backrest_meters: float = Field(default=2.0, ge=0)
    lounger_base_meters: float = Field(default=5.0, ge=0)
    lounger_additional_meters: float = Field(default=3.0, ge=0)
    console_meters: dict[str, float] = Field(
        default_factory=lambda: {"Console-6 in": 1.5, "Console-10 in": 2.0}
    )
    invalid_entries: list[str] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_rates(cls, data: Any) -> Any:
        return drop_invalid_rates(data, _FABRIC_SCALARS, {"console_meters": None})

    def to_domain(self) -> FabricTable:
        return FabricTable(
            seater_meters_per_120_in=self.seater_meters_per_120_in,
            corner_meters=self.corner_meters,
            backrest_meters=self.backrest_meters,
            lounger_base_meters=self.lounger_base_meters,
            lounger_additional_meters=self.lounger_additional_meters,
            console_meters=dict(self.console_meters),
        )


_PRICE_SCALARS = (
    "base_price",
    "corner_percent",
    "backrest_percent",
    "additional_seat_percent",
    "lounger_base_percent",
    "lounger_additional_percent",
    "lounger_storage_price",
    "recliner_unit_price",
)

# Keyed tables and their upper bound
_PRICE_TABLES: dict[str, float | None] = {
    "console_prices": None,
    "accessory_prices": None,
    "pillow_prices": None,
    "fabric_prices": None,
    "foam_prices": None,
    "leg_prices": None,
    "seat_depth_percent": None,
    "seat_width_percent": None,
    "discount_percent": 100.0,
}


class PriceTableSchema(BaseModel):
    """Numeric price table.

    Percentages apply to ``base_price``, the price of a 2-seater unit,
    except the seat depth and width percentages, which apply to the
    running total. Discount codes match case-insensitively.
    """

    model_config = ConfigDict(extra="ignore")

    base_price: float | None = Field(default=None, ge=0, description="2-seater unit price")
    corner_percent: float = Field(default=65.0, ge=0)
    backrest_percent: float = Field(default=14.0, ge=0)
    additional_seat_percent: float = Field(default=35.0, ge=0)
    lounger_base_percent: float = Field(default=40.0, ge=0)
    lounger_additional_percent: float = Field(default=4.0, ge=0)
    lounger_storage_price: float = Field(default=3000.0, ge=0)
    recliner_unit_price: float = Field(default=14000.0, ge=0)
    console_prices: dict[str, float] = Field(
        default_factory=lambda: {"Console-6 in": 8000.0, "Console-10 in": 12000.0}
    )
    accessory_prices: dict[str, float] = Field(default_factory=dict)
    pillow_prices: dict[str, float] | None = Field(
        default=None, description="Per pillow type; None keeps the built-in prices"
    )
    fabric_prices: dict[str, float] = Field(default_factory=dict, description="Per meter")
    foam_prices: dict[str, float] = Field(default_factory=dict)
    leg_prices: dict[str, float] = Field(default_factory=dict)
    seat_depth_percent: dict[str, float] = Field(default_factory=dict)
    seat_width_percent: dict[str, float] = Field(default_factory=dict)
    discount_percent: dict[str, float] = Field(default_factory=dict)
    fabric: FabricTableSchema = Field(default_factory=FabricTableSchema)
    invalid_entries: list[str] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_rates(cls, data: Any) -> Any:
        cleaned = drop_invalid_rates(data, _PRICE_SCALARS, _PRICE_TABLES)
        if isinstance(cleaned, dict) and "fabric" in cleaned:
            if cleaned["fabric"] is None:
                del cleaned["fabric"]
            elif not isinstance(cleaned["fabric"], dict):
                cleaned["invalid_entries"].append("fabric")
                del cleaned["fabric"]
        return cleaned

    def to_domain(self) -> PriceTable:
        extra: dict[str, Any] = {}
        if self.pillow_prices is not None:
            extra["pillow_prices"] = dict(self.pillow_prices)
        return PriceTable(
            base_price=self.base_price,
            corner_percent=self.corner_percent,
            backrest_percent=self.backrest_percent,
            additional_seat_percent=self.additional_seat_percent,
            lounger_base_percent=self.lounger_base_percent,
            lounger_additional_percent=self.lounger_additional_percent,
            lounger_storage_price=self.lounger_storage_price,
            recliner_unit_price=self.recliner_unit_price,
            console_prices=dict(self.console_prices),
            accessory_prices=dict(self.accessory_prices),
            fabric_prices=dict(self.fabric_prices),
            foam_prices=dict(self.foam_prices),
            leg_prices=dict(self.leg_prices),
            seat_depth_percent=dict(self.seat_depth_percent),
            seat_width_percent=dict(self.seat_width_percent),
            discount_percent={
                code.strip().lower(): percent for code, percent in self.discount_percent.items()
            },
            fabric=self.fabric.to_domain(),
            invalid_entries=(
                *(f"prices.{entry}" for entry in self.invalid_entries),
                *(f"prices.fabric.{entry}" for entry in self.fabric.invalid_entries),
            ),
            **extra,
        )


class CatalogFileSchema(BaseModel):
    """Root model of a catalog document: ``{"options": ..., "prices": ...}``.

    A section that is not an object is replaced by the built-in defaults.
    """

    model_config = ConfigDict(extra="ignore")

    options: OptionCatalogSchema = Field(default_factory=OptionCatalogSchema)
    prices: PriceTableSchema = Field(default_factory=PriceTableSchema)
    invalid_entries: list[str] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_sections(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        invalid: list[str] = []
        for name in ("options", "prices"):
            if name not in cleaned:
                continue
            if cleaned[name] is None:
                del cleaned[name]
            elif not isinstance(cleaned[name], dict):
                invalid.append(name)
                del cleaned[name]
        cleaned["invalid_entries"] = invalid
        return cleaned

    def to_domain(self) -> Catalogs:
        prices = self.prices.to_domain()
        invalid = (
            *self.invalid_entries,
            *(f"options.{entry}" for entry in self.options.invalid_entries),
            *prices.invalid_entries,
        )
        return Catalogs(
            options=self.options.to_domain(),
            prices=replace(prices, invalid_entries=invalid),
        )
