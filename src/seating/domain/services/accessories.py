"""Lounger and recliner normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..catalog import OptionCatalog
from ..labels import normalize_shape, parse_bool, parse_count, parse_side
from ..topology import lounger_placements, max_loungers, recliner_zones
from ..value_objects import (
    BaseShape,
    LoungerConfig,
    PillowConfig,
    ReclinerSectionConfig,
    ReclinerZone,
    Side,
)

logger = logging.getLogger(__name__)


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, (LoungerConfig, PillowConfig, ReclinerSectionConfig)):
        return raw.to_dict()
    if isinstance(raw, Mapping):
        return raw
    return {}


class LoungerNormalizer:
    """Coerces lounger selections into a shape-valid LoungerConfig."""

    def __init__(self, options: OptionCatalog | None = None) -> None:
        self.options = options or OptionCatalog()

    def default(self) -> LoungerConfig:
        return LoungerConfig(
            required=False,
            number_of_loungers=1,
            size=self.options.lounger_sizes.default or "",
            placement=Side.LHS,
            storage=False,
        )

    def normalize(self, raw: Any, shape: BaseShape | str) -> LoungerConfig:
        """Normalize a stored lounger record.

        A lounger that is not required returns the full default record so
        stale sizes or placements never reappear when it is enabled again.
        """
        shape = normalize_shape(shape)
        data = _as_mapping(raw)
        if not parse_bool(data.get("required")):
            return self.default()

        raw_count = data.get("numberOfLoungers", data.get("quantity"))
        count = parse_count(raw_count, default=1)
        limit = max_loungers(shape)
        if count < 1 or count > limit:
            clamped = min(max(count, 1), limit)
            logger.debug(
                f"Lounger count {raw_count!r} clamped to {clamped} for {shape.value}"
            )
            count = clamped

        sizes = self.options.lounger_sizes
        size = sizes.match(data.get("size"))
        if size is None:
            size = sizes.default or ""
            if data.get("size") is not None:
                logger.debug(f"Lounger size {data.get('size')!r} unknown, using {size!r}")

        legal = lounger_placements(shape, count)
        raw_placement = data.get("placement", data.get("position"))
        placement = parse_side(raw_placement)
        if placement not in legal:
            if raw_placement is not None:
                logger.debug(
                    f"Lounger placement {raw_placement!r} not legal for {count} "
                    f"lounger(s) on {shape.value}, using {legal[0].value}"
                )
            placement = legal[0]

        return LoungerConfig(
            required=True,
            number_of_loungers=count,
            size=size,
            placement=placement,
            storage=parse_bool(data.get("storage")),
        )


class PillowNormalizer:
    """Coerces the additional pillow selection against the pillow types."""

    def __init__(self, options: OptionCatalog | None = None) -> None:
        self.options = options or OptionCatalog()

    def default(self) -> PillowConfig:
        return PillowConfig(required=False, count=1, pillow_type=self.options.pillow_types.default or "")

    def normalize(self, raw: Any) -> PillowConfig:
        data = _as_mapping(raw)
        if not parse_bool(data.get("required")):
            return self.default()

        raw_count = data.get("quantity", data.get("count"))
        count = parse_count(raw_count, default=1)
        if count < 1:
            logger.debug(f"Pillow count {raw_count!r} raised to 1")
            count = 1

        types = self.options.pillow_types
        pillow_type = types.match(data.get("type"))
        if pillow_type is None:
            pillow_type = types.default or ""
            if data.get("type") is not None:
                logger.debug(f"Pillow type {data.get('type')!r} unknown, using {pillow_type!r}")

        return PillowConfig(required=True, count=count, pillow_type=pillow_type)


class ReclinerNormalizer:
    """Coerces per-zone recliner selections against the active zones."""

    def normalize(
        self, shape: BaseShape | str, raw: Mapping[Any, Any] | None
    ) -> dict[ReclinerZone, ReclinerSectionConfig]:
        shape = normalize_shape(shape)
        by_zone: dict[ReclinerZone, Any] = {}
        for key, value in (raw or {}).items():
            if isinstance(key, ReclinerZone):
                by_zone[key] = value
                continue
            try:
                by_zone[ReclinerZone(str(key).strip().upper())] = value
            except ValueError:
                logger.debug(f"Ignoring unknown recliner zone {key!r}")

        active = recliner_zones(shape)
        result: dict[ReclinerZone, ReclinerSectionConfig] = {}
        for zone in ReclinerZone:
            data = _as_mapping(by_zone.get(zone))
            required = parse_bool(data.get("required"))
            if zone not in active:
                if required:
                    logger.debug(
                        f"Recliner zone {zone.value} inactive for {shape.value}; resetting"
                    )
                result[zone] = ReclinerSectionConfig()
                continue
            if not required:
                result[zone] = ReclinerSectionConfig()
                continue

            count = parse_count(data.get("numberOfRecliners"), default=1)
            if count < 1:
                logger.debug(f"Recliner zone {zone.value}: count {count} raised to 1")
                count = 1
            positioning = parse_side(data.get("positioning")) or Side.LHS
            result[zone] = ReclinerSectionConfig(
                required=True, number_of_recliners=count, positioning=positioning
            )
        return result


def normalize_lounger(
    raw: Any, shape: BaseShape | str, options: OptionCatalog | None = None
) -> LoungerConfig:
    return LoungerNormalizer(options).normalize(raw, shape)


def normalize_pillows(raw: Any, options: OptionCatalog | None = None) -> PillowConfig:
    return PillowNormalizer(options).normalize(raw)


def normalize_recliner(
    shape: BaseShape | str, raw: Mapping[Any, Any] | None
) -> dict[ReclinerZone, ReclinerSectionConfig]:
    return ReclinerNormalizer().normalize(shape, raw)
