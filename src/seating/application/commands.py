"""Application commands (use cases) for seating configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from seating.domain.catalog import Catalogs
from seating.domain.labels import normalize_shape
from seating.domain.services import (
    ConfigurationEvent,
    ConfigurationNormalizer,
    PricingCalculator,
    active_section_tags,
)
from seating.domain.topology import (
    allowed_options,
    console_zones,
    lounger_placements,
    max_loungers,
    recliner_zones,
)
from seating.domain.value_objects import SofaConfiguration

from .dtos import ConfigurationOutput, ShapeOptionsOutput

logger = logging.getLogger(__name__)


class NormalizeConfigurationCommand:
    """Command to normalize a stored configuration and derive its price.

    Args:
        catalogs: Catalog snapshot shared by every execution.
        normalizer: Pipeline used to repair configurations.
        pricing_calculator: Calculator used for price breakdowns.
    """

    def __init__(
        self,
        catalogs: Catalogs | None = None,
        normalizer: ConfigurationNormalizer | None = None,
        pricing_calculator: PricingCalculator | None = None,
    ) -> None:
        self.catalogs = catalogs or Catalogs()
        self.normalizer = normalizer or ConfigurationNormalizer(self.catalogs)
        self.pricing_calculator = pricing_calculator or PricingCalculator()

    def execute(
        self,
        raw: Mapping[str, Any] | SofaConfiguration | None,
        shape: str | None = None,
        include_pricing: bool = True,
    ) -> ConfigurationOutput:
        """Normalize ``raw`` and derive its summary and, optionally, its price.

        Args:
            raw: Stored configuration mapping or a normalized configuration.
            shape: Base shape overriding the stored one.
            include_pricing: Whether to compute the price breakdown.

        Returns:
            ConfigurationOutput with the normalized configuration.
        """
        configuration = self.normalizer.normalize(raw, shape=shape, catalogs=self.catalogs)
        logger.debug(f"Normalized configuration for shape {configuration.shape.value}")
        return self._output(configuration, include_pricing)

    def apply_event(
        self,
        state: Mapping[str, Any] | SofaConfiguration,
        event: ConfigurationEvent,
        include_pricing: bool = True,
    ) -> ConfigurationOutput:
        """Apply one UI event and return the re-normalized configuration."""
        configuration = self.normalizer.reduce(state, event, catalogs=self.catalogs)
        logger.debug(f"Applied {type(event).__name__}")
        return self._output(configuration, include_pricing)

    def _output(self, configuration: SofaConfiguration, include_pricing: bool) -> ConfigurationOutput:
        summary = self.normalizer.summarize(configuration, catalogs=self.catalogs)
        breakdown = None
        if include_pricing:
            breakdown = self.pricing_calculator.derive(configuration, self.catalogs)
        return ConfigurationOutput(
            configuration=configuration, summary=summary, breakdown=breakdown
        )


class DescribeShapeCommand:
    """Command listing the sections and options a base shape allows."""

    def __init__(self, catalogs: Catalogs | None = None) -> None:
        self.catalogs = catalogs or Catalogs()

    def execute(self, shape: str) -> ShapeOptionsOutput:
        resolved = normalize_shape(shape)
        tags = active_section_tags(resolved)
        options = self.catalogs.options
        return ShapeOptionsOutput(
            shape=resolved,
            active_sections=tags,
            allowed_options={tag: allowed_options(resolved, tag) for tag in tags},
            console_zones=list(console_zones(resolved)),
            recliner_zones=list(recliner_zones(resolved)),
            max_loungers=max_loungers(resolved),
            lounger_placements={
                count: lounger_placements(resolved, count)
                for count in range(1, max_loungers(resolved) + 1)
            },
            console_sizes=options.console_sizes.values,
            lounger_sizes=options.lounger_sizes.values,
            seat_widths=options.seat_widths,
            seat_depths=options.seat_depths,
            pillow_types=options.pillow_types.values,
        )
