"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from seating.domain.catalog import Catalogs

if TYPE_CHECKING:
    from seating.application.commands import (
        DescribeShapeCommand,
        NormalizeConfigurationCommand,
    )
    from seating.domain.services import ConfigurationNormalizer, PricingCalculator
    from seating.infrastructure.formatters import JsonFormatter, TextFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Holds the catalog snapshot of a session and hands out services bound
    to it. Tests inject a factory with their own catalogs through
    ``set_factory``.
    """

    catalogs: Catalogs = field(default_factory=Catalogs)

    _normalizer: "ConfigurationNormalizer | None" = field(
        default=None, init=False, repr=False
    )
    _pricing_calculator: "PricingCalculator | None" = field(
        default=None, init=False, repr=False
    )

    def get_normalizer(self) -> "ConfigurationNormalizer":
        """Get or create the configuration normalizer."""
        if self._normalizer is None:
            from seating.domain.services import ConfigurationNormalizer

            self._normalizer = ConfigurationNormalizer(self.catalogs)
        return self._normalizer

    def get_pricing_calculator(self) -> "PricingCalculator":
        """Get or create the pricing calculator."""
        if self._pricing_calculator is None:
            from seating.domain.services import PricingCalculator

            self._pricing_calculator = PricingCalculator()
        return self._pricing_calculator

    def get_text_formatter(self) -> "TextFormatter":
        from seating.infrastructure.formatters import TextFormatter

        return TextFormatter()

    def get_json_formatter(self) -> "JsonFormatter":
        from seating.infrastructure.formatters import JsonFormatter

        return JsonFormatter()

    def create_normalize_command(self) -> "NormalizeConfigurationCommand":
        """Create a NormalizeConfigurationCommand bound to this factory's catalogs."""
        from seating.application.commands import NormalizeConfigurationCommand

        return NormalizeConfigurationCommand(
            catalogs=self.catalogs,
            normalizer=self.get_normalizer(),
            pricing_calculator=self.get_pricing_calculator(),
        )

    def create_describe_command(self) -> "DescribeShapeCommand":
        from seating.application.commands import DescribeShapeCommand

        return DescribeShapeCommand(catalogs=self.catalogs)


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
