"""Infrastructure layer - output formatters."""

from .formatters import (
    ConfigurationFormatter,
    JsonFormatter,
    PriceBreakdownFormatter,
    ShapeOptionsFormatter,
    SlotFormatter,
    TextFormatter,
)

__all__ = [
    "ConfigurationFormatter",
    "JsonFormatter",
    "PriceBreakdownFormatter",
    "ShapeOptionsFormatter",
    "SlotFormatter",
    "TextFormatter",
]
