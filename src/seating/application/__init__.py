"""Application layer - use cases and orchestration."""

from .commands import DescribeShapeCommand, NormalizeConfigurationCommand
from .dtos import ConfigurationOutput, ShapeOptionsOutput, build_event
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "ConfigurationOutput",
    "DescribeShapeCommand",
    "NormalizeConfigurationCommand",
    "ServiceFactory",
    "ShapeOptionsOutput",
    "build_event",
    "get_factory",
    "reset_factory",
    "set_factory",
]
