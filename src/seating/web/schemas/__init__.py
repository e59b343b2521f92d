"""Pydantic schemas for the REST API."""

from seating.web.schemas.requests import (
    ConfigValidateRequest,
    EventSchema,
    NormalizeRequest,
    PriceRequest,
    ReduceRequest,
)
from seating.web.schemas.responses import (
    ConfigurationResponseSchema,
    ErrorResponseSchema,
    ShapeOptionsSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "EventSchema",
    "NormalizeRequest",
    "PriceRequest",
    "ReduceRequest",
    # Responses
    "ConfigurationResponseSchema",
    "ErrorResponseSchema",
    "ShapeOptionsSchema",
    "ValidationResultSchema",
]
