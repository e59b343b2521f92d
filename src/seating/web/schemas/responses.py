"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ConfigurationResponseSchema(BaseModel):
    """Response for normalization, pricing and reducer endpoints."""

    configuration: dict[str, Any] = Field(
        ..., description="Normalized configuration in the stored format"
    )
    summary: dict[str, Any] = Field(
        ..., description="Seat total, max consoles, legal slots and allowed options"
    )
    pricing: dict[str, Any] | None = Field(
        default=None, description="Price breakdown, when requested"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Repairs the normalizer would apply"
    )


class ShapeOptionsSchema(BaseModel):
    """Sections and options a base shape allows."""

    shape: str
    active_sections: list[str]
    allowed_options: dict[str, list[str]]
    console_zones: list[str]
    recliner_zones: list[str]
    max_loungers: int
    lounger_placements: dict[str, list[str]]
    console_sizes: list[str] = Field(default_factory=list)
    lounger_sizes: list[str] = Field(default_factory=list)
    seat_widths: list[int] = Field(default_factory=list)
    seat_depths: list[int] = Field(default_factory=list)
    pillow_types: list[str] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
