"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class NormalizeRequest(BaseModel):
    """Request for normalizing a stored configuration."""

    config: dict[str, Any] = Field(..., description="Stored configuration JSON")
    shape: str | None = Field(
        default=None, description="Base shape overriding the stored one"
    )
    include_pricing: bool = Field(
        default=False, description="Also derive the price breakdown"
    )


class PriceRequest(BaseModel):
    """Request for pricing a stored configuration."""

    config: dict[str, Any] = Field(..., description="Stored configuration JSON")
    shape: str | None = Field(
        default=None, description="Base shape overriding the stored one"
    )
    base_price: float | None = Field(
        default=None, ge=0, description="Price of a 2-seater unit, overriding the catalog"
    )


class EventSchema(BaseModel):
    """One UI event applied by the configuration reducer."""

    type: str = Field(..., description="Event type, e.g. shape_changed, section_edited")
    payload: dict[str, Any] = Field(
        default_factory=dict, description="Event fields, e.g. {'shape': 'L SHAPE'}"
    )


class ReduceRequest(BaseModel):
    """Request for applying one event to a configuration state."""

    state: dict[str, Any] = Field(
        default_factory=dict, description="Current configuration state"
    )
    event: EventSchema = Field(..., description="Event to apply")
    include_pricing: bool = Field(
        default=True, description="Also derive the price breakdown"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Stored configuration JSON")
