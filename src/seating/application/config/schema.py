"""Pydantic models for stored seating configurations.

Stored configurations carry loosely typed historical data: seater values as
labels or integers, yes/no flags as booleans or strings, counts as
``"2 Nos."``. The schema only checks structure (objects where objects are
expected, lists where lists are expected, scalars at the leaves) and leaves
the value repair to the domain normalizer. Unknown keys are kept so legacy
flat keys reach the normalizer.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def _require_scalar(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise ValueError("must be a string, number, boolean or null")


Scalar = Annotated[Any, AfterValidator(_require_scalar)]


class SectionInput(BaseModel):
    """One entry of the ``sections`` map.

    A bare label or seat count is accepted in place of the object form.
    """

    model_config = ConfigDict(extra="allow")

    seater: Scalar = Field(default=None, description="Seater label, e.g. '3-Seater'")
    qty: Scalar = Field(default=None, description="Number of identical units")

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_value(cls, data: Any) -> Any:
        if data is None or isinstance(data, (str, int, float)):
            return {"seater": data}
        return data


class ConsolePlacementInput(BaseModel):
    """One console placement; a bare position value such as 'front_2' is accepted."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    section: Scalar = None
    after_seat: Scalar = Field(default=None, alias="afterSeat")
    position: Scalar = None
    accessory_id: Scalar = Field(default=None, alias="accessoryId")

    @model_validator(mode="before")
    @classmethod
    def _wrap_position(cls, data: Any) -> Any:
        if data is None or isinstance(data, (str, int)):
            return {"position": data}
        return data


class ConsoleInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    required: Scalar = None
    size: Scalar = None
    quantity: Scalar = None
    placements: list[ConsolePlacementInput] = Field(default_factory=list)
    accessories: list[Scalar] = Field(default_factory=list)


class LoungerInput(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    required: Scalar = None
    number_of_loungers: Scalar = Field(default=None, alias="numberOfLoungers")
    quantity: Scalar = None
    size: Scalar = None
    placement: Scalar = None
    position: Scalar = None
    storage: Scalar = None


class ReclinerZoneInput(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    required: Scalar = None
    number_of_recliners: Scalar = Field(default=None, alias="numberOfRecliners")
    positioning: Scalar = None


class DimensionsInput(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    seat_width: Scalar = Field(default=None, alias="seatWidth", description="Seat width in inches")
    seat_depth: Scalar = Field(default=None, alias="seatDepth", description="Seat depth in inches")


class PillowsInput(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    required: Scalar = None
    quantity: Scalar = None
    count: Scalar = None
    pillow_type: Scalar = Field(default=None, alias="type")


class FabricInput(BaseModel):
    """Fabric codes per upholstery part."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    structure_code: Scalar = Field(default=None, alias="structureCode")
    backrest_code: Scalar = Field(default=None, alias="backrestCode")
    seat_code: Scalar = Field(default=None, alias="seatCode")
    headrest_code: Scalar = Field(default=None, alias="headrestCode")


class ChoiceInput(BaseModel):
    """A single catalog choice such as ``{"type": "HR Foam"}``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    choice_type: Scalar = Field(default=None, alias="type")


class DiscountInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Scalar = None


class ConfigurationInput(BaseModel):
    """Root model of a stored configuration document.

    Attributes:
        base_shape: Base shape label ("STANDARD", "L SHAPE", ...).
        shape: Older spelling of ``base_shape``.
        sections: Section entries keyed by tag.
        console: Console selection.
        lounger: Lounger selection.
        recliner: Recliner selections keyed by zone (F, L, R, C).
        dimensions: Seat width and depth.
        additional_pillows: Scatter pillow selection.
        fabric: Fabric codes per upholstery part.
        foam: Foam upgrade.
        legs: Leg style.
        discount: Discount code.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    base_shape: Scalar = Field(default=None, alias="baseShape")
    shape: Scalar = None
    sections: dict[str, SectionInput] = Field(default_factory=dict)
    console: ConsoleInput | None = None
    lounger: LoungerInput | None = None
    recliner: dict[str, ReclinerZoneInput] = Field(default_factory=dict)
    dimensions: DimensionsInput | None = None
    additional_pillows: PillowsInput | None = Field(default=None, alias="additionalPillows")
    fabric: FabricInput | None = None
    foam: ChoiceInput | None = None
    legs: ChoiceInput | None = None
    discount: DiscountInput | None = None

    def to_raw(self) -> dict[str, Any]:
        """Dump back to the stored mapping format, legacy keys included."""
        return self.model_dump(by_alias=True, exclude_none=True)
