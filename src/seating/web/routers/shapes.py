"""Base shape endpoints."""

from fastapi import APIRouter

from seating.domain.labels import is_known_shape
from seating.domain.value_objects import BaseShape
from seating.web.dependencies import DescribeCommandDep
from seating.web.exceptions import UnknownShapeError
from seating.web.schemas.responses import ShapeOptionsSchema

router = APIRouter(prefix="/shapes", tags=["shapes"])


@router.get("", response_model=list[str])
async def list_shapes() -> list[str]:
    """List the base shapes the engine supports."""
    return [shape.value for shape in BaseShape]


@router.get("/{shape}/options", response_model=ShapeOptionsSchema)
async def shape_options(
    shape: str,
    command: DescribeCommandDep,
) -> ShapeOptionsSchema:
    """Sections, seater options, zones and catalog lists a shape allows.

    Raises:
        UnknownShapeError: If the shape name is not recognised (404).
    """
    if not is_known_shape(shape):
        raise UnknownShapeError(shape)
    return ShapeOptionsSchema(**command.execute(shape).to_dict())
