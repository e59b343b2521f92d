"""Configuration validation endpoints."""

from fastapi import APIRouter

from seating.application.config import validate_config
from seating.web.dependencies import ServiceFactoryDep
from seating.web.schemas.requests import ConfigValidateRequest
from seating.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    factory: ServiceFactoryDep,
) -> ValidationResultSchema:
    """Validate a stored configuration without normalizing it.

    Schema problems are reported as errors; every repair the normalizer
    would apply is reported as a warning.
    """
    result = validate_config(request.config, factory.catalogs)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value} for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
