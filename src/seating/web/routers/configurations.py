"""Configuration normalization, pricing and reducer endpoints."""

from fastapi import APIRouter

from seating.application import ConfigurationOutput, ServiceFactory, build_event
from seating.application.config import load_config_from_dict
from seating.web.dependencies import NormalizeCommandDep, ServiceFactoryDep
from seating.web.exceptions import InvalidEventError
from seating.web.schemas.requests import NormalizeRequest, PriceRequest, ReduceRequest
from seating.web.schemas.responses import ConfigurationResponseSchema

router = APIRouter(prefix="/configurations", tags=["configurations"])


def _to_schema(output: ConfigurationOutput) -> ConfigurationResponseSchema:
    data = output.to_dict()
    return ConfigurationResponseSchema(
        configuration=data["configuration"],
        summary=data["summary"],
        pricing=data.get("pricing"),
    )


@router.post("/normalize", response_model=ConfigurationResponseSchema)
async def normalize_configuration(
    request: NormalizeRequest,
    command: NormalizeCommandDep,
) -> ConfigurationResponseSchema:
    """Repair a stored configuration into one satisfying every invariant.

    Raises:
        ConfigError: If the configuration is structurally malformed (422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(
        config.to_raw(), shape=request.shape, include_pricing=request.include_pricing
    )
    return _to_schema(output)


@router.post("/price", response_model=ConfigurationResponseSchema)
async def price_configuration(
    request: PriceRequest,
    factory: ServiceFactoryDep,
) -> ConfigurationResponseSchema:
    """Normalize a configuration and derive its price breakdown."""
    config = load_config_from_dict(request.config)
    if request.base_price is not None:
        factory = ServiceFactory(factory.catalogs.with_base_price(request.base_price))
    command = factory.create_normalize_command()
    output = command.execute(config.to_raw(), shape=request.shape, include_pricing=True)
    return _to_schema(output)


@router.post("/reduce", response_model=ConfigurationResponseSchema)
async def reduce_configuration(
    request: ReduceRequest,
    command: NormalizeCommandDep,
) -> ConfigurationResponseSchema:
    """Apply one UI event to a configuration state and re-normalize it.

    Raises:
        InvalidEventError: If the event type or payload is not understood.
    """
    state = load_config_from_dict(request.state)
    try:
        event = build_event(request.event.type, request.event.payload)
    except ValueError as e:
        raise InvalidEventError(str(e), request.event.type) from e

    output = command.apply_event(
        state.to_raw(), event, include_pricing=request.include_pricing
    )
    return _to_schema(output)
