"""FastAPI dependency injection for seating services."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from seating.application.catalog import default_catalogs, load_catalog
from seating.application.commands import DescribeShapeCommand, NormalizeConfigurationCommand
from seating.application.factory import ServiceFactory
from seating.domain.catalog import Catalogs

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "SEATING_CATALOG"


@lru_cache(maxsize=1)
def get_catalogs() -> Catalogs:
    """Load the catalog named by SEATING_CATALOG once per process.

    Falls back to the built-in option lists and rates when the variable is
    unset.
    """
    path = os.environ.get(CATALOG_ENV_VAR)
    if not path:
        return default_catalogs()
    logger.info(f"Loading catalog from {path}")
    return load_catalog(Path(path))


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance bound to the process catalog."""
    return ServiceFactory(get_catalogs())


def get_normalize_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> NormalizeConfigurationCommand:
    """Dependency for NormalizeConfigurationCommand."""
    return factory.create_normalize_command()


def get_describe_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> DescribeShapeCommand:
    """Dependency for DescribeShapeCommand."""
    return factory.create_describe_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
NormalizeCommandDep = Annotated[NormalizeConfigurationCommand, Depends(get_normalize_command)]
DescribeCommandDep = Annotated[DescribeShapeCommand, Depends(get_describe_command)]
