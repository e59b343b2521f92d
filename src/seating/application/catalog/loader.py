"""Catalog file loader."""

import logging
from pathlib import Path
from typing import Any

from seating.application.catalog.schemas import CatalogFileSchema
from seating.application.config.loader import ConfigError, read_json_file, validate_model
from seating.domain.catalog import Catalogs

logger = logging.getLogger(__name__)


class CatalogError(ConfigError):
    """Exception raised when a catalog file cannot be loaded.

    Carries the same ``message``, ``error_type``, ``path`` and ``details``
    attributes as ConfigError.
    """


def _to_catalogs(schema: CatalogFileSchema, source: str) -> Catalogs:
    catalogs = schema.to_domain()
    invalid = catalogs.prices.invalid_entries
    if invalid:
        logger.warning(f"Unreadable entries in {source} replaced by defaults: {', '.join(invalid)}")
    return catalogs


def load_catalog(path: Path) -> Catalogs:
    """Load an option catalog and price table from a JSON file.

    Raises:
        CatalogError: With ``error_type`` "file_not_found", "json_parse"
            or "validation". Unreadable entries inside a valid
            document do not raise; they fall back to their defaults and are
            listed in ``prices.invalid_entries``.
    """
    data = read_json_file(path, error_class=CatalogError, kind="catalog")
    schema = validate_model(
        CatalogFileSchema, data, error_class=CatalogError, title="Catalog", path=path
    )
    logger.debug(f"Loaded catalog from {path}")
    return _to_catalogs(schema, str(path))


def load_catalog_from_dict(data: dict[str, Any]) -> Catalogs:
    """Build catalogs from a dictionary, e.g. rows fetched from the table store.

    Raises:
        CatalogError: If the data fails validation.
    """
    schema = validate_model(CatalogFileSchema, data, error_class=CatalogError, title="Catalog")
    return _to_catalogs(schema, "catalog data")


def default_catalogs() -> Catalogs:
    """Built-in option lists and rates, without a base price."""
    return CatalogFileSchema().to_domain()
