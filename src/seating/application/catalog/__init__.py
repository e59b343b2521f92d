"""Option catalog and price table loading."""

from seating.application.catalog.loader import (
    CatalogError,
    default_catalogs,
    load_catalog,
    load_catalog_from_dict,
)
from seating.application.catalog.schemas import (
    CatalogFileSchema,
    FabricTableSchema,
    OptionCatalogSchema,
    OptionEntrySchema,
    PriceTableSchema,
)

__all__ = [
    "CatalogError",
    "CatalogFileSchema",
    "FabricTableSchema",
    "OptionCatalogSchema",
    "OptionEntrySchema",
    "PriceTableSchema",
    "default_catalogs",
    "load_catalog",
    "load_catalog_from_dict",
]
