"""Pytest configuration and shared fixtures for seating tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from seating.application.commands import NormalizeConfigurationCommand
    from seating.domain.catalog import Catalogs
    from seating.domain.services import ConfigurationNormalizer


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")


# =============================================================================
# Catalog fixtures
# =============================================================================


CATALOG_DATA: dict[str, Any] = {
    "options": {
        "category": "sofa",
        "fields": {
            "console_accessory": [
                {
                    "option_value": "cup-holder",
                    "display_label": "Cup Holder",
                    "sort_order": 1,
                    "metadata": {"sale_price": 1500},
                },
                {
                    "option_value": "wireless-charger",
                    "display_label": "Wireless Charger",
                    "sort_order": 2,
                    "metadata": {"sale_price": 4500},
                },
                {
                    "option_value": "retired-tray",
                    "sort_order": 3,
                    "is_active": False,
                },
            ],
        },
    },
    "prices": {"base_price": 10000},
}


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """Raw catalog document with accessories and a base price."""
    return json.loads(json.dumps(CATALOG_DATA))


@pytest.fixture
def catalogs(catalog_data: dict[str, Any]) -> "Catalogs":
    """Catalogs with two accessories and a base price of 10000."""
    from seating.application.catalog import load_catalog_from_dict

    return load_catalog_from_dict(catalog_data)


@pytest.fixture
def priced_catalogs() -> "Catalogs":
    """Built-in option lists with a base price of 10000."""
    from seating.application.catalog import default_catalogs

    return default_catalogs().with_base_price(10000)


@pytest.fixture
def normalizer() -> "ConfigurationNormalizer":
    """Normalizer bound to the built-in catalogs."""
    from seating.domain.services import ConfigurationNormalizer

    return ConfigurationNormalizer()


@pytest.fixture
def normalize_command(catalogs: "Catalogs") -> "NormalizeConfigurationCommand":
    """Create a NormalizeConfigurationCommand using the factory."""
    from seating.application.factory import ServiceFactory

    return ServiceFactory(catalogs).create_normalize_command()


@pytest.fixture(autouse=True)
def _reset_default_factory() -> Any:
    """Keep the module-level service factory from leaking between tests."""
    from seating.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


# =============================================================================
# File helpers
# =============================================================================


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document into the test's temporary directory."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write
