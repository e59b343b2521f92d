"""Configuration schema, loading and validation for stored seating configurations.

Public API:
    - ConfigurationInput: Root model of a stored configuration document
    - load_config: Load a configuration from a JSON file
    - load_config_from_dict: Load a configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Report schema errors and normalizer repairs

Example:
    >>> from pathlib import Path
    >>> from seating.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("sofa.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from seating.application.config.loader import (
    ConfigError,
    format_json_path,
    load_config,
    load_config_from_dict,
)
from seating.application.config.schema import (
    ChoiceInput,
    ConfigurationInput,
    ConsoleInput,
    ConsolePlacementInput,
    DimensionsInput,
    DiscountInput,
    FabricInput,
    LoungerInput,
    PillowsInput,
    ReclinerZoneInput,
    SectionInput,
)
from seating.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Loader
    "ConfigError",
    "format_json_path",
    "load_config",
    "load_config_from_dict",
    # Schema
    "ChoiceInput",
    "ConfigurationInput",
    "ConsoleInput",
    "ConsolePlacementInput",
    "DimensionsInput",
    "DiscountInput",
    "FabricInput",
    "LoungerInput",
    "PillowsInput",
    "ReclinerZoneInput",
    "SectionInput",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
