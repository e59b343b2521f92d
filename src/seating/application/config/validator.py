"""Validation structures and repair advisories.

The normalizer silently repairs malformed configurations. This module
reports what it would repair, so a stored configuration can be checked
before it is shown to a shopper or sent to production. Structural schema
problems are blocking errors; every repair is a warning.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from seating.application.config.loader import ConfigError, load_config_from_dict
from seating.application.config.schema import ConfigurationInput
from seating.domain.catalog import Catalogs
from seating.domain.labels import (
    is_known_shape,
    parse_bool,
    parse_count,
    parse_int,
    parse_section_tag,
    parse_side,
)
from seating.domain.services import (
    ConfigurationNormalizer,
    PricingCalculator,
    parse_placements,
)
from seating.domain.services.section_normalizer import split_raw_section
from seating.domain.topology import allowed_options, is_active, match_option, recliner_zones
from seating.domain.value_objects import NONE_VALUE, ReclinerZone, SofaConfiguration


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "console.placements[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the repaired field
        message: Human-readable description of the repair
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_section_repairs(
    raw: Mapping[str, Any],
    config: SofaConfiguration,
    normalizer: ConfigurationNormalizer,
) -> ValidationResult:
    """Report section values the normalizer replaces or clears."""
    result = ValidationResult()
    shape = config.shape

    for key, value in normalizer.collect_sections(raw).items():
        path = f"sections.{key}"
        tag = parse_section_tag(key)
        if tag is None:
            result.add_warning(path, f"Unknown section tag '{key}' is ignored")
            continue

        raw_seater, raw_quantity = split_raw_section(value)
        normalized = config.section(tag)
        if not is_active(shape, tag):
            if raw_seater not in (None, NONE_VALUE):
                result.add_warning(
                    path,
                    f"Section {tag.value} is not part of a {shape.value} layout; "
                    f"'{raw_seater}' is cleared",
                )
            continue

        if match_option(shape, tag, raw_seater) is None and raw_seater is not None:
            result.add_warning(
                f"{path}.seater",
                f"'{raw_seater}' is not allowed for section {tag.value}; "
                f"using '{normalized.seater_value}'",
                suggestion=f"Choose one of: {', '.join(allowed_options(shape, tag))}",
            )
        if raw_quantity is not None and parse_count(raw_quantity, default=0) < 1:
            result.add_warning(
                f"{path}.qty",
                f"Quantity {raw_quantity!r} is not a positive count; using 1",
            )
    return result


def check_console_repairs(
    raw: Mapping[str, Any], config: SofaConfiguration, catalogs: Catalogs
) -> ValidationResult:
    """Report console placements the reconciliation clears or drops."""
    result = ValidationResult()
    raw_console = raw.get("console")
    if not isinstance(raw_console, Mapping) or not parse_bool(raw_console.get("required")):
        return result

    console = config.console
    if not console.required:
        result.add_warning(
            "console.required",
            "Consoles need at least two seats; console selection is turned off",
        )
        return result

    raw_size = raw_console.get("size")
    if raw_size is not None and catalogs.options.console_sizes.match(raw_size) is None:
        result.add_warning("console.size", f"Unknown console size '{raw_size}'; using '{console.size}'")

    for index, placement in enumerate(parse_placements(raw_console)):
        path = f"console.placements[{index}]"
        if index >= console.quantity:
            if not placement.is_empty:
                result.add_warning(
                    path,
                    f"Only {console.quantity} console(s) fit this configuration; placement dropped",
                )
            continue
        normalized = console.placements[index]
        if not placement.is_empty and normalized.is_empty:
            zone = placement.section.value if placement.section else ""
            result.add_warning(
                path,
                f"'{zone}' after seat {placement.after_seat} is not a "
                f"free legal slot; placement cleared",
                suggestion="Pick a slot between two existing seats",
            )
        elif (
            placement.accessory_id is not None
            and not normalized.is_empty
            and normalized.accessory_id is None
        ):
            result.add_warning(
                f"{path}.accessoryId",
                f"Accessory '{placement.accessory_id}' is not in the catalog; cleared",
            )
    return result


def check_accessory_repairs(
    raw: Mapping[str, Any], config: SofaConfiguration, catalogs: Catalogs
) -> ValidationResult:
    """Report lounger and recliner values the normalizers change."""
    result = ValidationResult()
    shape = config.shape

    raw_lounger = raw.get("lounger")
    if isinstance(raw_lounger, Mapping) and parse_bool(raw_lounger.get("required")):
        lounger = config.lounger
        raw_count = raw_lounger.get("numberOfLoungers", raw_lounger.get("quantity"))
        if raw_count is not None and parse_count(raw_count, 1) != lounger.number_of_loungers:
            result.add_warning(
                "lounger.numberOfLoungers",
                f"{raw_count!r} loungers not possible on a {shape.value} layout; "
                f"using {lounger.number_of_loungers}",
            )
        raw_placement = raw_lounger.get("placement", raw_lounger.get("position"))
        if raw_placement is not None and parse_side(raw_placement) != lounger.placement:
            result.add_warning(
                "lounger.placement",
                f"Placement '{raw_placement}' is not legal here; using '{lounger.placement.value}'",
            )
        raw_size = raw_lounger.get("size")
        if raw_size is not None and catalogs.options.lounger_sizes.match(raw_size) is None:
            result.add_warning("lounger.size", f"Unknown lounger size '{raw_size}'; using '{lounger.size}'")

    raw_recliner = raw.get("recliner")
    if isinstance(raw_recliner, Mapping):
        active = recliner_zones(shape)
        for key, value in raw_recliner.items():
            if not isinstance(value, Mapping) or not parse_bool(value.get("required")):
                continue
            try:
                zone = ReclinerZone(str(key).strip().upper())
            except ValueError:
                result.add_warning(f"recliner.{key}", f"Unknown recliner zone '{key}' is ignored")
                continue
            if zone not in active:
                result.add_warning(
                    f"recliner.{key}",
                    f"Zone {zone.value} is not part of a {shape.value} layout; recliners removed",
                )
    return result


def check_dimension_repairs(raw: Mapping[str, Any], config: SofaConfiguration) -> ValidationResult:
    result = ValidationResult()
    dimensions = raw.get("dimensions")
    for key, label, normalized in (
        ("seatWidth", "Seat width", config.seat_width),
        ("seatDepth", "Seat depth", config.seat_depth),
    ):
        raw_value = dimensions.get(key) if isinstance(dimensions, Mapping) else raw.get(key)
        if raw_value is not None and parse_int(raw_value) != normalized:
            result.add_warning(
                f"dimensions.{key}",
                f"{label} {raw_value!r} is not offered; using {normalized}",
            )
    return result


def check_upgrade_repairs(
    raw: Mapping[str, Any], config: SofaConfiguration, catalogs: Catalogs
) -> ValidationResult:
    """Report pillow, foam and leg choices the catalog does not offer."""
    result = ValidationResult()
    options = catalogs.options

    raw_pillows = raw.get("additionalPillows")
    if isinstance(raw_pillows, Mapping) and parse_bool(raw_pillows.get("required")):
        pillows = config.pillows
        raw_count = raw_pillows.get("quantity", raw_pillows.get("count"))
        if raw_count is not None and parse_count(raw_count, default=0) < 1:
            result.add_warning(
                "additionalPillows.quantity",
                f"Quantity {raw_count!r} is not a positive count; using {pillows.count}",
            )
        raw_type = raw_pillows.get("type")
        if raw_type is not None and options.pillow_types.match(raw_type) is None:
            result.add_warning(
                "additionalPillows.type",
                f"Unknown pillow type '{raw_type}'; using '{pillows.pillow_type}'",
                suggestion=f"Choose one of: {', '.join(options.pillow_types.values)}",
            )

    for key, choices, normalized in (
        ("foam", options.foam_types, config.foam_type),
        ("legs", options.leg_types, config.leg_type),
    ):
        section = raw.get(key)
        raw_type = section.get("type") if isinstance(section, Mapping) else None
        if raw_type is None or not choices.entries:
            continue
        if choices.match(raw_type) is None:
            result.add_warning(
                f"{key}.type",
                f"Unknown {key} type '{raw_type}'; using '{normalized}'",
                suggestion=f"Choose one of: {', '.join(choices.values)}",
            )
    return result


def check_pricing(config: SofaConfiguration, catalogs: Catalogs) -> ValidationResult:
    result = ValidationResult()
    for entry in catalogs.prices.invalid_entries:
        result.add_warning(
            entry,
            "Unreadable catalog value; the default is used",
            suggestion="Fix the catalog entry",
        )
    breakdown = PricingCalculator().derive(config, catalogs)
    for entry in breakdown.missing:
        if entry.startswith("invalid:"):
            continue
        result.add_warning(
            "pricing",
            f"No catalog entry for {entry}; priced as 0",
            suggestion="Complete the price catalog before quoting",
        )
    return result


def validate_config(
    config: ConfigurationInput | Mapping[str, Any],
    catalogs: Catalogs | None = None,
) -> ValidationResult:
    """Perform full validation of a stored configuration.

    Args:
        config: A ConfigurationInput, or a raw mapping that is first checked
            against the schema.
        catalogs: Catalog snapshot; built-in defaults when omitted.

    Returns:
        ValidationResult with schema errors, or with one warning per repair
        the normalizer would apply and per missing price entry.
    """
    result = ValidationResult()
    catalogs = catalogs or Catalogs()

    if not isinstance(config, ConfigurationInput):
        try:
            config = load_config_from_dict(dict(config))
        except ConfigError as e:
            for detail in e.details:
                result.add_error(detail.get("path", ""), detail["message"], detail.get("value"))
            return result

    raw = config.to_raw()
    normalizer = ConfigurationNormalizer(catalogs)
    normalized = normalizer.normalize(raw)

    raw_shape = raw.get("baseShape", raw.get("shape"))
    if raw_shape is not None and not is_known_shape(raw_shape):
        result.add_warning(
            "baseShape",
            f"Unknown shape '{raw_shape}'; using {normalized.shape.value}",
            suggestion="Use one of: STANDARD, L SHAPE, U SHAPE, COMBO",
        )

    result.merge(check_section_repairs(raw, normalized, normalizer))
    result.merge(check_console_repairs(raw, normalized, catalogs))
    result.merge(check_accessory_repairs(raw, normalized, catalogs))
    result.merge(check_dimension_repairs(raw, normalized))
    result.merge(check_upgrade_repairs(raw, normalized, catalogs))
    result.merge(check_pricing(normalized, catalogs))
    return result
