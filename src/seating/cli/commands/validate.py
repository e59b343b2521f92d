"""Validate command for checking stored configuration files.

Loads the catalog and the configuration, then prints every repair the
normalizer would apply, grouped by the part of the sofa it touches.
"""

from collections import defaultdict
from pathlib import Path
from typing import Annotated

import typer

from seating.application.catalog import CatalogError, default_catalogs, load_catalog
from seating.application.config import (
    ConfigError,
    ValidationResult,
    ValidationWarning,
    load_config,
    validate_config,
)

# Heading per top-level key of a warning path
WARNING_GROUPS: dict[str, str] = {
    "baseShape": "Shape",
    "sections": "Sections",
    "console": "Console",
    "lounger": "Lounger",
    "recliner": "Recliners",
    "dimensions": "Dimensions",
    "additionalPillows": "Pillows",
    "foam": "Foam",
    "legs": "Legs",
    "options": "Catalog",
    "prices": "Catalog",
    "pricing": "Pricing",
}


def warning_group(path: str) -> str:
    """Heading for a warning path such as ``console.placements[1]``."""
    key = path.split(".", 1)[0].split("[", 1)[0]
    return WARNING_GROUPS.get(key, "Other")


def group_warnings(warnings: list[ValidationWarning]) -> dict[str, list[ValidationWarning]]:
    """Group warnings under their heading, keeping first-seen heading order."""
    groups: dict[str, list[ValidationWarning]] = defaultdict(list)
    for warning in warnings:
        groups[warning_group(warning.path)].append(warning)
    return dict(groups)


def load_error_lines(error: ConfigError) -> list[str]:
    """Lines describing why a configuration or catalog could not be loaded."""
    if error.error_type == "file_not_found":
        return [f"  File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = [f"  Invalid JSON syntax in {error.path}"]
        for detail in error.details:
            lines.append(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}"
            )
        return lines
    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"  {detail.get('path', 'unknown')}: {detail.get('message', 'Unknown error')}")
            if detail.get("value") is not None:
                lines.append(f"    Value: {detail['value']!r}")
        return lines
    return [f"  {error.message}"]


def _fail_to_load(error: ConfigError) -> typer.Exit:
    typer.echo("Errors:", err=True)
    for line in load_error_lines(error):
        typer.echo(line, err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)
    return typer.Exit(code=1)


def _echo_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for heading, warnings in group_warnings(result.warnings).items():
            typer.echo(f"  {heading} ({len(warnings)})")
            for warning in warnings:
                typer.echo(f"    {warning.path}: {warning.message}")
                if warning.suggestion:
                    typer.echo(f"      Suggestion: {warning.suggestion}")
        typer.echo()


def validate(
    config_file: Path,
    catalog_file: Path | None = None,
    strict: bool = False,
) -> None:
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        catalogs = load_catalog(catalog_file) if catalog_file else default_catalogs()
        config = load_config(config_file)
    except ConfigError as e:
        raise _fail_to_load(e)

    result = validate_config(config, catalogs)
    _echo_result(result)

    errors, warnings = len(result.errors), len(result.warnings)
    if errors:
        typer.echo(f"Validation failed: {errors} error(s), {warnings} warning(s)", err=True)
    elif warnings and strict:
        typer.echo(f"Validation failed: {warnings} warning(s) in strict mode", err=True)
        raise typer.Exit(code=1)
    elif warnings:
        typer.echo(f"Validation passed with {warnings} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
    raise typer.Exit(code=result.exit_code)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", "-c", help="Path to a catalog JSON file"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on repairs and catalog warnings too"),
    ] = False,
) -> None:
    """Validate a stored seating configuration file.

    Reports structural errors in the file, then every value the normalizer
    would repair and every price the catalog cannot supply, grouped by
    section, console, lounger and so on.

    Exit codes:
        0 - Nothing to repair
        1 - Unreadable file, structural errors, or warnings with --strict
        2 - Usable, with repairs or catalog warnings

    Example:
        seating validate sofa.json --catalog catalog.json --strict
    """
    validate(config_file, catalog_file, strict)
