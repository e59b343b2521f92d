"""Typer CLI for sofa configuration normalization and pricing."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from seating.application import ConfigurationOutput, ServiceFactory, get_factory
from seating.application.catalog import CatalogError, load_catalog
from seating.application.config import ConfigError, load_config
from seating.cli.commands import validate_command

OUTPUT_FORMATS = ("text", "json")


app = typer.Typer(
    name="seating",
    help="Normalize stored sofa configurations and derive their price.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every repair the normalizer applies"),
    ] = False,
) -> None:
    """Normalize stored sofa configurations and derive their price."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _build_factory(catalog_file: Path | None, base_price: float | None = None) -> ServiceFactory:
    """Create a service factory for the given catalog file and base price."""
    try:
        factory = ServiceFactory(load_catalog(catalog_file)) if catalog_file else get_factory()
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if base_price is not None:
        factory = ServiceFactory(factory.catalogs.with_base_price(base_price))
    return factory


def _run(
    config_file: Path,
    factory: ServiceFactory,
    shape: str | None,
    include_pricing: bool,
) -> ConfigurationOutput:
    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = factory.create_normalize_command()
    return command.execute(config.to_raw(), shape=shape, include_pricing=include_pricing)


def _check_format(output_format: str) -> str:
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return output_format


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content + "\n")
    typer.echo(f"Output written to: {output_file}")


CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Path to a catalog JSON file (options and prices)"),
]
ShapeOption = Annotated[
    str | None,
    typer.Option("--shape", "-s", help="Base shape overriding the stored one"),
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text, json"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the output to a file instead of stdout"),
]
ConfigArgument = Annotated[
    Path,
    typer.Argument(help="Path to the stored configuration JSON file"),
]


@app.command()
def normalize(
    config_file: ConfigArgument,
    catalog_file: CatalogOption = None,
    shape: ShapeOption = None,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
) -> None:
    """Repair a stored configuration and print the normalized result."""
    output_format = _check_format(output_format)
    factory = _build_factory(catalog_file)
    result = _run(config_file, factory, shape, include_pricing=False)

    if output_format == "json":
        content = factory.get_json_formatter().format(result)
    else:
        content = factory.get_text_formatter().format(result)
    _emit(content, output_file)


@app.command()
def price(
    config_file: ConfigArgument,
    catalog_file: CatalogOption = None,
    shape: ShapeOption = None,
    base_price: Annotated[
        float | None,
        typer.Option("--base-price", "-b", help="Price of a 2-seater unit, overriding the catalog"),
    ] = None,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
) -> None:
    """Normalize a configuration and print its price breakdown."""
    output_format = _check_format(output_format)
    factory = _build_factory(catalog_file, base_price)
    result = _run(config_file, factory, shape, include_pricing=True)

    if output_format == "json":
        content = factory.get_json_formatter().format(result)
    else:
        formatter = factory.get_text_formatter()
        content = "\n\n".join(
            [
                formatter.configuration.format(result.configuration),
                formatter.pricing.format(result.breakdown),
            ]
        )
    _emit(content, output_file)


@app.command()
def slots(
    config_file: ConfigArgument,
    catalog_file: CatalogOption = None,
    shape: ShapeOption = None,
    output_format: FormatOption = "text",
) -> None:
    """Show the seat total and the legal console slots of a configuration."""
    output_format = _check_format(output_format)
    factory = _build_factory(catalog_file)
    result = _run(config_file, factory, shape, include_pricing=False)

    if output_format == "json":
        typer.echo(factory.get_json_formatter().format(result.summary))
    else:
        typer.echo(factory.get_text_formatter().slots.format(result.summary))


@app.command()
def options(
    shape: Annotated[str, typer.Argument(help="Base shape, e.g. STANDARD, 'L SHAPE', U_SHAPE, combo")],
    catalog_file: CatalogOption = None,
    output_format: FormatOption = "text",
) -> None:
    """List the sections and options a base shape allows."""
    output_format = _check_format(output_format)
    factory = _build_factory(catalog_file)
    result = factory.create_describe_command().execute(shape)

    if output_format == "json":
        typer.echo(factory.get_json_formatter().format(result))
    else:
        typer.echo(factory.get_text_formatter().shape_options.format(result))


if __name__ == "__main__":
    app()
