"""Typer CLI for furniture generation and quoting."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from furniture.application import QuoteProjectCommand, default_catalogs
from furniture.application.config import load_config
from furniture.cli.commands import display_load_error, templates_app, validate_command
from furniture.domain import Catalogs, ConfigError
from furniture.infrastructure import JsonExporter, ReportFormatter


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class CatalogSection(str, Enum):
    MATERIALS = "materials"
    FINISHES = "finishes"
    HARDWARE = "hardware"


app = typer.Typer(
    name="furniture",
    help="Generate parametric furniture: parts, hardware, BOM, cut lists and quotes.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parametric furniture engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file instead of stdout"),
    ] = None,
    margin: Annotated[
        float | None,
        typer.Option(
            "--margin",
            "-m",
            min=0,
            max=500,
            help="Profit margin in percent (overrides the project file)",
        ),
    ] = None,
) -> None:
    """Generate every furniture of a project and print the quote.

    Each furniture gets its part list, hardware, bill of materials, cut
    list, cost and assembly steps. Projects with several furnitures also
    get a consolidated total. Furnitures with configuration errors are
    reported and left out of the totals; the command then exits with 1.

    Examples:
        furniture generate kitchen.json
        furniture generate kitchen.json --format json --output quote.json
        furniture generate bookcase.json --margin 45
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    quote = QuoteProjectCommand().execute(config, margin_percent=margin)

    if output_format == OutputFormat.JSON:
        report = JsonExporter().export_quote(quote)
    else:
        report = ReportFormatter().format_quote(quote)

    if output is not None:
        try:
            output.write_text(report, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Report written to: {output}")
    else:
        typer.echo(report)

    if not quote.is_valid:
        for furniture_id, error in quote.errors:
            typer.echo(f"Error in '{furniture_id}': {error.message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def catalog(
    section: Annotated[
        CatalogSection | None,
        typer.Argument(help="Catalog to show (default: all)"),
    ] = None,
) -> None:
    """Show the bundled materials, finishes and hardware catalogs.

    Examples:
        furniture catalog
        furniture catalog hardware
    """
    catalogs = default_catalogs()
    sections = [section] if section is not None else list(CatalogSection)
    blocks = [_format_catalog(catalogs, s) for s in sections]
    typer.echo("\n\n".join(blocks))


def _format_catalog(catalogs: Catalogs, section: CatalogSection) -> str:
    if section == CatalogSection.MATERIALS:
        lines = [
            "MATERIALS",
            f"{'Id':<16} {'Name':<28} {'Type':<11} {'Price/m2':>9} {'Thicknesses'}",
        ]
        for material_id in sorted(catalogs.materials):
            m = catalogs.materials[material_id]
            thicknesses = ", ".join(f"{t:g}" for t in m.standard_thicknesses)
            lines.append(
                f"{m.id:<16} {m.name:<28} {m.material_type.value:<11} "
                f"{m.price_per_sqm:>9.2f} {thicknesses}"
            )
    elif section == CatalogSection.FINISHES:
        lines = ["FINISHES", f"{'Id':<16} {'Name':<28} {'Color'}"]
        for finish_id in sorted(catalogs.finishes):
            f = catalogs.finishes[finish_id]
            lines.append(f"{f.id:<16} {f.name:<28} {f.color_hex}")
    else:
        lines = [
            "HARDWARE",
            f"{'Id':<24} {'Name':<36} {'Type':<13} {'Price':>8} {'Unit'}",
        ]
        for hardware_id in sorted(catalogs.hardware):
            h = catalogs.hardware[hardware_id]
            lines.append(
                f"{h.id:<24} {h.name:<36} {h.hardware_type.value:<13} "
                f"{h.unit_price:>8.2f} {h.unit}"
            )
    return "\n".join(lines)


if __name__ == "__main__":
    app()
