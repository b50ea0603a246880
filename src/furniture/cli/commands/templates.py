"""Templates commands for listing and initializing project templates."""

from pathlib import Path
from typing import Annotated

import typer

from furniture.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Manage bundled furniture project templates.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available project templates.

    Example:
        furniture templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo(
        "Use 'furniture templates init <name>' to create a project file from a template."
    )


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Initialize a new project file from a template.

    Examples:
        furniture templates init bookcase
        furniture templates init kitchen-wall --output wall.json
        furniture templates init bookcase --force
    """
    manager = TemplateManager()
    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output, overwrite=force)
        typer.echo(f"Created: {output}")
    except FileExistsError:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)
    except TemplateNotFoundError:
        typer.echo(f"Error: Template not found: {name}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
