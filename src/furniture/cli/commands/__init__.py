"""CLI command implementations for the furniture application.

This package contains subcommands for the furniture CLI, including:
- validate: Validate a project file
- templates: Manage bundled project templates
"""

from furniture.cli.commands.templates import templates_app
from furniture.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "templates_app", "validate_command"]
