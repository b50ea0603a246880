"""Template manager for bundled furniture project templates.

This module provides the TemplateManager class for accessing and copying
bundled preset project files.
"""

import logging
from importlib import resources
from pathlib import Path

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "wardrobe-2-door": "Two-door wardrobe with hanging rail and upper shelf",
    "wardrobe-sliding": "Wide wardrobe with sliding doors, divider and drawers",
    "kitchen-base-drawers": "Kitchen base unit with a drawer stack and countertop",
    "kitchen-wall": "Wall-hung kitchen cabinet with hinged doors",
    "tv-unit": "Low TV unit with a centred niche",
    "bookcase": "Open bookcase with adjustable shelves",
    "entertainment-center": "Entertainment center with side column and raised panel",
}


class TemplateManager:
    """Manager for bundled furniture project templates.

    Provides methods to list available templates, retrieve template content,
    and initialize new project files from templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("bookcase", Path("my-bookcase.json"))
    """

    def __init__(self) -> None:
        self._data_package = "furniture.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates with their descriptions.

        Returns:
            List of (name, description) tuples for each available template.
        """
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Returns:
            The template JSON content as a string.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path, overwrite: bool = False) -> None:
        """Copy a template to the specified output path.

        Args:
            name: The template name (without .json extension).
            output_path: The destination path for the template copy.
            overwrite: Replace an existing file instead of failing.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and overwrite is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not overwrite:
            raise FileExistsError(f"File already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote template '{name}' to {output_path}")

    def template_exists(self, name: str) -> bool:
        """Check if a template with the given name exists."""
        return name in TEMPLATE_METADATA
