"""Furniture project templates and preset configurations.

This package provides bundled preset project files for common furniture
and a TemplateManager class for accessing them.
"""

from furniture.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
