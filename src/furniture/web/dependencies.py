"""FastAPI dependency injection for furniture services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from furniture.application import QuoteProjectCommand, default_catalogs
from furniture.application.templates.manager import TemplateManager
from furniture.domain import Catalogs


@lru_cache(maxsize=1)
def get_catalogs() -> Catalogs:
    """Get the cached bundled catalogs.

    Catalogs are immutable snapshots, so one instance serves every request.
    """
    return default_catalogs()


def get_quote_command(
    catalogs: Annotated[Catalogs, Depends(get_catalogs)],
) -> QuoteProjectCommand:
    """Dependency for QuoteProjectCommand."""
    return QuoteProjectCommand(catalogs=catalogs)


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
CatalogsDep = Annotated[Catalogs, Depends(get_catalogs)]
QuoteCommandDep = Annotated[QuoteProjectCommand, Depends(get_quote_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
