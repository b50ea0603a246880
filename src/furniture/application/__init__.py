"""Application layer - use cases and orchestration."""

from .config.catalogs import default_catalogs
from .commands import GenerateFurnitureCommand, QuoteProjectCommand
from .dtos import FurnitureOutcome, FurnitureRequest, FurnitureResult, ProjectQuote

__all__ = [
    "FurnitureOutcome",
    "FurnitureRequest",
    "FurnitureResult",
    "GenerateFurnitureCommand",
    "ProjectQuote",
    "QuoteProjectCommand",
    "default_catalogs",
]
