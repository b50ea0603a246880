"""Lookup of family generators by furniture type."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..errors import ConfigError
from ..params import CarcassParams
from ..value_objects import FurnitureType
from .base import FurnitureGenerator

G = TypeVar("G", bound=type[FurnitureGenerator])

_GENERATORS: dict[FurnitureType, type[FurnitureGenerator]] = {}


def register_generator(family: FurnitureType) -> Callable[[G], G]:
    """Decorator registering the generator class of a furniture family.

    Raises:
        ValueError: If the family already has a generator.
    """

    def decorator(cls: G) -> G:
        if family in _GENERATORS:
            raise ValueError(f"Generator for '{family.value}' already registered")
        _GENERATORS[family] = cls
        return cls

    return decorator


def generator_for(params: CarcassParams) -> FurnitureGenerator:
    """Instantiate the generator matching a params variant.

    Raises:
        ConfigError: If no generator handles the params' family.
    """
    family = getattr(params, "family", None)
    if family not in _GENERATORS:
        raise ConfigError(
            f"No generator for params of type {type(params).__name__}",
            error_type="unsupported_combination",
        )
    return _GENERATORS[family]()


def registered_families() -> list[FurnitureType]:
    return sorted(_GENERATORS, key=lambda family: family.value)
