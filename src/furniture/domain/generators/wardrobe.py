"""Wardrobe generator."""

from __future__ import annotations

from typing import ClassVar

from ..params import WardrobeParams
from ..value_objects import FurnitureType, ModuleType
from .base import FurnitureGenerator
from .registry import register_generator


@register_generator(FurnitureType.WARDROBE)
class WardrobeGenerator(FurnitureGenerator):
    """Full-height carcass; the only family that takes a hanging rail.

    The plinth sits between the side panels, which run to the floor.
    """

    params_type = WardrobeParams
    supported_modules: ClassVar[frozenset[ModuleType]] = frozenset(ModuleType)
