"""Bookcase generator."""

from __future__ import annotations

from ..params import BookcaseParams
from ..value_objects import FurnitureType
from .base import FurnitureGenerator
from .registry import register_generator


@register_generator(FurnitureType.BOOKCASE)
class BookcaseGenerator(FurnitureGenerator):
    """Plain carcass, frequently built without a back."""

    params_type = BookcaseParams
