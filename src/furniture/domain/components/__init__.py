"""Module components.

Each module kind has a component registered under 'module.<kind>' that
validates the module against its carcass, emits its parts and states its
hardware rule. Importing this package registers every component.
"""

from .context import CarcassContext
from .divider import VerticalDividerComponent
from .door import (
    HingedDoorComponent,
    SlidingDoorComponent,
    hinged_leaf_size,
    hinges_per_leaf,
    sliding_panel_size,
)
from .drawer import (
    DrawerComponent,
    drawer_slide_length,
    slide_hardware_id,
    slide_length_for_depth,
)
from .factory import PartFactory
from .protocol import Component
from .rail import (
    HANGER_CLEARANCE,
    HangingRailComponent,
    rail_height_for,
    rail_support_count,
    rail_tube_metres,
)
from .registry import ComponentRegistry, component_registry
from .results import HardwareRequirement, ValidationResult
from .shelf import ShelfComponent, pins_per_shelf, shelf_positions
from .socle import SocleComponent

__all__ = [
    "CarcassContext",
    "Component",
    "ComponentRegistry",
    "DrawerComponent",
    "HANGER_CLEARANCE",
    "HangingRailComponent",
    "HardwareRequirement",
    "HingedDoorComponent",
    "PartFactory",
    "ShelfComponent",
    "SlidingDoorComponent",
    "SocleComponent",
    "ValidationResult",
    "VerticalDividerComponent",
    "component_registry",
    "drawer_slide_length",
    "hinged_leaf_size",
    "hinges_per_leaf",
    "pins_per_shelf",
    "rail_height_for",
    "rail_support_count",
    "rail_tube_metres",
    "shelf_positions",
    "slide_hardware_id",
    "slide_length_for_depth",
    "sliding_panel_size",
]
