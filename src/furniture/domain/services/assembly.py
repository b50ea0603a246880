"""Assembly sequence synthesis.

Build order:
1. shell (sides, top, bottom, back, plinth, side column)
2. structural extras (TV niche)
3. one step per non-door module, in module order
4. finishing extras (countertop, raised back panel)
5. doors, always last
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..modules import Module, sort_modules
from ..value_objects import HardwareItem, ModuleType, PanelType, Part

logger = logging.getLogger(__name__)

SHELL_PANELS: frozenset[PanelType] = frozenset(
    {
        PanelType.LEFT_SIDE,
        PanelType.RIGHT_SIDE,
        PanelType.TOP,
        PanelType.BOTTOM,
        PanelType.BACK,
        PanelType.PLINTH,
        PanelType.COLUMN_SIDE,
        PanelType.COLUMN_TOP,
        PanelType.COLUMN_BOTTOM,
        PanelType.COLUMN_BACK,
    }
)

# (title, description, panel types) in build order
STRUCTURAL_PHASES: list[tuple[str, str, frozenset[PanelType]]] = [
    (
        "Build TV niche",
        "Fix the two niche dividers to the bottom and top panels, then set "
        "the niche shelf between them.",
        frozenset({PanelType.NICHE_DIVIDER, PanelType.NICHE_SHELF}),
    ),
]

FINISHING_PHASES: list[tuple[str, str, frozenset[PanelType]]] = [
    (
        "Fit countertop",
        "Lay the countertop on the carcass with an even overhang and fix it "
        "from below through the top panel.",
        frozenset({PanelType.COUNTERTOP}),
    ),
    (
        "Mount raised back panel",
        "Fix the raised back panel to the wall above the base cabinet, "
        "aligned with its sides.",
        frozenset({PanelType.RAISED_PANEL}),
    ),
]

MODULE_STEPS: dict[ModuleType, tuple[str, str]] = {
    ModuleType.SHELF: (
        "Install shelves",
        "Place {parts} shelf panel(s) at the marked heights.",
    ),
    ModuleType.DRAWER: (
        "Assemble and fit drawer",
        "Assemble the drawer box around its bottom, mount the slides, then "
        "attach the front and handle.",
    ),
    ModuleType.HANGING_RAIL: (
        "Mount hanging rail",
        "Screw the rail supports to the side panels and seat the rail tube.",
    ),
    ModuleType.VERTICAL_DIVIDER: (
        "Install vertical divider",
        "Fix the divider between bottom and top panels at the marked offset.",
    ),
    ModuleType.SOCLE: (
        "Fit rear plinth",
        "Fix the rear plinth rail under the bottom panel, set back from the front.",
    ),
}

DOOR_STEPS: dict[ModuleType, tuple[str, str]] = {
    ModuleType.HINGED_DOOR: (
        "Hang doors",
        "Press the hinge cups into the {parts} door leaf(s), clip them to the "
        "carcass plates, adjust the reveals and fit the handles.",
    ),
    ModuleType.SLIDING_DOOR: (
        "Install sliding doors",
        "Fix the top and bottom tracks, hang the {parts} panel(s) and adjust "
        "the rollers until the overlaps are even.",
    ),
}


@dataclass(frozen=True)
class StepHardware:
    """Hardware consumed by one assembly step."""

    hardware_type_id: str
    quantity: int


@dataclass(frozen=True)
class AssemblyStep:
    """One ordered instruction in the assembly sequence."""

    step_number: int
    title: str
    description: str
    part_codes: tuple[str, ...] = field(default_factory=tuple)
    hardware_used: tuple[StepHardware, ...] = field(default_factory=tuple)


def _hardware_for(items: Sequence[HardwareItem]) -> tuple[StepHardware, ...]:
    totals: dict[str, int] = {}
    for item in items:
        totals[item.hardware_type_id] = totals.get(item.hardware_type_id, 0) + item.quantity
    # dicts keep insertion order, so lines follow the hardware order
    return tuple(StepHardware(type_id, qty) for type_id, qty in totals.items())


def synthesize_assembly(
    parts: Sequence[Part],
    hardware: Sequence[HardwareItem],
    modules: Sequence[Module],
) -> list[AssemblyStep]:
    """Order parts and hardware into numbered assembly steps.

    The shell step is always present; door modules are grouped into one
    final step. Step numbers are contiguous from 1.

    Args:
        parts: Generated parts of one furniture.
        hardware: Inferred hardware of the same furniture.
        modules: The furniture's modules, in any order.

    Returns:
        Assembly steps in build order.
    """
    drafts: list[tuple[str, str, list[Part], list[HardwareItem]]] = []

    shell = [p for p in parts if p.module_id is None and p.panel_type in SHELL_PANELS]
    description = (
        f"Join the {len(shell)} shell panel(s): fix top and bottom between the "
        "sides, square the carcass"
    )
    if any(p.panel_type == PanelType.BACK for p in shell):
        description += ", then pin the back panel into its rebate"
    if any(p.panel_type == PanelType.PLINTH for p in shell):
        description += ", and fit the plinth"
    drafts.append(("Assemble shell", description + ".", shell, []))

    def extras(phases: list[tuple[str, str, frozenset[PanelType]]]) -> None:
        for title, text, panel_types in phases:
            members = [
                p for p in parts if p.module_id is None and p.panel_type in panel_types
            ]
            if members:
                drafts.append((title, text, members, []))

    extras(STRUCTURAL_PHASES)

    door_parts: list[Part] = []
    door_hardware: list[HardwareItem] = []
    door_type: ModuleType | None = None
    for module in sort_modules(modules):
        module_parts = [p for p in parts if p.module_id == module.id]
        module_hardware = [h for h in hardware if h.module_id == module.id]
        if module.type.is_door:
            door_type = door_type or module.type
            door_parts.extend(module_parts)
            door_hardware.extend(module_hardware)
            continue
        title, text = MODULE_STEPS[module.type]
        drafts.append(
            (title, text.format(parts=len(module_parts)), module_parts, module_hardware)
        )

    extras(FINISHING_PHASES)

    if door_type is not None:
        title, text = DOOR_STEPS[door_type]
        drafts.append((title, text.format(parts=len(door_parts)), door_parts, door_hardware))

    steps = [
        AssemblyStep(
            step_number=number,
            title=title,
            description=text,
            part_codes=tuple(p.code for p in step_parts),
            hardware_used=_hardware_for(step_hardware),
        )
        for number, (title, text, step_parts, step_hardware) in enumerate(drafts, start=1)
    ]
    logger.debug(f"Synthesized {len(steps)} assembly step(s)")
    return steps
