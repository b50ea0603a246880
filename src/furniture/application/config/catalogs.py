"""Bundled default catalogs.

The default materials, finishes and hardware ship as JSON package data
and are validated with the same schema entries used for project files.
"""

import json
import logging
from importlib import resources

from furniture.application.config.schemas import CatalogsConfig
from furniture.domain.catalogs import Catalogs, Finish, HardwareSpec, Material

logger = logging.getLogger(__name__)

DATA_PACKAGE = "furniture.application.data"


def catalogs_from_config(config: CatalogsConfig) -> Catalogs:
    """Convert validated catalog entries into a domain Catalogs snapshot."""
    return Catalogs(
        materials={
            key: Material(
                id=key,
                name=entry.name,
                material_type=entry.material_type,
                price_per_sqm=entry.price_per_sqm,
                standard_sheet_width=entry.standard_sheet_width,
                standard_sheet_length=entry.standard_sheet_length,
                density=entry.density,
                standard_thicknesses=tuple(entry.standard_thicknesses),
            )
            for key, entry in config.materials.items()
        },
        finishes={
            key: Finish(id=key, name=entry.name, color_hex=entry.color_hex)
            for key, entry in config.finishes.items()
        },
        hardware={
            key: HardwareSpec(
                id=key,
                name=entry.name,
                hardware_type=entry.hardware_type,
                unit_price=entry.unit_price,
                unit=entry.unit,
            )
            for key, entry in config.hardware.items()
        },
    )


def _read(name: str) -> dict:
    data_files = resources.files(DATA_PACKAGE)
    return json.loads(data_files.joinpath(f"{name}.json").read_text(encoding="utf-8"))


def default_catalogs() -> Catalogs:
    """Load the bundled catalogs.

    A fresh snapshot is built on every call, so callers can never share
    or alter each other's catalogs.

    Returns:
        Catalogs holding the default materials, finishes and hardware.
    """
    config = CatalogsConfig.model_validate(
        {
            "materials": _read("materials"),
            "finishes": _read("finishes"),
            "hardware": _read("hardware"),
        }
    )
    catalogs = catalogs_from_config(config)
    logger.debug(
        f"Loaded default catalogs: {len(catalogs.materials)} materials, "
        f"{len(catalogs.finishes)} finishes, {len(catalogs.hardware)} hardware"
    )
    return catalogs
