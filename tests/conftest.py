"""Pytest configuration and shared fixtures for furniture tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from furniture.application.config import default_catalogs
from furniture.domain import (
    BookcaseParams,
    Catalogs,
    HingedDoorParams,
    KitchenBaseParams,
    Module,
    ShelfParams,
    WardrobeParams,
    generator_for,
)
from furniture.domain.components import CarcassContext
from furniture.domain.params import CarcassParams

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Catalogs and params
# =============================================================================


@pytest.fixture
def catalogs() -> Catalogs:
    """Fresh snapshot of the bundled catalogs."""
    return default_catalogs()


@pytest.fixture
def wardrobe_params() -> WardrobeParams:
    """1200 x 2400 x 600 hinged wardrobe without plinth."""
    return WardrobeParams(
        total_width=1200, total_height=2400, total_depth=600, door_type="hinged"
    )


@pytest.fixture
def scenario_a_modules() -> list[Module]:
    """Three shelves and a pair of hinged doors."""
    return [
        Module("shelves", 0, ShelfParams(count=3)),
        Module("doors", 0, HingedDoorParams(count=2)),
    ]


@pytest.fixture
def open_bookcase_params() -> BookcaseParams:
    """900 x 2000 x 300 bookcase without a back panel."""
    return BookcaseParams(
        total_width=900, total_height=2000, total_depth=300, has_back=False
    )


@pytest.fixture
def kitchen_base_params() -> KitchenBaseParams:
    """600 x 870 x 580 base unit on a 100 mm plinth with a countertop."""
    return KitchenBaseParams(
        total_width=600,
        total_height=870,
        total_depth=580,
        has_socle=True,
        socle_height=100,
    )


@pytest.fixture
def make_context() -> Callable[..., CarcassContext]:
    """Build the carcass context a family generator would build."""

    def _make(
        params: CarcassParams,
        modules: Sequence[Module] = (),
        furniture_id: str = "f1",
    ) -> CarcassContext:
        return generator_for(params).build_context(
            furniture_id,
            params,
            list(modules),
            "hdf_6",
            "mdf_18",
            "raw",
        )

    return _make


# =============================================================================
# Project files
# =============================================================================


@pytest.fixture
def project_data() -> dict[str, Any]:
    """A valid two-furniture project as parsed JSON."""
    return {
        "schema_version": "1.0",
        "project": {"name": "Test flat", "currency": "EUR", "profit_margin": 30},
        "furnitures": [
            {
                "id": "wardrobe",
                "type": "wardrobe",
                "params": {
                    "total_width": 1200,
                    "total_height": 2400,
                    "total_depth": 600,
                    "door_type": "hinged",
                },
                "modules": [
                    {"id": "shelves", "type": "shelf", "params": {"count": 3}},
                    {"id": "doors", "type": "hinged_door", "params": {"count": 2}},
                ],
            },
            {
                "id": "bookcase",
                "type": "bookcase",
                "params": {
                    "total_width": 800,
                    "total_height": 1800,
                    "total_depth": 300,
                },
                "modules": [
                    {"id": "shelves", "type": "shelf", "params": {"count": 4}},
                ],
            },
        ],
    }


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write project data to a temporary JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "project.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
