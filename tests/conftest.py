"""Shared pytest fixtures for the GeoJSON scene test suite."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from geojson_scene.crs.registry import CrsRegistry
from geojson_scene.loader import GeoJsonDataSource
from geojson_scene.models.entity import Cartesian3

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


def identity_transform(coordinates: Sequence[float]) -> Cartesian3:
    """Pass-through transform: ``[lon, lat, h?]`` -> ``(lon, lat, h or 0)``."""
    height = coordinates[2] if len(coordinates) > 2 else 0.0
    return Cartesian3(float(coordinates[0]), float(coordinates[1]), float(height))


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


def _load(name: str) -> dict[str, Any]:
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Sample GeoJSON fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_collection() -> dict[str, Any]:
    """FeatureCollection with one Feature per geometry kind plus a null geometry."""
    return _load("01_mixed_feature_collection.geojson")


@pytest.fixture()
def duplicate_ids_collection() -> dict[str, Any]:
    """FeatureCollection with two Point Features sharing id ``"abc"``."""
    return _load("02_duplicate_feature_ids.geojson")


@pytest.fixture()
def nested_collection_feature() -> dict[str, Any]:
    """Feature whose geometry is a nested GeometryCollection."""
    return _load("03_nested_geometry_collection.geojson")


# ---------------------------------------------------------------------------
# Loader fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def identity_registry() -> CrsRegistry:
    """Hermetic registry whose default transform passes coordinates through."""
    return CrsRegistry(default_transform=identity_transform)


@pytest.fixture()
def wgs84_registry() -> CrsRegistry:
    """Fresh registry seeded with the real WGS 84 names."""
    return CrsRegistry.with_defaults()


@pytest.fixture()
def data_source(identity_registry: CrsRegistry) -> GeoJsonDataSource:
    """Data source bound to the pass-through registry."""
    return GeoJsonDataSource(identity_registry)
