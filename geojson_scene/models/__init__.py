"""Data models.

Defines the data structures produced by the loader:
- Entity: A positioned, styled scene object created from GeoJSON
- EntityCollection: The ordered entity store a data source populates
- Graphics: Point, polyline and polygon styles plus default templates
"""

from geojson_scene.models.defaults import (
    build_default_line,
    build_default_point,
    build_default_polygon,
)
from geojson_scene.models.entity import Cartesian3, Entity, EntityCollection
from geojson_scene.models.style import (
    BLACK,
    YELLOW,
    Color,
    PointGraphics,
    PolygonGraphics,
    PolylineGraphics,
    SolidColorMaterial,
)

__all__ = [
    "BLACK",
    "YELLOW",
    "Cartesian3",
    "Color",
    "Entity",
    "EntityCollection",
    "PointGraphics",
    "PolygonGraphics",
    "PolylineGraphics",
    "SolidColorMaterial",
    "build_default_line",
    "build_default_point",
    "build_default_polygon",
]
