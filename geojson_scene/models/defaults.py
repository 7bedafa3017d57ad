"""Default style templates for GeoJSON geometry families.

Each builder returns a fresh template ``Entity``; the data source keeps
one of each as a public, replaceable attribute and merges copies onto the
entities it creates.
"""

from __future__ import annotations

from geojson_scene.core.constants import DEFAULT_LINE_ID, DEFAULT_POINT_ID, DEFAULT_POLYGON_ID
from geojson_scene.models.entity import Entity
from geojson_scene.models.style import (
    BLACK,
    YELLOW,
    Color,
    PointGraphics,
    PolygonGraphics,
    PolylineGraphics,
    SolidColorMaterial,
)

# Translucent yellow fill (alpha 25/255).
POLYGON_FILL = Color.from_bytes(255, 255, 0, 25)


def build_default_point() -> Entity:
    """Yellow 10 px point with a 1 px black outline."""
    return Entity(
        id=DEFAULT_POINT_ID,
        point=PointGraphics(
            color=YELLOW,
            pixel_size=10,
            outline_color=BLACK,
            outline_width=1,
        ),
    )


def build_default_line() -> Entity:
    """Yellow 2 px line with a 1 px black outline."""
    return Entity(
        id=DEFAULT_LINE_ID,
        polyline=PolylineGraphics(
            color=YELLOW,
            width=2,
            outline_color=BLACK,
            outline_width=1,
        ),
    )


def build_default_polygon() -> Entity:
    """Translucent yellow fill with a 1 px yellow, unoutlined boundary."""
    return Entity(
        id=DEFAULT_POLYGON_ID,
        polyline=PolylineGraphics(
            color=YELLOW,
            width=1,
            outline_color=BLACK,
            outline_width=0,
        ),
        polygon=PolygonGraphics(material=SolidColorMaterial(POLYGON_FILL)),
    )
