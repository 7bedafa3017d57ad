"""Geometry decoding: GeoJSON geometries to positioned entities.

Each handler receives the decode context, the identity node (the
enclosing Feature, or the geometry itself at the document root) and the
geometry object.  Coordinates are consumed exactly as given: order is
preserved and no deduplication, closing or winding correction happens.

Polygon holes are not supported; only the first (outer) ring of each
polygon is decoded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from geojson_scene.loader._identity import create_entity
from geojson_scene.loader._types import GeoJsonType, parse_geometry_type

if TYPE_CHECKING:
    from geojson_scene.crs.registry import CoordinateTransform
    from geojson_scene.models.entity import Cartesian3, Entity, EntityCollection

logger = logging.getLogger("geojson_scene.loader")


@dataclass(frozen=True, slots=True)
class DecodeContext:
    """Everything a handler needs for one load.

    Attributes:
        entities: Store receiving the created entities.
        transform: The CRS transform resolved for the document.
        default_point: Template merged onto Point / MultiPoint entities.
        default_line: Template merged onto LineString / MultiLineString entities.
        default_polygon: Template merged onto Polygon / MultiPolygon entities.
    """

    entities: EntityCollection
    transform: CoordinateTransform
    default_point: Entity
    default_line: Entity
    default_polygon: Entity

    def positions(self, coordinates: Sequence[Sequence[float]]) -> list[Cartesian3]:
        """Transform a coordinate list, preserving order."""
        return [self.transform(coordinate) for coordinate in coordinates]


GeometryHandler = Callable[[DecodeContext, Mapping[str, Any], Mapping[str, Any]], None]


def _outer_ring(polygon: Sequence[Sequence[Sequence[float]]]) -> Sequence[Sequence[float]]:
    # A polygon without rings decodes as an empty outline.
    return polygon[0] if polygon else []


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def process_point(ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]) -> None:
    entity = create_entity(node, ctx.entities)
    entity.merge(ctx.default_point)
    entity.position = ctx.transform(geometry["coordinates"])


def process_multi_point(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    for coordinate in geometry["coordinates"]:
        entity = create_entity(node, ctx.entities)
        entity.merge(ctx.default_point)
        entity.position = ctx.transform(coordinate)


def process_line_string(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    entity = create_entity(node, ctx.entities)
    entity.merge(ctx.default_line)
    entity.vertex_positions = ctx.positions(geometry["coordinates"])


def process_multi_line_string(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    for line in geometry["coordinates"]:
        entity = create_entity(node, ctx.entities)
        entity.merge(ctx.default_line)
        entity.vertex_positions = ctx.positions(line)


def process_polygon(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    entity = create_entity(node, ctx.entities)
    entity.merge(ctx.default_polygon)
    entity.vertex_positions = ctx.positions(_outer_ring(geometry["coordinates"]))


def process_multi_polygon(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    """One entity per member polygon, outer ring only."""
    for polygon in geometry["coordinates"]:
        entity = create_entity(node, ctx.entities)
        entity.merge(ctx.default_polygon)
        entity.vertex_positions = ctx.positions(_outer_ring(polygon))


def process_geometry_collection(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    """Decode each member geometry against the same identity node."""
    for member in geometry["geometries"]:
        decode_geometry(ctx, node, member)


GEOMETRY_HANDLERS: dict[GeoJsonType, GeometryHandler] = {
    GeoJsonType.GEOMETRY_COLLECTION: process_geometry_collection,
    GeoJsonType.LINE_STRING: process_line_string,
    GeoJsonType.MULTI_LINE_STRING: process_multi_line_string,
    GeoJsonType.MULTI_POINT: process_multi_point,
    GeoJsonType.MULTI_POLYGON: process_multi_polygon,
    GeoJsonType.POINT: process_point,
    GeoJsonType.POLYGON: process_polygon,
}


def decode_geometry(
    ctx: DecodeContext, node: Mapping[str, Any], geometry: Mapping[str, Any]
) -> None:
    """Dispatch *geometry* to its handler.

    Raises:
        UnknownGeometryTypeError: If ``geometry["type"]`` is not a geometry kind.
    """
    tag = parse_geometry_type(geometry.get("type"))
    logger.debug("Decoding %s geometry", tag.value)
    GEOMETRY_HANDLERS[tag](ctx, node, geometry)
