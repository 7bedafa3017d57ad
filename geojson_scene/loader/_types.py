"""GeoJSON type tags.

Raw ``type`` strings are parsed into ``GeoJsonType`` members up front so
that handler tables are keyed by a closed set of tags; unrecognised
strings fail here with a dedicated error.
"""

from __future__ import annotations

import enum

from geojson_scene.core.exceptions import UnknownGeometryTypeError, UnsupportedDocumentTypeError


class GeoJsonType(enum.Enum):
    """Every object type the loader understands.

    Values are the exact, case-sensitive GeoJSON ``type`` strings.
    """

    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"
    GEOMETRY_COLLECTION = "GeometryCollection"
    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"

    @property
    def is_geometry(self) -> bool:
        """Whether this tag names a geometry (including GeometryCollection)."""
        return self not in _CONTAINER_TYPES


_CONTAINER_TYPES = frozenset({GeoJsonType.FEATURE, GeoJsonType.FEATURE_COLLECTION})

_BY_VALUE: dict[str, GeoJsonType] = {member.value: member for member in GeoJsonType}


def _lookup(raw: object) -> GeoJsonType | None:
    if not isinstance(raw, str):
        return None
    return _BY_VALUE.get(raw)


def parse_document_type(raw: object) -> GeoJsonType:
    """Parse a top-level ``type`` string.

    Raises:
        UnsupportedDocumentTypeError: If *raw* is not a GeoJSON object type.
    """
    tag = _lookup(raw)
    if tag is None:
        raise UnsupportedDocumentTypeError(f"Unsupported GeoJSON object type: {raw}")
    return tag


def parse_geometry_type(raw: object) -> GeoJsonType:
    """Parse a geometry ``type`` string.

    Raises:
        UnknownGeometryTypeError: If *raw* is not a geometry type.
            ``Feature`` and ``FeatureCollection`` are rejected too.
    """
    tag = _lookup(raw)
    if tag is None or not tag.is_geometry:
        raise UnknownGeometryTypeError(f"Unknown geometry type: {raw}")
    return tag
