"""GeoJSON loading pipeline.

Turns GeoJSON documents into scene entities.  The pipeline is split
into focused stages:

- **_types**: parse raw ``type`` strings into ``GeoJsonType`` tags
- **_identity**: entity id selection and Feature id collision probing
- **_geometry**: geometry decoding with default style merging
- **_dispatch**: Feature / FeatureCollection / bare-geometry dispatch
- **data_source**: ``GeoJsonDataSource``, the load / load_url driver

Supported GeoJSON structures:
- Feature, FeatureCollection and bare geometry roots
- Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon
- Nested GeometryCollections
- Features with ``null`` geometry (attribute-only placeholders)
- Named and linked ``crs`` members via the CRS registry

Polygon holes (interior rings) are not supported and are ignored.
"""

from __future__ import annotations

from geojson_scene.loader._geometry import DecodeContext, decode_geometry
from geojson_scene.loader._identity import create_entity, resolve_entity_id
from geojson_scene.loader._types import GeoJsonType, parse_document_type, parse_geometry_type
from geojson_scene.loader.data_source import GeoJsonDataSource, LoadState

__all__ = [
    "DecodeContext",
    "GeoJsonDataSource",
    "GeoJsonType",
    "LoadState",
    "create_entity",
    "decode_geometry",
    "parse_document_type",
    "parse_geometry_type",
    "resolve_entity_id",
]
