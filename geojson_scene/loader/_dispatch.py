"""Document dispatch: top-level GeoJSON objects to geometry decoding.

``FeatureCollection`` fans out to its Features, a ``Feature`` hands its
geometry to the decoder with itself as identity source, and bare
geometries (GeoJSON allows one as the document root) decode directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from geojson_scene.core.exceptions import MissingGeometryError
from geojson_scene.loader._geometry import GEOMETRY_HANDLERS, decode_geometry
from geojson_scene.loader._identity import create_entity
from geojson_scene.loader._types import GeoJsonType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geojson_scene.loader._geometry import DecodeContext, GeometryHandler

logger = logging.getLogger("geojson_scene.loader")


def process_feature(ctx: DecodeContext, feature: Mapping[str, Any], _unused: object = None) -> None:
    """Decode a Feature's geometry, keyed by the Feature's ``id``.

    Raises:
        MissingGeometryError: If the Feature has no ``geometry`` member.
    """
    if "geometry" not in feature:
        raise MissingGeometryError("feature.geometry is required.")

    geometry = feature["geometry"]
    if geometry is None:
        # Attribute-only feature: unstyled, positionless placeholder.
        create_entity(feature, ctx.entities)
        return
    decode_geometry(ctx, feature, geometry)


def process_feature_collection(
    ctx: DecodeContext, collection: Mapping[str, Any], _unused: object = None
) -> None:
    features = collection["features"]
    logger.debug("Processing FeatureCollection with %d feature(s)", len(features))
    for feature in features:
        process_feature(ctx, feature)


DOCUMENT_HANDLERS: dict[GeoJsonType, GeometryHandler] = {
    GeoJsonType.FEATURE: process_feature,
    GeoJsonType.FEATURE_COLLECTION: process_feature_collection,
    **GEOMETRY_HANDLERS,
}


def dispatch_document(ctx: DecodeContext, tag: GeoJsonType, document: Mapping[str, Any]) -> None:
    """Run the handler for an already-parsed document *tag*.

    The document serves as both identity node and geometry.
    """
    DOCUMENT_HANDLERS[tag](ctx, document, document)
