"""Entity identity resolution.

GeoJSON only gives Feature objects a usable ``id``, and multi-geometries
expand one Feature into several entities, so ids are probed for
collisions: ``"abc"``, then ``"abc_2"``, ``"abc_3"``, ...  Everything
else gets a random UUID.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from geojson_scene.core.constants import FIRST_ID_SUFFIX, ID_SUFFIX_SEPARATOR
from geojson_scene.loader._types import GeoJsonType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geojson_scene.models.entity import Entity, EntityCollection


def resolve_entity_id(node: Mapping[str, Any], entities: EntityCollection) -> str:
    """Return an unused entity id for *node*."""
    feature_id = node.get("id")
    if feature_id is None or node.get("type") != GeoJsonType.FEATURE.value:
        return str(uuid.uuid4())

    base = str(feature_id)
    candidate = base
    suffix = FIRST_ID_SUFFIX
    while entities.exists(candidate):
        candidate = f"{base}{ID_SUFFIX_SEPARATOR}{suffix}"
        suffix += 1
    return candidate


def create_entity(node: Mapping[str, Any], entities: EntityCollection) -> Entity:
    """Create an entity for *node* under a fresh id and link it back to *node*."""
    entity = entities.get_or_create(resolve_entity_id(node, entities))
    entity.geojson = node
    return entity
