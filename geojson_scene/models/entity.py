"""Scene entities and the ordered collection that stores them.

An ``Entity`` is the renderer-agnostic form of one GeoJSON geometry
instance: a string id, a back-reference to the raw GeoJSON fragment it
came from, optional graphics, and either a single position or a vertex
path.  ``EntityCollection`` is the store the loader writes into.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from geojson_scene.models.style import PointGraphics, PolygonGraphics, PolylineGraphics


class Cartesian3(NamedTuple):
    """Earth-fixed Cartesian position in metres."""

    x: float
    y: float
    z: float


_GRAPHICS_ATTRS = ("point", "polyline", "polygon")


@dataclass(slots=True)
class Entity:
    """A single positioned, styled scene object.

    Attributes:
        id: Key of the entity, unique within its collection.
        geojson: The raw GeoJSON node the entity was created from.
        point: Point marker graphics (Point / MultiPoint).
        polyline: Line graphics (LineString, MultiLineString and polygon outlines).
        polygon: Fill graphics (Polygon / MultiPolygon).
        position: Single position for point geometries.
        vertex_positions: Ordered vertex path for line and polygon geometries.
    """

    id: str
    geojson: Mapping[str, Any] | None = None
    point: PointGraphics | None = None
    polyline: PolylineGraphics | None = None
    polygon: PolygonGraphics | None = None
    position: Cartesian3 | None = None
    vertex_positions: list[Cartesian3] | None = field(default=None)

    def merge(self, template: Entity) -> None:
        """Overlay *template*'s graphics onto this entity.

        Graphics missing here are deep-copied from the template; graphics
        present on both are merged field by field, keeping values already
        set on this entity.  The template is never modified and no object
        is shared between the two afterwards.
        """
        for name in _GRAPHICS_ATTRS:
            source = getattr(template, name)
            if source is None:
                continue
            target = getattr(self, name)
            if target is None:
                setattr(self, name, copy.deepcopy(source))
            else:
                target.merge(source)

    @property
    def has_graphics(self) -> bool:
        """Whether any graphics are attached."""
        return any(getattr(self, name) is not None for name in _GRAPHICS_ATTRS)


class EntityCollection:
    """Insertion-ordered store of entities keyed by id.

    Example usage::

        entities = EntityCollection()
        entity = entities.get_or_create("parcel-7")
        assert entities.exists("parcel-7")
        entities.clear()
    """

    def __init__(self) -> None:
        self._entities: dict[str, Entity] = {}

    def clear(self) -> None:
        """Remove every entity."""
        self._entities.clear()

    def get_or_create(self, entity_id: str) -> Entity:
        """Return the entity with *entity_id*, creating it if absent."""
        entity = self._entities.get(entity_id)
        if entity is None:
            entity = Entity(id=entity_id)
            self._entities[entity_id] = entity
        return entity

    def exists(self, entity_id: str) -> bool:
        """Whether an entity with *entity_id* is stored."""
        return entity_id in self._entities

    def get(self, entity_id: str) -> Entity | None:
        """Return the entity with *entity_id*, or ``None``."""
        return self._entities.get(entity_id)

    @property
    def ids(self) -> list[str]:
        """Entity ids in creation order."""
        return list(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)
