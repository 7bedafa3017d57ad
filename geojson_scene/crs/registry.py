"""CRS registry: maps GeoJSON ``crs`` members to coordinate transforms.

A registry holds three tables:

- ``names``: CRS name → transform (resolved immediately).
- ``link_hrefs``: link ``href`` → resolver.
- ``link_types``: link ``type`` → resolver, consulted only when no
  href resolver matches.

A resolver receives the link's ``properties`` mapping and returns either
a transform or an awaitable that produces one, so remote CRS definitions
can be fetched lazily.

A process-wide ``DEFAULT_REGISTRY`` is pre-seeded with the WGS 84
names.  Applications register extra CRSs on it (or on their own
``CrsRegistry`` instance) before loading documents.

Usage::

    from geojson_scene.crs import register_crs_name

    register_crs_name("urn:example:crs:flat", flat_earth_transform)
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeAlias

from pyproj import Transformer

from geojson_scene.core.constants import (
    CRS84_NAME,
    CRS_TYPE_LINK,
    CRS_TYPE_NAME,
    EPSG_4326_NAME,
    WGS84_GEOCENTRIC,
    WGS84_GEODETIC_3D,
)
from geojson_scene.core.exceptions import (
    InvalidCrsError,
    UnknownCrsNameError,
    UnknownCrsTypeError,
    UnresolvableCrsLinkError,
)
from geojson_scene.models.entity import Cartesian3

logger = logging.getLogger("geojson_scene.crs")

CoordinateTransform: TypeAlias = Callable[[Sequence[float]], Cartesian3]
CrsLinkResolver: TypeAlias = Callable[
    [Mapping[str, Any]],
    "CoordinateTransform | Awaitable[CoordinateTransform]",
]

_MISSING = object()


# ---------------------------------------------------------------------------
# Default transform
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=1)
def _geodetic_to_geocentric() -> Transformer:
    return Transformer.from_crs(WGS84_GEODETIC_3D, WGS84_GEOCENTRIC, always_xy=True)


def wgs84_to_cartesian(coordinates: Sequence[float]) -> Cartesian3:
    """Convert ``[lon, lat, height?]`` in WGS 84 degrees to ECEF metres.

    A missing height is treated as ``0`` (on the ellipsoid surface).
    """
    lon = float(coordinates[0])
    lat = float(coordinates[1])
    height = float(coordinates[2]) if len(coordinates) > 2 else 0.0
    x, y, z = _geodetic_to_geocentric().transform(lon, lat, height)
    return Cartesian3(x, y, z)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class CrsRegistry:
    """Mutable lookup tables for CRS resolution.

    Registries are not synchronised; register entries before starting
    concurrent loads that share the registry.
    """

    def __init__(self, *, default_transform: CoordinateTransform = wgs84_to_cartesian) -> None:
        self.default_transform = default_transform
        self.names: dict[str, CoordinateTransform] = {}
        self.link_hrefs: dict[str, CrsLinkResolver] = {}
        self.link_types: dict[str, CrsLinkResolver] = {}

    @classmethod
    def with_defaults(cls) -> CrsRegistry:
        """Return a registry seeded with the WGS 84 CRS names."""
        registry = cls()
        registry.register_name(CRS84_NAME, wgs84_to_cartesian)
        registry.register_name(EPSG_4326_NAME, wgs84_to_cartesian)
        return registry

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_name(self, name: str, transform: CoordinateTransform) -> None:
        """Map a named CRS to *transform*.

        Raises:
            ValueError: If the name is empty.
        """
        if not name:
            msg = "CRS name must be non-empty"
            raise ValueError(msg)
        self.names[name] = transform
        logger.debug("Registered CRS name: %s", name)

    def register_link_href_resolver(self, href: str, resolver: CrsLinkResolver) -> None:
        """Map a linked CRS ``href`` to *resolver*.

        Raises:
            ValueError: If the href is empty.
        """
        if not href:
            msg = "CRS link href must be non-empty"
            raise ValueError(msg)
        self.link_hrefs[href] = resolver
        logger.debug("Registered CRS link href resolver: %s", href)

    def register_link_type_resolver(self, link_type: str, resolver: CrsLinkResolver) -> None:
        """Map a linked CRS ``type`` (e.g. ``"proj4"``) to *resolver*.

        Raises:
            ValueError: If the type is empty.
        """
        if not link_type:
            msg = "CRS link type must be non-empty"
            raise ValueError(msg)
        self.link_types[link_type] = resolver
        logger.debug("Registered CRS link type resolver: %s", link_type)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def resolve(self, document: Mapping[str, Any]) -> CoordinateTransform:
        """Resolve the transform for *document*'s ``crs`` member.

        Lookups run before the first suspension point, so malformed or
        unknown CRS members fail without yielding to the event loop.

        Raises:
            InvalidCrsError: If ``crs`` is ``null`` or has no ``properties``.
            UnknownCrsNameError: If a named CRS is not registered.
            UnresolvableCrsLinkError: If no resolver matches a linked CRS,
                or the matching resolver does not produce a callable.
            UnknownCrsTypeError: If ``crs.type`` is not ``name`` or ``link``.
        """
        crs = document.get("crs", _MISSING)
        if crs is _MISSING:
            logger.debug("No crs member, using default transform")
            return self.default_transform
        if crs is None:
            raise InvalidCrsError("crs is null.")
        if not isinstance(crs, Mapping) or "properties" not in crs:
            raise InvalidCrsError("crs.properties is undefined.")

        properties = crs["properties"]
        if not isinstance(properties, Mapping):
            raise InvalidCrsError(f"crs.properties must be an object, got {properties!r}.")

        crs_type = crs.get("type")
        if crs_type == CRS_TYPE_NAME:
            name = properties.get("name")
            transform = self.names.get(name) if isinstance(name, str) else None
            if transform is None:
                raise UnknownCrsNameError(f"Unknown crs name: {name}")
            logger.debug("Resolved named crs: %s", name)
            return transform

        if crs_type == CRS_TYPE_LINK:
            resolver = self._find_link_resolver(properties)
            if resolver is None:
                raise UnresolvableCrsLinkError(
                    f"Unable to resolve crs link: {json.dumps(dict(properties), default=str)}"
                )
            result = resolver(properties)
            if inspect.isawaitable(result):
                result = await result
            if not callable(result):
                raise UnresolvableCrsLinkError(
                    f"crs link resolver returned a non-callable transform: {result!r}"
                )
            logger.debug("Resolved linked crs: %s", properties.get("href") or properties.get("type"))
            return result

        raise UnknownCrsTypeError(f"Unknown crs type: {crs_type}")

    def _find_link_resolver(self, properties: Mapping[str, Any]) -> CrsLinkResolver | None:
        href = properties.get("href")
        if isinstance(href, str) and href in self.link_hrefs:
            return self.link_hrefs[href]
        link_type = properties.get("type")
        if isinstance(link_type, str):
            return self.link_types.get(link_type)
        return None


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------

DEFAULT_REGISTRY = CrsRegistry.with_defaults()


def register_crs_name(name: str, transform: CoordinateTransform) -> None:
    """Register a named CRS on the process-wide registry."""
    DEFAULT_REGISTRY.register_name(name, transform)


def register_crs_link_href_resolver(href: str, resolver: CrsLinkResolver) -> None:
    """Register a link href resolver on the process-wide registry."""
    DEFAULT_REGISTRY.register_link_href_resolver(href, resolver)


def register_crs_link_type_resolver(link_type: str, resolver: CrsLinkResolver) -> None:
    """Register a link type resolver on the process-wide registry."""
    DEFAULT_REGISTRY.register_link_type_resolver(link_type, resolver)
