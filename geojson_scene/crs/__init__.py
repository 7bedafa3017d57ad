"""Coordinate reference system resolution.

Implements the pluggable CRS lookup used by the loader:
- CrsRegistry: name / link-href / link-type tables and the resolve protocol
- wgs84_to_cartesian: default WGS 84 degrees → ECEF transform (pyproj)
- DEFAULT_REGISTRY and module-level registration helpers
"""

from geojson_scene.crs.registry import (
    DEFAULT_REGISTRY,
    CoordinateTransform,
    CrsLinkResolver,
    CrsRegistry,
    register_crs_link_href_resolver,
    register_crs_link_type_resolver,
    register_crs_name,
    wgs84_to_cartesian,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "CoordinateTransform",
    "CrsLinkResolver",
    "CrsRegistry",
    "register_crs_link_href_resolver",
    "register_crs_link_type_resolver",
    "register_crs_name",
    "wgs84_to_cartesian",
]
