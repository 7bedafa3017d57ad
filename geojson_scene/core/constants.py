"""Shared loader constants: single source of truth.

Centralises the CRS identifiers and GeoJSON member names used by the
CRS registry, the dispatcher and the geometry decoder.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Coordinate reference systems
# ---------------------------------------------------------------------------

CRS84_NAME: str = "urn:ogc:def:crs:OGC:1.3:CRS84"
"""Default GeoJSON CRS: WGS 84 longitude/latitude in degrees."""

EPSG_4326_NAME: str = "EPSG:4326"
"""Short name accepted as an alias of the default CRS."""

CRS_TYPE_NAME: str = "name"
CRS_TYPE_LINK: str = "link"

# EPSG codes used by the default transform (geodetic 3D -> geocentric).
WGS84_GEODETIC_3D: str = "EPSG:4979"
WGS84_GEOCENTRIC: str = "EPSG:4978"

# ---------------------------------------------------------------------------
# Default style template ids
# ---------------------------------------------------------------------------

DEFAULT_POINT_ID: str = "GeoJsonDataSource.defaultPoint"
DEFAULT_LINE_ID: str = "GeoJsonDataSource.defaultLine"
DEFAULT_POLYGON_ID: str = "GeoJsonDataSource.defaultPolygon"

# Separator between a Feature id and its collision suffix ("abc_2").
ID_SUFFIX_SEPARATOR: str = "_"
# First suffix tried when a Feature id is already taken.
FIRST_ID_SUFFIX: int = 2
