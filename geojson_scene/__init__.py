"""GeoJSON scene loader.

Ingests GeoJSON documents (objects or URLs), resolves their coordinate
reference system, and materialises every feature and geometry as a
styled scene entity with Earth-fixed Cartesian positions.
"""

__version__ = "0.1.0"
