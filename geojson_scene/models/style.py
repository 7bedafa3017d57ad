"""Graphics styles attached to scene entities.

GeoJSON carries no styling, so every entity produced by the loader gets
its graphics from one of three default templates (point, line, polygon).
Graphics fields left as ``None`` are "unset"; ``merge`` fills unset
fields from another instance and never overwrites fields already set.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA colour with components in ``[0.0, 1.0]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 255) -> Color:
        """Build a colour from 0-255 integer components."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Return the colour as rounded 0-255 integer components."""
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
            round(self.alpha * 255),
        )


YELLOW = Color(1.0, 1.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)


class _Graphics:
    """Mixin giving graphics dataclasses overlay-merge semantics."""

    __slots__ = ()

    def merge(self, source: _Graphics) -> None:
        """Copy every field set on *source* but unset on ``self``."""
        for f in fields(self):  # type: ignore[arg-type]
            if getattr(self, f.name) is None:
                value = getattr(source, f.name)
                if value is not None:
                    setattr(self, f.name, copy.deepcopy(value))


@dataclass(slots=True)
class PointGraphics(_Graphics):
    """Screen-space point marker."""

    color: Color | None = None
    pixel_size: float | None = None
    outline_color: Color | None = None
    outline_width: float | None = None


@dataclass(slots=True)
class PolylineGraphics(_Graphics):
    """Line drawn through an entity's vertex positions."""

    color: Color | None = None
    width: float | None = None
    outline_color: Color | None = None
    outline_width: float | None = None


@dataclass(slots=True)
class SolidColorMaterial:
    """Fill material painting a single colour."""

    color: Color


@dataclass(slots=True)
class PolygonGraphics(_Graphics):
    """Filled area bounded by an entity's vertex positions."""

    material: SolidColorMaterial | None = None
