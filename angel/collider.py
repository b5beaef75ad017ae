"""Axis-aligned rectangles and entity colliders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle in world units."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class Collider:
    """A box collider placed relative to its owning entity."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def get_bounds(self, entity_x: float, entity_y: float) -> Rect:
        """Return the collider's rectangle for an entity at the given position."""
        return Rect(entity_x + self.offset_x, entity_y + self.offset_y, self.w, self.h)

    @staticmethod
    def intersects(a: Rect, b: Rect) -> bool:
        """Return True if the rectangles overlap; touching edges do not count."""
        if a.x + a.w <= b.x:
            return False
        if b.x + b.w <= a.x:
            return False
        if a.y + a.h <= b.y:
            return False
        if b.y + b.h <= a.y:
            return False
        return True