"""Grid coordinates and compass directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """One of the four compass directions on a y-down grid."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def neighbor(self, direction: Direction) -> "Point":
        """Return the point one cell away in ``direction``; bounds are not checked."""

        dx, dy = direction.offset
        return Point(self.x + dx, self.y + dy)

    def clamp(self, size_x: int, size_y: int) -> "Point":
        x = min(max(self.x, 0), size_x - 1)
        y = min(max(self.y, 0), size_y - 1)
        return Point(x, y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


__all__ = ["Direction", "Point"]
