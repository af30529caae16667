"""Trail of moves through a maze, with backtracked segments kept apart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set, Tuple

from ..geometry import Direction, Point


@dataclass(frozen=True)
class PathPoint:
    """A cell the traveler stood on and the direction it left by.

    Identity is the point alone, so two entries for the same cell with
    different exit directions collapse into one set member.
    """

    point: Point
    direction: Direction = field(compare=False)

    @property
    def landing(self) -> Point:
        return self.point.neighbor(self.direction)

    def to_dict(self) -> dict:
        return {"point": list(self.point.as_tuple()), "direction": self.direction.name}


class Path:
    """Forward trail as a stack plus the set of points backed out of.

    :meth:`add` records a traveler's step and detects when it retraces the
    most recent move. :meth:`push` and :meth:`pop` are raw stack operations
    for arbitrary walks that may double back on themselves.
    """

    def __init__(self) -> None:
        self._trail: List[PathPoint] = []
        self._backtrack: Set[PathPoint] = set()

    def add(self, point: Point, direction: Direction) -> bool:
        """Record a step out of ``point``; return ``True`` if it was a backtrack."""

        landing = point.neighbor(direction)
        if self._trail and self._trail[-1].point == landing:
            self._trail.pop()
            self._backtrack.add(PathPoint(point, direction))
            return True
        self._backtrack.discard(PathPoint(landing, direction))
        self._trail.append(PathPoint(point, direction))
        return False

    def push(self, point: Point, direction: Direction) -> None:
        self._trail.append(PathPoint(point, direction))

    def pop(self) -> PathPoint:
        return self._trail.pop()

    def peek(self) -> Optional[PathPoint]:
        return self._trail[-1] if self._trail else None

    def is_empty(self) -> bool:
        return not self._trail

    def __len__(self) -> int:
        return len(self._trail)

    @property
    def points(self) -> Tuple[PathPoint, ...]:
        return tuple(self._trail)

    @property
    def backtracked(self) -> FrozenSet[PathPoint]:
        return frozenset(self._backtrack)

    def to_dict(self) -> dict:
        return {
            "trail": [entry.to_dict() for entry in self._trail],
            "backtracked": sorted(
                (entry.to_dict() for entry in self._backtrack),
                key=lambda item: (item["point"][1], item["point"][0]),
            ),
        }


__all__ = ["Path", "PathPoint"]
