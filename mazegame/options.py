"""Maze construction options."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .geometry import Point

PointLike = Union[Point, Tuple[int, int]]


class InvalidDimensionError(ValueError):
    """Raised when a maze is requested with a non-positive width or height."""


class Algorithm(Enum):
    DFS = "dfs"
    PRIM = "prim"
    WILSON = "wilson"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, "Algorithm"]) -> "Algorithm":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown maze algorithm '{value}' (expected one of: {choices})") from exc


_LABELS = {
    Algorithm.DFS: "Depth-first Search",
    Algorithm.PRIM: "Prim's Algorithm",
    Algorithm.WILSON: "Wilson's Algorithm",
}


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


@dataclass(frozen=True)
class MazeOptions:
    """Size, endpoints and generation algorithm for a maze.

    ``start`` and ``goal`` are clamped into the grid when the options are
    built; they default to the top-left and bottom-right cells. Use the
    ``with_*`` helpers to derive modified options.
    """

    size_x: int
    size_y: int
    start: Optional[PointLike] = None
    goal: Optional[PointLike] = None
    algorithm: Algorithm = field(default=Algorithm.DFS)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise InvalidDimensionError(
                f"Maze dimensions must be positive, got {self.size_x}x{self.size_y}"
            )
        start = Point(0, 0) if self.start is None else _as_point(self.start)
        goal = Point(self.size_x - 1, self.size_y - 1) if self.goal is None else _as_point(self.goal)
        # frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "start", start.clamp(self.size_x, self.size_y))
        object.__setattr__(self, "goal", goal.clamp(self.size_x, self.size_y))
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))

    def with_start(self, start: PointLike) -> "MazeOptions":
        return replace(self, start=_as_point(start))

    def with_goal(self, goal: PointLike) -> "MazeOptions":
        return replace(self, goal=_as_point(goal))

    def with_algorithm(self, algorithm: Union[str, Algorithm]) -> "MazeOptions":
        return replace(self, algorithm=Algorithm.parse(algorithm))

    def to_dict(self) -> dict:
        return {
            "size_x": self.size_x,
            "size_y": self.size_y,
            "start": list(self.start.as_tuple()),
            "goal": list(self.goal.as_tuple()),
            "algorithm": self.algorithm.value,
        }


__all__ = ["Algorithm", "InvalidDimensionError", "MazeOptions", "PointLike"]
