"""A traveler moving through a maze."""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import Callable, Optional

from ..geometry import Direction, Point
from ..maze import Maze
from ..options import PointLike
from .path import Path

logger = logging.getLogger(__name__)


class Player:
    """Someone solving a maze one step at a time.

    The player starts at ``start`` (the maze's start by default), records
    each successful move on its :class:`Path` and stops moving once
    :meth:`check_win` has seen it reach the goal.
    """

    def __init__(
        self,
        maze: Maze,
        *,
        start: Optional[PointLike] = None,
        name: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.maze = maze
        self.name = name
        self._clock = clock
        self.start = self._resolve_start(start)
        self.position = self.start
        self.path = Path()
        self.finished = False
        self._started_at = clock()
        self._finished_at: Optional[float] = None

    def _resolve_start(self, start: Optional[PointLike]) -> Point:
        if start is None:
            return self.maze.options.start
        point = start if isinstance(start, Point) else Point(*start)
        return point.clamp(self.maze.size_x, self.maze.size_y)

    def move(self, direction: Direction) -> bool:
        """Step toward ``direction`` if the way is open; return whether we moved."""

        if self.finished:
            return False
        cell = self.maze.cell(self.position)
        if cell is None or not self.maze.has_neighbor(cell, direction) or cell.has_wall(direction):
            return False
        self.path.add(self.position, direction)
        self.position = self.position.neighbor(direction)
        return True

    def check_win(self) -> bool:
        if self.finished:
            return True
        if self.position != self.maze.options.goal:
            return False
        self.finished = True
        self._finished_at = self._clock()
        logger.debug("Player %s reached the goal in %s", self.name or "?", self.elapsed())
        return True

    def has_finished(self) -> bool:
        return self.finished

    def elapsed(self) -> timedelta:
        """Time in the maze so far, or the completion time once finished."""

        end = self._finished_at if self.finished and self._finished_at is not None else self._clock()
        return timedelta(seconds=end - self._started_at)

    def restart(self) -> None:
        self.finished = False
        self.position = self.start
        self.path = Path()
        self._started_at = self._clock()
        self._finished_at = None

    def set_maze(self, maze: Maze) -> None:
        """Move to a new maze, pulling the start inside its bounds, and restart."""

        self.maze = maze
        self.start = self.start.clamp(maze.size_x, maze.size_y)
        self.restart()

    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name else ""
        return f"Player({label}at=({self.position.x}, {self.position.y}), finished={self.finished})"


__all__ = ["Player"]
