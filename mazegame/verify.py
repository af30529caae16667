"""Structural checks and shortest paths over generated mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .geometry import Direction, Point
from .maze import Maze
from .options import PointLike


@dataclass
class MazeReport:
    """Result of :func:`verify_maze`; problems are reported, never raised."""

    size: Tuple[int, int]
    passage_count: int
    unreachable: List[Point]
    unvisited: List[Point]
    mismatched_walls: List[Tuple[Point, Direction]]

    @property
    def cell_count(self) -> int:
        return self.size[0] * self.size[1]

    @property
    def connected(self) -> bool:
        return not self.unreachable

    @property
    def acyclic(self) -> bool:
        return self.connected and self.passage_count == self.cell_count - 1

    @property
    def is_perfect(self) -> bool:
        return self.acyclic and not self.unvisited and not self.mismatched_walls

    def to_dict(self) -> dict:
        return {
            "size": list(self.size),
            "passage_count": self.passage_count,
            "connected": self.connected,
            "acyclic": self.acyclic,
            "is_perfect": self.is_perfect,
            "unreachable": [list(point.as_tuple()) for point in self.unreachable],
            "unvisited": [list(point.as_tuple()) for point in self.unvisited],
            "mismatched_walls": [
                [list(point.as_tuple()), direction.name] for point, direction in self.mismatched_walls
            ],
        }


def _reachable_from(maze: Maze, origin: Point) -> Dict[Point, Optional[Tuple[Point, Direction]]]:
    parents: Dict[Point, Optional[Tuple[Point, Direction]]] = {origin: None}
    queue: deque[Point] = deque([origin])
    while queue:
        point = queue.popleft()
        cell = maze.cell(point)
        for direction, adjacent in maze.neighbors(cell).items():
            if cell.has_wall(direction) or adjacent.position in parents:
                continue
            parents[adjacent.position] = (point, direction)
            queue.append(adjacent.position)
    return parents


def verify_maze(maze: Maze) -> MazeReport:
    """Check connectivity, visit coverage and wall pairing of ``maze``."""

    reachable = _reachable_from(maze, Point(0, 0))
    unreachable = [cell.position for cell in maze.cells() if cell.position not in reachable]
    unvisited = [cell.position for cell in maze.unvisited_cells()]
    mismatched: List[Tuple[Point, Direction]] = []
    for cell in maze.cells():
        for direction, adjacent in maze.neighbors(cell).items():
            if cell.has_wall(direction) != adjacent.has_wall(direction.opposite()):
                mismatched.append((cell.position, direction))
    return MazeReport(
        size=(maze.size_x, maze.size_y),
        passage_count=sum(1 for _ in maze.passages()),
        unreachable=unreachable,
        unvisited=unvisited,
        mismatched_walls=mismatched,
    )


def _inside(maze: Maze, point: PointLike) -> Point:
    cell = maze.cell(point)
    if cell is None:
        raise ValueError(f"{point} lies outside a {maze.size_x}x{maze.size_y} maze")
    return cell.position


def solve_maze(
    maze: Maze,
    start: Optional[PointLike] = None,
    goal: Optional[PointLike] = None,
) -> List[Direction]:
    """Return the moves of a shortest route from ``start`` to ``goal``.

    Defaults to the maze's own endpoints. An empty list means either the
    endpoints coincide or no route exists; use :func:`verify_maze` to tell
    the two apart.
    """

    origin = maze.options.start if start is None else _inside(maze, start)
    target = maze.options.goal if goal is None else _inside(maze, goal)
    parents = _reachable_from(maze, origin)
    if target not in parents:
        return []
    moves: List[Direction] = []
    node = target
    while parents[node] is not None:
        node, direction = parents[node]
        moves.append(direction)
    moves.reverse()
    return moves


__all__ = ["MazeReport", "solve_maze", "verify_maze"]
