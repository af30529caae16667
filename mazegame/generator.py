"""Randomized maze generation over a :class:`~mazegame.maze.Maze` grid."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path as FilePath
from typing import Callable, Dict, List, Optional, Set, Tuple, Union

from .geometry import Direction, Point
from .maze import Cell, Maze
from .options import Algorithm, MazeOptions
from .player.path import Path

logger = logging.getLogger(__name__)

DIRECTIONS = tuple(Direction)


def generate_maze(
    maze: Maze,
    algorithm: Union[str, Algorithm, None] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Maze:
    """Carve passages into ``maze`` in place using ``algorithm``.

    Defaults to the algorithm stored in the maze options. Every algorithm
    leaves all cells visited and the passages forming a spanning tree.
    """

    selected = maze.options.algorithm if algorithm is None else Algorithm.parse(algorithm)
    rng = rng if rng is not None else random.Random()
    logger.debug("Generating %dx%d maze with %s", maze.size_x, maze.size_y, selected.label)
    _ALGORITHMS[selected](maze, rng)
    return maze


def _random_cell(maze: Maze, rng: random.Random) -> Cell:
    return maze.cell_by_index(rng.randrange(len(maze)))


def _generate_dfs(maze: Maze, rng: random.Random) -> None:
    """Randomized depth-first backtracker; long corridors, few branches."""

    stack: List[Cell] = []
    current = _random_cell(maze, rng)
    current.visited = True
    while True:
        candidates = maze.neighbors(current)
        direction = rng.choice(DIRECTIONS)
        while candidates and (direction not in candidates or candidates[direction].visited):
            candidates.pop(direction, None)
            direction = rng.choice(DIRECTIONS)
        if not candidates:
            if not stack:
                break
            current = stack.pop()
            continue
        maze.break_wall(current, direction)
        stack.append(current)
        current = candidates[direction]


def _generate_prim(maze: Maze, rng: random.Random) -> None:
    """Randomized Prim's: grow the tree from a frontier of walls."""

    seed_cell = _random_cell(maze, rng)
    seed_cell.visited = True
    frontier: List[Tuple[Cell, Direction]] = [
        (seed_cell, direction) for direction in maze.neighbors(seed_cell)
    ]
    while frontier:
        index = rng.randrange(len(frontier))
        frontier[index], frontier[-1] = frontier[-1], frontier[index]
        cell, direction = frontier.pop()
        target = maze.neighbor(cell, direction)
        if target is None or target.visited:
            continue
        maze.break_wall(cell, direction)
        for outward, adjacent in maze.neighbors(target).items():
            if not adjacent.visited:
                frontier.append((target, outward))


def _generate_wilson(maze: Maze, rng: random.Random) -> None:
    """Wilson's algorithm: loop-erased random walks into the growing tree."""

    maze.goal_cell.visited = True
    unvisited = maze.unvisited_cells()
    while unvisited:
        current = rng.choice(unvisited)
        walk = Path()
        on_walk: Set[Point] = {current.position}
        while not current.visited:
            direction = rng.choice(DIRECTIONS)
            adjacent = maze.neighbor(current, direction)
            if adjacent is None:
                continue
            if adjacent.position in on_walk:
                # erase the loop back to the first visit of ``adjacent``
                while True:
                    on_walk.discard(walk.peek().landing)
                    if walk.pop().point == adjacent.position:
                        break
            else:
                walk.push(current.position, direction)
                on_walk.add(adjacent.position)
            current = adjacent
        while not walk.is_empty():
            step = walk.pop()
            cell = maze.cell(step.point)
            if not cell.visited:
                maze.break_wall(cell, step.direction)
            cell.visited = True
        unvisited = maze.unvisited_cells()


_ALGORITHMS: Dict[Algorithm, Callable[[Maze, random.Random], None]] = {
    Algorithm.DFS: _generate_dfs,
    Algorithm.PRIM: _generate_prim,
    Algorithm.WILSON: _generate_wilson,
}


class MazeGenerator:
    """Build mazes from options with a shared, optionally seeded RNG."""

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def create_maze(self, options: MazeOptions) -> Maze:
        return Maze.from_options(options, rng=self._rng)

    def create_random_maze(
        self,
        size_x: int,
        size_y: int,
        *,
        algorithm: Union[str, Algorithm, None] = None,
    ) -> Maze:
        chosen = Algorithm.parse(algorithm) if algorithm is not None else self._rng.choice(list(Algorithm))
        return self.create_maze(MazeOptions(size_x, size_y, algorithm=chosen))


__all__ = ["DIRECTIONS", "MazeGenerator", "generate_maze"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and report its structure")
    parser.add_argument("--size-x", type=int, default=20, help="Number of cells per row")
    parser.add_argument("--size-y", type=int, default=20, help="Number of cells per column")
    parser.add_argument(
        "--algorithm",
        type=str,
        default=Algorithm.DFS.value,
        choices=[member.value for member in Algorithm],
    )
    parser.add_argument("--start", type=int, nargs=2, default=None, metavar=("X", "Y"))
    parser.add_argument("--goal", type=int, nargs=2, default=None, metavar=("X", "Y"))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cell-size", type=int, default=16)
    parser.add_argument("--output", type=FilePath, default=None, help="Optional PNG path for the rendered maze")
    parser.add_argument("--solve", action="store_true", help="Walk the shortest route and include its path")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    from .player import Player
    from .render import render_maze
    from .verify import solve_maze, verify_maze

    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    options = MazeOptions(
        args.size_x,
        args.size_y,
        start=tuple(args.start) if args.start else None,
        goal=tuple(args.goal) if args.goal else None,
        algorithm=args.algorithm,
    )
    maze = MazeGenerator(seed=args.seed).create_maze(options)
    report = verify_maze(maze)
    payload = {"options": options.to_dict(), "report": report.to_dict()}
    players = []
    if args.solve:
        player = Player(maze, name="solver")
        for direction in solve_maze(maze):
            player.move(direction)
        payload["solved"] = player.check_win()
        payload["path"] = player.path.to_dict()
        players.append(player)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        render_maze(maze, cell_size=args.cell_size, players=players).save(args.output)
        payload["image_path"] = args.output.as_posix()
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
