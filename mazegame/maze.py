"""Grid-of-cells maze model.

A maze is a fixed ``size_x`` by ``size_y`` array of cells, each with four
walls. Passages are carved with :meth:`Maze.break_wall`, which always clears
the matching wall on the neighboring cell, so a wall between two cells is
either intact on both sides or broken on both sides.
"""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .geometry import Direction, Point
from .options import InvalidDimensionError, MazeOptions, PointLike

WALL = 1
PATH = 0


class Cell:
    """One grid position with its wall flags and visited marker.

    Cells compare and hash by position only.
    """

    __slots__ = ("position", "_walls", "visited")

    def __init__(self, position: Point) -> None:
        self.position = position
        self._walls: Dict[Direction, bool] = {direction: True for direction in Direction}
        self.visited = False

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def walls(self) -> Mapping[Direction, bool]:
        return MappingProxyType(self._walls)

    def has_wall(self, direction: Direction) -> bool:
        return self._walls[direction]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __repr__(self) -> str:
        open_sides = "".join(d.name[0] for d in Direction if not self._walls[d])
        return f"Cell({self.x}, {self.y}, open={open_sides or '-'}, visited={self.visited})"


class Maze:
    """Rectangular maze of :class:`Cell` objects.

    ``Maze(size_x, size_y)`` allocates a blank grid with every wall intact.
    Use :meth:`from_options` to build and generate in one step.
    """

    def __init__(
        self,
        size_x: int,
        size_y: int,
        *,
        start: Optional[PointLike] = None,
        goal: Optional[PointLike] = None,
    ) -> None:
        if size_x <= 0 or size_y <= 0:
            raise InvalidDimensionError(f"Maze dimensions must be positive, got {size_x}x{size_y}")
        self.options = MazeOptions(size_x, size_y, start=start, goal=goal)
        self._cells: List[Cell] = [
            Cell(Point(x, y)) for y in range(size_y) for x in range(size_x)
        ]

    @classmethod
    def from_options(
        cls,
        options: MazeOptions,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Maze":
        """Allocate a maze for ``options`` and carve it with the selected algorithm."""

        from .generator import generate_maze

        maze = cls(options.size_x, options.size_y, start=options.start, goal=options.goal)
        maze.options = options
        generate_maze(maze, options.algorithm, rng=rng if rng is not None else random.Random(seed))
        return maze

    @property
    def size_x(self) -> int:
        return self.options.size_x

    @property
    def size_y(self) -> int:
        return self.options.size_y

    @property
    def start_cell(self) -> Cell:
        return self._cells[self._index(self.options.start.x, self.options.start.y)]

    @property
    def goal_cell(self) -> Cell:
        return self._cells[self._index(self.options.goal.x, self.options.goal.y)]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""

        return iter(self._cells)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def _index(self, x: int, y: int) -> int:
        return y * self.size_x + x

    # ------------------------------------------------------------------

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        if not self.contains(x, y):
            return None
        return self._cells[self._index(x, y)]

    def cell_by_index(self, index: int) -> Cell:
        """Return the cell at row-major ``index``; raises ``IndexError`` outside the grid."""

        if not 0 <= index < len(self._cells):
            raise IndexError(f"Cell index {index} out of range for a {self.size_x}x{self.size_y} maze")
        return self._cells[index]

    def cell(self, point: PointLike) -> Optional[Cell]:
        if isinstance(point, Point):
            return self.cell_at(point.x, point.y)
        x, y = point
        return self.cell_at(x, y)

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        target = cell.position.neighbor(direction)
        return self.cell_at(target.x, target.y)

    def has_neighbor(self, cell: Cell, direction: Direction) -> bool:
        return self.neighbor(cell, direction) is not None

    def neighbors(self, cell: Cell) -> Dict[Direction, Cell]:
        found: Dict[Direction, Cell] = {}
        for direction in Direction:
            adjacent = self.neighbor(cell, direction)
            if adjacent is not None:
                found[direction] = adjacent
        return found

    def has_wall(self, cell: Cell, direction: Direction) -> bool:
        return self._own(cell).has_wall(direction)

    def break_wall(self, cell: Cell, direction: Direction) -> None:
        """Open ``cell`` toward ``direction``.

        When a neighbor lies that way its matching wall is cleared too and both
        cells are marked visited; an edge wall only loses its own flag.
        """

        own = self._own(cell)
        own._walls[direction] = False
        adjacent = self.neighbor(own, direction)
        if adjacent is not None:
            adjacent._walls[direction.opposite()] = False
            adjacent.visited = True
            own.visited = True

    def unvisited_cells(self) -> List[Cell]:
        return [cell for cell in self._cells if not cell.visited]

    def passages(self) -> Iterator[Tuple[Cell, Cell]]:
        """Yield each open ``(cell, neighbor)`` pair once, looking east and south."""

        for cell in self._cells:
            for direction in (Direction.EAST, Direction.SOUTH):
                adjacent = self.neighbor(cell, direction)
                if adjacent is not None and not cell.has_wall(direction):
                    yield cell, adjacent

    def _own(self, cell: Cell) -> Cell:
        own = self.cell_at(cell.x, cell.y)
        if own is None:
            raise ValueError(f"{cell!r} lies outside a {self.size_x}x{self.size_y} maze")
        return own

    # ------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Return the maze as a block grid of ``WALL``/``PATH`` values.

        Cell ``(x, y)`` maps to element ``[2*y + 1, 2*x + 1]``; the elements
        between cells hold the wall state.
        """

        grid = np.full((2 * self.size_y + 1, 2 * self.size_x + 1), WALL, dtype=np.uint8)
        for cell in self._cells:
            row, col = 2 * cell.y + 1, 2 * cell.x + 1
            grid[row, col] = PATH
            for direction in Direction:
                if not cell.has_wall(direction):
                    dx, dy = direction.offset
                    grid[row + dy, col + dx] = PATH
        return grid

    def __repr__(self) -> str:
        return f"Maze({self.size_x}x{self.size_y}, algorithm={self.options.algorithm.value})"


__all__ = ["Cell", "Maze", "PATH", "WALL"]
