"""Render mazes and player trails to Pillow images."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .geometry import Point
from .maze import PATH, Maze
from .player import PathPoint, Player

Color = Tuple[int, int, int]

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
START_COLOR = (40, 90, 220)
GOAL_COLOR = (40, 180, 80)
TRAIL_COLOR = (30, 60, 200)
BACKTRACK_COLOR = (230, 200, 40)
PLAYER_COLORS: Sequence[Color] = (
    (30, 60, 200),
    (220, 30, 30),
    (150, 40, 170),
    (20, 150, 150),
)


def _block_box(row: int, col: int, block: int) -> Tuple[int, int, int, int]:
    left = col * block
    top = row * block
    return (left, top, left + block - 1, top + block - 1)


def _cell_box(point: Point, block: int) -> Tuple[int, int, int, int]:
    return _block_box(2 * point.y + 1, 2 * point.x + 1, block)


def _draw_step(draw: ImageDraw.ImageDraw, step: PathPoint, block: int, color: Color) -> None:
    # the cell itself and the opening toward the cell it was left for
    draw.rectangle(_cell_box(step.point, block), fill=color)
    dx, dy = step.direction.offset
    draw.rectangle(
        _block_box(2 * step.point.y + 1 + dy, 2 * step.point.x + 1 + dx, block),
        fill=color,
    )


def render_maze(
    maze: Maze,
    *,
    cell_size: int = 16,
    players: Iterable[Player] = (),
    player_colors: Optional[Sequence[Color]] = None,
) -> Image.Image:
    """Draw ``maze`` with its endpoints and each player's trail.

    Each element of :meth:`Maze.to_array` becomes a square of ``cell_size``
    pixels, so the image is ``(2*size_x + 1) * cell_size`` pixels wide.
    """

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    grid = maze.to_array()
    rows, cols = grid.shape
    canvas = Image.new("RGB", (cols * cell_size, rows * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r in range(rows):
        for c in range(cols):
            if grid[r, c] == PATH:
                draw.rectangle(_block_box(r, c, cell_size), fill=PATH_COLOR)

    draw.rectangle(_cell_box(maze.options.start, cell_size), fill=START_COLOR)
    draw.rectangle(_cell_box(maze.options.goal, cell_size), fill=GOAL_COLOR)

    colors = player_colors or PLAYER_COLORS
    for index, player in enumerate(players):
        color = colors[index % len(colors)]
        for step in player.path.backtracked:
            _draw_step(draw, step, cell_size, BACKTRACK_COLOR)
        for step in player.path.points:
            _draw_step(draw, step, cell_size, color)
        inset = max(1, cell_size // 5)
        left, top, right, bottom = _cell_box(player.position, cell_size)
        draw.rectangle((left + inset, top + inset, right - inset, bottom - inset), fill=color)
    return canvas


__all__ = ["render_maze"]
