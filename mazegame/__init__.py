"""Maze generation and traveler tracking."""

__all__ = [
    "Algorithm",
    "Cell",
    "Direction",
    "InvalidDimensionError",
    "Maze",
    "MazeGenerator",
    "MazeOptions",
    "MazeReport",
    "Path",
    "PathPoint",
    "Player",
    "Point",
    "Session",
    "generate_maze",
    "render_maze",
    "solve_maze",
    "verify_maze",
]

from .geometry import Direction, Point
from .options import Algorithm, InvalidDimensionError, MazeOptions
from .maze import Cell, Maze
from .generator import MazeGenerator, generate_maze
from .player import Path, PathPoint, Player
from .session import Session
from .verify import MazeReport, solve_maze, verify_maze
from .render import render_maze
