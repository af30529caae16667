"""Travelers and the trails they leave."""

__all__ = [
    "Path",
    "PathPoint",
    "Player",
]

from .path import Path, PathPoint
from .player import Player
