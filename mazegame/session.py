"""A maze together with the players racing through it."""

from __future__ import annotations

import logging
from typing import List, Optional

from .generator import MazeGenerator
from .maze import Maze
from .options import MazeOptions, PointLike
from .player import Player

logger = logging.getLogger(__name__)


class Session:
    """Own the current maze and every player in it.

    Players are numbered from zero in the order they are added. Building a
    new maze moves every player onto it and restarts them.
    """

    def __init__(self, options: MazeOptions, *, seed: Optional[int] = None) -> None:
        self.generator = MazeGenerator(seed=seed)
        self.options = options
        self.maze: Maze = self.generator.create_maze(options)
        self._players: List[Player] = []

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    def add_player(self, *, start: Optional[PointLike] = None, name: Optional[str] = None) -> int:
        self._players.append(Player(self.maze, start=start, name=name))
        return len(self._players) - 1

    def player(self, number: int) -> Optional[Player]:
        if 0 <= number < len(self._players):
            return self._players[number]
        return None

    def new_maze(self, options: Optional[MazeOptions] = None) -> Maze:
        if options is not None:
            self.options = options
        self.maze = self.generator.create_maze(self.options)
        logger.debug("New %r for %d player(s)", self.maze, len(self._players))
        for player in self._players:
            player.set_maze(self.maze)
        return self.maze

    def restart_all(self) -> None:
        for player in self._players:
            player.restart()

    def winners(self) -> List[Player]:
        return [player for player in self._players if player.check_win()]


__all__ = ["Session"]
