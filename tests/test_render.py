import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from PIL import Image

from mazegame import Direction, Maze, MazeOptions, Player, render_maze, solve_maze
from mazegame.generator import main
from mazegame.render import BACKTRACK_COLOR, GOAL_COLOR, PATH_COLOR, START_COLOR, WALL_COLOR


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = Maze.from_options(MazeOptions(4, 3), seed=21)

    def _cell_center(self, x: int, y: int, block: int) -> tuple:
        return ((2 * x + 1) * block + block // 2, (2 * y + 1) * block + block // 2)

    def test_image_dimensions_follow_block_grid(self) -> None:
        image = render_maze(self.maze, cell_size=10)
        self.assertEqual(image.size, (9 * 10, 7 * 10))
        self.assertEqual(image.getpixel((0, 0)), WALL_COLOR)
        self.assertEqual(image.getpixel(self._cell_center(0, 0, 10)), START_COLOR)
        self.assertEqual(image.getpixel(self._cell_center(3, 2, 10)), GOAL_COLOR)
        self.assertEqual(image.getpixel(self._cell_center(1, 1, 10)), PATH_COLOR)

    def test_backtracked_cells_use_their_own_color(self) -> None:
        maze = Maze(3, 1)
        maze.break_wall(maze.cell_at(0, 0), Direction.EAST)
        maze.break_wall(maze.cell_at(1, 0), Direction.EAST)
        player = Player(maze)
        player.move(Direction.EAST)
        player.move(Direction.EAST)
        player.move(Direction.WEST)
        image = render_maze(maze, cell_size=8, players=[player])
        self.assertEqual(image.getpixel(self._cell_center(2, 0, 8)), BACKTRACK_COLOR)

    def test_rejects_non_positive_cell_size(self) -> None:
        with self.assertRaises(ValueError):
            render_maze(self.maze, cell_size=0)


class GeneratorCliTests(unittest.TestCase):
    def test_cli_reports_and_saves_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "maze.png"
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                main(["--size-x", "6", "--size-y", "5", "--algorithm", "wilson", "--seed", "4",
                      "--cell-size", "6", "--output", str(output)])
            payload = json.loads(buffer.getvalue())
            self.assertTrue(payload["report"]["is_perfect"])
            self.assertEqual(payload["options"]["algorithm"], "wilson")
            with Image.open(output) as image:
                self.assertEqual(image.size, (13 * 6, 11 * 6))

    def test_cli_solve_exports_the_walked_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "solved.png"
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                main(["--size-x", "5", "--size-y", "4", "--seed", "17", "--solve",
                      "--cell-size", "4", "--output", str(output)])
            payload = json.loads(buffer.getvalue())
            self.assertTrue(output.exists())

        self.assertTrue(payload["solved"])
        maze = Maze.from_options(MazeOptions(5, 4), seed=17)
        route = solve_maze(maze)
        trail = payload["path"]["trail"]
        self.assertEqual([step["direction"] for step in trail], [d.name for d in route])
        self.assertEqual(trail[0]["point"], [0, 0])
        self.assertEqual(payload["path"]["backtracked"], [])

    def test_solution_route_is_walkable(self) -> None:
        maze = Maze.from_options(MazeOptions(7, 7), seed=99)
        player = Player(maze)
        for direction in solve_maze(maze):
            self.assertTrue(player.move(direction))
        self.assertTrue(player.check_win())


if __name__ == "__main__":
    unittest.main()
