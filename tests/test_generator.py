import random
import unittest

from mazegame import Algorithm, Direction, Maze, MazeGenerator, MazeOptions, generate_maze, verify_maze


def _wall_signature(maze: Maze) -> list:
    return [tuple(cell.walls[d] for d in Direction) for cell in maze.cells()]


class GeneratorTests(unittest.TestCase):
    SIZES = ((1, 1), (1, 7), (6, 1), (2, 2), (5, 4), (12, 9))

    def _assert_perfect(self, maze: Maze) -> None:
        report = verify_maze(maze)
        self.assertTrue(report.connected, report.unreachable)
        self.assertEqual(report.passage_count, maze.size_x * maze.size_y - 1)
        self.assertEqual(report.unvisited, [])
        self.assertEqual(report.mismatched_walls, [])
        self.assertTrue(report.is_perfect)

    def test_every_algorithm_builds_a_perfect_maze(self) -> None:
        for algorithm in Algorithm:
            for size_x, size_y in self.SIZES:
                for seed in range(3):
                    with self.subTest(algorithm=algorithm, size=(size_x, size_y), seed=seed):
                        options = MazeOptions(size_x, size_y, algorithm=algorithm)
                        self._assert_perfect(Maze.from_options(options, seed=seed))

    def test_boundary_walls_stay_intact(self) -> None:
        for algorithm in Algorithm:
            maze = Maze.from_options(MazeOptions(6, 5, algorithm=algorithm), seed=11)
            for cell in maze.cells():
                for direction in Direction:
                    if maze.neighbor(cell, direction) is None:
                        self.assertTrue(maze.has_wall(cell, direction))

    def test_single_cell_keeps_its_walls(self) -> None:
        for algorithm in Algorithm:
            maze = Maze.from_options(MazeOptions(1, 1, algorithm=algorithm), seed=0)
            cell = maze.cell_at(0, 0)
            self.assertTrue(cell.visited)
            self.assertTrue(all(cell.walls.values()))

    def test_same_seed_gives_same_maze(self) -> None:
        for algorithm in Algorithm:
            options = MazeOptions(8, 8, algorithm=algorithm)
            first = Maze.from_options(options, seed=1234)
            second = Maze.from_options(options, seed=1234)
            self.assertEqual(_wall_signature(first), _wall_signature(second))

    def test_generate_maze_accepts_algorithm_names(self) -> None:
        maze = Maze(4, 4)
        generate_maze(maze, "prim", rng=random.Random(5))
        self._assert_perfect(maze)

    def test_unknown_algorithm_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate_maze(Maze(3, 3), "eller")

    def test_wilson_starts_from_goal(self) -> None:
        options = MazeOptions(5, 5, goal=(2, 2), algorithm=Algorithm.WILSON)
        maze = Maze.from_options(options, seed=3)
        self._assert_perfect(maze)
        self.assertEqual(maze.goal_cell.position, options.goal)

    def test_generator_class_uses_shared_rng(self) -> None:
        first = MazeGenerator(seed=9)
        second = MazeGenerator(seed=9)
        options = MazeOptions(5, 5)
        for _ in range(2):
            self.assertEqual(
                _wall_signature(first.create_maze(options)),
                _wall_signature(second.create_maze(options)),
            )
        maze = first.create_random_maze(4, 6)
        self.assertEqual((maze.size_x, maze.size_y), (4, 6))
        self._assert_perfect(maze)


class VerifyTests(unittest.TestCase):
    def test_blank_maze_reports_unreachable_cells(self) -> None:
        report = verify_maze(Maze(3, 2))
        self.assertFalse(report.connected)
        self.assertEqual(len(report.unreachable), 5)
        self.assertEqual(len(report.unvisited), 6)
        self.assertFalse(report.is_perfect)
        self.assertEqual(report.to_dict()["passage_count"], 0)

    def test_cycle_is_not_acyclic(self) -> None:
        maze = Maze(2, 2)
        maze.break_wall(maze.cell_at(0, 0), Direction.EAST)
        maze.break_wall(maze.cell_at(0, 0), Direction.SOUTH)
        maze.break_wall(maze.cell_at(1, 1), Direction.NORTH)
        maze.break_wall(maze.cell_at(1, 1), Direction.WEST)
        report = verify_maze(maze)
        self.assertTrue(report.connected)
        self.assertEqual(report.passage_count, 4)
        self.assertFalse(report.acyclic)


if __name__ == "__main__":
    unittest.main()
