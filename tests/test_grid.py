import random
import unittest

from wiggle_escape.core.constants import EMPTY, Bounds, Direction
from wiggle_escape.core.models import SnakePlacement
from wiggle_escape.engine.grid import OccupancyGrid


class OccupancyGridTests(unittest.TestCase):
    def test_exit_cells_are_one_step_outside(self) -> None:
        grid = OccupancyGrid(Bounds(width=4, height=3))
        self.assertTrue(grid.is_exit_cell((-1, 0)))
        self.assertTrue(grid.is_exit_cell((4, 2)))
        self.assertTrue(grid.is_exit_cell((0, 3)))
        self.assertTrue(grid.is_exit_cell((3, -1)))
        self.assertFalse(grid.is_exit_cell((-1, -1)))
        self.assertFalse(grid.is_exit_cell((5, 0)))
        self.assertFalse(grid.is_exit_cell((0, 0)))

    def test_set_occupant_tracks_density(self) -> None:
        grid = OccupancyGrid(Bounds(width=2, height=2))
        grid.set_occupant((1, 0), 3)
        self.assertEqual(grid.occupant((1, 0)), 3)
        self.assertEqual(grid.occupied_count, 1)
        self.assertAlmostEqual(grid.density, 0.25)

        grid.set_occupant((1, 0), EMPTY)
        self.assertEqual(grid.occupant((1, 0)), EMPTY)
        self.assertEqual(grid.occupied_count, 0)

    def test_occupant_outside_grid_raises(self) -> None:
        grid = OccupancyGrid(Bounds(width=2, height=2))
        with self.assertRaises(IndexError):
            grid.occupant((2, 0))
        self.assertFalse(grid.is_empty((2, 0)))

    def test_random_empty_cell_skips_occupied(self) -> None:
        grid = OccupancyGrid(Bounds(width=2, height=2))
        for cell in [(0, 0), (0, 1), (1, 1)]:
            grid.set_occupant(cell, 0)
        rng = random.Random(5)
        for _ in range(20):
            self.assertEqual(grid.random_empty_cell(rng), (1, 0))

    def test_random_empty_cell_signals_full_grid(self) -> None:
        grid = OccupancyGrid(Bounds(width=1, height=1))
        grid.set_occupant((0, 0), 0)
        self.assertIsNone(grid.random_empty_cell(random.Random(1)))

    def test_random_empty_cell_is_reproducible(self) -> None:
        grid = OccupancyGrid(Bounds(width=6, height=5))
        first = [grid.random_empty_cell(random.Random(99)) for _ in range(3)]
        second = [grid.random_empty_cell(random.Random(99)) for _ in range(3)]
        self.assertEqual(first, second)

    def test_ray_stops_at_boundary(self) -> None:
        grid = OccupancyGrid(Bounds(width=4, height=3))
        self.assertEqual(list(grid.ray((1, 1), Direction.EAST)), [(2, 1), (3, 1)])
        self.assertEqual(list(grid.ray((1, 1), Direction.SOUTH)), [(1, 0)])
        self.assertEqual(list(grid.ray((0, 2), Direction.NORTH)), [])

    def test_place_and_remove_snake(self) -> None:
        grid = OccupancyGrid(Bounds(width=3, height=3))
        snake = SnakePlacement(id=0, segments=[(0, 0), (0, 1)], exit_direction=Direction.SOUTH)
        grid.place_snake(snake)
        self.assertEqual(grid.occupied_cells(), {(0, 0), (0, 1)})
        grid.remove_snake(snake)
        self.assertEqual(grid.occupied_cells(), set())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
