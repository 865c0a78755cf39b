import unittest

from wiggle_escape.core.constants import Bounds, Direction
from wiggle_escape.core.models import SnakePlacement
from wiggle_escape.engine.filters import is_facing_another_snake, is_self_blocking
from wiggle_escape.engine.grid import OccupancyGrid


def board(width, height, *snakes):
    return OccupancyGrid.from_snakes(Bounds(width=width, height=height), snakes), list(snakes)


class FacingConflictTests(unittest.TestCase):
    def test_head_on_standoff_is_rejected(self) -> None:
        snake_a = SnakePlacement(id=0, segments=[(0, 0)], exit_direction=Direction.EAST)
        grid, snakes = board(4, 1, snake_a)
        self.assertTrue(is_facing_another_snake(grid, snakes, (3, 0), Direction.WEST))

    def test_head_on_standoff_is_rejected_from_either_side(self) -> None:
        snake_b = SnakePlacement(id=0, segments=[(3, 0)], exit_direction=Direction.WEST)
        grid, snakes = board(4, 1, snake_b)
        self.assertTrue(is_facing_another_snake(grid, snakes, (0, 0), Direction.EAST))

    def test_same_direction_is_not_a_conflict(self) -> None:
        snake_a = SnakePlacement(id=0, segments=[(0, 0)], exit_direction=Direction.WEST)
        grid, snakes = board(4, 1, snake_a)
        self.assertFalse(is_facing_another_snake(grid, snakes, (3, 0), Direction.WEST))

    def test_opposite_snake_with_head_off_the_ray_is_ignored(self) -> None:
        snake_a = SnakePlacement(id=0, segments=[(1, 1), (1, 0)], exit_direction=Direction.WEST)
        grid, snakes = board(4, 4, snake_a)
        self.assertFalse(is_facing_another_snake(grid, snakes, (0, 0), Direction.EAST))

    def test_perpendicular_crossing_is_not_flagged(self) -> None:
        snake_a = SnakePlacement(
            id=0, segments=[(0, 0), (0, 1), (1, 1)], exit_direction=Direction.EAST
        )
        grid, snakes = board(4, 4, snake_a)
        self.assertFalse(is_facing_another_snake(grid, snakes, (1, 0), Direction.NORTH))


class SelfBlockingTests(unittest.TestCase):
    def test_body_on_own_exit_ray_is_rejected(self) -> None:
        grid = OccupancyGrid(Bounds(width=4, height=4))
        body = [(1, 1), (1, 0), (2, 0), (2, 1), (2, 2)]
        self.assertTrue(is_self_blocking(body, Direction.EAST, grid))

    def test_straight_body_behind_head_is_accepted(self) -> None:
        grid = OccupancyGrid(Bounds(width=4, height=4))
        self.assertFalse(is_self_blocking([(1, 1), (0, 1)], Direction.EAST, grid))

    def test_single_cell_never_blocks_itself(self) -> None:
        grid = OccupancyGrid(Bounds(width=1, height=1))
        self.assertFalse(is_self_blocking([(0, 0)], Direction.NORTH, grid))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
