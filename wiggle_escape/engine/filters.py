"""Cheap candidate rejection checks run before simulation."""

from __future__ import annotations

from typing import Sequence, Set

from ..core.constants import EMPTY, Direction
from ..core.models import Cell, SnakePlacement
from .grid import OccupancyGrid


def is_facing_another_snake(
    grid: OccupancyGrid,
    snakes: Sequence[SnakePlacement],
    head: Cell,
    exit_direction: Direction,
) -> bool:
    """Detect a head-on standoff along the exit ray of *head*.

    Every snake met on the ray is inspected once. If it exits in the
    opposite direction and its own head lies ahead of *head* on the same
    line, neither snake can ever leave. Perpendicular deadlocks are not
    detected here; the simulator catches those.
    """

    opposite = exit_direction.opposite
    checked: Set[int] = set()
    for cell in grid.ray(head, exit_direction):
        owner = grid.occupant(cell)
        if owner == EMPTY or owner in checked:
            continue
        checked.add(owner)
        other = snakes[owner]
        if other.exit_direction is opposite and _is_on_exit_path(head, exit_direction, other.head):
            return True
    return False


def is_self_blocking(body: Sequence[Cell], exit_direction: Direction, grid: OccupancyGrid) -> bool:
    """True when the ray from the head crosses the snake's own body."""

    body_cells = set(body)
    return any(cell in body_cells for cell in grid.ray(body[0], exit_direction))


def _is_on_exit_path(start: Cell, exit_direction: Direction, target: Cell) -> bool:
    dx, dy = exit_direction.vector
    diff_x = target[0] - start[0]
    diff_y = target[1] - start[1]
    if dx != 0:
        return diff_y == 0 and diff_x * dx > 0
    return diff_x == 0 and diff_y * dy > 0
