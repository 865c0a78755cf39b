"""Independent solvability check via a CP-SAT removal-order model.

Each snake gets an integer position in the removal sequence. Any other snake
owning a cell on a snake's exit ray must leave before it. The model is
feasible exactly when some removal order clears the board, which makes it a
second opinion on the greedy simulator.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

from ortools.sat.python import cp_model

from ..core.constants import EMPTY, Bounds
from ..core.models import SnakePlacement
from ..utils.logger import get_logger
from .grid import OccupancyGrid

LOGGER = get_logger(__name__)


def blocking_relation(snakes: Sequence[SnakePlacement], bounds: Bounds) -> Dict[int, Set[int]]:
    """Map each snake id to the ids owning a cell on its exit ray."""

    grid = OccupancyGrid.from_snakes(bounds, snakes)
    blocked_by: Dict[int, Set[int]] = {}
    for snake in snakes:
        blockers: Set[int] = set()
        for cell in grid.ray(snake.head, snake.exit_direction):
            owner = grid.occupant(cell)
            if owner != EMPTY and owner != snake.id:
                blockers.add(owner)
        blocked_by[snake.id] = blockers
    return blocked_by


def solve_removal_order(
    snakes: Sequence[SnakePlacement],
    bounds: Bounds,
    timeout: float = 10.0,
) -> Optional[List[int]]:
    """Return a removal order that clears the board, or None if none exists.

    Args:
        snakes: Placements with ids unique within the board.
        bounds: Grid dimensions.
        timeout: Solver time limit in seconds.

    Returns:
        Snake ids in a valid removal order, or None when the model is
        infeasible or the solver gives up.
    """
    if not snakes:
        return []

    blocked_by = blocking_relation(snakes, bounds)
    count = len(snakes)

    model = cp_model.CpModel()
    position = {
        snake.id: model.new_int_var(0, count - 1, f"pos_{snake.id}") for snake in snakes
    }
    model.add_all_different(list(position.values()))
    for snake_id, blockers in blocked_by.items():
        for blocker in blockers:
            model.add(position[blocker] < position[snake_id])

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 1

    status = solver.solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.debug("CP-SAT: no removal order (status=%s)", solver.status_name(status))
        return None

    return sorted(position, key=lambda snake_id: solver.value(position[snake_id]))
