"""Solvability oracle: simulate removal until the board clears or locks.

Algorithm
---------
1. Copy every snake into a :class:`SimSnake` and paint a private occupancy
   grid with their cells. The caller's grid and snakes are never touched.
2. Scan the remaining snakes in insertion order. The first snake whose whole
   exit ray holds no cell of another remaining snake is removed from the
   private grid and marked exited; the scan then restarts from the top.
3. A scan that removes nothing while snakes remain proves a deadlock.
4. When every snake has exited the board is solvable.

Removing a snake only frees cells, so a snake that can escape now can still
escape after any other removal. Greedy removal in any order therefore
decides solvability without backtracking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..core.constants import EMPTY, Bounds
from ..core.models import SimSnake, SnakePlacement
from ..utils.logger import get_logger
from .grid import OccupancyGrid


LOGGER = get_logger(__name__)


@dataclass
class SimulationResult:
    solvable: bool
    removal_order: List[int] = field(default_factory=list)
    stuck_ids: List[int] = field(default_factory=list)
    iterations: int = 0


def simulate(snakes: Sequence[SnakePlacement], bounds: Bounds) -> SimulationResult:
    """Run the removal simulation and report what happened."""

    if not snakes:
        return SimulationResult(solvable=True)

    sim_snakes = [SimSnake.from_placement(snake) for snake in snakes]
    sim_grid = OccupancyGrid(bounds)
    for sim_snake in sim_snakes:
        for segment in sim_snake.segments:
            sim_grid.set_occupant(segment, sim_snake.id)

    removal_order: List[int] = []
    remaining = len(sim_snakes)
    max_iterations = len(sim_snakes) * 2
    iterations = 0

    while remaining > 0 and iterations < max_iterations:
        iterations += 1
        escaped = None
        for sim_snake in sim_snakes:
            if sim_snake.has_exited:
                continue
            if _can_escape(sim_snake, sim_grid):
                escaped = sim_snake
                break

        if escaped is None:
            stuck = [s.id for s in sim_snakes if not s.has_exited]
            LOGGER.debug("Deadlock with %d snakes remaining: %s", len(stuck), stuck)
            return SimulationResult(
                solvable=False,
                removal_order=removal_order,
                stuck_ids=stuck,
                iterations=iterations,
            )

        for segment in escaped.segments:
            sim_grid.set_occupant(segment, EMPTY)
        escaped.has_exited = True
        removal_order.append(escaped.id)
        remaining -= 1

    stuck = [s.id for s in sim_snakes if not s.has_exited]
    return SimulationResult(
        solvable=remaining == 0,
        removal_order=removal_order,
        stuck_ids=stuck,
        iterations=iterations,
    )


def is_solvable(snakes: Sequence[SnakePlacement], bounds: Bounds) -> bool:
    return simulate(snakes, bounds).solvable


def _can_escape(snake: SimSnake, sim_grid: OccupancyGrid) -> bool:
    for cell in sim_grid.ray(snake.head, snake.exit_direction):
        owner = sim_grid.occupant(cell)
        if owner != EMPTY and owner != snake.id:
            return False
    return True
