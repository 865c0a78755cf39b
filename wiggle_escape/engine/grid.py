"""Dense occupancy grid: cell -> owning snake id or EMPTY."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from ..core.constants import EMPTY, Bounds, Direction
from ..core.models import Cell, SnakePlacement


class OccupancyGrid:
    """Flat ``width * height`` array indexed as ``y * width + x``.

    The grid is the single source of truth for occupancy during generation.
    It only stores ids; snake metadata lives in the accepted snake list.
    """

    def __init__(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self._cells: List[int] = [EMPTY] * bounds.cell_count
        self._occupied_count = 0

    @classmethod
    def from_snakes(cls, bounds: Bounds, snakes: Iterable[SnakePlacement]) -> "OccupancyGrid":
        grid = cls(bounds)
        for snake in snakes:
            grid.place_snake(snake)
        return grid

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------
    def is_within_bounds(self, cell: Cell) -> bool:
        return self.bounds.contains(cell)

    def is_exit_cell(self, cell: Cell) -> bool:
        return self.bounds.is_exit(cell)

    def occupant(self, cell: Cell) -> int:
        return self._cells[self._index(cell)]

    def is_empty(self, cell: Cell) -> bool:
        return self.bounds.contains(cell) and self._cells[self._index(cell)] == EMPTY

    def set_occupant(self, cell: Cell, snake_id: int) -> None:
        index = self._index(cell)
        previous = self._cells[index]
        if previous == EMPTY and snake_id != EMPTY:
            self._occupied_count += 1
        elif previous != EMPTY and snake_id == EMPTY:
            self._occupied_count -= 1
        self._cells[index] = snake_id

    def random_empty_cell(self, rng: random.Random) -> Optional[Cell]:
        """Uniformly sample an empty cell, or return None when the grid is full.

        Candidates are enumerated column by column (x outer, y inner) so that a
        given seed always maps to the same cell.
        """
        empty_cells = [
            (x, y)
            for x in range(self.bounds.width)
            for y in range(self.bounds.height)
            if self._cells[y * self.bounds.width + x] == EMPTY
        ]
        if not empty_cells:
            return None
        return empty_cells[rng.randrange(len(empty_cells))]

    def ray(self, start: Cell, direction: Direction) -> Iterator[Cell]:
        """Yield in-bounds cells strictly beyond *start* until the boundary."""
        dx, dy = direction.vector
        x, y = start[0] + dx, start[1] + dy
        while self.bounds.contains((x, y)):
            yield x, y
            x += dx
            y += dy

    # ------------------------------------------------------------------
    # Snake placement
    # ------------------------------------------------------------------
    def place_snake(self, snake: SnakePlacement) -> None:
        for segment in snake.segments:
            self.set_occupant(segment, snake.id)

    def remove_snake(self, snake: SnakePlacement) -> None:
        for segment in snake.segments:
            self.set_occupant(segment, EMPTY)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    def occupied_cells(self) -> Set[Cell]:
        width = self.bounds.width
        return {
            (index % width, index // width)
            for index, value in enumerate(self._cells)
            if value != EMPTY
        }

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    @property
    def density(self) -> float:
        total = self.bounds.cell_count
        return (self._occupied_count / total) if total else 0.0

    def _index(self, cell: Cell) -> int:
        if not self.bounds.contains(cell):
            raise IndexError(f"Cell outside grid: {cell}")
        x, y = cell
        return y * self.bounds.width + x
