"""Deterministic rule validation for generated boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..core.constants import Bounds
from ..core.exceptions import ValidationError
from ..core.models import Cell, SnakePlacement
from ..utils.logger import get_logger
from .simulator import simulate


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LevelValidator:
    """Runs integrity and solvability checks over a finished board."""

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        cross_check: bool = False,
    ) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.cross_check = cross_check

    def validate(self, snakes: Sequence[SnakePlacement], bounds: Bounds) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_ids(snakes)
            self._check_bounds(snakes, bounds)
            self._check_connectivity(snakes)
            self._check_lengths(snakes)
            self._check_exclusive_cells(snakes)
            self._check_solvable(snakes, bounds)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_ids(self, snakes: Sequence[SnakePlacement]) -> None:
        for index, snake in enumerate(snakes):
            if snake.id != index:
                raise ValidationError(f"Snake at position {index} has id {snake.id}")
            if not snake.segments:
                raise ValidationError(f"Snake {snake.id} has no segments")

    def _check_bounds(self, snakes: Sequence[SnakePlacement], bounds: Bounds) -> None:
        for snake in snakes:
            for cell in snake.segments:
                if not bounds.contains(cell):
                    raise ValidationError(f"Snake {snake.id} leaves the grid at {cell}")

    def _check_connectivity(self, snakes: Sequence[SnakePlacement]) -> None:
        for snake in snakes:
            if len(set(snake.segments)) != len(snake.segments):
                raise ValidationError(f"Snake {snake.id} repeats a cell")
            for (x1, y1), (x2, y2) in zip(snake.segments, snake.segments[1:]):
                if abs(x1 - x2) + abs(y1 - y2) != 1:
                    raise ValidationError(
                        f"Snake {snake.id} is broken between {(x1, y1)} and {(x2, y2)}"
                    )

    def _check_lengths(self, snakes: Sequence[SnakePlacement]) -> None:
        for snake in snakes:
            if self.min_length is not None and snake.length < self.min_length:
                raise ValidationError(
                    f"Snake {snake.id} has {snake.length} cells (< {self.min_length})"
                )
            if self.max_length is not None and snake.length > self.max_length:
                raise ValidationError(
                    f"Snake {snake.id} has {snake.length} cells (> {self.max_length})"
                )

    def _check_exclusive_cells(self, snakes: Sequence[SnakePlacement]) -> None:
        owners: Dict[Cell, int] = {}
        for snake in snakes:
            for cell in snake.segments:
                if cell in owners:
                    raise ValidationError(
                        f"Cell {cell} claimed by snakes {owners[cell]} and {snake.id}"
                    )
                owners[cell] = snake.id

    def _check_solvable(self, snakes: Sequence[SnakePlacement], bounds: Bounds) -> None:
        result = simulate(snakes, bounds)
        if not result.solvable:
            raise ValidationError(f"Board deadlocks; stuck snakes: {result.stuck_ids}")
        if self.cross_check:
            from .cpsat_check import solve_removal_order

            if solve_removal_order(snakes, bounds) is None:
                raise ValidationError("CP-SAT found no removal order for a board the simulator cleared")
