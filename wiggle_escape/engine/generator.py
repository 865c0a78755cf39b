"""Main board generator orchestration.

Each attempt picks a random empty head cell and a random target length,
then tries the four exit directions in shuffled order:

  1. skip directions that would face another snake head-on,
  2. grow a body with the random walk and drop short or self-blocking ones,
  3. tentatively commit the survivor and keep it only if the simulator
     still clears the whole board.

A final simulation over the accepted set guards the incremental protocol.
"""

from __future__ import annotations

import random
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..core.constants import (
    ATTEMPTS_PER_SNAKE,
    DEFAULT_PALETTE,
    DIRECTION_ORDER,
    SIZE_PRESETS,
    Bounds,
)
from ..core.exceptions import ConfigError, SolvabilityError
from ..core.models import Cell, Color, SnakePlacement
from ..utils.logger import get_logger
from .builder import build_snake_body
from .context import GenerationContext
from .filters import is_facing_another_snake, is_self_blocking
from .simulator import simulate
from .transaction import try_commit_snake


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int = 25
    height: int = 25
    snake_count: int = 50
    min_length: int = 3
    max_length: int = 8
    curve_chance: float = 0.4
    palette: Sequence[Color] = DEFAULT_PALETTE
    seed: Optional[int] = None
    attempts_per_snake: int = ATTEMPTS_PER_SNAKE

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "GeneratorConfig":
        try:
            width, height, snake_count = SIZE_PRESETS[name]
        except KeyError:
            raise ConfigError(
                f"Unknown preset '{name}' (expected one of {', '.join(SIZE_PRESETS)})"
            ) from None
        values = {"width": width, "height": height, "snake_count": snake_count}
        values.update(overrides)
        return cls(**values)

    def validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.snake_count < 1:
            raise ConfigError(f"snake_count must be >= 1, got {self.snake_count}")
        if self.min_length < 1:
            raise ConfigError(f"min_length must be >= 1, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ConfigError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )
        if not 0.0 <= self.curve_chance <= 1.0:
            raise ConfigError(f"curve_chance must lie in [0, 1], got {self.curve_chance}")
        if self.attempts_per_snake < 1:
            raise ConfigError(f"attempts_per_snake must be >= 1, got {self.attempts_per_snake}")
        if not self.palette:
            raise ConfigError("palette must contain at least one color")
        for color in self.palette:
            if len(color) != 4 or not all(0.0 <= channel <= 1.0 for channel in color):
                raise ConfigError(f"palette entries must be RGBA in [0, 1], got {color!r}")

    def bounds(self) -> Bounds:
        return Bounds(width=self.width, height=self.height)


@dataclass
class GenerationResult:
    snakes: List[SnakePlacement]
    width: int
    height: int
    seed: int
    target_count: int
    attempts: int
    density: float
    elapsed_ms: int = 0
    removal_order: List[int] = field(default_factory=list)

    @property
    def placed_count(self) -> int:
        return len(self.snakes)

    @property
    def bounds(self) -> Bounds:
        return Bounds(width=self.width, height=self.height)

    def length_distribution(self) -> Dict[int, int]:
        return dict(sorted(Counter(snake.length for snake in self.snakes).items()))


class LevelGenerator:
    """Builds boards that are solvable by construction."""

    def __init__(self, config: GeneratorConfig) -> None:
        config.validate()
        self.config = config

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, seed: Optional[int] = None) -> GenerationResult:
        """Run one generation.

        *seed* overrides ``config.seed``. When both are None a fresh seed is
        drawn and recorded on the result. Raises :class:`SolvabilityError` if
        the final verification fails, which indicates a defect rather than
        bad luck.
        """

        if seed is None:
            seed = self.config.seed
        if seed is None:
            seed = random.SystemRandom().randrange(2**31)

        start_time = time.time()
        context = GenerationContext.from_config(self.config, seed)
        target = self.config.snake_count
        max_attempts = target * self.config.attempts_per_snake
        LOGGER.info(
            "Generating %dx%d board: %d snakes, lengths %d-%d, seed %d",
            self.config.width,
            self.config.height,
            target,
            self.config.min_length,
            self.config.max_length,
            seed,
        )

        attempts = 0
        while context.accepted_count < target and attempts < max_attempts:
            attempts += 1

            head = context.grid.random_empty_cell(context.rng)
            if head is None:
                LOGGER.info("Grid is full after %d attempts, stopping", attempts)
                break

            target_length = context.rng.randint(self.config.min_length, self.config.max_length)
            self._place_from_head(context, head, target_length)

        return self._finalize(context, seed, attempts, start_time)

    # ------------------------------------------------------------------
    # Attempt handling
    # ------------------------------------------------------------------
    def _place_from_head(self, context: GenerationContext, head: Cell, target_length: int) -> bool:
        directions = list(DIRECTION_ORDER)
        context.rng.shuffle(directions)

        for exit_direction in directions:
            if is_facing_another_snake(context.grid, context.snakes, head, exit_direction):
                continue

            body = build_snake_body(context, head, exit_direction, target_length)
            if body is None or len(body) < self.config.min_length:
                continue
            if is_self_blocking(body, exit_direction, context.grid):
                continue

            palette = self.config.palette
            candidate = SnakePlacement(
                id=context.accepted_count,
                segments=body,
                exit_direction=exit_direction,
                color=tuple(palette[context.accepted_count % len(palette)]),
            )
            if try_commit_snake(context, candidate):
                return True
        return False

    def _finalize(
        self,
        context: GenerationContext,
        seed: int,
        attempts: int,
        start_time: float,
    ) -> GenerationResult:
        density = context.grid.density
        LOGGER.info(
            "Generation complete. Placed: %d/%d. Density: %.1f%% (%d attempts)",
            context.accepted_count,
            self.config.snake_count,
            density * 100,
            attempts,
        )
        if context.accepted_count < self.config.snake_count:
            LOGGER.warning(
                "Target not reached: %d/%d snakes placed",
                context.accepted_count,
                self.config.snake_count,
            )

        verification = simulate(context.snakes, context.bounds)
        if not verification.solvable:
            LOGGER.error(
                "Final board is NOT solvable; stuck snakes: %s", verification.stuck_ids
            )
            raise SolvabilityError(
                f"Generated board (seed {seed}) failed final verification; "
                f"stuck snakes: {verification.stuck_ids}"
            )

        return GenerationResult(
            snakes=context.snakes,
            width=self.config.width,
            height=self.config.height,
            seed=seed,
            target_count=self.config.snake_count,
            attempts=attempts,
            density=density,
            elapsed_ms=int((time.time() - start_time) * 1000),
            removal_order=verification.removal_order,
        )
