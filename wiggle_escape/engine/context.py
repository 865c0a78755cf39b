"""Per-invocation generation state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from ..core.constants import Bounds
from ..core.models import SnakePlacement
from .grid import OccupancyGrid

if TYPE_CHECKING:
    from .generator import GeneratorConfig


@dataclass
class GenerationContext:
    """Everything one ``generate()`` call mutates.

    A context is created fresh per invocation and threaded through the
    builder, filters, transaction and simulator. Nothing here is shared
    between invocations.
    """

    bounds: Bounds
    min_length: int
    curve_chance: float
    rng: random.Random
    grid: OccupancyGrid = field(init=False)
    snakes: List[SnakePlacement] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.grid = OccupancyGrid(self.bounds)

    @classmethod
    def from_config(cls, config: "GeneratorConfig", seed: int) -> "GenerationContext":
        return cls(
            bounds=Bounds(width=config.width, height=config.height),
            min_length=config.min_length,
            curve_chance=config.curve_chance,
            rng=random.Random(seed),
        )

    @property
    def accepted_count(self) -> int:
        return len(self.snakes)
