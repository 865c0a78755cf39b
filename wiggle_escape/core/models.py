"""Data models supporting the board generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


Cell = Tuple[int, int]
Color = Tuple[float, float, float, float]


@dataclass
class SnakePlacement:
    """A committed (or candidate) snake. ``segments[0]`` is the head."""

    id: int
    segments: List[Cell]
    exit_direction: Direction
    color: Color = (1.0, 1.0, 1.0, 1.0)

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def length(self) -> int:
        return len(self.segments)


@dataclass
class SimSnake:
    """Throwaway copy of a placement used by a single simulation run."""

    id: int
    segments: Tuple[Cell, ...]
    exit_direction: Direction
    has_exited: bool = False

    @classmethod
    def from_placement(cls, placement: SnakePlacement) -> "SimSnake":
        return cls(
            id=placement.id,
            segments=tuple(placement.segments),
            exit_direction=placement.exit_direction,
        )

    @property
    def head(self) -> Cell:
        return self.segments[0]


@dataclass
class LevelData:
    """In-memory form of a persisted level document."""

    width: int
    height: int
    snakes: List[SnakePlacement] = field(default_factory=list)
    seed: Optional[int] = None
