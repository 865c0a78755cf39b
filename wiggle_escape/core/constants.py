"""Shared constants and enumerations for the board generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .exceptions import LevelFormatError


EMPTY = -1


class Direction(str, Enum):
    """The four axis-aligned exit directions. North is +y."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @property
    def vector(self) -> Tuple[int, int]:
        return DIRECTION_VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.vector
        return Direction.from_vector((-dx, -dy))

    @property
    def perpendiculars(self) -> Tuple["Direction", "Direction"]:
        # Order matters for reproducible walks: (dy, dx) first, then (-dy, -dx).
        dx, dy = self.vector
        return Direction.from_vector((dy, dx)), Direction.from_vector((-dy, -dx))

    @classmethod
    def from_vector(cls, vector) -> "Direction":
        key = tuple(vector)
        for direction, delta in DIRECTION_VECTORS.items():
            if delta == key:
                return direction
        raise LevelFormatError(f"Not an axis-aligned unit vector: {vector!r}")


DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

HEAD_ARROWS: Dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


@dataclass(frozen=True)
class Bounds:
    """Rectangle bounds helper working on (x, y) cells."""

    width: int
    height: int

    def contains(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_exit(self, cell: Tuple[int, int]) -> bool:
        """True for cells exactly one step outside the grid on one axis."""
        x, y = cell
        x_inside = 0 <= x < self.width
        y_inside = 0 <= y < self.height
        if x_inside and y in (-1, self.height):
            return True
        if y_inside and x in (-1, self.width):
            return True
        return False

    @property
    def cell_count(self) -> int:
        return self.width * self.height


DEFAULT_PALETTE: Tuple[Tuple[float, float, float, float], ...] = (
    (1.0, 0.0, 0.0, 1.0),  # red
    (0.0, 1.0, 0.0, 1.0),  # green
    (0.0, 0.0, 1.0, 1.0),  # blue
    (1.0, 0.92, 0.016, 1.0),  # yellow
    (0.0, 1.0, 1.0, 1.0),  # cyan
    (1.0, 0.0, 1.0, 1.0),  # magenta
    (1.0, 0.6, 0.2, 1.0),  # orange
    (0.6, 0.3, 0.8, 1.0),  # purple
)

# name -> (width, height, snake_count)
SIZE_PRESETS: Dict[str, Tuple[int, int, int]] = {
    "8x8": (8, 8, 10),
    "12x12": (12, 12, 20),
    "20x20": (20, 20, 40),
    "25x25": (25, 25, 50),
}

ATTEMPTS_PER_SNAKE = 200
