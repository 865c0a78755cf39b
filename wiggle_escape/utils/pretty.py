"""Pretty-print helpers for generated boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, Sequence

from ..core.constants import HEAD_ARROWS, Bounds
from ..core.models import Cell, SnakePlacement

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def snake_symbol(snake_id: int) -> str:
    return ID_ALPHABET[snake_id % len(ID_ALPHABET)]


def format_level(snakes: Sequence[SnakePlacement], bounds: Bounds) -> str:
    """Render the board with north at the top.

    Heads show their exit arrow, body cells the snake id (base 36, wrapping),
    empty cells a dot.
    """
    symbols: Dict[Cell, str] = {}
    for snake in snakes:
        for cell in snake.segments[1:]:
            symbols[cell] = snake_symbol(snake.id)
        symbols[snake.head] = HEAD_ARROWS[snake.exit_direction]

    width = bounds.width
    header_cells = [f"{x % 100:>2}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for y in range(bounds.height - 1, -1, -1):
        row_cells = [symbols.get((x, y), ".") for x in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_level(
    snakes: Sequence[SnakePlacement],
    bounds: Bounds,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_level(snakes, bounds), file=stream)


def print_generation_stats(result: GenerationResult, *, stream=None) -> None:
    """Print board + summary stats for a finished generation."""

    stream = stream or sys.stdout
    pretty_print_level(
        result.snakes,
        result.bounds,
        label=f"Board {result.width}x{result.height}",
        stream=stream,
    )

    total_cells = result.width * result.height
    occupied = sum(snake.length for snake in result.snakes)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {result.width} x {result.height} ({total_cells} cells)", file=stream)
    print(f"  Snakes:        {result.placed_count}/{result.target_count}", file=stream)
    print(f"  Occupied:      {occupied} ({result.density * 100:.1f}%)", file=stream)
    print(f"  Attempts:      {result.attempts}", file=stream)

    lengths = [snake.length for snake in result.snakes]
    if lengths:
        print(file=stream)
        print("--- Snakes ---", file=stream)
        print(
            f"  Length range:  {min(lengths)}-{max(lengths)} "
            f"(avg {sum(lengths) / len(lengths):.1f})",
            file=stream,
        )
        dist_parts = [f"{l}:{c}" for l, c in result.length_distribution().items()]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
        straight = sum(1 for snake in result.snakes if _is_straight(snake))
        print(f"  Straight:      {straight}", file=stream)

    print(file=stream)
    print(f"Seed: {result.seed}", file=stream)


def _is_straight(snake: SnakePlacement) -> bool:
    xs = {x for x, _ in snake.segments}
    ys = {y for _, y in snake.segments}
    return len(xs) == 1 or len(ys) == 1
