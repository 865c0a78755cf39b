"""Random-walk snake body builder."""

from __future__ import annotations

from typing import List, Optional, Set

from ..core.constants import Direction
from ..core.models import Cell
from ..utils.logger import get_logger
from .context import GenerationContext


LOGGER = get_logger(__name__)


def build_snake_body(
    context: GenerationContext,
    head: Cell,
    exit_direction: Direction,
    target_length: int,
) -> Optional[List[Cell]]:
    """Grow a body backwards from *head* by a biased random walk.

    The walk starts moving opposite to *exit_direction*. Each step keeps
    going straight when possible; with probability ``curve_chance`` (or
    whenever straight is blocked) the two perpendicular turns are offered as
    well, and one valid move is picked uniformly. If the walk gets stuck the
    partial body is returned when it already has ``min_length`` cells,
    otherwise None.

    Returns the body head-first.
    """

    segments: List[Cell] = [head]
    used: Set[Cell] = {head}
    current = head
    grow_direction = exit_direction.opposite

    for _ in range(1, target_length):
        valid_moves: List[Direction] = []
        if _is_valid_body_cell(context, _step(current, grow_direction), used):
            valid_moves.append(grow_direction)

        # The RNG draw happens every step, even when straight is blocked.
        if context.rng.random() < context.curve_chance or not valid_moves:
            for turn in grow_direction.perpendiculars:
                if _is_valid_body_cell(context, _step(current, turn), used):
                    valid_moves.append(turn)

        if not valid_moves:
            if len(segments) >= context.min_length:
                return segments
            LOGGER.debug(
                "Walk from %s stuck at %d/%d cells", head, len(segments), target_length
            )
            return None

        move = valid_moves[context.rng.randrange(len(valid_moves))]
        current = _step(current, move)
        segments.append(current)
        used.add(current)
        grow_direction = move

    return segments


def _is_valid_body_cell(context: GenerationContext, cell: Cell, used: Set[Cell]) -> bool:
    return context.grid.is_empty(cell) and cell not in used


def _step(cell: Cell, direction: Direction) -> Cell:
    dx, dy = direction.vector
    return cell[0] + dx, cell[1] + dy
