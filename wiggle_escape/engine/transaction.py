"""Tentative placement gated by the solvability simulator."""

from __future__ import annotations

from ..core.models import SnakePlacement
from ..utils.logger import get_logger
from .context import GenerationContext
from .simulator import is_solvable


LOGGER = get_logger(__name__)


def try_commit_snake(context: GenerationContext, candidate: SnakePlacement) -> bool:
    """Place *candidate* and keep it only if the whole board stays solvable.

    On rejection the grid cells and the accepted list are restored to their
    exact prior state. Rejection is an ordinary outcome, not an error.
    """

    context.grid.place_snake(candidate)
    context.snakes.append(candidate)

    if is_solvable(context.snakes, context.bounds):
        return True

    context.grid.remove_snake(candidate)
    context.snakes.pop()
    LOGGER.debug(
        "Rolled back snake %d at %s (%s): board would deadlock",
        candidate.id,
        candidate.head,
        candidate.exit_direction.value,
    )
    return False
