"""Persistent level document store.

Generated boards are saved as JSON documents under ``levels/`` by default.
Each document carries the grid size and, per snake, its color, head-first
segments and exit direction vector, which is all a game client needs to
rebuild the board.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..core.constants import Bounds, Direction
from ..core.exceptions import LevelFormatError
from ..core.models import LevelData, SnakePlacement
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("levels")


def level_to_jsonable(
    width: int,
    height: int,
    snakes: List[SnakePlacement],
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    return {
        "width": width,
        "height": height,
        "seed": seed,
        "snakes": [
            {
                "color": list(snake.color),
                "segments": [[x, y] for x, y in snake.segments],
                "exitDirection": list(snake.exit_direction.vector),
            }
            for snake in snakes
        ],
    }


def level_from_jsonable(document: Dict[str, Any]) -> LevelData:
    """Parse a level document. Snake ids follow document order."""

    try:
        width = int(document["width"])
        height = int(document["height"])
        raw_snakes = document["snakes"]
    except (KeyError, TypeError, ValueError) as exc:
        raise LevelFormatError(f"Level document missing grid fields: {exc}") from exc
    if width < 1 or height < 1:
        raise LevelFormatError(f"Grid must be at least 1x1, got {width}x{height}")
    bounds = Bounds(width=width, height=height)
    if not isinstance(raw_snakes, list):
        raise LevelFormatError("'snakes' must be a list")

    snakes: List[SnakePlacement] = []
    for index, raw in enumerate(raw_snakes):
        try:
            segments = [(int(x), int(y)) for x, y in raw["segments"]]
            direction = Direction.from_vector(raw["exitDirection"])
            color = tuple(float(channel) for channel in raw.get("color", (1.0, 1.0, 1.0, 1.0)))
        except (KeyError, TypeError, ValueError) as exc:
            raise LevelFormatError(f"Snake {index} is malformed: {exc}") from exc
        if not segments:
            raise LevelFormatError(f"Snake {index} has no segments")
        outside = [cell for cell in segments if not bounds.contains(cell)]
        if outside:
            raise LevelFormatError(f"Snake {index} leaves the {width}x{height} grid at {outside[0]}")
        if len(color) != 4:
            raise LevelFormatError(f"Snake {index} color must have 4 channels")
        snakes.append(
            SnakePlacement(id=index, segments=segments, exit_direction=direction, color=color)
        )

    seed = document.get("seed")
    return LevelData(width=width, height=height, snakes=snakes, seed=seed)


class LevelStore:
    """Save and load boards as JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, result: "GenerationResult", name: Optional[str] = None) -> Path:
        """Persist a generation result and return the written path."""
        doc = level_to_jsonable(result.width, result.height, result.snakes, seed=result.seed)
        doc["created_at"] = datetime.now(timezone.utc).isoformat()
        path = self.store_dir / f"{name or self._new_id()}.json"
        path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
        LOGGER.info("Level saved: %s (%d snakes)", path, len(result.snakes))
        return path

    def load(self, path: Path | str) -> LevelData:
        path = Path(path)
        if not path.is_absolute() and not path.exists():
            path = self.store_dir / path
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LevelFormatError(f"{path} is not valid UTF-8 JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise LevelFormatError(f"{path} does not contain a level object")
        return level_from_jsonable(document)

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"level_{ts}_{short_uuid}"
