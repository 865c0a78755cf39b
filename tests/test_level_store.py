import json
import tempfile
import unittest
from pathlib import Path

from wiggle_escape.core.constants import Direction
from wiggle_escape.core.exceptions import LevelFormatError
from wiggle_escape.engine.generator import GeneratorConfig, LevelGenerator
from wiggle_escape.io.level_store import LevelStore, level_from_jsonable, level_to_jsonable


class LevelStoreTests(unittest.TestCase):
    def test_saved_level_loads_back(self) -> None:
        config = GeneratorConfig(width=8, height=6, snake_count=6, min_length=2, max_length=4, seed=9)
        result = LevelGenerator(config).generate()
        with tempfile.TemporaryDirectory() as tmpdir:
            store = LevelStore(tmpdir)
            path = store.save(result, name="level_001")
            self.assertEqual(path, Path(tmpdir) / "level_001.json")

            document = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual((document["width"], document["height"]), (8, 6))
            self.assertEqual(document["seed"], 9)

            level = store.load("level_001.json")
        self.assertEqual(level.width, 8)
        self.assertEqual(level.height, 6)
        self.assertEqual(len(level.snakes), result.placed_count)
        for loaded, original in zip(level.snakes, result.snakes):
            self.assertEqual(loaded.id, original.id)
            self.assertEqual(loaded.segments, original.segments)
            self.assertEqual(loaded.exit_direction, original.exit_direction)
            self.assertEqual(loaded.color, original.color)

    def test_exit_direction_serialized_as_vector(self) -> None:
        level = level_from_jsonable(
            {"width": 3, "height": 3, "snakes": [{"segments": [[1, 1]], "exitDirection": [0, -1]}]}
        )
        self.assertEqual(level.snakes[0].exit_direction, Direction.SOUTH)
        document = level_to_jsonable(level.width, level.height, level.snakes)
        self.assertEqual(document["snakes"][0]["exitDirection"], [0, -1])

    def test_malformed_documents_raise(self) -> None:
        bad_documents = [
            {"height": 3, "snakes": []},
            {"width": 3, "height": 3, "snakes": {}},
            {"width": 3, "height": 3, "snakes": [{"segments": [], "exitDirection": [1, 0]}]},
            {"width": 3, "height": 3, "snakes": [{"segments": [[0, 0]], "exitDirection": [1, 1]}]},
            {"width": 3, "height": 3, "snakes": [{"segments": [[0, 0]]}]},
            {"width": 3, "height": 3, "snakes": [{"segments": [[0, 0]], "exitDirection": [1, 0], "color": [1, 0]}]},
            {"width": 0, "height": 3, "snakes": []},
            {"width": 3, "height": -1, "snakes": []},
            {"width": 3, "height": 3, "snakes": [{"segments": [[5, 5]], "exitDirection": [1, 0]}]},
            {"width": 3, "height": 3, "snakes": [{"segments": [[2, 2], [3, 2]], "exitDirection": [0, 1]}]},
        ]
        for document in bad_documents:
            with self.assertRaises(LevelFormatError):
                level_from_jsonable(document)

    def test_invalid_json_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(LevelFormatError):
                LevelStore(tmpdir).load(path)

    def test_non_utf8_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "binary.json"
            path.write_bytes(b"\xff\xfe{")
            with self.assertRaises(LevelFormatError):
                LevelStore(tmpdir).load(path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
