import io
import unittest

from wiggle_escape.core.constants import Bounds, Direction
from wiggle_escape.core.models import SnakePlacement
from wiggle_escape.engine.generator import GeneratorConfig, LevelGenerator
from wiggle_escape.utils.pretty import format_level, pretty_print_level, print_generation_stats


class PrettyTests(unittest.TestCase):
    def test_format_level_puts_north_on_top(self) -> None:
        snake = SnakePlacement(id=0, segments=[(1, 0), (0, 0)], exit_direction=Direction.EAST)
        lines = format_level([snake], Bounds(width=3, height=2)).splitlines()
        self.assertEqual(lines[0].split(), ["0", "1", "2"])
        self.assertEqual(lines[2].split(), ["1", "|", ".", ".", "."])
        self.assertEqual(lines[3].split(), ["0", "|", "0", ">", "."])

    def test_stats_report_counts_and_seed(self) -> None:
        config = GeneratorConfig(width=6, height=6, snake_count=4, min_length=2, max_length=3, seed=17)
        result = LevelGenerator(config).generate()
        stream = io.StringIO()
        print_generation_stats(result, stream=stream)
        output = stream.getvalue()
        self.assertIn(f"Snakes:        {result.placed_count}/4", output)
        self.assertIn("Seed: 17", output)
        self.assertIn("Board 6x6", output)

    def test_pretty_print_writes_label_then_board(self) -> None:
        snake = SnakePlacement(id=0, segments=[(0, 1), (0, 0)], exit_direction=Direction.NORTH)
        bounds = Bounds(width=2, height=2)
        stream = io.StringIO()
        pretty_print_level([snake], bounds, label="preview", stream=stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "preview")
        self.assertEqual("\n".join(lines[1:]), format_level([snake], bounds))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
