"""CLI entrypoint for the Wiggle Escape board generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wiggle_escape.core.constants import SIZE_PRESETS
from wiggle_escape.core.exceptions import ConfigError
from wiggle_escape.engine.generator import GeneratorConfig, LevelGenerator
from wiggle_escape.engine.validator import LevelValidator
from wiggle_escape.io.level_store import LevelStore, level_to_jsonable
from wiggle_escape.utils.logger import configure_logging
from wiggle_escape.utils.pretty import print_generation_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate solvable Wiggle Escape boards",
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=sorted(SIZE_PRESETS),
        help="Grid size preset (sets width, height and snake count)",
    )
    parser.add_argument("--width", type=int, help="Grid width in cells (default 25)")
    parser.add_argument("--height", type=int, help="Grid height in cells (default 25)")
    parser.add_argument("--snakes", type=int, help="Target snake count (default 50)")
    parser.add_argument("--min-length", type=int, default=3, help="Minimum snake length")
    parser.add_argument("--max-length", type=int, default=8, help="Maximum snake length")
    parser.add_argument(
        "--curve-chance",
        type=float,
        default=0.4,
        help="Probability of offering a turn at each body step (0..1)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Directory to save the level JSON into")
    parser.add_argument("--name", type=str, help="File name (without .json) when saving")
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a text preview and stats to stderr",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Also verify solvability with the CP-SAT removal-order model",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    overrides = {
        "min_length": args.min_length,
        "max_length": args.max_length,
        "curve_chance": args.curve_chance,
        "seed": args.seed,
    }
    for field_name, value in (
        ("width", args.width),
        ("height", args.height),
        ("snake_count", args.snakes),
    ):
        if value is not None:
            overrides[field_name] = value
    if args.preset:
        return GeneratorConfig.from_preset(args.preset, **overrides)
    return GeneratorConfig(**overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.name and not args.output:
        parser.error("--name requires --output")

    try:
        generator = LevelGenerator(build_config(args))
    except ConfigError as exc:
        parser.error(str(exc))

    result = generator.generate()

    if args.cross_check:
        validation = LevelValidator(
            min_length=generator.config.min_length,
            max_length=generator.config.max_length,
            cross_check=True,
        ).validate(result.snakes, result.bounds)
        if not validation.ok:
            print("\n".join(validation.messages), file=sys.stderr)
            return 1

    if args.preview:
        print_generation_stats(result, stream=sys.stderr)

    if args.output:
        LevelStore(args.output).save(result, name=args.name)
    else:
        payload = level_to_jsonable(result.width, result.height, result.snakes, seed=result.seed)
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
