"""Board generator for the Wiggle Escape sliding-snake puzzle.

This package exposes the public API surface via:

- ``wiggle_escape.engine.generator.LevelGenerator``: builds boards that are
  solvable by construction.
- ``wiggle_escape.engine.simulator.simulate``: the removal-order oracle.
- ``wiggle_escape.io.level_store.LevelStore``: JSON level persistence.
"""

from .engine.generator import GenerationResult, GeneratorConfig, LevelGenerator
from .engine.simulator import SimulationResult, is_solvable, simulate
from .io.level_store import LevelStore

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "LevelGenerator",
    "LevelStore",
    "SimulationResult",
    "is_solvable",
    "simulate",
]

__version__ = "0.1.0"
