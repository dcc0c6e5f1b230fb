"""Conway's Game of Life on a bounded grid with a parallel generation engine."""

__version__ = "0.1.0"

from .core.errors import (
    ConcurrencyFailure,
    EngineStateError,
    LifeGridError,
    SeedReadError,
    ValidationError,
)
from .core.grid import Grid
from .core.engine import EngineState, GridEngine
from .core.patterns import Pattern, PatternLibrary
from .core.seed import parse_seed, read_seed_file
from .core.runner import run_generations

__all__ = [
    "Grid",
    "GridEngine",
    "EngineState",
    "Pattern",
    "PatternLibrary",
    "parse_seed",
    "read_seed_file",
    "run_generations",
    "LifeGridError",
    "ValidationError",
    "SeedReadError",
    "ConcurrencyFailure",
    "EngineStateError",
]
