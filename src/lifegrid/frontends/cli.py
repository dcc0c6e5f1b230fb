"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import SimulationConfig
from ..core.engine import STRATEGIES, GridEngine
from ..core.errors import ConcurrencyFailure, EngineStateError, SeedReadError, ValidationError
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.runner import run_generations
from ..core.seed import read_seed_file, write_seed_file
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life on a bounded grid, printing each generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a seed file for 10 generations
  lifegrid 10 --seed-file glider.txt

  # Random 20x20 grid, reproducible, one job per cell on 8 threads
  lifegrid 5 --random --rows 20 --cols 20 --rng-seed 42 --strategy cells --workers 8

  # Centre a built-in pattern on a 6x6 grid
  lifegrid 4 --pattern Blinker --rows 6 --cols 6

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    parser.add_argument(
        "generations",
        type=int,
        nargs="?",
        help="Number of generations to render and advance",
    )

    # Seed source
    parser.add_argument(
        "-f",
        "--seed-file",
        dest="seed_path",
        type=str,
        help="Seed file: 'ROWS COLS' header then ROWS lines of COLS 0/1 values",
    )

    parser.add_argument(
        "-r",
        "--random",
        dest="randomize",
        action="store_true",
        help="Start from a random grid (each cell alive with probability 0.5)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a built-in pattern centred on the grid",
    )

    parser.add_argument("--rows", type=int, help="Grid rows (required with --random or --pattern)")

    parser.add_argument("--cols", type=int, help="Grid columns (required with --random or --pattern)")

    parser.add_argument(
        "--rng-seed",
        type=int,
        help="Random seed for reproducible --random grids",
    )

    # Engine configuration
    parser.add_argument(
        "-s",
        "--strategy",
        choices=STRATEGIES,
        default="rows",
        help="Evaluation strategy (default: rows)",
    )

    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        help="Maximum worker threads for the rows/cells strategies",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Abort if a single generation takes longer than this many seconds",
    )

    # Output configuration
    parser.add_argument(
        "--save-seed",
        type=str,
        help="Write the initial grid to this path in seed file format",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )

    parser.add_argument("--log-file", type=str, help="Also write the log to this file")

    return parser


def list_patterns(library: PatternLibrary) -> None:
    """Print all available patterns."""
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        rows, cols = pattern.size
        print(f"  {name:<12} {rows}x{cols}  {pattern.description}")


def build_engine(config: SimulationConfig, library: Optional[PatternLibrary] = None) -> GridEngine:
    """Create the engine described by a validated config.

    Raises:
        ValidationError: If the seed or pattern doesn't fit the configuration
        SeedReadError: If the seed file cannot be read
        OSError: If --save-seed cannot be written
    """
    seed = None
    if config.seed_path:
        seed = read_seed_file(config.seed_path)
        rows = config.rows if config.rows is not None else seed.rows
        cols = config.cols if config.cols is not None else seed.cols
    else:
        rows, cols = config.rows, config.cols

    if config.pattern:
        library = library or PatternLibrary()
        pattern = library.get_pattern(config.pattern)
        if pattern is None:
            raise ValidationError(
                f"Pattern '{config.pattern}' not found. Available patterns: {', '.join(library.list_patterns())}"
            )
        seed = Grid(rows, cols)
        pattern.apply_to_grid(seed, *pattern.centered_offset(rows, cols))

    engine = GridEngine(
        rows,
        cols,
        seed,
        rng=config.rng_seed,
        strategy=config.strategy,
        workers=config.workers,
    )

    if config.save_seed:
        write_seed_file(engine.grid, config.save_seed)

    return engine


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    try:
        setup_logging(level, args.log_file)
    except OSError as e:
        print(f"Error: Cannot open log file {args.log_file}: {e}", file=sys.stderr)
        return 1

    if args.list_patterns:
        list_patterns(PatternLibrary())
        return 0

    try:
        config = SimulationConfig.from_args(args)
        config.validate()

        with build_engine(config) as engine:
            run_generations(engine, config.generations, sys.stdout, timeout=config.timeout)

        return 0

    except (ValidationError, SeedReadError, ConcurrencyFailure, EngineStateError, OSError) as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Simulation failed")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
