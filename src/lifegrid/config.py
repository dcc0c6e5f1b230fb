"""Run configuration for the command-line simulator."""

import argparse
from dataclasses import dataclass, fields
from typing import Optional

from .core.engine import STRATEGIES
from .core.errors import ValidationError


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    generations: int = 1
    seed_path: Optional[str] = None
    rows: Optional[int] = None
    cols: Optional[int] = None
    randomize: bool = False
    pattern: Optional[str] = None
    rng_seed: Optional[int] = None
    strategy: str = "rows"
    workers: Optional[int] = None
    timeout: Optional[float] = None
    save_seed: Optional[str] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SimulationConfig":
        """Build a config from parsed command-line arguments.

        Attributes missing from the namespace keep their defaults.
        """
        values = {f.name: getattr(args, f.name) for f in fields(cls) if hasattr(args, f.name)}
        return cls(**values)

    def validate(self) -> None:
        """Check the configuration before any simulation work starts.

        Raises:
            ValidationError: Listing every problem found
        """
        errors = []

        if self.generations is None or self.generations <= 0:
            errors.append("Generation count must be positive")

        if self.rows is not None and self.rows <= 0:
            errors.append("Rows must be positive")

        if self.cols is not None and self.cols <= 0:
            errors.append("Cols must be positive")

        if self.workers is not None and self.workers <= 0:
            errors.append("Workers must be positive")

        if self.timeout is not None and self.timeout <= 0:
            errors.append("Timeout must be positive")

        if self.strategy not in STRATEGIES:
            errors.append(f"Strategy must be one of {', '.join(STRATEGIES)}")

        sources = [bool(self.seed_path), self.randomize, bool(self.pattern)]
        if sum(sources) == 0:
            errors.append("A seed file, --random or --pattern is required")
        elif sum(sources) > 1:
            errors.append("Use only one of a seed file, --random or --pattern")

        if not self.seed_path and (self.rows is None or self.cols is None):
            errors.append("--rows and --cols are required without a seed file")

        if errors:
            raise ValidationError("Invalid arguments: " + "; ".join(errors))
