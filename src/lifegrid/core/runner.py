"""The render-then-advance generation loop."""

import logging
import sys
from typing import Optional, TextIO

from .engine import GridEngine
from .errors import ValidationError
from .render import write_generation

logger = logging.getLogger(__name__)


def run_generations(
    engine: GridEngine,
    generations: int,
    stream: Optional[TextIO] = None,
    timeout: Optional[float] = None,
) -> int:
    """Render the current generation, then advance, `generations` times.

    The state reached by the last advance is computed but not rendered.
    If an advance fails the error propagates and nothing further is written.

    Args:
        engine: Engine to drive
        generations: Number of render/advance iterations (positive)
        stream: Output stream (defaults to sys.stdout)
        timeout: Per-advance timeout passed to GridEngine.advance

    Returns:
        Number of generations completed
    """
    if isinstance(generations, bool) or not isinstance(generations, int) or generations <= 0:
        raise ValidationError(f"generations must be a positive integer, got {generations!r}")

    out = stream if stream is not None else sys.stdout
    for _ in range(generations):
        write_generation(engine.snapshot(), out)
        engine.advance(timeout=timeout)

    logger.info("Completed %d generations (final population %d)", generations, engine.population)
    return generations
