"""Reading and writing seed files.

A seed file starts with a header line holding the row and column counts,
followed by one line per row of whitespace-separated 0/1 values::

    3 3
    0 1 0
    0 1 0
    0 1 0

Blank lines are ignored. Structural problems (unreadable source, missing
lines, tokens that are not integers) raise SeedReadError; well-formed input
describing an invalid grid raises ValidationError.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np

from .errors import SeedReadError, ValidationError
from .grid import Grid

logger = logging.getLogger(__name__)


def _parse_ints(tokens: List[str], line_number: int) -> List[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise SeedReadError(f"Line {line_number}: expected integers, got {' '.join(tokens)!r}") from None


def _parse_header(tokens: List[str], line_number: int) -> Tuple[int, int]:
    if len(tokens) != 2:
        raise SeedReadError(f"Line {line_number}: header must be 'ROWS COLS', got {' '.join(tokens)!r}")
    rows, cols = _parse_ints(tokens, line_number)
    if rows <= 0 or cols <= 0:
        raise ValidationError(f"Line {line_number}: dimensions must be positive, got {rows}x{cols}")
    return rows, cols


def parse_seed(lines: Iterable[str]) -> Grid:
    """Parse a seed from an iterable of text lines (e.g. an open file).

    Args:
        lines: Header line followed by the grid rows

    Returns:
        The seeded Grid

    Raises:
        SeedReadError: If the header or a row is missing or not numeric
        ValidationError: If a row has the wrong width, there are too many
            rows, or a value is not 0 or 1
    """
    header = None
    cells = None
    row = 0

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        if header is None:
            header = _parse_header(tokens, line_number)
            cells = np.zeros(header, dtype=np.int8)
            continue

        rows, cols = header
        if row >= rows:
            raise ValidationError(f"Line {line_number}: more than the declared {rows} rows")

        # Non-numeric tokens are malformed input; numeric ones must be exactly 0 or 1
        _parse_ints(tokens, line_number)
        if len(tokens) != cols:
            raise ValidationError(f"Line {line_number}: expected {cols} values, got {len(tokens)}")
        for col, token in enumerate(tokens):
            if token not in ("0", "1"):
                raise ValidationError(f"Line {line_number}, column {col + 1}: value {token!r} is not 0 or 1")

        cells[row] = [int(token) for token in tokens]
        row += 1

    if header is None:
        raise SeedReadError("Seed is empty: missing 'ROWS COLS' header")
    if row < header[0]:
        raise SeedReadError(f"Seed declares {header[0]} rows but only {row} were read")

    return Grid.from_rows(cells)


def read_seed_file(path: Union[str, Path]) -> Grid:
    """Read a seed file from disk.

    Raises:
        SeedReadError: If the file cannot be opened or read, or is malformed
        ValidationError: If it describes an invalid grid
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            grid = parse_seed(f)
    except (SeedReadError, ValidationError):
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise SeedReadError(f"Cannot read seed file {path}: {e}") from e

    logger.info("Loaded %dx%d seed from %s (population %d)", grid.rows, grid.cols, path, grid.population)
    return grid


def format_seed(grid: Grid) -> str:
    """Serialize a grid in seed file format (inverse of parse_seed)."""
    lines = [f"{grid.rows} {grid.cols}"]
    lines.extend(" ".join(str(int(value)) for value in row) for row in grid.cells)
    return "\n".join(lines) + "\n"


def write_seed_file(grid: Grid, path: Union[str, Path]) -> None:
    """Write a grid to disk in seed file format.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_seed(grid))
    logger.info("Saved %dx%d seed to %s", grid.rows, grid.cols, path)
