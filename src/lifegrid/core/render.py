"""Console rendering of grids."""

from typing import Sequence, TextIO


def render_row(row: Sequence[int]) -> str:
    """Render one row as comma-space separated values in brackets, e.g. [1, 0, 1]."""
    return "[" + ", ".join(str(int(value)) for value in row) + "]"


def render_grid(cells) -> str:
    """Render a grid one row per line.

    Args:
        cells: 2D array or nested sequence of 0/1 values

    Returns:
        The rendered rows joined by newlines (no trailing newline)
    """
    return "\n".join(render_row(row) for row in cells)


def write_generation(cells, stream: TextIO) -> None:
    """Write a rendered grid followed by a blank separator line."""
    stream.write(render_grid(cells))
    stream.write("\n\n")
