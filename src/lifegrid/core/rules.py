"""Conway's Game of Life transition rule (B3/S23)."""

import numpy as np

from .errors import ValidationError
from .grid import count_all_neighbors


def transition(cell: int, neighbors: int) -> int:
    """Next state of a single cell.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Args:
        cell: Current value, 0 (dead) or 1 (alive)
        neighbors: Number of living Moore neighbors (0-8)

    Returns:
        Next value, 0 or 1

    Raises:
        ValidationError: If either argument is outside its domain
    """
    if cell not in (0, 1):
        raise ValidationError(f"Cell value must be 0 or 1, got {cell!r}")
    if not 0 <= neighbors <= 8:
        raise ValidationError(f"Neighbor count must be in [0, 8], got {neighbors!r}")

    if cell == 1:
        return 1 if neighbors in (2, 3) else 0
    return 1 if neighbors == 3 else 0


def next_generation(cells: np.ndarray) -> np.ndarray:
    """Compute the generation after `cells` in one vectorized pass.

    Args:
        cells: (rows, cols) array of 0/1 values; not modified

    Returns:
        New int8 array holding the next generation
    """
    neighbor_counts = count_all_neighbors(cells)

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = (cells == 1) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    return (birth_mask | survive_mask).astype(np.int8)
