"""Grid data structure for the Game of Life."""

from typing import Optional, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import ValidationError
from .render import render_grid

RandomSource = Union[np.random.Generator, int, None]

# Moore neighborhood, centre excluded
NEIGHBOR_KERNEL = torch.tensor(
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32
).unsqueeze(0).unsqueeze(0)


def check_dimensions(rows: int, cols: int) -> None:
    """Raise ValidationError unless rows and cols are positive integers."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ValidationError(f"{name} must be positive, got {value}")


def as_cell_array(data, rows: Optional[int] = None, cols: Optional[int] = None) -> np.ndarray:
    """Convert a seed to a fresh int8 array, validating shape and values.

    Args:
        data: Grid, numpy array or nested sequence of 0/1 values
        rows: Expected number of rows (checked when given)
        cols: Expected number of columns (checked when given)

    Returns:
        A new (rows, cols) int8 array owned by the caller

    Raises:
        ValidationError: If the data is ragged, empty, mis-sized or not binary
    """
    if isinstance(data, Grid):
        data = data.cells

    if isinstance(data, np.ndarray):
        arr = data
    else:
        data = list(data)
        try:
            row_lengths = {len(row) for row in data}
        except TypeError:
            raise ValidationError("Seed must be a sequence of rows") from None
        if len(row_lengths) > 1:
            raise ValidationError(f"Ragged seed: row lengths {sorted(row_lengths)}")
        arr = np.array(data)

    if arr.ndim != 2 or arr.size == 0:
        raise ValidationError(f"Seed must be a non-empty 2D grid, got shape {arr.shape}")

    if rows is not None and cols is not None and arr.shape != (rows, cols):
        raise ValidationError(f"Seed shape {arr.shape} doesn't match grid ({rows}, {cols})")

    if arr.dtype == np.bool_:
        arr = arr.astype(np.int8)
    elif not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(f"Cell values must be integers 0 or 1, got dtype {arr.dtype}")

    invalid = (arr != 0) & (arr != 1)
    if invalid.any():
        row, col = (int(i) for i in np.argwhere(invalid)[0])
        raise ValidationError(f"Cell ({row}, {col}) has value {arr[row, col]}, expected 0 or 1")

    return arr.astype(np.int8, copy=True)


class Grid:
    """A fixed-size rectangular grid of binary cells.

    Cells are stored in a numpy int8 array of shape (rows, cols) and indexed
    as (row, col). Edges are hard boundaries: positions outside the grid
    simply do not exist.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Create an all-dead grid.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValidationError: If either dimension is not a positive integer
        """
        check_dimensions(rows, cols)
        self.rows = int(rows)
        self.cols = int(cols)
        self._cells = np.zeros((self.rows, self.cols), dtype=np.int8)

    @classmethod
    def from_rows(cls, data) -> "Grid":
        """Build a grid from a nested sequence or 2D array of 0/1 values."""
        arr = as_cell_array(data)
        grid = cls(*arr.shape)
        grid._cells[:] = arr
        return grid

    @classmethod
    def random(
        cls, rows: int, cols: int, rng: RandomSource = None, density: float = 0.5
    ) -> "Grid":
        """Create a grid with each cell independently alive with `density` chance.

        Args:
            rows: Number of rows
            cols: Number of columns
            rng: numpy Generator, integer seed, or None for fresh entropy
            density: Probability that a cell starts alive (0.0 to 1.0)
        """
        if not 0.0 <= density <= 1.0:
            raise ValidationError(f"density must be between 0.0 and 1.0, got {density}")
        grid = cls(rows, cols)
        generator = np.random.default_rng(rng)
        grid._cells[:] = generator.random((grid.rows, grid.cols)) < density
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the underlying cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> int:
        """Get the value (0 or 1) of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return int(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        self._cells[row, col] = 1 if alive else 0

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def copy(self) -> "Grid":
        return Grid.from_rows(self._cells)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Only in-bounds positions of the Moore neighborhood are considered;
        nothing wraps around the edges.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        return count_neighbors(self._cells, row, col)

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            (rows, cols) int8 array with the neighbor count of each cell
        """
        return count_all_neighbors(self._cells)

    def to_list(self) -> list:
        """Convert grid to nested list (row-major)."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, population={self.population})"

    def __str__(self) -> str:
        """Render the grid one bracketed row per line."""
        return render_grid(self._cells)


def count_neighbors(cells: np.ndarray, row: int, col: int) -> int:
    """Count living Moore neighbors of (row, col) in `cells`, without wraparound."""
    rows, cols = cells.shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    total = 0
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            if i == 0 and j == 0:
                continue
            r, c = row + i, col + j
            if 0 <= r < rows and 0 <= c < cols:
                total += int(cells[r, c])
    return total


def count_all_neighbors(cells: np.ndarray) -> np.ndarray:
    """Neighbor counts for every cell of `cells` via torch conv2d with zero padding."""
    source = torch.from_numpy(cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(source, NEIGHBOR_KERNEL, padding=1)
    return neighbors[0, 0].round().numpy().astype(np.int8)
