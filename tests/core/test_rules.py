"""Tests for the transition rule and vectorized generation step."""

import numpy as np
import pytest

from lifegrid.core.errors import ValidationError
from lifegrid.core.grid import Grid
from lifegrid.core.rules import next_generation, transition

# (cell, neighbors) -> next value for all 18 combinations
TRANSITION_TABLE = {(0, n): 1 if n == 3 else 0 for n in range(9)}
TRANSITION_TABLE.update({(1, n): 1 if n in (2, 3) else 0 for n in range(9)})


class TestTransition:
    """Test cases for the single-cell rule."""

    @pytest.mark.parametrize("cell, neighbors", sorted(TRANSITION_TABLE))
    def test_table(self, cell, neighbors):
        """Test every (cell, neighbor count) combination."""
        assert transition(cell, neighbors) == TRANSITION_TABLE[(cell, neighbors)]

    def test_table_is_complete(self):
        assert len(TRANSITION_TABLE) == 18

    def test_underpopulation_and_overpopulation(self):
        assert transition(1, 1) == 0
        assert transition(1, 4) == 0

    def test_birth_only_on_three(self):
        assert [transition(0, n) for n in range(9)] == [0, 0, 0, 1, 0, 0, 0, 0, 0]

    def test_accepts_numpy_scalars(self):
        assert transition(np.int8(1), np.int64(2)) == 1

    @pytest.mark.parametrize("cell, neighbors", [(2, 3), (-1, 0), (1, 9), (0, -1)])
    def test_invalid_input(self, cell, neighbors):
        with pytest.raises(ValidationError):
            transition(cell, neighbors)


class TestNextGeneration:
    """Test cases for the vectorized generation step."""

    def test_matches_per_cell_rule(self):
        """Test the vectorized step equals applying transition() cell by cell."""
        grid = Grid.random(17, 11, rng=99)
        expected = np.zeros_like(grid.cells)
        for row in range(grid.rows):
            for col in range(grid.cols):
                expected[row, col] = transition(int(grid.cells[row, col]), grid.count_neighbors(row, col))

        result = next_generation(grid.cells)
        assert result.dtype == np.int8
        assert np.array_equal(result, expected)

    def test_does_not_modify_input(self):
        cells = np.array([[0, 1, 0], [0, 1, 0], [0, 1, 0]], dtype=np.int8)
        before = cells.copy()
        next_generation(cells)
        assert np.array_equal(cells, before)

    def test_all_dead_fixed_point(self):
        cells = np.zeros((6, 4), dtype=np.int8)
        assert not next_generation(cells).any()

    def test_corner_block_is_stable(self):
        """Test a block in the corner survives without wraparound."""
        cells = np.zeros((4, 4), dtype=np.int8)
        cells[0:2, 0:2] = 1
        assert np.array_equal(next_generation(cells), cells)
