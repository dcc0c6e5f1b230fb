"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    @property
    def size(self) -> Tuple[int, int]:
        """Pattern extent as (rows, cols), measured from the origin."""
        if not self.cells:
            return (0, 0)
        return (max(r for r, _ in self.cells) + 1, max(c for _, c in self.cells) + 1)

    def centered_offset(self, rows: int, cols: int) -> Tuple[int, int]:
        """Offset that centres the pattern on a rows x cols grid."""
        height, width = self.size
        return (max(0, (rows - height) // 2), max(0, (cols - width) // 2))

    def apply_to_grid(self, grid: Grid, row_offset: int = 0, col_offset: int = 0) -> None:
        """Clear `grid` and draw this pattern on it.

        Cells that fall outside the grid are dropped; nothing wraps.

        Args:
            grid: Target grid
            row_offset: Vertical offset
            col_offset: Horizontal offset
        """
        grid.clear()
        for row, col in self.cells:
            if grid.in_bounds(row + row_offset, col + col_offset):
                grid.set_cell(row + row_offset, col + col_offset, True)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4")
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name (case-insensitive).

        Returns:
            Pattern instance or None if not found
        """
        if name in self._patterns:
            return self._patterns[name]
        for pattern_name, pattern in self._patterns.items():
            if pattern_name.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())
