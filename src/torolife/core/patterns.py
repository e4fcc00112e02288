"""Common Conway's Game of Life patterns, usable as universe seeds."""

from typing import Callable, Dict, List, Optional, Tuple

from .universe import Cell, wrap_index


class Pattern:
    """A named set of live cells given as ``(row, col)`` offsets."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        category: str = "Other",
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets of living cells
            description: Optional description
            category: Grouping used when listing patterns
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.category = category

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def normalize(self) -> "Pattern":
        """Return a copy with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.category)

        min_row, min_col, _, _ = self.get_bounding_box()
        cells = [(row - min_row, col - min_col) for row, col in self.cells]
        return Pattern(self.name, cells, self.description, self.category)

    def to_seed(
        self, width: int, height: int, row_offset: int = 0, col_offset: int = 0
    ) -> Callable[[int], Cell]:
        """Build a seed function placing this pattern on a width x height grid.

        Cells that fall past an edge wrap around, as on the torus itself.

        Args:
            width: Grid width
            height: Grid height
            row_offset: Row where the pattern's origin is placed
            col_offset: Column where the pattern's origin is placed

        Returns:
            Function mapping a flat cell index to its initial state
        """
        live = {
            wrap_index(row + row_offset, height) * width + wrap_index(col + col_offset, width)
            for row, col in self.cells
        }

        def seed(index: int) -> Cell:
            return Cell.ALIVE if index in live else Cell.DEAD

        return seed

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(
            Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block", "Still Life")
        )

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
                "Still Life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
                "Still Life",
            )
        )

        # Oscillators
        self.add_pattern(
            Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator", "Oscillators")
        )

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
                "Oscillators",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
                "Oscillators",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
                "Spaceships",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
                "Spaceships",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
                "Methuselahs",
            )
        )

        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
                "Methuselahs",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category, in insertion order."""
        categories: Dict[str, List[str]] = {}
        for pattern in self._patterns.values():
            categories.setdefault(pattern.category, []).append(pattern.name)
        return categories
