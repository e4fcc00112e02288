"""Tests for patterns and the pattern library."""

from torolife.core.patterns import Pattern, PatternLibrary
from torolife.core.universe import Cell, Universe


def live_cells(universe):
    return {
        (row, col)
        for row in range(universe.height)
        for col in range(universe.width)
        if universe.get_cell(row, col) is Cell.ALIVE
    }


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern("Test", [(0, 0), (1, 2)], "A test pattern", "Tests")
        assert pattern.name == "Test"
        assert pattern.cells == [(0, 0), (1, 2)]
        assert pattern.description == "A test pattern"
        assert pattern.category == "Tests"

    def test_default_category(self):
        """Test patterns without a category are grouped under Other."""
        pattern = Pattern("Test", [(0, 0)])
        assert pattern.category == "Other"
        assert pattern.description == ""

    def test_bounding_box_and_size(self):
        """Test geometry helpers use (row, col) order."""
        pattern = Pattern("Test", [(1, 2), (3, 2), (2, 6)])
        assert pattern.get_bounding_box() == (1, 2, 3, 6)
        assert pattern.get_size() == (3, 5)

    def test_empty_pattern(self):
        """Test geometry of a pattern with no cells."""
        pattern = Pattern("Empty", [])
        assert pattern.get_bounding_box() == (0, 0, 0, 0)
        assert pattern.normalize().cells == []

    def test_normalize(self):
        """Test normalization shifts the pattern to the origin."""
        pattern = Pattern("Test", [(5, 7), (6, 8)], "desc", "Tests")
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 1)]
        assert normalized.name == "Test"
        assert normalized.category == "Tests"
        assert pattern.cells == [(5, 7), (6, 8)]

    def test_to_seed(self):
        """Test a pattern seed places cells at the given offset."""
        pattern = Pattern("Pair", [(0, 0), (0, 1)])
        universe = Universe(5, 4, seed_fn=pattern.to_seed(5, 4, row_offset=2, col_offset=1))

        assert live_cells(universe) == {(2, 1), (2, 2)}

    def test_to_seed_wraps(self):
        """Test cells placed past an edge wrap onto the torus."""
        pattern = Pattern("Pair", [(0, 0), (1, 1)])
        universe = Universe(4, 3, seed_fn=pattern.to_seed(4, 3, row_offset=2, col_offset=3))

        assert live_cells(universe) == {(2, 3), (0, 0)}


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test built-in patterns are available."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Beehive", "Blinker", "Toad", "Glider", "Lightweight Spaceship"]:
            assert name in names

    def test_get_missing_pattern(self):
        """Test looking up an unknown pattern returns None."""
        library = PatternLibrary()
        assert library.get_pattern("Nonexistent") is None

    def test_add_pattern(self):
        """Test custom patterns can be added and replaced."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom", [(0, 0)]))
        library.add_pattern(Pattern("Custom", [(0, 0), (0, 1)]))

        assert len(library.get_pattern("Custom").cells) == 2

    def test_categories(self):
        """Test patterns are grouped by category."""
        categories = PatternLibrary().get_patterns_by_category()

        assert "Block" in categories["Still Life"]
        assert "Blinker" in categories["Oscillators"]
        assert "Glider" in categories["Spaceships"]

    def test_still_lifes_are_stable(self):
        """Test every built-in still life is unchanged by a tick."""
        library = PatternLibrary()

        for name in library.get_patterns_by_category()["Still Life"]:
            pattern = library.get_pattern(name)
            universe = Universe(10, 10, seed_fn=pattern.to_seed(10, 10, 3, 3))
            before = live_cells(universe)

            universe.tick()

            assert live_cells(universe) == before, name

    def test_oscillators_have_period_two(self):
        """Test every built-in oscillator returns after two ticks."""
        library = PatternLibrary()

        for name in library.get_patterns_by_category()["Oscillators"]:
            pattern = library.get_pattern(name)
            universe = Universe(10, 10, seed_fn=pattern.to_seed(10, 10, 3, 3))
            before = live_cells(universe)

            universe.tick()
            assert live_cells(universe) != before, name
            universe.tick()
            assert live_cells(universe) == before, name
