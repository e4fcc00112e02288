"""Basic tests for the torolife package."""

from torolife import Cell, PatternLibrary, Universe


def test_universe_creation():
    """Test basic universe creation and cell access."""
    universe = Universe(10, 10)
    assert universe.width == 10
    assert universe.height == 10
    assert universe.get_cell(0, 0) is Cell.ALIVE
    assert universe.get_cell(0, 1) is Cell.DEAD


def test_cell_ordinals():
    """Test cell states sum to a neighbor count."""
    assert int(Cell.DEAD) == 0
    assert int(Cell.ALIVE) == 1
    assert sum([Cell.ALIVE, Cell.DEAD, Cell.ALIVE]) == 2


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    assert "Glider" in library.list_patterns()


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    blinker = PatternLibrary().get_pattern("Blinker")
    universe = Universe(5, 5, seed_fn=blinker.to_seed(5, 5, row_offset=1, col_offset=1))

    # Horizontal through the centre
    assert universe.population == 3
    assert universe.get_cell(2, 1) is Cell.ALIVE
    assert universe.get_cell(2, 3) is Cell.ALIVE

    universe.tick()
    assert universe.population == 3
    assert universe.get_cell(1, 2) is Cell.ALIVE
    assert universe.get_cell(2, 2) is Cell.ALIVE
    assert universe.get_cell(3, 2) is Cell.ALIVE

    universe.tick()
    assert universe.get_cell(2, 1) is Cell.ALIVE
    assert universe.get_cell(2, 2) is Cell.ALIVE
    assert universe.get_cell(2, 3) is Cell.ALIVE
