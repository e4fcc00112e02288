"""Toroidal Game of Life universe."""

import logging
import numbers
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Union

import numpy as np
import torch
import torch.nn.functional as F

logger = logging.getLogger(__name__)

DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"


class Cell(IntEnum):
    """State of a single cell. Ordinals sum to a live neighbor count."""

    DEAD = 0
    ALIVE = 1


SeedFn = Callable[[int], Union[Cell, int, bool]]


def wrap_index(value: int, modulus: int) -> int:
    """Wrap a coordinate onto ``[0, modulus)``."""
    return value % modulus


def default_seed(index: int) -> Cell:
    """Seed cells at even indices and multiples of seven."""
    if index % 2 == 0 or index % 7 == 0:
        return Cell.ALIVE
    return Cell.DEAD


@dataclass
class UniverseConfig:
    """Construction parameters for a universe."""

    width: int = 64
    height: int = 64
    seed_fn: SeedFn = default_seed


class Universe:
    """Conway's Game of Life on a fixed-size toroidal grid.

    Cells live in a flat row-major buffer of ``width * height`` bytes, where
    ``index(row, col) = row * width + col``. Every tick builds a new buffer
    from a snapshot of the current one and swaps it in once complete.
    """

    def __init__(self, width: int = 64, height: int = 64, seed_fn: Optional[SeedFn] = None) -> None:
        """Initialize a new universe.

        Args:
            width: Number of columns
            height: Number of rows
            seed_fn: Maps a flat cell index to its initial state
                (defaults to :func:`default_seed`)

        Raises:
            ValueError: If a dimension is not a positive integer or the seed
                function returns something other than dead/alive
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        width, height = self._width, self._height
        seed_fn = seed_fn or default_seed

        size = width * height
        self._cells = np.fromiter((int(Cell(int(seed_fn(i)))) for i in range(size)), dtype=np.uint8, count=size)
        self._generation = 0

        # Moore neighborhood, centre excluded
        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )
        # Offsets that wrap back onto the cell itself on a 1-wide or 1-tall torus
        self._self_hits = sum(
            1
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr, dc) != (0, 0) and dr % height == 0 and dc % width == 0
        )

        logger.debug("Created %dx%d universe with population %d", width, height, self.population)

    @classmethod
    def from_config(cls, config: UniverseConfig) -> "Universe":
        """Build a universe from a :class:`UniverseConfig`."""
        return cls(config.width, config.height, config.seed_fn)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current generation, valid until the next tick."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def generation(self) -> int:
        """Number of ticks applied since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def get_index(self, row: int, col: int) -> int:
        """Flat buffer index of a cell.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._height}x{self._width} universe")
        return row * self._width + col

    def get_cell(self, row: int, col: int) -> Cell:
        """State of the cell at ``(row, col)``."""
        return Cell(int(self._cells[self.get_index(row, col)]))

    def neighbor_count(self, row: int, col: int) -> int:
        """Count living cells among the 8 wrapped neighbors of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        self.get_index(row, col)

        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                neighbor_row = wrap_index(row + dr, self._height)
                neighbor_col = wrap_index(col + dc, self._width)
                # Covers the centre and any offset wrapping back onto it
                if neighbor_row == row and neighbor_col == col:
                    continue
                count += int(self._cells[neighbor_row * self._width + neighbor_col])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for every cell using a circular-padded convolution.

        Returns:
            ``(height, width)`` array of neighbor counts
        """
        grid = torch.from_numpy(self._cells.reshape(self._height, self._width).astype(np.float32))
        padded = F.pad(grid.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._kernel)[0, 0]
        if self._self_hits:
            neighbors = neighbors - self._self_hits * grid
        return neighbors.numpy().astype(np.uint8)

    def tick(self) -> None:
        """Advance the universe by one generation."""
        snapshot = self._cells.reshape(self._height, self._width)
        neighbors = self.count_all_neighbors()

        alive = snapshot == int(Cell.ALIVE)
        survive = alive & ((neighbors == 2) | (neighbors == 3))
        birth = ~alive & (neighbors == 3)

        # Swap only once every cell has been computed
        self._cells = (survive | birth).astype(np.uint8).ravel()
        self._generation += 1

        logger.debug("Generation %d: population %d", self._generation, self.population)

    def render(self) -> str:
        """Render the grid as newline-terminated rows of glyphs."""
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
            lines.append("\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, generation={self._generation})"
