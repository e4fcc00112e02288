#!/usr/bin/env python3
"""
Example usage of the torolife package.
"""

from torolife import PatternLibrary, Universe


def main():
    """Demonstrate programmatic usage of the torolife package."""
    # Default seed on a small torus
    universe = Universe(16, 8)
    print("Default seed:")
    print(universe)

    for _ in range(3):
        universe.tick()
    print(f"After {universe.generation} generations (population {universe.population}):")
    print(universe)

    # A glider crossing the edges of a 10x10 torus
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        universe = Universe(10, 10, seed_fn=glider.to_seed(10, 10, row_offset=6, col_offset=6))

        for _ in range(4):
            print(f"Generation {universe.generation}:")
            print(universe.render())
            universe.tick()

    # The cells buffer is what a host renderer would read each frame
    cells = universe.cells
    print(f"Buffer: {len(cells)} cells, {int(cells.sum())} alive")


if __name__ == "__main__":
    main()
