#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, GridEngine, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Seed a 10x10 grid with a glider in the top-left corner
    grid = Grid(10, 10)
    glider.apply_to_grid(grid, row_offset=1, col_offset=1)

    with GridEngine(10, 10, grid, strategy="rows", workers=4) as engine:
        print("Initial state:")
        print(engine.render())
        print(f"Population: {engine.population}")
        print()

        for _ in range(8):
            engine.advance()
            print(f"Generation {engine.generation}:")
            print(engine.render())
            print(f"Population: {engine.population}")
            print()


if __name__ == "__main__":
    main()
