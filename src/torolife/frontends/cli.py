"""Terminal display loop for a toroidal Game of Life universe."""

import argparse
import logging
import sys
import time
from typing import Optional, TextIO

from ..core.patterns import PatternLibrary
from ..core.universe import Universe, UniverseConfig, default_seed

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class CLIUniverse:
    """Drives a universe from the command line: render, tick, repeat."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialize the display loop.

        Args:
            stream: Where frames are written (defaults to stdout)
        """
        self.pattern_library = PatternLibrary()
        self.stream = stream or sys.stdout

    def build_config(
        self,
        width: int,
        height: int,
        pattern: Optional[str] = None,
        pattern_row: Optional[int] = None,
        pattern_col: Optional[int] = None,
    ) -> UniverseConfig:
        """Translate display options into a universe configuration.

        Args:
            width: Grid width
            height: Grid height
            pattern: Optional pattern name; the default seed is used without one
            pattern_row: Row offset for the pattern (centred when omitted)
            pattern_col: Column offset for the pattern (centred when omitted)

        Returns:
            Configuration ready for :meth:`Universe.from_config`

        Raises:
            KeyError: If the pattern is not in the library
        """
        if pattern is None:
            return UniverseConfig(width=width, height=height, seed_fn=default_seed)

        loaded = self.pattern_library.get_pattern(pattern)
        if loaded is None:
            raise KeyError(pattern)

        loaded = loaded.normalize()
        rows, cols = loaded.get_size()
        if pattern_row is None:
            pattern_row = max(0, (height - rows) // 2)
        if pattern_col is None:
            pattern_col = max(0, (width - cols) // 2)

        logger.debug("Placing pattern %r at (%d, %d)", pattern, pattern_row, pattern_col)
        return UniverseConfig(
            width=width, height=height, seed_fn=loaded.to_seed(width, height, pattern_row, pattern_col)
        )

    def run(self, universe: Universe, generations: int, delay: float = 0.0, clear: bool = False) -> int:
        """Render and advance the universe for a number of frames.

        Args:
            universe: Universe to display
            generations: Number of frames to draw
            delay: Seconds to wait between frames
            clear: Clear the terminal before each frame

        Returns:
            Number of frames drawn
        """
        frames = 0
        for _ in range(generations):
            if clear:
                self.stream.write(CLEAR_SCREEN)
            self.stream.write(f"Generation {universe.generation} (population {universe.population})\n")
            self.stream.write(universe.render())
            self.stream.write("\n")
            self.stream.flush()
            frames += 1

            universe.tick()
            if delay > 0:
                time.sleep(delay)

        return frames

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:", file=self.stream)
        for category, patterns in categories.items():
            print(f"\n{category}:", file=self.stream)
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    rows, cols = pattern.get_size()
                    print(f"  {pattern_name}: {rows}x{cols}, {len(pattern.cells)} cells", file=self.stream)
                    if pattern.description:
                        print(f"    {pattern.description}", file=self.stream)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Display Conway's Game of Life on a toroidal grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default 64x64 universe for 100 generations
  torolife-cli

  # Animate a glider on a 20x20 torus
  torolife-cli -W 20 -H 20 --pattern Glider --delay 0.1 --clear

  # List available patterns
  torolife-cli --list-patterns
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=64, help="Grid width (default: 64)")

    parser.add_argument("-H", "--height", type=int, default=64, help="Grid height (default: 64)")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=100,
        help="Number of generations to display (default: 100)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between frames (default: 0)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Seed with a named pattern instead of the default seed",
    )

    parser.add_argument("--pattern-row", type=int, help="Row offset for pattern placement (default: centred)")

    parser.add_argument("--pattern-col", type=int, help="Column offset for pattern placement (default: centred)")

    parser.add_argument("--clear", action="store_true", help="Clear the terminal before each frame")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations <= 0:
        errors.append("Generations must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_row is not None and args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col is not None and args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the display loop.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    cli = CLIUniverse()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        config = cli.build_config(args.width, args.height, args.pattern, args.pattern_row, args.pattern_col)
    except KeyError:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    universe = Universe.from_config(config)
    try:
        cli.run(universe, args.generations, delay=args.delay, clear=args.clear)
    except KeyboardInterrupt:
        print("\nInterrupted")

    return 0


if __name__ == "__main__":
    sys.exit(main())
