"""
K-Pop Choreo Formation Editor - Editor Main

Command-line entry point for the editor application.

Usage:
    choreo-editor [--width W] [--height H] [--grid G] [--radius R]

Defaults to a 1000x600 stage with a 40-unit grid and 22-unit dancers.
"""

import argparse
import sys

from .application import EditorApplication
from .core.config import StageConfig
from .core.constants import DANCER_RADIUS, GRID_SIZE, STAGE_HEIGHT, STAGE_WIDTH


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="choreo-editor",
        description="Drag dancers around a stage to build a formation.",
    )
    parser.add_argument("--width", type=float, default=STAGE_WIDTH,
                        help=f"Stage width in stage units (default: {STAGE_WIDTH})")
    parser.add_argument("--height", type=float, default=STAGE_HEIGHT,
                        help=f"Stage height in stage units (default: {STAGE_HEIGHT})")
    parser.add_argument("--grid", type=int, default=GRID_SIZE,
                        help=f"Grid pitch in stage units (default: {GRID_SIZE})")
    parser.add_argument("--radius", type=float, default=DANCER_RADIUS,
                        help=f"Dancer radius in stage units (default: {DANCER_RADIUS})")
    return parser


def parse_arguments(argv: list[str] | None = None) -> StageConfig:
    """
    Parse command-line arguments into a stage configuration.

    Exits with status 1 if the options describe an impossible stage.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return StageConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        print("")
        parser.print_usage()
        sys.exit(1)


def main():
    """Main entry point for the editor."""
    config = parse_arguments()

    try:
        app = EditorApplication(config)
    except ValueError as e:
        # Stage the default formation cannot hold
        print(f"Error: {e}")
        sys.exit(1)

    app.run()


if __name__ == "__main__":
    main()
