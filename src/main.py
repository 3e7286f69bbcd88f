"""
Main entry point: load a world map, run actions on it, save the result.

Usage:
    python -m src.main input.map actions.txt output.map
    python -m src.main input.map System.in output.map < actions.txt
    python -m src.main input.map actions.txt output.map --config run.yaml --verbose

Exit codes:
    1  wrong number of arguments (or an unreadable --config)
    2  the input map could not be loaded
    3  the action source could not be opened
    4  the actions could not be processed
    5  the output map could not be saved
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .blockworld import BlockWorldError, RunConfig, WorldMap, process_actions
from .mapfile import render_grid


USAGE = "Usage: program inputMap actions outputMap"

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        print(USAGE, file=sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def load_config(config_path: str) -> RunConfig:
    """Load run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RunConfig(**data)


def main(argv=None) -> int:
    parser = _ArgumentParser(
        description="Load a block world, apply actions, and save it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example run.yaml:
  stdin_sentinel: System.in
  encoding: utf-8
  log_level: INFO
  show_grid: true
        """
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="inputMap actions outputMap (actions may be the stdin sentinel)"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML run configuration"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    if len(args.paths) != 3:
        print(USAGE, file=sys.stderr)
        return 1
    input_map, action_source, output_map = args.paths

    try:
        config = load_config(args.config) if args.config else RunConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        world = WorldMap.load(input_map, encoding=config.encoding)
    except (BlockWorldError, OSError) as e:
        print(e, file=sys.stderr)
        return 2
    logger.info("Loaded %s: %d tiles", input_map, len(world.tiles()))
    if config.show_grid:
        logger.info("Grid:\n%s", render_grid(world.cells))

    try:
        if action_source == config.stdin_sentinel:
            reader = sys.stdin
        else:
            reader = open(action_source, encoding=config.encoding)
    except OSError as e:
        print(e, file=sys.stderr)
        return 3

    try:
        if reader is sys.stdin:
            process_actions(reader, world)
        else:
            with reader:
                process_actions(reader, world)
    except (BlockWorldError, OSError, UnicodeDecodeError) as e:
        print(e, file=sys.stderr)
        return 4

    try:
        world.save(output_map, encoding=config.encoding)
    except OSError as e:
        print(e, file=sys.stderr)
        return 5
    logger.info("Saved %s", output_map)

    return 0


if __name__ == "__main__":
    sys.exit(main())
