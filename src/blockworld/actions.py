"""
Action interpreter for a loaded world.

Actions are read one per line:

    MOVE_BUILDER <direction>
    MOVE_BLOCK <direction>
    DIG
    DROP <inventory index>

Malformed lines raise ActionFormatError. Rule violations (no exit, too high,
unusable block) only print a message; processing carries on.
"""

import logging
from typing import Callable, Dict, Optional, TextIO, Tuple

from .errors import (
    ActionFormatError,
    InvalidBlockError,
    NoExitError,
    TooHighError,
    TooLowError,
)
from .models import DIRECTIONS
from .world_map import WorldMap


logger = logging.getLogger(__name__)

INVALID_ACTION = "Error: Invalid action"

# Messages for rule violations, checked in order
FAILURE_MESSAGES = (
    (NoExitError, "No exit this way"),
    (TooHighError, "Too high"),
    (TooLowError, "Too low"),
    (InvalidBlockError, "Cannot use that block"),
)


def _move_builder(world: WorldMap, direction: Optional[str]) -> str:
    if direction not in DIRECTIONS:
        return INVALID_ACTION
    builder = world.builder
    target = builder.current_tile.exits.get(direction)
    if target is None:
        raise NoExitError(f"No exit {direction}")
    builder.move_to(target)
    return f"Moving builder {direction}"


def _move_block(world: WorldMap, direction: Optional[str]) -> str:
    if direction not in DIRECTIONS:
        return INVALID_ACTION
    world.builder.current_tile.move_block(direction)
    return f"Moving block {direction}"


def _dig(world: WorldMap, argument: Optional[str]) -> str:
    world.builder.dig_on_current_tile()
    return "Top block on current tile removed"


def _drop(world: WorldMap, argument: Optional[str]) -> str:
    from ..mapfile.grammar import INT_PATTERN

    if argument is None or not INT_PATTERN.fullmatch(argument):
        raise ActionFormatError(f"Invalid inventory index '{argument}'")
    world.builder.drop_from_inventory(int(argument))
    return "Dropped a block from inventory"


# Keyword -> (handler, whether it takes an argument)
ACTIONS: Dict[str, Tuple[Callable[[WorldMap, Optional[str]], str], bool]] = {
    "MOVE_BUILDER": (_move_builder, True),
    "MOVE_BLOCK": (_move_block, True),
    "DIG": (_dig, False),
    "DROP": (_drop, True),
}


def parse_action(line: str) -> Tuple[str, Optional[str]]:
    """Split an action line into its keyword and optional argument."""
    parts = line.split(" ")
    keyword = parts[0]
    if keyword not in ACTIONS or len(parts) > 2:
        raise ActionFormatError(f"Invalid action line '{line}'")
    takes_argument = ACTIONS[keyword][1]
    if takes_argument != (len(parts) == 2):
        raise ActionFormatError(f"Invalid action line '{line}'")
    return keyword, parts[1] if len(parts) == 2 else None


def perform_action(world: WorldMap, keyword: str, argument: Optional[str]) -> str:
    """Run one action and return the message describing its outcome."""
    handler = ACTIONS[keyword][0]
    try:
        return handler(world, argument)
    except (NoExitError, TooHighError, TooLowError, InvalidBlockError) as exc:
        logger.debug("%s %s failed: %s", keyword, argument or "", exc)
        for error_type, message in FAILURE_MESSAGES:
            if isinstance(exc, error_type):
                return message
        raise


def process_actions(reader: TextIO, world: WorldMap, out: Optional[TextIO] = None) -> None:
    """
    Read and perform actions until the end of ``reader``.

    Raises:
        ActionFormatError: If a line is not a valid action
    """
    for raw in reader:
        line = raw.rstrip("\n")
        keyword, argument = parse_action(line)
        print(perform_action(world, keyword, argument), file=out)
