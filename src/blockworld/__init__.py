"""Block world entities, the world map and its action interpreter."""

from .errors import (
    BlockWorldError,
    WorldMapFormatError,
    UnknownBlockTypeError,
    WorldMapInconsistentError,
    TooHighError,
    TooLowError,
    InvalidBlockError,
    NoExitError,
    ActionFormatError,
)
from .models import Direction, DIRECTIONS, OFFSETS, Position, RunConfig
from .blocks import (
    Block,
    WoodBlock,
    GrassBlock,
    SoilBlock,
    StoneBlock,
    BLOCK_TYPES,
    resolve_block,
    make_block_list,
)
from .tile import Tile, GROUND_HEIGHT_LIMIT, HEIGHT_LIMIT
from .builder import Builder
from .world_map import WorldMap
from .actions import process_actions, parse_action, perform_action

__all__ = [
    # Errors
    "BlockWorldError",
    "WorldMapFormatError",
    "UnknownBlockTypeError",
    "WorldMapInconsistentError",
    "TooHighError",
    "TooLowError",
    "InvalidBlockError",
    "NoExitError",
    "ActionFormatError",
    # Models
    "Direction",
    "DIRECTIONS",
    "OFFSETS",
    "Position",
    "RunConfig",
    # Blocks
    "Block",
    "WoodBlock",
    "GrassBlock",
    "SoilBlock",
    "StoneBlock",
    "BLOCK_TYPES",
    "resolve_block",
    "make_block_list",
    # Entities
    "Tile",
    "GROUND_HEIGHT_LIMIT",
    "HEIGHT_LIMIT",
    "Builder",
    "WorldMap",
    # Actions
    "process_actions",
    "parse_action",
    "perform_action",
]
