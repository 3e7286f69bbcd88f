"""Writing a world back out in the map file grammar."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List

from ..blockworld.models import DIRECTIONS
from ..blockworld.tile import Tile

if TYPE_CHECKING:
    from ..blockworld.world_map import WorldMap


logger = logging.getLogger(__name__)


def _row(index: int, rest: str) -> str:
    return f"{index} {rest}" if rest else str(index)


def dump_world(world: "WorldMap") -> str:
    """
    Render ``world`` as map file text.

    Tile ids are positions in ``world.tiles()`` (breadth-first order), so
    tile 0 is always the starting tile.
    """
    tiles = world.tiles()
    ids: Dict[Tile, int] = {tile: index for index, tile in enumerate(tiles)}
    builder = world.builder

    lines: List[str] = [
        str(world.start_position.x),
        str(world.start_position.y),
        builder.name,
        ",".join(block.block_type for block in builder.inventory),
        "",
        f"total:{len(tiles)}",
    ]
    for index, tile in enumerate(tiles):
        lines.append(_row(index, ",".join(block.block_type for block in tile.blocks)))

    lines.extend(["", "exits"])
    for index, tile in enumerate(tiles):
        exits = [
            f"{direction}:{ids[tile.exits[direction]]}"
            for direction in DIRECTIONS
            if direction in tile.exits
        ]
        lines.append(_row(index, ",".join(exits)))

    return "\n".join(lines) + "\n"


def save_world(world: "WorldMap", path: str | Path, encoding: str = "utf-8") -> None:
    """
    Save ``world`` to ``path``.

    Raises:
        OSError: If the file cannot be opened or written. A partially
            written file is left in place.
    """
    text = dump_world(world)
    with open(path, "w", encoding=encoding, newline="\n") as f:
        f.write(text)
    logger.debug("Saved %d tiles to %s", len(world.tiles()), path)
