"""
WorldMap: a builder, a start position and the grid of reachable tiles.

A map is built either from an in-memory tile graph, which is only checked for
geometric consistency, or by loading a map file, which is parsed first.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .builder import Builder
from .models import Position
from .tile import Tile


logger = logging.getLogger(__name__)


class WorldMap:
    """
    A geometrically consistent block world.

    Attributes:
        builder: The builder who walks the world
        start_position: Grid position of the starting tile
    """

    def __init__(self, starting_tile: Tile, start_position: Position, builder: Builder):
        """
        Lay out the tiles reachable from ``starting_tile``.

        Raises:
            WorldMapInconsistentError: If the exits cannot be placed on a grid
        """
        from ..mapfile.grid import compute_positions

        self._index = compute_positions(starting_tile, Position(*start_position))
        self.start_position = Position(*start_position)
        self.builder = builder

    @classmethod
    def load(cls, path: str | Path, encoding: str = "utf-8") -> "WorldMap":
        """
        Load a world map file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be opened
            WorldMapFormatError: If the file does not follow the map grammar
            WorldMapInconsistentError: If the described layout is impossible
        """
        from ..mapfile.grammar import LineReader
        from ..mapfile.sections import parse_world

        with open(path, encoding=encoding) as f:
            parsed = parse_world(LineReader(f))

        world = cls(parsed.starting_tile, parsed.start_position, parsed.builder)
        unreachable = len(parsed.tiles) - len(world.tiles())
        if unreachable:
            logger.info("%s: %d tiles are unreachable from the start", path, unreachable)
        logger.debug("Loaded %s with %d tiles", path, len(world.tiles()))
        return world

    def tiles(self) -> List[Tile]:
        """Reachable tiles in breadth-first order from the starting tile."""
        return list(self._index.order)

    def tile_at(self, position: Position) -> Optional[Tile]:
        return self._index.tile_at(Position(*position))

    def position_of(self, tile: Tile) -> Optional[Position]:
        return self._index.position_of(tile)

    @property
    def cells(self) -> Dict[Position, Tile]:
        """Mapping of occupied positions to tiles."""
        return dict(self._index.cells)

    def save(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Write the map to ``path`` in the map file format."""
        from ..mapfile.serializer import save_world

        save_world(self, path, encoding=encoding)
