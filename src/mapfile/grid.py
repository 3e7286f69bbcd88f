"""Laying a tile graph out on the integer grid, and rendering the result."""

from collections import deque
from typing import Deque, Dict, List, NamedTuple, Optional

from ..blockworld.errors import WorldMapInconsistentError
from ..blockworld.models import DIRECTIONS, Position, fits_int32
from ..blockworld.tile import Tile


class SparseTileIndex(NamedTuple):
    """Grid positions of every tile reachable from the start tile."""
    order: List[Tile]
    cells: Dict[Position, Tile]
    positions: Dict[Tile, Position]

    def tile_at(self, position: Position) -> Optional[Tile]:
        return self.cells.get(position)

    def position_of(self, tile: Tile) -> Optional[Position]:
        return self.positions.get(tile)


def compute_positions(start_tile: Tile, start_position: Position) -> SparseTileIndex:
    """
    Assign a grid position to each tile reachable from ``start_tile``.

    Tiles are visited breadth first with exits taken in north, east, south,
    west order, so the resulting ``order`` is deterministic.

    Raises:
        WorldMapInconsistentError: If a tile would need two positions, two
            tiles would share a cell, or a position leaves the 32-bit range
    """
    positions: Dict[Tile, Position] = {start_tile: start_position}
    cells: Dict[Position, Tile] = {start_position: start_tile}
    order: List[Tile] = [start_tile]
    queue: Deque[Tile] = deque([start_tile])

    while queue:
        tile = queue.popleft()
        here = positions[tile]

        for direction in DIRECTIONS:
            neighbour = tile.exits.get(direction)
            if neighbour is None:
                continue

            implied = here.shifted(direction)
            if not (fits_int32(implied.x) and fits_int32(implied.y)):
                raise WorldMapInconsistentError(
                    f"Exit {direction} from {tuple(here)} leaves the 32-bit grid",
                    code="COORDINATE_OVERFLOW",
                )

            known = positions.get(neighbour)
            if known is not None and known != implied:
                raise WorldMapInconsistentError(
                    f"Tile at {tuple(known)} is also reached at {tuple(implied)} "
                    f"going {direction} from {tuple(here)}",
                    code="POSITION_CONFLICT",
                )

            occupant = cells.get(implied)
            if occupant is not None and occupant is not neighbour:
                raise WorldMapInconsistentError(
                    f"Two tiles claim cell {tuple(implied)}",
                    code="CELL_CONFLICT",
                )

            if known is None:
                positions[neighbour] = implied
                cells[implied] = neighbour
                order.append(neighbour)
                queue.append(neighbour)

    return SparseTileIndex(order=order, cells=cells, positions=positions)


def render_grid(cells: Dict[Position, Tile]) -> str:
    """Render tile heights with north at the top; empty cells are dots."""
    if not cells:
        return ""

    min_x = min(pos.x for pos in cells)
    max_x = max(pos.x for pos in cells)
    min_y = min(pos.y for pos in cells)
    max_y = max(pos.y for pos in cells)

    lines = [
        ''.join(
            str(cells[(x, y)].height) if (x, y) in cells else '.'
            for x in range(min_x, max_x + 1)
        )
        for y in range(max_y, min_y - 1, -1)
    ]

    return '\n'.join(lines)
