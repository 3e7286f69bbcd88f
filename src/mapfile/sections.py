"""
Section parsers for world map files.

Each parser consumes exactly the lines its section needs, so ``parse_world``
can chain them with strict blank-line separators and an end-of-file check.
"""

import logging
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from ..blockworld.blocks import Block, make_block_list
from ..blockworld.builder import Builder
from ..blockworld.errors import (
    InvalidBlockError,
    NoExitError,
    TooHighError,
    WorldMapFormatError,
)
from ..blockworld.models import DIRECTIONS, Position
from ..blockworld.tile import Tile
from .grammar import LineReader, parse_int, parse_labeled_counts, parse_numbered_row


logger = logging.getLogger(__name__)


class ParsedWorld(BaseModel):
    """Everything read from a map file, before the consistency check."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    start_position: Position
    builder: Builder
    tiles: List[Tile]

    @property
    def starting_tile(self) -> Tile:
        return self.builder.current_tile


def parse_builder_section(reader: LineReader) -> Tuple[Position, Builder]:
    """
    Parse start position, builder name and inventory.

    A fresh, empty tile is created here as the builder's starting tile; the
    tiles section later fills it in as tile 0.
    """
    start_x = parse_int(reader.read_line())
    start_y = parse_int(reader.read_line())
    name = reader.read_line()
    inventory = make_block_list(reader.read_line())

    try:
        builder = Builder.create(name, Tile(), inventory)
    except InvalidBlockError as exc:
        raise WorldMapFormatError(str(exc), code="NOT_CARRYABLE") from exc
    return Position(start_x, start_y), builder


def parse_empty_line(reader: LineReader) -> None:
    if reader.read_line() != "":
        raise WorldMapFormatError("Expected a blank line", code="EXPECTED_BLANK_LINE")


def parse_tiles_section(reader: LineReader, starting_tile: Tile) -> List[Tile]:
    """
    Parse ``total:N`` and N tile rows into tiles indexed by id.

    Rows may come in any order but each id in [0, N) appears exactly once.
    Tile 0 is ``starting_tile``, which must be empty when passed in.
    """
    totals = parse_labeled_counts(reader.read_line(), require_exactly_one=True)
    if "total" not in totals:
        raise WorldMapFormatError("Expected 'total:N'", code="MISSING_TOTAL")
    total = totals["total"]
    if total < 1:
        raise WorldMapFormatError("A map needs at least one tile", code="INVALID_TOTAL")

    # Tile id -> (blocks, line the row was read from)
    rows: Dict[int, Tuple[List[Block], int]] = {}
    for _ in range(total):
        tile_id, blocks_text = parse_numbered_row(reader.read_line())
        if not 0 <= tile_id < total:
            raise WorldMapFormatError(
                f"Tile id {tile_id} is outside [0, {total})",
                code="TILE_ID_OUT_OF_RANGE",
            )
        if tile_id in rows:
            raise WorldMapFormatError(f"Tile id {tile_id} is repeated", code="DUPLICATE_TILE_ID")
        rows[tile_id] = (make_block_list(blocks_text), reader.line_number)

    tiles: List[Tile] = []
    for tile_id in range(total):
        blocks, line = rows[tile_id]
        try:
            if tile_id == 0:
                for block in blocks:
                    starting_tile.place_block(block)
                tiles.append(starting_tile)
            else:
                tiles.append(Tile.create(blocks))
        except TooHighError as exc:
            raise WorldMapFormatError(str(exc), code="TOO_HIGH", line=line) from exc
        except InvalidBlockError as exc:
            raise AssertionError("Registry produced an invalid block") from exc

    logger.debug("Parsed %d tiles", total)
    return tiles


def parse_exits_section(reader: LineReader, tiles: List[Tile]) -> None:
    """
    Parse the ``exits`` header and one exit row per tile, wiring the exits.

    Rows may come in any order; each tile id appears exactly once.
    """
    if reader.read_line() != "exits":
        raise WorldMapFormatError("Expected 'exits'", code="MISSING_EXITS_HEADER")

    total = len(tiles)
    seen = set()
    for _ in range(total):
        tile_id, exits_text = parse_numbered_row(reader.read_line())
        if not 0 <= tile_id < total:
            raise WorldMapFormatError(
                f"Tile id {tile_id} is outside [0, {total})",
                code="TILE_ID_OUT_OF_RANGE",
            )
        if tile_id in seen:
            raise WorldMapFormatError(
                f"Exits for tile {tile_id} are repeated",
                code="DUPLICATE_EXIT_ROW",
            )
        seen.add(tile_id)

        # Repeated directions are already rejected as duplicate labels
        for direction, target_id in parse_labeled_counts(exits_text).items():
            if direction not in DIRECTIONS:
                raise WorldMapFormatError(
                    f"Invalid direction '{direction}'",
                    code="INVALID_DIRECTION",
                )
            if not 0 <= target_id < total:
                raise WorldMapFormatError(
                    f"Exit target {target_id} is outside [0, {total})",
                    code="TILE_ID_OUT_OF_RANGE",
                )
            try:
                tiles[tile_id].add_exit(direction, tiles[target_id])
            except NoExitError as exc:
                raise AssertionError("Validated exit was rejected") from exc


def ensure_at_end(reader: LineReader) -> None:
    if not reader.at_end():
        raise WorldMapFormatError(
            "Unexpected content after the exits section",
            code="TRAILING_CONTENT",
        )


def parse_world(reader: LineReader) -> ParsedWorld:
    """
    Parse a complete map file.

    Any format error is tagged with the line being interpreted when it was
    raised.
    """
    try:
        start_position, builder = parse_builder_section(reader)
        parse_empty_line(reader)
        tiles = parse_tiles_section(reader, builder.current_tile)
        parse_empty_line(reader)
        parse_exits_section(reader, tiles)
        ensure_at_end(reader)
    except WorldMapFormatError as exc:
        if exc.line is None:
            exc.line = reader.line_number
        raise

    return ParsedWorld(start_position=start_position, builder=builder, tiles=tiles)
