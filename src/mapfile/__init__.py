"""Reading, checking and writing world map files."""

from .grammar import LineReader, parse_int, parse_labeled_counts, parse_numbered_row
from .sections import (
    ParsedWorld,
    parse_builder_section,
    parse_empty_line,
    parse_tiles_section,
    parse_exits_section,
    ensure_at_end,
    parse_world,
)
from .grid import SparseTileIndex, compute_positions, render_grid
from .serializer import dump_world, save_world
from .report import MapIssue, MapReport, inspect_map

__all__ = [
    # Grammar
    "LineReader",
    "parse_int",
    "parse_labeled_counts",
    "parse_numbered_row",
    # Sections
    "ParsedWorld",
    "parse_builder_section",
    "parse_empty_line",
    "parse_tiles_section",
    "parse_exits_section",
    "ensure_at_end",
    "parse_world",
    # Grid
    "SparseTileIndex",
    "compute_positions",
    "render_grid",
    # Serialization
    "dump_world",
    "save_world",
    # Reports
    "MapIssue",
    "MapReport",
    "inspect_map",
]
