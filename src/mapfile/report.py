"""
Map inspection: load a map file and collect the outcome into a report.

Unlike ``WorldMap.load`` this never raises for a bad map; the failure is
recorded as a MapIssue so callers can print or serialize it.
"""

from pathlib import Path
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from ..blockworld.errors import WorldMapFormatError, WorldMapInconsistentError
from ..blockworld.world_map import WorldMap
from .grid import render_grid


Phase = Literal["io", "format", "consistency"]


class MapIssue(BaseModel):
    """A single reason a map could not be loaded."""
    code: str
    message: str
    phase: Phase
    line: Optional[int] = None


class MapReport(BaseModel):
    """Result of inspecting a map file."""
    path: str
    valid: bool
    errors: List[MapIssue] = Field(default_factory=list)
    tiles: int = 0
    builder: Optional[str] = None
    inventory: List[str] = Field(default_factory=list)
    start: Optional[Tuple[int, int]] = None
    grid: Optional[str] = None


def inspect_map(path: str | Path, encoding: str = "utf-8") -> MapReport:
    """
    Load ``path`` and describe it.

    Returns a MapReport with:
    - valid: True if the map loaded
    - errors: The first error met, tagged with the phase that raised it
    - tiles, builder, inventory, start: Summary of a loaded map
    - grid: Tile heights rendered with north at the top
    """
    try:
        world = WorldMap.load(path, encoding=encoding)
    except OSError as exc:
        issue = MapIssue(code=type(exc).__name__.upper(), message=str(exc), phase="io")
    except WorldMapFormatError as exc:
        issue = MapIssue(code=exc.code, message=exc.message, phase="format", line=exc.line)
    except WorldMapInconsistentError as exc:
        issue = MapIssue(code=exc.code, message=exc.message, phase="consistency")
    else:
        return MapReport(
            path=str(path),
            valid=True,
            tiles=len(world.tiles()),
            builder=world.builder.name,
            inventory=[block.block_type for block in world.builder.inventory],
            start=tuple(world.start_position),
            grid=render_grid(world.cells),
        )

    return MapReport(path=str(path), valid=False, errors=[issue])
