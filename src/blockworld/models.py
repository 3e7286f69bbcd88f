"""
Plain data types shared by the block world layers.

Positions and directions are small value types; the run configuration is the
pydantic model the command line fills from an optional YAML file.
"""

from typing import Dict, Literal, NamedTuple, Tuple
from pydantic import BaseModel, Field


Direction = Literal["north", "east", "south", "west"]

# Canonical visiting order for exits, used by traversal and serialization
DIRECTIONS: Tuple[str, ...] = ("north", "east", "south", "west")

# North increases y, east increases x
OFFSETS: Dict[str, Tuple[int, int]] = {
    "north": (0, 1),
    "east": (1, 0),
    "south": (0, -1),
    "west": (-1, 0),
}

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def fits_int32(value: int) -> bool:
    """Check whether ``value`` is representable as a signed 32-bit integer."""
    return INT32_MIN <= value <= INT32_MAX


class Position(NamedTuple):
    """A cell on the integer grid."""
    x: int
    y: int

    def shifted(self, direction: str) -> "Position":
        """Return the neighbouring position one step in ``direction``."""
        dx, dy = OFFSETS[direction]
        return Position(self.x + dx, self.y + dy)


class RunConfig(BaseModel):
    """Configuration for a command line run."""
    stdin_sentinel: str = "System.in"
    encoding: str = "utf-8"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    show_grid: bool = Field(default=False, description="Log the rendered grid after loading")
