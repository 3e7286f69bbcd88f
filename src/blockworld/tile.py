"""
Tile: a stack of blocks with named exits to neighbouring tiles.

Tiles form a graph that may contain cycles, so they compare and hash by
identity and leave their exits out of ``repr``.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .blocks import Block
from .errors import InvalidBlockError, NoExitError, TooHighError, TooLowError
from .models import DIRECTIONS


# Ground blocks only go on tiles holding fewer than this many blocks
GROUND_HEIGHT_LIMIT = 2
# No block goes on a tile holding this many blocks
HEIGHT_LIMIT = 7


class Tile(BaseModel):
    """
    A grid cell holding an ordered block stack (bottom to top).

    Exits are one-way: adding a north exit from A to B does not give B a
    south exit back to A.
    """

    blocks: List[Block] = Field(default_factory=list)
    exits: Dict[str, "Tile"] = Field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, blocks: Optional[List[Block]] = None) -> "Tile":
        """
        Build a tile, placing ``blocks`` bottom to top under the height rules.

        Raises:
            TooHighError: If a block breaks the ground or overall height limit
        """
        tile = cls()
        for block in blocks or []:
            tile.place_block(block)
        return tile

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    @property
    def height(self) -> int:
        """Number of blocks on the tile."""
        return len(self.blocks)

    def top_block(self) -> Block:
        """Return the top block without removing it."""
        if not self.blocks:
            raise TooLowError("Tile has no blocks")
        return self.blocks[-1]

    def remove_top_block(self) -> Block:
        """Remove and return the top block."""
        block = self.top_block()
        self.blocks.pop()
        return block

    def place_block(self, block: Block) -> None:
        """
        Place a block on top of the stack.

        Raises:
            InvalidBlockError: If ``block`` is not a block
            TooHighError: If the tile is too high for this kind of block
        """
        if not isinstance(block, Block):
            raise InvalidBlockError(f"Cannot place {block!r} on a tile")
        if self.height >= HEIGHT_LIMIT:
            raise TooHighError(f"Tile already holds {self.height} blocks")
        if block.ground and self.height >= GROUND_HEIGHT_LIMIT:
            raise TooHighError(
                f"Ground block '{block}' cannot go on a tile holding {self.height} blocks"
            )
        self.blocks.append(block)

    def dig(self) -> Block:
        """Remove the top block if it can be dug."""
        block = self.top_block()
        if not block.diggable:
            raise InvalidBlockError(f"'{block}' block cannot be dug")
        return self.remove_top_block()

    def add_exit(self, direction: str, target: "Tile") -> None:
        """Add or replace the exit in ``direction``."""
        if direction not in DIRECTIONS or not isinstance(target, Tile):
            raise NoExitError(f"Invalid exit '{direction}'")
        self.exits[direction] = target

    def remove_exit(self, direction: str) -> None:
        if direction not in self.exits:
            raise NoExitError(f"No exit '{direction}'")
        del self.exits[direction]

    def move_block(self, direction: str) -> None:
        """
        Move the top block through an exit onto a strictly lower tile.

        Raises:
            NoExitError: If there is no exit in ``direction``
            TooLowError: If this tile has no blocks
            InvalidBlockError: If the top block cannot be moved
            TooHighError: If the target is not lower than this tile
        """
        target = self.exits.get(direction)
        if target is None:
            raise NoExitError(f"No exit '{direction}'")
        block = self.top_block()
        if not block.moveable:
            raise InvalidBlockError(f"'{block}' block cannot be moved")
        if target.height >= self.height:
            raise TooHighError("Target tile is not lower than this tile")
        target.place_block(block)
        self.blocks.pop()
