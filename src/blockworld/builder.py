"""Builder: the player who walks the world carrying blocks."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .blocks import Block
from .errors import InvalidBlockError, NoExitError
from .tile import Tile


class Builder(BaseModel):
    """
    A named builder standing on exactly one tile.

    Attributes:
        name: Display name, written verbatim to map files
        current_tile: The tile the builder occupies
        inventory: Carried blocks, in pick-up order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    current_tile: Tile
    inventory: List[Block] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        starting_tile: Tile,
        inventory: Optional[List[Block]] = None,
    ) -> "Builder":
        """
        Create a builder, checking that every inventory block can be carried.

        Raises:
            InvalidBlockError: If an inventory block is not carryable
        """
        inventory = list(inventory or [])
        for block in inventory:
            if not block.carryable:
                raise InvalidBlockError(f"'{block}' block cannot be carried")
        return cls(name=name, current_tile=starting_tile, inventory=inventory)

    def drop_from_inventory(self, index: int) -> None:
        """
        Place inventory block ``index`` on the current tile.

        The block stays in the inventory if the tile rejects it.
        """
        if not 0 <= index < len(self.inventory):
            raise InvalidBlockError(f"No inventory block at index {index}")
        self.current_tile.place_block(self.inventory[index])
        del self.inventory[index]

    def dig_on_current_tile(self) -> None:
        """Dig the current tile, keeping the block if it can be carried."""
        block = self.current_tile.dig()
        if block.carryable:
            self.inventory.append(block)

    def can_enter(self, tile: Tile) -> bool:
        """A tile can be entered through an exit when heights differ by at most one."""
        if tile not in self.current_tile.exits.values():
            return False
        return abs(tile.height - self.current_tile.height) <= 1

    def move_to(self, tile: Tile) -> None:
        if not self.can_enter(tile):
            raise NoExitError("Builder cannot enter that tile")
        self.current_tile = tile
