"""
Block kinds and the registry that maps file tokens to them.

Each kind is a pydantic model whose capabilities live on the class. The
registry is an immutable table built once at import time.
"""

from types import MappingProxyType
from typing import ClassVar, List, Mapping, Type
from pydantic import BaseModel

from .errors import UnknownBlockTypeError


class Block(BaseModel):
    """A single block stacked on a tile or carried by a builder."""

    block_type: ClassVar[str] = ""
    colour: ClassVar[str] = ""
    weight: ClassVar[int] = 1
    diggable: ClassVar[bool] = True
    moveable: ClassVar[bool] = False
    carryable: ClassVar[bool] = False
    ground: ClassVar[bool] = False

    def __str__(self) -> str:
        return self.block_type


class WoodBlock(Block):
    block_type: ClassVar[str] = "wood"
    colour: ClassVar[str] = "brown"
    moveable: ClassVar[bool] = True
    carryable: ClassVar[bool] = True


class GrassBlock(Block):
    block_type: ClassVar[str] = "grass"
    colour: ClassVar[str] = "green"
    ground: ClassVar[bool] = True


class SoilBlock(Block):
    block_type: ClassVar[str] = "soil"
    colour: ClassVar[str] = "black"
    carryable: ClassVar[bool] = True
    ground: ClassVar[bool] = True


class StoneBlock(Block):
    block_type: ClassVar[str] = "stone"
    colour: ClassVar[str] = "gray"
    weight: ClassVar[int] = 50
    diggable: ClassVar[bool] = False


BLOCK_TYPES: Mapping[str, Type[Block]] = MappingProxyType({
    cls.block_type: cls
    for cls in (WoodBlock, GrassBlock, SoilBlock, StoneBlock)
})


def resolve_block(token: str) -> Block:
    """
    Create a new block for a registry token.

    Raises:
        UnknownBlockTypeError: If the token is not a registered block type
    """
    block_class = BLOCK_TYPES.get(token)
    if block_class is None:
        raise UnknownBlockTypeError(token)
    return block_class()


def make_block_list(text: str) -> List[Block]:
    """
    Resolve a comma separated list of block tokens.

    An empty string is an empty list. Any unresolvable token, including an
    empty token inside a non-empty list, fails the whole list.
    """
    if text == "":
        return []
    return [resolve_block(token) for token in text.split(",")]
