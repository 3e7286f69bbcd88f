"""Exception hierarchy for loading, checking and playing a block world."""

from typing import Optional


class BlockWorldError(Exception):
    """Base class for every recoverable block world error."""
    phase: str = "world"


class WorldMapFormatError(BlockWorldError):
    """
    The map text does not follow the file grammar.

    Carries a short uppercase ``code`` naming the rule that was broken and,
    once the section layer knows it, the 1-based ``line`` it happened on.
    """
    phase = "format"

    def __init__(
        self,
        message: str = "Invalid world map format",
        code: str = "INVALID_FORMAT",
        line: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class UnknownBlockTypeError(WorldMapFormatError):
    """A block token has no entry in the block registry."""

    def __init__(self, token: str):
        super().__init__(f"Unknown block type '{token}'", code="UNKNOWN_BLOCK_TYPE")
        self.token = token


class WorldMapInconsistentError(BlockWorldError):
    """The map is well formed but its exits cannot be laid out on a grid."""
    phase = "consistency"

    def __init__(self, message: str, code: str = "INCONSISTENT"):
        super().__init__(message)
        self.message = message
        self.code = code


class TooHighError(BlockWorldError):
    """A tile is too high for the requested block operation."""
    phase = "domain"


class TooLowError(BlockWorldError):
    """A tile has no blocks to take."""
    phase = "domain"


class InvalidBlockError(BlockWorldError):
    """A block cannot be used for the requested operation."""
    phase = "domain"


class NoExitError(BlockWorldError):
    """There is no usable exit in the requested direction."""
    phase = "domain"


class ActionFormatError(BlockWorldError):
    """An action line does not follow the action grammar."""
    phase = "action"
