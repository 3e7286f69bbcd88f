"""
Line grammar primitives for world map files.

These are the only functions that interpret raw text. Every deviation from
the grammar raises WorldMapFormatError, so the section parsers above have a
single failure mode to deal with.
"""

import re
from typing import Dict, TextIO, Tuple

from ..blockworld.errors import WorldMapFormatError
from ..blockworld.models import fits_int32


INT_PATTERN = re.compile(r'[+-]?[0-9]+')
FIELD_PATTERN = re.compile(r'([a-z]+):([0-9]+)')


class LineReader:
    """
    Reads a text stream one line at a time, never returning ``None``.

    ``line_number`` is the 1-based number of the last line handed out, so
    callers can tag errors with the line that caused them.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.line_number = 0

    def _next(self) -> str:
        try:
            raw = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise WorldMapFormatError(
                f"Could not read line {self.line_number + 1}: {exc}",
                code="READ_FAILED",
            ) from exc
        if raw:
            self.line_number += 1
        return raw

    def read_line(self) -> str:
        """Read the next line without its terminator; end of input is an error."""
        raw = self._next()
        if raw == "":
            raise WorldMapFormatError("Unexpected end of file", code="UNEXPECTED_EOF")
        return raw[:-1] if raw.endswith("\n") else raw

    def at_end(self) -> bool:
        """Consume one more line and report whether input was exhausted."""
        return self._next() == ""


def parse_int(token: str) -> int:
    """Parse a signed 32-bit decimal integer."""
    if not INT_PATTERN.fullmatch(token):
        raise WorldMapFormatError(f"Invalid integer '{token}'", code="INVALID_INTEGER")
    value = int(token)
    if not fits_int32(value):
        raise WorldMapFormatError(
            f"Integer {token} is outside the 32-bit range",
            code="INTEGER_OUT_OF_RANGE",
        )
    return value


def parse_labeled_counts(line: str, require_exactly_one: bool = False) -> Dict[str, int]:
    """
    Parse ``label:N,label:M,...`` into an ordered mapping.

    Labels are lowercase letters only, counts are non-negative, there are no
    spaces and no label repeats. An empty line is an empty mapping.
    """
    counts: Dict[str, int] = {}
    if line != "":
        for field in line.split(","):
            match = FIELD_PATTERN.fullmatch(field)
            if not match:
                raise WorldMapFormatError(f"Invalid field '{field}'", code="INVALID_FIELD")
            label = match.group(1)
            if label in counts:
                raise WorldMapFormatError(f"Repeated label '{label}'", code="DUPLICATE_LABEL")
            counts[label] = parse_int(match.group(2))

    if require_exactly_one and len(counts) != 1:
        raise WorldMapFormatError(
            f"Expected exactly one field, found {len(counts)}",
            code="FIELD_COUNT",
        )
    return counts


def parse_numbered_row(line: str) -> Tuple[int, str]:
    """Parse ``<int>`` or ``<int> <rest>`` where rest holds no spaces."""
    parts = line.split(" ")
    if len(parts) > 2:
        raise WorldMapFormatError(f"Too many spaces in row '{line}'", code="INVALID_ROW")
    number = parse_int(parts[0])
    rest = parts[1] if len(parts) == 2 else ""
    return number, rest
