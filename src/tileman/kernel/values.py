"""Value parser for the tile-init property dialect.

A property value is one of: a quoted string, a ``point(...)`` literal,
a bracketed list, or a bare integer. ``parse_value`` turns the raw text
into a small tagged union and never fails: anything it cannot read
degrades to ``Unparsed``.

Narrowing is done by the variants themselves. Every accessor on the
base class raises ``DataConvertFailed``; each variant overrides only the
accessors that make sense for it.
"""

import re
from dataclasses import dataclass

from .errors import DataConvertFailed
from .tiles import TileCell

SPLIT_COMMAS = re.compile(r"\s*,\s*")
SIGNED_INT = re.compile(r"[+-]?[0-9]+")

NULL_MARKER = "NULL"

# integers are 32-bit signed in the file format
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class Value:
    """Base of the parsed value tree."""

    kind = "Value"

    def as_integer(self) -> int:
        raise DataConvertFailed(f"{self!r} not an integer")

    def as_text(self) -> str:
        raise DataConvertFailed(f"{self!r} not a string")

    def as_point(self) -> list[int]:
        raise DataConvertFailed(f"{self!r} not a point")

    def as_list(self) -> list["Value"]:
        raise DataConvertFailed(f"{self!r} not a list")

    def as_text_list(self) -> list[str]:
        raise DataConvertFailed(f"could not build text list from {self!r}")

    def as_integer_list(self) -> list[int]:
        raise DataConvertFailed(f"could not build integer list from {self!r}")

    def as_tile_cell_list(self) -> list[TileCell]:
        """Integer list mapped onto tile cells; unknown cell codes are dropped."""
        cells = []
        for number in self.as_integer_list():
            try:
                cells.append(TileCell.from_number(number))
            except DataConvertFailed:
                continue
        return cells

    def as_null_if_zero(self) -> "Value":
        return self


@dataclass(frozen=True)
class Integer(Value):
    value: int

    kind = "Integer"

    def as_integer(self) -> int:
        return self.value

    def as_null_if_zero(self) -> Value:
        if self.value == 0:
            return Unparsed(NULL_MARKER)
        return self


@dataclass(frozen=True)
class Text(Value):
    value: str

    kind = "Text"

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class List(Value):
    items: tuple[Value, ...] = ()

    kind = "List"

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def as_list(self) -> list[Value]:
        return list(self.items)

    def as_text_list(self) -> list[str]:
        texts = []
        for item in self.items:
            try:
                texts.append(item.as_text())
            except DataConvertFailed:
                continue
        return texts

    def as_integer_list(self) -> list[int]:
        numbers = []
        for item in self.items:
            try:
                numbers.append(item.as_integer())
            except DataConvertFailed:
                continue
        return numbers


@dataclass(frozen=True)
class Point(Value):
    coords: tuple[int, ...] = ()

    kind = "Point"

    def __post_init__(self):
        object.__setattr__(self, "coords", tuple(self.coords))

    def as_point(self) -> list[int]:
        return list(self.coords)


@dataclass(frozen=True)
class Unparsed(Value):
    """No grammar rule matched; holds the trimmed original text."""
    raw: str

    kind = "Unparsed"


def split_commas(text: str, depth_aware: bool = False) -> list[str]:
    """Split on commas (and the whitespace around them).

    The default split is flat: a comma nested inside an inner list or
    point is treated as a separator like any other, which is how the
    editor's own loader reads these files. ``depth_aware=True`` only
    splits on commas outside brackets, parentheses and quotes.
    """
    if not depth_aware:
        return SPLIT_COMMAS.split(text)

    pieces = []
    depth = 0
    in_quotes = False
    start = 0
    for pos, char in enumerate(text):
        if char == '"':
            in_quotes = not in_quotes
        elif in_quotes:
            continue
        elif char in "[(":
            depth += 1
        elif char in "])":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            pieces.append(text[start:pos].strip())
            start = pos + 1
    pieces.append(text[start:].strip())
    return pieces


def parse_int(text: str) -> int | None:
    """Parse a signed 32-bit decimal integer, or return None."""
    text = text.strip()
    if not SIGNED_INT.fullmatch(text):
        return None
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_value(text: str, depth_aware: bool = False) -> Value:
    """Parse one raw property value. Never raises."""
    text = text.strip()

    if text.startswith("[") and text.endswith("]"):
        # blank pieces are dropped rather than kept as Unparsed(""); list
        # narrowing would discard them anyway, and "[]" reads as empty
        items = [
            parse_value(piece, depth_aware)
            for piece in split_commas(text[1:-1], depth_aware)
            if piece.strip()
        ]
        return List(tuple(items))

    if text.startswith("point(") and text.endswith(")"):
        coords = []
        for piece in split_commas(text[len("point("):-1], depth_aware):
            number = parse_int(piece)
            if number is not None:
                coords.append(number)
        return Point(tuple(coords))

    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return Text(text[1:-1])

    number = parse_int(text)
    if number is not None:
        return Integer(number)

    return Unparsed(text)
