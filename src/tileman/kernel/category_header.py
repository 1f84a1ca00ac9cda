"""Category header parser.

A header line looks like::

    -["Pipes", color(10, 20, 30)]--CATEGORY_INDEX:2
"""

import logging
import re
from typing import List, Optional

from .errors import RegexMatchFailed
from .tiles import UNSET_INDEX, TileCategory
from .values import split_commas

logger = logging.getLogger(__name__)

CATEGORY_PATTERN = re.compile(r'"(.+?)"\s*?,\s*?color\((.+?)\)')
CATEGORY_INDEX_PATTERN = re.compile(r"--CATEGORY_INDEX:(\d+)$")


def parse_byte_channels(text: str) -> List[int]:
    """Comma-separated byte values; pieces that are not 0..255 are dropped."""
    channels = []
    for piece in split_commas(text.strip()):
        piece = piece.strip()
        if piece.isascii() and piece.isdigit() and int(piece) <= 255:
            channels.append(int(piece))
    return channels


def find_category_index(line: str) -> Optional[int]:
    """Value of a trailing ``--CATEGORY_INDEX:<n>`` marker, if the line has one."""
    match = CATEGORY_INDEX_PATTERN.search(line)
    if match is None:
        return None
    return int(match.group(1))


def parse_category_header(line: str) -> TileCategory:
    """Parse a header line into an enabled, empty category.

    Only the first three color channels are used; missing ones are 0.
    Raises RegexMatchFailed when the line has no ``"name", color(...)``.
    """
    match = CATEGORY_PATTERN.search(line)
    if match is None:
        raise RegexMatchFailed(f"not a category header: {line!r}")

    name = match.group(1)
    channels = parse_byte_channels(match.group(2)) + [0, 0, 0]
    color = tuple(channels[:3])
    index = find_category_index(line)
    if index is None:
        index = UNSET_INDEX

    logger.debug("%s %s (%s)", list(color), name, line)
    return TileCategory.new_main(name, color, index)
