"""Tile property extractor.

A tile record is one line of ``#key:value`` properties, e.g.::

    [#nm:"Big Pipe", #sz:point(2,2), #specs:[1,1,1,1], #specs2:0, #tp:"voxelStruct",
     #repeatL:[1,9], #bfTiles:1, #rnd:1, #ptPos:60, #tags:["notTrashProp"]]
"""

import re
from operator import methodcaller
from typing import Callable, Dict, List, Tuple, TypeVar

from .errors import DataConvertFailed, DeserError, TypeMismatch
from .tiles import DeserErrorReports, TileInfo, TileType
from .values import Value, parse_value

# group 1 is the property name, group 2 the raw value (fed to parse_value)
PROPERTY_PATTERN = re.compile(
    r'\#(\w+):("[\\\w\d\s+_-]*?"|point\([\s\d,-]*?\)|\[\s*((\s*?,?\s*?(-?\d+|"[\w\d\s]*?"))*?)\s*\]|\d+)'
)

MISSING_PLACEHOLDER = "WARNING: MISSING ITEM {key}"

T = TypeVar("T")


def scan_properties(line: str) -> Dict[str, str]:
    """Collect ``#key:value`` pairs from a line; the last occurrence of a key wins."""
    properties: Dict[str, str] = {}
    for match in PROPERTY_PATTERN.finditer(line):
        properties[match.group(1)] = match.group(2)
    return properties


def _required(value: Value, key: str, expected: str, narrow: Callable[[Value], T]) -> T:
    try:
        return narrow(value)
    except DataConvertFailed:
        raise TypeMismatch(key=key, expected=expected, actual=repr(value)) from None


def _optional(value: Value, narrow: Callable[[Value], T]) -> T | None:
    try:
        return narrow(value)
    except DataConvertFailed:
        return None


def parse_tile_info(line: str, from_vanilla: bool, depth_aware: bool = False) -> TileInfo:
    """Build one TileInfo from a record line.

    Required properties are checked in field order and the first one that
    does not hold the expected kind of value raises TypeMismatch. Optional
    properties fall back to None; tags fall back to an empty list.
    """
    raw = scan_properties(line)

    def prop(key: str) -> Value:
        return parse_value(raw.get(key, MISSING_PLACEHOLDER.format(key=key)), depth_aware)

    name = _required(prop("nm"), "nm", "Text", methodcaller("as_text"))
    size = _required(prop("sz"), "sz", "Point", methodcaller("as_point"))
    specs = _required(prop("specs"), "specs", "List", methodcaller("as_tile_cell_list"))
    specs2 = _optional(prop("specs2").as_null_if_zero(), methodcaller("as_tile_cell_list"))
    tile_type = TileType.from_string(_required(prop("tp"), "tp", "Text", methodcaller("as_text")))
    repeat_layers = _optional(prop("repeatL"), methodcaller("as_integer_list"))
    buffer_tiles = _required(prop("bfTiles"), "bfTiles", "Integer", methodcaller("as_integer"))
    random_vars = _optional(prop("rnd"), methodcaller("as_integer"))
    preview_pos = _required(prop("ptPos"), "ptPos", "Integer", methodcaller("as_integer"))
    tags = _optional(prop("tags"), methodcaller("as_text_list")) or []

    return TileInfo(
        name=name,
        size=size,
        specs=specs,
        specs2=specs2,
        tile_type=tile_type,
        repeat_layers=repeat_layers,
        buffer_tiles=buffer_tiles,
        random_vars=random_vars,
        preview_pos=preview_pos,
        tags=tags,
        active=from_vanilla,
    )


def parse_tile_info_multiple(text: str, depth_aware: bool = False) -> Tuple[List[TileInfo], DeserErrorReports]:
    """Parse a loose list of tile records (no category headers).

    Lines starting with ``-`` and blank lines are skipped. Tiles are
    marked inactive since they do not come from the base init.
    """
    tiles: List[TileInfo] = []
    errors: DeserErrorReports = []
    for line in text.splitlines():
        if line.startswith("-") or not line.strip():
            continue
        try:
            tiles.append(parse_tile_info(line, False, depth_aware))
        except DeserError as err:
            errors.append((line, err))
    return tiles, errors
