"""Document assembler: turns a root init document into ordered categories.

The scan is a fold over the document's lines. The state is the category
currently being filled (or None before the first header), the finalized
categories, and the error log. Bad lines are logged and skipped; the
scan itself never fails.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from tileman.config import DEFAULT_CONFIG, LoaderConfig

from .category_header import parse_category_header
from .errors import DeserError
from .tile_record import parse_tile_info
from .tiles import UNSET_INDEX, DeserErrorReports, TileCategory, TileInfo, TileInit

logger = logging.getLogger(__name__)

HEADER_PREFIX = "-["
COMMENT_PREFIX = "--"


def document_lines(text: str) -> Iterable[str]:
    """Lines that carry content: no blanks, no ``--`` comments."""
    for line in text.splitlines():
        if line.startswith(COMMENT_PREFIX) or not line.strip():
            continue
        yield line


@dataclass
class AssemblyState:
    current: Optional[TileCategory] = None
    categories: List[TileCategory] = field(default_factory=list)
    errored_lines: DeserErrorReports = field(default_factory=list)


def _find_header_match(header: TileCategory, candidates: Sequence[TileCategory]) -> Optional[TileCategory]:
    for candidate in candidates:
        if candidate.same_header(header):
            return candidate
    return None


def _add_or_replace_tile(category: TileCategory, tile: TileInfo) -> None:
    for position, existing in enumerate(category.tiles):
        if existing == tile:
            category.tiles[position] = tile
            return
    category.tiles.append(tile)


def fold_line(
    state: AssemblyState,
    line: str,
    additional_categories: Sequence[TileCategory],
    config: LoaderConfig = DEFAULT_CONFIG,
) -> AssemblyState:
    """Advance the assembly by one content line."""
    if line.startswith(HEADER_PREFIX):
        try:
            header = parse_category_header(line)
        except DeserError as err:
            state.errored_lines.append((line, err))
            return state

        previous = _find_header_match(header, additional_categories)
        if previous is not None:
            header.subfolder = previous.subfolder
            header.tiles = [tile.model_copy(deep=True) for tile in previous.tiles]

        if state.current is not None:
            state.categories.append(state.current)
        state.current = header
        return state

    try:
        tile = parse_tile_info(line, True, config.depth_aware_lists)
    except DeserError as err:
        state.errored_lines.append((line, err))
        return state

    # tiles before the first header have nowhere to go
    if state.current is not None:
        _add_or_replace_tile(state.current, tile)
    return state


def assign_unset_indices(categories: List[TileCategory]) -> None:
    """Categories without an explicit index take their list position."""
    for position, category in enumerate(categories):
        if category.index == UNSET_INDEX:
            category.index = position


def parse_tile_init(
    text: str,
    additional_categories: Sequence[TileCategory] = (),
    root: Path = Path("."),
    config: Optional[LoaderConfig] = None,
) -> TileInit:
    """Assemble a root init document.

    ``additional_categories`` (usually collected from subfolders) are used
    twice: a header matching one of them inherits its subfolder and tiles,
    and the ones no header matched are appended after the document's own
    categories. A document without any header yields no categories at all.
    """
    config = config or DEFAULT_CONFIG
    additional_categories = list(additional_categories)

    state = AssemblyState()
    for line in document_lines(text):
        state = fold_line(state, line, additional_categories, config)

    if state.current is None:
        logger.debug("no categories in init document under %s", root)
        return TileInit(root=root, categories=[], errored_lines=state.errored_lines)
    state.categories.append(state.current)

    found = list(state.categories)
    for extra in additional_categories:
        if _find_header_match(extra, found) is None:
            state.categories.append(extra.model_copy(deep=True))

    assign_unset_indices(state.categories)
    tile_init = TileInit(root=root, categories=state.categories, errored_lines=state.errored_lines)
    tile_init.sort_and_normalize_categories()
    logger.debug(
        "loaded %d categories (%d errored lines) from %s",
        len(tile_init.categories), len(tile_init.errored_lines), root,
    )
    return tile_init
