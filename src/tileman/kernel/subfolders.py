"""Subfolder collector: one supplemental category per tile subfolder.

Each subfolder holds its own init document and an optional color file.
The category it produces is disabled, remembers its folder, and is fed
to the document assembler as an additional category.

Two behaviours differ from the root assembler and are kept on purpose
until the file format settles them: every header line in a subfolder
document overwrites the category's name and color (not just the first
one), and tiles are always appended, even when an equal tile is already
present. A line ending in ``--CATEGORY_INDEX:<n>`` only sets the index;
if it is also a header, its name and color are ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from tileman.config import DEFAULT_CONFIG, LoaderConfig

from .assembler import HEADER_PREFIX, document_lines
from .category_header import find_category_index, parse_byte_channels, parse_category_header
from .errors import DeserError
from .tile_record import parse_tile_info
from .tiles import UNSET_INDEX, DeserErrorReports, TileCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubfolderDocuments:
    """Already-read documents of one subfolder."""
    init_text: Optional[str]
    color_text: Optional[str] = None


def parse_subfolder_color(color_text: Optional[str], default=(255, 0, 0)) -> Tuple[int, int, int]:
    """Read ``r,g,b`` from a color file; missing channels take the default's."""
    if color_text is None:
        return tuple(default)
    channels = parse_byte_channels(color_text)
    return tuple(
        channels[position] if position < len(channels) else default[position]
        for position in range(3)
    )


def parse_subfolder_category(
    name: str,
    documents: SubfolderDocuments,
    root: Path,
    config: Optional[LoaderConfig] = None,
) -> Tuple[TileCategory, DeserErrorReports]:
    """Build the category for one subfolder from its init document."""
    config = config or DEFAULT_CONFIG
    color = parse_subfolder_color(documents.color_text, config.default_subfolder_color)
    category = TileCategory.new_main(name, color, UNSET_INDEX)
    category.enabled = False
    category.subfolder = root / name
    errors: DeserErrorReports = []

    for line in document_lines(documents.init_text or ""):
        index = find_category_index(line)
        if index is not None:
            # a marker line only sets the index, even when it is also a header
            category.index = index
        elif line.startswith(HEADER_PREFIX):
            try:
                header = parse_category_header(line)
            except DeserError as err:
                errors.append((line, err))
                continue
            category.name = header.name
            category.color = header.color
        else:
            try:
                category.tiles.append(parse_tile_info(line, True, config.depth_aware_lists))
            except DeserError as err:
                errors.append((line, err))

    logger.debug(
        "subfolder %s: %d tiles, %d errored lines", name, len(category.tiles), len(errors)
    )
    return category, errors


def collect_categories_from_subfolders(
    root: Path,
    bundles: Mapping[str, SubfolderDocuments],
    config: Optional[LoaderConfig] = None,
) -> List[Tuple[TileCategory, DeserErrorReports]]:
    """Build categories for every subfolder that has an init document.

    Folders are processed in name order so the result does not depend on
    how the directory listing was ordered.
    """
    results = []
    for name in sorted(bundles):
        documents = bundles[name]
        if documents.init_text is None:
            logger.debug("subfolder %s has no init document, skipping", name)
            continue
        results.append(parse_subfolder_category(name, documents, root, config))
    return results
