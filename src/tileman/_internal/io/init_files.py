"""Filesystem helpers for tile folders (internal).

The kernel only ever sees text; these functions do the reading.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from tileman.config import DEFAULT_CONFIG, LoaderConfig
from tileman.kernel.errors import DeserIOError, MissingFile
from tileman.kernel.subfolders import SubfolderDocuments

logger = logging.getLogger(__name__)


def read_root_init(root: Union[str, Path], config: LoaderConfig = DEFAULT_CONFIG) -> str:
    """Read the root init document (raises MissingFile / DeserIOError)."""
    init_path = Path(root) / config.init_filename
    if not init_path.is_file():
        raise MissingFile(f"Missing {config.init_filename} in {Path(root)}", {"path": init_path})
    try:
        return init_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DeserIOError(f"Could not read {init_path}: {e}", {"path": init_path}) from e


def _read_optional(path: Path, encoding: str) -> Optional[str]:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def read_subfolder_documents(
    root: Union[str, Path],
    config: LoaderConfig = DEFAULT_CONFIG,
) -> Dict[str, SubfolderDocuments]:
    """Read init/color documents of every direct subdirectory of ``root``.

    Subdirectories without a readable init document map to
    ``SubfolderDocuments(None)``. An unreadable root yields no entries.
    """
    root_path = Path(root)
    bundles: Dict[str, SubfolderDocuments] = {}
    try:
        entries = sorted(root_path.iterdir())
    except OSError as e:
        logger.warning("Could not list %s: %s", root_path, e)
        return bundles

    for entry in entries:
        if not entry.is_dir():
            continue
        bundles[entry.name] = SubfolderDocuments(
            init_text=_read_optional(entry / config.init_filename, config.encoding),
            color_text=_read_optional(entry / config.color_filename, config.encoding),
        )
    return bundles
