"""Public API for tileman.

High-level functions that read a tile folder and return complete,
structured results. Callers should use these instead of importing
from _internal.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from tileman.config import DEFAULT_CONFIG, LoaderConfig
from tileman.kernel.assembler import parse_tile_init
from tileman.kernel.subfolders import collect_categories_from_subfolders
from tileman.kernel.tiles import DeserErrorReports, TileCategory, TileInit
from tileman._internal.io.init_files import read_root_init, read_subfolder_documents


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class LoadResult(BaseModel):
    """Everything loaded from one tile folder."""
    tile_init: TileInit
    subfolder_errors: Dict[str, DeserErrorReports] = Field(default_factory=dict)  # folder name -> error log

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def error_count(self) -> int:
        return len(self.tile_init.errored_lines) + sum(
            len(errors) for errors in self.subfolder_errors.values()
        )

    @property
    def ok(self) -> bool:
        """True if no line anywhere failed to parse."""
        return self.error_count == 0

    def to_report(self) -> dict:
        report = self.tile_init.to_report()
        report["subfolder_errors"] = {
            name: [{"line": line, **error.to_dict()} for line, error in errors]
            for name, errors in sorted(self.subfolder_errors.items())
        }
        return report


def collect_categories_from_directory(
    root: Union[str, os.PathLike, Path],
    config: Optional[LoaderConfig] = None,
) -> List[Tuple[TileCategory, DeserErrorReports]]:
    """Read every subfolder of ``root`` and build its category."""
    root_path = _normalize_path(root)
    config = config or DEFAULT_CONFIG
    bundles = read_subfolder_documents(root_path, config)
    return collect_categories_from_subfolders(root_path, bundles, config)


def load_tile_init(
    root: Union[str, os.PathLike, Path],
    config: Optional[LoaderConfig] = None,
) -> LoadResult:
    """Load a tile folder: subfolder categories first, then the root init.

    Raises MissingFile / DeserIOError when the root init document cannot
    be read. Problems inside documents never raise; they end up in the
    error logs of the result.
    """
    root_path = _normalize_path(root)
    config = config or DEFAULT_CONFIG

    collected = collect_categories_from_directory(root_path, config)
    text = read_root_init(root_path, config)

    tile_init = parse_tile_init(
        text,
        additional_categories=[category for category, _ in collected],
        root=root_path,
        config=config,
    )
    subfolder_errors = {
        category.subfolder.name: errors
        for category, errors in collected
        if errors
    }
    return LoadResult(tile_init=tile_init, subfolder_errors=subfolder_errors)
