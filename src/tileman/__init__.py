"""tileman: tile-init loader for the level editor's tile folders."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tileman")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from tileman.api import load_tile_init, collect_categories_from_directory, LoadResult
from tileman.config import LoaderConfig
from tileman.codes import DeserErrorCode
from tileman.kernel.tiles import TileCategory, TileInfo, TileInit

__all__ = [
    "__version__",
    "load_tile_init",
    "collect_categories_from_directory",
    "LoadResult",
    "LoaderConfig",
    "DeserErrorCode",
    "TileCategory",
    "TileInfo",
    "TileInit",
]
