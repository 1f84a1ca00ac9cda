"""Loader configuration."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class LoaderConfig(BaseModel):
    """Options for reading a tile folder.

    ``depth_aware_lists`` switches list/point splitting to only split on
    top-level commas. It is off by default because the editor reads
    nested commas as separators, and files are written against that.
    """
    init_filename: str = "init.txt"
    color_filename: str = "color.txt"
    default_subfolder_color: Tuple[int, int, int] = Field(
        (255, 0, 0), description="Per-channel fallback when a subfolder color is missing or short"
    )
    depth_aware_lists: bool = False
    encoding: str = "utf-8"

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_CONFIG = LoaderConfig()
