"""Pydantic models for tile definitions, categories and the loaded init."""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import DataConvertFailed, DeserError, InvalidValue

# (raw line, error) pairs, in encounter order
DeserErrorReports = List[Tuple[str, DeserError]]

UNSET_INDEX = 0


class TileCell(IntEnum):
    """Geometry code of one cell in a tile's spec grid."""
    ANY = -1
    AIR = 0
    WALL = 1
    SLOPE_NE = 2
    SLOPE_NW = 3
    SLOPE_ES = 4
    SLOPE_SW = 5
    FLOOR = 6
    SHORTCUT_ENTRANCE = 7
    GLASS = 9

    @classmethod
    def from_number(cls, number: int) -> "TileCell":
        try:
            return cls(number)
        except ValueError:
            raise DataConvertFailed(f"{number} is not a tile cell code") from None


class TileType(str, Enum):
    """Rendering mode of a tile, as named in the init file."""
    BOX = "box"
    VOXEL_STRUCT = "voxelStruct"
    VOXEL_STRUCT_RANDOM_DISPLACE_HORIZONTAL = "voxelStructRandomDisplaceHorizontal"
    VOXEL_STRUCT_RANDOM_DISPLACE_VERTICAL = "voxelStructRandomDisplaceVertical"
    VOXEL_STRUCT_ROCK_TYPE = "voxelStructRockType"
    VOXEL_STRUCT_SAND_TYPE = "voxelStructSandType"

    @classmethod
    def from_string(cls, name: str) -> "TileType":
        try:
            return cls(name)
        except ValueError:
            raise InvalidValue(f"unknown tile type '{name}'", {"tp": name}) from None


class TileInfo(BaseModel):
    """One tile definition.

    Equality is whole-record: two tiles are the same tile only when
    every field matches.
    """
    name: str
    size: List[int]
    specs: List[TileCell]
    specs2: Optional[List[TileCell]] = None
    tile_type: TileType
    repeat_layers: Optional[List[int]] = None
    buffer_tiles: int
    random_vars: Optional[int] = None
    preview_pos: int
    tags: List[str] = Field(default_factory=list)
    active: bool = False

    model_config = ConfigDict(extra="forbid")

    def to_report(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class TileCategory(BaseModel):
    """A named, colored, ordered group of tiles.

    ``index`` 0 means "not set"; the assembler replaces it with the
    category's position before ordering.
    """
    name: str
    color: Tuple[int, int, int]
    index: int = UNSET_INDEX
    tiles: List[TileInfo] = Field(default_factory=list)
    subfolder: Optional[Path] = None
    enabled: bool = True

    model_config = ConfigDict(extra="forbid")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        """Each channel is a byte."""
        for channel in v:
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel {channel} out of range 0..255")
        return v

    @classmethod
    def new_main(cls, name: str, color, index: int = UNSET_INDEX) -> "TileCategory":
        """An enabled category with no tiles and no subfolder."""
        return cls(name=name, color=tuple(color), index=index)

    def same_header(self, other: "TileCategory") -> bool:
        """Identity used when merging categories from different documents.

        Compares what a header line declares (name, color, index); tiles,
        subfolder and enabled state are what a merge carries over. ``==``
        stays whole-record; it could never match a header against a
        subfolder category.
        """
        return (
            self.name == other.name
            and tuple(self.color) == tuple(other.color)
            and self.index == other.index
        )

    def to_report(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "color": list(self.color),
            "index": self.index,
            "enabled": self.enabled,
            "subfolder": self.subfolder.as_posix() if self.subfolder else None,
            "tiles": [tile.to_report() for tile in self.tiles],
        }


class TileInit(BaseModel):
    """Result of loading a root init document."""
    root: Path
    categories: List[TileCategory] = Field(default_factory=list)
    errored_lines: DeserErrorReports = Field(default_factory=list)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def sort_and_normalize_categories(self) -> None:
        """Put categories in display order and make their indices unique.

        Stable sort on index (ties keep list order), then every index
        that does not exceed its predecessor's is bumped past it. Running
        this twice changes nothing.
        """
        ordered = sorted(enumerate(self.categories), key=lambda pair: (pair[1].index, pair[0]))
        categories = []
        previous: Optional[int] = None
        for _, category in ordered:
            if previous is not None and category.index <= previous:
                category = category.model_copy(update={"index": previous + 1})
            categories.append(category)
            previous = category.index
        self.categories = categories

    def get_category(self, name: str) -> Optional[TileCategory]:
        """Get first category by name."""
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def to_report(self) -> Dict[str, Any]:
        return {
            "root": self.root.as_posix(),
            "categories": [category.to_report() for category in self.categories],
            "errored_lines": [
                {"line": line, **error.to_dict()} for line, error in self.errored_lines
            ],
        }
