"""Immutable data model for parsed atlas files."""
from dataclasses import dataclass
from typing import Tuple, Union

import atlas2plist_config as config

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class AtlasFrame:
    """
    One packed sprite from an atlas.

    Attributes:
        name: Sprite identifier without extension
        rotated: True if the packer stored the sprite rotated 90 degrees
        packed_position: Top-left placement within the canvas
        packed_size: Dimensions as stored in the canvas (trimmed)
        original_size: Dimensions before transparent edges were trimmed
        trim_offset: Offset of the trimmed content from the original top-left
        index: Packer ordering hint, -1 when unused
    """
    name: str
    rotated: bool
    packed_position: Point
    packed_size: Size
    original_size: Size
    trim_offset: Point
    index: int = -1

    @property
    def sprite_offset(self) -> Tuple[Number, Number]:
        """Trim offset moved from the top-left corner to the sprite centre."""
        offset_x = self.trim_offset.x + self.packed_size.width / 2 - self.original_size.width / 2
        offset_y = self.trim_offset.y + self.packed_size.height / 2 - self.original_size.height / 2
        return _whole(offset_x), _whole(offset_y)


@dataclass(frozen=True)
class AtlasSheet:
    """One parsed atlas file: the page header plus its frames in source order."""
    image_name: str
    canvas_size: Size
    pixel_format: str
    filter_mode: str
    repeat_mode: str
    frames: Tuple[AtlasFrame, ...] = ()

    @property
    def plist_file_name(self) -> str:
        base_name = self.image_name
        if base_name.endswith(config.IMAGE_EXTENSION):
            base_name = base_name[:-len(config.IMAGE_EXTENSION)]
        return base_name + config.PLIST_EXTENSION


def _whole(value: float) -> Number:
    # 0.0 and -0.0 both collapse to 0
    return int(value) if value == int(value) else value
