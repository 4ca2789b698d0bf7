import plistlib
import re

import atlas2plist_config as config
from utils.atlas_models import AtlasFrame, AtlasSheet, Point, Size

# Characters XML 1.0 cannot carry; plistlib refuses them.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _clean(text):
    return _CONTROL_CHARS_RE.sub("", text)


def _format_pair(a, b):
    return f"{{{a},{b}}}"


def _format_size(size: Size):
    return _format_pair(size.width, size.height)


def _format_rect(position: Point, size: Size):
    return f"{{{_format_pair(position.x, position.y)},{_format_size(size)}}}"


def _frame_entry(frame: AtlasFrame):
    offset_x, offset_y = frame.sprite_offset
    return {
        "aliases": [],
        "spriteOffset": _format_pair(offset_x, offset_y),
        "spriteSize": _format_size(frame.packed_size),
        "spriteSourceSize": _format_size(frame.original_size),
        "textureRect": _format_rect(frame.packed_position, frame.packed_size),
        "textureRotated": frame.rotated,
    }


def _metadata_entry(sheet: AtlasSheet):
    return {
        "format": config.PLIST_FORMAT_VERSION,
        "pixelFormat": _clean(sheet.pixel_format),
        "premultiplyAlpha": False,
        "realTextureFileName": _clean(sheet.image_name),
        "size": _format_size(sheet.canvas_size),
        "smartupdate": config.SMART_UPDATE_SIGNATURE,
        "textureFileName": _clean(sheet.image_name),
    }


def build_plist_tree(sheet: AtlasSheet) -> dict:
    """
    Build the plist document for a sheet as plain dicts, lists and scalars.

    Frames keep the sheet's order. Geometry values are plist strings in the
    "{x,y}" / "{{x,y},{w,h}}" notation used by TexturePacker format 3.
    """
    frames = {}
    for frame in sheet.frames:
        frames[f"{_clean(frame.name)}{config.IMAGE_EXTENSION}"] = _frame_entry(frame)
    return {
        "frames": frames,
        "metadata": _metadata_entry(sheet),
    }


def emit_plist(sheet: AtlasSheet) -> str:
    """Serialize a sheet as plist XML text."""
    data = plistlib.dumps(build_plist_tree(sheet), fmt=plistlib.FMT_XML, sort_keys=False)
    return data.decode(config.TEXT_ENCODING)
