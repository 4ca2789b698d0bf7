"""Atlas file parsing utilities for atlas2plist."""
import re
from dataclasses import replace
from typing import List, Optional, Tuple

from utils.atlas_models import AtlasFrame, AtlasSheet, Point, Size
from utils.file_operations import read_text

# Header lines, in the order they must appear
_IMAGE_NAME_RE = re.compile(r'(\S(?:.*\S)?\.png)')
_CANVAS_SIZE_RE = re.compile(r'size:[ \t]*(\d+)[ \t]*,[ \t]*(\d+)')
_FORMAT_RE = re.compile(r'format:[ \t]*(\S+)')
_FILTER_RE = re.compile(r'filter:[ \t]*(\w+(?:[ \t]*,[ \t]*\w+)*)')
_REPEAT_RE = re.compile(r'repeat:[ \t]*(\S+)')

# Frame block fields, following the frame name line
_ROTATE_RE = re.compile(r'rotate:[ \t]*(\S+)')
_XY_RE = re.compile(r'xy:[ \t]*(\d+)[ \t]*,[ \t]*(\d+)')
_SIZE_RE = re.compile(r'size:[ \t]*(\d+)[ \t]*,[ \t]*(\d+)')
_ORIG_RE = re.compile(r'orig:[ \t]*(\d+)[ \t]*,[ \t]*(\d+)')
_OFFSET_RE = re.compile(r'offset:[ \t]*(\d+)[ \t]*,[ \t]*(\d+)')
_INDEX_RE = re.compile(r'index:[ \t]*(-?\d+)')

_HEADER_PATTERNS = (_IMAGE_NAME_RE, _CANVAS_SIZE_RE, _FORMAT_RE, _FILTER_RE, _REPEAT_RE)
_FRAME_FIELD_PATTERNS = (_ROTATE_RE, _XY_RE, _SIZE_RE, _ORIG_RE, _OFFSET_RE, _INDEX_RE)
FRAME_BLOCK_LINES = 1 + len(_FRAME_FIELD_PATTERNS)


def _content_lines(text: str) -> List[str]:
    """Split text into stripped, non-blank lines."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    return [line.strip() for line in lines if line.strip()]


def _match_lines(lines: List[str], start: int, patterns: Tuple[re.Pattern, ...]) -> Optional[List[re.Match]]:
    """Match consecutive lines starting at `start` against `patterns`, all or nothing."""
    if start + len(patterns) > len(lines):
        return None
    matches = []
    for offset, pattern in enumerate(patterns):
        match = pattern.fullmatch(lines[start + offset])
        if match is None:
            return None
        matches.append(match)
    return matches


def _parse_header(lines: List[str]) -> Optional[AtlasSheet]:
    matches = _match_lines(lines, 0, _HEADER_PATTERNS)
    if matches is None:
        return None
    image, canvas, pixel_format, filter_mode, repeat = matches
    return AtlasSheet(
        image_name=image.group(1),
        canvas_size=Size(int(canvas.group(1)), int(canvas.group(2))),
        pixel_format=pixel_format.group(1),
        filter_mode=filter_mode.group(1),
        repeat_mode=repeat.group(1),
    )


def _parse_frame(lines: List[str], start: int) -> Optional[AtlasFrame]:
    """Try to read one frame block whose name line is lines[start]."""
    fields = _match_lines(lines, start + 1, _FRAME_FIELD_PATTERNS)
    if fields is None:
        return None
    rotate, xy, size, orig, offset, index = fields
    return AtlasFrame(
        name=lines[start],
        # Only the exact token counts; "True", "90", etc. are not rotated.
        rotated=rotate.group(1) == 'true',
        packed_position=Point(int(xy.group(1)), int(xy.group(2))),
        packed_size=Size(int(size.group(1)), int(size.group(2))),
        original_size=Size(int(orig.group(1)), int(orig.group(2))),
        trim_offset=Point(int(offset.group(1)), int(offset.group(2))),
        index=int(index.group(1)),
    )


def _scan_frames(lines: List[str]) -> List[AtlasFrame]:
    frames = []
    position = 0
    while position < len(lines):
        frame = _parse_frame(lines, position)
        if frame is None:
            position += 1
            continue
        frames.append(frame)
        position += FRAME_BLOCK_LINES
    return frames


def parse_atlas(text: str) -> Optional[AtlasSheet]:
    """
    Parse atlas text into an AtlasSheet.

    The five header lines must be the first non-blank lines of the text.
    Frame blocks are then collected in source order; a block with a missing
    or malformed field is skipped without any report.

    Args:
        text: Full contents of a .atlas file

    Returns:
        The parsed sheet, or None if the text is not a recognized atlas
    """
    lines = _content_lines(text)
    sheet = _parse_header(lines)
    if sheet is None:
        return None

    return replace(sheet, frames=tuple(_scan_frames(lines)))


def parse_atlas_file(atlas_path: str) -> Tuple[Optional[AtlasSheet], Optional[str]]:
    """
    Read and parse a .atlas file.

    Args:
        atlas_path: Path to the .atlas file

    Returns:
        Tuple of (sheet, error message)
        If the file could not be read, returns (None, error_message)
        If the file is not a recognized atlas, returns (None, None)
    """
    content, error = read_text(atlas_path)
    if error:
        return None, error
    return parse_atlas(content), None
