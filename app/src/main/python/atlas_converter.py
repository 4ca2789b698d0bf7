import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

from tqdm import tqdm

import atlas2plist_config as config
from plist_writer.plist_writer import emit_plist
from utils.atlas_operations import parse_atlas, parse_atlas_file
from utils.file_operations import is_atlas_file, list_files_recursively, plist_path_for, write_text

CONVERTED = "converted"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass(frozen=True)
class SingleFile:
    path: str


@dataclass(frozen=True)
class DirectoryTree:
    root: str


Target = Union[SingleFile, DirectoryTree]


@dataclass
class ConversionResult:
    atlas_path: str
    status: str
    message: str
    plist_path: Optional[str] = None


@dataclass
class ConversionSummary:
    results: List[ConversionResult] = field(default_factory=list)

    def count(self, status):
        return sum(1 for r in self.results if r.status == status)

    @property
    def success(self):
        return self.count(FAILED) == 0

    def describe(self):
        return (f"Converted {self.count(CONVERTED)} atlas file(s), "
                f"skipped {self.count(SKIPPED)}, failed {self.count(FAILED)}.")


def resolve_target(path: str) -> Target:
    """Pick directory mode for an existing directory, single-file mode otherwise."""
    if os.path.isdir(path):
        return DirectoryTree(path)
    return SingleFile(path)


def convert_atlas_text(text: str) -> Optional[str]:
    """Convert atlas text to plist XML, or None if the text is not an atlas."""
    sheet = parse_atlas(text)
    if sheet is None:
        return None
    return emit_plist(sheet)


def convert_atlas_file(atlas_path: str, progress_callback=tqdm.write) -> ConversionResult:
    """Convert one .atlas file, writing the plist next to it."""
    progress_callback(f"  Parsing atlas file: {atlas_path}")
    sheet, error = parse_atlas_file(atlas_path)
    if error:
        message = f"FAILED: {error}"
        progress_callback(f"  {message}")
        return ConversionResult(atlas_path, FAILED, message)
    if sheet is None:
        message = f"SKIPPING: {atlas_path} is not a recognized atlas."
        progress_callback(f"  {message}")
        return ConversionResult(atlas_path, SKIPPED, message)

    progress_callback(f"  Parsed {len(sheet.frames)} frames for {sheet.image_name}.")
    plist_path = plist_path_for(atlas_path, sheet.plist_file_name)
    success, error = write_text(plist_path, emit_plist(sheet))
    if not success:
        message = f"FAILED: {error}"
        progress_callback(f"  {message}")
        return ConversionResult(atlas_path, FAILED, message)

    message = f"Wrote plist file to: {plist_path}"
    progress_callback(f"  {message}")
    return ConversionResult(atlas_path, CONVERTED, message, plist_path)


def convert_directory(root: str, progress_callback=tqdm.write, show_progress=True) -> ConversionSummary:
    """Convert every .atlas file below `root`. A failed file does not stop the run."""
    progress_callback(f"\n--- Scanning Directory: {root} ---")
    atlas_files = [p for p in list_files_recursively(root) if is_atlas_file(p)]
    progress_callback(f"  Found {len(atlas_files)} atlas file(s).")

    summary = ConversionSummary()
    for atlas_path in tqdm(atlas_files, desc=config.PROGRESS_DESCRIPTION, disable=not show_progress):
        summary.results.append(convert_atlas_file(atlas_path, progress_callback))
    return summary


def convert_path(path: str, progress_callback=tqdm.write, show_progress=True) -> ConversionSummary:
    target = resolve_target(path)
    if isinstance(target, DirectoryTree):
        return convert_directory(target.root, progress_callback, show_progress)
    return ConversionSummary([convert_atlas_file(target.path, progress_callback)])
