"""File operation utilities for atlas2plist."""
import os
from typing import List, Optional, Tuple

import atlas2plist_config as config


def read_text(path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Read a whole text file.

    Args:
        path: Path to the file

    Returns:
        Tuple of (content, error message)
        If successful, returns (content, None)
        If failed, returns (None, error_message)
    """
    try:
        with open(path, 'r', encoding=config.TEXT_ENCODING) as f:
            return f.read(), None
    except FileNotFoundError:
        return None, f"File not found at {path}"
    except (OSError, UnicodeDecodeError) as e:
        return None, f"Error reading {path}: {e}"


def write_text(path: str, content: str) -> Tuple[bool, Optional[str]]:
    """
    Write text to a file, replacing any existing content.

    Returns:
        Tuple of (success, error message)
    """
    try:
        with open(path, 'w', encoding=config.TEXT_ENCODING) as f:
            f.write(content)
        return True, None
    except OSError as e:
        return False, f"Error writing {path}: {e}"


def list_files_recursively(root: str) -> List[str]:
    """
    Get every file below a directory, in a stable walk order.

    Args:
        root: Directory to search

    Returns:
        List of file paths
    """
    files = []
    for current_dir, dirs, filenames in os.walk(root):
        dirs.sort()
        for filename in sorted(filenames):
            files.append(os.path.join(current_dir, filename))
    return files


def is_atlas_file(path: str) -> bool:
    return path.lower().endswith(config.ATLAS_EXTENSION)


def plist_path_for(atlas_path: str, plist_file_name: str) -> str:
    """Place the plist in the same directory as the atlas it came from."""
    return os.path.join(os.path.dirname(atlas_path), plist_file_name)
