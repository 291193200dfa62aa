"""Upward directory search for marker files."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _has_marker(directory: Path, marker_name: str) -> bool:
    try:
        return (directory / marker_name).is_file()
    except OSError as e:
        # Unreadable directories count as not containing the marker
        logger.debug(f"Skipping {directory} while looking for {marker_name}: {e}")
        return False


def find_up(start_dir: Path, marker_name: str) -> Optional[Path]:
    """Walk up from start_dir to the filesystem root looking for marker_name.

    The start directory is normalised first, so ``..`` segments never lead
    the walk into a sibling directory.

    Args:
        start_dir: Directory to begin the search in (inclusive)
        marker_name: Name of the marker file to look for

    Returns:
        Absolute path of the nearest directory containing the marker, or None
    """
    current = Path(os.path.abspath(start_dir))

    while True:
        if _has_marker(current, marker_name):
            logger.debug(f"Found {marker_name} in {current}")
            return current

        if current == current.parent:
            return None
        current = current.parent


def find_file(start_dir: Path, marker_name: str) -> Optional[Path]:
    """Return the path of the nearest marker file above start_dir, if any."""
    directory = find_up(start_dir, marker_name)
    if directory is None:
        return None
    return directory / marker_name
