"""Git subprocess helpers used for advisory checks."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def is_file_ignored_by_git(cwd: Path, file_path: Path) -> bool:
    """Check whether git's ignore rules cover file_path.

    Runs ``git check-ignore`` from cwd. Exit code 0 means the file is ignored;
    any other outcome, including git not being installed or cwd not being in
    a repository, is reported as not ignored.

    Args:
        cwd: Directory to run git from
        file_path: File to check

    Returns:
        True only if git confirmed the file is ignored
    """
    try:
        result = subprocess.run(
            ["git", "check-ignore", "--quiet", str(file_path)],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except (FileNotFoundError, OSError) as e:
        logger.debug(f"git check-ignore unavailable: {e}")
        return False

    return result.returncode == 0
