"""Local branch state, persisted in a plain text branch file.

The branch file holds the slug of the active branch followed by a newline.
It lives at the root of a local checkout and is discovered by walking up
from the working directory, so every command run anywhere below that root
sees the same active branch. A missing or empty file means no branch is
active, which is the common case.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from knock_cli.core.errors import BranchFileError, NoActiveBranchError
from knock_cli.core.finder import find_file
from knock_cli.utils.git import is_file_ignored_by_git

logger = logging.getLogger(__name__)

BRANCH_FILE_NAME = ".knock_branch"

_SLUG_RE = re.compile(r"^[\w-]+$")


class BranchStore:
    """Reads and writes the active branch slug for a working directory.

    Attributes:
        cwd: Directory the branch file search starts from
    """

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = Path(cwd) if cwd else Path.cwd()

    @staticmethod
    def has_branch_file(directory: Path) -> bool:
        """Check for a branch file in exactly this directory (no upward search)."""
        return (Path(directory) / BRANCH_FILE_NAME).is_file()

    def find_branch_file(self) -> Optional[Path]:
        """Locate the nearest branch file at or above cwd."""
        return find_file(self.cwd, BRANCH_FILE_NAME)

    def current_branch_slug(self) -> Optional[str]:
        """Return the active branch slug, or None when no branch is active.

        Raises:
            BranchFileError: If the branch file exists but cannot be read
        """
        branch_file = self.find_branch_file()
        if branch_file is None:
            return None

        return self.read_branch_file(branch_file)

    @staticmethod
    def read_branch_file(branch_file: Path) -> Optional[str]:
        """Parse the slug from the first line of a branch file.

        Lines after the first are ignored.

        Raises:
            BranchFileError: If the file cannot be read or is not valid UTF-8
        """
        try:
            content = branch_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BranchFileError(branch_file, str(e)) from e

        lines = content.splitlines()
        slug = lines[0].strip() if lines else ""
        if not slug:
            return None

        if not _SLUG_RE.match(slug):
            logger.warning(f"Ignoring invalid branch slug in {branch_file}: {slug!r}")
            return None

        return slug

    @staticmethod
    def set_branch(branch_file: Path, slug: str) -> None:
        """Overwrite the branch file with the given slug.

        The caller is responsible for confirming the branch exists remotely.

        Raises:
            BranchFileError: If the file cannot be written
        """
        try:
            branch_file.write_text(f"{slug}\n", encoding="utf-8")
        except OSError as e:
            raise BranchFileError(branch_file, str(e)) from e

        logger.info(f"Set active branch to {slug} in {branch_file}")

    @staticmethod
    def clear_branch(branch_file: Path) -> None:
        """Truncate the branch file so no branch is active.

        A branch file that does not exist is left alone.

        Raises:
            BranchFileError: If an existing file cannot be truncated
        """
        if not branch_file.exists():
            logger.debug(f"No branch file at {branch_file}, nothing to clear")
            return

        try:
            branch_file.write_text("", encoding="utf-8")
        except OSError as e:
            raise BranchFileError(branch_file, str(e)) from e

        logger.info(f"Cleared active branch in {branch_file}")

    def exit_branch(self) -> Path:
        """Clear the nearest branch file.

        The truncated file is kept so the next `switch` writes to the same place.

        Returns:
            Path of the branch file that was cleared

        Raises:
            NoActiveBranchError: If no branch file exists at or above cwd
            BranchFileError: If the file cannot be truncated
        """
        branch_file = self.find_branch_file()
        if branch_file is None:
            raise NoActiveBranchError(
                f"No {BRANCH_FILE_NAME} file found. "
                "Run `knock branch switch` to start working on a branch."
            )

        self.clear_branch(branch_file)
        return branch_file

    @staticmethod
    def is_ignored_by_git(branch_file: Path) -> bool:
        """Best-effort check that the branch file is git-ignored.

        Never raises; False means "not confirmed ignored".
        """
        return is_file_ignored_by_git(branch_file.parent, branch_file)
