"""Exceptions raised by the workspace context subsystem."""

from pathlib import Path


class WorkspaceError(Exception):
    """Base class for local workspace state errors."""

    pass


class BranchFileError(WorkspaceError):
    """Raised when the branch file cannot be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to access branch file {path}: {reason}")


class NoActiveBranchError(WorkspaceError):
    """Raised when exiting a branch but no branch file can be located."""

    pass


class ResourceDirConflictError(WorkspaceError):
    """Raised when a command target conflicts with the enclosing resource directory."""

    pass


class UnhandledCommandError(WorkspaceError):
    """Raised when a command id has no registered resource directory policy."""

    pass
