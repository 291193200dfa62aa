"""Run context gathered from the directory a command was invoked in."""

from pathlib import Path
from typing import Optional

from knock_cli.core.branch import BranchStore
from knock_cli.core.project_config import ProjectConfig, find_project_config
from knock_cli.core.resource_dir import (
    ResourceDirContext,
    ResourceTarget,
    build_resource_dir_context,
    is_resource_dir,
    resolve_resource_target,
)


class RunContext:
    """Detects resource directory, branch file and project config from cwd.

    Attributes:
        cwd: Current working directory (invocation location)
        resource_dir: Enclosing resource directory, if any
        branch_store: Branch state anchored at cwd
        branch_file: Nearest branch file at or above cwd, if any
        project_config: Nearest knock.json at or above cwd, if any
    """

    def __init__(self, cwd: Optional[Path] = None):
        """Initialize context by surveying cwd and its parent directories.

        Args:
            cwd: Working directory to start detection from (default: Path.cwd())

        Raises:
            ProjectConfigError: If a knock.json is found but cannot be parsed
        """
        self.cwd = (Path(cwd) if cwd else Path.cwd()).absolute()
        self.resource_dir: Optional[ResourceDirContext] = build_resource_dir_context(self.cwd)
        self.branch_store = BranchStore(self.cwd)
        self.branch_file = self.branch_store.find_branch_file()
        self.project_config: Optional[ProjectConfig] = find_project_config(self.cwd)

    @property
    def project_root(self) -> Path:
        """Directory of knock.json, or cwd when there is no project config."""
        if self.project_config:
            return self.project_config.root
        return self.cwd

    def resolve_branch(self, branch_flag: Optional[str]) -> Optional[str]:
        """Pick the branch to scope a request to.

        An explicit --branch wins, then the active branch. None means the
        request is scoped to an environment instead.
        """
        if branch_flag:
            return branch_flag
        if self.branch_file is None:
            return None
        return self.branch_store.read_branch_file(self.branch_file)

    def resource_dir_for(self, target: ResourceTarget) -> Optional[ResourceDirContext]:
        """Resolve the local directory a command target reads from or writes to.

        Inside a resource directory the target must agree with it. Outside
        of one the directory is derived from the project config (or cwd) and
        the target key; None is returned when no key was given.

        Raises:
            ResourceDirConflictError: If the target conflicts with the enclosing directory
            UnhandledCommandError: If the command is not registered for checks
        """
        key = resolve_resource_target(self.resource_dir, target)

        if self.resource_dir is not None:
            return self.resource_dir

        if not key:
            return None

        if self.project_config:
            parent = self.project_config.resource_dir(target.type)
        else:
            parent = self.cwd

        abspath = parent / key
        return ResourceDirContext(
            type=target.type,
            key=key,
            abspath=abspath,
            exists=is_resource_dir(abspath, target.type),
        )

