"""Resource directory context detection and command target validation.

A resource directory is a local directory holding one pulled resource, such
as a workflow, identified by a marker file (``workflow.json``) inside it.
The directory name is the resource key. Commands run from anywhere below a
resource directory are scoped to that resource, and a command aimed at a
different resource is rejected rather than silently operating on the wrong
one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from knock_cli.core.errors import ResourceDirConflictError, UnhandledCommandError
from knock_cli.core.finder import find_up

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    """Resource kinds that can be pulled into a local directory.

    Declaration order is the priority order used to break ties.
    """

    WORKFLOW = "workflow"
    LAYOUT = "layout"

    @property
    def marker_name(self) -> str:
        """Marker file that identifies a directory of this type."""
        return RESOURCE_MARKERS[self]

    @property
    def subdir_name(self) -> str:
        """Subdirectory of the project resources dir holding this type."""
        return RESOURCE_SUBDIRS[self]


RESOURCE_MARKERS: Dict[ResourceType, str] = {
    ResourceType.WORKFLOW: "workflow.json",
    ResourceType.LAYOUT: "layout.json",
}

RESOURCE_SUBDIRS: Dict[ResourceType, str] = {
    ResourceType.WORKFLOW: "workflows",
    ResourceType.LAYOUT: "layouts",
}


@dataclass(frozen=True)
class ResourceDirContext:
    """A typed, keyed resource directory on the local filesystem."""

    type: ResourceType
    key: str
    abspath: Path
    exists: bool = True


@dataclass(frozen=True)
class ResourceTarget:
    """The resource a command is about to operate on."""

    command_id: str
    type: ResourceType
    key: Optional[str] = None


# Commands that participate in resource directory checks, by command id.
RESOURCE_DIR_COMMANDS: Dict[str, ResourceType] = {
    "workflow:pull": ResourceType.WORKFLOW,
    "layout:pull": ResourceType.LAYOUT,
}


def register_resource_dir_command(command_id: str, resource_type: ResourceType) -> None:
    """Opt a command into resource directory checks."""
    RESOURCE_DIR_COMMANDS[command_id] = resource_type


def is_resource_dir(directory: Path, resource_type: ResourceType) -> bool:
    """Check if directory itself is a resource directory of the given type."""
    return (Path(directory) / resource_type.marker_name).is_file()


def build_resource_dir_context(start_dir: Path) -> Optional[ResourceDirContext]:
    """Find the resource directory enclosing start_dir, if any.

    Each resource type's marker is searched for upward from start_dir. The
    nearest match wins; when two types match the same directory the one
    declared first in ResourceType wins.

    Args:
        start_dir: Directory to start from (inclusive)

    Returns:
        ResourceDirContext for the enclosing resource directory, or None
    """
    best: Optional[ResourceDirContext] = None

    for resource_type in ResourceType:
        found = find_up(start_dir, resource_type.marker_name)
        if found is None:
            continue

        if best is None or len(found.parts) > len(best.abspath.parts):
            best = ResourceDirContext(
                type=resource_type,
                key=found.name,
                abspath=found,
                exists=True,
            )

    if best:
        logger.debug(f"Resolved {best.type.value} directory `{best.key}` at {best.abspath}")
    return best


def resolve_resource_target(
    context: Optional[ResourceDirContext], target: ResourceTarget
) -> Optional[str]:
    """Reconcile a command's target with the enclosing resource directory.

    Args:
        context: Enclosing resource directory, or None when outside of one
        target: The resource the command was asked to operate on

    Returns:
        The resource key to use. Outside a resource directory this is
        target.key as given, which may be None.

    Raises:
        UnhandledCommandError: If the command is not registered for checks
        ResourceDirConflictError: If the target conflicts with the directory
    """
    if target.command_id not in RESOURCE_DIR_COMMANDS:
        raise UnhandledCommandError(f"Unhandled command id: {target.command_id}")

    if context is None:
        return target.key

    if context.type != target.type:
        raise ResourceDirConflictError(
            f"Cannot run {target.command_id} for a {target.type.value} "
            f"inside a {context.type.value} directory: {context.abspath}"
        )

    if not target.key:
        return context.key

    if target.key == context.key:
        return target.key

    raise ResourceDirConflictError(
        f"Cannot run {target.command_id} `{target.key}` inside another "
        f"{context.type.value} directory:\n{context.key}"
    )
