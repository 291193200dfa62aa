"""Core business logic modules."""

from knock_cli.core.api import ApiClient, ApiError
from knock_cli.core.branch import BRANCH_FILE_NAME, BranchStore
from knock_cli.core.config import Config
from knock_cli.core.context import RunContext
from knock_cli.core.resource_dir import (
    ResourceDirContext,
    ResourceTarget,
    ResourceType,
    build_resource_dir_context,
    resolve_resource_target,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "BRANCH_FILE_NAME",
    "BranchStore",
    "Config",
    "ResourceDirContext",
    "ResourceTarget",
    "ResourceType",
    "RunContext",
    "build_resource_dir_context",
    "resolve_resource_target",
]
