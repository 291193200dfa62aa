"""Project configuration stored in a knock.json file at the project root."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from knock_cli.core.finder import find_file
from knock_cli.core.resource_dir import ResourceType

PROJECT_CONFIG_FILE_NAME = "knock.json"
PROJECT_CONFIG_SCHEMA_URL = "https://schemas.knock.app/cli/knock.json"
DEFAULT_KNOCK_DIR = ".knock"


class ProjectConfigError(Exception):
    """Raised when knock.json cannot be read or is malformed."""

    pass


@dataclass(frozen=True)
class ProjectConfig:
    """Parsed knock.json.

    Attributes:
        path: Location of the knock.json file
        knock_dir: Resources directory as written in the file
    """

    path: Path
    knock_dir: str

    @property
    def root(self) -> Path:
        """Project root, the directory containing knock.json."""
        return self.path.parent

    @property
    def knock_dir_path(self) -> Path:
        """Absolute resources directory, relative paths resolved from the root."""
        knock_dir = Path(self.knock_dir)
        if knock_dir.is_absolute():
            return knock_dir
        return (self.root / knock_dir).resolve()

    def resource_dir(self, resource_type: ResourceType) -> Path:
        """Directory holding all resources of the given type."""
        return self.knock_dir_path / resource_type.subdir_name


def read_project_config(path: Path) -> ProjectConfig:
    """Read and validate a knock.json file.

    Raises:
        ProjectConfigError: If the file is unreadable, not JSON, or lacks knockDir
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectConfigError(f"Failed to read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ProjectConfigError(f"Invalid JSON in {path}: {e}") from e

    knock_dir = data.get("knockDir") if isinstance(data, dict) else None
    if not isinstance(knock_dir, str) or not knock_dir:
        raise ProjectConfigError(f"{path} must define a `knockDir` string")

    return ProjectConfig(path=path, knock_dir=knock_dir)


def find_project_config(start_dir: Path) -> Optional[ProjectConfig]:
    """Find and read the nearest knock.json at or above start_dir."""
    path = find_file(start_dir, PROJECT_CONFIG_FILE_NAME)
    if path is None:
        return None
    return read_project_config(path)


def write_project_config(directory: Path, knock_dir: str) -> ProjectConfig:
    """Create knock.json and the per-type resource directories.

    Each resource directory gets an empty .gitignore so it is kept by git.

    Raises:
        FileExistsError: If knock.json already exists in directory
    """
    path = Path(directory) / PROJECT_CONFIG_FILE_NAME
    if path.exists():
        raise FileExistsError(
            f"A {PROJECT_CONFIG_FILE_NAME} file already exists in this directory: {directory}"
        )

    config = ProjectConfig(path=path, knock_dir=knock_dir)
    for resource_type in ResourceType:
        resource_dir = config.resource_dir(resource_type)
        resource_dir.mkdir(parents=True, exist_ok=True)
        (resource_dir / ".gitignore").write_text("")

    payload = {"$schema": PROJECT_CONFIG_SCHEMA_URL, "knockDir": knock_dir}
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    return config
