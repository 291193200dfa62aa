"""Unit tests for knock.json project configuration."""

import json

import pytest

from knock_cli.core.project_config import (
    PROJECT_CONFIG_FILE_NAME,
    ProjectConfig,
    ProjectConfigError,
    find_project_config,
    read_project_config,
    write_project_config,
)
from knock_cli.core.resource_dir import ResourceType


class TestReadProjectConfig:
    """Test knock.json parsing."""

    def test_valid(self, tmp_path):
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_text(json.dumps({"knockDir": "resources"}))

        config = read_project_config(path)

        assert config == ProjectConfig(path=path, knock_dir="resources")
        assert config.root == tmp_path
        assert config.knock_dir_path == (tmp_path / "resources").resolve()

    def test_absolute_knock_dir(self, tmp_path):
        """Should keep an absolute knockDir as is."""
        target = tmp_path / "elsewhere"
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_text(json.dumps({"knockDir": str(target)}))

        assert read_project_config(path).knock_dir_path == target

    def test_invalid_json(self, tmp_path):
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_text("{not json")

        with pytest.raises(ProjectConfigError, match="Invalid JSON"):
            read_project_config(path)

    def test_missing_knock_dir(self, tmp_path):
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_text(json.dumps({"other": 1}))

        with pytest.raises(ProjectConfigError, match="knockDir"):
            read_project_config(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_bytes(b'{"knockDir": "\xff"}')

        with pytest.raises(ProjectConfigError, match="Failed to read"):
            read_project_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / PROJECT_CONFIG_FILE_NAME
        path.write_text(json.dumps(["knockDir"]))

        with pytest.raises(ProjectConfigError):
            read_project_config(path)


class TestFindProjectConfig:
    """Test upward discovery of knock.json."""

    def test_found_in_ancestor(self, tmp_path):
        (tmp_path / PROJECT_CONFIG_FILE_NAME).write_text(json.dumps({"knockDir": ".knock"}))
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        config = find_project_config(nested)

        assert config.path == tmp_path / PROJECT_CONFIG_FILE_NAME

    def test_not_found(self, tmp_path):
        assert find_project_config(tmp_path) is None


class TestWriteProjectConfig:
    """Test project initialization."""

    def test_creates_config_and_dirs(self, tmp_path):
        config = write_project_config(tmp_path, ".knock")

        data = json.loads((tmp_path / PROJECT_CONFIG_FILE_NAME).read_text())
        assert data["knockDir"] == ".knock"
        assert "$schema" in data
        for resource_type in ResourceType:
            resource_dir = config.resource_dir(resource_type)
            assert resource_dir.is_dir()
            assert (resource_dir / ".gitignore").read_text() == ""

    def test_refuses_to_overwrite(self, tmp_path):
        (tmp_path / PROJECT_CONFIG_FILE_NAME).write_text("{}")

        with pytest.raises(FileExistsError):
            write_project_config(tmp_path, ".knock")
