"""Unit tests for RunContext."""

import json

import pytest

from knock_cli.core.branch import BRANCH_FILE_NAME
from knock_cli.core.context import RunContext
from knock_cli.core.errors import ResourceDirConflictError
from knock_cli.core.project_config import PROJECT_CONFIG_FILE_NAME, ProjectConfigError
from knock_cli.core.resource_dir import ResourceDirContext, ResourceTarget, ResourceType


@pytest.fixture
def project(tmp_path):
    """A project with knock.json, a branch file and one pulled workflow."""
    root = tmp_path / "project"
    workflow_dir = root / ".knock" / "workflows" / "welcome"
    workflow_dir.mkdir(parents=True)
    (workflow_dir / "workflow.json").write_text("{}")
    (root / PROJECT_CONFIG_FILE_NAME).write_text(json.dumps({"knockDir": ".knock"}))
    (root / BRANCH_FILE_NAME).write_text("feature-a\n")
    return root


class TestRunContextInit:
    """Test context detection."""

    def test_empty_directory(self, tmp_path):
        """Should detect nothing outside a project."""
        context = RunContext(cwd=tmp_path)

        assert context.cwd == tmp_path
        assert context.resource_dir is None
        assert context.branch_file is None
        assert context.project_config is None
        assert context.project_root == tmp_path

    def test_inside_workflow_dir(self, project):
        """Should detect the resource dir, branch file and project config."""
        cwd = project / ".knock" / "workflows" / "welcome"

        context = RunContext(cwd=cwd)

        assert context.resource_dir.key == "welcome"
        assert context.resource_dir.type is ResourceType.WORKFLOW
        assert context.branch_file == project / BRANCH_FILE_NAME
        assert context.project_root == project

    def test_invalid_project_config(self, tmp_path):
        """Should raise ProjectConfigError for a malformed knock.json."""
        (tmp_path / PROJECT_CONFIG_FILE_NAME).write_text("not json")

        with pytest.raises(ProjectConfigError):
            RunContext(cwd=tmp_path)


class TestResolveBranch:
    """Test branch scoping."""

    def test_flag_wins(self, project):
        """Should prefer an explicit branch flag over the active branch."""
        assert RunContext(cwd=project).resolve_branch("explicit") == "explicit"

    def test_active_branch(self, project):
        """Should fall back to the active branch."""
        assert RunContext(cwd=project).resolve_branch(None) == "feature-a"

    def test_no_branch(self, tmp_path):
        """Should return None when no branch is active."""
        assert RunContext(cwd=tmp_path).resolve_branch(None) is None

    def test_cleared_branch(self, project):
        """Should return None when the branch file is empty."""
        (project / BRANCH_FILE_NAME).write_text("")

        assert RunContext(cwd=project).resolve_branch(None) is None


class TestResourceDirFor:
    """Test resolution of command target directories."""

    def test_inside_matching_dir(self, project):
        """Should return the enclosing directory when the target agrees."""
        cwd = project / ".knock" / "workflows" / "welcome"
        target = ResourceTarget(command_id="workflow:pull", type=ResourceType.WORKFLOW)

        dir_context = RunContext(cwd=cwd).resource_dir_for(target)

        assert dir_context.key == "welcome"
        assert dir_context.abspath == cwd
        assert dir_context.exists is True

    def test_inside_conflicting_dir(self, project):
        """Should raise when the target names another workflow."""
        cwd = project / ".knock" / "workflows" / "welcome"
        target = ResourceTarget(
            command_id="workflow:pull", type=ResourceType.WORKFLOW, key="goodbye"
        )

        with pytest.raises(ResourceDirConflictError):
            RunContext(cwd=cwd).resource_dir_for(target)

    def test_outside_with_project_config(self, project):
        """Should place new resources under the project's resource directory."""
        target = ResourceTarget(
            command_id="workflow:pull", type=ResourceType.WORKFLOW, key="goodbye"
        )

        dir_context = RunContext(cwd=project).resource_dir_for(target)

        assert dir_context == ResourceDirContext(
            type=ResourceType.WORKFLOW,
            key="goodbye",
            abspath=(project / ".knock" / "workflows" / "goodbye").resolve(),
            exists=False,
        )

    def test_outside_existing_under_project_config(self, project):
        """Should report an existing resource directory outside cwd."""
        target = ResourceTarget(
            command_id="workflow:pull", type=ResourceType.WORKFLOW, key="welcome"
        )

        dir_context = RunContext(cwd=project).resource_dir_for(target)

        assert dir_context.exists is True

    def test_outside_without_project_config(self, tmp_path):
        """Should place new resources in cwd without a project config."""
        target = ResourceTarget(
            command_id="layout:pull", type=ResourceType.LAYOUT, key="default"
        )

        dir_context = RunContext(cwd=tmp_path).resource_dir_for(target)

        assert dir_context.abspath == tmp_path / "default"
        assert dir_context.exists is False

    def test_outside_without_key(self, tmp_path):
        """Should return None when there is nothing to infer a key from."""
        target = ResourceTarget(command_id="layout:pull", type=ResourceType.LAYOUT)

        assert RunContext(cwd=tmp_path).resource_dir_for(target) is None

