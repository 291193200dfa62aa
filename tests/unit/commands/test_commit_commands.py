"""Unit tests for the environment and commit commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from knock_cli.app import app
from knock_cli.core.api import ApiClient, ApiError
from knock_cli.core.branch import BRANCH_FILE_NAME

runner = CliRunner()

ENV = {"KNOCK_SERVICE_TOKEN": "valid-token", "COLUMNS": "200"}

COMMIT = {
    "id": "c-123",
    "environment": "development",
    "resource": {"type": "workflow", "identifier": "welcome"},
    "author": {"name": "Jane", "email": "jane@example.com"},
    "commit_message": "Add welcome email\n",
    "created_at": "2024-01-02T03:04:05Z",
}


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Isolated cwd with no user config and no token in the environment."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("KNOCK_SERVICE_TOKEN", raising=False)
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class TestEnvironmentList:
    """Test `knock environment list`."""

    def test_lists_environments(self, workspace):
        environments = [
            {"slug": "development", "name": "Development", "order": 0},
            {"slug": "production", "name": "Production", "order": 1},
        ]

        with patch.object(ApiClient, "list_all_environments", return_value=environments):
            result = runner.invoke(app, ["environment", "list"], env=ENV)

        assert result.exit_code == 0, result.output
        assert "Showing 2 environments" in result.output
        assert "production" in result.output

    def test_json_output(self, workspace):
        environments = [{"slug": "development"}]

        with patch.object(ApiClient, "list_all_environments", return_value=environments):
            result = runner.invoke(app, ["environment", "list", "--json"], env=ENV)

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == environments

    def test_missing_token(self, workspace):
        result = runner.invoke(app, ["environment", "list"], env={"COLUMNS": "200"})

        assert result.exit_code == 2
        assert "Missing service token" in result.output


class TestCommitList:
    """Test `knock commit list`."""

    def test_lists_commits(self, workspace):
        with patch.object(ApiClient, "list_commits", return_value={"entries": [COMMIT]}) as mock_list:
            result = runner.invoke(app, ["commit", "list"], env=ENV)

        assert result.exit_code == 0, result.output
        mock_list.assert_called_once_with(
            "development",
            branch=None,
            promoted=None,
            resource_types=[],
            resource_id=None,
            after=None,
            before=None,
            limit=None,
        )
        assert "Showing 1 commits in `development` environment" in result.output
        assert "Jane <jane@example.com>" in result.output

    def test_unpromoted_filter_in_active_branch(self, workspace):
        (workspace / BRANCH_FILE_NAME).write_text("feature-a\n")

        with patch.object(ApiClient, "list_commits", return_value={"entries": []}) as mock_list:
            result = runner.invoke(app, ["commit", "list", "--no-promoted"], env=ENV)

        assert result.exit_code == 0, result.output
        assert mock_list.call_args.kwargs["promoted"] is False
        assert mock_list.call_args.kwargs["branch"] == "feature-a"
        assert "(showing only unpromoted)" in result.output

    def test_resource_filters(self, workspace):
        with patch.object(ApiClient, "list_commits", return_value={"entries": []}) as mock_list:
            result = runner.invoke(
                app,
                ["commit", "list", "--resource-type", "workflow", "--resource-id", "welcome"],
                env=ENV,
            )

        assert result.exit_code == 0, result.output
        assert mock_list.call_args.kwargs["resource_types"] == ["workflow"]
        assert mock_list.call_args.kwargs["resource_id"] == "welcome"

    def test_resource_id_requires_resource_type(self, workspace):
        with patch.object(ApiClient, "list_commits") as mock_list:
            result = runner.invoke(app, ["commit", "list", "--resource-id", "welcome"], env=ENV)

        assert result.exit_code == 1
        mock_list.assert_not_called()
        assert "--resource-type" in result.output

    def test_resource_id_with_multiple_types(self, workspace):
        with patch.object(ApiClient, "list_commits") as mock_list:
            result = runner.invoke(
                app,
                [
                    "commit", "list",
                    "--resource-type", "workflow",
                    "--resource-type", "partial",
                    "--resource-id", "welcome",
                ],
                env=ENV,
            )

        assert result.exit_code == 1
        mock_list.assert_not_called()


class TestCommitGet:
    """Test `knock commit get`."""

    def test_summary(self, workspace):
        with patch.object(ApiClient, "get_commit", return_value=COMMIT) as mock_get:
            result = runner.invoke(app, ["commit", "get", "c-123"], env=ENV)

        assert result.exit_code == 0, result.output
        mock_get.assert_called_once_with("c-123")
        assert "Showing commit `c-123` in `development` environment" in result.output
        assert "Add welcome email" in result.output

    def test_json_output(self, workspace):
        with patch.object(ApiClient, "get_commit", return_value=COMMIT):
            result = runner.invoke(app, ["commit", "get", "c-123", "--json"], env=ENV)

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == COMMIT

    def test_not_found(self, workspace):
        with patch.object(ApiClient, "get_commit", side_effect=ApiError(404, "Not found")):
            result = runner.invoke(app, ["commit", "get", "missing"], env=ENV)

        assert result.exit_code == 1
        assert "Not found (status: 404)" in result.output


class TestCommitPromote:
    """Test `knock commit promote`."""

    def test_promote_all_with_force(self, workspace):
        with patch.object(ApiClient, "promote_all_changes", return_value={}) as mock_promote:
            result = runner.invoke(
                app, ["commit", "promote", "--to", "production", "--force"], env=ENV
            )

        assert result.exit_code == 0, result.output
        mock_promote.assert_called_once_with("production")
        assert "Successfully promoted all changes to `production` environment" in result.output

    def test_promote_all_declined(self, workspace):
        with patch.object(ApiClient, "promote_all_changes") as mock_promote:
            result = runner.invoke(
                app, ["commit", "promote", "--to", "production"], env=ENV, input="n\n"
            )

        assert result.exit_code == 0
        mock_promote.assert_not_called()

    def test_promote_one(self, workspace):
        resp = {"commit": {"id": "c-456", "environment": "staging"}}

        with patch.object(ApiClient, "promote_one_change", return_value=resp) as mock_promote:
            result = runner.invoke(
                app, ["commit", "promote", "--only", "c-123"], env=ENV, input="y\n"
            )

        assert result.exit_code == 0, result.output
        mock_promote.assert_called_once_with("c-123")
        assert "Successfully promoted the commit `c-123` into `staging` environment" in result.output
        assert "Commit id: c-456" in result.output

    def test_promote_one_api_error(self, workspace):
        with patch.object(
            ApiClient, "promote_one_change", side_effect=ApiError(422, "Already promoted")
        ):
            result = runner.invoke(
                app, ["commit", "promote", "--only", "c-123", "--force"], env=ENV
            )

        assert result.exit_code == 1
        assert "Already promoted (status: 422)" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["--to", "production", "--only", "c-123"],
            [],
        ],
    )
    def test_requires_exactly_one_mode(self, workspace, args):
        with patch.object(ApiClient, "promote_all_changes") as mock_all, \
                patch.object(ApiClient, "promote_one_change") as mock_one:
            result = runner.invoke(app, ["commit", "promote", *args, "--force"], env=ENV)

        assert result.exit_code == 1
        mock_all.assert_not_called()
        mock_one.assert_not_called()
