# AGPL-3.0 License

"""
Unit tests for GithubProvider with a mocked PyGithub client.
"""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from github import GithubException, UnknownObjectException

from lint_gate.checks.check_context import ChangedFile, CheckRunRecord
from lint_gate.errors import ConfigurationError
from lint_gate.git_providers.github_provider import GithubProvider, _pr_number_from_event

NOW = datetime(2024, 1, 2, tzinfo=timezone.utc)


def _named(name, **attrs):
    mock = MagicMock(**attrs)
    mock.name = name
    return mock


@pytest.fixture
def github_client():
    return MagicMock()


@pytest.fixture
def repo(github_client):
    return github_client.get_repo.return_value


@pytest.fixture
def provider(github_client):
    return GithubProvider("token", "owner/repo", 5, github_client=github_client)


@pytest.mark.asyncio
class TestGithubProvider:
    """Tests for GithubProvider calls."""

    async def test_get_pr_info(self, provider, repo, github_client):
        pr = repo.get_pull.return_value
        pr.head.sha = "abc123"
        pr.get_files.return_value = [MagicMock(filename="a.ts"), MagicMock(filename="b.md")]

        pr_info = await provider.get_pr_info()

        github_client.get_repo.assert_called_once_with("owner/repo")
        repo.get_pull.assert_called_once_with(5)
        assert pr_info.head_sha == "abc123"
        assert pr_info.files == [ChangedFile("a.ts"), ChangedFile("b.md")]

    async def test_missing_pr_returns_none(self, provider, repo):
        repo.get_pull.side_effect = UnknownObjectException(404, {"message": "Not Found"}, None)

        assert await provider.get_pr_info() is None

    async def test_server_error_propagates(self, provider, repo):
        repo.get_pull.side_effect = GithubException(500, {"message": "Server Error"}, None)

        with pytest.raises(GithubException):
            await provider.get_pr_info()

    async def test_no_pr_number_returns_none(self, github_client):
        provider = GithubProvider("token", "owner/repo", None, github_client=github_client)

        assert await provider.get_pr_info() is None
        github_client.get_repo.assert_not_called()

    async def test_list_check_runs(self, provider, repo):
        commit = repo.get_commit.return_value
        commit.get_check_runs.return_value = [_named("lint", id=3, status="in_progress")]

        runs = await provider.list_check_runs("abc123")

        repo.get_commit.assert_called_once_with("abc123")
        commit.get_check_runs.assert_called_once_with(status="in_progress")
        assert runs == [CheckRunRecord(id=3, name="lint", status="in_progress")]

    async def test_create_check_run(self, provider, repo):
        repo.create_check_run.return_value.id = 77

        check_run_id = await provider.create_check_run("ESLint", "abc123", "in_progress", NOW)

        assert check_run_id == 77
        repo.create_check_run.assert_called_once_with(
            name="ESLint", head_sha="abc123", status="in_progress", started_at=NOW
        )

    async def test_update_check_run_with_output(self, provider, repo):
        output = {"title": "t", "summary": "s", "annotations": []}

        await provider.update_check_run(77, NOW, "failure", output)

        repo.get_check_run.assert_called_once_with(77)
        repo.get_check_run.return_value.edit.assert_called_once_with(
            completed_at=NOW, conclusion="failure", output=output
        )

    async def test_update_check_run_without_output(self, provider, repo):
        await provider.update_check_run(77, NOW, "failure")

        repo.get_check_run.return_value.edit.assert_called_once_with(
            completed_at=NOW, conclusion="failure"
        )


class TestActionsEnvironment:
    """Tests for reading the GitHub Actions runner environment."""

    def test_pr_number_from_pull_request_event(self, tmp_path):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"pull_request": {"number": 12}, "number": 12}))

        assert _pr_number_from_event(str(event)) == 12

    def test_pr_number_from_issue_comment_event(self, tmp_path):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"issue": {"number": 4}}))

        assert _pr_number_from_event(str(event)) == 4

    def test_push_event_has_no_pr_number(self, tmp_path):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"ref": "refs/heads/main"}))

        assert _pr_number_from_event(str(event)) is None

    def test_missing_event_file(self):
        assert _pr_number_from_event(None) is None

    def test_from_actions_env(self, tmp_path, monkeypatch):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"pull_request": {"number": 31}}))
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
        monkeypatch.setenv("GITHUB_EVENT_PATH", str(event))

        provider = GithubProvider.from_actions_env("token")

        assert provider.repo_full_name == "owner/repo"
        assert provider.pr_number == 31

    def test_from_actions_env_requires_repository(self, monkeypatch):
        monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)

        with pytest.raises(ConfigurationError):
            GithubProvider.from_actions_env("token")
