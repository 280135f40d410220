# AGPL-3.0 License

"""
GitHub access for the lint gate: PR metadata and check-run records.

PyGithub is synchronous; every call runs on a worker thread so the gate's
async flow awaits each remote call in turn.
"""

import asyncio
import json
import os
from datetime import datetime
from typing import Optional

from github import Auth, Github, UnknownObjectException

from lint_gate.checks.check_context import ChangedFile, CheckRunRecord, PRInfo
from lint_gate.config_loader import get_settings
from lint_gate.errors import ConfigurationError
from lint_gate.log import get_logger


class GithubProvider:
    """
    Thin wrapper over the GitHub REST API for one pull request.
    """

    def __init__(
        self,
        token: str,
        repo_full_name: str,
        pr_number: Optional[int],
        base_url: Optional[str] = None,
        github_client: Optional[Github] = None
    ):
        """
        Initialize the provider.

        Args:
            token: Repository token
            repo_full_name: "owner/repo"
            pr_number: Pull request number, None when the event has no PR
            base_url: API root, defaults to the configured GitHub URL
            github_client: Pre-built client (used by tests)
        """
        if github_client is None:
            base_url = base_url or get_settings().get("lint_gate", {}).get(
                "github_base_url", "https://api.github.com")
            github_client = Github(auth=Auth.Token(token), base_url=base_url)

        self.github_client = github_client
        self.repo_full_name = repo_full_name
        self.pr_number = pr_number
        self._repo_obj = None
        self.logger = get_logger()

    @classmethod
    def from_actions_env(cls, token: str, pr_number: Optional[int] = None) -> "GithubProvider":
        """
        Build a provider from the GitHub Actions runner environment.

        The repository comes from GITHUB_REPOSITORY; the PR number, unless
        given, from the event payload at GITHUB_EVENT_PATH.
        """
        repo_full_name = os.environ.get("GITHUB_REPOSITORY", "")
        if "/" not in repo_full_name:
            raise ConfigurationError("GITHUB_REPOSITORY is not set to 'owner/repo'")

        if pr_number is None:
            pr_number = _pr_number_from_event(os.environ.get("GITHUB_EVENT_PATH"))

        return cls(
            token=token,
            repo_full_name=repo_full_name,
            pr_number=pr_number,
            base_url=os.environ.get("GITHUB_API_URL"),
        )

    @property
    def repo_obj(self):
        if self._repo_obj is None:
            self._repo_obj = self.github_client.get_repo(self.repo_full_name)
        return self._repo_obj

    async def get_pr_info(self) -> Optional[PRInfo]:
        """
        Fetch the PR's changed files and head commit.

        All pages of the file listing are read.

        Returns:
            PRInfo, or None when there is no PR or it cannot be found
        """
        if self.pr_number is None:
            self.logger.debug("No pull request number in this event")
            return None
        return await asyncio.to_thread(self._get_pr_info)

    def _get_pr_info(self) -> Optional[PRInfo]:
        try:
            pr = self.repo_obj.get_pull(self.pr_number)
        except UnknownObjectException:
            self.logger.debug(f"Pull request {self.repo_full_name}#{self.pr_number} not found")
            return None

        files = [ChangedFile(path=f.filename) for f in pr.get_files()]
        return PRInfo(head_sha=pr.head.sha, files=files)

    async def list_check_runs(self, head_sha: str, status: str = "in_progress") -> list[CheckRunRecord]:
        """List check runs on a commit, filtered by status."""
        def _list():
            runs = self.repo_obj.get_commit(head_sha).get_check_runs(status=status)
            return [CheckRunRecord(id=r.id, name=r.name, status=r.status) for r in runs]

        return await asyncio.to_thread(_list)

    async def create_check_run(
        self,
        name: str,
        head_sha: str,
        status: str,
        started_at: datetime
    ) -> int:
        """Create a check run and return its id."""
        def _create():
            return self.repo_obj.create_check_run(
                name=name,
                head_sha=head_sha,
                status=status,
                started_at=started_at,
            ).id

        return await asyncio.to_thread(_create)

    async def update_check_run(
        self,
        check_run_id: int,
        completed_at: datetime,
        conclusion: str,
        output: Optional[dict] = None
    ) -> None:
        """Complete a check run, attaching output when there is one."""
        kwargs = {"completed_at": completed_at, "conclusion": conclusion}
        if output is not None:
            kwargs["output"] = output

        def _update():
            self.repo_obj.get_check_run(check_run_id).edit(**kwargs)

        await asyncio.to_thread(_update)


def _pr_number_from_event(event_path: Optional[str]) -> Optional[int]:
    if not event_path or not os.path.isfile(event_path):
        return None
    with open(event_path, "r") as f:
        payload = json.load(f)
    # Same precedence as the Actions toolkit's context.issue
    for key in ("issue", "pull_request"):
        number = (payload.get(key) or {}).get("number")
        if number is not None:
            return int(number)
    number = payload.get("number")
    return int(number) if number is not None else None
