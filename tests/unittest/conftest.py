# AGPL-3.0 License

"""
Shared fakes for the lint gate unit tests.
"""

import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from lint_gate.checks.check_result import LintOutcome
from lint_gate.engines.base_engine import BaseLintEngine


FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FakeGitProvider:
    """In-memory stand-in for GithubProvider that records every call."""

    def __init__(self):
        self.pr_info = None
        self.check_runs = []
        self.next_id = 100
        self.fail_updates = 0
        self.pr_info_error = None
        self.create_error = None
        self.list_calls = []
        self.created = []
        self.updates = []

    async def get_pr_info(self):
        if self.pr_info_error is not None:
            raise self.pr_info_error
        return self.pr_info

    async def list_check_runs(self, head_sha, status="in_progress"):
        self.list_calls.append((head_sha, status))
        return [r for r in self.check_runs if r.status == status]

    async def create_check_run(self, name, head_sha, status, started_at):
        if self.create_error is not None:
            raise self.create_error
        check_run_id = self.next_id
        self.next_id += 1
        self.created.append({
            "id": check_run_id,
            "name": name,
            "head_sha": head_sha,
            "status": status,
            "started_at": started_at,
        })
        return check_run_id

    async def update_check_run(self, check_run_id, completed_at, conclusion, output=None):
        if self.fail_updates:
            self.fail_updates -= 1
            raise ConnectionError("check run update failed")
        self.updates.append({
            "check_run_id": check_run_id,
            "completed_at": completed_at,
            "conclusion": conclusion,
            "output": output,
        })


class FakeEngine(BaseLintEngine):
    """Engine returning a canned outcome or raising a canned error."""

    def __init__(self, outcome=None, error=None):
        self.outcome = outcome or LintOutcome.success()
        self.error = error
        self.calls = []

    async def run(self, paths):
        self.calls.append(paths)
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def git_provider():
    return FakeGitProvider()


@pytest.fixture
def make_engine():
    return FakeEngine


@pytest.fixture
def temp_repo():
    """Create a temporary repository tree."""
    temp_dir = tempfile.mkdtemp()
    repo_root = Path(temp_dir)

    for relative in [
        "a.ts",
        "src/app.ts",
        "src/dist/index.js",
        "dist/index.js",
        "dist/bundle.js",
        "dist/sub/deep.js",
        "lib/a.js",
        "lib/b.js",
        "lib/c.js",
        "vendor/deep/nested/x.min.js",
        ".eslintrc.js",
    ]:
        path = repo_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()

    yield repo_root

    shutil.rmtree(temp_dir)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
