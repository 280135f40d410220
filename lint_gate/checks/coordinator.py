# AGPL-3.0 License

"""
Locating or creating the gate's check run on the head commit.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from lint_gate.checks.check_context import CheckRunHandle
from lint_gate.log import get_logger


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckRunCoordinator:
    """
    Finds or creates the single check run this gate reports to.

    When a configured name is given, an in-progress run with that name on
    the head commit is reused so retried or duplicate triggers converge on
    one record. Otherwise a new in-progress run is created.

    Two truly concurrent invocations can both miss each other's run and
    create two records; nothing here serialises them.
    """

    def __init__(
        self,
        git_provider,
        gate_name: str,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Initialize the coordinator.

        Args:
            git_provider: Provider exposing list_check_runs/create_check_run
            gate_name: Name of newly created check runs
            clock: Source of the started_at timestamp
        """
        self.git_provider = git_provider
        self.gate_name = gate_name
        self.clock = clock
        self.logger = get_logger()

    async def acquire(self, head_sha: str, configured_name: Optional[str] = None) -> CheckRunHandle:
        """
        Return the handle of the check run for this invocation.

        Args:
            head_sha: Head commit of the PR
            configured_name: Name of an existing in-progress run to reuse

        Returns:
            Handle of the reused or newly created run
        """
        if configured_name:
            existing = await self._find_in_progress(head_sha, configured_name)
            if existing is not None:
                self.logger.info(
                    f"Reusing check run '{configured_name}' ({existing})",
                    extra={"check_run_id": existing, "head_sha": head_sha}
                )
                return CheckRunHandle(check_run_id=existing, reused=True)

        check_run_id = await self.git_provider.create_check_run(
            name=self.gate_name,
            head_sha=head_sha,
            status="in_progress",
            started_at=self.clock(),
        )
        self.logger.info(
            f"Created check run '{self.gate_name}' ({check_run_id})",
            extra={"check_run_id": check_run_id, "head_sha": head_sha}
        )
        return CheckRunHandle(check_run_id=check_run_id, reused=False)

    async def _find_in_progress(self, head_sha: str, name: str) -> Optional[int]:
        runs = await self.git_provider.list_check_runs(head_sha, status="in_progress")
        for run in runs:
            if run.name == name:
                return run.id
        return None
