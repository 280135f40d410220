# AGPL-3.0 License

"""
Running the lint engine and completing the check run with its outcome.
"""

from datetime import datetime
from typing import Callable, Sequence, Union

from lint_gate.checks.check_context import CheckRunHandle
from lint_gate.checks.check_result import LintOutcome
from lint_gate.checks.coordinator import utc_now
from lint_gate.errors import EngineError
from lint_gate.gate_status import GateStatus
from lint_gate.log import get_logger


class ReportPublisher:
    """
    Completes the gate's check run exactly once per invocation.

    The check run and the process status are two separate signals; both
    report failure on lint violations and on engine errors.
    """

    def __init__(
        self,
        git_provider,
        status: GateStatus,
        gate_name: str = "ESLint",
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Initialize the publisher.

        Args:
            git_provider: Provider exposing update_check_run
            status: Process status to mark failed when needed
            gate_name: Used in the failure message for lint violations
            clock: Source of the completed_at timestamp
        """
        self.git_provider = git_provider
        self.status = status
        self.gate_name = gate_name
        self.clock = clock
        self.logger = get_logger()

    async def publish(self, handle: CheckRunHandle, engine, paths: Sequence[str]) -> None:
        """
        Lint the target paths and finalize the check run with the result.

        Anything raised while linting or reporting a structured outcome is
        treated as an engine error, so the run never stays in progress.
        """
        try:
            outcome = await engine.run(list(paths))
            self.logger.info(f"Lint completed: {outcome}")
            await self.finalize(handle, outcome)
        except Exception as e:
            self.logger.exception(f"Lint engine failed: {e}")
            error = e if isinstance(e, EngineError) else EngineError(str(e) or type(e).__name__)
            await self.finalize(handle, error)

    async def finalize(self, handle: CheckRunHandle, outcome: Union[LintOutcome, EngineError]) -> None:
        """
        Perform the terminal update of the check run.

        Args:
            handle: Check run to complete
            outcome: Structured lint outcome, or the error the engine raised
        """
        if isinstance(outcome, EngineError):
            await self.git_provider.update_check_run(
                check_run_id=handle.check_run_id,
                completed_at=self.clock(),
                conclusion="failure",
            )
            self.status.set_failed(outcome.message)
            return

        await self.git_provider.update_check_run(
            check_run_id=handle.check_run_id,
            completed_at=self.clock(),
            conclusion=outcome.conclusion,
            output=outcome.output.to_dict() if outcome.output else None,
        )

        if outcome.conclusion == "failure":
            self.status.set_failed(f"{self.gate_name} found some errors")
