# AGPL-3.0 License

"""
Check-run lifecycle for the lint gate.

A check run is acquired (reused or created) once per invocation and
completed exactly once with the lint outcome.
"""

from lint_gate.checks.check_context import ChangedFile, CheckRunHandle, CheckRunRecord, PRInfo
from lint_gate.checks.check_result import LintAnnotation, LintOutcome, LintOutput
from lint_gate.checks.coordinator import CheckRunCoordinator
from lint_gate.checks.publisher import ReportPublisher

__all__ = [
    "ChangedFile",
    "CheckRunHandle",
    "CheckRunRecord",
    "PRInfo",
    "LintAnnotation",
    "LintOutcome",
    "LintOutput",
    "CheckRunCoordinator",
    "ReportPublisher",
]
