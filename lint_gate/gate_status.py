# AGPL-3.0 License

"""
Process-level pass/fail signal for the CI runner.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from lint_gate.log import get_logger


def escape_command_data(message: str) -> str:
    """Escape a message for a GitHub Actions workflow command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


@dataclass
class GateStatus:
    """
    Outcome of one gate invocation as seen by the CI runner.

    Failures are echoed as "::error::" workflow commands so they show up on
    the run summary; the exit code carries the same signal.
    """
    failed: bool = False
    message: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    stream: Optional[TextIO] = field(default=None, repr=False)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.message = message
        get_logger().error(message)
        print(f"::error::{escape_command_data(message)}", file=self.stream or sys.stdout)

    def warning(self, message: str) -> None:
        self.warnings.append(message)
        get_logger().warning(message)
        print(f"::warning::{escape_command_data(message)}", file=self.stream or sys.stdout)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
