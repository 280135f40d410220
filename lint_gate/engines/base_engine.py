# AGPL-3.0 License

"""
Base class for lint engines.
"""

from abc import ABC, abstractmethod

from lint_gate.checks.check_result import LintOutcome


class BaseLintEngine(ABC):
    """
    Abstract base class for lint engines.

    An engine lints a list of repository-relative paths and returns a
    structured LintOutcome. Lint findings are part of the outcome; an
    engine that cannot produce an outcome raises EngineError.
    """

    name: str = "lint"

    @abstractmethod
    async def run(self, paths: list[str]) -> LintOutcome:
        """
        Lint the given files.

        Args:
            paths: Files to lint, relative to the repository root

        Returns:
            LintOutcome with conclusion and output
        """
        pass
