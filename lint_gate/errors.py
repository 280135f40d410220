# AGPL-3.0 License

"""
Exceptions raised by the lint gate.
"""


class LintGateError(Exception):
    """Base class for all lint gate errors."""


class ConfigurationError(LintGateError):
    """Raised when required gate configuration is missing or invalid."""


class EngineError(LintGateError):
    """
    Raised when the lint engine fails to produce a structured result.

    This covers crashes, configuration problems inside the engine and
    unparsable output. It is never used for lint findings.
    """

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message
