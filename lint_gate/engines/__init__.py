# AGPL-3.0 License

"""
Lint engines invoked by the gate.
"""

from lint_gate.engines.base_engine import BaseLintEngine
from lint_gate.engines.eslint_engine import ESLintEngine

__all__ = [
    "BaseLintEngine",
    "ESLintEngine",
]
