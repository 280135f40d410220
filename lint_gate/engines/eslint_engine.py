# AGPL-3.0 License

"""
ESLint engine: runs the ESLint CLI with the JSON formatter and converts its
report into check-run annotations.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Optional

from jinja2 import Template

from lint_gate.checks.check_result import LintAnnotation, LintOutcome, LintOutput
from lint_gate.config_loader import get_settings
from lint_gate.engines.base_engine import BaseLintEngine
from lint_gate.errors import EngineError
from lint_gate.log import get_logger

# ESLint exits 0 without errors, 1 with lint errors, 2 on crash or bad config
ESLINT_OK_EXIT_CODES = (0, 1)

DEFAULT_SUMMARY_TEMPLATE = (
    "{{ error_count }} error(s) and {{ warning_count }} warning(s) in {{ file_count }} file(s)."
    "{% if truncated %} Showing the first {{ shown }} of {{ total }} annotations.{% endif %}"
)


class ESLintEngine(BaseLintEngine):
    """
    Lint engine backed by the ESLint command line.
    """

    name = "ESLint"

    def __init__(
        self,
        repo_root: Path,
        command: Optional[list[str]] = None,
        max_annotations: int = 50,
        summary_template: str = DEFAULT_SUMMARY_TEMPLATE,
        title_success: str = "ESLint found no errors",
        title_failure: str = "ESLint found {{ error_count }} error(s)"
    ):
        """
        Initialize the engine.

        Args:
            repo_root: Directory ESLint runs in
            command: ESLint invocation, e.g. ["npx", "eslint"]
            max_annotations: Cap on annotations in the output
            summary_template: Jinja2 template for the output summary
            title_success: Jinja2 template for the title when there are no errors
            title_failure: Jinja2 template for the title when there are errors
        """
        self.repo_root = Path(repo_root)
        self.command = list(command or ["npx", "eslint"])
        self.max_annotations = max_annotations
        self.summary_template = Template(summary_template)
        self.title_success = Template(title_success)
        self.title_failure = Template(title_failure)
        self.logger = get_logger()

    @classmethod
    def from_settings(cls, repo_root: Path, max_annotations: int = 50) -> "ESLintEngine":
        settings = get_settings().get("eslint", {})
        return cls(
            repo_root=repo_root,
            command=list(settings.get("command", ["npx", "eslint"])),
            max_annotations=max_annotations,
            summary_template=settings.get("summary_template", DEFAULT_SUMMARY_TEMPLATE),
            title_success=settings.get("title_success", "ESLint found no errors"),
            title_failure=settings.get("title_failure", "ESLint found {{ error_count }} error(s)"),
        )

    async def run(self, paths: list[str]) -> LintOutcome:
        args = [*self.command, "--format", "json", *paths]
        self.logger.info(f"Running {' '.join(self.command)} on {len(paths)} file(s)")

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=str(self.repo_root),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise EngineError(f"Could not start ESLint: {e}") from e

        stdout, stderr = await process.communicate()

        if process.returncode not in ESLINT_OK_EXIT_CODES:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise EngineError(
                detail or f"ESLint exited with code {process.returncode}",
                exit_code=process.returncode
            )

        try:
            report = json.loads(stdout.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise EngineError(f"Could not parse ESLint output: {e}") from e

        return self.build_outcome(report)

    def build_outcome(self, report: list[dict]) -> LintOutcome:
        """
        Convert an ESLint JSON report into a LintOutcome.

        Args:
            report: Parsed output of "eslint --format json"

        Returns:
            Failure when any error was reported, success otherwise
        """
        error_count = 0
        warning_count = 0
        annotations = []

        for file_result in report:
            error_count += file_result.get("errorCount", 0)
            warning_count += file_result.get("warningCount", 0)
            path = self._relative_path(file_result.get("filePath", ""))
            for message in file_result.get("messages", []):
                annotations.append(self._annotation(path, message))

        total = len(annotations)
        truncated = total > self.max_annotations
        annotations = annotations[:self.max_annotations]

        values = {
            "error_count": error_count,
            "warning_count": warning_count,
            "file_count": len(report),
            "truncated": truncated,
            "shown": len(annotations),
            "total": total,
        }
        title = (self.title_failure if error_count else self.title_success).render(**values)
        output = LintOutput(
            title=title,
            summary=self.summary_template.render(**values),
            annotations=annotations,
        )

        if error_count > 0:
            return LintOutcome.failure(output)
        return LintOutcome.success(output)

    def _relative_path(self, file_path: str) -> str:
        if os.path.isabs(file_path):
            file_path = os.path.relpath(file_path, self.repo_root.resolve())
        return file_path.replace(os.sep, "/")

    @staticmethod
    def _annotation(path: str, message: dict) -> LintAnnotation:
        start_line = message.get("line") or 1
        end_line = message.get("endLine") or start_line
        rule_id = message.get("ruleId")
        text = message.get("message", "")
        return LintAnnotation(
            path=path,
            start_line=start_line,
            end_line=end_line,
            message=f"[{rule_id}] {text}" if rule_id else text,
            annotation_level="failure" if message.get("severity") == 2 else "warning",
            title=rule_id,
            start_column=message.get("column"),
            end_column=message.get("endColumn"),
        )
