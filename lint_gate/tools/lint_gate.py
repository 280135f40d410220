# AGPL-3.0 License

"""
Lint gate tool - lints a PR's changed files and reports one check run.
"""

from typing import Optional

from lint_gate.checks.coordinator import CheckRunCoordinator
from lint_gate.checks.publisher import ReportPublisher
from lint_gate.config_loader import GateConfig
from lint_gate.engines.base_engine import BaseLintEngine
from lint_gate.engines.eslint_engine import ESLintEngine
from lint_gate.gate_status import GateStatus
from lint_gate.log import get_logger
from lint_gate.path_filter.file_selector import FileSelector
from lint_gate.path_filter.ignore_patterns import PatternMatcher


class LintGate:
    """
    Lint gate tool - selects lint targets and reports the result as a check run.
    """

    def __init__(
        self,
        config: GateConfig,
        git_provider,
        engine: Optional[BaseLintEngine] = None,
        status: Optional[GateStatus] = None
    ):
        """
        Initialize the lint gate.

        Args:
            config: Gate configuration for this invocation
            git_provider: Provider for PR metadata and check runs
            engine: Lint engine, ESLint by default
            status: Process status to report into
        """
        self.config = config
        self.git_provider = git_provider
        self.engine = engine or ESLintEngine.from_settings(config.repo_root, config.max_annotations)
        self.status = status or GateStatus()
        self.logger = get_logger()

    async def run(self) -> GateStatus:
        """Select files, lint them and publish the check run."""
        pr_info = await self.git_provider.get_pr_info()
        if not pr_info:
            self.status.warning("No PR info retrieved")
            return self.status

        targets = self.select_targets(pr_info.files)
        if not targets:
            extensions = ", ".join(sorted(self.config.extensions))
            self.status.warning(
                f"No files with [{extensions}] extensions added or modified in this PR, nothing to lint..."
            )
            return self.status

        coordinator = CheckRunCoordinator(self.git_provider, self.config.gate_name)
        handle = await coordinator.acquire(pr_info.head_sha, self.config.check_name)

        publisher = ReportPublisher(self.git_provider, self.status, self.config.gate_name)
        await publisher.publish(handle, self.engine, targets)

        self.logger.info(
            f"Lint gate finished: {'failed' if self.status.failed else 'passed'}",
            extra={"check_run_id": handle.check_run_id, "target_count": len(targets)}
        )
        return self.status

    def select_targets(self, changed_files) -> list[str]:
        excluded = PatternMatcher(self.config.repo_root).excluded_paths(
            self.config.ignore_path, [f.path for f in changed_files]
        )
        targets = FileSelector().select(changed_files, self.config.extensions, excluded)
        self.logger.info(f"Selected {len(targets)} of {len(changed_files)} changed file(s) to lint")
        return targets
