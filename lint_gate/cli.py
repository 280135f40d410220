# AGPL-3.0 License

import argparse
import asyncio
import os
import sys

from lint_gate.config_loader import GateConfig, get_settings
from lint_gate.gate_status import GateStatus
from lint_gate.git_providers import GithubProvider
from lint_gate.log import LoggingFormat, get_logger, setup_logger
from lint_gate.tools.lint_gate import LintGate


def action_input(name: str) -> str:
    """Read a GitHub Actions input the way the runner exposes it."""
    return os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


def set_parser():
    parser = argparse.ArgumentParser(
        description="Lint the files changed in a pull request and report a single check run.",
    )
    parser.add_argument("--repo-token", default=action_input("repo-token"),
                        help="Token used to read the PR and write check runs")
    parser.add_argument("--check-name", default=action_input("check-name"),
                        help="Name of an in-progress check run to reuse")
    parser.add_argument("--repo-root", default=".",
                        help="Checkout of the repository (default: current directory)")
    parser.add_argument("--pr-number", type=int, default=None,
                        help="PR number (default: read from the event payload)")
    parser.add_argument("--log-level", default=get_settings().get("lint_gate", {}).get("log_level", "INFO"))
    parser.add_argument("--log-format", choices=[f.value for f in LoggingFormat],
                        default=get_settings().get("lint_gate", {}).get("log_format", "CONSOLE"))
    return parser


async def run_gate(args, status: GateStatus) -> GateStatus:
    config = GateConfig.from_settings(
        repo_token=args.repo_token,
        check_name=args.check_name,
        repo_root=args.repo_root,
    )
    git_provider = GithubProvider.from_actions_env(config.repo_token, pr_number=args.pr_number)
    return await LintGate(config, git_provider, status=status).run()


def run(inargs=None) -> int:
    args = set_parser().parse_args(inargs)
    setup_logger(args.log_level, LoggingFormat(args.log_format))

    status = GateStatus()
    try:
        asyncio.run(run_gate(args, status))
    except Exception as e:
        get_logger().exception(f"Lint gate failed: {e}")
        status.set_failed(str(e) or type(e).__name__)
    return status.exit_code


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
