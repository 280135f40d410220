# AGPL-3.0 License

"""
Unit tests for GateConfig and GateStatus.
"""

import io
from pathlib import Path

import pytest

from lint_gate.config_loader import GateConfig
from lint_gate.errors import ConfigurationError
from lint_gate.gate_status import GateStatus, escape_command_data


class TestGateConfig:
    """Tests for GateConfig."""

    def test_repo_token_is_required(self):
        with pytest.raises(ConfigurationError):
            GateConfig(repo_token="")

    def test_empty_check_name_means_none(self):
        assert GateConfig(repo_token="t", check_name="").check_name is None

    def test_ignore_path(self):
        config = GateConfig(repo_token="t", repo_root="/repo")

        assert config.ignore_path == Path("/repo/.eslintignore")

    def test_from_settings_defaults(self):
        config = GateConfig.from_settings(repo_token="t", check_name="lint", repo_root="/repo")

        assert config.gate_name == "ESLint"
        assert config.check_name == "lint"
        assert config.extensions == frozenset({".js", ".jsx", ".ts", ".tsx"})
        assert config.ignore_file == ".eslintignore"
        assert config.max_annotations == 50


class TestGateStatus:
    """Tests for GateStatus."""

    def test_defaults_to_success(self):
        assert GateStatus(stream=io.StringIO()).exit_code == 0

    def test_set_failed_emits_error_command(self):
        stream = io.StringIO()
        status = GateStatus(stream=stream)

        status.set_failed("ESLint found some errors")

        assert status.exit_code == 1
        assert status.message == "ESLint found some errors"
        assert stream.getvalue() == "::error::ESLint found some errors\n"

    def test_warning_does_not_fail(self):
        stream = io.StringIO()
        status = GateStatus(stream=stream)

        status.warning("No PR info retrieved")

        assert status.exit_code == 0
        assert stream.getvalue() == "::warning::No PR info retrieved\n"

    def test_escape_command_data(self):
        assert escape_command_data("50% done\nnext\r") == "50%25 done%0Anext%0D"
