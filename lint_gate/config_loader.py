# AGPL-3.0 License

"""
Settings loading and the explicit gate configuration object.
"""

from dataclasses import dataclass, field
from os.path import abspath, dirname, join
from pathlib import Path
from typing import Optional

from dynaconf import Dynaconf

from lint_gate.errors import ConfigurationError

current_dir = dirname(abspath(__file__))
global_settings = Dynaconf(
    envvar_prefix="LINT_GATE",
    merge_enabled=True,
    settings_files=[join(current_dir, "settings/configuration.toml")],
)


def get_settings():
    return global_settings


DEFAULT_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx"})


@dataclass(frozen=True)
class GateConfig:
    """
    Configuration for a single gate invocation.

    Attributes:
        repo_token: Token used for every call to the git provider
        check_name: Name of an existing in-progress check run to reuse, if any
        gate_name: Name given to a newly created check run
        extensions: File extensions (with leading dot) that are linted
        ignore_file: Ignore-pattern file, relative to repo_root
        repo_root: Checkout of the repository under test
        max_annotations: Upper bound on annotations sent in one update
    """
    repo_token: str
    check_name: Optional[str] = None
    gate_name: str = "ESLint"
    extensions: frozenset[str] = field(default=DEFAULT_EXTENSIONS)
    ignore_file: str = ".eslintignore"
    repo_root: Path = Path(".")
    max_annotations: int = 50

    def __post_init__(self):
        if not self.repo_token:
            raise ConfigurationError("Input required and not supplied: repo-token")
        # An empty check name means "always create a new check run"
        if not self.check_name:
            object.__setattr__(self, "check_name", None)
        object.__setattr__(self, "extensions", frozenset(self.extensions))
        object.__setattr__(self, "repo_root", Path(self.repo_root))

    @property
    def ignore_path(self) -> Path:
        return self.repo_root / self.ignore_file

    @classmethod
    def from_settings(
        cls,
        repo_token: str,
        check_name: Optional[str] = None,
        repo_root: str | Path = "."
    ) -> "GateConfig":
        """Build a GateConfig from the loaded settings plus per-run inputs."""
        settings = get_settings().get("lint_gate", {})
        return cls(
            repo_token=repo_token,
            check_name=check_name,
            gate_name=settings.get("check_name", "ESLint"),
            extensions=frozenset(settings.get("extensions", DEFAULT_EXTENSIONS)),
            ignore_file=settings.get("ignore_file", ".eslintignore"),
            repo_root=Path(repo_root),
            max_annotations=int(settings.get("max_annotations", 50)),
        )
