# AGPL-3.0 License

"""
Pull request and check-run records exchanged with the git provider.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangedFile:
    """A file touched by the pull request, relative to the repository root."""
    path: str


@dataclass(frozen=True)
class PRInfo:
    """
    Metadata for the pull request under test.

    Attributes:
        files: Changed files in the order the provider lists them
        head_sha: Id of the most recent commit on the PR branch
    """
    head_sha: str
    files: list[ChangedFile] = field(default_factory=list)


@dataclass(frozen=True)
class CheckRunRecord:
    """A check run as listed by the provider."""
    id: int
    name: str
    status: str


@dataclass(frozen=True)
class CheckRunHandle:
    """
    The single check run this invocation reports to.

    Attributes:
        check_run_id: Provider id of the check run
        reused: True when an existing in-progress run was adopted
    """
    check_run_id: int
    reused: bool = False
