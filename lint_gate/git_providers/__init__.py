# AGPL-3.0 License

from lint_gate.git_providers.github_provider import GithubProvider

__all__ = [
    "GithubProvider",
]
