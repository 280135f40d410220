# AGPL-3.0 License

import posixpath
from typing import AbstractSet, Iterable

from lint_gate.checks.check_context import ChangedFile
from lint_gate.log import get_logger


def file_extension(path: str) -> str:
    """Final ".ext" of a path including the dot; "" for dotfiles and bare names."""
    return posixpath.splitext(path)[1]


class FileSelector:
    """
    Picks the changed files that should be handed to the lint engine.
    """

    def __init__(self):
        self.logger = get_logger()

    def select(
        self,
        changed_files: Iterable[ChangedFile],
        allow_extensions: AbstractSet[str],
        excluded: AbstractSet[str]
    ) -> list[str]:
        """
        Filter the PR's changed files down to the lint target list.

        A path is kept when its extension is allowed and it is not in the
        excluded set. Input order is preserved.

        Args:
            changed_files: Files from the PR listing
            allow_extensions: Extensions to lint, e.g. {".ts", ".js"}
            excluded: Repository paths matched by the ignore file

        Returns:
            Paths to lint, possibly empty
        """
        targets = [
            f.path for f in changed_files
            if file_extension(f.path) in allow_extensions and f.path not in excluded
        ]
        self.logger.debug(f"Files to lint: {targets}")
        return targets
