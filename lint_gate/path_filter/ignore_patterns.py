# AGPL-3.0 License

"""
Ignore-file parsing and matching of repository paths against its patterns.
"""

import fnmatch
from pathlib import Path
from typing import Iterable, Optional

import pathspec

from lint_gate.log import get_logger

GLOB_CHARS = frozenset("*?[")


def parse_ignore_lines(content: str) -> list[str]:
    """
    Turn ignore-file contents into an ordered list of patterns.

    Each line is trimmed and a single leading "/" is removed so that the
    pattern is read relative to the repository root. Blank lines are dropped.
    There is no comment or negation syntax.

    Args:
        content: Raw ignore-file text

    Returns:
        Patterns in file order
    """
    patterns = []
    for line in content.split("\n"):
        line = line.strip()
        if line.startswith("/"):
            line = line[1:]
        if line:
            patterns.append(line)
    return patterns


def is_glob(pattern: str) -> bool:
    return any(c in GLOB_CHARS for c in pattern)


def glob_match(pattern: str, path: str) -> bool:
    """
    Shell-glob match of a whole path, one directory level per segment.

    "*", "?" and character classes stay within a segment and match leading
    dots; a "**" segment matches zero or more directory levels.
    """
    return _match_parts(pattern.split("/"), path.split("/"))


def _match_parts(pattern_parts: list[str], path_parts: list[str]) -> bool:
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(_match_parts(rest, path_parts[i:]) for i in range(len(path_parts) + 1))

    if not path_parts or not fnmatch.fnmatchcase(path_parts[0], head):
        return False
    return _match_parts(rest, path_parts[1:])


class PatternMatcher:
    """
    Matches repository paths against ignore patterns anchored at the root.

    A pattern without wildcards names a file or a directory; a directory
    covers every file below it, so "dist" matches "dist/index.js" but not
    "src/dist/index.js". A wildcard pattern is a shell glob matched level by
    level, so "dist/*" matches "dist/index.js" but not "dist/sub/deep.js".

    Only the candidate paths are tested; the repository tree is never walked.
    """

    def __init__(self, repo_root: Path):
        """
        Initialize the matcher.

        Args:
            repo_root: Repository root the patterns are anchored to
        """
        self.repo_root = Path(repo_root)
        self.logger = get_logger()

    def match(self, patterns: Iterable[str], paths: Iterable[str]) -> set[str]:
        """
        Return the candidate paths present in the repository that any pattern matches.

        Args:
            patterns: Pre-processed patterns (see parse_ignore_lines)
            paths: Repository-relative POSIX paths, e.g. a PR's changed files

        Returns:
            Matched subset of paths
        """
        patterns = list(patterns)
        if not patterns:
            return set()

        literal = [p for p in patterns if not is_glob(p)]
        wildcard = [p for p in patterns if is_glob(p)]
        # Leading "/" anchors a gitwildmatch entry to the root and keeps a
        # leading "!" or "#" literal.
        literal_spec = pathspec.PathSpec.from_lines("gitwildmatch", [f"/{p}" for p in literal])

        matched = set()
        for path in paths:
            if not (self.repo_root / path).is_file():
                continue
            if literal_spec.match_file(path) or any(glob_match(p, path) for p in wildcard):
                matched.add(path)
        return matched

    def load_patterns(self, ignore_file: Path) -> Optional[list[str]]:
        """
        Read and parse an ignore file.

        Args:
            ignore_file: Path to the ignore file

        Returns:
            Parsed patterns, or None if the file does not exist
        """
        ignore_file = Path(ignore_file)
        if not ignore_file.is_file():
            self.logger.debug(f"No ignore file at {ignore_file}")
            return None
        return parse_ignore_lines(ignore_file.read_text(encoding="utf-8"))

    def excluded_paths(self, ignore_file: Path, paths: Iterable[str]) -> set[str]:
        """
        Compute which of the given paths the ignore file excludes.

        A missing ignore file yields the empty set.
        """
        patterns = self.load_patterns(ignore_file)
        if patterns is None:
            return set()

        excluded = self.match(patterns, paths)
        self.logger.debug(f"Ignored {len(excluded)} file(s) from {len(patterns)} pattern(s)")
        return excluded
