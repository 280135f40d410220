# AGPL-3.0 License

"""
Selection of lint targets from a pull request's changed files.

Changed paths are kept by extension and dropped when an ignore-file
pattern matches them.
"""

from lint_gate.path_filter.file_selector import FileSelector, file_extension
from lint_gate.path_filter.ignore_patterns import PatternMatcher, glob_match, parse_ignore_lines

__all__ = [
    "FileSelector",
    "PatternMatcher",
    "file_extension",
    "glob_match",
    "parse_ignore_lines",
]
