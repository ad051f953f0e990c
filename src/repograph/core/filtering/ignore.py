from __future__ import annotations

"""
Ignore-Rule Matching.

Decides whether a path relative to the scan root is excluded from both
traversals. Rules come from a single ignore file located directly in the
scan root and follow the gitignore syntax (wildcards, directory-only
entries and negations). A missing or unparseable file degrades to a
matcher that ignores nothing.
"""

import logging
import os
from typing import Iterable, Protocol

import pathspec

from repograph.domain.constants import DEFAULT_IGNORE_FILE
from repograph.infra.fs import to_posix

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# MATCHER CAPABILITY
# -----------------------------------------------------------------------------

class IgnoreMatcher(Protocol):
    """Single-predicate capability shared by every matcher variant."""

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        ...


class NullMatcher:
    """Matcher used when no usable ignore file exists. Ignores nothing."""

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullMatcher()"


class GitIgnoreMatcher:
    """
    Matcher backed by compiled gitignore patterns.

    Directory entries are also tested with a trailing slash so that
    directory-only rules such as 'build/' exclude the directory itself.
    """

    def __init__(self, spec: pathspec.PathSpec) -> None:
        self._spec = spec

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GitIgnoreMatcher":
        """
        Compile raw ignore-file lines.

        Raises:
            ValueError: If a pattern cannot be compiled.
        """
        return cls(pathspec.GitIgnoreSpec.from_lines(lines))

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        path = to_posix(relative_path).strip("/")
        if not path:
            return False
        if is_dir and self._spec.match_file(path + "/"):
            return True
        return self._spec.match_file(path)

    def __repr__(self) -> str:
        return f"GitIgnoreMatcher(patterns={len(self._spec.patterns)})"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_ignore_matcher(root_path: str, ignore_file_name: str = DEFAULT_IGNORE_FILE) -> IgnoreMatcher:
    """
    Build the matcher for a scan root.

    Looks for the ignore file directly inside the root. Undecodable bytes
    are replaced rather than rejected. Absence, read failures and
    compilation failures all fall back to NullMatcher; this function never
    raises.

    Args:
        root_path: Absolute path of the scan root.
        ignore_file_name: Name of the ignore-rule file.

    Returns:
        IgnoreMatcher: Pattern-backed matcher or NullMatcher.
    """
    ignore_path = os.path.join(root_path, ignore_file_name)
    if not os.path.exists(ignore_path):
        return NullMatcher()

    try:
        with open(ignore_path, "r", encoding="utf-8", errors="replace") as f:
            matcher = GitIgnoreMatcher.from_lines(f.read().splitlines())
    except (OSError, ValueError) as e:
        logger.warning(f"Ignore file '{ignore_path}' is unusable, ignoring nothing: {e}")
        return NullMatcher()

    logger.debug(f"Loaded {matcher!r} from {ignore_path}")
    return matcher
