from __future__ import annotations

"""
Heuristic Connection Extractor.

Walks the repository with the same skip rules as the tree builder and
scans every recognized source file line by line for import-like
statements. Each line is evaluated on its own, so statements spanning
several lines are never detected. No de-duplication is performed.
"""

import logging
import os
import stat
from collections import deque
from typing import Deque, List

from repograph.core.analysis.languages import language_for, match_rule
from repograph.core.analysis.target_parser import extract_bare_target, extract_target
from repograph.core.filtering.ignore import IgnoreMatcher
from repograph.core.filtering.visibility import list_visible_entries
from repograph.domain.graph_models import Connection

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_connections(root_path: str, relative_path: str, matcher: IgnoreMatcher) -> List[Connection]:
    """
    Collect connections for one entry below the scan root.

    Directories are walked depth-first with an explicit stack and their
    results concatenated in listing order. A child that fails (stat,
    listing or read) is dropped without aborting its siblings.

    Args:
        root_path: Absolute path of the scan root.
        relative_path: Entry path relative to the root ("" for the root).
        matcher: Ignore matcher built for the scan root.

    Returns:
        List[Connection]: Connections found under the entry.

    Raises:
        OSError: If the entry itself cannot be stat'ed, listed or read.
    """
    full_path = os.path.join(root_path, relative_path) if relative_path else root_path
    st = os.stat(full_path)

    if not stat.S_ISDIR(st.st_mode):
        return extract_file_connections(root_path, relative_path)

    all_connections: List[Connection] = []
    pending: Deque[str] = deque(reversed(list_visible_entries(full_path, relative_path, matcher)))

    while pending:
        child_path = pending.pop()
        child_full_path = os.path.join(root_path, child_path)
        try:
            if stat.S_ISDIR(os.stat(child_full_path).st_mode):
                # Reversed so the first listed child is popped next
                pending.extend(reversed(list_visible_entries(child_full_path, child_path, matcher)))
            else:
                all_connections.extend(extract_file_connections(root_path, child_path))
        except OSError as e:
            logger.debug(f"Dropping connections of '{child_path}': {e}")
            continue

    return all_connections


def extract_file_connections(root_path: str, relative_path: str) -> List[Connection]:
    """
    Scan a single file for import-like lines.

    Files with an unrecognized extension yield an empty list and are not
    read.

    Args:
        root_path: Absolute path of the scan root.
        relative_path: File path relative to the root.

    Returns:
        List[Connection]: One connection per matching line and marker.

    Raises:
        OSError: If a recognized file cannot be read.
    """
    language = language_for(relative_path)
    if language is None:
        return []

    full_path = os.path.join(root_path, relative_path) if relative_path else root_path
    with open(full_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()

    return scan_lines(relative_path, language, content.split("\n"))


def scan_lines(relative_path: str, language: str, lines: List[str]) -> List[Connection]:
    """
    Apply a language family's rules to raw source lines.

    Every marker of the triggered rule is tested; each one that yields a
    non-empty target emits its own connection.
    """
    connections: List[Connection] = []

    for raw_line in lines:
        line = raw_line.strip()
        rule = match_rule(language, line)
        if rule is None:
            continue

        for marker in rule.markers:
            if marker not in line:
                continue
            if rule.bare:
                target = extract_bare_target(line, marker)
            else:
                target = extract_target(line, marker)
            if target:
                connections.append(Connection.create(relative_path, target, rule.kind))

    return connections
