from __future__ import annotations

"""
Directory Entry Visibility.

Shared skip rules applied by both traversals: entries whose name starts
with the hidden marker are dropped unconditionally, then the ignore
matcher is consulted with the entry path relative to the scan root.
"""

import os
from typing import List

from repograph.core.filtering.ignore import IgnoreMatcher
from repograph.domain.constants import HIDDEN_PREFIX


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def list_directory(full_path: str) -> List[os.DirEntry]:
    """
    List the immediate entries of a directory in filesystem order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(full_path) as it:
        return list(it)


def list_visible_entries(full_path: str, relative_path: str, matcher: IgnoreMatcher) -> List[str]:
    """
    Resolve the relative paths of the children that survive the skip rules.

    Order follows the underlying listing; no sort is applied.

    Args:
        full_path: Absolute path of the directory being listed.
        relative_path: Its path relative to the scan root.
        matcher: Ignore matcher built for the scan root.

    Returns:
        List[str]: Relative paths of the visible children.

    Raises:
        OSError: If the directory cannot be listed.
    """
    visible: List[str] = []
    for entry in list_directory(full_path):
        if is_hidden(entry.name):
            continue

        entry_relative_path = os.path.join(relative_path, entry.name)
        try:
            entry_is_dir = entry.is_dir()
        except OSError:
            entry_is_dir = False

        if matcher.matches(entry_relative_path, is_dir=entry_is_dir):
            continue
        visible.append(entry_relative_path)
    return visible
