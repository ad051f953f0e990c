from __future__ import annotations

"""
Repository Tree Builder.

Walks a directory depth-first and produces the nested TreeNode model.
Only the entry requested by the caller may fail; anything below it that
cannot be stat'ed or listed degrades to an omission. The walk keeps its
pending directories on an explicit stack, so nesting depth is bounded by
the filesystem rather than the interpreter recursion limit.
"""

import logging
import os
import stat
from collections import deque
from typing import Deque, List, Tuple

from repograph.core.filtering.ignore import IgnoreMatcher
from repograph.core.filtering.visibility import list_visible_entries
from repograph.domain.graph_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root_path: str, relative_path: str, matcher: IgnoreMatcher) -> TreeNode:
    """
    Build the tree for one entry below the scan root.

    Files become leaf nodes without reading their content. Directories are
    listed; a listing failure yields the directory node with no children.
    Children that fail to stat are dropped from the result.

    Args:
        root_path: Absolute path of the scan root.
        relative_path: Entry path relative to the root ("" for the root).
        matcher: Ignore matcher built for the scan root.

    Returns:
        TreeNode: The node for the requested entry.

    Raises:
        OSError: If the requested entry itself cannot be stat'ed.
    """
    root_node, root_children = _visit(root_path, relative_path, matcher)

    pending: Deque[Tuple[TreeNode, List[str]]] = deque()
    if root_children:
        pending.append((root_node, root_children))

    while pending:
        parent, child_paths = pending.pop()
        for child_path in child_paths:
            try:
                child, grandchildren = _visit(root_path, child_path, matcher)
            except OSError as e:
                logger.debug(f"Dropping unreadable entry '{child_path}': {e}")
                continue

            # Children lists are filled in place, in listing order
            parent.children.append(child)
            if grandchildren:
                pending.append((child, grandchildren))

    return root_node

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _visit(root_path: str, relative_path: str, matcher: IgnoreMatcher) -> Tuple[TreeNode, List[str]]:
    """
    Stat one entry and, for directories, resolve its visible children.

    Returns:
        Tuple[TreeNode, List[str]]: The node (with an empty children list for
                                    directories) and the child paths to visit.

    Raises:
        OSError: If the entry cannot be stat'ed.
    """
    full_path = os.path.join(root_path, relative_path) if relative_path else root_path
    st = os.stat(full_path)
    name = _entry_name(full_path)

    if not stat.S_ISDIR(st.st_mode):
        return TreeNode(name=name, relative_path=relative_path, is_directory=False), []

    node = TreeNode(name=name, relative_path=relative_path, is_directory=True, children=[])
    try:
        child_paths = list_visible_entries(full_path, relative_path, matcher)
    except OSError as e:
        logger.debug(f"Cannot list '{full_path}', keeping it childless: {e}")
        return node, []

    return node, child_paths


def _entry_name(full_path: str) -> str:
    """Base name of an entry, falling back to the path itself for filesystem roots."""
    return os.path.basename(os.path.normpath(full_path)) or full_path
