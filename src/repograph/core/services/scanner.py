from __future__ import annotations

"""
Repository Scanning Service.

Public entry points of the core: resolve the scan root, build the
ignore matcher from the root-level ignore file and run one of the two
independent traversals. Only a failure on the root itself reaches the
caller, as a RootUnresolvableError.
"""

import logging
import os
from typing import List

from repograph.core.analysis.connections import extract_connections
from repograph.core.analysis.tree_builder import build_tree
from repograph.core.filtering.ignore import IgnoreMatcher, NullMatcher, load_ignore_matcher
from repograph.domain.constants import DEFAULT_IGNORE_FILE
from repograph.domain.errors import RootUnresolvableError
from repograph.domain.graph_models import Connection, TreeNode

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_repository(
        path: str,
        *,
        respect_gitignore: bool = True,
        ignore_file_name: str = DEFAULT_IGNORE_FILE,
) -> TreeNode:
    """
    Build the tree of non-hidden, non-ignored entries rooted at path.

    Args:
        path: Repository root as supplied by the caller.
        respect_gitignore: Whether to load the root ignore file.
        ignore_file_name: Name of the root ignore file.

    Returns:
        TreeNode: Root node with relative_path "".

    Raises:
        RootUnresolvableError: If the root cannot be resolved or stat'ed.
    """
    abs_path = resolve_root(path)
    matcher = prepare_matcher(abs_path, respect_gitignore, ignore_file_name)

    try:
        tree = build_tree(abs_path, "", matcher)
    except OSError as e:
        raise RootUnresolvableError(path, str(e)) from e

    logger.debug(f"Tree built for {abs_path}")
    return tree


def get_file_connections(
        path: str,
        *,
        respect_gitignore: bool = True,
        ignore_file_name: str = DEFAULT_IGNORE_FILE,
) -> List[Connection]:
    """
    Collect every inferred connection found under path.

    Args:
        path: Repository root as supplied by the caller.
        respect_gitignore: Whether to load the root ignore file.
        ignore_file_name: Name of the root ignore file.

    Returns:
        List[Connection]: Concatenated connections in traversal order.

    Raises:
        RootUnresolvableError: If the root cannot be resolved, stat'ed or listed.
    """
    abs_path = resolve_root(path)
    matcher = prepare_matcher(abs_path, respect_gitignore, ignore_file_name)

    try:
        connections = extract_connections(abs_path, "", matcher)
    except OSError as e:
        raise RootUnresolvableError(path, str(e)) from e

    logger.debug(f"Extracted {len(connections)} connections from {abs_path}")
    return connections


def resolve_root(path: str) -> str:
    """
    Make the scan root absolute and verify it can be stat'ed.

    Raises:
        RootUnresolvableError: If the path is empty, cannot be made
                               absolute or does not exist.
    """
    if not path:
        raise RootUnresolvableError(path, "empty path")

    try:
        abs_path = os.path.abspath(path)
        os.stat(abs_path)
    except (OSError, ValueError) as e:
        raise RootUnresolvableError(path, str(e)) from e

    return abs_path


def prepare_matcher(abs_path: str, respect_gitignore: bool, ignore_file_name: str) -> IgnoreMatcher:
    """Build the ignore matcher for a resolved root, honoring the opt-out flag."""
    if not respect_gitignore:
        return NullMatcher()
    return load_ignore_matcher(abs_path, ignore_file_name)
