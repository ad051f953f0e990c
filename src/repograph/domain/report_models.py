from __future__ import annotations

"""
Report Domain Data Models.

Defines the immutable result of a repository scan and the factory
functions used to communicate it between the report engine and the
interface layer.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from repograph.domain.constants import LANGUAGE_BY_EXTENSION
from repograph.domain.graph_models import Connection, TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RepositoryReport:
    """
    Unified result of one repository scan.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Absolute (or raw, on failure) scan root.
        mode: Which views were requested (all/tree/connections).
        tree: Repository tree, None if not requested or on failure.
        connections: Inferred dependency edges.
        summary: Counters describing both views.
    """
    ok: bool
    error: str

    root_path: str
    mode: str

    tree: Optional[TreeNode] = None
    connections: List[Connection] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report using the visualizer wire keys."""
        return {
            "ok": self.ok,
            "error": self.error,
            "root_path": self.root_path,
            "mode": self.mode,
            "tree": self.tree.to_dict() if self.tree else None,
            "connections": [c.to_dict() for c in self.connections],
            "summary": self.summary,
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_report(error: str, root_path: str, mode: str) -> RepositoryReport:
    """
    Create a failed report instance.

    Args:
        error: Detailed error description.
        root_path: The root that was requested.
        mode: Requested scan mode.

    Returns:
        RepositoryReport: An immutable error report.
    """
    return RepositoryReport(ok=False, error=error, root_path=root_path, mode=mode)


def create_success_report(
        root_path: str,
        mode: str,
        tree: Optional[TreeNode] = None,
        connections: Optional[List[Connection]] = None,
) -> RepositoryReport:
    """
    Create a successful report instance with computed summary metrics.

    Args:
        root_path: Absolute scan root.
        mode: Scan mode that produced the views.
        tree: Built tree, if requested.
        connections: Extracted connections, if requested.

    Returns:
        RepositoryReport: An immutable success report.
    """
    conns = connections or []
    summary = build_summary(tree, conns)

    return RepositoryReport(
        ok=True,
        error="",
        root_path=root_path,
        mode=mode,
        tree=tree,
        connections=conns,
        summary=summary,
    )


def build_summary(tree: Optional[TreeNode], connections: List[Connection]) -> Dict[str, Any]:
    """
    Compute file, directory and connection counters.

    The root node itself is not counted as a directory.
    """
    by_kind: Dict[str, int] = {}
    by_language: Dict[str, int] = {}
    for conn in connections:
        by_kind[conn.kind] = by_kind.get(conn.kind, 0) + 1
        ext = os.path.splitext(conn.from_path)[1].lower()
        language = LANGUAGE_BY_EXTENSION.get(ext, "unknown")
        by_language[language] = by_language.get(language, 0) + 1

    files = tree.count_files() if tree else 0
    directories = tree.count_directories() - 1 if tree and tree.is_directory else 0

    return {
        "files": files,
        "directories": directories,
        "connections": len(connections),
        "by_kind": by_kind,
        "by_language": by_language,
    }
