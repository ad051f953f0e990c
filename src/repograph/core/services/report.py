from __future__ import annotations

"""
Repository Report Engine.

Coordinates one scan of a repository:
1. Validates configuration and resolves the root.
2. Runs tree building and connection extraction as independent tasks.
3. Wraps both views and their counters in an immutable report.

The two traversals share nothing but the read-only filesystem, so they
are executed in parallel threads when both are requested.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from repograph.core.services.scanner import get_file_connections, resolve_root, scan_repository
from repograph.core.services.validator import validate_config
from repograph.domain.errors import RootUnresolvableError
from repograph.domain.graph_models import Connection, TreeNode
from repograph.domain.report_models import (
    RepositoryReport,
    create_error_report,
    create_success_report,
)
from repograph.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def build_report(config: Optional[Dict[str, Any]]) -> RepositoryReport:
    """
    Execute a full repository scan.

    Root failures never raise; they produce a report with ok=False.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        RepositoryReport: Object containing status, views and summary.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    mode = cfg["mode"]
    raw_path = cfg["input_path"]

    try:
        root_path = resolve_root(normalize_path(raw_path, raw_path))
    except RootUnresolvableError as e:
        logger.error(str(e))
        return create_error_report(str(e), raw_path, mode)

    logger.info(f"Scanning repository: {root_path} (mode={mode})")

    scan_kwargs: Dict[str, Any] = {
        "respect_gitignore": cfg["respect_gitignore"],
        "ignore_file_name": cfg["ignore_file_name"],
    }
    want_tree = mode in ("all", "tree")
    want_connections = mode in ("all", "connections")

    tree: Optional[TreeNode] = None
    connections: List[Connection] = []

    try:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ScanExecutor") as executor:
            future_tree = executor.submit(scan_repository, root_path, **scan_kwargs) if want_tree else None
            future_conns = (
                executor.submit(get_file_connections, root_path, **scan_kwargs)
                if want_connections else None
            )

            if future_tree is not None:
                tree = future_tree.result()
            if future_conns is not None:
                connections = future_conns.result()
    except RootUnresolvableError as e:
        logger.error(str(e))
        return create_error_report(str(e), root_path, mode)

    report = create_success_report(root_path, mode, tree=tree, connections=connections)
    logger.info(
        f"Scan finished: {report.summary['files']} files, "
        f"{report.summary['connections']} connections."
    )
    return report
