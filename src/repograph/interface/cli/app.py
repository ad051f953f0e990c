from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, persistent storage and CLI
overrides), report execution and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from repograph.core.analysis.tree_renderer import render_tree
from repograph.core.services.report import build_report
from repograph.core.services.validator import validate_config
from repograph.domain.config import get_default_config, load_config, save_config
from repograph.domain.report_models import RepositoryReport
from repograph.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from repograph.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 3. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 5. Logging bootstrap (console stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=_resolve_log_file(args.log_file),
    )
    configure_logging(logging_conf)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 6. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.exists(input_path):
        msg = f"Input path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(clean_conf)

    # 7. Report execution phase
    try:
        report = build_report(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Scan failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(
            report,
            show_tree=clean_conf["print_tree"],
            show_connections=clean_conf["show_connections"],
        )

    return 0 if report.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "mode", "respect_gitignore", "ignore_file_name",
        "print_tree", "show_connections", "log_level",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _resolve_log_file(value: Optional[str]) -> Optional[str]:
    """Map the --log-file value to a path; an empty value selects the default log file."""
    if value is None:
        return None
    return value or get_default_log_path()

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: RepositoryReport, show_tree: bool, show_connections: bool) -> None:
    """
    Format and print the report to standard output.

    Args:
        report: The report to render.
        show_tree: Whether to include the ASCII tree.
        show_connections: Whether to include the connection list.
    """
    if not report.ok:
        print(f"ERROR: {report.error}", file=sys.stderr)
        return

    print(f"Repository: {report.root_path}")

    if show_tree and report.tree is not None:
        print()
        for line in render_tree(report.tree):
            print(line)

    if show_connections and report.connections:
        print("\nConnections:")
        for conn in report.connections:
            print(f"  {conn.from_path} -> {conn.to_target} [{conn.kind}]")

    summary = report.summary
    print()
    if report.tree is not None:
        print(f"Files: {summary['files']}")
        print(f"Directories: {summary['directories']}")
    print(f"Connections: {summary['connections']}")
    for kind, count in sorted(summary["by_kind"].items()):
        print(f"  - {kind}: {count}")


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
