from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from repograph.domain.constants import SCAN_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the repograph CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="repograph",
        description="Build the file tree and the inferred import graph of a repository.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Repository root to scan (defaults to the last session or the cwd).",
    )

    # --- Scan Scope ---
    p.add_argument(
        "--mode",
        dest="mode",
        choices=SCAN_MODES,
        default=None,
        help="Which views to build: the tree, the connections or both.",
    )
    p.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not read the root ignore file.",
    )
    p.add_argument(
        "--ignore-file",
        dest="ignore_file_name",
        default=None,
        help="Name of the ignore file looked up in the root (default: .gitignore).",
    )

    # --- Output ---
    p.add_argument(
        "--no-print-tree",
        action="store_true",
        help="Omit the ASCII tree from the human-readable summary.",
    )
    p.add_argument(
        "--no-connections",
        action="store_true",
        help="Omit the connection list from the human-readable summary.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full report as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted session and start from defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the last session.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to this file (rotated). Without a value, uses the default log path.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["mode"] = args.mode
    overrides["ignore_file_name"] = args.ignore_file_name

    if args.no_gitignore:
        overrides["respect_gitignore"] = False
    if args.no_print_tree:
        overrides["print_tree"] = False
    if args.no_connections:
        overrides["show_connections"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
