from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the traversal conventions (hidden-entry marker, ignore-rule file)
and the fixed set of source extensions recognized by the connection
extractor, grouped by language family.
"""

from typing import Dict, Tuple

APP_NAME = "repograph"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TRAVERSAL CONVENTIONS
# -----------------------------------------------------------------------------

HIDDEN_PREFIX = "."
DEFAULT_IGNORE_FILE = ".gitignore"

SCAN_MODES: Tuple[str, ...] = ("all", "tree", "connections")

# -----------------------------------------------------------------------------
# LANGUAGE FAMILIES
# -----------------------------------------------------------------------------

LANGUAGE_BY_EXTENSION: Dict[str, str] = {
    ".go": "go",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".py": "python",
}

# Substring that flags a Go line as referencing an externally hosted module
HOSTED_DEPENDENCY_DOMAIN = "github.com/"
