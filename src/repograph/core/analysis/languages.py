from __future__ import annotations

"""
Per-Language Import Heuristics.

Each language family owns an ordered list of rules. A rule pairs a
trigger (does this trimmed line look like an import?) with the target
markers used to locate the module path. The first rule whose trigger
fires decides the markers and the connection kind for that line.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from repograph.domain.constants import HOSTED_DEPENDENCY_DOMAIN, LANGUAGE_BY_EXTENSION
from repograph.domain.graph_models import ConnectionKind

# -----------------------------------------------------------------------------
# RULE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ImportRule:
    """
    One import-detection heuristic.

    Attributes:
        trigger: Predicate identifying a candidate line.
        markers: Target markers tested independently on a triggered line.
        kind: Connection kind emitted for targets found by this rule.
        bare: True when targets are unquoted identifiers.
    """
    trigger: Callable[[str], bool]
    markers: Tuple[str, ...]
    kind: str = ConnectionKind.IMPORT
    bare: bool = False

# -----------------------------------------------------------------------------
# TRIGGERS
# -----------------------------------------------------------------------------

def _go_import(line: str) -> bool:
    return line.startswith('import "') or line.startswith('import . "')


def _go_hosted(line: str) -> bool:
    return '" ' in line and HOSTED_DEPENDENCY_DOMAIN in line


def _es_import(line: str) -> bool:
    return line.startswith("import ") and "from" in line


def _py_from(line: str) -> bool:
    return line.startswith("from ")


def _py_import(line: str) -> bool:
    return line.startswith("import ")

# -----------------------------------------------------------------------------
# RULE TABLE
# -----------------------------------------------------------------------------

_ES_RULES: List[ImportRule] = [
    ImportRule(trigger=_es_import, markers=('from "', "from '")),
]

LANGUAGE_RULES: Dict[str, List[ImportRule]] = {
    "go": [
        ImportRule(trigger=_go_import, markers=('import "', 'import . "')),
        ImportRule(trigger=_go_hosted, markers=('" ',), kind=ConnectionKind.EXTERNAL),
    ],
    "typescript": _ES_RULES,
    "javascript": _ES_RULES,
    "python": [
        ImportRule(trigger=_py_from, markers=("from ",), bare=True),
        ImportRule(trigger=_py_import, markers=("import ",), bare=True),
    ],
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def language_for(file_name: str) -> Optional[str]:
    """
    Resolve the language family from a file name's lower-cased extension.

    Returns:
        Optional[str]: Family name, or None for unrecognized extensions.
    """
    ext = _extension(file_name).lower()
    return LANGUAGE_BY_EXTENSION.get(ext)


def match_rule(language: str, line: str) -> Optional[ImportRule]:
    """Return the first rule of a family whose trigger fires on the line."""
    for rule in LANGUAGE_RULES.get(language, []):
        if rule.trigger(line):
            return rule
    return None


def _extension(file_name: str) -> str:
    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot != -1 else ""
