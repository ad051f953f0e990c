from __future__ import annotations

"""
Import Target Parser.

Locates and cleans the module path that follows a target marker on a
single source line. Deliberately permissive: malformed or unusual lines
may produce an imprecise target, and lines without the expected shape
produce an empty string which callers skip.
"""

import re

_QUOTES = "\"'"
_BARE_TERMINATOR = re.compile(r"[\s,;#(]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_target(line: str, marker: str) -> str:
    """
    Extract a quoted import target that follows a marker.

    The raw candidate spans from the end of the first marker occurrence
    to the next single or double quote.

    Args:
        line: Trimmed source line.
        marker: Delimiter whose end marks the start of the target.

    Returns:
        str: Cleaned target, or "" when the marker or closing quote is missing.
    """
    idx = line.find(marker)
    if idx == -1:
        return ""

    start = idx + len(marker)
    end = _find_first_quote(line, start)
    if end == -1:
        return ""

    target = line[start:end]

    if " " in target:
        for part in target.split(" "):
            if any(q in part for q in _QUOTES):
                return clean_target(part)

    return clean_target(target)


def extract_bare_target(line: str, marker: str) -> str:
    """
    Extract an unquoted module identifier that follows a marker.

    Used for languages whose imports name modules directly, e.g.
    'from foo.bar import baz' yields 'foo.bar'.

    Args:
        line: Trimmed source line.
        marker: Keyword (including its trailing space) preceding the module.

    Returns:
        str: Cleaned target, or "" when the marker is missing.
    """
    idx = line.find(marker)
    if idx == -1:
        return ""

    rest = line[idx + len(marker):].lstrip()
    match = _BARE_TERMINATOR.search(rest)
    target = rest[:match.start()] if match else rest
    return clean_target(target)


def clean_target(target: str) -> str:
    """
    Normalize a raw target candidate.

    Trims whitespace, strips surrounding quote characters and truncates
    at the first remaining space.
    """
    target = target.strip().strip(_QUOTES)
    return target.split(" ")[0]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _find_first_quote(line: str, start: int) -> int:
    """Index of the first quote character at or after start, or -1."""
    positions = [pos for pos in (line.find(q, start) for q in _QUOTES) if pos != -1]
    return min(positions) if positions else -1
