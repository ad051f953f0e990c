from __future__ import annotations

"""
Repository Graph Data Models.

Provides the recursive tree node used to describe the scanned directory
hierarchy and the flat connection edge produced by the heuristic import
extractor. Both serialize to the wire keys consumed by the visualizer.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

# -----------------------------------------------------------------------------
# CONNECTION KINDS
# -----------------------------------------------------------------------------

class ConnectionKind:
    """String constants for the kinds of inferred dependency edges."""
    IMPORT = "import"
    EXTERNAL = "external"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    Represents one filesystem entry in the repository tree.

    Attributes:
        name: Base name of the entry.
        relative_path: Path relative to the scan root ("" for the root itself).
        is_directory: Whether the entry is a directory.
        children: Child nodes for directories, None for files. A directory
                  that could not be listed carries an empty list.
    """
    name: str
    relative_path: str
    is_directory: bool
    children: Optional[List["TreeNode"]] = None

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and every descendant, depth-first."""
        stack: List["TreeNode"] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children or []))

    def count_files(self) -> int:
        return sum(1 for node in self.iter_nodes() if not node.is_directory)

    def count_directories(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.is_directory)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the subtree using the visualizer wire format.

        Returns:
            Dict[str, Any]: Mapping with 'name', 'path', 'isDir' and, for
                            non-empty directories, 'children'.
        """
        data: Dict[str, Any] = {
            "name": self.name,
            "path": self.relative_path,
            "isDir": self.is_directory,
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class Connection:
    """
    One inferred, unresolved dependency edge.

    Attributes:
        from_path: Relative path of the scanned file.
        to_target: Raw import target extracted from the source line.
        from_file: Base name of from_path.
        to_file: Base name of to_target (cosmetic for bare module names).
        kind: One of the ConnectionKind values.
    """
    from_path: str
    to_target: str
    from_file: str
    to_file: str
    kind: str = ConnectionKind.IMPORT

    @classmethod
    def create(cls, from_path: str, to_target: str, kind: str) -> "Connection":
        """Build a connection deriving the base-name conveniences."""
        return cls(
            from_path=from_path,
            to_target=to_target,
            from_file=base_name(from_path),
            to_file=base_name(to_target),
            kind=kind,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "from": self.from_path,
            "to": self.to_target,
            "fromFile": self.from_file,
            "toFile": self.to_file,
            "type": self.kind,
        }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def base_name(path: str) -> str:
    """
    Return the last element of a path, ignoring trailing separators.

    A path made only of separators yields itself, an empty path yields ".".
    """
    if not path:
        return "."
    trimmed = path.rstrip("/" + os.sep)
    if not trimmed:
        return path[0]
    return os.path.basename(trimmed)
