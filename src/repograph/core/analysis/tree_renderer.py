from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy into a visual ASCII representation for
terminal output. Children are rendered in the order the tree holds them.
"""

from typing import List, Optional

from repograph.domain.graph_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: TreeNode) -> List[str]:
    """
    Render a full tree, root label first.

    Args:
        root: Node returned by the tree builder.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [_label(root)]
    render_tree_structure(root.children, lines)
    return lines


def render_tree_structure(
        children: Optional[List[TreeNode]],
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append child entries to the accumulator.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested directories.

    Args:
        children: Nodes to render at the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries = children or []
    total = len(entries)

    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(node)}")

        if node.is_directory:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node.children, lines, prefix=new_prefix)


def _label(node: TreeNode) -> str:
    return f"{node.name}/" if node.is_directory else node.name
