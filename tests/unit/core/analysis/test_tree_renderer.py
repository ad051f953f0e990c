from __future__ import annotations

"""
Unit tests for the ASCII Tree Renderer.
"""

from repograph.core.analysis.tree_renderer import render_tree
from repograph.domain.graph_models import TreeNode


def test_render_tree_connectors_and_listing_order():
    tree = TreeNode(name="repo", relative_path="", is_directory=True, children=[
        TreeNode(name="src", relative_path="src", is_directory=True, children=[
            TreeNode(name="main.py", relative_path="src/main.py", is_directory=False),
        ]),
        TreeNode(name="empty", relative_path="empty", is_directory=True, children=[]),
        TreeNode(name="README.md", relative_path="README.md", is_directory=False),
    ])

    lines = render_tree(tree)

    assert lines == [
        "repo/",
        "├── src/",
        "│   └── main.py",
        "├── empty/",
        "└── README.md",
    ]


def test_render_single_file_tree():
    leaf = TreeNode(name="a.go", relative_path="", is_directory=False)
    assert render_tree(leaf) == ["a.go"]
