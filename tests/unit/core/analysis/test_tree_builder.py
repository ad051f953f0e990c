from __future__ import annotations

"""
Unit tests for the Repository Tree Builder.

Verifies hierarchical structure building, hidden and ignore filtering,
relative path composition and the degradation rules for entries that
cannot be listed or stat'ed.
"""

import os
from pathlib import Path

import pytest

from repograph.core.analysis.tree_builder import build_tree
from repograph.core.filtering import visibility
from repograph.core.filtering.ignore import NullMatcher, load_ignore_matcher


def _child(node, name):
    return next(c for c in node.children if c.name == name)


def test_build_tree_root_node(sample_repo: Path):
    root = str(sample_repo)
    tree = build_tree(root, "", load_ignore_matcher(root))

    assert tree.name == "repo"
    assert tree.relative_path == ""
    assert tree.is_directory is True


def test_build_tree_applies_hidden_and_ignore_rules(sample_repo: Path):
    root = str(sample_repo)
    tree = build_tree(root, "", load_ignore_matcher(root))

    names = {c.name for c in tree.children}
    assert names == {"cmd", "web", "pkg", "notes.md"}

    pkg = _child(tree, "pkg")
    assert [c.name for c in pkg.children] == ["core.py"]


def test_children_relative_paths_are_joined_with_parent(sample_repo: Path):
    root = str(sample_repo)
    tree = build_tree(root, "", load_ignore_matcher(root))

    for node in tree.iter_nodes():
        for child in node.children or []:
            assert child.relative_path == os.path.join(node.relative_path, child.name)


def test_files_are_leaves_without_children(sample_repo: Path):
    tree = build_tree(str(sample_repo), "notes.md", NullMatcher())

    assert tree.is_directory is False
    assert tree.children is None
    assert tree.name == "notes.md"
    assert tree.relative_path == "notes.md"


def test_null_matcher_keeps_ignored_but_not_hidden_entries(sample_repo: Path):
    tree = build_tree(str(sample_repo), "", NullMatcher())

    names = {c.name for c in tree.children}
    assert {"build", "debug.log"} <= names
    assert ".hidden" not in names
    assert ".gitignore" not in names


def test_child_count_matches_visible_entries(tmp_path: Path):
    for name in ("a.txt", "b.py", "c"):
        target = tmp_path / name
        if name == "c":
            target.mkdir()
        else:
            target.write_text("", encoding="utf-8")
    (tmp_path / ".dot").write_text("", encoding="utf-8")

    tree = build_tree(str(tmp_path), "", NullMatcher())

    assert len(tree.children) == 3
    assert tree.children is not None
    c_node = _child(tree, "c")
    assert c_node.is_directory and c_node.children == []


def test_scanning_twice_is_structurally_identical(sample_repo: Path):
    root = str(sample_repo)
    matcher = load_ignore_matcher(root)

    assert build_tree(root, "", matcher) == build_tree(root, "", matcher)


def test_missing_entry_raises_os_error(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        build_tree(str(tmp_path), "does-not-exist", NullMatcher())


def test_unlistable_directory_is_kept_childless(tmp_path: Path, monkeypatch):
    """Simulated permission failure on one directory leaves siblings intact."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "inner.py").write_text("import os", encoding="utf-8")
    opened = tmp_path / "open"
    opened.mkdir()
    (opened / "a.py").write_text("import os", encoding="utf-8")

    original = visibility.list_directory

    def guarded(full_path):
        if os.path.basename(os.path.normpath(full_path)) == "locked":
            raise PermissionError(13, "Permission denied", full_path)
        return original(full_path)

    monkeypatch.setattr(visibility, "list_directory", guarded)

    tree = build_tree(str(tmp_path), "", NullMatcher())

    locked_node = _child(tree, "locked")
    assert locked_node.is_directory is True
    assert locked_node.children == []

    open_node = _child(tree, "open")
    assert [c.name for c in open_node.children] == ["a.py"]


def test_entries_failing_stat_are_dropped(tmp_path: Path):
    (tmp_path / "real.txt").write_text("x", encoding="utf-8")
    try:
        os.symlink(str(tmp_path / "missing-target"), str(tmp_path / "dangling"))
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported on this platform.")

    tree = build_tree(str(tmp_path), "", NullMatcher())

    assert [c.name for c in tree.children] == ["real.txt"]
