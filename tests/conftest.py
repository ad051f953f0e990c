from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample repositories and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_repo(tmp_path: Path) -> Path:
    """
    Create a small polyglot repository.

    Structure:
    /repo
      .gitignore          (ignores build/, *.log, secret.txt)
      .hidden/
        config.py
      build/
        out.js
      cmd/
        main.go
      web/
        app.ts
      pkg/
        core.py
        secret.txt
      notes.md
      debug.log
    """
    root = tmp_path / "repo"
    root.mkdir()

    (root / ".gitignore").write_text("build/\n*.log\nsecret.txt\n", encoding="utf-8")

    (root / ".hidden").mkdir()
    (root / ".hidden" / "config.py").write_text("import hidden_mod\n", encoding="utf-8")

    (root / "build").mkdir()
    (root / "build" / "out.js").write_text('import x from "./generated"\n', encoding="utf-8")

    (root / "cmd").mkdir()
    (root / "cmd" / "main.go").write_text(
        'package main\n\nimport "fmt"\n\nfunc main() { fmt.Println("hi") }\n',
        encoding="utf-8",
    )

    (root / "web").mkdir()
    (root / "web" / "app.ts").write_text(
        "import { helper } from './util'\nconst x = 1\n",
        encoding="utf-8",
    )

    (root / "pkg").mkdir()
    (root / "pkg" / "core.py").write_text(
        "import os\nfrom pkg.models import Thing\n\ndef run():\n    pass\n",
        encoding="utf-8",
    )
    (root / "pkg" / "secret.txt").write_text("token", encoding="utf-8")

    (root / "notes.md").write_text("# notes", encoding="utf-8")
    (root / "debug.log").write_text("log line", encoding="utf-8")

    return root


@pytest.fixture
def mock_config_dict(sample_repo: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'repograph.domain.config'.
    """
    return {
        "input_path": str(sample_repo),
        "mode": "all",
        "respect_gitignore": True,
        "ignore_file_name": ".gitignore",
        "print_tree": True,
        "show_connections": True,
        "log_level": "INFO",
    }
