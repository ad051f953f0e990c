from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default injection for missing keys.
2. Lenient coercion with warnings.
3. Strict mode exceptions.
"""

import pytest

from repograph.core.services.validator import validate_config
from repograph.domain.config import get_default_config
from repograph.infra.logging import LOG_LEVELS


def test_empty_config_is_filled_with_defaults():
    cfg, warnings = validate_config({})

    assert cfg == get_default_config()
    assert warnings == []


def test_non_dict_input_returns_defaults_with_warning():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg["mode"] == "all"
    assert len(warnings) == 1
    assert "expected dict" in warnings[0]


def test_non_dict_input_in_strict_mode_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_bool_coercion_from_strings_and_numbers():
    cfg, warnings = validate_config({"respect_gitignore": "no", "print_tree": 0, "show_connections": "YES"})

    assert cfg["respect_gitignore"] is False
    assert cfg["print_tree"] is False
    assert cfg["show_connections"] is True
    assert len(warnings) == 3


def test_bool_garbage_falls_back():
    cfg, warnings = validate_config({"respect_gitignore": "maybe"})

    assert cfg["respect_gitignore"] is True
    assert any("respect_gitignore" in w for w in warnings)


def test_choice_fields_are_case_insensitive():
    cfg, warnings = validate_config({"mode": " TREE ", "log_level": "debug"})

    assert cfg["mode"] == "tree"
    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_invalid_choice_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"mode": "graph"}, strict=True)


def test_blank_strings_use_defaults():
    cfg, _ = validate_config({"ignore_file_name": "   "})
    assert cfg["ignore_file_name"] == ".gitignore"


def test_wrong_string_type_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"input_path": 42}, strict=True)


def test_unknown_keys_are_discarded():
    cfg, warnings = validate_config({"extensions": [".py"]})

    assert "extensions" not in cfg
    assert warnings == ["Unknown field 'extensions' discarded."]


def test_every_public_log_level_is_accepted():
    for level in LOG_LEVELS:
        cfg, warnings = validate_config({"log_level": level.lower()}, strict=True)
        assert cfg["log_level"] == level
        assert warnings == []
