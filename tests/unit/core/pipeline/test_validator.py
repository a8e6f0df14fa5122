from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion (string / number to bool, color case folding).
3. Strict mode validation.
"""

import pytest

from charm.core.pipeline.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    """Passing None should return the full default configuration."""
    cfg, warnings = validate_config(None)

    assert cfg["count_bytes"] is False
    assert cfg["color"] == "auto"
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["show_names"] is False
    assert cfg["show_summary"] is False
    assert warnings == []


def test_validate_converts_strings_and_numbers_to_bools() -> None:
    raw = {
        "count_bytes": "yes",
        "show_names": "False",
        "show_scripts": 1,
        "show_summary": "off",
    }
    cfg, warnings = validate_config(raw, strict=False)

    assert cfg["count_bytes"] is True
    assert cfg["show_names"] is False
    assert cfg["show_scripts"] is True
    assert cfg["show_summary"] is False
    assert len(warnings) == 4


def test_validate_unknown_bool_value_falls_back() -> None:
    cfg, warnings = validate_config({"show_names": "maybe"})

    assert cfg["show_names"] is False
    assert any("show_names" in w for w in warnings)


def test_validate_color_is_case_insensitive() -> None:
    cfg, warnings = validate_config({"color": " ALWAYS "})

    assert cfg["color"] == "always"
    assert warnings == []


def test_validate_bad_color_falls_back() -> None:
    cfg, warnings = validate_config({"color": "rainbow"})

    assert cfg["color"] == "auto"
    assert any("rainbow" in w for w in warnings)


def test_validate_keeps_unknown_keys() -> None:
    cfg, _ = validate_config({"future_option": 3})
    assert cfg["future_option"] == 3


def test_strict_mode_raises_on_types() -> None:
    with pytest.raises(TypeError):
        validate_config({"count_bytes": "yes"}, strict=True)

    with pytest.raises(TypeError):
        validate_config(["not", "a", "dict"], strict=True)


def test_strict_mode_raises_on_color_value() -> None:
    with pytest.raises(ValueError):
        validate_config({"color": "rainbow"}, strict=True)
