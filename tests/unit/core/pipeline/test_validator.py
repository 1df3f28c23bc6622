from __future__ import annotations

"""
Unit tests for the configuration validator.
"""

import pytest

from pathtree.core.pipeline.validator import validate_config
from pathtree.domain.config import get_default_config


def test_empty_config_returns_defaults():
    clean, warnings = validate_config({})

    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_config_uses_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert len(warnings) == 1


def test_non_dict_config_strict_raises():
    with pytest.raises(TypeError):
        validate_config("charset=ascii", strict=True)


def test_choices_are_normalized():
    clean, warnings = validate_config({"charset": " ASCII ", "collapse": "Chain"})

    assert clean["charset"] == "ascii"
    assert clean["collapse"] == "chain"
    assert warnings == []


def test_invalid_choice_falls_back_with_warning():
    clean, warnings = validate_config({"empty_segments": "squash"})

    assert clean["empty_segments"] == "preserve"
    assert any("empty_segments" in w for w in warnings)


def test_invalid_choice_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"collapse": "sometimes"}, strict=True)


def test_wrong_type_falls_back():
    clean, warnings = validate_config({"charset": 3, "input_path": 42})

    assert clean["charset"] == "unicode"
    assert clean["input_path"] == ""
    assert len(warnings) == 2


def test_separator_is_used_verbatim():
    clean, _ = validate_config({"separator": " :: "})
    assert clean["separator"] == " :: "


def test_empty_separator_rejected():
    clean, warnings = validate_config({"separator": ""})

    assert clean["separator"] == "/"
    assert warnings


def test_unknown_keys_dropped():
    clean, warnings = validate_config({"colour": "blue"})

    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_unknown_keys_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"colour": "blue"}, strict=True)
