"""Tests for MetadataSource accessor semantics."""

import logging

import pytest

from manifest_config_core.errors import MetadataTypeError
from manifest_config_core.metadata import MetadataSource


def test_contains_key_is_independent_of_value():
    data = MetadataSource({"a": "", "b": False, "c": 0, "d": None})
    assert data.contains_key("a")
    assert data.contains_key("b")
    assert data.contains_key("c")
    assert data.contains_key("d")
    assert not data.contains_key("e")


def test_get_string_defaults_only_on_absence():
    data = MetadataSource({"empty": "", "value": "x"})
    assert data.get_string("value", "fallback") == "x"
    assert data.get_string("empty", "fallback") == ""
    assert data.get_string("missing", "fallback") == "fallback"
    assert data.get_string("missing") is None


def test_get_string_none_value_returns_default():
    data = MetadataSource({"k": None})
    assert data.get_string("k", "fallback") == "fallback"


def test_get_bool_and_int_defaults():
    data = MetadataSource({"flag": False, "count": 0})
    assert data.get_bool("flag", True) is False
    assert data.get_bool("missing", True) is True
    assert data.get_bool("missing") is False
    assert data.get_int("count", 7) == 0
    assert data.get_int("missing", 7) == 7
    assert data.get_int("missing") == 0


def test_type_mismatch_returns_default_and_warns(caplog):
    data = MetadataSource({"flag": "true", "count": "12", "name": 5, "bool_as_int": True})
    with caplog.at_level(logging.WARNING, logger="manifest_config_core.metadata"):
        assert data.get_bool("flag", False) is False
        assert data.get_int("count", 3) == 3
        assert data.get_string("name", "d") == "d"
        assert data.get_int("bool_as_int", 9) == 9
    assert len(caplog.records) == 4
    assert "expected int" in caplog.records[1].getMessage()


def test_source_is_read_only_mapping():
    data = MetadataSource({"a": 1})
    assert dict(data) == {"a": 1}
    assert len(data) == 1
    assert "a" in data
    with pytest.raises(TypeError):
        data["a"] = 2  # type: ignore[index]


def test_source_copies_input():
    values = {"a": "x"}
    data = MetadataSource(values)
    values["a"] = "y"
    assert data.get_string("a") == "x"


@pytest.mark.parametrize("bad", [1.5, ["a"], {"nested": "x"}])
def test_unsupported_value_types_rejected(bad):
    with pytest.raises(MetadataTypeError) as exc:
        MetadataSource({"k": bad})
    assert exc.value.key == "k"
    assert isinstance(exc.value, TypeError)
