from dataclasses import dataclass, field

import pytest

from dirtheme.loader import Section, ThemeError, load_yaml


def _positive(value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ThemeError("expected a positive integer")
    return value


@dataclass
class Inner(Section):
    label: str = "inner"
    count: int = field(default=1, metadata={"convert": _positive})


@dataclass
class Outer(Section):
    title: str = "outer"
    inner_part: Inner = field(default_factory=Inner)
    hidden: str = field(default="h", metadata={"skip": True})


def test_load_yaml_parses_mapping():
    assert load_yaml("a: 1\nb: [1, 2]") == {"a": 1, "b": [1, 2]}


def test_load_yaml_rejects_malformed():
    with pytest.raises(ThemeError):
        load_yaml("a: [1, 2")


def test_empty_document_gives_defaults():
    assert Outer.from_yaml("  ") == Outer()
    assert Outer.from_mapping(load_yaml("{}")) == Outer()


def test_missing_keys_keep_defaults():
    outer = Outer.from_mapping(load_yaml("title: changed"))
    assert outer.title == "changed"
    assert outer.inner_part == Inner()


def test_nested_section_with_kebab_case_key():
    outer = Outer.from_mapping(load_yaml("inner-part:\n  label: x\n  count: 4"))
    assert outer.inner_part == Inner(label="x", count=4)
    assert outer.title == Outer().title


def test_snake_case_key_is_unknown():
    with pytest.raises(ThemeError, match="unknown field"):
        Outer.from_mapping(load_yaml("inner_part:\n  label: x"))


def test_unknown_field_rejected():
    with pytest.raises(ThemeError, match="unknown field"):
        Outer.from_mapping(load_yaml("colour: red"))


def test_unknown_nested_field_rejected():
    with pytest.raises(ThemeError, match="inner-part"):
        Outer.from_mapping(load_yaml("inner-part:\n  size: 3"))


def test_skipped_field_cannot_be_set():
    with pytest.raises(ThemeError):
        Outer.from_mapping(load_yaml("hidden: nope"))


def test_convert_metadata_is_applied():
    with pytest.raises(ThemeError, match="positive"):
        Inner.from_mapping(load_yaml("count: 0"))


def test_null_string_becomes_empty():
    assert Inner.from_mapping(load_yaml("label:")).label == ""
    assert Inner.from_yaml("label:").label == ""


def test_non_string_value_for_string_field():
    with pytest.raises(ThemeError):
        Inner.from_mapping(load_yaml("label: 12"))


def test_non_mapping_document_rejected():
    assert load_yaml("- a\n- b") == ["a", "b"]
    with pytest.raises(ThemeError):
        Outer.from_yaml("- a\n- b")


def test_from_path_round_trip(tmp_path):
    text = "title: from file\ninner-part:\n  count: 7\n"
    path = tmp_path / "theme.yaml"
    path.write_text(text, encoding="utf-8")
    outer = Outer.from_path(str(path))
    assert outer == Outer(title="from file", inner_part=Inner(count=7))
    assert outer == Outer.from_mapping(load_yaml(text))


def test_from_path_missing_file(tmp_path):
    path = tmp_path / "absent.yaml"
    with pytest.raises(ThemeError):
        Outer.from_path(path)
    path.write_text("title: now\n", encoding="utf-8")
    assert Outer.from_path(path) == Outer.from_mapping(load_yaml("title: now"))