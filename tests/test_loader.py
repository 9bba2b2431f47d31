from dataclasses import dataclass, field

import pytest

from lstheme.loader import ThemeError, build_section, load_path, load_yaml


def _to_int(value):
    if not isinstance(value, int):
        raise ValueError("expected an integer")
    return value


@dataclass
class _Sample:
    first_value: int = field(default=1, metadata={"convert": _to_int})
    name: str = "plain"
    hidden: int = field(default=0, metadata={"skip": True})


def test_load_yaml_mapping():
    assert load_yaml("user: 230") == {"user": 230}


def test_load_yaml_blank_is_empty():
    assert load_yaml("  ") == {}


def test_load_yaml_rejects_non_mapping():
    with pytest.raises(ThemeError):
        load_yaml("- a\n- b\n")


def test_load_yaml_rejects_bad_syntax():
    with pytest.raises(ThemeError):
        load_yaml("a: [")


def test_theme_error_is_value_error():
    with pytest.raises(ValueError):
        load_yaml("a: [")


def test_load_path_reads_file(tmp_path):
    path = tmp_path / "theme.yaml"
    path.write_text("tree-edge: 245\n", encoding="utf-8")
    assert load_path(path) == {"tree-edge": 245}
    assert load_path(str(path)) == {"tree-edge": 245}


def test_load_path_missing_file(tmp_path):
    with pytest.raises(ThemeError):
        load_path(tmp_path / "absent.yaml")


def test_build_section_defaults():
    assert build_section(_Sample, {}) == _Sample()
    assert build_section(_Sample, None) == _Sample()


def test_build_section_kebab_case_keys():
    result = build_section(_Sample, {"first-value": 7, "name": "other"})
    assert result == _Sample(first_value=7, name="other")


def test_build_section_rejects_snake_case_key():
    with pytest.raises(ThemeError, match="unknown field"):
        build_section(_Sample, {"first_value": 7})


def test_build_section_rejects_unknown_key():
    with pytest.raises(ThemeError, match="unknown field `bogus`"):
        build_section(_Sample, {"bogus": 1})


def test_build_section_rejects_skipped_field():
    with pytest.raises(ThemeError):
        build_section(_Sample, {"hidden": 3})


def test_build_section_wraps_conversion_errors():
    with pytest.raises(ThemeError, match="first-value"):
        build_section(_Sample, {"first-value": "x"})


def test_build_section_rejects_non_mapping():
    with pytest.raises(ThemeError):
        build_section(_Sample, [1, 2])