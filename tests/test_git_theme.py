import pytest

from lstheme.git_theme import GitThemeSymbols
from lstheme.loader import ThemeError


def test_defaults():
    symbols = GitThemeSymbols()
    assert symbols.default == "-"
    assert symbols.unmodified == "."
    assert symbols.new_in_index == "N"
    assert symbols.new_in_workdir == "?"
    assert symbols.deleted == "D"
    assert symbols.modified == "M"
    assert symbols.renamed == "R"
    assert symbols.ignored == "I"
    assert symbols.typechange == "T"
    assert symbols.conflicted == "C"


def test_empty_yaml_gives_defaults():
    assert GitThemeSymbols.from_yaml("") == GitThemeSymbols()


def test_partial_yaml_keeps_other_defaults():
    symbols = GitThemeSymbols.from_yaml("modified: 'X'\nnew-in-workdir: 'U'\n")
    assert symbols.modified == "X"
    assert symbols.new_in_workdir == "U"
    assert symbols.deleted == "D"


def test_from_mapping_uses_kebab_case_keys():
    symbols = GitThemeSymbols.from_mapping({"new-in-index": "A"})
    assert symbols.new_in_index == "A"


def test_snake_case_key_is_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_mapping({"new_in_index": "A"})


def test_unknown_field_is_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("staged: 'S'")


def test_non_string_value_is_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("deleted: [1, 2]")


def test_top_level_must_be_mapping():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("- a\n- b\n")


def test_from_path(tmp_path):
    theme = tmp_path / "git.yaml"
    theme.write_text("renamed: '>'\n", encoding="utf-8")
    symbols = GitThemeSymbols.from_path(theme)
    assert symbols.renamed == ">"
    assert symbols.conflicted == "C"


def test_from_missing_path_raises(tmp_path):
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_path(tmp_path / "absent.yaml")