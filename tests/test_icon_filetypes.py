from dataclasses import fields

import pytest

from lstheme.icon_filetypes import ByType
from lstheme.loader import ThemeError


def test_default_dir_icon():
    assert ByType().dir == "\uf115"


def test_default_pipe_and_device_block_icons():
    by_type = ByType()
    assert by_type.pipe == "\U000f0232"
    assert by_type.device_block == "\U000f072b"


def test_unicode_dir_icon():
    assert ByType.unicode().dir == "\U0001f4c2"


def test_unicode_differs_from_default_in_every_field():
    default = ByType()
    unicode = ByType.unicode()
    for item in fields(ByType):
        assert getattr(default, item.name) != getattr(unicode, item.name)


def test_from_mapping_empty_gives_default():
    assert ByType.from_mapping({}) == ByType()


def test_from_mapping_none_gives_default():
    assert ByType.from_mapping(None) == ByType()


def test_from_mapping_kebab_key_sets_field():
    by_type = ByType.from_mapping({"symlink-dir": "x"})
    assert by_type.symlink_dir == "x"
    assert by_type.symlink_file == ByType().symlink_file


def test_from_mapping_null_value_gives_empty_string():
    assert ByType.from_mapping({"dir": None}).dir == ""


def test_from_mapping_rejects_snake_case_key():
    with pytest.raises(ThemeError):
        ByType.from_mapping({"symlink_dir": "x"})


def test_from_mapping_rejects_unknown_key():
    with pytest.raises(ThemeError):
        ByType.from_mapping({"folder": "x"})


def test_from_mapping_rejects_non_string_value():
    with pytest.raises(ThemeError):
        ByType.from_mapping({"file": 5})


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(ThemeError):
        ByType.from_mapping(["dir"])