import pytest

from lstheme.icon_extensions import default_icons_by_extension


@pytest.mark.parametrize(
    ("extension", "icon"),
    [
        ("rs", "\ue68b"),
        ("go", "\ue627"),
        ("7z", "\uf410"),
        ("hs", "\ue777"),
        ("py", "\ue606"),
        ("c++", "\ue61d"),
        ("vue", "\U000f0844"),
    ],
)
def test_known_extensions(extension, icon):
    assert default_icons_by_extension()[extension] == icon


def test_extensions_are_lower_case():
    icons = default_icons_by_extension()
    assert all(key == key.lower() for key in icons)


def test_every_icon_is_one_character():
    icons = default_icons_by_extension()
    assert all(len(icon) == 1 for icon in icons.values())


def test_extensions_have_no_leading_dot():
    icons = default_icons_by_extension()
    assert not any(key.startswith(".") for key in icons)


def test_each_call_returns_a_fresh_mapping():
    first = default_icons_by_extension()
    first["rs"] = "changed"
    del first["go"]
    second = default_icons_by_extension()
    assert second["rs"] == "\ue68b"
    assert second["go"] == "\ue627"


def test_calls_agree():
    expected = {
        "md": "\ue609",
        "json": "\ue60b",
        "yaml": "\ue60b",
        "pdf": "\uf1c1",
        "torrent": "\U000f048d",
        "zig": "\ue6a9",
    }
    for _ in range(2):
        icons = default_icons_by_extension()
        assert {key: icons[key] for key in expected} == expected


def test_archive_extensions_share_an_icon():
    icons = default_icons_by_extension()
    archives = ["7z", "tar", "gz", "zip", "xz", "zst", "bz2", "rar"]
    assert {icons[ext] for ext in archives} == {"\uf410"}


def test_unknown_extension_is_absent():
    assert "not-an-extension" not in default_icons_by_extension()