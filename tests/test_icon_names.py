from lstheme.icon_names import default_icons_by_name


def test_cargo_files_share_icon():
    icons = default_icons_by_name()
    assert icons["cargo.lock"] == "\ue68b"
    assert icons["cargo.toml"] == icons["cargo.lock"]


def test_trash_icon():
    assert default_icons_by_name()[".trash"] == "\uf1f8"


def test_shell_rc_files_share_icon():
    icons = default_icons_by_name()
    assert icons[".bashrc"] == icons[".zshrc"] == icons[".cshrc"]


def test_keys_are_lower_case_except_x_dotfiles():
    upper = {name for name in default_icons_by_name() if name != name.lower()}
    assert upper == {".Xauthority", ".Xmodmap", ".Xprofile"}


def test_capitalised_x_dotfiles_match_lower_case_forms():
    icons = default_icons_by_name()
    for name in (".Xauthority", ".Xmodmap", ".Xprofile"):
        assert icons[name] == icons[name.lower()]


def test_every_icon_is_one_character():
    assert all(len(icon) == 1 for icon in default_icons_by_name().values())


def test_returns_fresh_mapping():
    first = default_icons_by_name()
    first["cargo.toml"] = "changed"
    del first[".trash"]
    second = default_icons_by_name()
    assert second["cargo.toml"] == "\ue68b"
    assert ".trash" in second


def test_unknown_name_absent():
    assert "no-such-file-name" not in default_icons_by_name()