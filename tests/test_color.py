import pytest

from lstheme.color import AnsiColor, NamedColor, RgbColor, parse_color


def test_integer_is_palette_index():
    assert parse_color(230) == AnsiColor(230)


def test_palette_bounds():
    assert parse_color(0) == AnsiColor(0)
    assert parse_color(255) == AnsiColor(255)


@pytest.mark.parametrize("value", [256, -1, True, 1.5, None, {"r": 1}])
def test_invalid_values_rejected(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_named_colour():
    assert parse_color("dark_green") is NamedColor.DARK_GREEN


def test_named_colour_case_insensitive():
    assert parse_color("Dark_Yellow") is NamedColor.DARK_YELLOW


@pytest.mark.parametrize("color", list(NamedColor))
def test_every_name_round_trips(color):
    assert parse_color(color.value) is color


def test_hex_colour():
    assert parse_color("#ff007f") == RgbColor(255, 0, 127)


def test_ansi_string_form():
    assert parse_color("ansi_(42)") == AnsiColor(42)


def test_rgb_string_form():
    assert parse_color("rgb_(1, 2, 3)") == RgbColor(1, 2, 3)


def test_list_is_rgb():
    assert parse_color([10, 20, 30]) == RgbColor(10, 20, 30)


@pytest.mark.parametrize("value", [[1, 2], [1, 2, 3, 4], [1, 2, 300], [1, "a", 3], []])
def test_bad_lists_rejected(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_unknown_name_rejected():
    with pytest.raises(ValueError, match="expected"):
        parse_color("not_a_color")


def test_colour_objects_validate_range():
    with pytest.raises(ValueError):
        AnsiColor(300)
    with pytest.raises(ValueError):
        RgbColor(0, 0, 256)