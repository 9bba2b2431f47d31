"""Terminal colour values and the parser that reads them from theme data."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union

_EXPECTED = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)

_ANSI_RE = re.compile(r"ansi_\(\s*(\d+)\s*\)")
_RGB_RE = re.compile(r"rgb_\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)")
_HEX_RE = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")


class NamedColor(enum.Enum):
    """One of the terminal's named colours."""

    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_byte(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type {type(value).__name__} for {what}, expected u8")
    if not 0 <= value <= 255:
        raise ValueError(f"invalid value {value} for {what}, expected u8")
    return value


@dataclass(frozen=True)
class AnsiColor:
    """A colour from the 256-entry terminal palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte(self.value, "ansi colour")


@dataclass(frozen=True)
class RgbColor:
    """A true colour given by its red, green and blue components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(getattr(self, name), f"component {name}")


Color = Union[NamedColor, AnsiColor, RgbColor]


def _parse_string(value: str) -> Color:
    text = value.strip().lower()
    try:
        return NamedColor(text)
    except ValueError:
        pass
    match = _ANSI_RE.fullmatch(text)
    if match:
        return AnsiColor(int(match.group(1)))
    match = _RGB_RE.fullmatch(text)
    if match:
        return RgbColor(*(int(part) for part in match.groups()))
    match = _HEX_RE.fullmatch(text)
    if match:
        return RgbColor(*(int(part, 16) for part in match.groups()))
    raise ValueError(f"invalid value {value!r}, expected {_EXPECTED}")


def parse_color(value: object) -> Color:
    """Read a colour from a name, a palette index or a three-item RGB list."""
    if isinstance(value, bool):
        raise ValueError(f"invalid type bool, expected {_EXPECTED}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"invalid value {value}, expected {_EXPECTED}")
        return AnsiColor(value)
    if isinstance(value, str):
        return _parse_string(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ValueError(f"invalid length {len(value)}, expected a list of size 3(RGB)")
        r, g, b = (_check_byte(part, "rgb component") for part in value)
        return RgbColor(r, g, b)
    raise ValueError(f"invalid type {type(value).__name__}, expected {_EXPECTED}")