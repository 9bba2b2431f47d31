"""Icons chosen by the kind of file system entry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lstheme.loader import build_section


def _to_icon(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"invalid type {type(value).__name__}, expected a string")
    return value


def _icon(default: str) -> Any:
    return field(default=default, metadata={"convert": _to_icon})


@dataclass
class ByType:
    """The icon shown for each type of entry; the defaults use Nerd Font glyphs."""

    dir: str = _icon("\uf115")
    file: str = _icon("\uf016")
    pipe: str = _icon("\U000f0232")
    socket: str = _icon("\U000f01a8")
    executable: str = _icon("\uf489")
    device_char: str = _icon("\ue601")
    device_block: str = _icon("\U000f072b")
    special: str = _icon("\uf2dc")
    symlink_dir: str = _icon("\uf482")
    symlink_file: str = _icon("\uf481")

    @classmethod
    def unicode(cls) -> "ByType":
        """Icons drawn from plain Unicode emoji, for terminals without Nerd Fonts."""
        return cls(
            dir="\U0001f4c2",
            file="\U0001f4c4",
            pipe="\U0001f4e9",
            socket="\U0001f4ec",
            executable="\U0001f3d7",
            symlink_dir="\U0001f5c2",
            symlink_file="\U0001f516",
            device_char="\U0001f5a8",
            device_block="\U0001f4bd",
            special="\U0001f4df",
        )

    @classmethod
    def from_mapping(cls, data: Any) -> "ByType":
        """Build the icons from parsed data; missing entries keep their defaults."""
        return build_section(cls, data)