"""The colour theme: which colour each part of a listing is drawn in."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from os import PathLike
from typing import Any, Union

from lstheme.color import AnsiColor, Color, NamedColor, parse_color
from lstheme.loader import build_section, load_path, load_yaml


def _color(default: Color) -> Any:
    return field(default=default, metadata={"convert": parse_color})


def _section(cls: type) -> Any:
    return field(default_factory=cls, metadata={"convert": partial(build_section, cls)})


_GREY = AnsiColor(245)
_PINK = AnsiColor(13)
_DARK_TURQUOISE = AnsiColor(44)
_ORANGE3 = AnsiColor(172)
_GREEN3 = AnsiColor(40)
_YELLOW3 = AnsiColor(184)
_DODGER_BLUE1 = AnsiColor(33)
_RED3 = AnsiColor(124)


@dataclass
class Permission:
    read: Color = _color(NamedColor.DARK_GREEN)
    write: Color = _color(NamedColor.DARK_YELLOW)
    exec: Color = _color(NamedColor.DARK_RED)
    exec_sticky: Color = _color(AnsiColor(5))
    no_access: Color = _color(_GREY)
    octal: Color = _color(AnsiColor(6))
    acl: Color = _color(NamedColor.DARK_CYAN)
    context: Color = _color(NamedColor.CYAN)


@dataclass
class Attributes:
    archive: Color = _color(NamedColor.DARK_GREEN)
    read: Color = _color(NamedColor.DARK_YELLOW)
    hidden: Color = _color(_PINK)
    system: Color = _color(_PINK)


@dataclass
class File:
    exec_uid: Color = _color(_GREEN3)
    uid_no_exec: Color = _color(_YELLOW3)
    exec_no_uid: Color = _color(_GREEN3)
    no_exec_no_uid: Color = _color(_YELLOW3)


@dataclass
class Dir:
    uid: Color = _color(_DODGER_BLUE1)
    no_uid: Color = _color(_DODGER_BLUE1)


@dataclass
class Symlink:
    default: Color = _color(_DARK_TURQUOISE)
    broken: Color = _color(_RED3)
    missing_target: Color = _color(_RED3)


@dataclass
class FileType:
    file: File = _section(File)
    dir: Dir = _section(Dir)
    pipe: Color = _color(_DARK_TURQUOISE)
    symlink: Symlink = _section(Symlink)
    block_device: Color = _color(_DARK_TURQUOISE)
    char_device: Color = _color(_ORANGE3)
    socket: Color = _color(_DARK_TURQUOISE)
    special: Color = _color(_DARK_TURQUOISE)


@dataclass
class Date:
    hour_old: Color = _color(_GREEN3)
    day_old: Color = _color(AnsiColor(42))
    older: Color = _color(AnsiColor(36))


@dataclass
class Size:
    none: Color = _color(_GREY)
    small: Color = _color(AnsiColor(229))
    medium: Color = _color(AnsiColor(216))
    large: Color = _color(_ORANGE3)


@dataclass
class INode:
    valid: Color = _color(_PINK)
    invalid: Color = _color(_GREY)


@dataclass
class Links:
    valid: Color = _color(_PINK)
    invalid: Color = _color(_GREY)


@dataclass
class GitStatus:
    default: Color = _color(_GREY)
    unmodified: Color = _color(_GREY)
    ignored: Color = _color(_GREY)
    new_in_index: Color = _color(NamedColor.DARK_GREEN)
    new_in_workdir: Color = _color(NamedColor.DARK_GREEN)
    typechange: Color = _color(NamedColor.DARK_YELLOW)
    deleted: Color = _color(NamedColor.DARK_RED)
    renamed: Color = _color(NamedColor.DARK_GREEN)
    modified: Color = _color(NamedColor.DARK_YELLOW)
    conflicted: Color = _color(NamedColor.DARK_RED)


@dataclass
class ColorTheme:
    """All colours of a listing; the defaults form the dark theme."""

    user: Color = _color(AnsiColor(230))
    group: Color = _color(AnsiColor(187))
    permission: Permission = _section(Permission)
    attributes: Attributes = _section(Attributes)
    date: Date = _section(Date)
    size: Size = _section(Size)
    inode: INode = _section(INode)
    tree_edge: Color = _color(_GREY)
    links: Links = _section(Links)
    git_status: GitStatus = _section(GitStatus)
    file_type: FileType = field(default_factory=FileType, metadata={"skip": True})

    @classmethod
    def default_dark(cls) -> "ColorTheme":
        """The theme for terminals with a dark background."""
        return cls()

    @classmethod
    def from_mapping(cls, data: Any) -> "ColorTheme":
        """Build a theme from parsed data; missing entries keep their defaults."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> "ColorTheme":
        """Build a theme from a YAML document."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: Union[str, "PathLike[str]"]) -> "ColorTheme":
        """Build a theme from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))