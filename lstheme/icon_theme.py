"""The icon theme: icons by file name, by extension and by file type."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import partial
from os import PathLike
from typing import Any, Union

from lstheme.icon_extensions import default_icons_by_extension
from lstheme.icon_filetypes import ByType
from lstheme.icon_names import default_icons_by_name
from lstheme.loader import build_section, load_path, load_yaml


def _key(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"invalid key type {type(value).__name__}, expected a string")
    return str(value)


def _value(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"invalid type {type(value).__name__}, expected a string")
    return value


def _merge_with(defaults: Callable[[], dict[str, str]], data: Any) -> dict[str, str]:
    """Lay the user's entries over the default table."""
    merged = defaults()
    if data is None:
        return merged
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type {type(data).__name__}, expected a mapping")
    merged.update((_key(key), _value(icon)) for key, icon in data.items())
    return merged


@dataclass
class IconTheme:
    """Icons looked up by file name, then extension, then file type."""

    name: dict[str, str] = field(
        default_factory=default_icons_by_name,
        metadata={"convert": partial(_merge_with, default_icons_by_name)},
    )
    extension: dict[str, str] = field(
        default_factory=default_icons_by_extension,
        metadata={"convert": partial(_merge_with, default_icons_by_extension)},
    )
    filetype: ByType = field(
        default_factory=ByType,
        metadata={"convert": partial(build_section, ByType)},
    )

    @classmethod
    def unicode(cls) -> "IconTheme":
        """A theme of plain Unicode icons by file type only."""
        return cls(name={}, extension={}, filetype=ByType.unicode())

    @classmethod
    def from_mapping(cls, data: Any) -> "IconTheme":
        """Build a theme from parsed data; user entries extend the defaults."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> "IconTheme":
        """Build a theme from a YAML document."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: Union[str, "PathLike[str]"]) -> "IconTheme":
        """Build a theme from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))