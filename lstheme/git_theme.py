"""Symbols that mark a file's git status in a listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

from lstheme.loader import build_section, load_path, load_yaml


def _to_symbol(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"invalid type {type(value).__name__}, expected a string")
    return value


def _symbol(default: str) -> Any:
    return field(default=default, metadata={"convert": _to_symbol})


@dataclass
class GitThemeSymbols:
    """The symbol shown for each git status."""

    default: str = _symbol("-")
    unmodified: str = _symbol(".")
    new_in_index: str = _symbol("N")
    new_in_workdir: str = _symbol("?")
    deleted: str = _symbol("D")
    modified: str = _symbol("M")
    renamed: str = _symbol("R")
    ignored: str = _symbol("I")
    typechange: str = _symbol("T")
    conflicted: str = _symbol("C")

    @classmethod
    def from_mapping(cls, data: Any) -> "GitThemeSymbols":
        """Build the symbols from parsed data; missing entries keep their defaults."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> "GitThemeSymbols":
        """Build the symbols from a YAML document."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: Union[str, "PathLike[str]"]) -> "GitThemeSymbols":
        """Build the symbols from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))