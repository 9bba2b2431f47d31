"""Reading theme documents and building theme sections from them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from os import PathLike
from typing import Any, TypeVar, Union

import yaml

T = TypeVar("T")


class ThemeError(ValueError):
    """A theme document could not be read or does not describe a theme."""


def load_yaml(text: str) -> dict:
    """Parse a YAML theme document; an empty document gives an empty mapping."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeError(f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeError(f"expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_path(path: Union[str, "PathLike[str]"]) -> dict:
    """Read and parse the YAML theme document at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ThemeError(f"cannot read theme file {path}: {exc}") from exc
    return load_yaml(text)


def build_section(cls: type[T], data: Any) -> T:
    """Build the dataclass ``cls`` from a mapping with kebab-case keys.

    Missing keys keep their defaults, unknown keys are rejected, and each
    value passes through the field's ``convert`` metadata when it has one.
    Fields marked ``skip`` cannot be set from the mapping.
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ThemeError(f"expected a mapping for {cls.__name__}, got {type(data).__name__}")
    known = {
        field.name.replace("_", "-"): field
        for field in fields(cls)
        if field.init and not field.metadata.get("skip")
    }
    values = {}
    for key, raw in data.items():
        field = known.get(key)
        if field is None:
            expected = ", ".join(f"`{name}`" for name in known)
            raise ThemeError(f"unknown field `{key}`, expected one of {expected}")
        convert = field.metadata.get("convert")
        try:
            values[field.name] = convert(raw) if convert else raw
        except ValueError as exc:
            raise ThemeError(f"{key}: {exc}") from exc
    return cls(**values)