"""Loading of theme sections from YAML documents."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml

_S = TypeVar("_S", bound="Section")


class ThemeError(ValueError):
    """Raised when a theme document cannot be read or does not match the schema."""


def load_yaml(text: str) -> Any:
    """Parse a YAML document, raising ThemeError on malformed input."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeError(f"invalid YAML: {exc}") from exc


def _key_of(field: dataclasses.Field) -> str:
    return field.name.replace("_", "-")


def _default_of(field: dataclasses.Field) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return None


def _convert(field: dataclasses.Field, raw: Any) -> Any:
    convert = field.metadata.get("convert")
    if convert is not None:
        return convert(raw)
    default = _default_of(field)
    if isinstance(default, Section):
        return type(default).from_mapping(raw)
    if isinstance(default, str):
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raise ThemeError(f"invalid type {type(raw).__name__}, expected a string")
        return raw
    return raw


class Section:
    """Base for theme dataclasses whose keys are kebab-case and all optional.

    Missing keys keep their defaults, unknown keys are rejected, nested
    sections are read recursively and fields marked ``skip`` in their
    metadata cannot be set from a document.
    """

    @classmethod
    def from_mapping(cls: type[_S], data: Any) -> _S:
        """Build the section from an already parsed mapping (None means all defaults)."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ThemeError(
                f"invalid type {type(data).__name__}, expected a mapping for {cls.__name__}"
            )
        known = {
            _key_of(f): f
            for f in dataclasses.fields(cls)
            if f.init and not f.metadata.get("skip")
        }
        values: dict[str, Any] = {}
        for key, raw in data.items():
            field = known.get(key) if isinstance(key, str) else None
            if field is None:
                expected = ", ".join(f"`{name}`" for name in known)
                raise ThemeError(
                    f"unknown field `{key}` in {cls.__name__}, expected one of {expected}"
                )
            try:
                values[field.name] = _convert(field, raw)
            except ThemeError as exc:
                raise ThemeError(f"{key}: {exc}") from exc
        return cls(**values)

    @classmethod
    def from_yaml(cls: type[_S], text: str) -> _S:
        """Build the section from YAML text; an empty document gives the defaults."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls: type[_S], path: str | Path) -> _S:
        """Build the section from a YAML file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ThemeError(f"cannot read theme file {path}: {exc}") from exc
        return cls.from_yaml(text)