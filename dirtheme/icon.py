"""Icon theme: glyphs shown next to file names."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .icon_extensions import default_icons_by_extension
from .icon_names import default_icons_by_name
from .loader import Section, ThemeError


def _icon_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ThemeError(
            f"invalid type {type(value).__name__} for `{key}`, expected a string"
        )
    return value


def _merged_with(defaults: Callable[[], dict[str, str]]) -> Callable[[Any], dict[str, str]]:
    """Build a converter that lays user entries over a fresh copy of the defaults."""

    def convert(raw: Any) -> dict[str, str]:
        icons = defaults()
        if raw is None:
            return icons
        if not isinstance(raw, Mapping):
            raise ThemeError(f"invalid type {type(raw).__name__}, expected a mapping")
        for key, value in raw.items():
            if isinstance(key, bool) or not isinstance(key, (str, int, float)):
                raise ThemeError(f"invalid key {key!r}, expected a string")
            name = str(key)
            icons[name] = _icon_text(value, name)
        return icons

    return convert


@dataclass
class ByType(Section):
    """Icons chosen by the kind of file system entry."""

    dir: str = "\uf115"
    file: str = "\uf016"
    pipe: str = "\U000f0232"
    socket: str = "\U000f01a8"
    executable: str = "\uf489"
    device_char: str = "\ue601"
    device_block: str = "\U000f072b"
    special: str = "\uf2dc"
    symlink_dir: str = "\uf482"
    symlink_file: str = "\uf481"

    @classmethod
    def unicode(cls) -> "ByType":
        """Icons drawn from standard Unicode emoji instead of a patched font."""
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


@dataclass
class IconTheme(Section):
    """Icons by file name, by extension and by file type.

    Entries given in a document for ``name`` and ``extension`` are added to
    the defaults, replacing a default entry with the same key.
    """

    name: dict[str, str] = field(
        default_factory=default_icons_by_name,
        metadata={"convert": _merged_with(default_icons_by_name)},
    )
    extension: dict[str, str] = field(
        default_factory=default_icons_by_extension,
        metadata={"convert": _merged_with(default_icons_by_extension)},
    )
    filetype: ByType = field(default_factory=ByType)

    @classmethod
    def unicode(cls) -> "IconTheme":
        """A theme with Unicode file-type icons and no name or extension icons."""
        return cls(name={}, extension={}, filetype=ByType.unicode())