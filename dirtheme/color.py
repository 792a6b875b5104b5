"""Colour theme: terminal colours for every column of a listing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

from .loader import Section, ThemeError


class NamedColor(enum.Enum):
    """The named terminal colours."""

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


def _check_byte(value: Any, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ThemeError(f"invalid {what} {value!r}, expected an integer from 0 to 255")


@dataclass(frozen=True)
class AnsiValue:
    """A colour from the 256-colour palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte(self.value, "ANSI colour value")


@dataclass(frozen=True)
class Rgb:
    """A true-colour value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            _check_byte(channel, "RGB component")


Color = Union[NamedColor, AnsiValue, Rgb]

_EXPECTED = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)


def parse_color(value: Any) -> Color:
    """Read a colour from a name, a palette index or a three-element RGB list."""
    if isinstance(value, (NamedColor, AnsiValue, Rgb)):
        return value
    if isinstance(value, str):
        try:
            return NamedColor(value.lower())
        except ValueError:
            raise ThemeError(f"invalid value {value!r}, expected {_EXPECTED}") from None
    if isinstance(value, bool):
        raise ThemeError(f"invalid type bool, expected {_EXPECTED}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ThemeError(f"invalid value {value}, expected {_EXPECTED}")
        return AnsiValue(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ThemeError(
                f"invalid length {len(value)}, expected a list of size 3(RGB)"
            )
        return Rgb(*value)
    raise ThemeError(f"invalid type {type(value).__name__}, expected {_EXPECTED}")


def _color(default: Color) -> Any:
    return field(default=default, metadata={"convert": parse_color})


@dataclass
class Permission(Section):
    read: Color = _color(NamedColor.DARK_GREEN)
    write: Color = _color(NamedColor.DARK_YELLOW)
    exec: Color = _color(NamedColor.DARK_RED)
    exec_sticky: Color = _color(AnsiValue(5))
    no_access: Color = _color(AnsiValue(245))
    octal: Color = _color(AnsiValue(6))
    acl: Color = _color(NamedColor.DARK_CYAN)
    context: Color = _color(NamedColor.CYAN)


@dataclass
class File(Section):
    exec_uid: Color = _color(AnsiValue(40))
    uid_no_exec: Color = _color(AnsiValue(184))
    exec_no_uid: Color = _color(AnsiValue(40))
    no_exec_no_uid: Color = _color(AnsiValue(184))


@dataclass
class Dir(Section):
    uid: Color = _color(AnsiValue(33))
    no_uid: Color = _color(AnsiValue(33))


@dataclass
class Symlink(Section):
    default: Color = _color(AnsiValue(44))
    broken: Color = _color(AnsiValue(124))
    missing_target: Color = _color(AnsiValue(124))


@dataclass
class FileType(Section):
    file: File = field(default_factory=File)
    dir: Dir = field(default_factory=Dir)
    pipe: Color = _color(AnsiValue(44))
    symlink: Symlink = field(default_factory=Symlink)
    block_device: Color = _color(AnsiValue(44))
    char_device: Color = _color(AnsiValue(172))
    socket: Color = _color(AnsiValue(44))
    special: Color = _color(AnsiValue(44))


@dataclass
class Date(Section):
    hour_old: Color = _color(AnsiValue(40))
    day_old: Color = _color(AnsiValue(42))
    older: Color = _color(AnsiValue(36))


@dataclass
class Size(Section):
    none: Color = _color(AnsiValue(245))
    small: Color = _color(AnsiValue(229))
    medium: Color = _color(AnsiValue(216))
    large: Color = _color(AnsiValue(172))


@dataclass
class INode(Section):
    valid: Color = _color(AnsiValue(13))
    invalid: Color = _color(AnsiValue(245))


@dataclass
class Links(Section):
    valid: Color = _color(AnsiValue(13))
    invalid: Color = _color(AnsiValue(245))


@dataclass
class GitStatus(Section):
    default: Color = _color(AnsiValue(245))
    unmodified: Color = _color(AnsiValue(245))
    ignored: Color = _color(AnsiValue(245))
    new_in_index: Color = _color(NamedColor.DARK_GREEN)
    new_in_workdir: Color = _color(NamedColor.DARK_GREEN)
    typechange: Color = _color(NamedColor.DARK_YELLOW)
    deleted: Color = _color(NamedColor.DARK_RED)
    renamed: Color = _color(NamedColor.DARK_GREEN)
    modified: Color = _color(NamedColor.DARK_YELLOW)
    conflicted: Color = _color(NamedColor.DARK_RED)


@dataclass
class ColorTheme(Section):
    """The complete colour theme; file-type colours are not read from documents."""

    user: Color = _color(AnsiValue(230))
    group: Color = _color(AnsiValue(187))
    permission: Permission = field(default_factory=Permission)
    date: Date = field(default_factory=Date)
    size: Size = field(default_factory=Size)
    inode: INode = field(default_factory=INode)
    tree_edge: Color = _color(AnsiValue(245))
    links: Links = field(default_factory=Links)
    git_status: GitStatus = field(default_factory=GitStatus)
    file_type: FileType = field(default_factory=FileType, metadata={"skip": True})

    @classmethod
    def default_dark(cls) -> "ColorTheme":
        """The theme for terminals with a dark background."""
        return cls()