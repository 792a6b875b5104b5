"""Symbols shown for each git status."""

from __future__ import annotations

from dataclasses import dataclass

from .loader import Section


@dataclass
class GitThemeSymbols(Section):
    """One-character markers for the git status column."""

    default: str = "-"
    unmodified: str = "."
    new_in_index: str = "N"
    new_in_workdir: str = "?"
    deleted: str = "D"
    modified: str = "M"
    renamed: str = "R"
    ignored: str = "I"
    typechange: str = "T"
    conflicted: str = "C"