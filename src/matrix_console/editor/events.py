"""Input events consumed by the editor machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Character:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Character expects a single char, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class RowSeparator:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class SwitchBuffer:
    pass


@dataclass(frozen=True, slots=True)
class Compute:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


EditorEvent = Union[Character, RowSeparator, Backspace, SwitchBuffer, Compute, Quit]

__all__ = [
    "Character",
    "RowSeparator",
    "Backspace",
    "SwitchBuffer",
    "Compute",
    "Quit",
    "EditorEvent",
]
