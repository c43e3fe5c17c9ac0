"""Separator policy shared by buffers, the parser and the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeparatorPolicy:
    """Which characters split cells and rows inside a text buffer.

    A typed space is never stored literally: it becomes ``cell`` so that the
    buffer, the parser and the renderer all agree on one delimiter.
    """

    cell: str = "_"
    row: str = "\n"

    def __post_init__(self) -> None:
        if len(self.cell) != 1 or len(self.row) != 1:
            raise ValueError("separators must be single characters")
        if self.cell == self.row:
            raise ValueError("cell and row separators must differ")
        if self.cell.isdigit() or self.row.isdigit() or "-" in (self.cell, self.row):
            raise ValueError("separators cannot be digits or '-'")

    def store_char(self, char: str) -> str:
        """Map a typed cell character to what the buffer stores."""

        return self.cell if char == " " else char

    def display(self, text: str) -> str:
        """Render buffer text with cells shown as spaces."""

        return text.replace(self.cell, " ")


DEFAULT_POLICY = SeparatorPolicy()

__all__ = ["SeparatorPolicy", "DEFAULT_POLICY"]
