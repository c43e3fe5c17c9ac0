"""Editor state and the read-only view handed to front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from matrix_console.buffer import BUFFER_COUNT, BufferStore, TextBuffer
from matrix_console.errors import MatrixConsoleError, ParseError
from matrix_console.matrix import Matrix


@dataclass(slots=True)
class EditorState:
    """Everything the console knows between two input events.

    ``trace`` holds what was typed since the last row commit or buffer
    switch and is only used to place the cursor. ``result`` keeps the last
    successful product until a later compute replaces it.
    """

    buffers: BufferStore = field(default_factory=BufferStore)
    active: int = 0
    trace: str = ""
    result: Optional[Matrix] = None
    last_error: Optional[MatrixConsoleError] = None
    closed: bool = False

    @property
    def active_buffer(self) -> TextBuffer:
        return self.buffers[self.active]

    def view(self) -> "EditorView":
        return EditorView(
            active=self.active,
            buffers=tuple(buffer.display for buffer in self.buffers.snapshot()),
            trace=self.buffers.policy.display(self.trace),
            result=self.result.render() if self.result is not None else None,
            error=_describe(self.last_error),
            closed=self.closed,
        )


@dataclass(frozen=True, slots=True)
class EditorView:
    active: int
    buffers: Tuple[str, ...]
    trace: str
    result: Optional[str]
    error: Optional[str]
    closed: bool

    def title(self, index: int) -> str:
        if index < BUFFER_COUNT:
            return f"Matrix {index}"
        return "Result"


def _describe(error: Optional[MatrixConsoleError]) -> Optional[str]:
    if error is None:
        return None
    if isinstance(error, ParseError):
        return error.describe()
    return str(error)


__all__ = ["EditorState", "EditorView"]
