"""Editor state machine driven by discrete input events."""

from .events import (
    Backspace,
    Character,
    Compute,
    EditorEvent,
    Quit,
    RowSeparator,
    SwitchBuffer,
)
from .machine import EditorBus, EditorMachine, EditorResult
from .state import EditorState, EditorView
from .transitions import (
    append_cell,
    append_row_separator,
    backspace,
    compute,
    quit_editor,
    switch_buffer,
)

__all__ = [
    "Backspace",
    "Character",
    "Compute",
    "EditorEvent",
    "Quit",
    "RowSeparator",
    "SwitchBuffer",
    "EditorBus",
    "EditorMachine",
    "EditorResult",
    "EditorState",
    "EditorView",
    "append_cell",
    "append_row_separator",
    "backspace",
    "compute",
    "quit_editor",
    "switch_buffer",
]
