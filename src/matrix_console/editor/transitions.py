"""Transition functions applied to an explicit ``EditorState``."""

from __future__ import annotations

from typing import Optional

from matrix_console.buffer import BUFFER_COUNT
from matrix_console.errors import (
    ComputeError,
    EditorClosedError,
    ParseError,
)
from matrix_console.matrix import multiply, parse_matrix

from .state import EditorState

CELL_CHARS = frozenset("0123456789- ")


def _require_open(state: EditorState) -> None:
    if state.closed:
        raise EditorClosedError("editor has quit; no further events are accepted")


def append_cell(state: EditorState, char: str) -> EditorState:
    _require_open(state)
    if len(char) != 1 or char not in CELL_CHARS:
        raise ValueError(f"cannot type {char!r} into a matrix")
    stored = state.buffers.policy.store_char(char)
    state.active_buffer.append(stored)
    state.trace += stored
    return state


def append_row_separator(state: EditorState) -> EditorState:
    _require_open(state)
    state.active_buffer.append(state.buffers.policy.row)
    state.trace = ""
    return state


def backspace(state: EditorState) -> EditorState:
    _require_open(state)
    if state.active_buffer.pop() is not None:
        state.trace = state.trace[:-1]
    return state


def switch_buffer(state: EditorState) -> EditorState:
    _require_open(state)
    state.trace = ""
    state.active = (state.active + 1) % BUFFER_COUNT
    return state


def compute(state: EditorState, *, workers: Optional[int] = None) -> EditorState:
    """Multiply buffer 0 by buffer 1 and store the product.

    On failure the buffers and any previous result stay as they were, the
    error is kept in ``state.last_error`` and then re-raised.
    """

    _require_open(state)
    policy = state.buffers.policy
    try:
        operands = []
        for buffer in state.buffers:
            try:
                operands.append(parse_matrix(buffer.text, policy=policy))
            except ParseError as exc:
                exc.buffer_index = buffer.index
                raise
        product = multiply(operands[0], operands[1], workers=workers)
    except (ParseError, ComputeError) as exc:
        state.last_error = exc
        raise
    state.result = product
    state.last_error = None
    return state


def quit_editor(state: EditorState) -> EditorState:
    _require_open(state)
    state.closed = True
    state.trace = ""
    return state


__all__ = [
    "CELL_CHARS",
    "append_cell",
    "append_row_separator",
    "backspace",
    "switch_buffer",
    "compute",
    "quit_editor",
]
