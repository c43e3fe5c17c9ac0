from __future__ import annotations

from typing import List

import pytest

from matrix_console.editor import (
    Backspace,
    Character,
    Compute,
    EditorMachine,
    EditorState,
    Quit,
    RowSeparator,
    SwitchBuffer,
    append_cell,
    append_row_separator,
    backspace,
    compute,
    switch_buffer,
)
from matrix_console.errors import (
    DimensionMismatch,
    EditorClosedError,
    InvalidCell,
    RaggedMatrix,
)
from matrix_console.matrix import Matrix
from matrix_console.runtime import ConsoleConfig


def type_text(machine: EditorMachine, text: str) -> None:
    for char in text:
        if char == "\n":
            machine.handle(RowSeparator())
        else:
            machine.handle(Character(char))


def fill(machine: EditorMachine, first: str, second: str) -> None:
    type_text(machine, first)
    machine.handle(SwitchBuffer())
    type_text(machine, second)


def test_space_is_stored_as_cell_placeholder() -> None:
    state = EditorState()

    append_cell(state, "1")
    append_cell(state, " ")
    append_cell(state, "2")

    assert state.buffers[0].text == "1_2"
    assert state.trace == "1_2"
    assert state.view().buffers[0] == "1 2"
    assert state.view().trace == "1 2"


def test_row_separator_resets_trace() -> None:
    state = EditorState()
    append_cell(state, "7")

    append_row_separator(state)

    assert state.buffers[0].text == "7\n"
    assert state.trace == ""


def test_backspace_on_empty_buffer_is_noop() -> None:
    state = EditorState()

    backspace(state)

    assert state.buffers[0].text == ""
    assert state.trace == ""


def test_backspace_removes_from_buffer_and_trace() -> None:
    state = EditorState()
    append_cell(state, "4")
    append_cell(state, "2")

    backspace(state)

    assert state.buffers[0].text == "4"
    assert state.trace == "4"


def test_switch_buffer_cycles_and_clears_trace() -> None:
    state = EditorState()
    append_cell(state, "1")

    switch_buffer(state)
    assert state.active == 1
    assert state.trace == ""

    append_cell(state, "9")
    assert state.buffers.texts() == ("1", "9")

    switch_buffer(state)
    assert state.active == 0


def test_unsupported_character_is_rejected() -> None:
    state = EditorState()

    with pytest.raises(ValueError):
        append_cell(state, "x")

    machine = EditorMachine(state)
    result = machine.handle(Character("x"))
    assert result.consumed is False
    assert state.buffers[0].text == ""


def test_compute_end_to_end() -> None:
    machine = EditorMachine()
    fill(machine, "1 2\n3 4", "5 6\n7 8")

    result = machine.handle(Compute())

    assert result.status == "computed"
    assert machine.state.result == Matrix.from_rows([[19, 22], [43, 50]])
    assert machine.view().result == "19 22\n43 50"
    assert machine.state.active == 1


@pytest.mark.parametrize("workers", [1, 2, 7])
def test_compute_uses_configured_workers(workers: int) -> None:
    machine = EditorMachine(config=ConsoleConfig(workers=workers))
    fill(machine, "1 2\n3 4\n5 6\n", "1 0\n0 1")

    machine.handle(Compute())

    assert machine.state.result == Matrix.from_rows([[1, 2], [3, 4], [5, 6]])


def test_dimension_mismatch_keeps_previous_result() -> None:
    machine = EditorMachine()
    fill(machine, "2", "3")
    machine.handle(Compute())
    previous = machine.state.result

    for _ in range(3):
        machine.handle(Backspace())
    machine.handle(SwitchBuffer())
    machine.handle(Backspace())
    type_text(machine, "1 2")
    machine.handle(SwitchBuffer())
    machine.handle(Backspace())
    type_text(machine, "1 2")
    assert machine.state.buffers.texts() == ("1_2", "1_2")

    result = machine.handle(Compute())

    assert result.status == "error"
    assert isinstance(result.error, DimensionMismatch)
    assert isinstance(machine.state.last_error, DimensionMismatch)
    assert machine.state.result == previous == Matrix.from_rows([[6]])
    assert machine.state.buffers.texts() == ("1_2", "1_2")


def test_compute_transition_raises_and_records_error() -> None:
    state = EditorState()
    append_cell(state, "1")
    append_cell(state, " ")
    append_cell(state, "2")
    append_row_separator(state)
    append_cell(state, "3")
    switch_buffer(state)
    append_cell(state, "1")

    with pytest.raises(RaggedMatrix) as info:
        compute(state)

    assert info.value.buffer_index == 0
    assert state.last_error is info.value
    assert state.result is None
    assert state.view().error is not None
    assert state.view().error.startswith("matrix 0:")


def test_parse_error_in_second_buffer_is_attributed() -> None:
    machine = EditorMachine()
    fill(machine, "1", "1  2")

    result = machine.handle(Compute())

    assert isinstance(result.error, InvalidCell)
    assert result.error.buffer_index == 1


def test_successful_compute_clears_last_error() -> None:
    machine = EditorMachine()
    fill(machine, "1 2", "")
    machine.handle(Compute())
    assert machine.state.last_error is not None

    type_text(machine, "3\n4")
    machine.handle(Compute())

    assert machine.state.last_error is None
    assert machine.view().result == "11"


def test_events_reach_the_bus() -> None:
    machine = EditorMachine()
    seen: List[str] = []
    for name in ("editor.edit", "editor.switch", "editor.compute", "editor.error"):
        machine.bus.subscribe(name, lambda payload, name=name: seen.append(name))

    machine.handle(Compute())
    fill(machine, "2", "2")
    machine.handle(Compute())

    assert seen[0] == "editor.error"
    assert "editor.switch" in seen
    assert seen[-1] == "editor.compute"


def test_quit_is_terminal() -> None:
    machine = EditorMachine()
    type_text(machine, "1")

    result = machine.handle(Quit())

    assert result.status == "quit"
    assert machine.closed is True
    with pytest.raises(EditorClosedError):
        machine.handle(Character("2"))
    with pytest.raises(EditorClosedError):
        machine.handle(Compute())
    assert machine.state.buffers[0].text == "1"
