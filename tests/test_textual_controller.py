from __future__ import annotations

from typing import List, Tuple

from matrix_console.adapters.textual import (
    TextualMatrixController,
    TextualUIHooks,
    translate_key,
)
from matrix_console.editor import (
    Backspace,
    Character,
    Compute,
    EditorMachine,
    EditorView,
    Quit,
    RowSeparator,
    SwitchBuffer,
)


def press(controller: TextualMatrixController, text: str) -> None:
    for char in text:
        if char == "\n":
            controller.handle_textual_key("enter")
        elif char == " ":
            controller.handle_textual_key("space", character=" ")
        else:
            controller.handle_textual_key(char, character=char)


def test_translate_key_bindings() -> None:
    assert translate_key("enter") == RowSeparator()
    assert translate_key("backspace") == Backspace()
    assert translate_key("tab") == SwitchBuffer()
    assert translate_key("t", "t") == Compute()
    assert translate_key("q", "q") == Quit()
    assert translate_key("7", "7") == Character("7")
    assert translate_key("minus", "-") == Character("-")
    assert translate_key("space", " ") == Character(" ")
    assert translate_key("x", "x") is None
    assert translate_key("up") is None


def test_controller_pushes_views_and_status() -> None:
    machine = EditorMachine()
    views: List[EditorView] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_view=views.append,
        update_status=statuses.append,
    )
    controller = TextualMatrixController(machine, hooks)

    press(controller, "1 2\n3 4")
    controller.handle_textual_key("tab")
    press(controller, "5 6\n7 8")
    controller.handle_textual_key("t", character="t")

    assert views[0].buffers == ("", "")
    assert views[-1].buffers == ("1 2\n3 4", "5 6\n7 8")
    assert views[-1].active == 1
    assert views[-1].result == "19 22\n43 50"
    assert statuses[-1] == "computed"


def test_controller_surfaces_errors() -> None:
    machine = EditorMachine()
    statuses: List[str] = []
    events: List[Tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_view=lambda view: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    controller = TextualMatrixController(machine, hooks)

    press(controller, "1 2")
    controller.handle_textual_key("tab")
    press(controller, "1 2")
    result = controller.handle_textual_key("t", character="t")

    assert result is not None
    assert result.status == "error"
    assert statuses[-1].startswith("error: cannot multiply")
    assert any(name == "editor.error" for name, _ in events)
    assert machine.view().result is None


def test_unbound_keys_are_ignored() -> None:
    machine = EditorMachine()
    hooks = TextualUIHooks(update_view=lambda view: None)
    controller = TextualMatrixController(machine, hooks)

    assert controller.handle_textual_key("a", character="a") is None
    assert machine.state.buffers.texts() == ("", "")


def test_quit_requests_exit_and_stops_dispatch() -> None:
    machine = EditorMachine()
    exits: List[bool] = []
    hooks = TextualUIHooks(
        update_view=lambda view: None,
        request_exit=lambda: exits.append(True),
    )
    controller = TextualMatrixController(machine, hooks)

    controller.handle_textual_key("q", character="q")

    assert exits == [True]
    assert machine.closed is True
    assert controller.handle_textual_key("1", character="1") is None


def test_controller_emits_log_lines() -> None:
    machine = EditorMachine()
    logs: List[str] = []
    hooks = TextualUIHooks(update_view=lambda view: None, log=logs.append)
    controller = TextualMatrixController(machine, hooks)

    controller.handle_textual_key("1", character="1")
    controller.tick()

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
