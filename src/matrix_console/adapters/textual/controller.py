"""Textual-agnostic controller wiring EditorMachine signals into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from matrix_console.editor import (
    Backspace,
    Character,
    Compute,
    EditorEvent,
    EditorMachine,
    EditorResult,
    EditorView,
    Quit,
    RowSeparator,
    SwitchBuffer,
)
from matrix_console.editor.transitions import CELL_CHARS


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the controller to update Textual widgets."""

    update_view: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


NAMED_KEYS: Dict[str, EditorEvent] = {
    "enter": RowSeparator(),
    "return": RowSeparator(),
    "backspace": Backspace(),
    "tab": SwitchBuffer(),
}

COMMAND_CHARS: Dict[str, EditorEvent] = {
    "t": Compute(),
    "q": Quit(),
}


def translate_key(key: str, character: Optional[str] = None) -> Optional[EditorEvent]:
    """Map a Textual key name (plus its printable character) to an event."""

    named = NAMED_KEYS.get(key.lower())
    if named is not None:
        return named
    if key == "space":
        character = " "
    if character is None or len(character) != 1:
        return None
    if character in COMMAND_CHARS:
        return COMMAND_CHARS[character]
    if character in CELL_CHARS:
        return Character(character)
    return None


class TextualMatrixController:
    """Bridges EditorMachine + bus events to a Textual-friendly surface."""

    def __init__(self, machine: EditorMachine, hooks: TextualUIHooks) -> None:
        self.machine = machine
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[EditorResult]:
        """Translate a key press and feed it to the machine.

        Returns ``None`` for keys without a binding or once the editor has
        quit.
        """

        if self.machine.closed:
            return None
        event = translate_key(key, character)
        self._log_state("key ->", key=key, character=character, event=event)
        if event is None:
            return None
        result = self.machine.handle(event)
        self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def tick(self) -> None:
        """Periodic redraw driven by the front-end timer."""

        self.refresh()

    def refresh(self) -> None:
        self.hooks.update_view(self.machine.view())

    def _after_result(self, result: EditorResult) -> None:
        if result.status == "error" and result.message:
            self.hooks.update_status(f"error: {result.message}")
        elif result.status == "computed":
            self.hooks.update_status("computed")
        elif result.message:
            self.hooks.update_status(result.message)
        self.refresh()

    def _subscribe_events(self) -> None:
        bus = self.machine.bus
        for event in (
            "editor.edit",
            "editor.switch",
            "editor.compute",
            "editor.error",
            "editor.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "editor.quit":
            self.hooks.request_exit()

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.machine.state
        return {
            "active": state.active,
            "trace": state.trace,
            "has_result": state.result is not None,
            "closed": state.closed,
        }


__all__ = ["TextualMatrixController", "TextualUIHooks", "translate_key"]
