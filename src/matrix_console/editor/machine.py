"""Event dispatcher driving the editor transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from matrix_console.errors import ComputeError, MatrixConsoleError, ParseError
from matrix_console.runtime import telemetry
from matrix_console.runtime.config import ConsoleConfig

from . import transitions
from .events import (
    Backspace,
    Character,
    Compute,
    EditorEvent,
    Quit,
    RowSeparator,
    SwitchBuffer,
)
from .state import EditorState, EditorView


@dataclass(slots=True)
class EditorResult:
    """Outcome of ``EditorMachine.handle``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    error: Optional[MatrixConsoleError] = None


class EditorBus:
    """Minimal event bus so front-ends can react to editor signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class EditorMachine:
    """Owns an ``EditorState`` and applies one event at a time."""

    def __init__(
        self,
        state: EditorState | None = None,
        *,
        config: ConsoleConfig | None = None,
        bus: EditorBus | None = None,
    ) -> None:
        self.state = state or EditorState()
        self.config = config or ConsoleConfig()
        self.bus = bus or EditorBus()
        self.logger = telemetry.get_logger("matrix_console.editor")

    @property
    def closed(self) -> bool:
        return self.state.closed

    def view(self) -> EditorView:
        return self.state.view()

    def handle(self, event: EditorEvent) -> EditorResult:
        name = type(event).__name__
        with telemetry.span(
            name=f"editor::{name}",
            logger_name="matrix_console.editor",
            component=True,
            metadata={"event": name, "active": self.state.active},
        ):
            result = self._dispatch(event)
        return result

    def _dispatch(self, event: EditorEvent) -> EditorResult:
        state = self.state
        if isinstance(event, Character):
            try:
                transitions.append_cell(state, event.char)
            except ValueError:
                return EditorResult(consumed=False, status="ignored")
            self.bus.emit("editor.edit", state.active)
            return EditorResult(consumed=True)

        if isinstance(event, RowSeparator):
            transitions.append_row_separator(state)
            self.bus.emit("editor.edit", state.active)
            return EditorResult(consumed=True, message="new_row")

        if isinstance(event, Backspace):
            before = len(state.active_buffer)
            transitions.backspace(state)
            if len(state.active_buffer) == before:
                return EditorResult(consumed=True, status="noop")
            self.bus.emit("editor.edit", state.active)
            return EditorResult(consumed=True)

        if isinstance(event, SwitchBuffer):
            transitions.switch_buffer(state)
            telemetry.record_event("editor.switch", data={"active": state.active})
            self.bus.emit("editor.switch", state.active)
            return EditorResult(consumed=True, message=f"matrix_{state.active}")

        if isinstance(event, Compute):
            return self._compute()

        if isinstance(event, Quit):
            transitions.quit_editor(state)
            telemetry.record_event("editor.quit")
            self.bus.emit("editor.quit")
            return EditorResult(consumed=True, status="quit", message="quit")

        raise TypeError(f"Unknown editor event {event!r}")

    def _compute(self) -> EditorResult:
        state = self.state
        try:
            transitions.compute(state, workers=self.config.engine_workers)
        except (ParseError, ComputeError) as exc:
            message = state.view().error
            telemetry.record_event(
                "editor.error",
                level="warning",
                data={"kind": type(exc).__name__, "message": message},
            )
            self.bus.emit("editor.error", exc)
            return EditorResult(
                consumed=True, status="error", message=message, error=exc
            )
        assert state.result is not None
        telemetry.record_event(
            "editor.compute",
            data={"shape": state.result.shape, "workers": self.config.workers},
        )
        self.bus.emit("editor.compute", state.result)
        return EditorResult(consumed=True, status="computed", message="computed")


__all__ = ["EditorMachine", "EditorResult", "EditorBus"]
