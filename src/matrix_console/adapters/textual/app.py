"""Executable Textual app that hosts the matrix console."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the console is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use matrix_console.adapters.textual.app"
    ) from exc

from matrix_console.editor import EditorMachine, EditorView
from matrix_console.runtime import telemetry
from matrix_console.runtime.config import ConsoleConfig, load_config

from .controller import TextualMatrixController, TextualUIHooks

HELP_TEXT = "digits/-: type  space: next cell  enter: next row  tab: switch  t: multiply  q: quit"


def create_default_machine(config: ConsoleConfig | None = None) -> EditorMachine:
    return EditorMachine(config=config or load_config())


@dataclass
class UIState:
    view: Optional[EditorView] = None
    status_text: str = ""


class MatrixConsoleApp(App[None]):
    """Two matrix panels, a result panel and a status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panels {
		height: 1fr;
	}

	.panel {
		width: 1fr;
		border: round $primary;
		padding: 1 1;
		content-align: center middle;
	}

	.panel.active {
		border: round $warning;
	}

	#trace-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("tab", "switch_buffer", "Switch matrix", priority=True),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, *, config: ConsoleConfig | None = None) -> None:
        super().__init__()
        self.config = config or load_config()
        self._state = UIState()
        self.machine: EditorMachine | None = None
        self.controller: TextualMatrixController | None = None
        self._panels: List[Static] = []
        self._trace_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="panels"):
            for index in range(3):
                panel = Static("", id=f"panel-{index}", classes="panel")
                self._panels.append(panel)
                yield panel
        self._trace_widget = Static("", id="trace-line")
        self._status_widget = Static(HELP_TEXT, id="status-line")
        yield self._trace_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.machine = create_default_machine(self.config)
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.controller = TextualMatrixController(self.machine, hooks)
        self.set_interval(self.config.tick_seconds, self._tick)

    def _tick(self) -> None:
        if self.controller:
            self.controller.tick()

    def action_switch_buffer(self) -> None:
        if self.controller:
            self.controller.handle_textual_key("tab")

    async def on_key(self, event: events.Key) -> None:
        if not self.controller:
            return
        result = self.controller.handle_textual_key(
            event.key, character=event.character
        )
        if result is not None:
            event.stop()

    def _update_view(self, view: EditorView) -> None:
        self._state.view = view
        if not self._panels:
            return
        contents = [view.buffers[0], view.buffers[1], view.result or ""]
        for index, panel in enumerate(self._panels):
            panel.border_title = view.title(index)
            panel.set_class(index == view.active, "active")
            panel.update(contents[index])
        if self._trace_widget:
            self._trace_widget.update(f"> {view.trace}")

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "ui.trace",
            level="debug",
            data={"line": line},
            logger_name="matrix_console.ui",
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multiply two matrices in the terminal.")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads used for multiplication (default: 1, sequential)",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="Refresh interval of the UI in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: quiet while the UI owns the terminal)",
    )
    return parser.parse_args(argv)


def build_config(argv: Optional[Sequence[str]] = None) -> ConsoleConfig:
    args = _parse_args(argv)
    return load_config().override(
        workers=args.workers, tick_ms=args.tick_ms, log_preset=args.log_preset
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = build_config(argv)
    telemetry.configure(preset=config.log_preset or "quiet")
    app = MatrixConsoleApp(config=config)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
