"""Console widget: transcript, hint bar and command input."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..console import Console, HintStore, parse_line
from ..console.hints import DEFAULT_HINTS, Hint
from ..console.reader import complete_command
from ..console.transcript import format_copy, write_transcript
from ..exceptions import FileOperationError
from ..models import CommandHistory, OutputLine
from ..themes import KIND_MARKERS, KIND_STYLES


def render_line(line: OutputLine) -> Text:
    """Rich text for one transcript line."""
    return Text(KIND_MARKERS.get(line.kind, "") + line.text, style=KIND_STYLES[line.kind])


class ConsoleInput(Input):
    """Command input with history recall and command-name completion."""

    BINDINGS = [
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
        Binding("tab", "complete", "Complete", show=False, priority=True),
    ]

    def __init__(self, history: CommandHistory, **kwargs):
        super().__init__(**kwargs)
        self.history = history
        # Changed messages still in flight from our own recalls
        self._recall_changes = 0

    def _show(self, value: str) -> None:
        if value != self.value:
            self._recall_changes += 1
        self.value = value
        self.cursor_position = len(value)

    def action_history_previous(self) -> None:
        value = self.history.recall_previous()
        if value is not None:
            self._show(value)

    def action_history_next(self) -> None:
        value = self.history.recall_next()
        if value is not None:
            self._show(value)

    def action_complete(self) -> None:
        completed = complete_command(self.value)
        if completed is not None:
            self.value = completed
            self.cursor_position = len(completed)

    @on(Input.Changed)
    def _edited(self, event: Input.Changed) -> None:
        if self._recall_changes:
            self._recall_changes -= 1
            return
        # Typing over a recalled line ends browsing
        if self.history.browsing:
            self.history.reset_cursor()


class HintBar(Horizontal):
    """Suggested commands; each can be dismissed for good."""

    class HintChosen(Message):
        def __init__(self, hint: Hint):
            super().__init__()
            self.hint = hint

    def __init__(self, store: HintStore, **kwargs):
        super().__init__(**kwargs)
        self.store = store
        self._hints = {hint.id: hint for hint in DEFAULT_HINTS}

    def compose(self) -> ComposeResult:
        for hint in self.store.visible(DEFAULT_HINTS):
            button = Button(hint.title, id=f"hint-{hint.id}", classes="hint-btn")
            button.tooltip = hint.description
            yield button
            yield Button("x", id=f"dismiss-{hint.id}", classes="hint-dismiss")
        yield Button("Hide", id="hint-hide", classes="hint-dismiss")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button_id = event.button.id or ""
        if button_id == "hint-hide":
            self.display = False
        elif button_id.startswith("dismiss-"):
            hint_id = button_id.removeprefix("dismiss-")
            self.store.dismiss(hint_id)
            for widget_id in (f"hint-{hint_id}", f"dismiss-{hint_id}"):
                self.query_one(f"#{widget_id}").remove()
        elif button_id.startswith("hint-"):
            hint = self._hints.get(button_id.removeprefix("hint-"))
            if hint:
                self.post_message(self.HintChosen(hint))


class ConsoleView(Vertical):
    """The command console as a widget.

    Lines typed into the input are dispatched by a `Console` in a worker
    thread; the input is disabled until the dispatch finishes. Lines that
    arrive meanwhile (a `RunFileRequested` message, a hint click) are
    queued and run in order afterwards.

    Args:
        console: The console core to drive.
        hint_store: Dismissed-hint record. No hint bar when None.
        export_dir: Where downloaded transcripts are written.
    """

    class RunFileRequested(Message):
        """Ask the console to ``run`` a file by name."""

        def __init__(self, filename: str):
            super().__init__()
            self.filename = filename

    def __init__(
        self,
        console: Console,
        hint_store: Optional[HintStore] = None,
        export_dir: Optional[Path] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.command_console = console
        self.hint_store = hint_store
        self.export_dir = export_dir or Path.cwd()
        self.busy = False
        self._rendered_generation = -1
        self._rendered_count = 0

    def compose(self) -> ComposeResult:
        with Horizontal(id="console-header"):
            yield Static("Terminal", id="console-title")
            yield Button("Copy", id="console-copy", classes="header-btn")
            yield Button("Save", id="console-save", classes="header-btn")
            yield Button("Clear", id="console-clear", classes="header-btn")
        if self.hint_store is not None and self.hint_store.visible(DEFAULT_HINTS):
            yield HintBar(self.hint_store, id="hint-bar")
        yield RichLog(id="console-output", wrap=True, markup=False, auto_scroll=True)
        yield ConsoleInput(
            self.command_console.history,
            placeholder=f"{self.command_console.prompt} type a command",
            id="console-input",
        )

    def on_mount(self) -> None:
        self.refresh_transcript()

    @property
    def input(self) -> ConsoleInput:
        return self.query_one("#console-input", ConsoleInput)

    def refresh_transcript(self) -> None:
        """Write new transcript lines, or redraw everything after a clear."""
        log = self.query_one("#console-output", RichLog)
        output = self.command_console.output
        if output.generation != self._rendered_generation:
            log.clear()
            self._rendered_generation = output.generation
            self._rendered_count = 0
        for line in output.since(self._rendered_count):
            log.write(render_line(line))
        self._rendered_count = len(output)

    def execute(self, line: str) -> None:
        """Dispatch `line`, or queue it if a dispatch is in flight."""
        if parse_line(line) is None:
            return
        if self.busy:
            self.command_console.enqueue(line)
            return
        self.busy = True
        self.run_worker(self._dispatch(line), group="console")

    async def _dispatch(self, line: str) -> None:
        console_input = self.input
        console_input.disabled = True
        try:
            await asyncio.to_thread(self.command_console.submit, line)
            while self.command_console.pending:
                await asyncio.to_thread(self.command_console.run_pending)
        finally:
            self.busy = False
            console_input.disabled = False
            console_input.focus()
            self.refresh_transcript()

    def _append(self, line: OutputLine) -> None:
        self.command_console.output.append(line)
        self.refresh_transcript()

    @on(Input.Submitted, "#console-input")
    def _submitted(self, event: Input.Submitted) -> None:
        event.input.value = ""
        self.execute(event.value)

    def on_console_view_run_file_requested(self, event: RunFileRequested) -> None:
        self.execute(f"run {event.filename}")

    def on_hint_bar_hint_chosen(self, event: HintBar.HintChosen) -> None:
        self.execute(event.hint.command)

    def copy_transcript(self) -> None:
        self.app.copy_to_clipboard(format_copy(self.command_console.output.lines))
        self._append(OutputLine.success("Terminal output copied to clipboard!"))

    def download_transcript(self) -> None:
        try:
            path = write_transcript(self.command_console.output.lines, self.export_dir)
        except FileOperationError as e:
            self._append(OutputLine.error(str(e)))
            return
        self._append(OutputLine.success(f"Terminal output downloaded! ({path.name})"))

    def clear_transcript(self) -> None:
        self.command_console.clear()
        self.refresh_transcript()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.busy:
            self.app.notify("Console is busy", severity="warning")
            return
        button_id = event.button.id
        if button_id == "console-copy":
            self.copy_transcript()
        elif button_id == "console-save":
            self.download_transcript()
        elif button_id == "console-clear":
            self.clear_transcript()
