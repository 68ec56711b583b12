"""Main application for CodeVanta."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DirectoryTree, Footer, Header, Static

from .config import Config
from .console import Console, HintStore
from .models import DirectoryFileProvider
from .widgets import ConsoleView, FileTree


class CodeVantaApp(App):
    """Project file tree with the command console."""

    CSS = """
    Screen {
        layout: horizontal;
    }

    #sidebar {
        width: 30;
        min-width: 15;
        max-width: 60;
        border-right: solid $primary;
    }

    #sidebar-header {
        height: 1;
        layout: horizontal;
        background: $surface-darken-1;
    }

    #sidebar-title {
        width: 1fr;
        padding: 0 1;
    }

    .resize-btn, .header-btn, .hint-dismiss {
        width: auto;
        min-width: 3;
        height: 1;
        border: none;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
    }

    .resize-btn:hover, .header-btn:hover, .hint-dismiss:hover {
        background: $primary;
        color: $text;
    }

    #file-tree {
        height: 1fr;
    }

    #main-area {
        width: 1fr;
    }

    #console-resize {
        height: 1;
        align: right middle;
    }

    #selected-file {
        height: 1fr;
        padding: 1 2;
        color: $text-muted;
    }

    ConsoleView {
        height: 14;
        min-height: 5;
        max-height: 40;
        background: $surface;
        border-top: solid $primary;
    }

    #console-header {
        height: 1;
        background: $surface-darken-1;
        dock: top;
    }

    #console-title {
        width: 1fr;
        padding: 0 1;
    }

    HintBar {
        height: 1;
        background: $surface;
    }

    .hint-btn {
        width: auto;
        min-width: 8;
        height: 1;
        border: none;
        background: $boost;
        color: $secondary;
        padding: 0 1;
    }

    #console-output {
        height: 1fr;
        padding: 0 1;
    }

    #console-input {
        height: 1;
        dock: bottom;
        border: none;
        padding: 0 1;
        background: $surface-darken-1;
    }

    #console-input:focus {
        background: $primary 20%;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+r", "run_selected", "Run File", priority=True),
        Binding("ctrl+p", "preview_selected", "Preview", priority=True),
        Binding("ctrl+t", "focus_console", "Console", priority=True),
        Binding("ctrl+b", "toggle_sidebar", "Sidebar"),
        Binding("ctrl+l", "clear_console", "Clear"),
    ]

    def __init__(self, path: str | None = None, config: Optional[Config] = None):
        super().__init__()
        self.root_path = Path(path) if path else Path.cwd()
        self.app_config = config or Config.load(self.root_path)
        self.command_console = Console(
            DirectoryFileProvider(
                self.root_path,
                ignored_dirs=self.app_config.files.ignored_dirs,
                max_file_size=self.app_config.files.max_file_size,
            ),
            config=self.app_config.console,
        )
        self.hint_store: Optional[HintStore] = None
        if self.app_config.console.show_hints:
            self.hint_store = HintStore.in_directory(Config.CONFIG_DIR)
            self.hint_store.load()
        self.selected_file: Optional[Path] = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal():
            with Vertical(id="sidebar"):
                with Horizontal(id="sidebar-header"):
                    yield Static("Files", id="sidebar-title")
                    yield Button("-", id="sidebar-shrink", classes="resize-btn")
                    yield Button("+", id="sidebar-grow", classes="resize-btn")
                yield FileTree(
                    self.root_path,
                    ignored_dirs=self.app_config.files.ignored_dirs,
                    id="file-tree",
                )

            with Vertical(id="main-area"):
                yield Static(
                    "Select a file, then press ctrl+r to run it or ctrl+p to preview it.",
                    id="selected-file",
                )
                with Horizontal(id="console-resize"):
                    yield Button("-", id="console-shrink", classes="resize-btn")
                    yield Button("+", id="console-grow", classes="resize-btn")
                yield ConsoleView(
                    self.command_console,
                    hint_store=self.hint_store,
                    export_dir=self.root_path,
                    id="console",
                )

        yield Footer()

    def on_mount(self) -> None:
        self.theme = "textual-light"
        self.title = "CodeVanta"
        self.sub_title = str(self.root_path)
        self.query_one("#sidebar").styles.width = self.app_config.sidebar.width
        self.query_one("#sidebar").display = self.app_config.sidebar.visible
        self.query_one(ConsoleView).styles.height = self.app_config.console.height
        self.action_focus_console()

    def _resize_sidebar(self, delta: int) -> None:
        """Resize sidebar width by delta."""
        sidebar = self.query_one("#sidebar")
        current_width = sidebar.styles.width
        if current_width is not None:
            new_width = max(15, min(60, int(current_width.value) + delta))
            sidebar.styles.width = new_width

    def _resize_console(self, delta: int) -> None:
        """Resize console height by delta."""
        console_view = self.query_one(ConsoleView)
        current_height = console_view.styles.height
        if current_height is not None:
            new_height = max(5, min(40, int(current_height.value) + delta))
            console_view.styles.height = new_height

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle resize button clicks."""
        button_id = event.button.id
        if button_id == "sidebar-shrink":
            self._resize_sidebar(-5)
        elif button_id == "sidebar-grow":
            self._resize_sidebar(5)
        elif button_id == "console-shrink":
            self._resize_console(-3)
        elif button_id == "console-grow":
            self._resize_console(3)

    def on_directory_tree_file_selected(
        self, event: DirectoryTree.FileSelected
    ) -> None:
        """Remember the file picked in the tree."""
        self.selected_file = event.path
        self.query_one("#selected-file", Static).update(
            f"Selected: {event.path.relative_to(self.root_path)}\n\n"
            "ctrl+r run   ctrl+p preview"
        )

    def _send_to_console(self, line: str) -> None:
        self.query_one(ConsoleView).execute(line)

    def action_run_selected(self) -> None:
        if self.selected_file is None:
            self.notify("No file selected", severity="warning")
            return
        self.query_one(ConsoleView).post_message(
            ConsoleView.RunFileRequested(self.selected_file.name)
        )

    def action_preview_selected(self) -> None:
        if self.selected_file is None:
            self.notify("No file selected", severity="warning")
            return
        self._send_to_console(f"preview {self.selected_file.name}")

    def action_focus_console(self) -> None:
        self.query_one(ConsoleView).input.focus()

    def action_toggle_sidebar(self) -> None:
        sidebar = self.query_one("#sidebar")
        sidebar.display = not sidebar.display

    def action_clear_console(self) -> None:
        console_view = self.query_one(ConsoleView)
        if console_view.busy:
            self.notify("Console is busy", severity="warning")
            return
        console_view.clear_transcript()


def main():
    """Entry point."""
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else None
    app = CodeVantaApp(path)
    app.run()


if __name__ == "__main__":
    main()
