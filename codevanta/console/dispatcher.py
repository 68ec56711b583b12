"""The command console.

`Console` reads a submitted line, echoes it, records it in history,
dispatches it to a built-in handler and appends the handler's lines to
the transcript. Handlers return lines and signal problems by raising
`ConsoleError` subclasses; the dispatcher renders those as an ``error``
line plus an optional ``info`` hint. Nothing raised by a handler escapes
`submit`.

Only one line is dispatched at a time. Lines that arrive while a
dispatch is running (for example a "run this file" request from the
file tree) wait in a FIFO queue and are dispatched afterwards.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Optional

from ..config.settings import ConsoleConfig
from ..exceptions import (
    ConsoleError,
    NotFoundError,
    UnknownCommandError,
    UnsupportedOperationError,
    UsageError,
)
from ..models import CommandHistory, FileProvider, OutputKind, OutputLine, OutputLog, VirtualFile
from ..utils import file_glyph, is_html
from .executor import FileExecutor
from .preview import BrowserPreviewOpener, PreviewOpener
from .reader import Command, parse_line

logger = logging.getLogger(__name__)

_Handler = Callable[[Command], list[OutputLine]]

HELP_TEXT: tuple[tuple[OutputKind, str], ...] = (
    (OutputKind.OUTPUT, ""),
    (OutputKind.INFO, "File Operations:"),
    (OutputKind.OUTPUT, "  ls, dir          - List all files in project"),
    (OutputKind.OUTPUT, "  cat <file>       - Display file contents"),
    (OutputKind.OUTPUT, "  run <file>       - Execute file (any supported type)"),
    (OutputKind.OUTPUT, "  preview <file>   - Open HTML files in live preview"),
    (OutputKind.OUTPUT, ""),
    (OutputKind.INFO, "Direct Execution:"),
    (OutputKind.OUTPUT, "  js <code>        - Execute JavaScript directly"),
    (OutputKind.OUTPUT, "  py <code>        - Execute Python directly (simulated)"),
    (OutputKind.OUTPUT, "  java <code>      - Execute Java code (simulated)"),
    (OutputKind.OUTPUT, "  Python and Java support print statements and simple"),
    (OutputKind.OUTPUT, "  variables only; they are not real interpreters."),
    (OutputKind.OUTPUT, ""),
    (OutputKind.INFO, "Utilities:"),
    (OutputKind.OUTPUT, "  clear, cls       - Clear terminal"),
    (OutputKind.OUTPUT, "  pwd              - Show current directory"),
    (OutputKind.OUTPUT, "  echo <text>      - Display text"),
    (OutputKind.OUTPUT, "  version          - Show version"),
    (OutputKind.OUTPUT, "  help             - Show this help"),
)


class Console:
    """Command console over a read-only set of project files.

    Args:
        files: Source of the project's files.
        config: Console settings. Defaults to `ConsoleConfig()`.
        executor: Runs files through interpreters.
        opener: Shows HTML previews. Defaults to the system browser.

    Example:
        ```python
        from codevanta.console import Console
        from codevanta.models import InMemoryFileProvider

        console = Console(InMemoryFileProvider.from_mapping({"app.js": "1 + 1"}))
        for line in console.submit("run app.js"):
            print(line.kind.value, line.text)
        ```
    """

    def __init__(
        self,
        files: FileProvider,
        config: Optional[ConsoleConfig] = None,
        executor: Optional[FileExecutor] = None,
        opener: Optional[PreviewOpener] = None,
    ):
        self.files = files
        self.config = config or ConsoleConfig()
        self.executor = executor or FileExecutor(
            preview_char_limit=self.config.preview_char_limit
        )
        self.opener = opener or BrowserPreviewOpener()
        self.output = OutputLog()
        self.history = CommandHistory()
        self.is_running = False
        self._pending: deque[str] = deque()

        # Command dispatch table, matched case-sensitively
        self._commands: dict[str, _Handler] = {
            "run": self._cmd_run,
            "preview": self._cmd_preview,
            "ls": self._cmd_ls,
            "dir": self._cmd_ls,
            "cat": self._cmd_cat,
            "type": self._cmd_cat,
            "clear": self._cmd_clear,
            "cls": self._cmd_clear,
            "help": self._cmd_help,
            "js": self._cmd_js,
            "node": self._cmd_js,
            "py": self._cmd_py,
            "python": self._cmd_py,
            "java": self._cmd_java,
            "pwd": self._cmd_pwd,
            "echo": self._cmd_echo,
            "version": self._cmd_version,
        }

        self.output.extend(self.welcome_lines())

    @property
    def prompt(self) -> str:
        return f"{self.config.prompt_directory}$"

    @property
    def pending(self) -> int:
        """Number of queued lines waiting for dispatch."""
        return len(self._pending)

    def welcome_line(self) -> OutputLine:
        return OutputLine(
            OutputKind.WELCOME, f"🚀 {self.config.product_name} - Ready for execution"
        )

    def welcome_lines(self) -> list[OutputLine]:
        return [
            self.welcome_line(),
            OutputLine.info('Type "help" for commands or "run <filename>" to execute files'),
            OutputLine.blank(),
        ]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def submit(self, raw: str) -> list[OutputLine]:
        """Dispatch one line, then anything queued meanwhile.

        Blank lines are ignored. If a dispatch is already running the line
        is queued instead and an empty list is returned.

        Returns:
            The lines appended to the transcript. After a ``clear`` this is
            the whole (reseeded) transcript.
        """
        if parse_line(raw) is None:
            return []
        if self.is_running:
            self._pending.append(raw)
            return []

        start_generation = self.output.generation
        start_len = len(self.output)

        self.is_running = True
        try:
            self._dispatch(raw)
            while self._pending:
                self._dispatch(self._pending.popleft())
        finally:
            self.is_running = False

        if self.output.generation != start_generation:
            return list(self.output.lines)
        return self.output.since(start_len)

    def enqueue(self, raw: str) -> None:
        """Queue a line for dispatch after the current one."""
        if parse_line(raw) is not None:
            self._pending.append(raw)

    def run_pending(self) -> list[OutputLine]:
        """Dispatch queued lines in arrival order."""
        if self.is_running or not self._pending:
            return []
        return self.submit(self._pending.popleft())

    def _dispatch(self, raw: str) -> None:
        command = parse_line(raw)
        if command is None:
            return

        self.output.append(OutputLine(OutputKind.COMMAND, f"{self.prompt} {command.raw}"))
        self.history.record_submission(command.raw)
        logger.debug("Dispatching %r", command.raw)

        try:
            handler = self._commands.get(command.name)
            if handler is None:
                raise UnknownCommandError(command.name)
            lines = handler(command)
        except ConsoleError as e:
            lines = [OutputLine.error(e.message)]
            if e.hint:
                lines.append(OutputLine.info(e.hint))
        except Exception as e:
            logger.exception("Command %r failed", command.raw)
            lines = [OutputLine.error(f"Error executing command: {e}")]

        self.output.extend(lines)

    def _require_file(self, name: str) -> VirtualFile:
        file = self.files.find(name)
        if file is None:
            raise NotFoundError(name)
        return file

    # ------------------------------------------------------------------
    # Built-in commands
    # ------------------------------------------------------------------

    def _cmd_run(self, command: Command) -> list[OutputLine]:
        if not command.args:
            raise UsageError("No file specified", hint="Usage: run <filename>")
        file = self._require_file(command.args[0])
        return self.executor.execute(file.name, file.content)

    def _cmd_preview(self, command: Command) -> list[OutputLine]:
        if not command.args:
            raise UsageError("No file specified", hint="Usage: preview <filename.html>")
        name = command.args[0]
        file = self._require_file(name)
        if not is_html(file.name):
            raise UnsupportedOperationError(
                f"Preview only supports HTML files. {name} is not an HTML file.",
                hint="Try: preview index.html",
            )
        if not self.opener.open_preview(file.content, f"Live Preview - {file.name}"):
            raise UnsupportedOperationError(
                "Failed to open preview. Please allow popups for this site."
            )
        return [OutputLine.success(f"Live preview opened for {file.name}")]

    def _cmd_ls(self, command: Command) -> list[OutputLine]:
        files = self.files.list_files()
        lines = [OutputLine.info("Files in project:")]
        if not files:
            lines.append(OutputLine.output("  (no files)"))
        for f in files:
            suffix = " (preview available)" if is_html(f.name) else ""
            lines.append(OutputLine.output(f"  {file_glyph(f.name)} {f.name}{suffix}"))
        lines.append(OutputLine.blank())
        lines.append(OutputLine.info(f"Total files: {len(files)}"))

        html_files = [f for f in files if is_html(f.name)]
        if html_files:
            lines.append(OutputLine.blank())
            lines.append(
                OutputLine.info('HTML files found! Use "preview <filename>" for live preview:')
            )
            lines.extend(OutputLine.output(f"  preview {f.name}") for f in html_files)
        return lines

    def _cmd_cat(self, command: Command) -> list[OutputLine]:
        if not command.args:
            raise UsageError("Usage: cat <filename>")
        file = self._require_file(command.args[0])
        separator = "-" * self.config.separator_width
        return [
            OutputLine.info(f"Contents of {file.name}:"),
            OutputLine.info(separator),
            OutputLine.output(file.content),
            OutputLine.info(separator),
        ]

    def clear(self) -> None:
        """Discard the transcript and start over with a welcome line."""
        self.output.clear_and_seed(
            [
                self.welcome_line(),
                OutputLine.success("Terminal cleared. Ready for new commands!"),
            ]
        )

    def _cmd_clear(self, command: Command) -> list[OutputLine]:
        self.clear()
        return []

    def _cmd_help(self, command: Command) -> list[OutputLine]:
        lines = [OutputLine.info(f"🚀 {self.config.product_name} - Available Commands:")]
        lines.extend(OutputLine(kind, text) for kind, text in HELP_TEXT)
        return lines

    def _run_inline(
        self, extension: str, command: Command, usage: str, example: str
    ) -> list[OutputLine]:
        if not command.args:
            raise UsageError(usage, hint=example)
        interpreter = self.executor.registry.get(extension)
        if interpreter is None:
            raise UnsupportedOperationError(f"No interpreter registered for .{extension}")
        return interpreter.execute(command.argument_text)

    def _cmd_js(self, command: Command) -> list[OutputLine]:
        return self._run_inline(
            "js",
            command,
            "Usage: js <javascript code>",
            'Example: js console.log("Hello World!")',
        )

    def _cmd_py(self, command: Command) -> list[OutputLine]:
        return self._run_inline(
            "py",
            command,
            "Usage: py <python code>",
            'Example: py print("Hello World!")',
        )

    def _cmd_java(self, command: Command) -> list[OutputLine]:
        return self._run_inline(
            "java",
            command,
            "Usage: java <java code>",
            'Example: java System.out.println("Hello World!");',
        )

    def _cmd_pwd(self, command: Command) -> list[OutputLine]:
        return [OutputLine.output(self.config.prompt_directory)]

    def _cmd_echo(self, command: Command) -> list[OutputLine]:
        return [OutputLine.output(command.argument_text)]

    def _cmd_version(self, command: Command) -> list[OutputLine]:
        return [
            OutputLine.info(f"🚀 {self.config.banner}"),
            OutputLine.info("Universal code execution environment"),
        ]
