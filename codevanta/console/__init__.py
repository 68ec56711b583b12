"""Command console core: line reading, dispatch, execution and interpreters."""

from .dispatcher import Console
from .executor import FileExecutor
from .hints import DEFAULT_HINTS, Hint, HintStore
from .preview import BrowserPreviewOpener, PreviewOpener
from .reader import Command, complete_command, parse_line

__all__ = [
    "Console",
    "FileExecutor",
    "Command",
    "parse_line",
    "complete_command",
    "PreviewOpener",
    "BrowserPreviewOpener",
    "Hint",
    "HintStore",
    "DEFAULT_HINTS",
]
