"""Widget components for CodeVanta."""

from .console import ConsoleInput, ConsoleView, HintBar, render_line
from .file_tree import FileTree

__all__ = [
    "ConsoleView",
    "ConsoleInput",
    "HintBar",
    "FileTree",
    "render_line",
]
