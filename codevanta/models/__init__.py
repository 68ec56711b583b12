"""Data models for CodeVanta."""

from .files import DirectoryFileProvider, FileProvider, InMemoryFileProvider, VirtualFile
from .state import CommandHistory, OutputKind, OutputLine, OutputLog

__all__ = [
    "OutputKind",
    "OutputLine",
    "OutputLog",
    "CommandHistory",
    "VirtualFile",
    "FileProvider",
    "InMemoryFileProvider",
    "DirectoryFileProvider",
]
