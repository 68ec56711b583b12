"""CodeVanta: a project console with file-aware run, preview and inline execution.

This package provides both a complete terminal application and a
UI-independent console core.

Quick Start (Application):
    ```python
    from codevanta import CodeVantaApp

    app = CodeVantaApp("/path/to/project")
    app.run()
    ```

Using the Console Core:
    ```python
    from codevanta.console import Console
    from codevanta.models import InMemoryFileProvider

    console = Console(InMemoryFileProvider.from_mapping({"data.json": '{"a": 1}'}))
    console.submit("run data.json")
    for line in console.output.lines:
        print(line.kind.value, line.text)
    ```
"""

__version__ = "0.1.0"

from .app import CodeVantaApp
from .config import Config
from .console import Console
from .exceptions import (
    CodeVantaError,
    ConfigError,
    ConsoleError,
    FileOperationError,
    InterpreterError,
    NotFoundError,
    UnknownCommandError,
    UnsupportedOperationError,
    UsageError,
)
from .models import (
    CommandHistory,
    DirectoryFileProvider,
    InMemoryFileProvider,
    OutputKind,
    OutputLine,
    OutputLog,
    VirtualFile,
)

__all__ = [
    # Main application
    "CodeVantaApp",
    # Console core
    "Console",
    # Configuration
    "Config",
    # Models
    "OutputKind",
    "OutputLine",
    "OutputLog",
    "CommandHistory",
    "VirtualFile",
    "InMemoryFileProvider",
    "DirectoryFileProvider",
    # Exceptions
    "CodeVantaError",
    "ConfigError",
    "FileOperationError",
    "ConsoleError",
    "UsageError",
    "NotFoundError",
    "UnsupportedOperationError",
    "InterpreterError",
    "UnknownCommandError",
    # Version
    "__version__",
]
