"""Custom exceptions for CodeVanta.

This module defines the exception hierarchy for CodeVanta. Console
errors are raised by command handlers and rendered by the dispatcher as
``error`` lines, optionally followed by an ``info`` hint.

Example:
    ```python
    from codevanta.exceptions import ConsoleError, NotFoundError

    try:
        raise NotFoundError("index.html")
    except ConsoleError as e:
        print(f"{e.message} ({e.hint})")
    ```
"""

from __future__ import annotations

from typing import Optional


class CodeVantaError(Exception):
    """Base exception for all CodeVanta errors.

    All exceptions raised by CodeVanta inherit from this class,
    making it easy to catch all library-specific errors.
    """

    pass


class ConfigError(CodeVantaError):
    """Error related to configuration loading or validation.

    Raised when:
    - A configuration value has the wrong type
    - The configuration file cannot be written
    """

    pass


class FileOperationError(CodeVantaError):
    """Error while reading project files or writing exports."""

    pass


class ConsoleError(CodeVantaError):
    """Base class for errors shown to the user inside the console.

    Args:
        message: Text of the ``error`` line.
        hint: Optional text of the ``info`` line that follows it.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class UsageError(ConsoleError):
    """A built-in was called with missing or wrong arguments."""

    pass


class NotFoundError(ConsoleError):
    """A referenced file is not in the project."""

    def __init__(self, name: str):
        super().__init__(
            f"File not found: {name}", hint='Use "ls" to see available files'
        )
        self.name = name


class UnsupportedOperationError(ConsoleError):
    """The operation is not available for this target.

    Raised when:
    - ``preview`` is asked to open a non-HTML file
    - The preview window could not be opened
    """

    pass


class InterpreterError(ConsoleError):
    """An interpreter failed to process its source.

    Raised when:
    - A script throws
    - The embedded JavaScript engine fails
    """

    pass


class UnknownCommandError(ConsoleError):
    """The command name matched no built-in."""

    def __init__(self, name: str):
        super().__init__(
            f"Command not found: {name}",
            hint="Type 'help' to see available commands",
        )
        self.name = name
