"""Interpreter interface and registry."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...exceptions import ConsoleError
from ...models import OutputLine

logger = logging.getLogger(__name__)


class Interpreter:
    """Per-file-type strategy that turns source text into output lines.

    Subclasses implement `run`. Callers use `execute`, which guarantees
    that no exception escapes: any failure becomes one ``error`` line.
    """

    name: str = "interpreter"
    extensions: tuple[str, ...] = ()

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        raise NotImplementedError

    def execute(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        try:
            return self.run(source, filename)
        except ConsoleError as e:
            return [OutputLine.error(e.message)]
        except Exception as e:
            logger.debug("%s interpreter failed", self.name, exc_info=True)
            return [OutputLine.error(f"Error: {e}")]


class InterpreterRegistry:
    """Maps lowercased file extensions to interpreters."""

    def __init__(self, interpreters: Iterable[Interpreter] = ()):
        self._by_extension: dict[str, Interpreter] = {}
        for interpreter in interpreters:
            self.register(interpreter)

    def register(self, interpreter: Interpreter) -> None:
        for ext in interpreter.extensions:
            self._by_extension[ext.lower()] = interpreter

    def get(self, extension: str) -> Optional[Interpreter]:
        return self._by_extension.get(extension.lower())

    def __contains__(self, extension: str) -> bool:
        return extension.lower() in self._by_extension

    @property
    def extensions(self) -> list[str]:
        return sorted(self._by_extension)
