"""File executor: routes a file's content to the interpreter for its extension."""

from __future__ import annotations

from typing import Optional

from ..models import OutputLine
from ..utils import get_extension
from .interpreters import InterpreterRegistry, default_registry


class FileExecutor:
    """Runs a named file through the matching interpreter.

    Output is always framed by an ``Executing: <name>`` line and a blank
    line before, and a blank line after. Unknown extensions get a short
    preview of the content instead.

    Args:
        registry: Interpreters by extension. Defaults to the built-in set.
        preview_char_limit: Characters of content shown for unknown types.
    """

    def __init__(
        self,
        registry: Optional[InterpreterRegistry] = None,
        preview_char_limit: int = 500,
    ):
        self.registry = registry or default_registry()
        self.preview_char_limit = preview_char_limit

    def execute(self, filename: str, content: str) -> list[OutputLine]:
        ext = get_extension(filename)
        lines = [OutputLine.info(f"Executing: {filename}"), OutputLine.blank()]

        interpreter = self.registry.get(ext)
        if interpreter is not None:
            lines.extend(interpreter.execute(content, filename))
        else:
            lines.extend(self._describe_unknown(ext, content))

        lines.append(OutputLine.blank())
        return lines

    def _describe_unknown(self, ext: str, content: str) -> list[OutputLine]:
        preview = content
        if len(content) > self.preview_char_limit:
            preview = content[: self.preview_char_limit] + "..."
        return [
            OutputLine.info(f"File type: {ext or 'unknown'}"),
            OutputLine.output(preview),
        ]
