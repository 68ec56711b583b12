"""Interpreters for markup and data files: HTML, XML, JSON, CSS, Markdown, text."""

from __future__ import annotations

import json
import math
import xml.etree.ElementTree as ElementTree
from html.parser import HTMLParser
from typing import Optional

from ...models import OutputLine
from .base import Interpreter
from .javascript import JavaScriptInterpreter


class _ScriptExtractor(HTMLParser):
    """Collect the text of every <script> element."""

    def __init__(self):
        super().__init__()
        self.scripts: list[str] = []
        self._parts: Optional[list[str]] = None

    def handle_starttag(self, tag, attrs):
        if tag.lower() == "script":
            self._parts = []

    def handle_endtag(self, tag):
        if tag.lower() == "script" and self._parts is not None:
            self.scripts.append("".join(self._parts))
            self._parts = None

    def handle_data(self, data):
        if self._parts is not None:
            self._parts.append(data)

    def close(self):
        super().close()
        # Unterminated trailing <script>
        if self._parts is not None:
            self.scripts.append("".join(self._parts))
            self._parts = None


def extract_scripts(markup: str) -> list[str]:
    """Text content of each non-empty <script> element, in document order."""
    parser = _ScriptExtractor()
    parser.feed(markup)
    parser.close()
    return [script for script in parser.scripts if script.strip()]


class HtmlInterpreter(Interpreter):
    """Runs the page's embedded scripts through the JavaScript interpreter."""

    name = "html"
    extensions = ("html", "htm")

    def __init__(self, javascript: JavaScriptInterpreter):
        self.javascript = javascript

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        lines = [OutputLine.info(f"Processing {filename or 'HTML'}...")]
        scripts = extract_scripts(source)
        if scripts:
            lines.append(OutputLine.info("Executing embedded JavaScript..."))
            lines.extend(self.javascript.run_page(scripts))
        lines.append(OutputLine.success("HTML processed successfully"))
        if filename:
            lines.append(OutputLine.info(f"Use: preview {filename} for live preview"))
        return lines


class XmlInterpreter(Interpreter):
    name = "xml"
    extensions = ("xml",)

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        lines = [OutputLine.info("XML file detected")]
        try:
            ElementTree.fromstring(source)
        except ElementTree.ParseError as e:
            lines.append(OutputLine.error(f"XML Parse Error: {e}"))
        else:
            lines.append(OutputLine.success("Valid XML format"))
        return lines


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def _parse_float(text: str) -> Optional[float]:
    # Literals too large for a double become null, as JSON.stringify renders them
    value = float(text)
    return value if math.isfinite(value) else None


class JsonInterpreter(Interpreter):
    """Validates JSON and pretty-prints it."""

    name = "json"
    extensions = ("json",)

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        lines = [OutputLine.info(f"Processing {filename or 'JSON'}...")]
        try:
            parsed = json.loads(
                source, parse_constant=_reject_constant, parse_float=_parse_float
            )
        except ValueError as e:
            lines.append(OutputLine.error(f"JSON Parse Error: {e}"))
            return lines
        lines.append(OutputLine.success("Valid JSON format"))
        lines.append(OutputLine.output(json.dumps(parsed, indent=2, ensure_ascii=False)))
        return lines


class StaticInterpreter(Interpreter):
    """Acknowledges a file type without analysing it."""

    def __init__(self, name: str, extensions: tuple[str, ...], label: str):
        self.name = name
        self.extensions = extensions
        self.label = label

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        return [
            OutputLine.info(f"Processing {filename or self.label}..."),
            OutputLine.success(f"{self.label} processed successfully"),
        ]


def css_interpreter() -> StaticInterpreter:
    return StaticInterpreter("css", ("css",), "CSS")


def markdown_interpreter() -> StaticInterpreter:
    return StaticInterpreter("markdown", ("md", "markdown"), "Markdown")


class TextInterpreter(Interpreter):
    name = "text"
    extensions = ("txt",)

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        return [OutputLine.info("Text file content:"), OutputLine.output(source)]
