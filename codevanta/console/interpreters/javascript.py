"""JavaScript interpreter backed by an embedded V8 (mini-racer).

Each execution gets a fresh `MiniRacer` context; the scripts of one HTML
page share a single context. A script runs through an indirect ``eval``
so the completion value of its last expression is reported.
``console.log/info/warn/error/debug`` calls are collected in the
context and turned into output lines once the script completes; if the
script throws, only the error is reported.

There is no time limit: a script that never terminates blocks the
calling thread.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from py_mini_racer import JSEvalException, MiniRacer

from ...exceptions import InterpreterError
from ...models import OutputLine
from .base import Interpreter

logger = logging.getLogger(__name__)

CONSOLE_METHODS = ("log", "info", "warn", "error", "debug")

_HARNESS = """
(function () {
  var logs = [];
  var fmt = function (value) {
    var text = typeof value === "object" ? JSON.stringify(value, null, 2) : String(value);
    return text === undefined ? "undefined" : text;
  };
  var methods = %(methods)s;
  globalThis.console = {};
  methods.forEach(function (level) {
    globalThis.console[level] = function () {
      logs.push({ level: level, text: Array.prototype.map.call(arguments, fmt).join(" ") });
    };
  });
  try {
    var result = (0, eval)(%(source)s);
    return JSON.stringify({
      ok: true,
      logs: logs,
      defined: result !== undefined,
      result: result === undefined ? null : fmt(result)
    });
  } catch (e) {
    return JSON.stringify({ ok: false, error: String(e) });
  }
})()
"""


def build_harness(source: str) -> str:
    """Wrap `source` in the console-capturing harness."""
    return _HARNESS % {
        "methods": json.dumps(list(CONSOLE_METHODS)),
        "source": json.dumps(source),
    }


class JavaScriptInterpreter(Interpreter):
    """Runs JavaScript source and reports captured console output."""

    name = "javascript"
    extensions = ("js", "mjs")

    def evaluate(self, source: str, context: Optional[MiniRacer] = None) -> dict:
        """Run `source` and return the harness report.

        A fresh context is used unless `context` is given, in which case
        globals left by earlier scripts in that context stay visible.

        Raises:
            InterpreterError: If the script throws or the engine fails.
        """
        ctx = MiniRacer() if context is None else context
        try:
            raw = ctx.eval(build_harness(source))
        except JSEvalException as e:
            logger.debug("JavaScript engine error", exc_info=True)
            raise InterpreterError(f"Error: {e}") from e
        report = json.loads(raw)
        if not report["ok"]:
            raise InterpreterError(f"Error: {report['error']}")
        return report

    def _render(
        self, source: str, filename: Optional[str], context: Optional[MiniRacer]
    ) -> list[OutputLine]:
        lines = [OutputLine.info(f"Executing {filename or 'JavaScript code'}...")]
        try:
            report = self.evaluate(source, context)
        except InterpreterError as e:
            lines.append(OutputLine.error(e.message))
            return lines

        for entry in report["logs"]:
            if entry["level"] == "error":
                lines.append(OutputLine.error(entry["text"]))
            else:
                lines.append(OutputLine.output(entry["text"]))

        if report["defined"]:
            lines.append(OutputLine.output(report["result"]))

        if not report["logs"] and not report["defined"]:
            lines.append(OutputLine.success("Executed successfully (no output)"))
        return lines

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        return self._render(source, filename, None)

    def run_page(self, scripts: list[str]) -> list[OutputLine]:
        """Run a page's scripts in order in one shared context.

        A script that throws is reported and the remaining scripts still run.
        """
        context = MiniRacer()
        lines: list[OutputLine] = []
        for script in scripts:
            lines.extend(self._render(script, None, context))
        return lines


_IMPORT = re.compile(r"import.*?from.*?;")
_EXPORT = re.compile(r"export.*?;")
_TAG = re.compile(r"<[^>]*>")


def strip_jsx(source: str) -> str:
    """Crudely reduce JSX to runnable JavaScript.

    Import and export statements are dropped and every tag-like substring
    becomes an empty string literal. This is lossy by nature.
    """
    source = _IMPORT.sub("", source)
    source = _EXPORT.sub("", source)
    return _TAG.sub('""', source)


class JsxInterpreter(Interpreter):
    name = "jsx"
    extensions = ("jsx", "tsx")

    def __init__(self, javascript: JavaScriptInterpreter):
        self.javascript = javascript

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        return [
            OutputLine.info("React/JSX file detected"),
            *self.javascript.execute(strip_jsx(source), filename),
        ]


class TypeScriptInterpreter(Interpreter):
    """Runs TypeScript as-is; type annotations are not removed."""

    name = "typescript"
    extensions = ("ts",)

    def __init__(self, javascript: JavaScriptInterpreter):
        self.javascript = javascript

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        return [
            OutputLine.info("TypeScript file detected"),
            *self.javascript.execute(source, filename),
        ]
