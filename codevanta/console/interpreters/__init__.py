"""Per-file-type interpreters for the console.

`default_registry` wires up every built-in interpreter. The Python and
Java entries are toy simulators, not real language runtimes.
"""

from .base import Interpreter, InterpreterRegistry
from .javascript import JavaScriptInterpreter, JsxInterpreter, TypeScriptInterpreter
from .markup import (
    HtmlInterpreter,
    JsonInterpreter,
    StaticInterpreter,
    TextInterpreter,
    XmlInterpreter,
    css_interpreter,
    markdown_interpreter,
)
from .simulators import JavaSimulator, PythonSimulator


def default_registry() -> InterpreterRegistry:
    javascript = JavaScriptInterpreter()
    return InterpreterRegistry(
        [
            javascript,
            PythonSimulator(),
            JavaSimulator(),
            HtmlInterpreter(javascript),
            css_interpreter(),
            markdown_interpreter(),
            JsonInterpreter(),
            XmlInterpreter(),
            JsxInterpreter(javascript),
            TypeScriptInterpreter(javascript),
            TextInterpreter(),
        ]
    )


__all__ = [
    "Interpreter",
    "InterpreterRegistry",
    "default_registry",
    "JavaScriptInterpreter",
    "JsxInterpreter",
    "TypeScriptInterpreter",
    "HtmlInterpreter",
    "JsonInterpreter",
    "XmlInterpreter",
    "StaticInterpreter",
    "TextInterpreter",
    "PythonSimulator",
    "JavaSimulator",
]
