"""Toy simulators for Python and Java.

These are not interpreters. They scan source text line by line for a
handful of patterns (assignments and ``print`` calls for Python,
``System.out.println`` for Java) and render what those lines would most
likely print. Anything they do not recognise is ignored.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from ...models import OutputLine
from . import arithmetic
from .base import Interpreter

Value = Union[int, float, str]

NO_OUTPUT = "Executed successfully (no output)"

_ASSIGNMENT = re.compile(r"^(\w+)\s*=(?!=)\s*(.+)$")
_PRINT = re.compile(r"print\s*\(\s*(.+)\s*\)$")
_FSTRING_FIELD = re.compile(r"\{(\w+)\}")
_INPUT_CALL = re.compile(r"input\s*\(\s*([^)]*)\s*\)")
_FLOAT_CALL = re.compile(r"float\s*\(\s*([^)]+)\s*\)")
_JAVA_PRINT = re.compile(r"System\.out\.print(?:ln)?\s*\(\s*([^)]+)\s*\)")


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'"


def canned_input(prompt: str) -> int:
    """Stand-in value for ``input()``, picked from hints in the prompt."""
    if "first" in prompt or "1" in prompt:
        return 10
    if "second" in prompt or "2" in prompt:
        return 5
    return 0


def evaluate_expression(expr: str, variables: dict[str, Value]) -> Value:
    """Evaluate a simple Python expression, or return it as text.

    ``input(...)`` calls become canned numbers and ``float(...)`` calls
    are formatted as floats. Known variable names are substituted, and if
    what remains is pure arithmetic it is computed. Anything else comes
    back as the substituted text.
    """
    text = _INPUT_CALL.sub(lambda m: str(canned_input(m.group(1))), expr.strip())

    def to_float(match: re.Match) -> str:
        inner = evaluate_expression(match.group(1), variables)
        try:
            return str(float(inner))
        except ValueError:
            return match.group(0)

    text = _FLOAT_CALL.sub(to_float, text)

    for name, value in variables.items():
        text = re.sub(rf"\b{re.escape(name)}\b", lambda _m, v=value: str(v), text)

    if arithmetic.is_arithmetic(text):
        try:
            return arithmetic.evaluate(text)
        except (arithmetic.ExpressionError, ZeroDivisionError, OverflowError):
            return text
    return text


class PythonSimulator(Interpreter):
    """Line-oriented stand-in for a Python interpreter.

    Understands ``name = expression`` and ``print(...)``. Variables live
    only for one execution.
    """

    name = "python"
    extensions = ("py",)

    def render_print(self, content: str, variables: dict[str, Value]) -> str:
        content = content.strip()
        if content[:2] in ('f"', "f'"):
            return _FSTRING_FIELD.sub(
                lambda m: str(variables[m.group(1)]) if m.group(1) in variables else m.group(0),
                content[2:-1],
            )
        if _is_quoted(content):
            return content[1:-1]
        if content in variables:
            return str(variables[content])
        return str(evaluate_expression(content, variables))

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        lines = [OutputLine.info(f"Executing {filename or 'Python code'}...")]
        variables: dict[str, Value] = {}
        statements = [
            line.strip()
            for line in source.split("\n")
            if line.strip() and not line.strip().startswith("#")
        ]
        printed = False

        for statement in statements:
            assignment = _ASSIGNMENT.match(statement)
            if assignment:
                name, expression = assignment.groups()
                expression = expression.strip()
                if _is_quoted(expression):
                    variables[name] = expression[1:-1]
                else:
                    variables[name] = evaluate_expression(expression, variables)
                continue

            if "print(" in statement:
                match = _PRINT.search(statement)
                if match:
                    lines.append(OutputLine.output(self.render_print(match.group(1), variables)))
                    printed = True

        if not printed and statements:
            lines.append(OutputLine.success(NO_OUTPUT))
        return lines


class JavaSimulator(Interpreter):
    """Echoes the arguments of ``System.out.print``/``println`` calls."""

    name = "java"
    extensions = ("java",)

    def run(self, source: str, filename: Optional[str] = None) -> list[OutputLine]:
        lines = [OutputLine.info(f"Executing {filename or 'Java code'}...")]
        statements = [line.strip() for line in source.split("\n") if line.strip()]
        printed = False

        for statement in statements:
            match = _JAVA_PRINT.search(statement)
            if match:
                content = re.sub(r"^[\"']|[\"']$", "", match.group(1).strip())
                lines.append(OutputLine.output(content))
                printed = True

        if not printed and statements:
            lines.append(OutputLine.success(NO_OUTPUT))
        return lines
