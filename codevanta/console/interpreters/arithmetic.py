"""A small arithmetic evaluator.

Grammar::

    expr   := term (("+" | "-") term)*
    term   := unary (("*" | "/") unary)*
    unary  := ("+" | "-") unary | atom
    atom   := NUMBER | "(" expr ")"

Numbers follow Python semantics: integer literals stay `int` under
``+ - *`` and ``/`` always produces a `float`. Nothing else is accepted,
so arbitrary text can never be executed.
"""

from __future__ import annotations

import re
from typing import Union

Number = Union[int, float]

ALLOWED = re.compile(r"^[\d\s+\-*/().]+$")
_TOKEN = re.compile(r"\s*(?:(\d+\.\d*|\.\d+|\d+)|(.))")


class ExpressionError(ValueError):
    """The text is not a well-formed arithmetic expression."""


def is_arithmetic(text: str) -> bool:
    """True if `text` only contains digits, whitespace and ``+-*/().``."""
    return bool(ALLOWED.match(text))


def tokenize(text: str) -> list[Union[Number, str]]:
    tokens: list[Union[Number, str]] = []
    for number, op in _TOKEN.findall(text):
        if number:
            tokens.append(float(number) if "." in number else int(number))
        elif op.strip():
            if op not in "+-*/()":
                raise ExpressionError(f"unexpected character {op!r}")
            tokens.append(op)
    return tokens


class _Parser:
    def __init__(self, tokens: list[Union[Number, str]]):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self):
        token = self.peek()
        self.pos += 1
        return token

    def parse(self) -> Number:
        if not self.tokens:
            raise ExpressionError("empty expression")
        value = self.expr()
        if self.peek() is not None:
            raise ExpressionError(f"unexpected token {self.peek()!r}")
        return value

    def expr(self) -> Number:
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value = value + self.term()
            else:
                value = value - self.term()
        return value

    def term(self) -> Number:
        value = self.unary()
        while self.peek() in ("*", "/"):
            if self.take() == "*":
                value = value * self.unary()
            else:
                # ZeroDivisionError propagates to the caller
                value = value / self.unary()
        return value

    def unary(self) -> Number:
        if self.peek() == "-":
            self.take()
            return -self.unary()
        if self.peek() == "+":
            self.take()
            return self.unary()
        return self.atom()

    def atom(self) -> Number:
        token = self.take()
        if token == "(":
            value = self.expr()
            if self.take() != ")":
                raise ExpressionError("missing closing parenthesis")
            return value
        if isinstance(token, (int, float)):
            return token
        raise ExpressionError(f"unexpected token {token!r}")


def evaluate(text: str) -> Number:
    """Evaluate an arithmetic expression.

    Raises:
        ExpressionError: If `text` is not a well-formed expression.
        ZeroDivisionError: On division by zero.
    """
    return _Parser(tokenize(text)).parse()
