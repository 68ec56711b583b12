"""Line reading: tokenizing submitted lines and completing command names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Names offered by tab completion
COMPLETION_CANDIDATES = (
    "run",
    "preview",
    "ls",
    "cat",
    "clear",
    "help",
    "js",
    "py",
    "java",
    "node",
    "python",
)


@dataclass
class Command:
    """A parsed command line.

    The name is the first token, taken literally (no case folding).
    There is no quoting: arguments are a plain whitespace split.
    """

    name: str
    args: list[str] = field(default_factory=list)
    raw: str = ""

    @property
    def argument_text(self) -> str:
        """Arguments re-joined with single spaces."""
        return " ".join(self.args)


def parse_line(raw: str) -> Optional[Command]:
    """Tokenize a submitted line, or return None if it is blank."""
    stripped = raw.strip()
    if not stripped:
        return None
    tokens = stripped.split()
    return Command(name=tokens[0], args=tokens[1:], raw=stripped)


def complete_command(prefix: str) -> Optional[str]:
    """Complete `prefix` to the single matching command name.

    Returns the name followed by a space, or None when no name or more
    than one name matches.
    """
    matches = [name for name in COMPLETION_CANDIDATES if name.startswith(prefix)]
    if len(matches) == 1:
        return matches[0] + " "
    return None
