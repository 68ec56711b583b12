"""State models for the CodeVanta console."""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional


class OutputKind(Enum):
    """Semantic kind of a transcript line."""

    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"
    WELCOME = "welcome"


def make_line_id() -> str:
    """Time-based id with a random suffix."""
    return f"{time.time_ns():x}-{secrets.token_hex(3)}"


@dataclass
class OutputLine:
    """One rendered entry in the console transcript."""

    kind: OutputKind
    text: str
    id: str = field(default_factory=make_line_id)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def output(cls, text: str) -> "OutputLine":
        return cls(OutputKind.OUTPUT, text)

    @classmethod
    def error(cls, text: str) -> "OutputLine":
        return cls(OutputKind.ERROR, text)

    @classmethod
    def info(cls, text: str) -> "OutputLine":
        return cls(OutputKind.INFO, text)

    @classmethod
    def success(cls, text: str) -> "OutputLine":
        return cls(OutputKind.SUCCESS, text)

    @classmethod
    def blank(cls) -> "OutputLine":
        return cls(OutputKind.OUTPUT, "")


@dataclass
class OutputLog:
    """Append-only transcript.

    Lines are only ever appended. The one bulk removal is
    `clear_and_seed`, which bumps `generation` so renderers know
    to redraw from scratch.
    """

    lines: list[OutputLine] = field(default_factory=list)
    generation: int = 0

    def __len__(self) -> int:
        return len(self.lines)

    def append(self, line: OutputLine) -> OutputLine:
        self.lines.append(line)
        return line

    def extend(self, lines: Iterable[OutputLine]) -> None:
        self.lines.extend(lines)

    def clear_and_seed(self, seed: Iterable[OutputLine]) -> None:
        """Discard everything and start over with `seed`."""
        self.lines = list(seed)
        self.generation += 1

    def since(self, index: int) -> list[OutputLine]:
        """Lines appended after the first `index` lines."""
        return self.lines[index:]


@dataclass
class CommandHistory:
    """Submitted lines plus an up/down recall cursor.

    `cursor` is None while not browsing. Recall only moves the cursor;
    `entries` changes only on submission.
    """

    entries: list[str] = field(default_factory=list)
    cursor: Optional[int] = None

    @property
    def browsing(self) -> bool:
        return self.cursor is not None

    def record_submission(self, line: str) -> None:
        self.entries.append(line)
        self.cursor = None

    def reset_cursor(self) -> None:
        """Stop browsing, e.g. when the input is edited mid-recall."""
        self.cursor = None

    def recall_previous(self) -> Optional[str]:
        """Step back one entry, clamped at the oldest.

        Returns None when there is no history.
        """
        if not self.entries:
            return None
        if self.cursor is None:
            self.cursor = len(self.entries) - 1
        else:
            self.cursor = max(0, self.cursor - 1)
        return self.entries[self.cursor]

    def recall_next(self) -> Optional[str]:
        """Step forward one entry.

        Returns None (no-op) when not browsing, and an empty string when
        stepping past the newest entry, which also ends browsing.
        """
        if self.cursor is None:
            return None
        self.cursor += 1
        if self.cursor > len(self.entries) - 1:
            self.cursor = None
            return ""
        return self.entries[self.cursor]
