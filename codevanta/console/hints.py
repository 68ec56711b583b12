"""Onboarding hints and the record of which ones the user dismissed."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hint:
    """A suggested command shown above the console input."""

    id: str
    title: str
    description: str
    command: str


DEFAULT_HINTS = (
    Hint("run-help", "Get Help", "See all available commands", "help"),
    Hint("list-files", "List Files", "Show all project files", "ls"),
    Hint("run-file", "Run File", "Execute any file in your project", "run index.html"),
    Hint("live-preview", "Live Preview", "Open HTML files in browser", "preview index.html"),
)


class HintStore:
    """Persists dismissed hint ids as a JSON list.

    A missing, unreadable or malformed file counts as "nothing dismissed".
    """

    FILENAME = "dismissed_hints.json"

    def __init__(self, path: Path):
        self.path = path
        self.dismissed: set[str] = set()

    @classmethod
    def in_directory(cls, directory: Path) -> "HintStore":
        return cls(directory / cls.FILENAME)

    def load(self) -> set[str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            data = []
        except (OSError, ValueError) as e:
            logger.warning("Cannot read dismissed hints from %s: %s", self.path, e)
            data = []
        if not isinstance(data, list):
            logger.warning("Ignoring malformed dismissed hints in %s", self.path)
            data = []
        self.dismissed = {str(item) for item in data}
        return set(self.dismissed)

    def dismiss(self, hint_id: str) -> None:
        self.dismissed.add(hint_id)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(sorted(self.dismissed)), encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot save dismissed hints to %s: %s", self.path, e)

    def visible(self, hints: Iterable[Hint] = DEFAULT_HINTS) -> list[Hint]:
        return [hint for hint in hints if hint.id not in self.dismissed]
