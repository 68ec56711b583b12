"""Project file tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from textual.widgets import DirectoryTree


class FileTree(DirectoryTree):
    """Directory tree that hides dotfiles and ignored directories."""

    def __init__(self, path: Path, ignored_dirs: Iterable[str] = (), **kwargs):
        self.ignored_dirs = frozenset(ignored_dirs)
        super().__init__(path, **kwargs)

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [
            path
            for path in paths
            if not path.name.startswith(".") and path.name not in self.ignored_dirs
        ]
