"""Project file models and providers.

The console reads project files through a `FileProvider` and never
writes them. Two providers ship with the package:

- `InMemoryFileProvider` holds a fixed list of `VirtualFile` objects.
- `DirectoryFileProvider` walks a project directory on every call.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Protocol

from ..exceptions import FileOperationError
from ..utils import get_extension, get_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VirtualFile:
    """A named, in-memory project file."""

    name: str
    path: str
    content: str
    language: Optional[str] = None

    @property
    def extension(self) -> str:
        return get_extension(self.name)


class FileProvider(Protocol):
    """Read-only view of the project's files."""

    def list_files(self) -> list[VirtualFile]: ...

    def find(self, name: str) -> Optional[VirtualFile]: ...


class InMemoryFileProvider:
    """File provider backed by a plain list."""

    def __init__(self, files: Iterable[VirtualFile] = ()):
        self._files = list(files)

    @classmethod
    def from_mapping(cls, contents: dict[str, str]) -> "InMemoryFileProvider":
        """Build a provider from ``{name: content}``."""
        return cls(
            VirtualFile(
                name=name,
                path=f"/{name}",
                content=content,
                language=get_language(Path(name)),
            )
            for name, content in contents.items()
        )

    def list_files(self) -> list[VirtualFile]:
        return list(self._files)

    def find(self, name: str) -> Optional[VirtualFile]:
        for f in self._files:
            if f.name == name:
                return f
        return None


class DirectoryFileProvider:
    """File provider that reads a project directory from disk.

    Hidden entries and ignored directories are skipped, as are files that
    are too large or not valid UTF-8. The directory is re-read on every
    call so edits made elsewhere show up immediately.

    Args:
        root: Project root directory.
        ignored_dirs: Directory names that are never descended into.
        max_file_size: Files larger than this many bytes are skipped.
    """

    def __init__(
        self,
        root: Path,
        ignored_dirs: Iterable[str] = (),
        max_file_size: int = 1024 * 1024,
    ):
        if not root.is_dir():
            raise FileOperationError(f"Not a directory: {root}")
        self.root = root
        self.ignored_dirs = frozenset(ignored_dirs)
        self.max_file_size = max_file_size

    def _iter_paths(self) -> Iterable[Path]:
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = sorted(
                d for d in dirnames if not d.startswith(".") and d not in self.ignored_dirs
            )
            for filename in sorted(filenames):
                if not filename.startswith("."):
                    yield Path(dirpath) / filename

    def _load(self, path: Path) -> Optional[VirtualFile]:
        try:
            if path.stat().st_size > self.max_file_size:
                logger.debug("Skipping large file %s", path)
                return None
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.debug("Skipping binary file %s", path)
            return None
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
            return None
        return VirtualFile(
            name=path.name,
            path=path.relative_to(self.root).as_posix(),
            content=content,
            language=get_language(path),
        )

    def list_files(self) -> list[VirtualFile]:
        files = []
        for path in self._iter_paths():
            loaded = self._load(path)
            if loaded is not None:
                files.append(loaded)
        return files

    def find(self, name: str) -> Optional[VirtualFile]:
        for path in self._iter_paths():
            if path.name == name:
                loaded = self._load(path)
                if loaded is not None:
                    return loaded
        return None
