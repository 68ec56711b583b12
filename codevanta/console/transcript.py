"""Plain-text exports of the console transcript."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import FileOperationError
from ..models import OutputLine


def _clock(line: OutputLine) -> str:
    return line.created_at.strftime("%H:%M:%S")


def format_copy(lines: Iterable[OutputLine]) -> str:
    """Transcript for the clipboard: ``[HH:MM:SS] text``."""
    return "\n".join(f"[{_clock(line)}] {line.text}" for line in lines)


def format_download(lines: Iterable[OutputLine]) -> str:
    """Transcript for a file: ``[HH:MM:SS] KIND: text``."""
    return "\n".join(
        f"[{_clock(line)}] {line.kind.value.upper()}: {line.text}" for line in lines
    )


def download_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"codevanta-terminal-{today.isoformat()}.txt"


def write_transcript(lines: Iterable[OutputLine], directory: Path) -> Path:
    """Write the download form of the transcript into `directory`.

    Raises:
        FileOperationError: If the file cannot be written.
    """
    path = directory / download_filename()
    try:
        path.write_text(format_download(lines), encoding="utf-8")
    except OSError as e:
        raise FileOperationError(f"Cannot write {path}: {e}") from e
    return path
