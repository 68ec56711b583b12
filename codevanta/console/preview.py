"""Live preview of HTML documents in the user's browser."""

from __future__ import annotations

import logging
import re
import tempfile
import webbrowser
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class PreviewOpener(Protocol):
    """Opens an HTML document somewhere the user can see it."""

    def open_preview(self, html: str, title: str) -> bool:
        """Return False when the document could not be shown."""
        ...


class BrowserPreviewOpener:
    """Writes the document to a temporary file and opens it in a browser.

    Args:
        directory: Where preview files are written. Defaults to a fresh
            temporary directory created on first use.
    """

    def __init__(self, directory: Optional[Path] = None):
        self._directory = directory

    @property
    def directory(self) -> Path:
        if self._directory is None:
            self._directory = Path(tempfile.mkdtemp(prefix="codevanta-preview-"))
        return self._directory

    def open_preview(self, html: str, title: str) -> bool:
        safe_title = re.sub(r"[^\w.-]+", "-", title).strip("-") or "preview"
        path = self.directory / f"{safe_title}.html"
        try:
            path.write_text(html, encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot write preview file %s: %s", path, e)
            return False
        try:
            return webbrowser.open(path.as_uri(), new=2)
        except webbrowser.Error as e:
            logger.warning("Cannot open browser: %s", e)
            return False
