"""Utility functions for CodeVanta."""

from pathlib import Path
from typing import Optional

from .config.defaults import DEFAULT_GLYPH, FILE_GLYPHS, HTML_EXTENSIONS, LANG_MAP


def get_extension(filename: str) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def get_language(path: Path) -> Optional[str]:
    """Get the language tag for a file."""
    return LANG_MAP.get(path.suffix.lower())


def file_glyph(filename: str) -> str:
    """Glyph shown next to a file in listings."""
    return FILE_GLYPHS.get(get_extension(filename), DEFAULT_GLYPH)


def is_html(filename: str) -> bool:
    return get_extension(filename) in HTML_EXTENSIONS
