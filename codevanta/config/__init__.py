"""Configuration module for CodeVanta."""

from .defaults import FILE_GLYPHS, LANG_MAP
from .settings import Config

__all__ = ["FILE_GLYPHS", "LANG_MAP", "Config"]
