"""Themes for CodeVanta."""

from .light import KIND_MARKERS, KIND_STYLES

__all__ = ["KIND_MARKERS", "KIND_STYLES"]
