"""Shared fixtures for CodeVanta tests."""

import pytest

from codevanta.console import Console
from codevanta.models import InMemoryFileProvider, OutputKind


class RecordingOpener:
    """Preview opener that remembers what it was asked to show."""

    def __init__(self, succeed=True):
        self.succeed = succeed
        self.calls = []

    def open_preview(self, html, title):
        self.calls.append((html, title))
        return self.succeed


PROJECT_FILES = {
    "index.html": "<html><body><script>console.log('page loaded')</script></body></html>",
    "app.js": 'console.log("hello from js")',
    "main.py": 'x = 5\nprint(f"val={x}")',
    "readme.md": "# Readme",
    "data.json": '{"name": "demo", "items": [1, 2, 3]}',
    "notes.txt": "line one\nline two",
}


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def files():
    return InMemoryFileProvider.from_mapping(PROJECT_FILES)


@pytest.fixture
def console(files, opener):
    return Console(files, opener=opener)


def kinds(lines):
    return [line.kind for line in lines]


def texts(lines, kind=None):
    return [line.text for line in lines if kind is None or line.kind is kind]


def of_kind(lines, kind: OutputKind):
    return [line for line in lines if line.kind is kind]
