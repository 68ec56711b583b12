"""Tests for onboarding hints."""

import json

from codevanta.console import DEFAULT_HINTS, HintStore


class TestHintStore:
    """Tests for HintStore."""

    def test_missing_file_means_nothing_dismissed(self, tmp_path):
        store = HintStore.in_directory(tmp_path)

        assert store.load() == set()
        assert store.visible() == list(DEFAULT_HINTS)

    def test_dismiss_persists(self, tmp_path):
        store = HintStore.in_directory(tmp_path / "nested")
        store.dismiss("list-files")
        store.dismiss("run-help")

        saved = json.loads((tmp_path / "nested" / "dismissed_hints.json").read_text())
        assert saved == ["list-files", "run-help"]

        reloaded = HintStore.in_directory(tmp_path / "nested")
        assert reloaded.load() == {"list-files", "run-help"}
        assert [hint.id for hint in reloaded.visible()] == ["run-file", "live-preview"]

    def test_malformed_file_is_ignored(self, tmp_path):
        (tmp_path / HintStore.FILENAME).write_text("{not json")

        assert HintStore.in_directory(tmp_path).load() == set()

    def test_non_list_is_ignored(self, tmp_path):
        (tmp_path / HintStore.FILENAME).write_text('{"run-help": true}')

        assert HintStore.in_directory(tmp_path).load() == set()

    def test_default_hint_commands(self):
        commands = {hint.id: hint.command for hint in DEFAULT_HINTS}

        assert commands == {
            "run-help": "help",
            "list-files": "ls",
            "run-file": "run index.html",
            "live-preview": "preview index.html",
        }
