"""Tests for CodeVanta models."""

from pathlib import Path

import pytest

from codevanta.exceptions import FileOperationError
from codevanta.models import (
    CommandHistory,
    DirectoryFileProvider,
    InMemoryFileProvider,
    OutputKind,
    OutputLine,
    OutputLog,
    VirtualFile,
)


class TestOutputLine:
    """Tests for OutputLine."""

    def test_constructors_set_kind(self):
        """Each helper should produce its own kind."""
        assert OutputLine.output("a").kind is OutputKind.OUTPUT
        assert OutputLine.error("a").kind is OutputKind.ERROR
        assert OutputLine.info("a").kind is OutputKind.INFO
        assert OutputLine.success("a").kind is OutputKind.SUCCESS

    def test_blank_is_empty_output(self):
        line = OutputLine.blank()

        assert line.kind is OutputKind.OUTPUT
        assert line.text == ""

    def test_ids_are_unique(self):
        """Lines created back to back should get distinct ids."""
        ids = {OutputLine.output("x").id for _ in range(200)}

        assert len(ids) == 200


class TestOutputLog:
    """Tests for OutputLog."""

    def test_append_and_since(self):
        log = OutputLog()
        log.append(OutputLine.output("a"))
        log.extend([OutputLine.output("b"), OutputLine.output("c")])

        assert len(log) == 3
        assert [line.text for line in log.since(1)] == ["b", "c"]

    def test_clear_and_seed_bumps_generation(self):
        """A clear should replace every line and bump the generation."""
        log = OutputLog()
        log.extend([OutputLine.output("old")] * 3)

        log.clear_and_seed([OutputLine.success("fresh")])

        assert [line.text for line in log.lines] == ["fresh"]
        assert log.generation == 1


class TestCommandHistory:
    """Tests for CommandHistory recall."""

    def test_recall_previous_on_empty_history(self):
        """Up with no history is a no-op."""
        history = CommandHistory()

        assert history.recall_previous() is None
        assert history.cursor is None

    def test_recall_previous_starts_at_newest(self):
        history = CommandHistory(["a", "b", "c"])

        assert history.recall_previous() == "c"
        assert history.cursor == 2

    def test_recall_previous_clamps_at_oldest(self):
        """Repeated up should stop at the first entry."""
        history = CommandHistory(["a", "b"])

        results = [history.recall_previous() for _ in range(5)]

        assert results == ["b", "a", "a", "a", "a"]
        assert history.cursor == 0

    def test_recall_next_when_not_browsing(self):
        """Down while not browsing is a no-op."""
        history = CommandHistory(["a"])

        assert history.recall_next() is None
        assert history.cursor is None

    def test_recall_next_past_newest_clears(self):
        """Stepping past the newest entry clears the input and ends browsing."""
        history = CommandHistory(["a", "b"])
        history.recall_previous()
        history.recall_previous()

        assert history.recall_next() == "b"
        assert history.recall_next() == ""
        assert history.cursor is None

    def test_recall_never_changes_entries(self):
        history = CommandHistory(["a", "b"])
        for _ in range(3):
            history.recall_previous()
        for _ in range(3):
            history.recall_next()

        assert history.entries == ["a", "b"]

    def test_submission_resets_cursor(self):
        history = CommandHistory(["a"])
        history.recall_previous()

        history.record_submission("b")

        assert history.entries == ["a", "b"]
        assert history.cursor is None

    def test_duplicates_are_kept(self):
        history = CommandHistory()
        history.record_submission("ls")
        history.record_submission("ls")

        assert history.entries == ["ls", "ls"]


class TestVirtualFile:
    """Tests for VirtualFile."""

    def test_extension(self):
        assert VirtualFile("App.JSX", "/App.JSX", "").extension == "jsx"

    def test_is_frozen(self):
        f = VirtualFile("a.txt", "/a.txt", "x")

        with pytest.raises(AttributeError):
            f.content = "y"


class TestInMemoryFileProvider:
    """Tests for InMemoryFileProvider."""

    def test_from_mapping(self):
        provider = InMemoryFileProvider.from_mapping({"main.py": "print(1)"})

        (f,) = provider.list_files()
        assert f.name == "main.py"
        assert f.path == "/main.py"
        assert f.language == "python"

    def test_find_is_exact(self):
        """Lookup should match the exact name only."""
        provider = InMemoryFileProvider.from_mapping({"index.html": ""})

        assert provider.find("index.html") is not None
        assert provider.find("INDEX.HTML") is None
        assert provider.find("index") is None

    def test_list_preserves_order(self):
        provider = InMemoryFileProvider.from_mapping({"b.js": "", "a.js": ""})

        assert [f.name for f in provider.list_files()] == ["b.js", "a.js"]


class TestDirectoryFileProvider:
    """Tests for DirectoryFileProvider."""

    @pytest.fixture
    def project(self, tmp_path: Path) -> Path:
        (tmp_path / "index.html").write_text("<html></html>")
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "app.js").write_text("1 + 1")
        (tmp_path / ".env").write_text("SECRET=1")
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "dep.js").write_text("")
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "HEAD").write_text("ref")
        return tmp_path

    def test_rejects_missing_root(self, tmp_path):
        with pytest.raises(FileOperationError):
            DirectoryFileProvider(tmp_path / "missing")

    def test_lists_nested_files(self, project):
        provider = DirectoryFileProvider(project, ignored_dirs=["node_modules"])

        files = {f.name: f for f in provider.list_files()}

        assert set(files) == {"index.html", "app.js"}
        assert files["app.js"].path == "src/app.js"
        assert files["app.js"].content == "1 + 1"

    def test_find_by_basename(self, project):
        provider = DirectoryFileProvider(project)

        found = provider.find("app.js")

        assert found is not None
        assert found.language == "javascript"
        assert provider.find("missing.js") is None

    def test_skips_binary_and_large_files(self, project):
        (project / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
        (project / "big.txt").write_text("x" * 100)
        provider = DirectoryFileProvider(project, ignored_dirs=["node_modules"], max_file_size=50)

        names = {f.name for f in provider.list_files()}

        assert "logo.png" not in names
        assert "big.txt" not in names

    def test_sees_new_files(self, project):
        """Each call should re-read the directory."""
        provider = DirectoryFileProvider(project)
        before = len(provider.list_files())

        (project / "new.md").write_text("# new")

        assert len(provider.list_files()) == before + 1
