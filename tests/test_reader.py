"""Tests for line parsing and command completion."""

from codevanta.console.reader import Command, complete_command, parse_line


class TestParseLine:
    """Tests for parse_line."""

    def test_blank_lines(self):
        """Empty and whitespace-only lines parse to None."""
        assert parse_line("") is None
        assert parse_line("   \t ") is None

    def test_splits_on_whitespace(self):
        command = parse_line("  run   index.html  extra ")

        assert command == Command("run", ["index.html", "extra"], "run   index.html  extra")

    def test_name_is_not_case_folded(self):
        assert parse_line("LS").name == "LS"

    def test_quotes_are_not_special(self):
        command = parse_line('echo "a b"')

        assert command.args == ['"a', 'b"']

    def test_argument_text_collapses_spaces(self):
        assert parse_line("echo  a    b").argument_text == "a b"


class TestCompleteCommand:
    """Tests for complete_command."""

    def test_unique_prefix(self):
        assert complete_command("pre") == "preview "
        assert complete_command("ca") == "cat "

    def test_ambiguous_prefix(self):
        """A prefix matching several names is left alone."""
        assert complete_command("p") is None
        assert complete_command("j") is None

    def test_no_match(self):
        assert complete_command("zzz") is None

    def test_exact_name_with_longer_sibling(self):
        """'py' also prefixes 'python', so it is ambiguous."""
        assert complete_command("py") is None
        assert complete_command("pyt") == "python "
