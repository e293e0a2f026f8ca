"""Tests for claude_commit.output module."""

from claude_commit.output import OutputKind, TerminalPrinter, draw_box


class TestDrawBox:
    """Tests for draw_box."""

    def test_frames_text(self):
        """Test a single line is framed with padding."""
        box = draw_box("hi").splitlines()

        assert box[0] == "╭──────╮"
        assert box[2] == "│  hi  │"
        assert box[-1] == "╰──────╯"

    def test_lines_share_width(self):
        """Test every line of a multi-line box has the same width."""
        box = draw_box("API Key: ********\nModel: m").splitlines()

        assert len({len(line) for line in box}) == 1


class TestTerminalPrinter:
    """Tests for TerminalPrinter."""

    def test_text_goes_to_stdout(self, capsys):
        """Test plain text is written unchanged to stdout."""
        TerminalPrinter().print("hello")

        captured = capsys.readouterr()
        assert captured.out == "hello\n"
        assert captured.err == ""

    def test_error_goes_to_stderr_with_marker(self, capsys):
        """Test errors carry a visible marker on stderr."""
        TerminalPrinter().error("boom")

        captured = capsys.readouterr()
        assert "✗ boom" in captured.err
        assert captured.out == ""

    def test_warning_goes_to_stderr(self, capsys):
        """Test warnings are written to stderr."""
        TerminalPrinter().warning("careful")

        assert "careful" in capsys.readouterr().err

    def test_command_is_boxed(self, capsys):
        """Test the commit command is shown inside a box."""
        TerminalPrinter().render(OutputKind.COMMAND, 'git commit -m "feat: x"')

        out = capsys.readouterr().out
        assert 'git commit -m "feat: x"' in out
        assert "╭" in out and "╯" in out
