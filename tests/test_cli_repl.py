"""Tests for the split-size prompt and REPL dispatch."""

from unittest.mock import Mock, patch

import pytest

from cli.models import ConfigCommand, JoinCommand, SplitCommand
from cli.parser import ParseError
from cli.repl import dispatch_command, execute_line, prompt_split_size, repl_loop


def answers(*lines):
    """read_line stub returning the given answers in order."""
    return Mock(side_effect=list(lines))


class TestPromptSplitSize:
    """Interactive split size prompt."""

    def test_accepts_valid_size(self, capsys):
        read_line = answers("1KB")

        assert prompt_split_size(5000, read_line=read_line) == 1000

        out = capsys.readouterr().out
        assert "File length: 5000 (4.88 KiB)" in out
        read_line.assert_called_once_with("Split size:  ")

    def test_retries_until_valid(self, capsys):
        read_line = answers("", "lots", "99999EiB", "0", "64KiB")

        assert prompt_split_size(10, read_line=read_line) == 65536

        err = capsys.readouterr().err
        assert "No input. Please try again." in err
        assert "Invalid input. Please try again." in err
        assert "Size too big. Please try again." in err
        assert "Split size must be greater than zero. Please try again." in err
        assert read_line.call_count == 5

    def test_empty_answer_uses_default(self):
        read_line = answers("")

        assert prompt_split_size(10, default="4B", read_line=read_line) == 4
        read_line.assert_called_once_with("Split size [4B]:  ")

    def test_typed_answer_overrides_default(self):
        assert prompt_split_size(10, default="4B", read_line=answers("3")) == 3

    def test_eof_propagates(self):
        with pytest.raises(EOFError):
            prompt_split_size(10, read_line=Mock(side_effect=EOFError))


class TestDispatchCommand:
    """Routing parsed commands to handlers."""

    def test_dispatch_split(self):
        with patch("cli.repl.handle_split", return_value="split done") as handler:
            cmd = SplitCommand(path="a.bin", size="1KB")

            assert dispatch_command(cmd) == "split done"
            handler.assert_called_once_with(cmd)

    def test_dispatch_join(self):
        with patch("cli.repl.handle_join", return_value="join done") as handler:
            cmd = JoinCommand(paths=("a-split-1",))

            assert dispatch_command(cmd) == "join done"
            handler.assert_called_once_with(cmd)

    def test_dispatch_config(self):
        with patch("cli.repl.handle_config", return_value="config") as handler:
            assert dispatch_command(ConfigCommand()) == "config"
            handler.assert_called_once()

    def test_dispatch_unknown(self):
        assert dispatch_command(object()).startswith("Unknown command type")


class TestExecuteLine:
    """Running one REPL line."""

    def test_runs_parsed_command(self):
        with patch("cli.repl.handle_config", return_value="config shown"):
            assert execute_line("config") == "config shown"

    def test_eof_in_nested_prompt_cancels_command(self):
        with patch("cli.repl.handle_split", side_effect=EOFError):
            assert execute_line("split a.bin").strip() == "Cancelled."

    def test_parse_errors_propagate(self):
        with pytest.raises(ParseError):
            execute_line("merge a b")


class TestReplLoop:
    """REPL session handling."""

    def run_loop(self, *lines):
        session = Mock()
        session.prompt.side_effect = list(lines)
        with patch("cli.repl.PromptSession", return_value=session), \
                patch("cli.repl.clear_screen"):
            repl_loop()
        return session

    def test_cancelled_split_keeps_repl_running(self, capsys):
        with patch("cli.repl.handle_split", side_effect=EOFError):
            session = self.run_loop("split a.bin", "exit")

        out = capsys.readouterr().out
        assert "Cancelled." in out
        assert out.count("Goodbye!") == 1
        assert session.prompt.call_count == 2

    def test_eof_at_main_prompt_exits(self, capsys):
        self.run_loop(EOFError)

        assert "Goodbye!" in capsys.readouterr().out

    def test_command_errors_are_printed(self, capsys):
        self.run_loop("merge a b", "exit")

        assert "Error: Unknown command: merge" in capsys.readouterr().out
