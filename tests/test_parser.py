"""Tests for the command parser.

The parser turns one raw line into a Command: an operation tag, the
name that selected it, and the remaining tokens as positional args.
It must accept any string without raising.
"""

import pytest

from ProcShell.parser import OPERATIONS, Command, Operation, lookup_operation, parse_command


class TestParseCommand:
    """Verify tokenising and classification."""

    def test_name_without_args(self) -> None:
        """A bare command name has no args."""
        command = parse_command("movetodir")
        assert command == Command(Operation.CHANGE_DIRECTORY, "movetodir", [])

    def test_args_keep_their_order(self) -> None:
        """Everything after the name becomes args, in order."""
        command = parse_command("repeat n start /usr/bin/foo")
        assert command.operation is Operation.REPEAT
        assert command.name == "repeat"
        assert command.args == ["n", "start", "/usr/bin/foo"]

    def test_surrounding_whitespace_and_newline_ignored(self) -> None:
        """Leading, trailing and repeated whitespace is dropped."""
        command = parse_command("   repeat n      \n")
        assert command.operation is Operation.REPEAT
        assert command.args == ["n"]

    def test_tabs_separate_tokens(self) -> None:
        command = parse_command("start\t/bin/echo\thi")
        assert command.args == ["/bin/echo", "hi"]

    @pytest.mark.parametrize("line", ["", "   ", "\n", "\t \n  "])
    def test_blank_input_is_empty(self, line: str) -> None:
        """Blank input never fails and yields Empty."""
        command = parse_command(line)
        assert command == Command(Operation.EMPTY, "", [])

    def test_unknown_name(self) -> None:
        command = parse_command("ls -la")
        assert command.operation is Operation.UNKNOWN
        assert command.name == "ls"
        assert command.args == ["-la"]

    def test_quotes_are_not_special(self) -> None:
        """Quoting is not supported, quotes stay inside tokens."""
        command = parse_command('start "a b"')
        assert command.args == ['"a', 'b"']

    def test_each_parse_gets_fresh_args(self) -> None:
        first = parse_command("history")
        first.args.append("-c")
        assert parse_command("history").args == []


class TestLookupOperation:
    """Verify the fixed name table."""

    @pytest.mark.parametrize(
        ("name", "operation"),
        [
            ("movetodir", Operation.CHANGE_DIRECTORY),
            ("whereami", Operation.PRINT_DIRECTORY),
            ("history", Operation.HISTORY),
            ("byebye", Operation.QUIT),
            ("start", Operation.START_FOREGROUND),
            ("background", Operation.START_BACKGROUND),
            ("exterminate", Operation.KILL),
            ("exterminateall", Operation.KILL_ALL),
            ("repeat", Operation.REPEAT),
            ("", Operation.EMPTY),
        ],
    )
    def test_known_names(self, name: str, operation: Operation) -> None:
        assert lookup_operation(name) is operation

    def test_lookup_is_case_sensitive(self) -> None:
        """Upper-case names are not recognised."""
        assert lookup_operation("WhereAmI") is Operation.UNKNOWN
        assert lookup_operation("BYEBYE") is Operation.UNKNOWN

    def test_table_covers_every_operation_but_unknown(self) -> None:
        assert set(OPERATIONS.values()) == set(Operation) - {Operation.UNKNOWN}
