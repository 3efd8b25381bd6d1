import sys
from ProcShell import builtin
from ProcShell.config import PROMPT, SHELL_NAME
from ProcShell.errors import ShellError
from ProcShell.history import init_readline
from ProcShell.job_control import reap_finished
from ProcShell.parser import Operation, parse_command
from ProcShell.session import Session


def write_stdout(text):
    sys.stdout.write(text)
    sys.stdout.flush()


class Shell:
    """
    Command dispatcher bound to one Session.
    All output goes through `write`, so tests can capture it.
    """

    def __init__(self, write=None, session=None):
        self.write = write or write_stdout
        self.session = session if session is not None else Session.start()
        self.builtins = {
            Operation.CHANGE_DIRECTORY: builtin.builtin_movetodir,
            Operation.PRINT_DIRECTORY: builtin.builtin_whereami,
            Operation.HISTORY: builtin.builtin_history,
            Operation.QUIT: builtin.builtin_byebye,
            Operation.START_FOREGROUND: builtin.builtin_start,
            Operation.START_BACKGROUND: builtin.builtin_background,
            Operation.KILL: builtin.builtin_exterminate,
            Operation.KILL_ALL: builtin.builtin_exterminateall,
            Operation.UNKNOWN: builtin.builtin_unknown,
        }

    def execute(self, line):
        """Parse and run one input line"""
        reap_finished(self.session.children)
        self.dispatch(parse_command(line), line)

    def dispatch(self, command, raw_line, depth=0):
        """
        Run a parsed command against the session.
        The line is recorded in history before it runs, even if it then fails.
        Only byebye (SystemExit) may escape.
        """
        self.session.record(raw_line)

        if command.operation is Operation.EMPTY:
            return

        try:
            if command.operation is Operation.REPEAT:
                builtin.builtin_repeat(self.session, command, self.write, self.dispatch, depth)
            else:
                self.builtins[command.operation](self.session, command, self.write)
        except ShellError as e:
            self.write(f"{e}\n")


def read_line(prompt=PROMPT):
    return input(prompt)


def main_loop(shell=None, read_line=read_line):
    """Main shell loop. Returns when input ends."""
    shell = shell or Shell()

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            shell.write("\n")
            break
        except KeyboardInterrupt:
            shell.write("\n")
            continue
        except OSError as e:
            shell.write(f"{SHELL_NAME}: read error: {e}\n")
            continue

        shell.execute(line)


def main():
    init_readline()
    main_loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
