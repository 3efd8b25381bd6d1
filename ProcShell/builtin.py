import os
import re
import sys
from ProcShell.config import MAX_REPEAT_DEPTH, SHELL_NAME
from ProcShell.errors import ParseError, UsageError
from ProcShell.executor import start_process
from ProcShell.history import clear_line_history
from ProcShell.job_control import kill_all, kill_process, reap
from ProcShell.parser import Command, lookup_operation


def parse_int(command, value, what):
    """Parse an integer argument or raise ParseError naming the command"""
    # ASCII digits only; int() alone would take "1_000" and non-Latin digits
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ParseError(command.name, f"invalid {what} '{value}'")
    return int(value)


def builtin_whereami(session, command, write):
    """Print current directory"""
    write(f"{session.directory}\n")


def builtin_movetodir(session, command, write):
    """
    Change the session directory.
    Absolute targets replace it, relative ones are joined on.
    """
    if not command.args:
        raise UsageError(command.name, "missing target directory")
    session.directory = os.path.join(session.directory, command.args[0])


def builtin_history(session, command, write):
    """In ra hoặc xóa lịch sử lệnh"""
    if not command.args:
        for i, line in enumerate(session.history, 1):
            write(f"{i}\t{line}\n")
    elif command.args[0] == "-c":
        session.history.clear()
        clear_line_history()
        write("history cleared\n")


def builtin_byebye(session, command, write):
    sys.exit(0)


def builtin_start(session, command, write):
    """Run a program and wait for it"""
    if not command.args:
        raise UsageError(command.name, "missing program")
    start_process(session, command.args[0], command.args[1:], write)


def builtin_background(session, command, write):
    """Run a program without waiting, print its pid"""
    if not command.args:
        raise UsageError(command.name, "missing program")
    start_process(session, command.args[0], command.args[1:], write, background=True)


def builtin_exterminate(session, command, write):
    """
    Kill one process by pid.
    The pid stays tracked until exterminateall, which then reports it as gone.
    """
    if not command.args:
        raise UsageError(command.name, "missing process id")
    pid = parse_int(command, command.args[0], "process id")

    error = kill_process(pid)
    reap(session.children, pid)
    if error:
        write(error + "\n")
        return
    write(f"killed {pid}\n")


def builtin_exterminateall(session, command, write):
    kill_all(session, write)


def builtin_unknown(session, command, write):
    write(f"{SHELL_NAME}: {command.name}: not implemented\n")


def builtin_repeat(session, command, write, dispatch, depth):
    """
    repeat <n> <command> [args...]
    Chạy lại lệnh con n lần, mỗi lần qua dispatch như một lệnh mới.
    """
    if len(command.args) < 2:
        raise UsageError(command.name, "usage: repeat <count> <command> [args...]")
    if depth >= MAX_REPEAT_DEPTH:
        raise UsageError(command.name, f"nested more than {MAX_REPEAT_DEPTH} levels deep")

    count = parse_int(command, command.args[0], "repeat count")
    if count < 0:
        raise ParseError(command.name, f"invalid repeat count '{command.args[0]}'")

    name = command.args[1]
    for _ in range(count):
        sub = Command(lookup_operation(name), name, command.args[2:])
        dispatch(sub, name, depth + 1)
