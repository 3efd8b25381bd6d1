from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    CHANGE_DIRECTORY = "ChangeDirectory"
    PRINT_DIRECTORY = "PrintDirectory"
    HISTORY = "History"
    QUIT = "Quit"
    START_FOREGROUND = "StartForeground"
    START_BACKGROUND = "StartBackground"
    KILL = "Kill"
    KILL_ALL = "KillAll"
    REPEAT = "Repeat"
    UNKNOWN = "Unknown"
    EMPTY = "Empty"


# Command name -> operation (case-sensitive)
OPERATIONS = {
    "": Operation.EMPTY,
    "movetodir": Operation.CHANGE_DIRECTORY,
    "whereami": Operation.PRINT_DIRECTORY,
    "history": Operation.HISTORY,
    "byebye": Operation.QUIT,
    "start": Operation.START_FOREGROUND,
    "background": Operation.START_BACKGROUND,
    "exterminate": Operation.KILL,
    "exterminateall": Operation.KILL_ALL,
    "repeat": Operation.REPEAT,
}


@dataclass
class Command:
    operation: Operation
    name: str
    args: list = field(default_factory=list)


def lookup_operation(name):
    """Map a command name to its operation, Unknown if there is none"""
    return OPERATIONS.get(name, Operation.UNKNOWN)


def parse_command(line):
    """
    Parse one input line into a Command.
    Never raises: blank input gives an Empty command.
    """
    tokens = line.split()
    if not tokens:
        return Command(Operation.EMPTY, "", [])

    name, args = tokens[0], tokens[1:]
    return Command(lookup_operation(name), name, args)
