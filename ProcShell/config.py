import os
import sys

SHELL_NAME = "procshell"


def int_env(name, default):
    """Integer from the environment, default (with a warning) if it is not one"""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer, using {default}", file=sys.stderr)
        return default


# Prompt printed before every read
PROMPT = os.getenv("PROCSHELL_PROMPT", "# ")

# How deep "repeat" may nest inside another "repeat"
MAX_REPEAT_DEPTH = int_env("PROCSHELL_MAX_REPEAT_DEPTH", 16)
