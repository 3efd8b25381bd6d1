import os
import subprocess
from ProcShell.config import SHELL_NAME


def run_external(program, args, write, cwd=None, background=False):
    """
    Chạy chương trình ngoài với subprocess.
    Returns: Popen object or None
    """
    argv = [program] + list(args)
    try:
        if background and os.name == "posix":
            # preexec_fn=os.setpgrp tách process group để Ctrl+C không giết tiến trình nền
            return subprocess.Popen(argv, cwd=cwd, preexec_fn=os.setpgrp)
        return subprocess.Popen(argv, cwd=cwd)
    except PermissionError:
        write(f"{SHELL_NAME}: permission denied: {program}\n")
        return None
    except FileNotFoundError:
        write(f"{SHELL_NAME}: command not found: {program}\n")
        return None
    except OSError as e:
        write(f"{SHELL_NAME}: failed to execute '{program}': {e}\n")
        return None


def wait_foreground(proc, write):
    """
    Block until the child exits.
    Ctrl+C also reaches the child, so keep waiting instead of leaving it behind.
    Returns: exit code
    """
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            write("\n")


def working_dir(directory):
    """Session directory as a Popen cwd, or None to inherit ours"""
    if directory and os.path.isdir(directory):
        return directory
    return None


def start_process(session, program, args, write, background=False):
    """
    Spawn a program and track its pid.
    Foreground children are tracked after they exit, background ones right away.
    """
    proc = run_external(program, args, write,
                        cwd=working_dir(session.directory),
                        background=background)
    if not proc:
        return None

    if background:
        session.track(proc)
        session.children[proc.pid] = proc
        write(f"{proc.pid}\n")
        return proc

    exit_code = wait_foreground(proc, write)
    session.track(proc)
    if exit_code != 0:
        write(f"{SHELL_NAME}: process {proc.pid} exited with code {exit_code}\n")
    return proc
