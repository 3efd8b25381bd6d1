import subprocess

import psutil
from ProcShell.config import SHELL_NAME


def kill_process(pid):
    """
    Gửi SIGKILL tới pid, chỉ khi tiến trình còn sống.
    Returns: error message, or None on success
    """
    try:
        if not psutil.pid_exists(pid):
            return f"{SHELL_NAME}: exterminate: ({pid}) no such process"
        p = psutil.Process(pid)
        if p.status() == psutil.STATUS_ZOMBIE:
            return f"{SHELL_NAME}: exterminate: ({pid}) already exited"
        p.kill()
        return None
    except psutil.ZombieProcess:
        return f"{SHELL_NAME}: exterminate: ({pid}) already exited"
    except psutil.NoSuchProcess:
        return f"{SHELL_NAME}: exterminate: ({pid}) no such process"
    except psutil.AccessDenied:
        return f"{SHELL_NAME}: exterminate: ({pid}) permission denied"
    except (OSError, OverflowError, ValueError) as e:
        return f"{SHELL_NAME}: exterminate: ({pid}) {e}"


def reap(children, pid):
    """Dọn zombie của tiến trình nền mà shell đã sinh ra"""
    proc = children.pop(pid, None)
    if proc is not None:
        try:
            proc.wait(timeout=1)
        except (subprocess.TimeoutExpired, ChildProcessError):
            # still running or already reaped
            pass


def reap_finished(children):
    """Collect background children that exited on their own"""
    for pid, proc in list(children.items()):
        if proc.poll() is not None:
            del children[pid]


def kill_all(session, write):
    """Kill every tracked process, then forget them all"""
    for pid in sorted(session.tracked_processes):
        error = kill_process(pid)
        if error:
            write(error + "\n")
        reap(session.children, pid)
    session.tracked_processes.clear()
    session.children.clear()
