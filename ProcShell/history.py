import sys

try:
    import readline
except ImportError:  # fallback cho Windows
    import pyreadline3 as readline


def init_readline():
    """Cấu hình readline để input() có phím mũi tên giống terminal Linux"""
    try:
        if not sys.stdin.isatty():
            print("Warning: Not running in a real terminal. Line editing is disabled.", file=sys.stderr)
            return

        # Phím mũi tên lên/xuống
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right để nhảy giữa các từ
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def clear_line_history():
    """Forget arrow-key history too, so it matches a cleared session history"""
    try:
        readline.clear_history()
    except AttributeError:
        # libedit builds on some platforms lack clear_history
        pass
