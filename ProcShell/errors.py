from ProcShell.config import SHELL_NAME


class ShellError(Exception):
    """Lỗi do người dùng gây ra, in ra rồi tiếp tục vòng lặp"""

    def __init__(self, command, message):
        super().__init__(f"{SHELL_NAME}: {command}: {message}")
        self.command = command


class UsageError(ShellError):
    """Thiếu tham số bắt buộc"""


class ParseError(ShellError):
    """Tham số không phải số nguyên"""
