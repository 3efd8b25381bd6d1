import os
import sys
from dataclasses import dataclass, field


@dataclass
class Session:
    """
    Mutable state of one shell session.
    Every builtin receives it explicitly instead of touching globals.
    """
    directory: str = ""
    history: list = field(default_factory=list)
    tracked_processes: set = field(default_factory=set)
    # pid -> Popen for background children, dùng để thu hồi zombie sau khi kill
    children: dict = field(default_factory=dict)

    @classmethod
    def start(cls):
        """Tạo session mới từ thư mục làm việc hiện tại"""
        try:
            directory = os.getcwd()
        except OSError as e:
            print(f"Warning: Could not read working directory: {e}", file=sys.stderr)
            directory = ""
        return cls(directory=directory)

    def record(self, raw_line):
        """Append the trimmed line to history unless it is blank"""
        line = raw_line.strip()
        if line:
            self.history.append(line)

    def track(self, proc):
        self.tracked_processes.add(proc.pid)
