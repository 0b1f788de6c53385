# logger_utils.py - console/file logging and timing metrics for the word index tools

import logging
import os
import sys
import time
from datetime import datetime

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


def _append(path: str, line: str):
    if not path:
        return
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """
    Lightweight logger for user-facing messages and timing metrics.
    Lines go to `stream`; they are also appended to `path` when one is given.
    """
    COLORS = {
        "DEBUG": Fore.LIGHTBLACK_EX,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
    }

    def __init__(self, path: str = None, use_color: bool = True, stream=None):
        self.path = path
        self.use_color = use_color
        self.stream = stream or sys.stdout

    def write(self, level: str, msg: str):
        """
        Echo a message to the stream (and the log file, if any).
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{Style.RESET_ALL}", file=self.stream)
        else:
            print(line, file=self.stream)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts).
        Example: [12:45:02] ingest sample.txt done: 0.012s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        print(line, file=self.stream)
        _append(self.path, line)

    def time_block(self, label):
        """
        Measure how long a block takes and record it as a metric:
            with log.time_block("ingest"):
                ingest_file(wl, path)
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        if exc_type is None:
            self.log.metric(f"{self.label} done", self.elapsed, "s")


def configure_logging(level="WARNING", path: str = None):
    """
    Wire the stdlib loggers used by the core modules.
    Console gets `level`. A file handler at DEBUG is attached only when
    `path` is given, since it records every new word and rotation.
    """
    root = logging.getLogger("word_index")
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        h.close()
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level if isinstance(level, int) else level.upper())
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)

    if path:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(fh)
    return root
