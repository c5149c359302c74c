"""Thread-safe logger that appends timestamped lines to a file."""

from __future__ import annotations

import os
import sys
import threading
import time
from typing import IO

_MAX_MESSAGE_BYTES = 255


def _timestamp() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class FileLogger:
    """Appends "<date time> [TAG] - message" lines to a file and optionally the console."""

    def __init__(
        self,
        filename: str | os.PathLike[str],
        log_to_console: bool = False,
        console: IO[str] | None = None,
    ) -> None:
        self.log_to_console = log_to_console
        self._console = console
        self._lock = threading.Lock()
        self._file: IO[str] | None
        try:
            self._file = open(filename, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print("Unable to open log file!", file=sys.stderr, flush=True)

    def _write(self, tag: str, fmt: str, args: tuple) -> None:
        message = fmt % args if args else fmt
        message = message.encode("utf-8")[:_MAX_MESSAGE_BYTES].decode("utf-8", "ignore")
        with self._lock:
            line = f"{_timestamp()} [{tag}] - {message}"
            if self._file is not None:
                self._file.write(line + "\n")
                self._file.flush()
            if self.log_to_console:
                print(line, file=self._console or sys.stdout, flush=True)

    def info(self, fmt: str, *args) -> None:
        self._write("INF", fmt, args)

    def debug(self, fmt: str, *args) -> None:
        self._write("DBG", fmt, args)

    def error(self, fmt: str, *args) -> None:
        self._write("ERR", fmt, args)

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()