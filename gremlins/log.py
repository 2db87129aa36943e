"""Process-wide output for progress messages and errors.

The logger is a singleton: until :func:`init` is called with both streams,
every logging function does nothing.
"""

from __future__ import annotations

import threading
from typing import Any, TextIO

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _red(text: str, stream: TextIO) -> str:
    if _is_terminal(stream):
        return f"{_RED}{text}{_RESET}"
    return text


class _Log:
    __slots__ = ("out", "e_out")

    def __init__(self, out: TextIO, e_out: TextIO) -> None:
        self.out = out
        self.e_out = e_out

    def write(self, text: str) -> None:
        if _silent:
            return
        self.out.write(text)

    def write_error(self, text: str) -> None:
        self.e_out.write(text)


_lock = threading.Lock()
_instance: _Log | None = None
_silent = False


def init(out: TextIO | None, e_out: TextIO | None) -> None:
    """Set up the logger with a stream for information and one for errors.

    Nothing happens if either stream is missing or the logger is
    already set up.
    """
    global _instance
    if out is None or e_out is None:
        return
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = _Log(out, e_out)


def reset() -> None:
    """Drop the current logger; later calls write nothing until init."""
    global _instance
    with _lock:
        _instance = None


def set_silent(silent: bool) -> None:
    """Suppress (or restore) informational output; errors are always written."""
    global _silent
    _silent = bool(silent)


def infof(fmt: str, *args: Any) -> None:
    """Write an informational message built with %-formatting."""
    if _instance is None:
        return
    _instance.write(fmt % args)


def infoln(message: Any) -> None:
    """Write an informational message followed by a newline."""
    if _instance is None:
        return
    _instance.write(f"{message}\n")


def errorf(fmt: str, *args: Any) -> None:
    """Write an error message built with %-formatting."""
    if _instance is None:
        return
    msg = fmt % args
    _instance.write_error(f"{_red('ERROR', _instance.e_out)}: {msg}")


def errorln(message: Any) -> None:
    """Write an error message followed by a newline."""
    if _instance is None:
        return
    _instance.write_error(f"{_red('ERROR', _instance.e_out)}: {message}\n")