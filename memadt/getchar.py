"""Unbuffered single-character input."""

from __future__ import annotations

import io
import os
import sys
from typing import IO

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]


def _tty_fd(stream: IO[str]) -> int | None:
    """File descriptor of ``stream`` if it is a terminal we can configure."""
    if termios is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return None
    return fd if os.isatty(fd) else None


def get_char(stream: IO[str] | None = None) -> str:
    """Read exactly one character from ``stream`` without skipping whitespace.

    When the stream is a terminal, canonical mode and echo are switched off
    for the duration of the read and restored afterwards, so the character is
    returned as soon as the key is pressed. Raises EOFError at end of input.
    """
    stream = sys.stdin if stream is None else stream
    fd = _tty_fd(stream)
    if fd is None:
        ch = stream.read(1)
    else:
        stored = termios.tcgetattr(fd)
        settings = termios.tcgetattr(fd)
        settings[3] &= ~(termios.ICANON | termios.ECHO)
        settings[6][termios.VTIME] = 0
        settings[6][termios.VMIN] = 1
        termios.tcsetattr(fd, termios.TCSANOW, settings)
        try:
            ch = stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, stored)
    if not ch:
        raise EOFError("end of input")
    return ch