"""Pseudo-terminal helpers: start a child on a new pty, and raw terminal modes."""

from __future__ import annotations

import fcntl
import os
import struct
import termios
from dataclasses import dataclass

_WINSIZE_FORMAT = "HHHH"


@dataclass(frozen=True)
class WindowSize:
    """A terminal window size, in the layout of ``struct winsize``."""

    rows: int = 25
    cols: int = 80
    xpixel: int = 0
    ypixel: int = 0

    def to_bytes(self) -> bytes:
        """Pack the size for the TIOCSWINSZ ioctl."""
        return struct.pack(_WINSIZE_FORMAT, self.rows, self.cols, self.xpixel, self.ypixel)

    @classmethod
    def from_bytes(cls, data: bytes) -> "WindowSize":
        """Unpack a size as returned by the TIOCGWINSZ ioctl."""
        rows, cols, xpixel, ypixel = struct.unpack(
            _WINSIZE_FORMAT, data[: struct.calcsize(_WINSIZE_FORMAT)]
        )
        return cls(rows, cols, xpixel, ypixel)

    @classmethod
    def of(cls, fd: int) -> "WindowSize":
        """Read the window size of the terminal on ``fd``."""
        empty = bytes(struct.calcsize(_WINSIZE_FORMAT))
        return cls.from_bytes(fcntl.ioctl(fd, termios.TIOCGWINSZ, empty))


def _make_controlling_terminal(slave: int) -> None:
    if hasattr(termios, "TIOCSCTTY"):
        fcntl.ioctl(slave, termios.TIOCSCTTY, 0)
    else:
        # Opening the slave after setsid() makes it the controlling terminal.
        os.close(os.open(os.ttyname(slave), os.O_RDWR))


def forkpty(termios_attrs=None, winsize: WindowSize | None = None) -> tuple[int, int]:
    """Fork a child whose standard streams are a new pseudo-terminal.

    ``termios_attrs`` (a list as from ``termios.tcgetattr``) is applied to the
    terminal if given; the window size is ``winsize``, or 25 rows by 80
    columns. Returns ``(pid, master_fd)`` in the parent and ``(0, -1)`` in the
    child. Raises OSError if the terminal cannot be set up.
    """
    master, slave = os.openpty()
    try:
        if termios_attrs is not None:
            termios.tcsetattr(slave, termios.TCSAFLUSH, termios_attrs)
        size = winsize if winsize is not None else WindowSize()
        fcntl.ioctl(slave, termios.TIOCSWINSZ, size.to_bytes())
        pid = os.fork()
    except BaseException:
        os.close(slave)
        os.close(master)
        raise

    if pid == 0:
        os.close(master)
        os.setsid()
        _make_controlling_terminal(slave)
        for fd in (0, 1, 2):
            os.dup2(slave, fd)
        if slave > 2:
            os.close(slave)
        return 0, -1

    os.close(slave)
    return pid, master


def cfmakeraw(attrs):
    """Return a copy of ``attrs`` (as from ``termios.tcgetattr``) set for raw mode."""
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8

    cc = list(cc)
    cc[termios.VMIN] = 1  # a read is satisfied after one byte
    cc[termios.VTIME] = 0  # no timer
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]