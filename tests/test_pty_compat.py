import errno
import fcntl
import os
import signal
import sys
import termios

import pytest

from ttykit.pty_compat import WindowSize, cfmakeraw, forkpty


_REPORT_SIZE = (
    "import os\n"
    "size = os.get_terminal_size(0)\n"
    "print(f'{size.lines}x{size.columns}')\n"
)

_REPORT_LEADER = (
    "import os\n"
    "print('leader' if os.getsid(0) == os.getpid() else 'follower')\n"
)

_REPORT_ECHO = (
    "import termios\n"
    "lflag = termios.tcgetattr(0)[3]\n"
    "print('echo-off' if not lflag & termios.ECHO else 'echo-on')\n"
)


def _read_all(fd):
    chunks = []
    while True:
        try:
            chunk = os.read(fd, 1024)
        except OSError as exc:
            if exc.errno == errno.EIO:
                break
            raise
        if not chunk:
            break
        chunks.append(chunk)
    os.close(fd)
    return b"".join(chunks)


def _run_child(code, termios_attrs=None, winsize=None):
    pid, master = forkpty(termios_attrs, winsize)
    if pid == 0:
        try:
            os.execv(sys.executable, [sys.executable, "-c", code])
        finally:
            os.kill(os.getpid(), signal.SIGKILL)
    output = _read_all(master)
    _, wstatus = os.waitpid(pid, 0)
    return output, os.waitstatus_to_exitcode(wstatus)


def test_window_size_round_trip():
    size = WindowSize(rows=40, cols=132, xpixel=7, ypixel=9)
    assert WindowSize.from_bytes(size.to_bytes()) == size


def test_window_size_defaults_match_initial_terminal():
    assert WindowSize() == WindowSize(rows=25, cols=80, xpixel=0, ypixel=0)


def test_window_size_of_pty():
    master, slave = os.openpty()
    try:
        wanted = WindowSize(rows=33, cols=101)
        fcntl.ioctl(slave, termios.TIOCSWINSZ, wanted.to_bytes())
        assert WindowSize.of(slave) == wanted
    finally:
        os.close(master)
        os.close(slave)


def test_forkpty_uses_given_window_size():
    output, code = _run_child(_REPORT_SIZE, winsize=WindowSize(rows=24, cols=80))
    assert code == 0
    assert output.strip() == b"24x80"


def test_forkpty_default_window_size():
    output, code = _run_child(_REPORT_SIZE)
    assert code == 0
    assert output.strip() == b"25x80"


def test_forkpty_child_is_session_leader():
    output, code = _run_child(_REPORT_LEADER)
    assert code == 0
    assert output.strip() == b"leader"


def test_forkpty_applies_termios_attrs():
    master, slave = os.openpty()
    try:
        attrs = termios.tcgetattr(slave)
    finally:
        os.close(master)
        os.close(slave)
    attrs[3] &= ~termios.ECHO

    output, code = _run_child(_REPORT_ECHO, termios_attrs=attrs)
    assert code == 0
    assert output.strip() == b"echo-off"


def _all_set_attrs():
    return [0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 9600, 9600, [5] * 32]


def test_cfmakeraw_clears_flags():
    raw = cfmakeraw(_all_set_attrs())
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = raw
    for bit in (
        termios.IGNBRK,
        termios.BRKINT,
        termios.PARMRK,
        termios.ISTRIP,
        termios.INLCR,
        termios.IGNCR,
        termios.ICRNL,
        termios.IXON,
    ):
        assert iflag & bit == 0
    assert oflag & termios.OPOST == 0
    for bit in (termios.ECHO, termios.ECHONL, termios.ICANON, termios.ISIG, termios.IEXTEN):
        assert lflag & bit == 0
    assert cflag & termios.PARENB == 0
    assert cflag & termios.CSIZE == termios.CS8
    assert (ispeed, ospeed) == (9600, 9600)


def test_cfmakeraw_sets_read_timing():
    cc = cfmakeraw(_all_set_attrs())[6]
    assert cc[termios.VMIN] == 1
    assert cc[termios.VTIME] == 0


def test_cfmakeraw_leaves_input_untouched():
    attrs = _all_set_attrs()
    snapshot = [list(x) if isinstance(x, list) else x for x in attrs]
    cfmakeraw(attrs)
    assert attrs == snapshot


def test_cfmakeraw_is_idempotent():
    once = cfmakeraw(_all_set_attrs())
    assert cfmakeraw(once) == once


def test_cfmakeraw_applies_to_real_terminal():
    master, slave = os.openpty()
    try:
        termios.tcsetattr(slave, termios.TCSANOW, cfmakeraw(termios.tcgetattr(slave)))
        lflag = termios.tcgetattr(slave)[3]
        assert lflag & termios.ICANON == 0
        assert lflag & termios.ECHO == 0
    finally:
        os.close(master)
        os.close(slave)


def test_cfmakeraw_rejects_malformed_attrs():
    with pytest.raises(ValueError):
        cfmakeraw([0, 0, 0])