# ttykit

Small building blocks for programs that drive terminals on POSIX systems.

## What is inside

### `ttykit.pty_compat`

- `forkpty(termios_attrs=None, winsize=None)` opens a new pseudo-terminal and
  forks. If `termios_attrs` (a list as returned by `termios.tcgetattr`) is
  given, it is applied to the terminal. The window size is `winsize`, or 25
  rows by 80 columns when it is omitted. In the parent it returns
  `(pid, master_fd)`. In the child it returns `(0, -1)`, and the child then
  runs in a new session with the terminal as its controlling terminal and as
  its stdin, stdout and stderr. It raises `OSError` if the terminal cannot be
  set up.
- `cfmakeraw(attrs)` returns a copy of a termios attribute list set for raw
  mode. Input translation, output processing, echo, canonical mode and
  signal keys are turned off. Characters are 8 bits wide. A read returns
  after one byte, with no timer.
- `WindowSize(rows=25, cols=80, xpixel=0, ypixel=0)` is a frozen dataclass
  with the layout of `struct winsize`. It has these methods:
  - `to_bytes()`
  - `WindowSize.from_bytes(data)`
  - `WindowSize.of(fd)`, which reads the size of the terminal on `fd`.

### `ttykit.locale_utils`

- `get_ctype()` returns a `LocaleVar` for whichever of `LC_ALL`, `LC_CTYPE`
  or `LANG` is set first, in that order. If none is set, the name and value
  are empty. `str()` of that empty `LocaleVar` is `[no charset variables]`;
  otherwise `str()` gives `NAME=value`.
- `locale_charset()` returns the character set of the current locale.
  `ANSI_X3.4-1968` is reported as `US-ASCII`.
- `is_utf8_locale()` tells whether that character set is `UTF-8` or `utf-8`.
- `set_native_locale()` adopts the locale from the environment. It returns
  `True` on success. If the locale is not available, it writes a diagnostic
  to stderr, with a `locale-gen` hint when a variable named the locale, and
  returns `False`.
- `clear_locale_variables()` removes `LANG`, `LANGUAGE`, `LC_ALL` and every
  `LC_*` category variable from `os.environ`.

### `ttykit.timestamp`

- `freeze_timestamp()` reads the monotonic clock in milliseconds. If that
  clock is unavailable, it falls back to the wall clock.
- `frozen_timestamp()` returns the last frozen value, freezing it first if no
  value has been recorded yet.

### `ttykit.swrite`

- `swrite(fd, data)` writes all of `data` to `fd`, retrying on short writes.
  `data` is bytes-like, or a `str`, which is encoded as UTF-8. It returns the
  number of bytes written and raises `OSError` on failure.

## Example

```python
import os
from ttykit.pty_compat import forkpty, WindowSize
from ttykit.swrite import swrite

pid, master = forkpty(winsize=WindowSize(rows=24, cols=80))
if pid == 0:
    os.execvp("tty", ["tty"])
swrite(master, b"")
print(os.read(master, 1024))
os.waitpid(pid, 0)
```

## What it does not do

ttykit has no event loop. It also has no signal-aware wrapper around
`select`, and it provides no assertion helpers. To wait on descriptors and
signals, use the standard library's `selectors` and `signal` modules together
with these helpers. The package installs no command-line programs.

## Running the tests

```
pip install -e ".[test]"
pytest
```