"""Write a whole buffer to a file descriptor."""

from __future__ import annotations

import os


def swrite(fd: int, data) -> int:
    """Write all of ``data`` to ``fd``, retrying on short writes.

    ``data`` may be bytes-like or a str (encoded as UTF-8). Returns the
    number of bytes written; raises OSError if a write fails or makes no
    progress.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    view = memoryview(data).cast("B")
    total = len(view)
    written = 0
    while written < total:
        count = os.write(fd, view[written:])
        if count <= 0:
            raise OSError(f"write to fd {fd} made no progress")
        written += count
    return written