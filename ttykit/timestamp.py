"""A process-wide millisecond clock that is read once per event-loop turn."""

from __future__ import annotations

import sys
import time

_millis_cache: int | None = None


def freeze_timestamp() -> None:
    """Read the clock and store the result for frozen_timestamp()."""
    global _millis_cache
    try:
        # Monotonic clock preferred: immune to wall-clock steps.
        _millis_cache = time.monotonic_ns() // 1_000_000
        return
    except OSError:
        pass
    try:
        # Not monotonic; if time steps backwards, timeouts may be confused.
        _millis_cache = time.time_ns() // 1_000_000
    except OSError as exc:
        print(f"gettimeofday: {exc}", file=sys.stderr)


def frozen_timestamp() -> int:
    """Return the last frozen time in milliseconds, freezing it first if unset."""
    if _millis_cache is None:
        freeze_timestamp()
    return _millis_cache