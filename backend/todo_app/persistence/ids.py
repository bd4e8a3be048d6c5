"""
Identifier generator for entities created by the in-memory strategy.

IDs come from one process-wide counter, so they are unique across every
list and todo the process creates. Sessions that outlive the process
call `advance_past()` with their largest stored ID before creating more.
"""

from __future__ import annotations

import itertools
import threading

_lock = threading.Lock()
_counter = itertools.count(1)
_last_issued = 0


def next_id() -> int:
    """Return a fresh positive integer ID."""
    global _last_issued
    with _lock:
        _last_issued = next(_counter)
        return _last_issued


def advance_past(value: int) -> None:
    """Make sure every later `next_id()` is greater than `value`."""
    global _counter, _last_issued
    with _lock:
        if value > _last_issued:
            _last_issued = value
            _counter = itertools.count(value + 1)
