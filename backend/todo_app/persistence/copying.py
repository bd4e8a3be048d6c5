"""Deep-copy helper used at the in-memory strategy's read boundary."""

from __future__ import annotations

import copy
from typing import TypeVar

T = TypeVar("T")


def deep_copy(value: T) -> T:
    """Return a structurally independent copy of nested dicts/lists.

    `None` passes through, so "not found" results survive the copy.
    """
    if value is None:
        return None
    return copy.deepcopy(value)
