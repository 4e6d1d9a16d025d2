"""
Id generation for Jotter.

Note ids are Unix timestamps in milliseconds, so they sort by creation time.
"""

import time
from typing import Iterable


def generate_id() -> int:
    """Generate a note ID (Unix timestamp in milliseconds)."""
    return int(time.time() * 1000)


def next_id(existing: Iterable[int]) -> int:
    """
    Generate an ID that does not collide with any existing one.

    Two notes created within the same millisecond (or after a clock step
    backwards) get the largest existing ID plus one instead.
    """
    candidate = generate_id()
    highest = max(existing, default=0)
    if candidate <= highest:
        return highest + 1
    return candidate
