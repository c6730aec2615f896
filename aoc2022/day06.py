"""Day 6: finding start-of-packet and start-of-message markers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

PACKET_MARKER_LENGTH = 4
MESSAGE_MARKER_LENGTH = 14


def find_marker(data: Sequence, length: int) -> int:
    """Return how many characters are read once ``length`` distinct ones end a window.

    Raises ValueError when ``length`` is not positive or no such window exists.
    """
    if length <= 0:
        raise ValueError(f"marker length must be positive, got {length}")
    window: Counter = Counter()
    for position, item in enumerate(data):
        window[item] += 1
        if position >= length:
            dropped = data[position - length]
            window[dropped] -= 1
            if not window[dropped]:
                del window[dropped]
        if position + 1 >= length and len(window) == length:
            return position + 1
    raise ValueError(f"no marker of length {length} found")


def solve(text: str) -> tuple[int, int]:
    """Return the packet and message marker positions of the first line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    line = lines[0].strip()
    return (
        find_marker(line, PACKET_MARKER_LENGTH),
        find_marker(line, MESSAGE_MARKER_LENGTH),
    )