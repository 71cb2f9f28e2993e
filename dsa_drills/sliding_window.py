"""Fixed-size sliding window exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    width = len(p)
    if width > len(s):
        return []
    target = Counter(p)
    window = Counter(s[:width])
    starts = [0] if window == target else []
    for start, (incoming, outgoing) in enumerate(zip(s[width:], s), start=1):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        if window == target:
            starts.append(start)
    return starts


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of any contiguous run of exactly ``k`` elements."""
    if not 0 < k <= len(nums):
        raise ValueError(f"window size {k} must be between 1 and {len(nums)}")
    window = sum(nums[:k])
    best = window
    for incoming, outgoing in zip(nums[k:], nums):
        window += incoming - outgoing
        best = max(best, window)
    return best / k