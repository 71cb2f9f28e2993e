"""Two-pointer exercises over arrays and strings."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, zip_longest


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two vertical lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def trap_prefix(height: Sequence[int]) -> int:
    """Trapped rain water, computed from prefix and suffix maxima."""
    if not height:
        return 0
    max_left = accumulate(height, max)
    max_right = list(accumulate(reversed(height), max))[::-1]
    return sum(
        max(min(lhs, rhs) - h, 0) for lhs, rhs, h in zip(max_left, max_right, height)
    )


def trap(height: Sequence[int]) -> int:
    """Trapped rain water, computed with two pointers in constant memory."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    water = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] >= max_left:
                max_left = height[left]
            else:
                water += max_left - height[left]
            left += 1
        else:
            if height[right] >= max_right:
                max_right = height[right]
            else:
                water += max_right - height[right]
            right -= 1
    return water


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1


def is_palindrome(s: str) -> bool:
    """Case-insensitive palindrome check that ignores spaces."""
    letters = [ch.lower() for ch in s if ch != " "]
    return letters == letters[::-1]


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave two words, appending whatever is left of the longer one."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets, each in ascending order, that sum to zero."""
    values = sorted(nums)
    n = len(values)
    triplets: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = first + values[left] + values[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                triplets.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return triplets