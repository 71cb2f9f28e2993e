"""Array and hashing exercises: concatenation, encoding, prefix sums and friends."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise
from operator import mul


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by a second copy of ``nums``."""
    return [*nums, *nums]


def encode(strs: Iterable[str]) -> str:
    """Encode strings as ``<length>#<text>`` records joined together."""
    return "".join(f"{len(s)}#{s}" for s in strs)


def decode(s: str) -> list[str]:
    """Decode a string produced by :func:`encode` back into its parts."""
    parts: list[str] = []
    pos = 0
    while pos < len(s):
        sep = s.find("#", pos)
        if sep == -1:
            raise ValueError(f"missing length delimiter at offset {pos}")
        header = s[pos:sep]
        if not header.isdigit():
            raise ValueError(f"invalid length field {header!r} at offset {pos}")
        start = sep + 1
        end = start + int(header)
        if end > len(s):
            raise ValueError(f"record at offset {pos} runs past the end of the input")
        parts.append(s[start:end])
        pos = end
    return parts


class NumMatrix:
    """Answers rectangular sum queries in constant time using 2-D prefix sums."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        if not matrix or not matrix[0]:
            raise ValueError("matrix must have at least one row and one column")
        self._rows = len(matrix)
        self._cols = len(matrix[0])
        prefix = [[0] * (self._cols + 1)]
        for row in matrix:
            if len(row) != self._cols:
                raise ValueError("all matrix rows must have the same length")
            above = prefix[-1]
            running = 0
            line = [0]
            for j, value in enumerate(row):
                running += value
                line.append(above[j + 1] + running)
            prefix.append(line)
        self._prefix = prefix

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Sum of the cells between (row1, col1) and (row2, col2), inclusive."""
        if not (0 <= row1 <= row2 < self._rows and 0 <= col1 <= col2 < self._cols):
            raise IndexError("region lies outside the matrix")
        p = self._prefix
        return p[row2 + 1][col2 + 1] - p[row1][col2 + 1] - p[row2 + 1][col1] + p[row1][col1]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Check that no digit repeats in any row, column or 3x3 box; '.' is empty."""
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value == ".":
                continue
            keys = (
                ("row", i, value),
                ("col", j, value),
                ("box", (i // 3) * 3 + j // 3, value),
            )
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    left = list(accumulate(nums, mul, initial=1))[:-1]
    right = list(accumulate(reversed(nums), mul, initial=1))[:-1][::-1]
    return [a * b for a, b in zip(left, right)]


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    values = set(nums)
    longest = 0
    for num in values:
        if num - 1 in values:
            continue
        length = 1
        while num + length in values:
            length += 1
        longest = max(longest, length)
    return longest


def max_profit(prices: Sequence[int]) -> int:
    """Best total profit from any number of buy/sell transactions."""
    return sum(max(after - before, 0) for before, after in pairwise(prices))


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Elements occurring more than ``len(nums) // 3`` times."""
    count1 = count2 = 0
    cand1, cand2 = 0, 1
    for num in nums:
        if num == cand1:
            count1 += 1
        elif num == cand2:
            count2 += 1
        elif count1 == 0:
            cand1, count1 = num, 1
        elif count2 == 0:
            cand2, count2 = num, 1
        else:
            count1 -= 1
            count2 -= 1
    threshold = len(nums) // 3
    counts = Counter(nums)
    return [cand for cand in (cand1, cand2) if counts[cand] > threshold]


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    total = 0
    for num in nums:
        running += num
        total += prefix_counts[running - k]
        prefix_counts[running] += 1
    return total


def has_duplicate(nums: Sequence[int]) -> bool:
    """True if any value appears more than once."""
    return len(set(nums)) != len(nums)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string."""
    if not strs:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group anagrams together, groups ordered by their sorted-letter key."""
    groups: dict[str, list[str]] = {}
    for s in strs:
        groups.setdefault("".join(sorted(s)), []).append(s)
    return [groups[key] for key in sorted(groups)]


def remove_element(nums: Iterable[int], val: int) -> list[int]:
    """Return the elements of ``nums`` that are not equal to ``val``, in order."""
    return [num for num in nums if num != val]


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote for the element occurring more than half the time."""
    if not nums:
        raise ValueError("majority_element() requires a non-empty sequence")
    candidate = nums[0]
    votes = 0
    for num in nums:
        if votes == 0:
            candidate = num
        votes += 1 if num == candidate else -1
    return candidate


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place (Dutch national flag)."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            raise ValueError(f"unexpected colour {value!r}; expected 0, 1 or 2")


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first (bucket sort)."""
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for num, count in Counter(nums).items():
        buckets[count].append(num)
    result: list[int] = []
    for bucket in reversed(buckets):
        for num in bucket:
            if len(result) >= k:
                return result
            result.append(num)
    return result