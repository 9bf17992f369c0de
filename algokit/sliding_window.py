"""Sliding-window and prefix-sum algorithms."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def _require_pattern(p: str) -> None:
    if not p:
        raise ValueError("pattern must not be empty")


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of substrings of ``s`` that are anagrams of ``p``, counting each window."""
    _require_pattern(p)
    width = len(p)
    wanted = Counter(p)
    return [
        start
        for start in range(len(s) - width + 1)
        if Counter(s[start : start + width]) == wanted
    ]


def find_anagrams_fixed(s: str, p: str) -> list[int]:
    """Start indices of anagrams of ``p`` in ``s``, sliding a fixed-size window."""
    _require_pattern(p)
    width = len(p)
    if width > len(s):
        return []
    wanted = Counter(p)
    window = Counter(s[:width])
    result = [0] if window == wanted else []
    for start, (leaving, entering) in enumerate(zip(s, s[width:]), start=1):
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[entering] += 1
        if window == wanted:
            result.append(start)
    return result


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of size ``k``, using a monotonic queue."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    window: deque[int] = deque()
    result = []
    for index, num in enumerate(nums):
        while window and nums[window[-1]] < num:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays summing to ``k``, counting prefix sums."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for num in nums:
        total += num
        count += seen[total - k]
        seen[total] += 1
    return count


def subarray_sum_brute(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays summing to ``k``, checking every pair of prefixes."""
    prefix = accumulate(nums, initial=0)
    return sum(1 for before, after in combinations(prefix, 2) if after - before == k)


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` containing every character of ``t``; the first on ties."""
    if not t or len(s) < len(t):
        return ""
    need = Counter(t)
    missing = len(t)
    best = ""
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if not best or right - left + 1 < len(best):
                best = s[left : right + 1]
            leaving = s[left]
            need[leaving] += 1
            if need[leaving] > 0:
                missing += 1
            left += 1
    return best


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest subarray with sum at least ``target``, or 0."""
    best: int | None = None
    total = 0
    left = 0
    for right, num in enumerate(nums):
        total += num
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return best or 0


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best