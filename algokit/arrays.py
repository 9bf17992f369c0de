"""Array and hashing algorithms."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate
from operator import mul

_ALPHABET_SIZE = 26


def _letter_counts(word: str) -> tuple[int, ...]:
    counts = [0] * _ALPHABET_SIZE
    for ch in word:
        index = ord(ch) - ord("a")
        if not 0 <= index < _ALPHABET_SIZE:
            raise ValueError(f"expected lowercase ASCII letters, got {ch!r} in {word!r}")
        counts[index] += 1
    return tuple(counts)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group lowercase words that are anagrams, keyed by letter counts."""
    groups: dict[tuple[int, ...], list[str]] = defaultdict(list)
    for word in strs:
        groups[_letter_counts(word)].append(word)
    return list(groups.values())


def group_anagrams_sorted(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams, keyed by their sorted characters."""
    groups: dict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or an empty list."""
    wanted: dict[int, int] = {}
    for index, num in enumerate(nums):
        if num in wanted:
            return [wanted[num], index]
        wanted[target - num] = index
    return []


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers, using a set."""
    values = set(nums)
    best = 0
    for num in values:
        if num - 1 in values:
            continue
        length = 1
        while num + length in values:
            length += 1
        best = max(best, length)
    return best


def longest_consecutive_sorted(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers, by sorting."""
    ordered = sorted(nums)
    if not ordered:
        return 0
    best = run = 1
    for prev, cur in zip(ordered, ordered[1:]):
        if cur == prev:
            continue
        if cur == prev + 1:
            run += 1
            best = max(best, run)
        else:
            run = 1
    return best


def max_area(height: Sequence[int]) -> int:
    """Largest water container formed by two of the lines."""
    if len(height) < 2:
        raise ValueError("need at least two heights")
    i, j = 0, len(height) - 1
    best: int | None = None
    while i < j:
        area = (j - i) * min(height[i], height[j])
        best = area if best is None else max(best, area)
        if height[i] < height[j]:
            i += 1
        else:
            j -= 1
    return best


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the other values."""
    write = 0
    for read in range(len(nums)):
        if nums[read] != 0:
            nums[write], nums[read] = nums[read], nums[write]
            write += 1


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped between the bars."""
    if not height:
        return 0
    left = list(accumulate(height, max))
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for num in nums[1:]:
        current = max(current + num, num)
        best = max(best, current)
    return best


def _crossing_sum(nums: Sequence[int], lo: int, mid: int, hi: int) -> int:
    left_best = max(accumulate(reversed(nums[lo : mid + 1])))
    right_best = max(accumulate(nums[mid + 1 : hi + 1]))
    return left_best + right_best


def _best_between(nums: Sequence[int], lo: int, hi: int) -> int:
    if lo == hi:
        return nums[lo]
    mid = lo + (hi - lo) // 2
    return max(
        _best_between(nums, lo, mid),
        _best_between(nums, mid + 1, hi),
        _crossing_sum(nums, lo, mid, hi),
    )


def max_sub_array_divide(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray, by divide and conquer."""
    if not nums:
        raise ValueError("nums must not be empty")
    return _best_between(nums, 0, len(nums) - 1)


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals; the input is left untouched."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the sequence to the right by ``k`` steps, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[len(nums) - k :]) + list(nums[: len(nums) - k])


def find_repeat_number(documents: Sequence[int]) -> int | None:
    """Return some value that occurs twice among values in [0, n), or None."""
    values = list(documents)
    size = len(values)
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"values must lie in [0, {size}), got {value}")
    for index in range(size):
        while values[index] != index:
            target = values[index]
            if values[target] == target:
                return target
            values[index], values[target] = values[target], target
    return None


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer absent from ``nums``; the input is left untouched."""
    values = list(nums)
    size = len(values)
    for index in range(size):
        while 0 < values[index] <= size and values[values[index] - 1] != values[index]:
            slot = values[index] - 1
            values[index], values[slot] = values[slot], values[index]
    return next(
        (position for position, value in enumerate(values, start=1) if value != position),
        size + 1,
    )


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all other elements."""
    values = list(nums)
    if not values:
        return []
    prefix = accumulate(values[:-1], mul, initial=1)
    suffix = list(accumulate(reversed(values[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Drop every ``val`` in place; return how many elements remain at the front."""
    i, j = 0, len(nums) - 1
    while i <= j:
        if nums[i] == val:
            nums[i] = nums[j]
            j -= 1
        else:
            i += 1
    return i


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Keep one copy of each value of a sorted sequence at its front; return their count."""
    if not nums:
        return 0
    write = 1
    for value in list(nums[1:]):
        if value != nums[write - 1]:
            nums[write] = value
            write += 1
    return write


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than n/2 times (Boyer-Moore vote)."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 1
    for num in nums[1:]:
        count += 1 if num == candidate else -1
        if count == 0:
            candidate = num
            count = 1
    return candidate