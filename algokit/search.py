"""Binary search over sorted and rotated sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def first_true(n: int, predicate: Callable[[int], bool]) -> int:
    """Smallest index in [0, n) where a monotone predicate holds, or n if none does."""
    lo, hi = 0, n
    while lo < hi:
        mid = (lo + hi) // 2
        if predicate(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return first_true(len(nums), lambda i: target <= nums[i])


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    if not nums:
        return -1
    first = nums[0]
    target_in_left = target >= first

    def at_or_after(i: int) -> bool:
        value_in_left = nums[i] >= first
        if value_in_left == target_in_left:
            return nums[i] >= target
        return not value_in_left

    index = first_true(len(nums), at_or_after)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    if nums[0] < nums[-1]:
        return nums[0]
    index = first_true(len(nums), lambda i: nums[i] < nums[0])
    return nums[index] if index < len(nums) else nums[0]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, by binary search on a partition."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    total = m + n
    if total == 0:
        raise ValueError("at least one sequence must be non-empty")
    half = (total + 1) // 2
    if m == 0:
        if total % 2:
            return float(nums2[half - 1])
        return (nums2[half - 1] + nums2[half]) / 2.0

    def left_is_complete(i: int) -> bool:
        j = half - i
        if j > n:
            return False
        if j < 0:
            return True
        return not (j > 0 and nums2[j - 1] > nums1[i])

    i = first_true(m, left_is_complete)
    j = half - i
    if i == 0:
        max_left = nums2[j - 1]
    elif j == 0:
        max_left = nums1[i - 1]
    else:
        max_left = max(nums1[i - 1], nums2[j - 1])
    if total % 2:
        return float(max_left)
    if i == m:
        min_right = nums2[j]
    elif j == n:
        min_right = nums1[i]
    else:
        min_right = min(nums1[i], nums2[j])
    return (max_left + min_right) / 2.0