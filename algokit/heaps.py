"""Selection and ordering algorithms built on heaps and partitioning."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence


def _check_k(k: int, size: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, keeping a min-heap of size k."""
    _check_k(k, len(nums))
    heap: list[int] = []
    for num in nums:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)
    return heap[0]


def _partition(values: MutableSequence[int], lo: int, hi: int) -> int:
    pivot = values[hi]
    store = lo
    for index in range(lo, hi):
        if values[index] <= pivot:
            values[store], values[index] = values[index], values[store]
            store += 1
    values[store], values[hi] = values[hi], values[store]
    return store


def find_kth_largest_quickselect(nums: Sequence[int], k: int) -> int:
    """The k-th largest value by quickselect; the input is left untouched."""
    _check_k(k, len(nums))
    values = list(nums)
    target = len(values) - k
    lo, hi = 0, len(values) - 1
    while True:
        index = _partition(values, lo, hi)
        if index == target:
            return values[index]
        if index < target:
            lo = index + 1
        else:
            hi = index - 1


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The k most frequent values, least frequent of them first."""
    counts = Counter(nums)
    _check_k(k, len(counts))
    heap: list[tuple[int, int]] = []
    for value, freq in counts.items():
        if len(heap) < k:
            heapq.heappush(heap, (freq, value))
        elif freq > heap[0][0]:
            heapq.heapreplace(heap, (freq, value))
    return [heapq.heappop(heap)[1] for _ in range(len(heap))]


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[list[int]]:
    """The k pairs (one value from each sorted sequence) with the smallest sums."""
    if not nums1 or not nums2 or k <= 0:
        return []
    heap = [(nums1[i] + nums2[0], i, 0) for i in range(min(k, len(nums1)))]
    heapq.heapify(heap)
    result: list[list[int]] = []
    while heap and len(result) < k:
        _, i, j = heapq.heappop(heap)
        result.append([nums1[i], nums2[j]])
        if j + 1 < len(nums2):
            heapq.heappush(heap, (nums1[i] + nums2[j + 1], i, j + 1))
    return result


def quick_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place with quicksort and return it."""
    pending = [(0, len(nums) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = _partition(nums, lo, hi)
        pending.append((lo, pivot - 1))
        pending.append((pivot + 1, hi))
    return nums