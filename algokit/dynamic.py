"""Dynamic programming and greedy algorithms."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, MutableSequence, Sequence
from functools import cache, reduce
from itertools import accumulate
from math import comb, isqrt
from operator import xor

from algokit.search import first_true


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a triangle, working downwards."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    best = [triangle[0][0]]
    for row in triangle[1:]:
        best = [
            value
            + min(best[j] if j < len(best) else best[j - 1], best[j - 1] if j > 0 else best[j])
            for j, value in enumerate(row)
        ]
    return min(best)


def minimum_total_in_place(triangle: list[list[int]]) -> int:
    """Smallest top-to-bottom path sum, folding rows upwards inside ``triangle``."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    for upper, lower in zip(reversed(triangle[:-1]), reversed(triangle[1:])):
        for j in range(len(upper)):
            upper[j] += min(lower[j], lower[j + 1])
    return triangle[0][0]


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one purchase followed by one sale, or 0."""
    best = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    return sum(max(0, after - before) for before, after in zip(prices, prices[1:]))


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 when it cannot be made."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] > amount else fewest[amount]


def change(amount: int, coins: Iterable[int]) -> int:
    """Number of coin combinations summing to ``amount``."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps from the first to the last position."""
    last = len(nums) - 1
    jumps = end = farthest = 0
    for index in range(last):
        farthest = max(farthest, index + nums[index])
        if index == end:
            jumps += 1
            end = farthest
            if end >= last:
                break
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last position can be reached from the first."""
    last = len(nums) - 1
    farthest = 0
    for index, step in enumerate(nums):
        if index > farthest:
            return False
        farthest = max(farthest, index + step)
        if farthest >= last:
            return True
    return False


def h_index(citations: Iterable[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    h = 0
    for count in sorted(citations, reverse=True):
        if count > h:
            h += 1
    return h


def h_index_sorted(citations: Sequence[int]) -> int:
    """H-index of citations already sorted in ascending order, by binary search."""
    n = len(citations)
    return n - first_true(n, lambda x: citations[x] >= n - x)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    a, b = 1, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def generate_pascal(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError(f"num_rows must not be negative, got {num_rows}")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        prev = rows[-1]
        rows.append([1] + [a + b for a, b in zip(prev, prev[1:])] + [1])
    return rows


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in one pass."""
    p0 = p1 = 0
    for i in range(len(nums)):
        if nums[i] == 0:
            nums[i], nums[p0] = nums[p0], nums[i]
            if p0 < p1:
                nums[i], nums[p1] = nums[p1], nums[i]
            p0 += 1
            p1 += 1
        elif nums[i] == 1:
            nums[i], nums[p1] = nums[p1], nums[i]
            p1 += 1


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence, with a table."""
    prev = [0] * (len(text2) + 1)
    for a in text1:
        cur = [0]
        for j, b in enumerate(text2):
            cur.append(prev[j] + 1 if a == b else max(cur[j], prev[j + 1]))
        prev = cur
    return prev[-1]


def longest_common_subsequence_memo(text1: str, text2: str) -> int:
    """Length of the longest common subsequence, by memoised recursion."""

    @cache
    def best(i: int, j: int) -> int:
        if i == len(text1) or j == len(text2):
            return 0
        if text1[i] == text2[j]:
            return best(i + 1, j + 1) + 1
        return max(best(i + 1, j), best(i, j + 1))

    return best(0, 0)


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for num in nums:
        index = bisect_left(tails, num)
        if index == len(tails):
            tails.append(num)
        else:
            tails[index] = num
    return len(tails)


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = high = low = nums[0]
    for num in nums[1:]:
        candidates = (num, high * num, low * num)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def can_partition(nums: Iterable[int]) -> bool:
    """Tell whether the values split into two groups of equal sum."""
    values = list(nums)
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    mask = (1 << (target + 1)) - 1
    reachable = 1
    for num in values:
        if num > target:
            continue
        reachable = (reachable | (reachable << num)) & mask
    return bool(reachable >> target & 1)


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    best = 0
    stack: list[int] = []
    for index, ch in enumerate(s):
        if ch == "(":
            stack.append(index)
        elif stack and s[stack[-1]] == "(":
            stack.pop()
            best = max(best, index - stack[-1] if stack else index + 1)
        else:
            stack.append(index)
    return best


def unique_paths(m: int, n: int) -> int:
    """Paths from the top-left to the bottom-right of an m by n grid moving right or down."""
    if m < 1 or n < 1:
        raise ValueError(f"grid sides must be positive, got {m} by {n}")
    return comb(m + n - 2, m - 1)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    best = list(accumulate(grid[0]))
    for row in grid[1:]:
        cur = [best[0] + row[0]]
        for j in range(1, len(row)):
            cur.append(min(best[j], cur[j - 1]) + row[j])
        best = cur
    return best[-1]


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost on ties."""

    def expand(i: int, j: int) -> tuple[int, int]:
        while i >= 0 and j < len(s) and s[i] == s[j]:
            i -= 1
            j += 1
        return i + 1, j - 1

    start = end = 0
    for centre in range(len(s)):
        for lo, hi in (expand(centre, centre), expand(centre, centre + 1)):
            if hi - lo > end - start:
                start, end = lo, hi
    return s[start : end + 1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into words from ``word_dict``."""
    words = set(word_dict)
    ok = [True] + [False] * len(s)
    for i in range(1, len(s) + 1):
        ok[i] = any(ok[j] and s[j:i] in words for j in range(i))
    return ok[-1]


def num_squares(n: int) -> int:
    """Fewest perfect squares summing to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    fewest = [0] + [n + 1] * n
    for i in range(1, n + 1):
        fewest[i] = min(fewest[i - j * j] + 1 for j in range(1, isqrt(i) + 1))
    return fewest[n]