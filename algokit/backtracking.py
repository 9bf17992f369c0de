"""Backtracking searches: permutations, combinations, partitions and word search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache
from itertools import permutations, product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Every ordering of ``nums``, in lexicographic order of positions."""
    return [list(ordering) for ordering in permutations(nums)]


def letter_combinations(digits: str) -> list[str]:
    """Every word a phone keypad can spell from ``digits``; digits without letters spell nothing."""
    if not digits:
        return []
    letters = (_KEYPAD.get(digit, "") for digit in digits)
    return ["".join(chars) for chars in product(*letters)]


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Combinations of candidates summing to ``target``; each candidate may repeat."""
    values = list(candidates)
    if not values:
        return []
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(path))
            return
        if remaining < 0:
            return
        for index in range(start, len(values)):
            path.append(values[index])
            search(index, remaining - values[index])
            path.pop()

    search(0, target)
    return result


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct combinations summing to ``target``, each candidate used at most once."""
    values = sorted(candidates)
    if not values:
        return []
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(path))
            return
        if remaining < 0:
            return
        for index in range(start, len(values)):
            value = values[index]
            if value > target:
                break
            if index > start and value == values[index - 1]:
                continue
            path.append(value)
            search(index + 1, remaining - value)
            path.pop()

    search(0, target)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, the empty one first."""
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int) -> None:
        result.append(list(path))
        for index in range(start, len(nums)):
            path.append(nums[index])
            search(index + 1)
            path.pop()

    search(0)
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs of parentheses, opening first."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    result: list[str] = []

    def build(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return result


def generate_parenthesis_recursive(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs, split by the first pair's contents."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")

    @cache
    def generate(pairs: int) -> tuple[str, ...]:
        if pairs == 0:
            return ("",)
        return tuple(
            f"({inner}){rest}"
            for split in range(pairs)
            for inner in generate(split)
            for rest in generate(pairs - 1 - split)
        )

    return list(generate(n))


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    if not board or not board[0]:
        raise ValueError("board must not be empty")
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(i: int, j: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols):
            return False
        if (i, j) in visited or board[i][j] != word[index]:
            return False
        visited.add((i, j))
        found = any(
            trace(i + di, j + dj, index + 1)
            for di, dj in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )
        visited.discard((i, j))
        return found

    return any(trace(i, j, 0) for i in range(rows) for j in range(cols))


def partition_palindromes(s: str) -> list[list[str]]:
    """Every way to cut ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def search(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                search(end)
                path.pop()

    search(0)
    return result