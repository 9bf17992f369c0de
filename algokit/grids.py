"""Grid, matrix and graph algorithms."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from algokit.search import first_true

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of '1' cells; the grid is left untouched."""
    rows = len(grid)
    seen: set[tuple[int, int]] = set()
    count = 0
    for i in range(rows):
        for j in range(len(grid[i])):
            if grid[i][j] != "1" or (i, j) in seen:
                continue
            count += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                x, y = stack.pop()
                for dx, dy in _DIRECTIONS:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < rows
                        and 0 <= ny < len(grid[nx])
                        and grid[nx][ny] == "1"
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
    return count


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """The person trusted by all others who trusts nobody (1-based), or -1."""
    trusted_by = [0] * n
    trusts = [0] * n
    for truster, trustee in trust:
        if not (1 <= truster <= n and 1 <= trustee <= n):
            raise ValueError(f"people are numbered 1 to {n}, got {truster}, {trustee}")
        trusts[truster - 1] += 1
        trusted_by[trustee - 1] += 1
    for person in range(n):
        if trusts[person] == 0 and trusted_by[person] == n - 1:
            return person + 1
    return -1


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether the prerequisite graph has no cycle among the courses."""
    graph: dict[int, list[int]] = defaultdict(list)
    for course, required in prerequisites:
        graph[course].append(required)
    visiting, done = 1, 2
    state: dict[int, int] = {}
    for start in range(num_courses):
        if state.get(start) == done:
            continue
        state[start] = visiting
        stack = [(start, iter(graph.get(start, ())))]
        while stack:
            node, edges = stack[-1]
            following = next(edges, None)
            if following is None:
                state[node] = done
                stack.pop()
                continue
            status = state.get(following)
            if status == visiting:
                return False
            if status is None:
                state[following] = visiting
                stack.append((following, iter(graph.get(following, ()))))
    return True


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) is rotten (2), or -1 if some never rot."""
    cells = [list(row) for row in grid]
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            if cell == 2:
                queue.append((i, j))
            elif cell == 1:
                fresh += 1
    minutes = 0
    while queue and fresh:
        for _ in range(len(queue)):
            x, y = queue.popleft()
            for dx, dy in _DIRECTIONS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < len(cells) and 0 <= ny < len(cells[nx]) and cells[nx][ny] == 1:
                    cells[nx][ny] = 2
                    fresh -= 1
                    queue.append((nx, ny))
        minutes += 1
    return -1 if fresh else minutes


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix sorted along rows and columns, from the bottom-left."""
    if not matrix or not matrix[0]:
        return False
    i, j = len(matrix) - 1, 0
    cols = len(matrix[0])
    while i >= 0 and j < cols:
        value = matrix[i][j]
        if value > target:
            i -= 1
        elif value < target:
            j += 1
        else:
            return True
    return False


def search_matrix_flat(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    size = len(matrix) * cols
    index = first_true(size, lambda k: matrix[k // cols][k % cols] >= target)
    return index < size and matrix[index // cols][index % cols] == target


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements read clockwise from the outside in."""
    if not matrix or not matrix[0]:
        return []
    left, right = 0, len(matrix[0]) - 1
    top, bottom = 0, len(matrix) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][j] for j in range(left, right + 1))
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def partition_labels(s: str) -> list[int]:
    """Sizes of the most pieces ``s`` splits into with each letter in one piece."""
    last = {ch: index for index, ch in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for index, ch in enumerate(s):
        end = max(end, last[ch])
        if index == end:
            sizes.append(end - start + 1)
            start = end + 1
    return sizes


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square of '1' cells."""
    best = 0
    prev: list[int] = []
    for i, row in enumerate(matrix):
        cur: list[int] = []
        for j, cell in enumerate(row):
            if cell == "0":
                side = 0
            elif i == 0 or j == 0:
                side = 1
            else:
                side = min(cur[j - 1], prev[j], prev[j - 1]) + 1
            cur.append(side)
            best = max(best, side)
        prev = cur
    return best * best