"""Algorithms on binary trees and binary search trees."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import islice

from algokit.nodes import TreeNode


def _inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(root: TreeNode | None) -> Iterator[TreeNode]:
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    return [node.val for node in _inorder(root)]


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order, using an explicit stack."""
    return [node.val for node in _preorder(root)]


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrored(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None or left.val != right.val:
        return False
    return _mirrored(left.left, right.right) and _mirrored(left.right, right.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself; an empty tree is."""
    if root is None:
        return True
    return _mirrored(root.left, root.right)


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Swap every node's children in place and return the root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def get_minimum_difference(root: TreeNode | None) -> int:
    """Smallest difference between in-order neighbours of a binary search tree."""
    values = inorder_traversal(root)
    if len(values) < 2:
        raise ValueError("the tree needs at least two nodes")
    return min(after - before for before, after in zip(values, values[1:]))


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, top level first."""
    return [[node.val for node in level] for level in _levels(root)]


def level_order_bottom(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, deepest level first."""
    return level_order(root)[::-1]


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo > hi:
            return None
        mid = lo + (hi - lo) // 2
        return TreeNode(nums[mid], build(lo, mid - 1), build(mid + 1, hi))

    return build(0, len(nums) - 1)


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether every node lies strictly between the bounds set by its ancestors."""

    def check(node: TreeNode | None, lower: int | None, upper: int | None) -> bool:
        if node is None:
            return True
        if lower is not None and node.val <= lower:
            return False
        if upper is not None and node.val >= upper:
            return False
        return check(node.left, lower, node.val) and check(node.right, node.val, upper)

    return check(root, None, None)


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The k-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    node = next(islice(_inorder(root), k - 1, None), None)
    if node is None:
        raise ValueError(f"the tree has fewer than {k} nodes")
    return node.val


def right_side_view(root: TreeNode | None) -> list[int]:
    """The last value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def flatten(root: TreeNode | None) -> None:
    """Relink the tree in place into a right-leaning chain in preorder."""
    nodes = list(_preorder(root))
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    pre = list(preorder)
    ino = list(inorder)

    def build(pre_lo: int, in_lo: int, size: int) -> TreeNode | None:
        if size == 0:
            return None
        root_val = pre[pre_lo]
        try:
            pos = ino.index(root_val, in_lo, in_lo + size)
        except ValueError:
            raise ValueError(
                f"value {root_val} is missing from the inorder traversal"
            ) from None
        left_size = pos - in_lo
        return TreeNode(
            root_val,
            build(pre_lo + 1, in_lo, left_size),
            build(pre_lo + 1 + left_size, pos + 1, size - left_size - 1),
        )

    return build(0, 0, len(pre))


def _paths_from(node: TreeNode | None, remaining: int) -> int:
    if node is None:
        return 0
    rest = remaining - node.val
    return (
        (node.val == remaining)
        + _paths_from(node.left, rest)
        + _paths_from(node.right, rest)
    )


def path_sum_count(root: TreeNode | None, target_sum: int) -> int:
    """Number of downward paths summing to ``target_sum``, trying every start node."""
    return sum(_paths_from(node, target_sum) for node in _preorder(root))


def path_sum_prefix(root: TreeNode | None, target_sum: int) -> int:
    """Number of downward paths summing to ``target_sum``, counting prefix sums."""
    prefixes = Counter({0: 1})

    def visit(node: TreeNode | None, total: int) -> int:
        if node is None:
            return 0
        total += node.val
        found = prefixes[total - target_sum]
        prefixes[total] += 1
        found += visit(node.left, total) + visit(node.right, total)
        prefixes[total] -= 1
        return found

    return visit(root, 0)


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path sums to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def find_path_sum(root: TreeNode | None, target_sum: int) -> list[list[int]]:
    """Every root-to-leaf path whose values sum to ``target_sum``, left to right."""
    result: list[list[int]] = []
    path: list[int] = []

    def visit(node: TreeNode | None, remaining: int) -> None:
        if node is None:
            return
        path.append(node.val)
        remaining -= node.val
        if node.left is None and node.right is None and remaining == 0:
            result.append(list(path))
        visit(node.left, remaining)
        visit(node.right, remaining)
        path.pop()

    visit(root, target_sum)
    return result


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """The deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of any non-empty path between two nodes."""
    if root is None:
        raise ValueError("the tree must not be empty")
    best = root.val

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best