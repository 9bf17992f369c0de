"""Node types for singly linked lists and binary trees, with builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also carries a pointer to an arbitrary node of its list."""

    val: int = 0
    next: RandomNode | None = None
    random: RandomNode | None = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def list_from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_to_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list; raise ValueError if it has a cycle."""
    seen: set[ListNode] = set()
    values = []
    node = head
    while node is not None:
        if node in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(node)
        values.append(node.val)
        node = node.next
    return values


def tree_from_level_order(values: Sequence[int | None]) -> TreeNode | None:
    """Build a binary tree from level-order values where None marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: TreeNode | None) -> list[int | None]:
    """Return the level-order values of a tree, None for missing children, trailing Nones trimmed."""
    result: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result