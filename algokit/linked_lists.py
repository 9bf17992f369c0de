"""Algorithms on singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from algokit.nodes import ListNode, RandomNode

_N = TypeVar("_N", ListNode, RandomNode)


def _walk(head: _N | None) -> Iterator[_N]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _merge_sorted(
    l1: ListNode | None, l2: ListNode | None, *, left_on_tie: bool
) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val or (left_on_tie and l1.val == l2.val):
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = [node.val for node in _walk(head)]
    return values == values[::-1]


def is_palindrome_by_reversal(head: ListNode | None) -> bool:
    """Palindrome check by reversing the second half; the list is restored afterwards."""
    mid = middle_node(head)
    if mid is None:
        return True
    tail = reverse_list(mid)
    result = all(
        a.val == b.val for a, b in zip(_walk(head), _walk(tail))
    )
    reverse_list(tail)
    return result


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, using a set of visited nodes."""
    seen: set[ListNode] = set()
    for node in _walk(head):
        if node in seen:
            return node
        seen.add(node)
    return None


def detect_cycle_floyd(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, in constant space."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            start = head
            while slow is not start:
                slow = slow.next
                start = start.next
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the list has a cycle, with fast and slow pointers."""
    if head is None or head.next is None:
        return False
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def has_cycle_with_set(head: ListNode | None) -> bool:
    """Tell whether the list has a cycle, remembering visited nodes."""
    return detect_cycle(head) is not None


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists, taking from the first on ties."""
    return _merge_sorted(l1, l2, left_on_tie=True)


def merge_two_lists_recursive(
    l1: ListNode | None, l2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists recursively, taking from the first on ties."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    if l1.val <= l2.val:
        l1.next = merge_two_lists_recursive(l1.next, l2)
        return l1
    l2.next = merge_two_lists_recursive(l1, l2.next)
    return l2


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the n-th node from the end, indexing all nodes first."""
    nodes = list(_walk(head))
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    if n == len(nodes):
        return head.next
    nodes[-n - 1].next = nodes[-n].next
    return head


def remove_nth_from_end_two_pointers(
    head: ListNode | None, n: int
) -> ListNode | None:
    """Remove the n-th node from the end in one pass with a leading pointer."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    dummy = ListNode(next=head)
    lead = head
    for _ in range(n):
        if lead is None:
            raise ValueError(f"list is shorter than {n}")
        lead = lead.next
    trail = dummy
    while lead is not None:
        trail = trail.next
        lead = lead.next
    trail.next = trail.next.next
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every full group of k nodes; a shorter tail stays as it is."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    dummy = ListNode(next=head)
    before = dummy
    while True:
        end = before
        for _ in range(k):
            end = end.next
            if end is None:
                return dummy.next
        after = end.next
        end.next = None
        first = before.next
        before.next = reverse_list(first)
        first.next = after
        before = first


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        prev.next = second
        first.next = second.next
        second.next = first
        prev = first
    return dummy.next


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list with random pointers using a map from old to new nodes."""
    copies = {node: RandomNode(node.val) for node in _walk(head)}
    for node, copy in copies.items():
        copy.next = copies.get(node.next)
        copy.random = copies.get(node.random)
    return copies.get(head)


def copy_random_list_interleaved(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list with random pointers by interleaving copies; the original is restored."""
    if head is None:
        return None
    node = head
    while node is not None:
        node.next = RandomNode(node.val, next=node.next)
        node = node.next.next
    node = head
    while node is not None:
        if node.random is not None:
            node.next.random = node.random.next
        node = node.next.next
    new_head = head.next
    node = head
    while node is not None:
        copy = node.next
        node.next = copy.next
        if copy.next is not None:
            copy.next = copy.next.next
        node = node.next
    return new_head


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list with merge sort."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    rest = slow.next
    slow.next = None
    return _merge_sorted(sort_list(head), sort_list(rest), left_on_tie=False)


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge k sorted lists by pairwise divide and conquer."""
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    mid = len(lists) // 2
    return _merge_sorted(
        merge_k_lists(lists[:mid]), merge_k_lists(lists[mid:]), left_on_tie=False
    )


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node holding ``val``."""
    dummy = ListNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions left through right."""
    length = sum(1 for _ in _walk(head))
    if not 1 <= left <= right <= length:
        raise ValueError(
            f"need 1 <= left <= right <= {length}, got left={left}, right={right}"
        )
    dummy = ListNode(next=head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    first = before.next
    last = first
    for _ in range(right - left):
        last = last.next
    after = last.next
    last.next = None
    before.next = reverse_list(first)
    first.next = after
    return dummy.next