import pytest

from algokit.linked_lists import (
    add_two_numbers,
    copy_random_list,
    copy_random_list_interleaved,
    detect_cycle,
    detect_cycle_floyd,
    get_intersection_node,
    has_cycle,
    has_cycle_with_set,
    is_palindrome,
    is_palindrome_by_reversal,
    merge_k_lists,
    merge_two_lists,
    merge_two_lists_recursive,
    middle_node,
    remove_elements,
    remove_nth_from_end,
    remove_nth_from_end_two_pointers,
    reverse_between,
    reverse_k_group,
    reverse_list,
    sort_list,
    swap_pairs,
)
from algokit.nodes import RandomNode, list_from_values, list_to_values


def nodes_of(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


def cyclic_list(values, pos):
    head = list_from_values(values)
    nodes = nodes_of(head)
    nodes[-1].next = nodes[pos]
    return head, nodes[pos]


def random_list(values, randoms):
    nodes = [RandomNode(v) for v in values]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
    for node, target in zip(nodes, randoms):
        node.random = None if target is None else nodes[target]
    return nodes


def describe_random(head):
    nodes = nodes_of(head)
    index = {id(n): i for i, n in enumerate(nodes)}
    return [
        (n.val, None if n.random is None else index[id(n.random)]) for n in nodes
    ]


def test_intersection_found():
    shared = list_from_values([8, 4, 5])
    a = list_from_values([4, 1])
    nodes_of(a)[-1].next = shared
    b = list_from_values([5, 6, 1])
    nodes_of(b)[-1].next = shared
    assert get_intersection_node(a, b) is shared


def test_no_intersection():
    a = list_from_values([2, 6, 4])
    b = list_from_values([1, 5])
    assert get_intersection_node(a, b) is None


@pytest.mark.parametrize(
    "values", [[], [1], [1, 2, 2, 1], [1, 2, 3, 2, 1], [1, 2], [1, 2, 3]]
)
def test_palindrome_variants_agree(values):
    expected = values == values[::-1]
    assert is_palindrome(list_from_values(values)) is expected
    head = list_from_values(values)
    assert is_palindrome_by_reversal(head) is expected
    assert list_to_values(head) == values


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4]])
def test_middle_node(values):
    head = list_from_values(values)
    assert middle_node(head) is nodes_of(head)[len(values) // 2]


def test_middle_of_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_to_values(reverse_list(list_from_values(values))) == values[::-1]


@pytest.mark.parametrize("pos", [0, 1, 3])
def test_cycle_detection(pos):
    head, start = cyclic_list([3, 2, 0, -4], pos)
    assert detect_cycle(head) is start
    assert detect_cycle_floyd(head) is start
    assert has_cycle(head) is True
    assert has_cycle_with_set(head) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_no_cycle(values):
    head = list_from_values(values)
    assert detect_cycle(head) is None
    assert detect_cycle_floyd(head) is None
    assert has_cycle(head) is False
    assert has_cycle_with_set(head) is False


@pytest.mark.parametrize("merge", [merge_two_lists, merge_two_lists_recursive])
@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5], [1, 2, 3])]
)
def test_merge_two_lists(merge, a, b):
    assert list_to_values(merge(list_from_values(a), list_from_values(b))) == sorted(
        a + b
    )


@pytest.mark.parametrize("merge", [merge_two_lists, merge_two_lists_recursive])
def test_merge_takes_first_list_on_ties(merge):
    l1 = list_from_values([1])
    l2 = list_from_values([1])
    assert merge(l1, l2) is l1


def digits(number):
    return [int(d) for d in reversed(str(number))]


@pytest.mark.parametrize("x, y", [(342, 465), (0, 0), (9999999, 9999), (5, 5)])
def test_add_two_numbers(x, y):
    result = add_two_numbers(list_from_values(digits(x)), list_from_values(digits(y)))
    assert list_to_values(result) == digits(x + y)


@pytest.mark.parametrize(
    "remove", [remove_nth_from_end, remove_nth_from_end_two_pointers]
)
@pytest.mark.parametrize("values, n", [([1, 2, 3, 4, 5], 2), ([1], 1), ([1, 2], 1), ([1, 2], 2)])
def test_remove_nth_from_end(remove, values, n):
    expected = list(values)
    del expected[-n]
    assert list_to_values(remove(list_from_values(values), n)) == expected


@pytest.mark.parametrize(
    "remove", [remove_nth_from_end, remove_nth_from_end_two_pointers]
)
@pytest.mark.parametrize("n", [0, 4])
def test_remove_nth_out_of_range(remove, n):
    with pytest.raises(ValueError):
        remove(list_from_values([1, 2, 3]), n)


def test_reverse_k_group_matches_swap_pairs():
    values = [1, 2, 3, 4, 5]
    assert list_to_values(reverse_k_group(list_from_values(values), 2)) == list_to_values(
        swap_pairs(list_from_values(values))
    )


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3]])
def test_reverse_k_group_edges(values):
    n = len(values)
    assert list_to_values(reverse_k_group(list_from_values(values), 1)) == values
    assert list_to_values(reverse_k_group(list_from_values(values), n)) == values[::-1]
    assert list_to_values(reverse_k_group(list_from_values(values), n + 1)) == values


def test_reverse_k_group_keeps_short_tail():
    values = [1, 2, 3, 4, 5]
    result = list_to_values(reverse_k_group(list_from_values(values), 3))
    assert result[:3] == values[:3][::-1]
    assert result[3:] == values[3:]


def test_reverse_k_group_rejects_zero():
    with pytest.raises(ValueError):
        reverse_k_group(list_from_values([1, 2]), 0)


def test_swap_pairs():
    assert list_to_values(swap_pairs(list_from_values([1, 2, 3, 4]))) == [2, 1, 4, 3]
    assert swap_pairs(None) is None


@pytest.mark.parametrize("copier", [copy_random_list, copy_random_list_interleaved])
def test_copy_random_list(copier):
    nodes = random_list([7, 13, 11, 10, 1], [None, 0, 4, 2, 0])
    before = describe_random(nodes[0])
    copy = copier(nodes[0])
    assert describe_random(copy) == before
    assert describe_random(nodes[0]) == before
    originals = {id(n) for n in nodes}
    assert all(id(n) not in originals for n in nodes_of(copy))


@pytest.mark.parametrize("copier", [copy_random_list, copy_random_list_interleaved])
def test_copy_empty_random_list(copier):
    assert copier(None) is None


@pytest.mark.parametrize("values", [[], [1], [4, 2, 1, 3], [-1, 5, 3, 4, 0], [2, 2, 1]])
def test_sort_list(values):
    assert list_to_values(sort_list(list_from_values(values))) == sorted(values)


def test_merge_k_lists():
    groups = [[1, 4, 5], [1, 3, 4], [2, 6]]
    merged = merge_k_lists([list_from_values(g) for g in groups])
    assert list_to_values(merged) == sorted(sum(groups, []))


def test_merge_k_lists_empty_inputs():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None]) is None


@pytest.mark.parametrize("values, val", [([1, 2, 6, 3, 4, 5, 6], 6), ([], 1), ([7, 7, 7], 7)])
def test_remove_elements(values, val):
    result = list_to_values(remove_elements(list_from_values(values), val))
    assert result == [v for v in values if v != val]


def test_reverse_between_example():
    head = list_from_values([1, 2, 3, 4, 5])
    assert list_to_values(reverse_between(head, 2, 4)) == [1, 4, 3, 2, 5]


@pytest.mark.parametrize("left, right", [(1, 1), (1, 5), (3, 5), (4, 4)])
def test_reverse_between_ranges(left, right):
    values = [1, 2, 3, 4, 5]
    expected = values[: left - 1] + values[left - 1 : right][::-1] + values[right:]
    assert list_to_values(reverse_between(list_from_values(values), left, right)) == expected


@pytest.mark.parametrize("left, right", [(0, 2), (3, 2), (2, 6)])
def test_reverse_between_invalid(left, right):
    with pytest.raises(ValueError):
        reverse_between(list_from_values([1, 2, 3, 4, 5]), left, right)