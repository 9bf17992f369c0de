import itertools

import pytest

from algokit.dynamic import (
    can_jump,
    can_partition,
    change,
    climb_stairs,
    coin_change,
    generate_pascal,
    h_index,
    h_index_sorted,
    jump,
    length_of_lis,
    longest_common_subsequence,
    longest_common_subsequence_memo,
    longest_palindrome,
    longest_valid_parentheses,
    max_product,
    max_profit,
    max_profit_multiple,
    min_path_sum,
    minimum_total,
    minimum_total_in_place,
    num_squares,
    single_number,
    sort_colors,
    unique_paths,
    word_break,
)

TRIANGLES = [
    [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]],
    [[-10]],
    [[1], [2, 3]],
    [[5], [-1, 9], [3, 0, -7], [2, 2, 2, 2]],
]


def test_minimum_total_worked_example():
    assert minimum_total([[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]) == 11


@pytest.mark.parametrize("triangle", TRIANGLES)
def test_minimum_total_variants_agree(triangle):
    copy = [list(row) for row in triangle]
    assert minimum_total(triangle) == minimum_total_in_place(copy)


def test_minimum_total_in_place_stores_result_at_apex():
    triangle = [list(row) for row in TRIANGLES[0]]
    result = minimum_total_in_place(triangle)
    assert triangle[0][0] == result


def test_minimum_total_single_row():
    assert minimum_total([[-10]]) == -10


def test_minimum_total_empty_raises():
    with pytest.raises(ValueError):
        minimum_total([])
    with pytest.raises(ValueError):
        minimum_total_in_place([])


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


@pytest.mark.parametrize("prices", [[7, 1, 5, 3, 6, 4], [1, 2, 3, 4, 5], [5, 4, 3], [3, 8, 2, 9]])
def test_single_trade_never_beats_many(prices):
    assert max_profit(prices) <= max_profit_multiple(prices)


def test_max_profit_multiple_rising_prices():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_multiple(prices) == prices[-1] - prices[0]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_coin_change_unit_coin():
    assert coin_change([1], 7) == 7
    assert coin_change([1, 2, 5], 0) == 0


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_negative_amount_raises():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_change_simple_cases():
    assert change(0, [1, 2]) == 1
    assert change(6, [1]) == 1
    assert change(3, [2]) == 0


@pytest.mark.parametrize(
    "coins, amount",
    [([2], 3), ([1, 2, 5], 11), ([3, 7], 5), ([4, 6], 10), ([5], 0)],
)
def test_change_and_coin_change_agree_on_reachability(coins, amount):
    assert (change(amount, coins) > 0) == (coin_change(coins, amount) != -1)


def test_jump_single_element():
    assert jump([0]) == 0


def test_jump_unit_steps():
    nums = [1] * 5
    assert jump(nums) == len(nums) - 1


def test_can_jump_source_examples():
    assert can_jump([2, 3, 1, 1, 4]) is True
    assert can_jump([3, 2, 1, 0, 4]) is False
    assert can_jump([0]) is True


def test_h_index_example():
    assert h_index([3, 0, 6, 1, 5]) == 3


@pytest.mark.parametrize(
    "citations", [[3, 0, 6, 1, 5], [1, 3, 1], [0, 0], [100], [10, 8, 5, 4, 3], []]
)
def test_h_index_sorted_matches(citations):
    assert h_index_sorted(sorted(citations)) == h_index(citations)


def test_h_index_does_not_mutate():
    citations = [3, 0, 6, 1, 5]
    h_index(citations)
    assert citations == [3, 0, 6, 1, 5]


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(2, 15))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_negative_raises():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_generate_pascal_shape_and_sums():
    rows = generate_pascal(8)
    assert [len(row) for row in rows] == list(range(1, 9))
    for i, row in enumerate(rows):
        assert sum(row) == 2**i
        assert row == row[::-1]


def test_generate_pascal_empty_and_negative():
    assert generate_pascal(0) == []
    with pytest.raises(ValueError):
        generate_pascal(-2)


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([-3]) == -3


@pytest.mark.parametrize(
    "nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [0], [], [1, 1, 0, 0, 2, 2, 0, 1]]
)
def test_sort_colors_sorts(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


@pytest.mark.parametrize(
    "a, b",
    [("abcde", "ace"), ("abc", "def"), ("", "abc"), ("bsbininm", "jmjkbkjkv"), ("aaaa", "aa")],
)
def test_lcs_variants_agree(a, b):
    assert longest_common_subsequence(a, b) == longest_common_subsequence_memo(a, b)


def test_lcs_invariants():
    assert longest_common_subsequence("abcde", "abcde") == len("abcde")
    assert longest_common_subsequence("abc", "def") == 0
    assert longest_common_subsequence("", "x") == 0


def test_length_of_lis_invariants():
    assert length_of_lis([1, 2, 3, 4, 5, 6]) == 6
    assert length_of_lis([9, 7, 5, 3]) == 1
    assert length_of_lis([7, 7, 7]) == 1
    assert length_of_lis([]) == 0


def test_max_product_cases():
    assert max_product([3, -1]) == 3
    assert max_product([-2, 0, -1]) == 0
    assert max_product([-5]) == -5


def test_max_product_never_below_max_element():
    for nums in ([2, 3, -2, 4], [-2, -3, -4], [0, 2], [-1, -1]):
        assert max_product(nums) >= max(nums)


def test_max_product_empty_raises():
    with pytest.raises(ValueError):
        max_product([])


def test_can_partition_cases():
    assert can_partition([1, 5, 11, 5]) is True
    assert can_partition([1, 2, 3, 5]) is False
    assert can_partition([1, 2, 4]) is False


def test_longest_valid_parentheses():
    assert longest_valid_parentheses("()" * 3) == len("()" * 3)
    assert longest_valid_parentheses(")(") == 0
    assert longest_valid_parentheses("") == 0
    assert longest_valid_parentheses("(()") == 2


@pytest.mark.parametrize("m, n", [(2, 3), (3, 7), (4, 4), (5, 2)])
def test_unique_paths_recurrence_and_symmetry(m, n):
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)
    assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_edges():
    assert unique_paths(1, 9) == 1
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_min_path_sum_cases():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7
    assert min_path_sum([[4]]) == 4
    row = [1, 2, 3]
    assert min_path_sum([row]) == sum(row)


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])


@pytest.mark.parametrize("s", ["babad", "cbbd", "racecar", "abc", "a", "aaaa", "forgeeksskeegfor"])
def test_longest_palindrome_is_longest_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    longest = max(
        j - i
        for i, j in itertools.combinations(range(len(s) + 1), 2)
        if s[i:j] == s[i:j][::-1]
    )
    assert len(result) == longest


def test_longest_palindrome_ties_and_whole():
    assert longest_palindrome("abc") == "a"
    assert longest_palindrome("racecar") == "racecar"
    assert longest_palindrome("") == ""


def test_word_break():
    assert word_break("leetcode", ["leet", "code"]) is True
    assert word_break("catsandog", ["cats", "dog", "sand", "and", "cat"]) is False
    assert word_break("", ["a"]) is True


def test_num_squares_perfect_squares():
    for root in range(1, 8):
        assert num_squares(root * root) == 1
    assert num_squares(0) == 0


def test_num_squares_at_most_four():
    assert all(1 <= num_squares(n) <= 4 for n in range(1, 60))
    assert num_squares(7) == 4


def test_num_squares_negative_raises():
    with pytest.raises(ValueError):
        num_squares(-4)