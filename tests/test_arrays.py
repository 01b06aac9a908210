from collections import Counter

import pytest

from algokit.arrays import (
    find_duplicate,
    find_duplicates,
    find_min_diff,
    largest_rectangle_area,
    majority_element,
    max_area,
    max_profit,
    max_profit_multiple,
    max_score,
    merge_sorted,
    move_zeroes,
    remove_duplicates,
    sort_colors,
    subarray_sum,
    subarrays_div_by_k,
    three_sum,
    two_sum,
)


def test_max_area_two_equal_lines():
    assert max_area([4, 4]) == 4


def test_max_area_scales_with_heights():
    heights = [1, 8, 6, 2, 5, 4, 8, 3, 7]
    assert max_area([h * 2 for h in heights]) == 2 * max_area(heights)


def test_max_area_at_least_outer_pair():
    heights = [3, 9, 1, 4, 6]
    assert max_area(heights) >= min(heights[0], heights[-1]) * (len(heights) - 1)


def test_max_area_needs_two_lines():
    with pytest.raises(ValueError):
        max_area([5])


def test_max_profit_descending_matches_single_day():
    prices = [9, 7, 4, 1]
    assert max_profit(prices) == max_profit([prices[0]])
    assert max_profit_multiple(prices) == max_profit(prices)


def test_max_profit_ascending_matches_multiple():
    prices = [1, 3, 4, 8, 10]
    assert max_profit(prices) == max_profit_multiple(prices)


def test_single_trade_never_beats_many():
    prices = [7, 1, 5, 3, 6, 4]
    assert max_profit(prices) <= max_profit_multiple(prices)


def test_max_profit_empty():
    with pytest.raises(ValueError):
        max_profit([])
    with pytest.raises(ValueError):
        max_profit_multiple([])


def test_max_score_all_cards():
    cards = [1, 2, 3, 4, 5, 6, 1]
    assert max_score(cards, len(cards)) == sum(cards)


def test_max_score_one_card_picks_better_end():
    cards = [4, 1, 1, 9]
    assert max_score(cards, 1) == max(cards[0], cards[-1])


def test_max_score_too_many_cards():
    with pytest.raises(ValueError):
        max_score([1, 2], 3)


def test_three_sum_known_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_invariants():
    nums = [3, -2, 1, 0, -1, 2, -3, 0, 0]
    result = three_sum(nums)
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    available = Counter(nums)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert not Counter(triplet) - available


def test_three_sum_ignores_order():
    nums = [0, -5, 2, 3, -1, 1, 4]
    assert three_sum(nums) == three_sum(list(reversed(nums)))


def test_majority_element():
    assert majority_element([3, 2, 3]) == 3
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i != j
    assert nums[i] + nums[j] == 9


def test_two_sum_no_pair():
    assert two_sum([1, 2], 10) == []


def test_remove_duplicates_in_place():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    count = remove_duplicates(nums)
    assert nums[:count] == sorted(set(nums[:count]) | {0, 1, 2, 3, 4})
    assert count == len({0, 1, 2, 3, 4})


def test_move_zeroes_keeps_order():
    original = [0, 1, 0, 3, 12]
    nums = list(original)
    assert move_zeroes(nums) is None
    nonzero = [v for v in original if v]
    assert nums[: len(nonzero)] == nonzero
    assert nums[len(nonzero):] == [v for v in original if not v]


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    assert find_duplicate([1, 2, 3]) is None


def test_find_duplicates():
    assert find_duplicates([4, 3, 2, 7, 8, 2, 3, 1]) == [2, 3]
    assert find_duplicates([1, 1, 1]) == [1, 1]


def test_subarray_sum_example():
    assert subarray_sum([1, 1, 1], 2) == 2


def test_subarray_sum_reverse_invariant():
    nums = [3, 4, 7, 2, -3, 1, 4, 2]
    assert subarray_sum(nums, 7) == subarray_sum(nums[::-1], 7)
    assert subarray_sum(nums, sum(nums)) >= 1


def test_sort_colors():
    original = [2, 0, 2, 1, 1, 0]
    nums = list(original)
    sort_colors(nums)
    assert nums == sorted(original)


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_single_bar_and_scaling():
    assert largest_rectangle_area([7]) == 7
    heights = [2, 4, 1, 3, 5]
    assert largest_rectangle_area([h * 3 for h in heights]) == 3 * largest_rectangle_area(heights)


def test_largest_rectangle_empty():
    with pytest.raises(ValueError):
        largest_rectangle_area([])


def test_merge_sorted():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_without_room():
    with pytest.raises(ValueError):
        merge_sorted([1], 1, [2], 1)


def test_subarrays_div_by_k_example():
    assert subarrays_div_by_k([4, 5, 0, -2, -3, 1], 5) == 7


def test_subarrays_div_by_k_covers_zero_sums():
    nums = [2, -2, 3, -3, 5]
    assert subarrays_div_by_k(nums, 4) >= subarray_sum(nums, 0)


def test_subarrays_div_by_zero():
    with pytest.raises(ValueError):
        subarrays_div_by_k([1, 2], 0)


def test_find_min_diff_example():
    assert find_min_diff([3, 4, 1, 9, 56, 7, 9, 12], 5) == 6


def test_find_min_diff_all_packets():
    packets = [7, 3, 2, 4, 9, 12, 56]
    assert find_min_diff(packets, len(packets)) == max(packets) - min(packets)


def test_find_min_diff_bad_m():
    with pytest.raises(ValueError):
        find_min_diff([1, 2], 3)
    with pytest.raises(ValueError):
        find_min_diff([1, 2], 0)