import pytest

from algokit.arrays import (
    find_missing_and_repeating,
    first_missing_from_one,
    intersection_sorted,
    is_sorted_and_rotated,
    kth_largest,
    largest,
    leaders,
    length_of_lis,
    longest_consecutive,
    majority_element,
    majority_elements_third,
    max_consecutive_ones,
    merge_sorted_in_place,
    missing_number,
    move_zeroes,
    search_range,
    single_number,
)


def test_largest_picks_maximum():
    arr = [1, 8, 7, 56, 90]
    assert largest(arr) == 90


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_kth_largest_value_and_no_mutation():
    nums = [3, 2, 1, 5, 6, 4]
    assert kth_largest(nums, 2) == 5
    assert kth_largest(nums, 1) == 6
    assert nums == [3, 2, 1, 5, 6, 4]


@pytest.mark.parametrize("k", [0, 7, -1])
def test_kth_largest_bad_k(k):
    with pytest.raises(ValueError):
        kth_largest([3, 2, 1, 5, 6, 4], k)


def test_leaders():
    assert leaders([16, 17, 4, 3, 5, 2]) == [17, 5, 2]


def test_leaders_keeps_equal_values():
    assert leaders([5, 5]) == [5, 5]
    assert leaders([]) == []


def test_majority_element_found():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_absent():
    assert majority_element([1, 2, 3]) is None
    assert majority_element([]) is None


def test_majority_elements_third():
    assert majority_elements_third([3, 2, 3]) == [3]
    assert majority_elements_third([1, 2]) == [1, 2]
    assert majority_elements_third([1, 1, 1, 3, 3, 2, 2, 2]) == [1, 2]
    assert majority_elements_third([1, 2, 3]) == []


def test_max_consecutive_ones():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3
    assert max_consecutive_ones([0, 0]) == 0


@pytest.mark.parametrize("arr", [[1, 2, 3, 5], [2, 3], [1, 2, 3], [7, 8, 9]])
def test_first_missing_from_one_invariant(arr):
    result = first_missing_from_one(arr)
    assert result >= 1
    assert result not in arr
    assert all(i in arr for i in range(1, result))


def test_find_missing_and_repeating_pinned():
    assert find_missing_and_repeating([1, 3, 3]) == (3, 2)


def test_find_missing_and_repeating_invariant():
    arr = [4, 3, 6, 2, 1, 1]
    repeating, missing = find_missing_and_repeating(arr)
    assert arr.count(repeating) == 2
    assert missing not in arr
    assert 1 <= missing <= len(arr)


def test_find_missing_and_repeating_without_repeat_raises():
    with pytest.raises(ValueError):
        find_missing_and_repeating([1, 2, 3])


@pytest.mark.parametrize("nums", [[3, 0, 1], [0, 1], [1, 2], [9, 6, 4, 2, 3, 5, 7, 0, 1], [0]])
def test_missing_number_invariant(nums):
    result = missing_number(nums)
    assert result not in nums
    assert set(nums) | {result} == set(range(len(nums) + 1))


def test_move_zeroes_in_place():
    nums = [0, 1, 0, 3, 12]
    assert move_zeroes(nums) is None
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_all_zero():
    nums = [0, 0]
    move_zeroes(nums)
    assert nums == [0, 0]


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 4, 5, 1, 2], True),
        ([2, 1, 3, 4], False),
        ([1, 2, 3], True),
        ([1, 1, 1], True),
        ([], True),
    ],
)
def test_is_sorted_and_rotated(nums, expected):
    assert is_sorted_and_rotated(nums) is expected


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([7]) == 7


def test_intersection_sorted_deduplicates():
    assert intersection_sorted([1, 2, 2, 3, 4], [2, 2, 4, 6]) == [2, 4]
    assert intersection_sorted([1, 3], [2, 4]) == []


def test_merge_sorted_in_place():
    first = [1, 4, 8, 10]
    second = [2, 3, 9]
    combined = sorted(first + second)
    merge_sorted_in_place(first, second)
    assert first == [1, 2, 3, 4]
    assert second == [8, 9, 10]
    assert first + second == combined


def test_merge_sorted_in_place_with_empty_side():
    first = [5, 6]
    second = []
    merge_sorted_in_place(first, second)
    assert first == [5, 6]
    assert second == []


def test_merge_sorted_in_place_all_second_smaller():
    first = [7, 8, 9]
    second = [1, 2]
    merge_sorted_in_place(first, second)
    assert first == [1, 2, 7]
    assert second == [8, 9]


def test_longest_consecutive():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([1, 5]) == 1
    assert longest_consecutive([]) == len([])


def test_search_range_found_invariant():
    nums = [5, 7, 7, 8, 8, 10]
    first, last = search_range(nums, 8)
    assert nums[first] == 8 and nums[last] == 8
    assert last - first + 1 == nums.count(8)
    assert first == nums.index(8)


def test_search_range_missing():
    assert search_range([5, 7, 7, 8, 8, 10], 6) == (-1, -1)
    assert search_range([], 0) == (-1, -1)


def test_length_of_lis():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert length_of_lis([1, 2, 3]) == 3
    assert length_of_lis([3, 2, 1]) == 1


def test_length_of_lis_bounded_by_length():
    nums = [0, 1, 0, 3, 2, 3]
    assert 1 <= length_of_lis(nums) <= len(nums)