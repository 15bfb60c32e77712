import math

import pytest
from hypothesis import given, strategies as st

from dsakit.hashing import (
    LinearProbingTable,
    QuadraticProbingTable,
    TableFullError,
    count_beautiful_pairs,
    digit_count_matches,
    division_method,
    division_overwrite,
    find_duplicates,
    mid_square,
)


def test_linear_insert_goes_to_home_slot():
    table = LinearProbingTable(10)
    assert table.insert(23) == 23 % 10
    assert list(table)[23 % 10] == 23


def test_linear_collision_moves_to_next_slot():
    table = LinearProbingTable(10)
    first = table.insert(13)
    second = table.insert(23)
    assert second == first + 1


def test_linear_probe_wraps_around():
    table = LinearProbingTable(10)
    table.insert(9)
    assert table.insert(19) == 0
    assert list(table)[0] == 19


def test_linear_full_table_raises():
    table = LinearProbingTable(3)
    for key in (1, 2, 3):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(4)


def test_len_is_slot_count_and_count_is_keys():
    table = LinearProbingTable(7)
    table.insert(5)
    assert len(table) == 7
    assert table.count == 1


def test_invalid_size():
    with pytest.raises(ValueError):
        LinearProbingTable(0)


@given(st.lists(st.integers(min_value=0, max_value=1000), max_size=10, unique=True))
def test_linear_stores_every_key(keys):
    table = LinearProbingTable(10)
    for key in keys:
        table.insert(key)
    assert sorted(k for k in table if k is not None) == sorted(keys)


def test_quadratic_probe_sequence():
    table = QuadraticProbingTable(10)
    assert [table.insert(key) for key in (0, 10, 20)] == [0, 1, 4]


def test_quadratic_can_fail_with_free_slots():
    table = QuadraticProbingTable(10)
    inserted = 0
    with pytest.raises(TableFullError):
        for key in range(0, 1000, 10):
            table.insert(key)
            inserted += 1
    assert inserted < 10
    assert None in list(table)


def test_count_beautiful_pairs_all_ones():
    assert count_beautiful_pairs([1] * 6) == math.comb(6, 2)


def test_count_beautiful_pairs_respects_order():
    assert count_beautiful_pairs([2, 4]) == 0
    assert count_beautiful_pairs([4, 2]) == 1


def test_count_beautiful_pairs_empty():
    assert count_beautiful_pairs([]) == 0


def test_division_method_reports_collision():
    result = division_method(10, [12, 22, 5])
    assert result.table[2] == 12
    assert result.table[5] == 5
    assert result.collisions == [22]
    assert result.table.count(None) == 8


def test_division_overwrite_keeps_last():
    table = division_overwrite(10, [12, 22, 5])
    assert table[2] == 22
    assert table[5] == 5


def test_division_invalid_size():
    with pytest.raises(ValueError):
        division_method(0, [1])


def test_digit_count_matches_examples():
    assert digit_count_matches("1210") is True
    assert digit_count_matches("030") is False


def test_digit_count_rejects_non_digits():
    with pytest.raises(ValueError):
        digit_count_matches("12a")


def test_find_duplicates_example():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    assert find_duplicates(nums) == [2, 3]
    assert nums == [4, 3, 2, 7, 8, 2, 3, 1]


def test_find_duplicates_out_of_range():
    with pytest.raises(ValueError):
        find_duplicates([1, 5])


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_mid_square_is_a_digit_and_symmetric(value):
    assert 0 <= mid_square(value) <= 9
    assert mid_square(value) == mid_square(-value)