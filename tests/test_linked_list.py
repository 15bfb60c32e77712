import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import CircularLinkedList, DoublyLinkedList, EmptyListError

ints = st.lists(st.integers(-1000, 1000), max_size=30)


@given(ints)
def test_dll_round_trip(values):
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    assert len(dll) == len(values)


@given(ints, ints)
def test_dll_push_front_and_back(front, back):
    dll = DoublyLinkedList()
    for value in front:
        dll.push_front(value)
    for value in back:
        dll.push_back(value)
    expected = front[::-1] + back
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]


def test_dll_str_format():
    assert str(DoublyLinkedList([1, 2])) == "1 <-> 2 <-> NULL"
    assert str(DoublyLinkedList()) == "NULL"


@given(ints)
def test_cll_round_trip(values):
    cll = CircularLinkedList(values)
    assert list(cll) == values
    assert len(cll) == len(values)
    assert str(cll) == "".join(f"{v}->" for v in values)


@given(ints, ints)
def test_cll_push_front_and_back(front, back):
    cll = CircularLinkedList()
    for value in front:
        cll.push_front(value)
    for value in back:
        cll.push_back(value)
    assert list(cll) == front[::-1] + back


@given(ints)
def test_cll_pop_front_drains_in_order(values):
    cll = CircularLinkedList(values)
    popped = [cll.pop_front() for _ in values]
    assert popped == values
    assert len(cll) == 0
    assert list(cll) == []


@given(ints)
def test_cll_pop_back_drains_in_reverse(values):
    cll = CircularLinkedList(values)
    popped = [cll.pop_back() for _ in values]
    assert popped == values[::-1]
    assert list(cll) == []


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(1, 20), st.integers())
def test_cll_insert_after_within_range(values, position, value):
    position = min(position, len(values))
    cll = CircularLinkedList(values)
    cll.insert_after(position, value)
    expected = values[:position] + [value] + values[position:]
    assert list(cll) == expected
    assert len(cll) == len(expected)


def test_cll_insert_after_last_becomes_back():
    cll = CircularLinkedList([1, 2])
    cll.insert_after(2, 3)
    cll.push_back(4)
    assert list(cll) == [1, 2, 3, 4]
    assert cll.pop_back() == 4


def test_cll_insert_after_wraps():
    cll = CircularLinkedList([1, 2])
    cll.insert_after(3, 9)
    assert list(cll) == [1, 9, 2]


def test_cll_errors_on_empty():
    cll = CircularLinkedList()
    with pytest.raises(EmptyListError):
        cll.pop_front()
    with pytest.raises(EmptyListError):
        cll.pop_back()
    with pytest.raises(EmptyListError):
        cll.insert_after(1, 5)


def test_cll_rejects_non_positive_position():
    cll = CircularLinkedList([1])
    with pytest.raises(ValueError):
        cll.insert_after(0, 5)


def test_cll_usable_after_emptying():
    cll = CircularLinkedList([1])
    assert cll.pop_front() == 1
    cll.push_back(2)
    cll.push_front(3)
    assert list(cll) == [3, 2]