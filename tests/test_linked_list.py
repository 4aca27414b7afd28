import pytest

from dsakit.linked_list import LinkedList


def _source_list():
    lst = LinkedList()
    lst.insert_at_end(10)
    lst.insert_at_end(20)
    lst.insert_at_beginning(5)
    lst.insert_at_end(30)
    lst.insert_at_beginning(1)
    return lst


def test_source_example_sequence():
    lst = _source_list()
    assert lst.format() == "List: 1 -> 5 -> 10 -> 20 -> 30 -> NULL"
    assert lst.delete_at_end() == 30
    assert lst.format() == "List: 1 -> 5 -> 10 -> 20 -> NULL"
    assert lst.delete_at_position(3) == 10
    assert lst.format() == "List: 1 -> 5 -> 20 -> NULL"
    assert lst.format_reverse() == "Reverse: 20 <- 5 <- 1 <- NULL"
    assert lst.is_circular() is False


def test_constructor_iter_len_and_reversed():
    values = [3, 1, 4, 1, 5]
    lst = LinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)
    assert list(reversed(lst)) == values[::-1]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.format() == "List: NULL"
    assert lst.is_circular() is False
    assert lst.is_palindrome() is True
    with pytest.raises(IndexError):
        lst.delete_at_end()
    with pytest.raises(IndexError):
        lst.delete_at_position(1)


def test_delete_at_end_single_element():
    lst = LinkedList([7])
    assert lst.delete_at_end() == 7
    assert list(lst) == []


def test_delete_first_position():
    lst = LinkedList([1, 2, 3])
    assert lst.delete_at_position(1) == 1
    assert list(lst) == [2, 3]


def test_delete_last_position():
    lst = LinkedList([1, 2, 3])
    assert lst.delete_at_position(3) == 3
    assert list(lst) == [1, 2]


@pytest.mark.parametrize("position", [0, -2])
def test_invalid_position(position):
    with pytest.raises(ValueError):
        LinkedList([1, 2]).delete_at_position(position)


@pytest.mark.parametrize("position", [3, 10])
def test_position_out_of_bounds(position):
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.delete_at_position(position)
    assert list(lst) == [1, 2]


def test_palindrome_source_example():
    assert LinkedList([1, 2, 3, 2, 1]).is_palindrome() is True
    assert LinkedList([1, 2, 3, 1]).is_palindrome() is False
    assert LinkedList([4]).is_palindrome() is True


def test_insert_at_beginning_reverses_order():
    lst = LinkedList()
    for value in range(5):
        lst.insert_at_beginning(value)
    assert list(lst) == list(reversed(range(5)))