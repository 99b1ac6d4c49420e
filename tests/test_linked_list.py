import pytest

from algonotes.linked_list import LinkedList


def test_construct_from_items_keeps_order():
    lst = LinkedList([4, 5, 6])
    assert list(lst) == [4, 5, 6]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_insert_front_middle_and_end():
    lst = LinkedList([1, 3])
    lst.insert(0, 0)
    lst.insert(2, 2)
    lst.insert(len(lst), 4)
    assert list(lst) == [0, 1, 2, 3, 4]


def test_insert_out_of_range_raises():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.insert(5, 9)
    with pytest.raises(IndexError):
        lst.insert(-1, 9)
    assert list(lst) == [1]


def test_get_every_position():
    items = ["a", "b", "c", "d"]
    lst = LinkedList(items)
    assert [lst.get(i) for i in range(len(items))] == items


def test_get_out_of_range_raises():
    with pytest.raises(IndexError):
        LinkedList([1, 2]).get(2)


def test_delete_returns_value_and_shrinks():
    lst = LinkedList([10, 20, 30, 40])
    assert lst.delete(0) == 10
    assert lst.delete(1) == 30
    assert lst.delete(len(lst) - 1) == 40
    assert list(lst) == [20]


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete(0)


def test_display_prints_and_returns_length(capsys):
    lst = LinkedList([7, 8, 9])
    assert lst.display() == 3
    assert capsys.readouterr().out == "7 8 9 \n"