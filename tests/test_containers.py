import pytest

from algonotes.containers import Queue, Stack


def test_stack_demo_sequence(capsys):
    s = Stack()
    assert s.is_empty() is True
    s.push(10)
    s.push(20)
    s.push(30)
    s.display()
    s.pop()
    s.display()
    assert s.is_empty() is False
    assert s.top() == 20
    assert capsys.readouterr().out == "30 20 10 \n20 10 \n"


def test_stack_is_lifo():
    s = Stack()
    for value in range(5):
        s.push(value)
    assert len(s) == 5
    assert [s.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert s.is_empty()


def test_stack_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()


def test_queue_demo_sequence(capsys):
    q = Queue()
    for value in (1, 2, 3, 4):
        q.push(value)
    q.pop()
    q.display()
    q.pop_back()
    q.display()
    assert capsys.readouterr().out == "2 3 4 \n2 3 \n"


def test_queue_is_fifo_and_ends():
    q = Queue()
    for value in "abc":
        q.push(value)
    q.push_front("z")
    assert q.front() == "z"
    assert q.back() == "c"
    assert len(q) == 4
    assert [q.pop() for _ in range(4)] == ["z", "a", "b", "c"]
    assert q.is_empty()


def test_queue_empty_errors():
    q = Queue()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.back()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.pop_back()