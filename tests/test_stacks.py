import pytest

from drillbook.stacks import Queue, Stack, is_valid_brackets


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()[{", False),
        ("()[]{}", True),
        ("{[()]}", True),
        ("(]", False),
        ("", True),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_queue_source_scenario():
    q = Queue(6)
    for value in (4, 14, 24, 34):
        q.push(value)
    assert q.top() == 4
    assert len(q) == 4
    assert q.pop() == 4
    assert q.top() == 14
    assert len(q) == 3


def test_queue_fifo_order_wraps_around():
    q = Queue(3)
    q.push(1)
    q.push(2)
    assert q.pop() == 1
    q.push(3)
    q.push(4)
    assert [q.pop() for _ in range(len(q))] == [2, 3, 4]
    assert len(q) == 0


def test_queue_full_raises():
    q = Queue(2)
    q.push(1)
    q.push(2)
    with pytest.raises(OverflowError):
        q.push(3)


def test_queue_default_capacity():
    q = Queue()
    for value in range(q.max_size):
        q.push(value)
    assert len(q) == q.max_size
    with pytest.raises(OverflowError):
        q.push(0)


def test_queue_empty_raises():
    q = Queue(2)
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.top()


def test_queue_rejects_bad_size():
    with pytest.raises(ValueError):
        Queue(0)


def test_stack_source_scenario():
    s = Stack()
    assert len(s) == 0
    s.push(10)
    s.push(20)
    assert len(s) == 2
    assert s.top() == 20


def test_stack_lifo():
    s = Stack()
    values = [1, 2, 3]
    for value in values:
        s.push(value)
    assert [s.pop() for _ in range(len(s))] == values[::-1]


def test_stack_empty_raises():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()


def test_stack_capacity():
    s = Stack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(OverflowError):
        s.push(3)
    assert len(s) == 2