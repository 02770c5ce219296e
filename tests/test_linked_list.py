import pytest

from drillbook.linked_list import LinkedList, Node


def test_from_iterable_keeps_order():
    values = [12, 8, 5, 7]
    assert list(LinkedList.from_iterable(values)) == values


def test_insert_at_beginning_prepends():
    values = [12, 8, 5, 7]
    linked = LinkedList.from_iterable(values)
    linked.insert_at_beginning(100)
    assert list(linked) == [100] + values


def test_source_sequence_of_inserts():
    linked = LinkedList()
    for value in (10, 20, 30):
        linked.insert_at_beginning(value)
    linked.insert_at_end(40)
    linked.insert_at_end(50)
    assert list(linked) == [30, 20, 10, 40, 50]


def test_insert_at_end_on_empty_list():
    linked = LinkedList()
    linked.insert_at_end(7)
    assert list(linked) == [7]
    assert linked.head.data == 7


def test_len_counts_nodes():
    values = [0, 1, 2, 3]
    assert len(LinkedList.from_iterable(values)) == len(values)
    assert len(LinkedList()) == 0


def test_contains():
    linked = LinkedList.from_iterable([1, 2, 3])
    assert 2 in linked
    assert 19 not in linked


def test_delete_tail_removes_last():
    values = [0, 1, 2, 3]
    linked = LinkedList.from_iterable(values)
    assert linked.delete_tail() == values[-1]
    assert list(linked) == values[:-1]


def test_delete_tail_single_node_empties_list():
    linked = LinkedList.from_iterable([5])
    assert linked.delete_tail() == 5
    assert linked.head is None
    assert list(linked) == []


def test_delete_tail_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete_tail()


def test_node_links():
    tail = Node(5)
    head = Node(2, tail)
    assert head.next is tail
    assert head.next.data == 5
    assert tail.next is None


def test_display_values(capsys):
    values = [10, 20, 30]
    LinkedList.from_iterable(values).display()
    out = capsys.readouterr().out
    assert out.splitlines() == [str(v) for v in values]


def test_display_empty(capsys):
    LinkedList().display()
    assert capsys.readouterr().out == "Linked list is empty\n"