import pytest

from dsakit.linked_list import SinglyLinkedList


def test_append_keeps_order():
    values = [0, 1, 2, 3]
    linked = SinglyLinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)
    assert linked.head.value == values[0]


def test_empty_list():
    linked = SinglyLinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert linked.head is None


def test_reverse():
    values = [0, 1, 2, 3]
    linked = SinglyLinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.append(9)
    assert list(linked) == values[::-1] + [9]


def test_reverse_twice_is_identity():
    values = [5, 8, 1, 4, 2]
    linked = SinglyLinkedList(values)
    linked.reverse()
    linked.reverse()
    assert list(linked) == values


def test_reversed_values_does_not_change_list():
    values = [1, 2, 3, 4]
    linked = SinglyLinkedList(values)
    assert linked.reversed_values() == values[::-1]
    assert list(linked) == values


def test_insert_at_head_middle_and_end():
    linked = SinglyLinkedList([10, 20, 30])
    linked.insert(5, 1)
    assert list(linked) == [5, 10, 20, 30]
    linked.insert(15, 3)
    assert list(linked) == [5, 10, 15, 20, 30]
    linked.insert(40, 6)
    assert list(linked) == [5, 10, 15, 20, 30, 40]
    linked.append(50)
    assert list(linked)[-1] == 50
    assert len(linked) == 7


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_invalid_position(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert(99, position)
    assert list(linked) == [1, 2, 3]


def test_delete_positions():
    linked = SinglyLinkedList([1, 2, 3, 4])
    assert linked.delete(1) == 1
    assert list(linked) == [2, 3, 4]
    assert linked.delete(3) == 4
    assert list(linked) == [2, 3]
    linked.append(7)
    assert list(linked) == [2, 3, 7]
    assert linked.delete(2) == 3
    assert list(linked) == [2, 7]


def test_delete_until_empty():
    linked = SinglyLinkedList([1, 2])
    linked.delete(1)
    linked.delete(1)
    assert len(linked) == 0
    assert list(linked) == []
    linked.append(3)
    assert list(linked) == [3]


@pytest.mark.parametrize("position", [0, 4])
def test_delete_invalid_position(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.delete(position)


def test_bubble_sort():
    values = [4, 1, 3, 9, 7, 1]
    linked = SinglyLinkedList(values)
    linked.bubble_sort()
    assert list(linked) == sorted(values)


def test_merge_sort_source_example():
    values = [7, 6, 5, 4, 3, 2, 1]
    linked = SinglyLinkedList(values)
    linked.merge_sort()
    assert list(linked) == sorted(values)
    assert len(linked) == len(values)


def test_merge_sort_keeps_tail_valid():
    linked = SinglyLinkedList([3, 1, 2])
    linked.merge_sort()
    linked.append(0)
    assert list(linked) == [1, 2, 3, 0]


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

    linked = SinglyLinkedList(Keyed(k, t) for k, t in pairs)
    linked.merge_sort()
    assert [item.tag for item in linked] == [t for _, t in sorted(pairs, key=lambda p: p[0])]


def test_sort_empty_and_single():
    empty = SinglyLinkedList()
    empty.merge_sort()
    empty.bubble_sort()
    assert list(empty) == []
    single = SinglyLinkedList([42])
    single.merge_sort()
    assert list(single) == [42]


def test_swap():
    linked = SinglyLinkedList([3, 4, 5, 2, 6, 1, 9])
    linked.swap(3, 4)
    assert list(linked) == [3, 4, 5, 6, 2, 1, 9]
    linked.swap(0, 6)
    assert list(linked) == [9, 4, 5, 6, 2, 1, 3]


def test_swap_same_index():
    linked = SinglyLinkedList([1, 2, 3])
    linked.swap(1, 1)
    assert list(linked) == [1, 2, 3]


@pytest.mark.parametrize("i, j", [(0, 3), (-1, 0), (5, 1)])
def test_swap_out_of_range(i, j):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.swap(i, j)