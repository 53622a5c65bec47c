import pytest

from fractol.linkedlist import LinkedList


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_back_appends():
    lst = LinkedList([1, 2])
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    lst.push_back("y")
    assert list(lst) == ["x", "y"]


def test_len_matches_pushes():
    lst = LinkedList()
    for n in range(10):
        lst.push_back(n)
        lst.push_front(-n)
    assert len(lst) == 20
    assert len(lst) == len(list(lst))


def test_clear_calls_delete_in_order_skipping_none():
    seen = []
    lst = LinkedList(["a", None, "b"])
    lst.clear(seen.append)
    assert seen == ["a", "b"]
    assert len(lst) == 0
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_for_each_visits_all():
    seen = []
    items = [3, 1, 4]
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_returns_new_list():
    original = LinkedList(["ab", "c"])
    mapped = original.map(len)
    assert list(mapped) == [len("ab"), len("c")]
    assert list(original) == ["ab", "c"]
    assert mapped.last() == len("c")


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]