import pytest

from stackkit.singly_linked_list import SinglyLinkedList


def _filled(*items):
    lst = SinglyLinkedList()
    for item in items:
        lst.push_front(item)
    return lst


def test_basics():
    lst = SinglyLinkedList()
    assert lst.pop_front() is None
    for item in (1, 2, 3):
        lst.push_front(item)
    assert [lst.pop_front(), lst.pop_front()] == [3, 2]
    for item in (4, 5):
        lst.push_front(item)
    assert [lst.pop_front() for _ in range(4)] == [5, 4, 1, None]


def test_peek_and_replace_front():
    assert SinglyLinkedList().peek() is None
    lst = _filled(1, 2, 3)
    assert lst.peek() == 3
    lst.replace_front(42)
    assert lst.peek() == 42
    assert lst.pop_front() == 42


def test_replace_front_on_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().replace_front(1)


def test_drain():
    lst = _filled(1, 2, 3)
    assert list(lst.drain()) == [3, 2, 1]
    assert lst.peek() is None


def test_iter_is_repeatable():
    lst = _filled(1, 2, 3)
    assert list(lst) == [3, 2, 1]
    assert list(lst) == [3, 2, 1]


def test_pop_back():
    lst = SinglyLinkedList()
    assert lst.pop_back() is None
    lst = _filled("1", "2", "3")
    assert [lst.pop_back() for _ in range(4)] == ["1", "2", "3", None]


def test_push_back():
    lst = SinglyLinkedList()
    lst.push_back("a")
    lst.push_back("b")
    lst.push_front("z")
    assert lst.keys() == "z->a->b"
    assert lst.pop_back() == "b"


def test_remove():
    assert SinglyLinkedList().remove("3") is None
    lst = _filled("1", "2", "3")
    assert [lst.remove(key) for key in ("2", "1", "3", "3")] == ["2", "1", "3", None]


def test_insert():
    lst = SinglyLinkedList()
    assert lst.remove("3") is None
    for item, expected in (("1", "1"), ("2", "2->1"), ("3", "3->2->1")):
        lst.push_front(item)
        assert lst.keys() == expected
    assert lst.insert("2", "55") is True
    assert lst.keys() == "3->2->55->1"
    for popped, remaining in (("3", "2->55->1"), ("2", "55->1"), ("55", "1"), ("1", "")):
        assert lst.pop_front() == popped
        assert lst.keys() == remaining


def test_insert_into_empty_and_missing():
    lst = SinglyLinkedList()
    assert lst.insert("x", "7") is True
    assert lst.keys() == "7"
    assert lst.insert("absent", "8") is False
    assert lst.keys() == "7"


def test_insert_after_last_element_changes_nothing():
    lst = _filled("1", "2")
    assert lst.insert("1", "9") is True
    assert lst.keys() == "2->1"


@pytest.mark.parametrize("key, found", [("2", "2"), ("4", None)])
def test_search(key, found):
    lst = _filled("1", "2", "3")
    assert lst.keys() == "3->2->1"
    assert lst.search(key) == found


def test_contains():
    lst = _filled("1", "2", "3")
    assert lst.keys() == "3->2->1"
    assert lst.contains("2") is True
    assert lst.contains("4") is False
    assert lst.remove("2") == "2"
    assert lst.contains("2") is False
    assert "3" in lst
    assert "2" not in lst