import pytest

from dsa_drills.linked_list import DoublyLinkedList, SinglyLinkedList


def _doubly(values):
    dll = DoublyLinkedList()
    for value in values:
        dll.append(value)
    return dll


def test_doubly_forward_and_backward():
    values = [10, 20, 30]
    dll = _doubly(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    assert len(dll) == len(values)


def test_doubly_clear_empties_list():
    dll = _doubly([1, 2, 3])
    dll.clear()
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert len(dll) == 0


def test_doubly_append_after_clear():
    dll = _doubly([1, 2])
    dll.clear()
    dll.append(7)
    assert list(dll) == [7]
    assert list(reversed(dll)) == [7]


def test_singly_source_sequence():
    sll = SinglyLinkedList([1])
    sll.push_back(12)
    sll.push_front(0)
    sll.insert(0, 198)
    sll.erase(0)
    assert list(sll) == [0, 1, 12]


def test_singly_str_format():
    assert str(SinglyLinkedList([1, 12])) == "1 -> 12 -> NULL"
    assert str(SinglyLinkedList()) == "NULL"


def test_singly_push_front_on_empty_adds_once():
    sll = SinglyLinkedList()
    sll.push_front(5)
    assert list(sll) == [5]
    assert len(sll) == 1


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_singly_insert_matches_list_insert(index):
    values = [4, 5, 6]
    sll = SinglyLinkedList(values)
    expected = list(values)
    expected.insert(index, 99)
    sll.insert(index, 99)
    assert list(sll) == expected
    assert len(sll) == len(expected)


@pytest.mark.parametrize("index", [0, 1, 2])
def test_singly_erase_matches_list_delete(index):
    values = [4, 5, 6]
    sll = SinglyLinkedList(values)
    expected = list(values)
    del expected[index]
    sll.erase(index)
    assert list(sll) == expected
    assert len(sll) == len(expected)


@pytest.mark.parametrize("index", [-1, 4])
def test_singly_insert_out_of_range(index):
    sll = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        sll.insert(index, 0)


def test_singly_erase_on_empty_raises():
    with pytest.raises(IndexError, match="empty"):
        SinglyLinkedList().erase(0)


@pytest.mark.parametrize("index", [-1, 3])
def test_singly_erase_out_of_range(index):
    sll = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError, match="out of range"):
        sll.erase(index)


def test_singly_clear():
    sll = SinglyLinkedList([1, 2, 3])
    sll.clear()
    assert list(sll) == []
    assert len(sll) == 0