import pytest

from dsakit.linked_list import LinkedList


def build(values):
    linked = LinkedList()
    for value in values:
        linked.append(value)
    return linked


def test_append_keeps_order():
    values = [2, 4, 6, 8, 10]
    assert list(build(values)) == values
    assert len(build(values)) == len(values)


def test_prepend_reverses_order():
    linked = LinkedList()
    for value in [1, 2, 3]:
        linked.prepend(value)
    assert list(linked) == [3, 2, 1]


def test_source_example():
    linked = build([2, 4, 6, 8, 10])
    linked.insert(3, 2)
    linked.insert(1, 0)
    assert list(linked) == [1, 2, 4, 3, 6, 8, 10]
    linked.remove(4)
    linked.remove(1)
    linked.remove(5)
    assert list(linked) == [2, 4, 6, 8]
    assert linked.get(2) == 6
    assert linked.find(8) == 3


@pytest.mark.parametrize("position", [0, 1, 2, 3, 4])
def test_insert_matches_list_insert(position):
    values = [10, 20, 30, 40]
    linked = build(values)
    linked.insert(99, position)
    expected = list(values)
    expected.insert(position, 99)
    assert list(linked) == expected
    assert len(linked) == len(expected)


def test_insert_past_end_appends():
    linked = build([1, 2])
    linked.insert(7, 50)
    assert list(linked)[-1] == 7
    linked.append(8)
    assert list(linked)[-2:] == [7, 8]


def test_insert_negative_raises():
    with pytest.raises(IndexError):
        build([1]).insert(5, -1)


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_remove_is_one_based(position):
    values = [5, 6, 7, 8]
    linked = build(values)
    removed = linked.remove(position)
    expected = list(values)
    assert removed == expected.pop(position - 1)
    assert list(linked) == expected


def test_remove_tail_then_append():
    linked = build([1, 2, 3])
    linked.remove(3)
    linked.append(4)
    assert list(linked) == [1, 2, 4]


def test_remove_only_node_then_append():
    linked = build([1])
    linked.remove(1)
    assert len(linked) == 0
    linked.append(9)
    assert list(linked) == [9]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_remove_invalid_raises(position):
    linked = build([1, 2, 3])
    with pytest.raises(IndexError):
        linked.remove(position)
    assert list(linked) == [1, 2, 3]


def test_get_round_trip():
    values = ["a", "b", "c"]
    linked = build(values)
    assert [linked.get(i) for i in range(len(values))] == values


@pytest.mark.parametrize("index", [-1, 3])
def test_get_out_of_bounds(index):
    with pytest.raises(IndexError):
        build([1, 2, 3]).get(index)


def test_find_first_occurrence_and_missing():
    linked = build([4, 5, 4])
    assert linked.find(4) == 0
    with pytest.raises(ValueError):
        linked.find(42)