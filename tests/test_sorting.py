import random

import pytest

from dsakit.sorting import (
    better_bubble_sort,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_ARRAYS = [
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
    [10, 9, 8, 7, 6, 5, 4, 4, 3, 3, 3, 1],
    [10, 9, 8, 7, 6, 5, 22, 3, 2, 1],
    [10, 9, 8, 7, 6, 5, 5, 4, 4, 3, 3, 2, 1, 1],
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(25)]


@pytest.mark.parametrize("data", SOURCE_ARRAYS)
def test_source_examples(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert better_bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_random_lists():
    for data in _random_lists():
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert better_bubble_sort(data) == expected
        assert heap_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert selection_sort(data) == expected


def test_input_left_unchanged():
    data = [5, 3, 9, 1, 1, 0]
    snapshot = list(data)
    expected = sorted(snapshot)
    results = [
        bubble_sort(data),
        better_bubble_sort(data),
        heap_sort(data),
        insertion_sort(data),
        merge_sort(data),
        quick_sort(data),
        selection_sort(data),
    ]
    assert data == snapshot
    for result in results:
        assert result is not data
        assert result == expected


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert better_bubble_sort([]) == []
    assert better_bubble_sort([42]) == [42]
    assert heap_sort([]) == []
    assert heap_sort([42]) == [42]
    assert insertion_sort([]) == []
    assert insertion_sort([42]) == [42]
    assert merge_sort([]) == []
    assert merge_sort([42]) == [42]
    assert quick_sort([]) == []
    assert quick_sort([42]) == [42]
    assert selection_sort([]) == []
    assert selection_sort([42]) == [42]


def test_accepts_any_iterable():
    data = (3, 1, 2)
    expected = [1, 2, 3]
    assert bubble_sort(iter(data)) == expected
    assert better_bubble_sort(iter(data)) == expected
    assert heap_sort(iter(data)) == expected
    assert insertion_sort(iter(data)) == expected
    assert merge_sort(iter(data)) == expected
    assert quick_sort(iter(data)) == expected
    assert selection_sort(iter(data)) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert better_bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected


def test_already_sorted_and_reversed():
    ascending = list(range(30))
    assert bubble_sort(ascending) == ascending
    assert bubble_sort(reversed(ascending)) == ascending
    assert better_bubble_sort(ascending) == ascending
    assert better_bubble_sort(reversed(ascending)) == ascending
    assert heap_sort(ascending) == ascending
    assert heap_sort(reversed(ascending)) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(reversed(ascending)) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(reversed(ascending)) == ascending
    assert quick_sort(ascending) == ascending
    assert quick_sort(reversed(ascending)) == ascending
    assert selection_sort(ascending) == ascending
    assert selection_sort(reversed(ascending)) == ascending


def test_result_is_permutation():
    data = [4, -2, 4, 7, 0, -2, 9]
    results = [
        bubble_sort(data),
        better_bubble_sort(data),
        heap_sort(data),
        insertion_sort(data),
        merge_sort(data),
        quick_sort(data),
        selection_sort(data),
    ]
    for result in results:
        assert len(result) == len(data)
        assert all(result.count(v) == data.count(v) for v in set(data))
        assert all(a <= b for a, b in zip(result, result[1:]))


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in merge_sort(Keyed(p) for p in pairs)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]