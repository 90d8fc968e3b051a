import random

import pytest

from algorithms.heap import IndexedMinHeap


def test_pops_in_key_order():
    heap = IndexedMinHeap()
    for item, key in [(0, 5), (1, 1), (2, 3), (3, 4), (4, 2)]:
        heap.push(item, key)
    assert [heap.pop() for _ in range(5)] == [(1, 1), (2, 4), (3, 2), (4, 3), (5, 0)]
    assert not heap


def test_equal_keys_pop_by_item_id():
    heap = IndexedMinHeap([(7, 3), (7, 1), (7, 2), (7, 0)])
    assert [heap.pop()[1] for _ in range(4)] == [0, 1, 2, 3]


def test_decrease_key_moves_item_forward():
    heap = IndexedMinHeap([(10, 0), (20, 1), (30, 2)])
    heap.decrease_key(2, 5)
    assert heap.key_of(2) == 5
    assert heap.pop() == (5, 2)
    assert heap.pop() == (10, 0)


def test_decrease_key_to_infinity_entries():
    inf = float("inf")
    heap = IndexedMinHeap([(0, 0), (inf, 1), (inf, 2)])
    heap.decrease_key(2, 3)
    assert [heap.pop() for _ in range(3)] == [(0, 0), (3, 2), (inf, 1)]


def test_decrease_key_refuses_to_increase():
    heap = IndexedMinHeap([(1, 0)])
    with pytest.raises(ValueError):
        heap.decrease_key(0, 2)


def test_decrease_key_unknown_item():
    heap = IndexedMinHeap([(1, 0)])
    with pytest.raises(KeyError):
        heap.decrease_key(9, 0)


def test_duplicate_item_rejected():
    heap = IndexedMinHeap([(1, 0)])
    with pytest.raises(ValueError):
        heap.push(0, 3)
    with pytest.raises(ValueError):
        IndexedMinHeap([(1, 0), (2, 0)])


def test_empty_heap_raises():
    heap = IndexedMinHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_membership_tracks_pops():
    heap = IndexedMinHeap([(1, 0), (2, 1)])
    assert 0 in heap and 1 in heap
    heap.pop()
    assert 0 not in heap
    assert len(heap) == 1


def test_random_operations_match_sorted_order():
    rng = random.Random(7)
    keys = {i: rng.randint(0, 100) for i in range(60)}
    heap = IndexedMinHeap((k, i) for i, k in keys.items())
    for _ in range(80):
        item = rng.randrange(60)
        lower = keys[item] - rng.randint(0, 20)
        heap.decrease_key(item, lower)
        keys[item] = lower

    popped = [heap.pop() for _ in range(len(heap))]
    assert popped == sorted((k, i) for i, k in keys.items())
