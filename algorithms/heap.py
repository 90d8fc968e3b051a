"""
heap.py — Indexed Binary Min-Heap
=================================
`heapq` cannot lower the key of an entry that is already in the heap, so
Dijkstra built on it either pushes duplicates and skips stale pops, or
rebuilds the whole queue.  This heap keeps a position map keyed by item id,
which makes decrease-key a single O(log n) sift-up.

Entries are `(key, item)` tuples compared as tuples, so equal keys fall
back to the item id.  That is the deterministic tie-break the engine
relies on for a reproducible settlement order.
"""

from typing import Dict, Iterable, List, Optional, Tuple


class IndexedMinHeap:
    """
    Attributes:
        _heap : [(key, item)] in binary-heap order
        _pos  : {item: index into _heap}
    """

    def __init__(self, entries: Optional[Iterable[Tuple[float, int]]] = None):
        self._heap: List[Tuple[float, int]] = []
        self._pos:  Dict[int, int]          = {}
        if entries is not None:
            for key, item in entries:
                if item in self._pos:
                    raise ValueError(f"Item {item!r} is already in the heap")
                self._pos[item] = len(self._heap)
                self._heap.append((key, item))
            # bottom-up heapify, O(n)
            for i in reversed(range(len(self._heap) // 2)):
                self._sift_down(i)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def push(self, item: int, key: float) -> None:
        if item in self._pos:
            raise ValueError(f"Item {item!r} is already in the heap")
        self._heap.append((key, item))
        self._pos[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[float, int]:
        """Remove and return the smallest (key, item).  IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        top  = self._heap[0]
        last = self._heap.pop()
        del self._pos[top[1]]
        if self._heap:
            self._heap[0] = last
            self._pos[last[1]] = 0
            self._sift_down(0)
        return top

    def peek(self) -> Tuple[float, int]:
        if not self._heap:
            raise IndexError("peek at an empty heap")
        return self._heap[0]

    def decrease_key(self, item: int, key: float) -> None:
        i = self._pos[item]                     # KeyError for a stranger
        if key > self._heap[i][0]:
            raise ValueError(f"New key {key!r} is larger than current key {self._heap[i][0]!r}")
        self._heap[i] = (key, item)
        self._sift_up(i)

    def key_of(self, item: int) -> float:
        return self._heap[self._pos[item]][0]

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item) -> bool:
        return item in self._pos

    def __repr__(self) -> str:
        return f"IndexedMinHeap(size={len(self._heap)})"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][1]] = i
        self._pos[heap[j][1]] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[i] < heap[parent]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            left     = 2 * i + 1
            right    = left + 1
            smallest = i
            if left < n and heap[left] < heap[smallest]:
                smallest = left
            if right < n and heap[right] < heap[smallest]:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
