"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest distances over an undirected, non-negatively
weighted Graph, using an indexed min-heap with decrease-key.

Run shape:
  1. Every distance = ∞ except the source = 0.  All vertices go into the heap.
  2. Pop the minimum vertex  →  SETTLED, its distance is final.
  3. For each incident edge whose far end is still unsettled,
     candidate = dist[current] + weight; keep it if strictly smaller.
  4. Exactly V pops, then the table is frozen into a ShortestPaths.

Heap entries are (distance, id), so equal distances settle in id order
and two runs on the same graph settle identically.

A vertex that pops with distance ∞ is unreachable and relaxes nothing:
∞ + w is never treated as a distance.  Zero-weight edges relax normally.

Correctness note: Dijkstra requires non-negative weights.  Negative
weights are not detected here; the answer is simply not guaranteed.
"""

import logging
import time
from typing import Callable, List, Optional

from graph import Graph, InvalidSourceError, is_vertex_index
from algorithms.heap import IndexedMinHeap
from algorithms.result import INFINITY, ShortestPaths
from algorithms.step import Step, StepKind

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode (shown by the registry)
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← {v: ∞ for v in V}",                 # 1
    "    dist[source] ← 0",                         # 2
    "    pq ← all v keyed by (dist[v], v)",         # 3
    "    while pq is not empty:",                    # 4
    "        (d, u) ← pq.pop_min();  settle u",     # 5
    "        if d = ∞: continue",                   # 6
    "        for (v, w) in adj(u), v unsettled:",   # 7
    "            if d + w < dist[v]:",              # 8
    "                dist[v] ← d + w;  prev[v] ← u",# 9
    "                pq.decrease_key(v, d + w)",    # 10
    "    return dist, prev",                        # 11
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class ShortestPathEngine:
    """
    Attributes:
        graph       : The Graph to search.  Never mutated.
        track_paths : Keep predecessor ids so ShortestPaths.path() works.
        observer    : Optional callback(Step) fired at every traced event.
    """

    def __init__(
        self,
        graph: Graph,
        track_paths: bool = True,
        observer: Optional[Callable[[Step], None]] = None,
    ):
        self.graph:       Graph = graph
        self.track_paths: bool  = track_paths
        self.observer:    Optional[Callable[[Step], None]] = observer

    def run_from(self, source: int) -> ShortestPaths:
        graph = self.graph
        n     = graph.vertex_count()
        if not is_vertex_index(source, n):
            raise InvalidSourceError(source, n)

        started = time.monotonic()
        log.debug("dijkstra: source=%s vertices=%d edges=%d", source, n, graph.edge_count())

        # per-run state, owned by this call only
        dist:    List[float]         = [INFINITY] * n
        prev:    List[Optional[int]] = [None] * n
        settled: List[bool]          = [False] * n
        order:   List[int]           = []
        dist[source] = 0

        pq = IndexedMinHeap((dist[v], v) for v in range(n))
        trace = _Trace(self.observer, dist, order)
        trace.emit(StepKind.INIT, current=source,
                   explanation=f"Initialise: all distances = ∞ except source {source} = 0.")

        while pq:
            d, u = pq.pop()
            settled[u] = True
            order.append(u)
            if trace.active:
                trace.emit(StepKind.SETTLE, current=u,
                           explanation=f"Settle {u} at distance {d}: smallest in the queue, now FINAL.")

            if d == INFINITY:
                continue            # unreachable; ∞ + w is not a distance

            for edge in graph.vertices[u].edges:
                v = edge.other_end(u)
                if settled[v]:
                    continue
                candidate = d + edge.weight
                if candidate < dist[v]:
                    dist[v] = candidate
                    if self.track_paths:
                        prev[v] = u
                    pq.decrease_key(v, candidate)
                    if trace.active:
                        trace.emit(StepKind.RELAX, current=u, neighbour=v, edge_index=edge.index,
                                   candidate=candidate,
                                   explanation=f"Relax {u}→{v}: {d} + {edge.weight} = {candidate} → UPDATE.")
                elif trace.active:
                    trace.emit(StepKind.REJECT, current=u, neighbour=v, edge_index=edge.index,
                               candidate=candidate,
                               explanation=f"Edge {u}→{v}: {d} + {edge.weight} = {candidate} "
                                           f"≥ current {dist[v]} → no improvement.")

        trace.emit(StepKind.FINAL, explanation=f"All {n} vertices settled.", is_final=True)

        result = ShortestPaths(
            source=source,
            distances=dist,
            predecessors=prev if self.track_paths else None,
            settlement_order=order,
        )
        log.debug(
            "dijkstra: source=%s done, %d/%d reachable in %.2f ms",
            source, result.reachable_count(), n, (time.monotonic() - started) * 1000,
        )
        return result


def dijkstra(
    graph: Graph,
    source: int,
    track_paths: bool = True,
    observer: Optional[Callable[[Step], None]] = None,
) -> ShortestPaths:
    """Convenience: build an engine and run it once."""
    return ShortestPathEngine(graph, track_paths=track_paths, observer=observer).run_from(source)


# ---------------------------------------------------------------------------
class _Trace:
    """Builds Step snapshots for the observer; does nothing without one."""

    __slots__ = ("observer", "dist", "order", "step_no")

    def __init__(self, observer, dist: List[float], order: List[int]):
        self.observer = observer
        self.dist     = dist
        self.order    = order
        self.step_no  = 0

    @property
    def active(self) -> bool:
        return self.observer is not None

    def emit(self, kind: StepKind, is_final: bool = False, **fields) -> None:
        if self.observer is None:
            return
        self.observer(Step(
            step_number=self.step_no,
            kind=kind,
            distances=tuple(self.dist),
            settled=tuple(self.order),
            is_final=is_final,
            **fields,
        ))
        self.step_no += 1
