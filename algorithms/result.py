"""
result.py — Finished Shortest-Path Table
========================================
The only thing the engine hands back.  Built once at the end of a run
and never mutated, so re-querying is always safe.

Vertices are addressed by id and iterated in id order.  The settlement
order is kept for diagnostics but is not what iteration follows.
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from graph import PathTrackingDisabledError, UnknownResultError, is_vertex_index

INFINITY = math.inf


@dataclass(frozen=True)
class VertexResult:
    id:       int
    distance: float
    path:     Optional[Tuple[int, ...]] = None    # None when paths weren't tracked

    @property
    def reachable(self) -> bool:
        return self.distance != INFINITY


class ShortestPaths:
    """
    Attributes:
        source           : ID the run started from.
        track_paths      : Whether predecessor ids were kept.
        settlement_order : Vertex ids in the order they were settled.
    """

    def __init__(
        self,
        source: int,
        distances: Sequence[float],
        predecessors: Optional[Sequence[Optional[int]]],
        settlement_order: Sequence[int],
    ):
        self.source:           int                            = source
        self._distances:       Tuple[float, ...]              = tuple(distances)
        self._predecessors:    Optional[Tuple[Optional[int], ...]] = (
            tuple(predecessors) if predecessors is not None else None
        )
        self.settlement_order: Tuple[int, ...]                = tuple(settlement_order)

    @property
    def track_paths(self) -> bool:
        return self._predecessors is not None

    @property
    def vertex_count(self) -> int:
        return len(self._distances)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def distance(self, vertex_id: int) -> float:
        self._check(vertex_id)
        return self._distances[vertex_id]

    def is_reachable(self, vertex_id: int) -> bool:
        return self.distance(vertex_id) != INFINITY

    def path(self, vertex_id: int) -> List[int]:
        """
        Walk predecessor ids back from vertex_id to the source.
        [] for an unreachable vertex, [source] for the source itself.
        """
        self._check(vertex_id)
        if self._predecessors is None:
            raise PathTrackingDisabledError()
        if self._distances[vertex_id] == INFINITY:
            return []
        path, cur = [], vertex_id
        while cur is not None:
            path.append(cur)
            cur = self._predecessors[cur]
        path.reverse()
        return path

    def result_for(self, vertex_id: int) -> VertexResult:
        self._check(vertex_id)
        path = tuple(self.path(vertex_id)) if self.track_paths else None
        return VertexResult(id=vertex_id, distance=self._distances[vertex_id], path=path)

    def results(self) -> List[VertexResult]:
        if not self.track_paths:
            return [VertexResult(id=i, distance=d) for i, d in enumerate(self._distances)]
        paths = self._all_paths()
        return [
            VertexResult(id=i, distance=d, path=paths[i])
            for i, d in enumerate(self._distances)
        ]

    def distances(self) -> List[float]:
        return list(self._distances)

    def reachable_count(self) -> int:
        return sum(1 for d in self._distances if d != INFINITY)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        rows = []
        for r in self.results():
            row = {
                "id":        r.id,
                "distance":  r.distance if r.reachable else None,
                "reachable": r.reachable,
            }
            if r.path is not None:
                row["path"] = list(r.path)
            rows.append(row)
        return {
            "source":       self.source,
            "vertex_count": self.vertex_count,
            "results":      rows,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _all_paths(self) -> List[Tuple[int, ...]]:
        """
        Every path in one pass over the settlement order.  A predecessor is
        always settled before the vertex it leads to, so its path is ready.
        """
        paths: List[Tuple[int, ...]] = [()] * self.vertex_count
        for v in self.settlement_order:
            if self._distances[v] == INFINITY:
                continue
            pred = self._predecessors[v]
            paths[v] = (v,) if pred is None else paths[pred] + (v,)
        return paths

    def _check(self, vertex_id) -> None:
        if not is_vertex_index(vertex_id, len(self._distances)):
            raise UnknownResultError(vertex_id, len(self._distances))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[VertexResult]:
        return iter(self.results())

    def __repr__(self) -> str:
        return (
            f"ShortestPaths(source={self.source}, vertices={self.vertex_count}, "
            f"reachable={self.reachable_count()})"
        )
