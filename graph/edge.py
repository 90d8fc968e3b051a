"""
edge.py — Graph Edge
====================
Connects two vertices with an integer weight.  Always undirected: the
engine walks an edge from whichever end it happens to be standing on.

Design decisions:
  - `first` and `second` are vertex ids, NOT Vertex references.
    This keeps edges serialisable and avoids circular references.
  - Endpoints are fixed at construction; they are exposed read-only.
  - `index` is the edge's position in the owning Graph's edge list.
    It stays None until a Graph registers the edge, and is what marks an
    edge as already owned.
  - `other_end` raises on a stranger instead of returning None, so a
    broken adjacency list fails loudly inside the engine.
"""

from typing import Optional, Tuple

from graph.errors import EdgeEndpointError, GraphConstructionError


class Edge:
    """
    Attributes:
        first   : ID of the first endpoint (lookup order only, no direction).
        second  : ID of the second endpoint.
        weight  : Integer cost of traversal. Assumed non-negative.
        index   : Position in the owning Graph's edge list (None if unowned).
    """

    __slots__ = ("_first", "_second", "weight", "index")

    def __init__(self, first: int, second: int, weight: int = 1):
        self._first:  int           = first
        self._second: int           = second
        self.weight:  int           = weight
        self.index:   Optional[int] = None

    @property
    def first(self) -> int:
        return self._first

    @property
    def second(self) -> int:
        return self._second

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self._first, self._second

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def is_self_loop(self) -> bool:
        return self._first == self._second

    def connects(self, vertex_a: int, vertex_b: int) -> bool:
        """True if this edge links vertex_a ↔ vertex_b (either order)."""
        return (self._first, self._second) in ((vertex_a, vertex_b), (vertex_b, vertex_a))

    def other_end(self, vertex_id: int) -> int:
        """Given one endpoint, return the other. Raises if vertex_id isn't an endpoint."""
        if vertex_id == self._first:
            return self._second
        if vertex_id == self._second:
            return self._first
        raise EdgeEndpointError(self, vertex_id)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_list(self) -> list:
        return [self._first, self._second, self.weight]

    @classmethod
    def from_list(cls, data) -> "Edge":
        """[first, second, weight].  Anything else is a construction error."""
        if not isinstance(data, (list, tuple)) or len(data) != 3:
            raise GraphConstructionError(f"Expected an edge triple [first, second, weight], got {data!r}")
        first, second, weight = data
        return cls(first=first, second=second, weight=weight)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self._first} ↔ {self._second}, w={self.weight})"
