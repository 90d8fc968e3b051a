"""
graph.py — Graph Container
==========================
Single source of truth for the topology.  The engine only ever reads
from this object.

Responsibilities:
  1. Allocate a dense run of vertices 0..N-1        (create_empty / from_vertices)
  2. Edge insertion that keeps adjacency consistent (create_edge / add_edge)
  3. Read accessors                                  (vertex_at, all_vertices, …)
  4. Dict round-trip for the JSON API                (to_dict / from_dict)

Design decisions:
  - Vertices live in a plain list; the id IS the list index, so lookup
    is O(1) and never needs a dict.
  - `add_edge` validates everything before touching anything.  A bad id
    leaves the graph exactly as it was.
  - The edge list is the canonical owner of every Edge; vertices just
    hold references into it.
"""

from typing import Iterable, List

from graph.edge import Edge
from graph.errors import (
    GraphConstructionError,
    InvalidGraphSizeError,
    UnknownVertexError,
)
from graph.vertex import Vertex


def is_vertex_index(value, size: int) -> bool:
    """True for a real int (bools excluded) inside [0, size)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < size


class Graph:
    """
    Attributes:
        vertices : [Vertex] indexed by id
        edges    : [Edge] in insertion order
    """

    def __init__(self, size: int = 0):
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise InvalidGraphSizeError(size)
        self.vertices: List[Vertex] = [Vertex(i) for i in range(size)]
        self.edges:    List[Edge]   = []
        for vertex in self.vertices:
            vertex.owned = True

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def create_empty(cls, size: int) -> "Graph":
        return cls(size)

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> "Graph":
        """
        Adopt pre-built vertices.  They must be numbered 0..n-1 in order,
        must not carry edges yet (their edges would have no owner), and
        must not already belong to another graph.  Nothing is marked
        owned unless every vertex passes.
        """
        vertices = list(vertices)
        for expected, vertex in enumerate(vertices):
            if vertex.id != expected:
                raise GraphConstructionError(
                    f"Vertex at position {expected} has id {vertex.id}; ids must be dense and ordered"
                )
            if vertex.owned:
                raise GraphConstructionError(f"{vertex!r} already belongs to a graph")
            if vertex.edges:
                raise GraphConstructionError(f"{vertex!r} already has edges attached")
        g = cls(0)
        for vertex in vertices:
            vertex.owned = True
        g.vertices = vertices
        return g

    @classmethod
    def from_edge_list(cls, size: int, edges: Iterable) -> "Graph":
        """Convenience: size + iterable of (start, end, weight) triples."""
        g = cls(size)
        for start, end, weight in edges:
            g.create_edge(start, end, weight)
        return g

    # ==================================================================
    # EDGE INSERTION
    # ==================================================================
    def create_edge(self, start_id: int, end_id: int, weight: int) -> Edge:
        return self.add_edge(Edge(first=start_id, second=end_id, weight=weight))

    def add_edge(self, edge: Edge) -> Edge:
        if edge.index is not None:
            raise GraphConstructionError(f"{edge!r} is already registered in a graph")
        self._check_vertex(edge.first)
        self._check_vertex(edge.second)

        edge.index = len(self.edges)
        self.edges.append(edge)
        # a self-loop lands twice on the same vertex
        self.vertices[edge.first].attach(edge)
        self.vertices[edge.second].attach(edge)
        return edge

    # ==================================================================
    # READ ACCESSORS
    # ==================================================================
    def vertex_at(self, vertex_id: int) -> Vertex:
        self._check_vertex(vertex_id)
        return self.vertices[vertex_id]

    def all_vertices(self) -> List[Vertex]:
        return list(self.vertices)

    def all_edges(self) -> List[Edge]:
        return list(self.edges)

    def has_vertex(self, vertex_id) -> bool:
        return is_vertex_index(vertex_id, len(self.vertices))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "size":  self.vertex_count(),
            "edges": [e.to_list() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(data.get("size", 0))
        for triple in data.get("edges", []):
            g.add_edge(Edge.from_list(triple))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        return len(self.edges)

    def _check_vertex(self, vertex_id) -> None:
        if not self.has_vertex(vertex_id):
            raise UnknownVertexError(vertex_id, len(self.vertices))

    def __len__(self) -> int:
        return self.vertex_count()

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
