from typing import List

from graph.edge import Edge


# ---------------------------------------------------------------------------
# Vertex
# ---------------------------------------------------------------------------
class Vertex:
    """
    Immutable identity (id), append-only adjacency.

    Distances and predecessors are NOT stored here: every engine run keeps
    its own table, so one Graph can serve any number of runs.

    Attributes:
        id     : Dense 0-based index, assigned by the Graph.
        edges  : Incident edges in the order they were added.  Parallel
                 edges are kept; a self-loop shows up twice.
        owned  : Set once a Graph holds this vertex.  A vertex belongs to
                 at most one graph.
    """

    __slots__ = ("id", "edges", "owned")

    def __init__(self, vertex_id: int):
        self.id:    int        = vertex_id
        self.edges: List[Edge] = []
        self.owned: bool       = False

    def attach(self, edge: Edge) -> None:
        """Graph-only: record one more incident edge."""
        self.edges.append(edge)

    def degree(self) -> int:
        return len(self.edges)

    def neighbours(self) -> List[int]:
        """Opposite endpoint of every incident edge, in adjacency order."""
        return [edge.other_end(self.id) for edge in self.edges]

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, degree={self.degree()})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Vertex) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
