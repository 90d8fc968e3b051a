"""
errors.py — Error Taxonomy
==========================
Everything the core raises lives here so callers can catch by family:

    ShortestPathError
    ├── GraphConstructionError        (bad size, unknown vertex id, reused edge or vertex)
    │     ├── InvalidGraphSizeError
    │     └── UnknownVertexError
    ├── EdgeEndpointError             (other_end() asked about a stranger)
    └── QueryError                    (bad source, bad result index, no paths)
          ├── InvalidSourceError
          ├── UnknownResultError
          └── PathTrackingDisabledError

Construction errors and query errors never share a branch: a bad id handed
to `create_edge` is not the same failure as a bad id handed to `run_from`.
"""


class ShortestPathError(Exception):
    """Root of every error raised by the graph and engine packages."""


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
class GraphConstructionError(ShortestPathError, ValueError):
    """The graph could not be built as requested. Nothing was mutated."""


class InvalidGraphSizeError(GraphConstructionError):
    def __init__(self, size):
        super().__init__(f"Graph size must be a non-negative integer, got {size!r}")
        self.size = size


class UnknownVertexError(GraphConstructionError, IndexError):
    def __init__(self, vertex_id, size: int):
        super().__init__(f"Unknown vertex id {vertex_id!r} (valid range is [0, {size}))")
        self.vertex_id = vertex_id
        self.size = size


class EdgeEndpointError(ShortestPathError, ValueError):
    def __init__(self, edge, vertex_id):
        super().__init__(f"Vertex {vertex_id!r} is not an endpoint of {edge!r}")
        self.edge = edge
        self.vertex_id = vertex_id


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
class QueryError(ShortestPathError, LookupError):
    """A question was asked of the engine or its result that has no answer."""


class InvalidSourceError(QueryError):
    def __init__(self, source, size: int):
        super().__init__(f"Invalid source {source!r} (valid range is [0, {size}))")
        self.source = source
        self.size = size


class UnknownResultError(QueryError):
    def __init__(self, vertex_id, size: int):
        super().__init__(f"No result for vertex {vertex_id!r} (valid range is [0, {size}))")
        self.vertex_id = vertex_id
        self.size = size


class PathTrackingDisabledError(QueryError):
    def __init__(self):
        super().__init__("Paths were not tracked for this run; rerun with track_paths=True")
