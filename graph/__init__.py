"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Vertex, Edge
    from graph import UnknownVertexError, InvalidSourceError, …
"""

from graph.edge   import Edge
from graph.vertex import Vertex
from graph.graph  import Graph, is_vertex_index
from graph.errors import (
    ShortestPathError,
    GraphConstructionError,
    InvalidGraphSizeError,
    UnknownVertexError,
    EdgeEndpointError,
    QueryError,
    InvalidSourceError,
    UnknownResultError,
    PathTrackingDisabledError,
)

__all__ = [
    "Edge",
    "Vertex",
    "Graph",
    "is_vertex_index",
    "ShortestPathError",
    "GraphConstructionError",
    "InvalidGraphSizeError",
    "UnknownVertexError",
    "EdgeEndpointError",
    "QueryError",
    "InvalidSourceError",
    "UnknownResultError",
    "PathTrackingDisabledError",
]
