"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for the shortest-path algorithms this package ships.

    from algorithms import REGISTRY, get_algorithm, ShortestPathEngine

REGISTRY is a dict:
    {
        "dijkstra": AlgoInfo(key, label, fn, pseudocode, …),
    }

AlgoInfo is a lightweight dataclass.  The recorder reads its key and label
for run metrics; GET /api/algorithms serves its to_dict().
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

from algorithms.dijkstra import ShortestPathEngine, dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.heap     import IndexedMinHeap
from algorithms.result   import INFINITY, ShortestPaths, VertexResult
from algorithms.step     import Step, StepKind


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dijkstra"
    label:             str                    # human label
    fn:                Callable               # fn(graph, source, track_paths, observer) -> ShortestPaths
    pseudocode:        List[str]
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":               self.key,
            "label":             self.label,
            "complexity_time":   self.complexity_time,
            "complexity_space":  self.complexity_space,
            "description":       self.description,
            "pseudocode":        list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Settles the closest unsettled vertex each round. Correct for non-negative weights.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "ShortestPathEngine",
    "ShortestPaths",
    "VertexResult",
    "IndexedMinHeap",
    "INFINITY",
    "Step",
    "StepKind",
]
