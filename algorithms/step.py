"""
step.py — Engine Trace Snapshot
===============================
When an observer is attached, the engine hands it a Step at every point
where something worth watching happens:

    • INIT    – tables initialised, source at 0
    • SETTLE  – minimum vertex extracted, its distance is now final
    • RELAX   – an edge improved a neighbour's distance
    • REJECT  – an edge was tried and did not improve anything
    • FINAL   – every vertex settled

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: `distances` and
    `settled` are tuples copied at emit time, so a recorder can keep the
    whole run without later steps overwriting earlier ones.
  - No observer, no snapshots.  A plain `run_from` never pays for copying.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class StepKind(Enum):
    INIT   = "init"
    SETTLE = "settle"
    RELAX  = "relax"
    REJECT = "reject"
    FINAL  = "final"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        kind        : What happened (StepKind).
        current     : ID of the vertex being settled / relaxed from.
        neighbour   : ID at the far end of the edge under consideration.
        edge_index  : Index of that edge in the graph's edge list.
        candidate   : current distance + edge weight, for RELAX / REJECT.
        distances   : Distance per vertex id at this moment.
        settled     : Vertex ids settled so far, in settlement order.
        explanation : Human-readable account of the step.
        is_final    : True only on the FINAL step.
    """

    step_number: int                  = 0
    kind:        StepKind             = StepKind.INIT
    current:     Optional[int]        = None
    neighbour:   Optional[int]        = None
    edge_index:  Optional[int]        = None
    candidate:   Optional[float]      = None
    distances:   Tuple[float, ...]    = field(default_factory=tuple)
    settled:     Tuple[int, ...]      = field(default_factory=tuple)
    explanation: str                  = ""
    is_final:    bool                 = False

    def to_dict(self) -> dict:
        return {
            "step_number": self.step_number,
            "kind":        self.kind.value,
            "current":     self.current,
            "neighbour":   self.neighbour,
            "edge_index":  self.edge_index,
            "candidate":   _json_distance(self.candidate),
            "distances":   [_json_distance(d) for d in self.distances],
            "settled":     list(self.settled),
            "explanation": self.explanation,
            "is_final":    self.is_final,
        }


def _json_distance(value):
    # JSON has no infinity
    if value is None or value == float("inf"):
        return None
    return value
