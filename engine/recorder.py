"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete traced run (every Step the engine emits), then
computes the metrics the API reports alongside the distances.

Usage:
    rec = Recorder()
    result  = rec.record(graph, source=0)   # runs to completion
    metrics = rec.get_metrics()             # the analytics card
    rec.export()                            # JSON-ready snapshot
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import Optional, List, Dict, Any

from graph import Graph
from algorithms import REGISTRY, AlgoInfo
from algorithms.result import ShortestPaths
from algorithms.step import Step, StepKind

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:              str   = ""
    algo_label:            str   = ""
    source:                int   = 0
    vertex_count:          int   = 0
    edge_count:            int   = 0
    vertices_settled:      int   = 0
    vertices_reachable:    int   = 0
    edges_relaxed:         int   = 0          # relaxations that improved a distance
    relaxations_rejected:  int   = 0
    total_steps:           int   = 0          # number of Steps recorded
    wall_time_ms:          float = 0.0
    memory_bytes:          int   = 0          # approx size of the step buffer


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the last run.
        metrics : RunMetrics of the last run (None before the first run).
        result  : ShortestPaths of the last run.
    """

    def __init__(self):
        self.steps:   List[Step]              = []
        self.metrics: Optional[RunMetrics]    = None
        self.result:  Optional[ShortestPaths] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._graph:     Optional[Graph]    = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def record(self, graph: Graph, source: int, track_paths: bool = True) -> ShortestPaths:
        """Run Dijkstra with this recorder as observer; keep every step."""
        info = REGISTRY["dijkstra"]

        self._algo_info = info
        self._graph     = graph
        self.steps      = []
        self.metrics    = None
        self.result     = None

        started = time.monotonic()
        self.result = info.fn(graph, source, track_paths=track_paths, observer=self.record_step)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        log.info(
            "%s from %d: %d steps, %d/%d reachable, %.2f ms",
            info.key, source, self.metrics.total_steps,
            self.metrics.vertices_reachable, self.metrics.vertex_count, self.metrics.wall_time_ms,
        )
        return self.result

    def record_step(self, step: Step) -> None:
        self.steps.append(step)

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "graph":    self._graph.to_dict() if self._graph else {},
            "result":   self.result.to_dict() if self.result else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        result = self.result

        relaxed  = sum(1 for s in self.steps if s.kind is StepKind.RELAX)
        rejected = sum(1 for s in self.steps if s.kind is StepKind.REJECT)
        settled  = sum(1 for s in self.steps if s.kind is StepKind.SETTLE)

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            source=result.source,
            vertex_count=result.vertex_count,
            edge_count=self._graph.edge_count() if self._graph else 0,
            vertices_settled=settled,
            vertices_reachable=result.reachable_count(),
            edges_relaxed=relaxed,
            relaxations_rejected=rejected,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )
