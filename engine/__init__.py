"""
engine/
-------
Recording layer.

    from engine import Recorder, RunMetrics
"""

from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Recorder",
    "RunMetrics",
]
