"""
config.py — Runtime Settings
============================
Everything tunable comes from the environment, with defaults that work
for local development:

    SSSP_MAX_VERTICES        largest graph the HTTP API accepts     (100000)
    SSSP_MAX_TRACE_VERTICES  largest graph the trace route accepts  (1000)
    SSSP_TRACK_PATHS         default for track_paths on requests    (true)
    SSSP_LOG_LEVEL           root logging level                     (INFO)
    SSSP_HOST                dev-server bind address                (127.0.0.1)
    SSSP_PORT                dev-server port                        (5000)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_limit(env: Mapping[str, str], name: str, default: int) -> int:
    value = int(env.get(name, default))
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    max_vertices:       int  = 100_000
    max_trace_vertices: int  = 1_000
    track_paths:        bool = True
    log_level:          str  = "INFO"
    host:               str  = "127.0.0.1"
    port:               int  = 5000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        max_vertices       = _parse_limit(env, "SSSP_MAX_VERTICES", defaults.max_vertices)
        max_trace_vertices = _parse_limit(env, "SSSP_MAX_TRACE_VERTICES", defaults.max_trace_vertices)

        track_paths = defaults.track_paths
        if "SSSP_TRACK_PATHS" in env:
            track_paths = _parse_bool("SSSP_TRACK_PATHS", env["SSSP_TRACK_PATHS"])

        return cls(
            max_vertices=max_vertices,
            max_trace_vertices=max_trace_vertices,
            track_paths=track_paths,
            log_level=env.get("SSSP_LOG_LEVEL", defaults.log_level).upper(),
            host=env.get("SSSP_HOST", defaults.host),
            port=int(env.get("SSSP_PORT", defaults.port)),
        )

    def flask_config(self) -> dict:
        return {
            "MAX_VERTICES":        self.max_vertices,
            "MAX_TRACE_VERTICES":  self.max_trace_vertices,
            "TRACK_PATHS_DEFAULT": self.track_paths,
        }
