"""
main.py — Shortest-Path Flask API
=================================
Thin JSON wrapper around the graph + engine packages.

Routes:
  GET  /api/health                 – liveness probe
  GET  /api/algorithms             – registry listing
  POST /api/shortest-paths         – distances (and paths) from one source
  POST /api/shortest-paths/trace   – same run, plus every Step and run metrics

Request body for both POST routes:
    {
        "size":        4,
        "edges":       [[0, 1, 4], [1, 2, 3], [0, 2, 10]],
        "source":      0,
        "track_paths": true            (optional, defaults from config)
    }

Errors come back as {"error": <ExceptionName>, "message": <text>}:
  400 – malformed body, bad vertex id in an edge, bad source
  413 – more vertices than SSSP_MAX_VERTICES, or than SSSP_MAX_TRACE_VERTICES
        on the trace route (every Step snapshots all V distances)
"""

import logging

from flask import Flask, jsonify, request

from config import Settings
from graph import Graph, ShortestPathError
from algorithms import ShortestPathEngine, list_algorithms
from engine import Recorder

log = logging.getLogger(__name__)

settings = Settings.from_env()

app = Flask(__name__)
app.config.update(settings.flask_config())


class InvalidQuery(ValueError):
    """Request body is not shaped like a shortest-path query."""


class GraphTooLarge(ValueError):
    pass


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_query(data, limit_key: str = "MAX_VERTICES"):
    """
    Validate a request body; return (graph, source, track_paths).
    `limit_key` names the app.config entry that caps the vertex count.
    """
    if not isinstance(data, dict):
        raise InvalidQuery("Body must be a JSON object")

    size = data.get("size")
    if not _is_int(size):
        raise InvalidQuery("'size' must be an integer")
    limit = app.config[limit_key]
    if size > limit:
        raise GraphTooLarge(f"Graph has {size} vertices; the limit is {limit}")

    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise InvalidQuery("'edges' must be a list of [start, end, weight] triples")
    for i, triple in enumerate(edges):
        if not (isinstance(triple, list) and len(triple) == 3 and all(_is_int(x) for x in triple)):
            raise InvalidQuery(f"Edge #{i} must be [start, end, weight] integers, got {triple!r}")

    source = data.get("source")
    if source is None:
        raise InvalidQuery("'source' is required")

    track_paths = data.get("track_paths", app.config["TRACK_PATHS_DEFAULT"])
    if not isinstance(track_paths, bool):
        raise InvalidQuery("'track_paths' must be a boolean")

    # graph-level errors (negative size, unknown vertex) surface as ShortestPathError
    graph = Graph.from_dict({"size": size, "edges": edges})
    return graph, source, track_paths


# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------
def _error(exc: Exception, status: int):
    log.warning("%s: %s", type(exc).__name__, exc)
    return jsonify({"error": type(exc).__name__, "message": str(exc)}), status


@app.errorhandler(InvalidQuery)
def handle_invalid_query(exc):
    return _error(exc, 400)


@app.errorhandler(GraphTooLarge)
def handle_too_large(exc):
    return _error(exc, 413)


@app.errorhandler(ShortestPathError)
def handle_shortest_path_error(exc):
    return _error(exc, 400)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.route("/api/health")
def api_health():
    return jsonify({"status": "ok"})


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/shortest-paths", methods=["POST"])
def api_shortest_paths():
    graph, source, track_paths = parse_query(request.get_json(silent=True))
    result = ShortestPathEngine(graph, track_paths=track_paths).run_from(source)
    return jsonify(result.to_dict())


@app.route("/api/shortest-paths/trace", methods=["POST"])
def api_shortest_paths_trace():
    graph, source, track_paths = parse_query(request.get_json(silent=True), "MAX_TRACE_VERTICES")
    rec = Recorder()
    rec.record(graph, source, track_paths=track_paths)
    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.info("Shortest-path API listening on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)
