import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from graph import Graph


@pytest.fixture
def triangle() -> Graph:
    """0-1 (4), 1-2 (3), 0-2 (10): the cheap way to 2 goes through 1."""
    return Graph.from_edge_list(3, [(0, 1, 4), (1, 2, 3), (0, 2, 10)])


@pytest.fixture
def disconnected() -> Graph:
    """Vertex 3 has no edges at all."""
    return Graph.from_edge_list(4, [(0, 1, 1), (1, 2, 2)])
