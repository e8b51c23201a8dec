# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides small hand-wired graphs and the model graph definition.
No external dependencies — all I/O stays in tmp_path.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cliqueperc.config.settings import Settings
from cliqueperc.graph.model import Graph
from cliqueperc.logging.context import clear_context

DATA_DIR = Path(__file__).parent / "data"

MODEL_EDGES = [
    ("v1", "v2"), ("v1", "v3"), ("v2", "v3"),
    ("v3", "v4"), ("v3", "v5"), ("v4", "v5"),
    ("v4", "v6"), ("v4", "v7"), ("v5", "v6"), ("v5", "v7"), ("v6", "v7"),
    ("v6", "v8"), ("v7", "v8"),
    ("v8", "v9"), ("v8", "v10"), ("v9", "v10"),
]


def build_graph(labels: list[str], edges: list[tuple[str, str]]) -> Graph:
    """Build a symmetric graph from labels and undirected edges."""
    g = Graph()
    for label in labels:
        g.add_node(label)
    for a, b in edges:
        g.add_undirected_edge(g.get(a), g.get(b))
    return g


# === FIXTURES: Graphs ===


@pytest.fixture
def model_graph() -> Graph:
    """Ten-node model graph (v1..v10)."""
    return build_graph([f"v{i}" for i in range(1, 11)], MODEL_EDGES)


@pytest.fixture
def triangle_graph() -> Graph:
    return build_graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("a", "c")])


@pytest.fixture
def path_graph() -> Graph:
    return build_graph(["p1", "p2", "p3", "p4"], [("p1", "p2"), ("p2", "p3"), ("p3", "p4")])


@pytest.fixture
def model_graph_file() -> Path:
    return DATA_DIR / "model.graph"


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture
def make_graph():
    """Factory fixture: make_graph(labels, edges) -> symmetric Graph."""
    return build_graph
