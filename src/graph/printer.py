# src/graph/printer.py — v1
"""Plain-text rendering of a graph: each label followed by its neighbors."""

from __future__ import annotations

import sys
from typing import TextIO

from cliqueperc.graph.model import Graph

EMPTY_GRAPH = "empty graph"


def format_graph(graph: Graph | None) -> str:
    """Render one ``label: neighbor neighbor ...`` line per node."""
    if graph is None or len(graph) == 0:
        return EMPTY_GRAPH
    lines = []
    for node in graph:
        neighbors = " ".join(node.neighbor_labels())
        lines.append(f"{node.label}: {neighbors}".rstrip())
    return "\n".join(lines)


def print_graph(graph: Graph | None, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    stream.write(format_graph(graph) + "\n")
