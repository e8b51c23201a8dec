# src/graph/exporters/graphml_exporter.py — v1
"""GraphML graph exporter for standard interchange."""

from __future__ import annotations

from pathlib import Path

import networkx as nx

from cliqueperc.graph.base_graph_exporter import BaseGraphExporter


class GraphMLExporter(BaseGraphExporter):
    """Export graph to GraphML format."""

    def __init__(self, list_separator: str = ",") -> None:
        self._list_separator = list_separator

    @property
    def format_name(self) -> str:
        return "graphml"

    @property
    def file_extension(self) -> str:
        return ".graphml"

    def write(self, graph: nx.Graph, path: Path) -> None:
        # GraphML requires scalar attribute values
        g = graph.copy()
        for _, data in g.nodes(data=True):
            for k, v in list(data.items()):
                data[k] = self._scalar(v)
        for _, _, data in g.edges(data=True):
            for k, v in list(data.items()):
                data[k] = self._scalar(v)

        nx.write_graphml(g, str(path))

    def _scalar(self, value: object) -> object:
        if isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, (list, tuple, set, frozenset)):
            return self._list_separator.join(str(v) for v in value)
        return str(value)
