# src/graph/parser.py — v1
"""Graph definition parser.

One node per line: the label left of the colon declares the node, labels
right of it are its neighbors.

    # model graph excerpt
    v1: v2 v3
    v2: v1 v3
    v9:

Blank lines and ``#`` comments are skipped. Neighbors may be declared
further down the file; edges are resolved once every node is known. Any
error aborts the parse, so a partially built graph is never returned.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from cliqueperc.core.errors import MalformedInputError
from cliqueperc.graph.model import Graph, Node, is_connected

logger = logging.getLogger(__name__)

_NODE_DEF_RE = re.compile(r"^\s*(\w+)\s*:(.*)$")
_LABEL_RE = re.compile(r"^\w+$")


@dataclass
class _PendingNeighbors:
    node: Node
    neighbors: list[str]
    line_number: int


def parse_graph_definition(text: str, symmetrize: bool = True) -> Graph:
    """Parse a graph definition into a Graph.

    Args:
        text: Definition text.
        symmetrize: Add missing reverse edges (with a warning) instead of
            rejecting one-sided definitions.

    Returns:
        Graph with symmetric adjacency, nodes in declaration order.

    Raises:
        MalformedInputError: On a syntax error, duplicate declaration,
            undeclared neighbor, self-loop, or (``symmetrize=False``) a
            one-sided edge.
    """
    graph = Graph()
    pending: list[_PendingNeighbors] = []
    declared_at: dict[str, int] = {}

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        match = _NODE_DEF_RE.match(line)
        if match is None:
            raise MalformedInputError("syntax error", line_number=line_number)

        label, rhs = match.group(1), match.group(2)
        if label in declared_at:
            raise MalformedInputError(
                f"'{label}': duplicate node (first declared on line {declared_at[label]})",
                line_number=line_number,
                label=label,
            )
        declared_at[label] = line_number
        node = graph.add_node(label)

        neighbors = rhs.split()
        for neighbor in neighbors:
            if not _LABEL_RE.match(neighbor):
                raise MalformedInputError(
                    f"'{neighbor}': invalid neighbor label",
                    line_number=line_number,
                    label=neighbor,
                )
        if neighbors:
            pending.append(_PendingNeighbors(node, neighbors, line_number))

    for entry in pending:
        _resolve_neighbors(graph, entry)

    _enforce_symmetry(graph, symmetrize)

    logger.info(
        "Parsed graph: %d nodes, %d edges",
        len(graph), graph.number_of_edges() // 2,
    )
    return graph


def load_graph_file(path: str | Path, symmetrize: bool = True) -> Graph:
    """Read and parse a graph definition file.

    Raises:
        MalformedInputError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"{path}: cannot read graph definition ({exc})") from exc

    logger.debug("Loading graph definition from %s", path)
    try:
        return parse_graph_definition(text, symmetrize=symmetrize)
    except MalformedInputError as exc:
        wrapped = MalformedInputError(f"{path}: {exc}", label=exc.label)
        wrapped.line_number = exc.line_number
        raise wrapped from exc


def _resolve_neighbors(graph: Graph, entry: _PendingNeighbors) -> None:
    for label in entry.neighbors:
        neighbor = graph.get(label)
        if neighbor is None:
            raise MalformedInputError(
                f"'{label}': doesn't exist",
                line_number=entry.line_number,
                label=label,
            )
        if neighbor is entry.node:
            raise MalformedInputError(
                f"'{label}': self-loop not allowed",
                line_number=entry.line_number,
                label=label,
            )
        if is_connected(entry.node, neighbor):
            logger.debug("%s: neighbor %s listed twice, ignored", entry.node.label, label)
            continue
        graph.add_edge(entry.node, neighbor)


def _enforce_symmetry(graph: Graph, symmetrize: bool) -> None:
    one_sided = graph.asymmetric_edges()
    if not one_sided:
        return
    if not symmetrize:
        a, b = one_sided[0]
        raise MalformedInputError(
            f"edge {a.label} -> {b.label} has no reverse edge "
            f"({len(one_sided)} one-sided edges)",
            label=a.label,
        )
    for a, b in one_sided:
        logger.warning("Adding missing reverse edge %s -> %s", b.label, a.label)
        graph.add_edge(b, a)
