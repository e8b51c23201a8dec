# src/graph/community_builder.py — v1
"""Community graph builder — one node per k-clique, edges on k-1 overlap.

Each clique becomes a node labelled with its member labels joined by a
separator and carrying a back-reference to the clique. Two nodes are linked
when their cliques share k-1 original vertices. Distinct k-cliques share at
most k-1 vertices, so reaching k-1 common members is the whole test.

Extracting connected components (the communities) is left to
``graph.layers.percolation``.
"""

from __future__ import annotations

import logging
from typing import Sequence

from cliqueperc.graph.clique import Clique
from cliqueperc.graph.model import Graph, Node

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ","


def create_label(nodes: Sequence[Node], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join member labels in storage order."""
    return separator.join(n.label for n in nodes)


def shares_k_minus_1(gn: Node, node: Node, k: int) -> bool:
    """True if the cliques behind two community nodes share k-1 members.

    Counting stops as soon as k-1 common members are found.
    """
    if gn.clique is None or node.clique is None:
        return False
    other = node.clique.key
    common = 0
    for member in gn.clique.nodes:
        if member in other:
            common += 1
            if common == k - 1:
                return True
    return False


def add_overlap_neighbors(graph: Graph, gn: Node, k: int) -> int:
    """Link ``gn`` to every other node of ``graph`` with k-1 overlap.

    Only the gn -> node direction is recorded; the builder calls this for
    every node so the reverse direction is added on its own turn.
    """
    added = 0
    for node in graph:
        if node is not gn and shares_k_minus_1(gn, node, k):
            graph.add_edge(gn, node)
            added += 1
    return added


def build_community_graph(
    cliques: Sequence[Clique],
    k: int,
    separator: str = DEFAULT_SEPARATOR,
) -> Graph:
    """Build the community graph for a deduplicated clique list.

    Args:
        cliques: Global clique list (no two with the same member set).
        k: Clique size used to find ``cliques``.
        separator: Joins member labels into community-node labels.

    Returns:
        Graph with one node per clique, in clique order, and symmetric
        k-1 overlap edges. Empty when ``cliques`` is empty.
    """
    community_graph = Graph()
    for clique in cliques:
        community_graph.add_node(create_label(clique.nodes, separator), clique=clique)

    edges = 0
    for gn in community_graph:
        edges += add_overlap_neighbors(community_graph, gn, k)

    logger.info(
        "Community graph: %d nodes, %d edges",
        len(community_graph), edges // 2,
    )
    return community_graph
