# src/graph/layers/percolation.py — v1
"""Community extraction: connected components of the community graph.

Pure function: takes a community graph built by community_builder and
returns a CommunityPartition. Does NOT modify the input graph.
"""

from __future__ import annotations

import logging

import networkx as nx

from cliqueperc.graph.layers.models import Community, CommunityPartition
from cliqueperc.graph.model import Graph

logger = logging.getLogger(__name__)


def extract_communities(
    community_graph: Graph,
    k: int,
    min_community_size: int = 1,
) -> CommunityPartition:
    """Group adjacent cliques into communities.

    Args:
        community_graph: Graph whose nodes carry cliques.
        k: Clique size the graph was built with.
        min_community_size: Minimum number of cliques per community.

    Returns:
        CommunityPartition ordered by descending member count, then by
        first member label. Ids are ``comm_000``, ``comm_001``, ...
    """
    if len(community_graph) == 0:
        return CommunityPartition(k=k)

    g = community_graph.to_networkx()
    if g.is_directed():
        logger.warning("Community graph is not symmetric; using weak components")
        components = list(nx.weakly_connected_components(g))
    else:
        components = list(nx.connected_components(g))

    groups: list[tuple[list[str], list[str]]] = []
    for component in components:
        if len(component) < min_community_size:
            continue
        clique_labels = [label for label in community_graph.labels if label in component]
        members = _collect_members(g, clique_labels)
        groups.append((sorted(members), clique_labels))

    groups.sort(key=lambda grp: (-len(grp[0]), grp[0]))

    communities = [
        Community(community_id=f"comm_{i:03d}", members=members, cliques=cliques)
        for i, (members, cliques) in enumerate(groups)
    ]
    logger.info("Extracted %d communities from %d cliques", len(communities), len(community_graph))
    return CommunityPartition(
        k=k,
        communities=communities,
        total_communities=len(communities),
        total_cliques=len(community_graph),
    )


def _collect_members(g: nx.Graph, clique_labels: list[str]) -> set[str]:
    """Union of original vertices over the given community nodes."""
    members: set[str] = set()
    for label in clique_labels:
        members.update(g.nodes[label].get("members", []))
    return members
