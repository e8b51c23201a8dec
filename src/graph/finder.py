# src/graph/finder.py — v1
"""k-clique discovery over a whole graph.

For every node, in graph order:
  1. Generate candidates from its neighbor list (candidates.py)
  2. Verify them into cliques anchored on the node (verifier.py)
  3. Merge into the running global list (merger.py)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cliqueperc.config.settings import check_clique_size
from cliqueperc.graph.candidates import generate_candidates
from cliqueperc.graph.clique import Clique, check_clique_invariants
from cliqueperc.graph.merger import CliqueIndex
from cliqueperc.graph.model import Graph, Node
from cliqueperc.graph.verifier import make_cliques

logger = logging.getLogger(__name__)


@dataclass
class CliqueSearchResult:
    """Deduplicated cliques plus discovery counters."""

    k: int
    cliques: list[Clique] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


def find_cliques(
    graph: Graph,
    k: int,
    verify_invariants: bool = True,
) -> CliqueSearchResult:
    """Find every k-clique of ``graph``.

    Args:
        graph: Input graph with symmetric adjacency.
        k: Clique size (>= 2).
        verify_invariants: Re-check the final list before returning.

    Returns:
        CliqueSearchResult with cliques in discovery order.

    Raises:
        ConfigurationError: If k < 2.
        InternalInvariantViolation: If ``verify_invariants`` and the
            final list breaks a clique invariant.
    """
    check_clique_size(k)

    index = CliqueIndex()
    candidates_generated = 0
    cliques_verified = 0

    for node in graph:
        candidates = generate_candidates(k, _distinct_neighbors(node))
        if not candidates:
            continue
        candidates_generated += len(candidates)
        anchored = make_cliques(candidates, node)
        cliques_verified += len(anchored)
        index.merge(anchored)

    cliques = index.cliques
    if verify_invariants:
        check_clique_invariants(cliques, k)

    stats = {
        "nodes_examined": len(graph),
        "candidates_generated": candidates_generated,
        "cliques_verified": cliques_verified,
        "cliques_unique": len(cliques),
    }
    logger.info(
        "Found %d unique %d-cliques (%d before dedup, %d candidates)",
        len(cliques), k, cliques_verified, candidates_generated,
        extra={"data": stats},
    )
    return CliqueSearchResult(k=k, cliques=cliques, stats=stats)


def _distinct_neighbors(node: Node) -> list[Node]:
    """Neighbor list without the node itself or repeated entries."""
    return [n for n in dict.fromkeys(node.neighbors) if n is not node]
