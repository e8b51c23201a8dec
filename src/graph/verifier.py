# src/graph/verifier.py — v1
"""Clique verification — turn an anchor's candidates into confirmed cliques.

A candidate (k-1 neighbors of the anchor) forms a k-clique with the anchor
when every pair among candidate + anchor is connected. Adjacency is checked
in both directions, so a one-sided edge never produces a clique.
"""

from __future__ import annotations

import logging
from typing import Iterable

from cliqueperc.graph.clique import Candidate, Clique, is_clique
from cliqueperc.graph.model import Node

logger = logging.getLogger(__name__)


def make_cliques(candidates: Iterable[Candidate], anchor: Node) -> list[Clique]:
    """Verify candidates for ``anchor``.

    Args:
        candidates: Output of ``generate_candidates`` for the anchor's
            neighbor list.
        anchor: Node whose neighborhood produced the candidates.

    Returns:
        One Clique ``(*candidate, anchor)`` per fully connected candidate,
        most recently verified first. Candidates holding the anchor or a
        repeated node (self-loops, doubled edges) are skipped.
    """
    cliques: list[Clique] = []
    for candidate in candidates:
        members = (*candidate, anchor)
        if len(set(members)) != len(members):
            continue
        if is_clique(members):
            cliques.append(Clique(members))
    cliques.reverse()
    logger.debug("anchor %s: %d cliques", anchor.label, len(cliques))
    return cliques
