# src/graph/candidates.py — v1
"""Candidate generation: every distinct (k-1)-subset of a neighbor list.

Each candidate is later combined with the anchor node whose neighbors were
enumerated and checked as a k-clique by the verifier.

Construction, for a list ``[x, *rest]``:
  1. Solve ``rest`` to get the combinations C.
  2. For each combination in C and each position in it, substitute ``x``
     at that position to get a new candidate.
  3. Keep C as well; drop any new candidate whose member set is already
     present.

Worked example, neighbors of v5 in the model graph, k=3:

    [v3, v4, v6, v7]
    rest [v6, v7]      -> {v6, v7}
    x = v4             -> {v4, v7} {v6, v4}
    x = v3             -> {v3, v4} {v6, v3} {v3, v7}  (duplicates dropped)

Results come back newest first (reverse of construction) followed by the
combinations they were built from, so output order is reproducible.
"""

from __future__ import annotations

import logging
from typing import Sequence

from cliqueperc.graph.clique import Candidate
from cliqueperc.graph.model import Node

logger = logging.getLogger(__name__)


def generate_candidates(k: int, nodes: Sequence[Node]) -> list[Candidate]:
    """Return all distinct (k-1)-combinations of ``nodes``.

    The recursion described in the module docstring is unrolled into a loop
    over ``nodes`` from the back, so neighbor lists longer than the
    interpreter's recursion limit are handled.

    Args:
        k: Clique size. Values below 2 yield no candidates.
        nodes: Typically an anchor node's neighbor list.

    Returns:
        ``C(len(nodes), k-1)`` candidates of length k-1, no two sharing a
        member set. Empty when ``len(nodes) < k-1``.
    """
    if k < 2:
        return []
    size = k - 1
    n = len(nodes)
    if n < size:
        return []

    # Base case: the last k-1 nodes form the only combination.
    combos: list[Candidate] = [tuple(nodes[n - size:])]
    seen: set[frozenset[Node]] = {frozenset(combos[0])}

    for start in range(n - size - 1, -1, -1):
        removed = nodes[start]
        added: list[Candidate] = []
        for combo in combos:
            for i in range(size):
                candidate = combo[:i] + (removed,) + combo[i + 1:]
                key = frozenset(candidate)
                if key in seen:
                    continue
                seen.add(key)
                added.append(candidate)
        added.reverse()
        combos = added + combos

    logger.debug("%d candidates of size %d from %d nodes", len(combos), size, n)
    return combos
