# src/graph/merger.py — v1
"""Clique deduplication — fold per-anchor clique lists into one global list.

Cliques are identified by member set. Every k-clique is discovered once per
member (each member acts as anchor), so merging is where the k-fold
duplication collapses.
"""

from __future__ import annotations

import logging
from typing import Iterable

from cliqueperc.graph.clique import Clique
from cliqueperc.graph.model import Node

logger = logging.getLogger(__name__)


class CliqueIndex:
    """Ordered clique list with O(1) member-set lookup."""

    def __init__(self, cliques: Iterable[Clique] = ()) -> None:
        self._cliques: list[Clique] = []
        self._keys: set[frozenset[Node]] = set()
        self.merge(cliques)

    def __len__(self) -> int:
        return len(self._cliques)

    def __iter__(self):
        return iter(self._cliques)

    def __contains__(self, clique: object) -> bool:
        return isinstance(clique, Clique) and clique.key in self._keys

    @property
    def cliques(self) -> list[Clique]:
        return list(self._cliques)

    def add(self, clique: Clique) -> bool:
        """Append ``clique`` unless its member set is recorded. Returns True if added."""
        if clique.key in self._keys:
            return False
        self._keys.add(clique.key)
        self._cliques.append(clique)
        return True

    def merge(self, incoming: Iterable[Clique]) -> int:
        """Add every unrecorded clique of ``incoming``. Returns the count added."""
        return sum(1 for clique in incoming if self.add(clique))


def merge_cliques(dest: list[Clique], src: Iterable[Clique]) -> list[Clique]:
    """Append cliques of ``src`` not already in ``dest`` (by member set).

    ``dest`` is extended in place and returned. Merging the same ``src``
    twice leaves ``dest`` unchanged the second time.
    """
    keys = {c.key for c in dest}
    for clique in src:
        if clique.key not in keys:
            keys.add(clique.key)
            dest.append(clique)
    return dest
