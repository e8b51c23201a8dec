# src/graph/clique.py — v1
"""Clique record and invariant checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable

from cliqueperc.core.errors import InternalInvariantViolation
from cliqueperc.graph.model import Node, is_connected

# A tentative (k-1)-subset of an anchor node's neighbors.
Candidate = tuple[Node, ...]


@dataclass(frozen=True, eq=False)
class Clique:
    """k distinct, pairwise connected nodes.

    Two cliques are the same clique when their member sets are equal,
    whatever the storage order; ``key`` is that member set.
    """

    nodes: tuple[Node, ...]
    key: frozenset[Node] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        key = frozenset(self.nodes)
        if len(key) != len(self.nodes):
            raise InternalInvariantViolation(
                f"clique has repeated members: {[n.label for n in self.nodes]}"
            )
        object.__setattr__(self, "key", key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clique):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"Clique({', '.join(self.labels)})"

    @property
    def size(self) -> int:
        return len(self.nodes)

    @property
    def labels(self) -> list[str]:
        """Member labels in storage order."""
        return [n.label for n in self.nodes]

    @property
    def label_set(self) -> frozenset[str]:
        return frozenset(self.labels)

    def common_members(self, other: Clique) -> int:
        return len(self.key & other.key)


def is_clique(nodes: Iterable[Node]) -> bool:
    """True if every pair of ``nodes`` is connected in both directions."""
    return all(
        is_connected(a, b) and is_connected(b, a)
        for a, b in combinations(tuple(nodes), 2)
    )


def check_clique_invariants(cliques: list[Clique], k: int) -> None:
    """Re-check a clique list produced by the core.

    Raises:
        InternalInvariantViolation: On a clique of the wrong size, one that
            is not fully connected, or two cliques with equal member sets.
    """
    seen: set[frozenset[Node]] = set()
    for clique in cliques:
        if clique.size != k:
            raise InternalInvariantViolation(
                f"{clique!r} has {clique.size} members, expected {k}"
            )
        if not is_clique(clique.nodes):
            raise InternalInvariantViolation(f"{clique!r} is not fully connected")
        if clique.key in seen:
            raise InternalInvariantViolation(f"{clique!r} recorded twice")
        seen.add(clique.key)
