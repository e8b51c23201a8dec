# tests/unit/graph/test_unit_candidates.py — v1
"""Tests for graph/candidates.py — (k-1)-subset enumeration."""

from __future__ import annotations

from itertools import combinations
from math import comb

import pytest

from cliqueperc.graph.candidates import generate_candidates
from cliqueperc.graph.model import Node


def _nodes(*labels: str) -> list[Node]:
    return [Node(label) for label in labels]


def _labels(candidates) -> list[tuple[str, ...]]:
    return [tuple(n.label for n in c) for c in candidates]


class TestGenerateCandidates:
    @pytest.mark.parametrize("n,k", [(1, 2), (4, 2), (4, 3), (5, 3), (6, 4), (7, 5), (8, 3)])
    def test_count_is_binomial(self, n, k):
        nodes = _nodes(*(f"n{i}" for i in range(n)))
        candidates = generate_candidates(k, nodes)
        assert len(candidates) == comb(n, k - 1)
        assert all(len(c) == k - 1 for c in candidates)

    @pytest.mark.parametrize("n,k", [(5, 3), (6, 4), (7, 3)])
    def test_no_duplicate_member_sets(self, n, k):
        nodes = _nodes(*(f"n{i}" for i in range(n)))
        candidates = generate_candidates(k, nodes)
        keys = [frozenset(c) for c in candidates]
        assert len(set(keys)) == len(keys)
        assert set(keys) == {frozenset(c) for c in combinations(nodes, k - 1)}

    def test_model_graph_v5_order(self):
        v3, v4, v6, v7 = _nodes("v3", "v4", "v6", "v7")
        candidates = generate_candidates(3, [v3, v4, v6, v7])
        assert _labels(candidates) == [
            ("v3", "v7"),
            ("v6", "v3"),
            ("v3", "v4"),
            ("v6", "v4"),
            ("v4", "v7"),
            ("v6", "v7"),
        ]

    def test_exact_size_returns_input(self):
        nodes = _nodes("a", "b")
        assert _labels(generate_candidates(3, nodes)) == [("a", "b")]

    def test_too_few_nodes(self):
        assert generate_candidates(4, _nodes("a", "b")) == []

    def test_empty_input(self):
        assert generate_candidates(3, []) == []

    @pytest.mark.parametrize("k", [1, 0, -3])
    def test_k_below_two_yields_nothing(self, k):
        assert generate_candidates(k, _nodes("a", "b", "c")) == []

    def test_k2_singletons(self):
        candidates = generate_candidates(2, _nodes("a", "b", "c"))
        assert sorted(_labels(candidates)) == [("a",), ("b",), ("c",)]

    def test_deterministic(self):
        nodes = _nodes(*(f"n{i}" for i in range(6)))
        assert generate_candidates(3, nodes) == generate_candidates(3, nodes)

    def test_long_neighbor_list_does_not_recurse(self):
        nodes = _nodes(*(f"n{i}" for i in range(1200)))
        candidates = generate_candidates(2, nodes)
        assert len(candidates) == 1200
