# tests/unit/graph/test_unit_verifier.py — v1
"""Tests for graph/verifier.py and graph/clique.py — clique confirmation."""

from __future__ import annotations

from itertools import combinations

import pytest

from cliqueperc.core.errors import InternalInvariantViolation
from cliqueperc.graph.candidates import generate_candidates
from cliqueperc.graph.clique import Clique, check_clique_invariants, is_clique
from cliqueperc.graph.model import Graph, is_connected
from cliqueperc.graph.verifier import make_cliques


class TestMakeCliques:
    def test_model_graph_v5(self, model_graph):
        v5 = model_graph.get("v5")
        cliques = make_cliques(generate_candidates(3, v5.neighbors), v5)
        assert [c.labels for c in cliques] == [
            ["v6", "v7", "v5"],
            ["v4", "v7", "v5"],
            ["v6", "v4", "v5"],
            ["v3", "v4", "v5"],
        ]

    def test_every_clique_fully_connected(self, model_graph):
        for anchor in model_graph:
            for clique in make_cliques(generate_candidates(3, anchor.neighbors), anchor):
                assert anchor in clique.key
                for a, b in combinations(clique.nodes, 2):
                    assert is_connected(a, b) and is_connected(b, a)

    def test_no_candidates(self, model_graph):
        assert make_cliques([], model_graph.get("v1")) == []

    def test_one_sided_edge_is_not_a_clique(self):
        g = Graph()
        a, b, c = (g.add_node(x) for x in "abc")
        g.add_undirected_edge(a, b)
        g.add_undirected_edge(a, c)
        g.add_edge(b, c)  # c -> b missing
        assert make_cliques(generate_candidates(3, a.neighbors), a) == []

    def test_path_graph_has_no_triangles(self, path_graph):
        for anchor in path_graph:
            assert make_cliques(generate_candidates(3, anchor.neighbors), anchor) == []

    def test_self_loop_candidates_skipped(self, triangle_graph):
        a = triangle_graph.get("a")
        triangle_graph.add_edge(a, a)
        cliques = make_cliques(generate_candidates(3, a.neighbors), a)
        assert [c.label_set for c in cliques] == [frozenset("abc")]

    def test_doubled_edge_candidates_skipped(self, triangle_graph):
        a, b = triangle_graph.get("a"), triangle_graph.get("b")
        triangle_graph.add_edge(a, b)
        cliques = make_cliques(generate_candidates(3, a.neighbors), a)
        assert [c.label_set for c in cliques] == [frozenset("abc")]


class TestClique:
    def test_equality_ignores_order(self, triangle_graph):
        a, b, c = (triangle_graph.get(x) for x in "abc")
        assert Clique((a, b, c)) == Clique((c, a, b))
        assert hash(Clique((a, b, c))) == hash(Clique((b, c, a)))

    def test_labels_keep_storage_order(self, triangle_graph):
        a, b, c = (triangle_graph.get(x) for x in "abc")
        clique = Clique((c, a, b))
        assert clique.labels == ["c", "a", "b"]
        assert clique.label_set == frozenset("abc")
        assert clique.size == 3

    def test_repeated_member_rejected(self, triangle_graph):
        a, b = triangle_graph.get("a"), triangle_graph.get("b")
        with pytest.raises(InternalInvariantViolation, match="repeated"):
            Clique((a, b, a))

    def test_common_members(self, model_graph):
        v = {n.label: n for n in model_graph}
        c1 = Clique((v["v3"], v["v4"], v["v5"]))
        c2 = Clique((v["v4"], v["v5"], v["v6"]))
        assert c1.common_members(c2) == 2

    def test_is_clique(self, model_graph):
        v = {n.label: n for n in model_graph}
        assert is_clique([v["v4"], v["v5"], v["v6"], v["v7"]])
        assert not is_clique([v["v3"], v["v4"], v["v6"]])
        assert is_clique([v["v1"]])


class TestCheckCliqueInvariants:
    def test_valid_list_passes(self, triangle_graph):
        check_clique_invariants([Clique(tuple(triangle_graph))], 3)

    def test_wrong_size(self, triangle_graph):
        a, b = triangle_graph.get("a"), triangle_graph.get("b")
        with pytest.raises(InternalInvariantViolation, match="expected 3"):
            check_clique_invariants([Clique((a, b))], 3)

    def test_not_connected(self, path_graph):
        nodes = tuple(path_graph)[:3]
        with pytest.raises(InternalInvariantViolation, match="not fully connected"):
            check_clique_invariants([Clique(nodes)], 3)

    def test_duplicate(self, triangle_graph):
        a, b, c = (triangle_graph.get(x) for x in "abc")
        with pytest.raises(InternalInvariantViolation, match="twice"):
            check_clique_invariants([Clique((a, b, c)), Clique((c, b, a))], 3)
