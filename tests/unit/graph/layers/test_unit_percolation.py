# tests/unit/graph/layers/test_unit_percolation.py — v1
"""Tests for graph/layers/percolation.py — connected components as communities."""

from __future__ import annotations

from cliqueperc.graph.community_builder import build_community_graph
from cliqueperc.graph.finder import find_cliques
from cliqueperc.graph.layers.models import CommunityPartition
from cliqueperc.graph.layers.percolation import _collect_members, extract_communities
from cliqueperc.graph.model import Graph


def _community_graph(graph, k):
    return build_community_graph(find_cliques(graph, k).cliques, k)


class TestExtractCommunities:
    def test_empty_graph(self):
        result = extract_communities(Graph(), 3)
        assert isinstance(result, CommunityPartition)
        assert result.total_communities == 0
        assert result.communities == []

    def test_model_graph_k3(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 3), 3)
        assert result.total_communities == 3
        assert result.total_cliques == 8
        members = [c.members for c in result.communities]
        assert members == [
            ["v3", "v4", "v5", "v6", "v7", "v8"],
            ["v1", "v2", "v3"],
            ["v10", "v8", "v9"],
        ]

    def test_overlapping_vertices(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 3), 3)
        assert result.communities_of("v3") == ["comm_000", "comm_001"]
        assert result.communities_of("v8") == ["comm_000", "comm_002"]
        assert result.communities_of("v42") == []

    def test_model_graph_k4(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 4), 4)
        assert result.total_communities == 1
        assert result.communities[0].members == ["v4", "v5", "v6", "v7"]
        assert result.communities[0].size == 4
        assert result.k == 4

    def test_community_ids_formatted(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 3), 3)
        assert [c.community_id for c in result.communities] == [
            "comm_000", "comm_001", "comm_002",
        ]

    def test_cliques_listed_per_community(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 3), 3)
        assert len(result.communities[0].cliques) == 6
        assert len(result.communities[1].cliques) == 1

    def test_min_community_size_filters(self, model_graph):
        result = extract_communities(_community_graph(model_graph, 3), 3, min_community_size=2)
        assert result.total_communities == 1
        assert result.total_cliques == 8

    def test_does_not_modify_input(self, model_graph):
        g = _community_graph(model_graph, 3)
        edges_before = g.number_of_edges()
        extract_communities(g, 3)
        assert g.number_of_edges() == edges_before
        assert len(g) == 8

    def test_one_sided_community_graph_uses_weak_components(self, model_graph):
        cliques = find_cliques(model_graph, 4).cliques + find_cliques(model_graph, 3).cliques[:1]
        g = Graph()
        a = g.add_node("a", clique=cliques[0])
        b = g.add_node("b", clique=cliques[1])
        g.add_edge(a, b)
        result = extract_communities(g, 3)
        assert result.total_communities == 1


class TestCollectMembers:
    def test_union_of_members(self, model_graph):
        nxg = _community_graph(model_graph, 3).to_networkx()
        members = _collect_members(nxg, list(nxg.nodes))
        assert members == {f"v{i}" for i in range(1, 11)}

    def test_empty(self, model_graph):
        nxg = _community_graph(model_graph, 3).to_networkx()
        assert _collect_members(nxg, []) == set()
