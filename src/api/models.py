# src/api/models.py — v1
"""API-level models: PercolationResult and its serializable summary."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from cliqueperc.graph.clique import Clique
from cliqueperc.graph.layers.models import CommunityPartition
from cliqueperc.graph.model import Graph


class CliqueRecord(BaseModel):
    """Serializable view of one clique."""

    label: str
    members: list[str]


class PercolationSummary(BaseModel):
    """JSON-friendly summary of a percolation run."""

    run_id: str
    source: str
    k: int
    node_count: int
    edge_count: int
    cliques: list[CliqueRecord] = Field(default_factory=list)
    community_edges: list[tuple[str, str]] = Field(default_factory=list)
    partition: CommunityPartition
    stats: dict[str, int] = Field(default_factory=dict)


@dataclass
class PercolationResult:
    """Return value of facade.percolate()."""

    run_id: str
    source: str
    k: int
    graph: Graph
    cliques: list[Clique]
    community_graph: Graph
    partition: CommunityPartition
    stats: dict[str, int] = field(default_factory=dict)

    def summary(self) -> PercolationSummary:
        """Serializable view; community edges are listed once per pair."""
        edges: list[tuple[str, str]] = []
        seen: set[frozenset[str]] = set()
        for node in self.community_graph:
            for neighbor in node.neighbors:
                pair = frozenset((node.label, neighbor.label))
                if pair not in seen:
                    seen.add(pair)
                    edges.append((node.label, neighbor.label))

        return PercolationSummary(
            run_id=self.run_id,
            source=self.source,
            k=self.k,
            node_count=len(self.graph),
            edge_count=self.graph.number_of_edges() // 2,
            cliques=[
                CliqueRecord(label=cn.label, members=cn.clique.labels)
                for cn in self.community_graph
                if cn.clique is not None
            ],
            community_edges=edges,
            partition=self.partition,
            stats=self.stats,
        )
