# src/graph/layers/models.py — v1
"""Community models: Community, CommunityPartition."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Community(BaseModel):
    """One k-clique community: a connected component of the community graph."""

    community_id: str
    members: list[str] = Field(default_factory=list)
    cliques: list[str] = Field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of original-graph vertices in the community."""
        return len(self.members)


class CommunityPartition(BaseModel):
    """All communities found for one clique size.

    Communities may overlap: a vertex belongs to every community holding
    one of its cliques.
    """

    k: int
    communities: list[Community] = Field(default_factory=list)
    total_communities: int = 0
    total_cliques: int = 0

    def communities_of(self, label: str) -> list[str]:
        """Ids of the communities containing original vertex ``label``."""
        return [c.community_id for c in self.communities if label in c.members]
