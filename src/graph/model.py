# src/graph/model.py — v1
"""Graph model: labelled nodes with ordered adjacency lists.

Both the input graph and the derived community graph are ``Graph``
instances. Edges are stored as one-directional neighbor references; an
undirected edge is two references. Nodes compare and hash by identity so
that cliques can be keyed on frozensets of nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

import networkx as nx

from cliqueperc.core.errors import MalformedInputError

if TYPE_CHECKING:
    from cliqueperc.graph.clique import Clique


@dataclass(eq=False)
class Node:
    """A graph vertex.

    Attributes:
        label: Unique label within the owning graph.
        neighbors: Adjacency list in insertion order.
        clique: Clique represented by this node (community graphs only).
    """

    label: str
    neighbors: list[Node] = field(default_factory=list)
    clique: Clique | None = None

    def __repr__(self) -> str:
        return f"Node({self.label!r}, degree={len(self.neighbors)})"

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def neighbor_labels(self) -> list[str]:
        return [n.label for n in self.neighbors]


def add_neighbor(node: Node, neighbor: Node) -> None:
    """Append ``neighbor`` to ``node``'s adjacency list (one direction only)."""
    node.neighbors.append(neighbor)


def is_connected(a: Node, b: Node) -> bool:
    """Return True if ``b`` appears in ``a``'s adjacency list.

    Directional: only the list stored on ``a`` is inspected.
    """
    return any(n is b for n in a.neighbors)


def find_by_label(nodes: Graph | list[Node], label: str) -> Node | None:
    """Linear scan for the node carrying ``label``."""
    for node in nodes:
        if node.label == label:
            return node
    return None


class Graph:
    """Ordered collection of nodes owned by one graph."""

    def __init__(self, nodes: list[Node] | None = None) -> None:
        self._nodes: list[Node] = []
        self._index: dict[str, Node] = {}
        for node in nodes or []:
            self._register(node)

    # --- Container protocol ---

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.number_of_edges()})"

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def labels(self) -> list[str]:
        return [n.label for n in self._nodes]

    # --- Mutation ---

    def add_node(self, label: str, clique: Clique | None = None) -> Node:
        """Create and register a node.

        Raises:
            MalformedInputError: If ``label`` is already registered.
        """
        node = Node(label=label, clique=clique)
        self._register(node)
        return node

    def add_edge(self, a: Node, b: Node) -> None:
        """Record the one-directional edge a -> b."""
        add_neighbor(a, b)

    def add_undirected_edge(self, a: Node, b: Node) -> None:
        """Record a <-> b, skipping directions that already exist."""
        if not is_connected(a, b):
            add_neighbor(a, b)
        if not is_connected(b, a):
            add_neighbor(b, a)

    def _register(self, node: Node) -> None:
        if node.label in self._index:
            raise MalformedInputError(
                f"'{node.label}': duplicate node; unable to add to graph",
                label=node.label,
            )
        self._nodes.append(node)
        self._index[node.label] = node

    # --- Queries ---

    def get(self, label: str) -> Node | None:
        """Indexed lookup by label."""
        return self._index.get(label)

    def number_of_edges(self) -> int:
        """Number of stored neighbor references (directed count)."""
        return sum(len(n.neighbors) for n in self._nodes)

    def asymmetric_edges(self) -> list[tuple[Node, Node]]:
        """Edges a -> b with no matching b -> a, in adjacency order."""
        return [
            (a, b)
            for a in self._nodes
            for b in a.neighbors
            if not is_connected(b, a)
        ]

    def is_symmetric(self) -> bool:
        return not self.asymmetric_edges()

    def to_networkx(self) -> nx.Graph:
        """Convert to NetworkX, keyed by label.

        Returns an undirected ``nx.Graph`` when adjacency is symmetric,
        otherwise an ``nx.DiGraph``. Community-graph nodes carry their
        clique members as the ``members`` attribute.
        """
        g: nx.Graph = nx.Graph() if self.is_symmetric() else nx.DiGraph()
        for node in self._nodes:
            attrs: dict[str, object] = {}
            if node.clique is not None:
                attrs["members"] = node.clique.labels
            g.add_node(node.label, **attrs)
        for node in self._nodes:
            for neighbor in node.neighbors:
                g.add_edge(node.label, neighbor.label)
        return g
