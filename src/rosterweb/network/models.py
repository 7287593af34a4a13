"""
Project: RosterWeb
File Name: network/models.py
Description:
    Data models for the teammate network.
    A PlayerGraph is an undirected weighted graph: nodes are players,
    edges join players who shared a roster (same team, same season).

    Storage is an index arena: nodes and edges live in tuples addressed
    by integer index, with a name → index lookup and per-node lists of
    incident edge indices.  Nothing holds a reference to another node.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerNode:
    """A player in the teammate network."""

    index: int
    name: str


@dataclass(frozen=True)
class TeammateEdge:
    """An undirected teammate relationship between two players.

    Endpoints are stored canonically (u < v).  weight is the number of
    (team, season) rosters the two players shared.
    """

    u: int
    v: int
    weight: int

    def other(self, index: int) -> int:
        """The endpoint opposite to ``index``."""
        return self.v if index == self.u else self.u


@dataclass(frozen=True)
class PlayerGraph:
    """A read-only teammate network.

    nodes:     index → PlayerNode
    edges:     edge index → TeammateEdge
    name_index: player name → node index
    incident:  node index → indices of edges touching that node
    """

    nodes: tuple[PlayerNode, ...]
    edges: tuple[TeammateEdge, ...]
    name_index: dict[str, int]
    incident: tuple[tuple[int, ...], ...]

    @classmethod
    def empty(cls) -> PlayerGraph:
        return cls(nodes=(), edges=(), name_index={}, incident=())

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def names(self) -> list[str]:
        return [n.name for n in self.nodes]

    @property
    def density(self) -> float:
        """|E| / (n × (n−1) / 2) for the undirected graph."""
        n = self.node_count
        if n <= 1:
            return 0.0
        return self.edge_count / (n * (n - 1) / 2)

    def index_of(self, name: str) -> int | None:
        return self.name_index.get(name)

    def degree(self, index: int) -> int:
        """Number of incident edges; weight does not count."""
        return len(self.incident[index])

    def neighbors(self, index: int) -> tuple[int, ...]:
        return tuple(self.edges[e].other(index) for e in self.incident[index])

    def find_edge(self, name_a: str, name_b: str) -> TeammateEdge | None:
        """The edge joining two players by name, or None."""
        a = self.name_index.get(name_a)
        b = self.name_index.get(name_b)
        if a is None or b is None or a == b:
            return None
        for e in self.incident[a]:
            if self.edges[e].other(a) == b:
                return self.edges[e]
        return None

    def top_partnerships(self, top_n: int = 5) -> list[tuple[str, str, int]]:
        """Most frequent teammate pairs (by shared rosters), descending."""
        ranked = sorted(self.edges, key=lambda e: e.weight, reverse=True)[:top_n]
        return [(self.nodes[e.u].name, self.nodes[e.v].name, e.weight) for e in ranked]


@dataclass(frozen=True)
class SimilarPair:
    """The most structurally similar pair of players."""

    player_a: str
    player_b: str
    similarity: float  # Jaccard of neighbor sets, 0–1
