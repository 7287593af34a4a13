"""Teammate network analysis: graph construction and metrics."""

from rosterweb.network.builder import build_player_graph
from rosterweb.network.metrics import (
    binned_degree_histogram,
    closeness_centrality,
    degree_histogram,
    top_central,
)
from rosterweb.network.models import (
    PlayerGraph,
    PlayerNode,
    SimilarPair,
    TeammateEdge,
)
from rosterweb.network.paths import sample_average_distance
from rosterweb.network.similarity import most_similar_pair

__all__ = [
    "PlayerGraph",
    "PlayerNode",
    "SimilarPair",
    "TeammateEdge",
    "binned_degree_histogram",
    "build_player_graph",
    "closeness_centrality",
    "degree_histogram",
    "most_similar_pair",
    "sample_average_distance",
    "top_central",
]
