"""
Project: RosterWeb
File Name: network/similarity.py
Description:
    Structural similarity between players: Jaccard coefficient of their
    teammate sets, |N(a) ∩ N(b)| / |N(a) ∪ N(b)|.

    The search visits players sorted by name with a nested ascending
    index, so ties always resolve to the same pair.
"""

from __future__ import annotations

from rosterweb.network.models import PlayerGraph, SimilarPair


def jaccard(a: set[int], b: set[int]) -> float:
    """Jaccard similarity of two sets; 0.0 when both are empty."""
    union = len(a | b)
    return len(a & b) / union if union > 0 else 0.0


def most_similar_pair(graph: PlayerGraph) -> SimilarPair | None:
    """The pair of players whose teammate sets overlap the most.

    Only strictly greater similarities replace the current best, so the
    first pair in (sorted name, ascending index) order wins ties.

    Returns:
        SimilarPair, or None when the graph has fewer than two players.
    """
    if graph.node_count < 2:
        return None

    order = sorted(graph.nodes, key=lambda n: n.name)
    neighbor_sets = [set(graph.neighbors(n.index)) for n in order]

    best: SimilarPair | None = None
    for i in range(len(order)):
        for j in range(i + 1, len(order)):
            sim = jaccard(neighbor_sets[i], neighbor_sets[j])
            if best is None or sim > best.similarity:
                best = SimilarPair(
                    player_a=order[i].name,
                    player_b=order[j].name,
                    similarity=sim,
                )
    return best
