"""
Project: RosterWeb
File Name: network/metrics.py
Description:
    Graph-theoretic metrics computed from a PlayerGraph.

    1. Degree histogram: degree → number of players
    2. Closeness centrality: (|R| − 1) / Σ dist over the reachable set R

    Traversal is unit-cost: every edge counts as one hop whatever its
    weight (number of shared rosters).
"""

from __future__ import annotations

from collections import Counter, deque

from rosterweb.network.models import PlayerGraph


def degree_histogram(graph: PlayerGraph) -> dict[int, int]:
    """Map each degree to the number of players with that degree.

    Degree is the incident-edge count; repeated rosters raise the weight
    of an edge, never the degree.  Values sum to graph.node_count.
    """
    return dict(Counter(graph.degree(node.index) for node in graph.nodes))


def bfs_distances(graph: PlayerGraph, source: int) -> dict[int, int]:
    """Hop distance from ``source`` to every reachable node (source → 0)."""
    dist: dict[int, int] = {source: 0}
    queue: deque[int] = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v not in dist:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def closeness_centrality(graph: PlayerGraph) -> dict[str, float]:
    """Closeness centrality for every player, keyed by name.

    closeness = (|R| − 1) / S, where R is the set reachable from the node
    (itself included) and S the sum of hop distances to R.  Isolated
    players, and single-node graphs, score 0.0.
    """
    scores: dict[str, float] = {}
    for node in graph.nodes:
        dist = bfs_distances(graph, node.index)
        total = sum(dist.values())
        scores[node.name] = (len(dist) - 1) / total if total > 0 else 0.0
    return scores


def binned_degree_histogram(
    histogram: dict[int, int],
    bin_width: int = 10,
) -> dict[int, int]:
    """Fold a degree histogram into bins of ``bin_width`` degrees.

    Keys are bin lower bounds (0, 10, 20, …).  Counts are preserved.
    """
    if bin_width <= 0:
        raise ValueError(f"bin_width must be positive, got {bin_width}")
    binned: dict[int, int] = {}
    for degree, count in histogram.items():
        bin_start = (degree // bin_width) * bin_width
        binned[bin_start] = binned.get(bin_start, 0) + count
    return dict(sorted(binned.items()))


def top_central(scores: dict[str, float], top_n: int = 10) -> list[tuple[str, float]]:
    """Highest closeness scores, descending; ties broken by name."""
    return sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))[:top_n]
