"""
Project: RosterWeb
File Name: network/paths.py
Description:
    Approximate average shortest-path length by random pair sampling.

    Exact all-pairs distances are quadratic in the number of players, so
    the average is estimated from ``sample_size`` random distinct pairs.
    Each pair is resolved by a breadth-first search that stops as soon as
    the target is reached (unit edge cost).

    Pass a seeded ``numpy.random.Generator`` (or ``seed``) for
    reproducible estimates.
"""

from __future__ import annotations

from collections import deque

import numpy as np

from rosterweb.network.models import PlayerGraph

DEFAULT_SAMPLE_SIZE = 100


def shortest_path_length(graph: PlayerGraph, source: int, target: int) -> int | None:
    """Hop count from source to target, or None when disconnected."""
    if source == target:
        return 0
    dist: dict[int, int] = {source: 0}
    queue: deque[int] = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v in dist:
                continue
            if v == target:
                return dist[u] + 1
            dist[v] = dist[u] + 1
            queue.append(v)
    return None


def sample_pairs(
    graph: PlayerGraph,
    sample_size: int,
    rng: np.random.Generator,
) -> list[tuple[int, int]]:
    """Draw ``sample_size`` pairs of distinct node indices, with replacement.

    A draw whose two members coincide is rejected and redrawn.  Requires
    at least two nodes.
    """
    n = graph.node_count
    if n < 2:
        raise ValueError(f"Need at least 2 players to sample pairs, graph has {n}")

    pairs: list[tuple[int, int]] = []
    while len(pairs) < sample_size:
        a, b = (int(x) for x in rng.integers(0, n, size=2))
        if a != b:
            pairs.append((a, b))
    return pairs


def sample_average_distance(
    graph: PlayerGraph,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    rng: np.random.Generator | None = None,
    *,
    seed: int | None = None,
) -> float | None:
    """Estimate the average shortest-path length between players.

    Args:
        graph: The teammate network.
        sample_size: Number of distinct-node pairs to draw.
        rng: Random source.  Defaults to ``np.random.default_rng(seed)``.
        seed: Seed used only when ``rng`` is not given.

    Returns:
        Mean hop count over the sampled pairs that are connected, or None
        when the graph has fewer than two players, ``sample_size`` is not
        positive, or no sampled pair was connected.
    """
    if graph.node_count < 2 or sample_size <= 0:
        return None
    if rng is None:
        rng = np.random.default_rng(seed)

    total_length = 0
    count = 0
    for a, b in sample_pairs(graph, sample_size, rng):
        length = shortest_path_length(graph, a, b)
        if length is None:
            continue
        total_length += length
        count += 1

    if count == 0:
        return None
    return total_length / count
