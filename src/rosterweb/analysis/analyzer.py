"""
Project: RosterWeb
File Name: analysis/analyzer.py
Description:
    Main analysis entry point.
    Takes a built teammate network, runs every structural metric on it
    and collects the results in a NetworkReport.
"""

from __future__ import annotations

import logging

import numpy as np

from rosterweb.analysis.models import DEFAULT_CONFIG, AnalysisConfig, NetworkReport
from rosterweb.core.models import PlayerSeason
from rosterweb.network.builder import build_player_graph
from rosterweb.network.metrics import closeness_centrality, degree_histogram
from rosterweb.network.models import PlayerGraph
from rosterweb.network.paths import sample_average_distance
from rosterweb.network.similarity import most_similar_pair

logger = logging.getLogger(__name__)


def analyze_network(
    graph: PlayerGraph,
    config: AnalysisConfig = DEFAULT_CONFIG,
    rng: np.random.Generator | None = None,
) -> NetworkReport:
    """Compute all structural statistics for a teammate network.

    The graph is only read; each metric is independent of the others.

    Args:
        graph: A PlayerGraph built by build_player_graph().
        config: Sampling and reporting settings.
        rng: Random source for path sampling.  Defaults to one seeded
            from ``config.seed``.

    Returns:
        NetworkReport with degree histogram, closeness, sampled average
        path length and the most similar pair.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    logger.info("Analyzing degree distribution")
    degrees = degree_histogram(graph)

    logger.info("Computing closeness centrality for %d players", graph.node_count)
    centrality = closeness_centrality(graph)

    logger.info("Sampling %d random pairs for average path length", config.sample_size)
    avg_path = sample_average_distance(graph, config.sample_size, rng)
    if avg_path is None:
        logger.warning("No connected pair found in the path sample")

    logger.info("Searching for the most similar player pair")
    similar = most_similar_pair(graph)

    return NetworkReport(
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        density=graph.density,
        degree_histogram=degrees,
        centrality=centrality,
        avg_path_length=avg_path,
        most_similar=similar,
        top_partnerships=graph.top_partnerships(),
    )


def analyze_records(
    records: list[PlayerSeason],
    config: AnalysisConfig = DEFAULT_CONFIG,
    rng: np.random.Generator | None = None,
) -> tuple[PlayerGraph, NetworkReport]:
    """Build the teammate network from records and analyze it."""
    graph = build_player_graph(records)
    return graph, analyze_network(graph, config, rng)
