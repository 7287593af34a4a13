"""
RosterWeb: teammate network analysis for season-level player data.

Usage::

    from rosterweb import (
        PlayerSeason, load_player_seasons,
        build_player_graph, PlayerGraph,
        degree_histogram, closeness_centrality,
        sample_average_distance, most_similar_pair,
        analyze_network, AnalysisConfig,
    )
"""

from importlib.metadata import version
__version__ = version("rosterweb")

# Core models
from rosterweb.core.models import PlayerSeason

# Data loading
from rosterweb.data.loader import load_player_seasons
from rosterweb.data.overview import DatasetOverview, summarize_records

# Network
from rosterweb.network.builder import build_player_graph
from rosterweb.network.metrics import closeness_centrality, degree_histogram
from rosterweb.network.models import PlayerGraph, PlayerNode, SimilarPair, TeammateEdge
from rosterweb.network.paths import sample_average_distance
from rosterweb.network.similarity import most_similar_pair

# Analysis
from rosterweb.analysis.analyzer import analyze_network, analyze_records
from rosterweb.analysis.models import DEFAULT_CONFIG, AnalysisConfig, NetworkReport

__all__ = [
    # Core
    "PlayerSeason",
    # Data
    "DatasetOverview",
    "load_player_seasons",
    "summarize_records",
    # Network
    "PlayerGraph",
    "PlayerNode",
    "SimilarPair",
    "TeammateEdge",
    "build_player_graph",
    "closeness_centrality",
    "degree_histogram",
    "most_similar_pair",
    "sample_average_distance",
    # Analysis
    "DEFAULT_CONFIG",
    "AnalysisConfig",
    "NetworkReport",
    "analyze_network",
    "analyze_records",
]
