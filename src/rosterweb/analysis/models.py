"""
Project: RosterWeb
File Name: analysis/models.py
Description:
    Settings and result types for a full network analysis run:
    AnalysisConfig and NetworkReport.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rosterweb.network.metrics import top_central
from rosterweb.network.models import SimilarPair


@dataclass(frozen=True)
class AnalysisConfig:
    """Adjustable settings for analyze_network() and the CLI.

    seed=None draws a fresh random source each run; set it for
    reproducible path-length estimates.
    """

    sample_size: int = 100     # random pairs for the average path estimate
    seed: int | None = None
    top_n: int = 20            # players shown in the centrality chart
    degree_bin_width: int = 10


# Default settings, used when no overrides are supplied.
DEFAULT_CONFIG = AnalysisConfig()


@dataclass
class NetworkReport:
    """Everything computed from one teammate network.

    avg_path_length is None when no sampled pair was connected;
    most_similar is None when the graph has fewer than two players.
    """

    node_count: int
    edge_count: int
    density: float
    degree_histogram: dict[int, int] = field(default_factory=dict)
    centrality: dict[str, float] = field(default_factory=dict)
    avg_path_length: float | None = None
    most_similar: SimilarPair | None = None
    top_partnerships: list[tuple[str, str, int]] = field(default_factory=list)

    def top_central(self, top_n: int = 10) -> list[tuple[str, float]]:
        """Players with the highest closeness, descending."""
        return top_central(self.centrality, top_n)

    @property
    def max_degree(self) -> int:
        return max(self.degree_histogram, default=0)

    @property
    def mean_degree(self) -> float:
        """Average number of distinct teammates per player."""
        n = sum(self.degree_histogram.values())
        if n == 0:
            return 0.0
        return sum(d * c for d, c in self.degree_histogram.items()) / n
