"""
Project: RosterWeb
File Name: test_analyzer.py
Description:
    Tests for the full network analysis, console report and charts.
"""

import math

import numpy as np
from matplotlib.figure import Figure

from rosterweb.analysis.analyzer import analyze_network, analyze_records
from rosterweb.analysis.models import AnalysisConfig
from rosterweb.core.models import PlayerSeason
from rosterweb.data.overview import summarize_records
from rosterweb.network.builder import build_player_graph
from rosterweb.report import format_network_report, format_overview
from rosterweb.viz.centrality import plot_centrality_scores
from rosterweb.viz.degree import plot_degree_distribution, plot_degree_loglog


def _records(*rows: tuple[str, str, str]) -> list[PlayerSeason]:
    return [PlayerSeason(player_name=n, team=t, season=s) for n, t, s in rows]


SCENARIO = _records(
    ("Alice", "Lakers", "2020"),
    ("Bob", "Lakers", "2020"),
    ("Alice", "Heat", "2021"),
    ("Carol", "Heat", "2021"),
)


class TestAnalyzeNetwork:
    def test_scenario(self):
        graph, report = analyze_records(SCENARIO, AnalysisConfig(seed=1))

        assert graph.node_count == report.node_count == 3
        assert report.edge_count == 2
        assert report.degree_histogram == {1: 2, 2: 1}
        assert report.centrality["Alice"] == 1.0
        assert math.isclose(report.centrality["Bob"], 2 / 3)
        assert report.most_similar.player_a == "Bob"
        assert report.most_similar.player_b == "Carol"
        assert report.avg_path_length is not None
        assert 1.0 <= report.avg_path_length <= 2.0

    def test_mean_and_max_degree(self):
        _, report = analyze_records(SCENARIO, AnalysisConfig(seed=1))
        assert report.max_degree == 2
        assert math.isclose(report.mean_degree, 4 / 3)

    def test_empty_graph(self):
        report = analyze_network(build_player_graph([]), AnalysisConfig(seed=0))

        assert report.degree_histogram == {}
        assert report.centrality == {}
        assert report.avg_path_length is None
        assert report.most_similar is None
        assert report.mean_degree == 0.0
        assert report.max_degree == 0

    def test_injected_rng_is_reproducible(self):
        graph = build_player_graph(SCENARIO)
        a = analyze_network(graph, rng=np.random.default_rng(11))
        b = analyze_network(graph, rng=np.random.default_rng(11))
        assert a.avg_path_length == b.avg_path_length


class TestReport:
    def test_network_report_text(self):
        _, report = analyze_records(SCENARIO, AnalysisConfig(seed=1))
        text = format_network_report(report)

        assert "TEAMMATE NETWORK SUMMARY" in text
        assert "Bob and Carol" in text
        assert "Alice: 1.000" in text

    def test_empty_report_uses_sentinels(self):
        report = analyze_network(build_player_graph([]))
        text = format_network_report(report)

        assert "no data" in text
        assert "no pair" in text

    def test_overview_text(self):
        text = format_overview(summarize_records(SCENARIO))
        assert "Unique players: 3" in text
        assert "Alice | Lakers | 2020" in text


class TestCharts:
    def test_degree_distribution(self):
        fig, ax = plot_degree_distribution({1: 2, 2: 1, 15: 4})
        assert isinstance(fig, Figure)
        assert len(ax.patches) == 2  # bins 0 and 10

    def test_loglog_skips_degree_zero(self):
        assert plot_degree_loglog({0: 5}) is None
        fig, _ = plot_degree_loglog({0: 5, 1: 3, 10: 1})
        assert isinstance(fig, Figure)

    def test_centrality_top_n(self):
        scores = {f"P{i}": i / 30 for i in range(30)}
        _, ax = plot_centrality_scores(scores, top_n=20)
        assert len(ax.patches) == 20

    def test_centrality_all_zero(self):
        _, ax = plot_centrality_scores({"A": 0.0, "B": 0.0})
        assert ax.get_ylim()[1] == 1.0
