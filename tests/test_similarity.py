"""
Project: RosterWeb
File Name: test_similarity.py
Description:
    Tests for Jaccard similarity and the most-similar-pair search.
"""

from rosterweb.core.models import PlayerSeason
from rosterweb.network.builder import build_player_graph
from rosterweb.network.models import SimilarPair
from rosterweb.network.similarity import jaccard, most_similar_pair


def _records(*rows: tuple[str, str, str]) -> list[PlayerSeason]:
    return [PlayerSeason(player_name=n, team=t, season=s) for n, t, s in rows]


class TestJaccard:
    def test_identical(self):
        assert jaccard({1, 2}, {1, 2}) == 1.0

    def test_disjoint(self):
        assert jaccard({1}, {2}) == 0.0

    def test_partial(self):
        assert jaccard({1, 2, 3}, {2, 3, 4}) == 0.5

    def test_both_empty(self):
        assert jaccard(set(), set()) == 0.0


class TestMostSimilarPair:
    def test_scenario(self):
        graph = build_player_graph(_records(
            ("Alice", "Lakers", "2020"),
            ("Bob", "Lakers", "2020"),
            ("Alice", "Heat", "2021"),
            ("Carol", "Heat", "2021"),
        ))
        # Bob and Carol share exactly one teammate: Alice
        assert most_similar_pair(graph) == SimilarPair("Bob", "Carol", 1.0)

    def test_empty_graph(self):
        assert most_similar_pair(build_player_graph([])) is None

    def test_single_node(self):
        assert most_similar_pair(build_player_graph(_records(("A", "X", "1")))) is None

    def test_isolated_nodes(self):
        graph = build_player_graph(_records(("Zed", "X", "1"), ("Amy", "Y", "1"), ("Max", "Z", "1")))
        result = most_similar_pair(graph)
        assert result == SimilarPair("Amy", "Max", 0.0)

    def test_tie_break_is_first_sorted_pair(self):
        rows = [
            ("X", "T1", "1"), ("A", "T1", "1"),
            ("X", "T2", "1"), ("B", "T2", "1"),
            ("Y", "T3", "1"), ("C", "T3", "1"),
            ("Y", "T4", "1"), ("D", "T4", "1"),
        ]
        forward = most_similar_pair(build_player_graph(_records(*rows)))
        backward = most_similar_pair(build_player_graph(_records(*reversed(rows))))

        assert forward == SimilarPair("A", "B", 1.0)
        assert backward == forward

    def test_complete_graph(self):
        # In K3 every pair shares one of three teammates: {B,C} vs {A,C}
        graph = build_player_graph(_records(("A", "X", "1"), ("B", "X", "1"), ("C", "X", "1")))
        result = most_similar_pair(graph)
        assert result.player_a == "A"
        assert result.player_b == "B"
        assert result.similarity == 1 / 3
