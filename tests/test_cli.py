"""
Project: RosterWeb
File Name: test_cli.py
Description:
    End-to-end test of the command-line pipeline.
"""

from rosterweb.cli import CENTRALITY_PLOT, DEGREE_PLOT, LOGLOG_PLOT, main

HEADER = ",player_name,team_abbreviation," + ",".join(f"c{i}" for i in range(3, 21)) + ",season"


def _line(i: int, name: str, team: str, season: str) -> str:
    return ",".join([str(i), name, team] + ["1.0"] * 18 + [season])


def _write_csv(path) -> None:
    lines = [
        HEADER,
        _line(0, "Alice", "LAL", "2019-20"),
        _line(1, "Bob", "LAL", "2019-20"),
        _line(2, "Alice", "MIA", "2020-21"),
        _line(3, "Carol", "MIA", "2020-21"),
    ]
    path.write_text("\n".join(lines) + "\n")


class TestMain:
    def test_full_run(self, tmp_path, capsys):
        data = tmp_path / "all_seasons.csv"
        _write_csv(data)
        out_dir = tmp_path / "charts"

        code = main([str(data), "--output-dir", str(out_dir), "--seed", "3", "--sample-size", "20"])

        assert code == 0
        for name in (DEGREE_PLOT, LOGLOG_PLOT, CENTRALITY_PLOT):
            assert (out_dir / name).exists()
        printed = capsys.readouterr().out
        assert "DATASET OVERVIEW" in printed
        assert "Bob and Carol" in printed

    def test_no_plots(self, tmp_path):
        data = tmp_path / "all_seasons.csv"
        _write_csv(data)
        out_dir = tmp_path / "charts"

        assert main([str(data), "--output-dir", str(out_dir), "--no-plots"]) == 0
        assert not out_dir.exists()

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.csv"), "--no-plots"]) == 1
