"""
RosterWeb CLI entry point.

Runs the full pipeline:
  1. Load player-season records from CSV
  2. Print a dataset overview
  3. Build the teammate network
  4. Degree distribution, closeness centrality, sampled path length,
     most similar pair
  5. Save charts to the output directory and print the summary

Usage:
    rosterweb data/all_seasons.csv
    rosterweb data/all_seasons.csv --seed 7 --sample-size 500
    rosterweb data/all_seasons.csv --output-dir charts --top-n 30
    rosterweb data/all_seasons.csv --no-plots
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from rosterweb.analysis.analyzer import analyze_network
from rosterweb.analysis.models import DEFAULT_CONFIG, AnalysisConfig, NetworkReport
from rosterweb.data.loader import load_player_seasons
from rosterweb.data.overview import summarize_records
from rosterweb.network.builder import build_player_graph
from rosterweb.report import format_network_report, format_overview
from rosterweb.viz.centrality import plot_centrality_scores
from rosterweb.viz.degree import plot_degree_distribution, plot_degree_loglog

logger = logging.getLogger(__name__)

DEGREE_PLOT = "degree_distribution.png"
LOGLOG_PLOT = "degree_loglog.png"
CENTRALITY_PLOT = "centrality_scores.png"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rosterweb",
        description="Teammate network analysis over season-level player records",
    )
    parser.add_argument("data", type=Path, help="Player-season CSV (all_seasons.csv layout)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        metavar="DIR",
        help="Directory for generated charts (default: output)",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=DEFAULT_CONFIG.sample_size,
        metavar="N",
        help=f"Random pairs for the average path length (default: {DEFAULT_CONFIG.sample_size})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for pair sampling (default: unseeded)",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=DEFAULT_CONFIG.top_n,
        metavar="N",
        help=f"Players in the centrality chart (default: {DEFAULT_CONFIG.top_n})",
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def save_plots(report: NetworkReport, output_dir: Path, config: AnalysisConfig) -> list[Path]:
    """Render the three charts into ``output_dir``; returns the files written."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    figures = [
        (DEGREE_PLOT, plot_degree_distribution(
            report.degree_histogram, bin_width=config.degree_bin_width,
        )),
        (LOGLOG_PLOT, plot_degree_loglog(report.degree_histogram)),
        (CENTRALITY_PLOT, plot_centrality_scores(report.centrality, top_n=config.top_n)),
    ]
    for filename, result in figures:
        if result is None:
            continue
        fig, _ = result
        path = output_dir / filename
        fig.savefig(path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        logger.info("Saved %s", path)
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = dataclasses.replace(
        DEFAULT_CONFIG,
        sample_size=args.sample_size,
        seed=args.seed,
        top_n=args.top_n,
    )

    try:
        records = load_player_seasons(args.data)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print(format_overview(summarize_records(records)))

    graph = build_player_graph(records)
    report = analyze_network(graph, config)

    if not args.no_plots:
        save_plots(report, args.output_dir, config)

    print(format_network_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
