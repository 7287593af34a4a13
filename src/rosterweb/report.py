"""
Project: RosterWeb
File Name: report.py
Description:
    Plain-text console report for a dataset overview and a NetworkReport.
    Every function returns a string; printing is left to the caller.
"""

from __future__ import annotations

from rosterweb.analysis.models import NetworkReport
from rosterweb.data.overview import DatasetOverview


# ── Pretty-printing helpers ──────────────────────────────────────────────────


def _header(title: str) -> str:
    width = 60
    return f"\n{'═' * width}\n  {title}\n{'═' * width}"


def _subheader(title: str) -> str:
    return f"\n  ── {title} {'─' * max(1, 50 - len(title))}"


def _kv(key: str, value, indent: int = 4) -> str:
    pad = " " * indent
    return f"{pad}{key}: {value}"


# ── Report sections ──────────────────────────────────────────────────────────


def format_overview(overview: DatasetOverview) -> str:
    lines = [
        _header("DATASET OVERVIEW"),
        _kv("Player-season records", overview.total_records),
        _kv("Unique players", overview.unique_players),
        _kv("Unique teams", overview.unique_teams),
        _kv("Seasons covered", overview.unique_seasons),
        _kv("Average name length", f"{overview.avg_name_length:.2f} characters"),
        _kv("Average team code length", f"{overview.avg_team_length:.2f} characters"),
        _kv("Average points per game", f"{overview.avg_points:.2f}"),
    ]
    if overview.sample:
        lines.append(_subheader("Sample records"))
        for r in overview.sample:
            lines.append(f"    {r.player_name} | {r.team} | {r.season}")
    return "\n".join(lines)


def format_network_report(report: NetworkReport, top_n: int = 10) -> str:
    lines = [
        _header("TEAMMATE NETWORK SUMMARY"),
        _kv("Players (nodes)", report.node_count),
        _kv("Teammate links (edges)", report.edge_count),
        _kv("Density", f"{report.density:.4f}"),
        _kv("Mean degree", f"{report.mean_degree:.2f}"),
        _kv("Max degree", report.max_degree),
    ]

    if report.avg_path_length is None:
        lines.append(_kv("Average shortest-path length", "no data (no connected pair sampled)"))
    else:
        lines.append(_kv("Average shortest-path length", f"{report.avg_path_length:.4f}"))

    if report.most_similar is None:
        lines.append(_kv("Most similar players", "no pair (fewer than two players)"))
    else:
        pair = report.most_similar
        lines.append(_kv(
            "Most similar players",
            f"{pair.player_a} and {pair.player_b} (Jaccard = {pair.similarity:.4f})",
        ))

    top = report.top_central(top_n)
    if top:
        lines.append(_subheader("Top closeness centrality"))
        for name, score in top:
            lines.append(f"    {name}: {score:.3f}")

    if report.top_partnerships:
        lines.append(_subheader("Most shared rosters"))
        for a, b, weight in report.top_partnerships:
            lines.append(f"    {a} - {b}: {weight}")

    return "\n".join(lines)
