"""Top-N closeness centrality bar chart, scores shown as percentages."""

from __future__ import annotations

import math

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from rosterweb.network.metrics import top_central


def plot_centrality_scores(
    scores: dict[str, float],
    *,
    top_n: int = 20,
    figsize: tuple[float, float] = (12, 6),
    color: str = "#2ca02c",
) -> tuple[Figure, Axes]:
    """Bar chart of the ``top_n`` players by closeness centrality.

    Args:
        scores: player name → closeness, from closeness_centrality().
        top_n: Number of players to show.
        figsize: Figure size.
        color: Bar color.

    Returns:
        (fig, ax) tuple.
    """
    top = top_central(scores, top_n)
    names = [name for name, _ in top]
    pct = [score * 100.0 for _, score in top]

    max_pct = max(pct, default=0.0)
    upper = math.ceil(max_pct * 1.1) if max_pct > 0 else 1.0

    fig, ax = plt.subplots(figsize=figsize)
    positions = list(range(len(names)))
    ax.bar(positions, pct, color=color)

    for x, value in zip(positions, pct):
        ax.annotate(
            f"{value:.1f}",
            (x, value),
            xytext=(0, 3),
            textcoords="offset points",
            ha="center",
            va="bottom",
            fontsize=8,
        )

    ax.set_xticks(positions)
    ax.set_xticklabels(names, rotation=90, fontsize=9)
    ax.set_ylim(0, upper)
    ax.set_ylabel("Closeness centrality (%)")
    ax.set_title("Top Player Centrality Scores (%)", fontsize=14)
    fig.tight_layout()
    return fig, ax
