"""Degree distribution charts: binned histogram and log-log scatter."""

from __future__ import annotations

import logging
import math

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from rosterweb.network.metrics import binned_degree_histogram

logger = logging.getLogger(__name__)


def plot_degree_distribution(
    histogram: dict[int, int],
    *,
    bin_width: int = 10,
    figsize: tuple[float, float] = (8, 6),
    color: str = "#1f4fd6",
) -> tuple[Figure, Axes]:
    """Bar chart of the degree distribution, folded into bins.

    Args:
        histogram: degree → player count, from degree_histogram().
        bin_width: Degrees per bar.
        figsize: Figure size.
        color: Bar color.

    Returns:
        (fig, ax) tuple.
    """
    binned = binned_degree_histogram(histogram, bin_width)

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(
        list(binned.keys()),
        list(binned.values()),
        width=bin_width * 0.9,
        align="edge",
        color=color,
    )
    ax.set_title("Degree Distribution (Binned)", fontsize=14)
    ax.set_xlabel(f"Degree (bins of {bin_width})")
    ax.set_ylabel("Players")
    ax.grid(axis="y", linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)
    return fig, ax


def plot_degree_loglog(
    histogram: dict[int, int],
    *,
    figsize: tuple[float, float] = (8, 6),
    color: str = "#d62728",
) -> tuple[Figure, Axes] | None:
    """Scatter of log10(count) against log10(degree).

    A roughly straight line hints at a power-law degree distribution.
    Degree-0 players are left out (log undefined).

    Returns:
        (fig, ax) tuple, or None when there is nothing to plot.
    """
    points = sorted(
        (math.log10(d), math.log10(c))
        for d, c in histogram.items()
        if d > 0 and c > 0
    )
    if not points:
        logger.warning("Log-log degree distribution data is empty, no plot generated")
        return None

    fig, ax = plt.subplots(figsize=figsize)
    ax.scatter([p[0] for p in points], [p[1] for p in points], s=12, c=color)
    ax.set_title("Degree Distribution (Log-Log Scale)", fontsize=14)
    ax.set_xlabel("log10(degree)")
    ax.set_ylabel("log10(players)")
    ax.grid(linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)
    return fig, ax
