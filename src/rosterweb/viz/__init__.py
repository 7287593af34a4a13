"""
Project: RosterWeb
File Name: __init__.py
Description:
    Visualization modules for RosterWeb.
"""

from rosterweb.viz.centrality import plot_centrality_scores
from rosterweb.viz.degree import plot_degree_distribution, plot_degree_loglog

__all__ = ["plot_centrality_scores", "plot_degree_distribution", "plot_degree_loglog"]
