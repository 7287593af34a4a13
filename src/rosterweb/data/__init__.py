"""Data loading and dataset overview."""

from rosterweb.data.loader import load_player_seasons
from rosterweb.data.overview import DatasetOverview, summarize_records

__all__ = [
    "DatasetOverview",
    "load_player_seasons",
    "summarize_records",
]
