"""
Project: RosterWeb
File Name: data/loader.py
Description:
    Season-level player CSV parser.
    Reads the public NBA "all_seasons.csv" layout and converts each row
    into a PlayerSeason.  Columns are read by position:
      1  player_name
      2  team_abbreviation
      12 pts   (points per game)
      13 reb   (rebounds per game)
      14 ast   (assists per game)
      21 season
    Rows missing a name, team or season are dropped; malformed stats
    default to 0.0.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from rosterweb.core.models import PlayerSeason

logger = logging.getLogger(__name__)

NAME_COL = 1
TEAM_COL = 2
PTS_COL = 12
REB_COL = 13
AST_COL = 14
SEASON_COL = 21

_REQUIRED_COLUMNS = SEASON_COL + 1


def _stat(column: pd.Series) -> pd.Series:
    return pd.to_numeric(column, errors="coerce").fillna(0.0).astype(float)


def load_player_seasons(path: str | Path) -> list[PlayerSeason]:
    """Load player-season records from a CSV file with a header row.

    Args:
        path: CSV file in the all_seasons.csv column layout.

    Returns:
        One PlayerSeason per valid row, in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file has too few columns for the layout.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Player data not found: {path}")

    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        on_bad_lines="skip",
    )
    if df.shape[1] < _REQUIRED_COLUMNS:
        raise ValueError(
            f"{path}: expected at least {_REQUIRED_COLUMNS} columns, found {df.shape[1]}"
        )

    names = df.iloc[:, NAME_COL].fillna("")
    teams = df.iloc[:, TEAM_COL].fillna("")
    seasons = df.iloc[:, SEASON_COL].fillna("")
    pts = _stat(df.iloc[:, PTS_COL])
    reb = _stat(df.iloc[:, REB_COL])
    ast = _stat(df.iloc[:, AST_COL])

    keep = (names != "") & (teams != "") & (seasons != "")
    dropped = int((~keep).sum())
    if dropped:
        logger.warning("Dropped %d rows with a missing name, team or season", dropped)

    records = [
        PlayerSeason(
            player_name=name,
            team=team,
            season=season,
            pts=float(p),
            ast=float(a),
            reb=float(r),
        )
        for name, team, season, p, a, r in zip(
            names[keep], teams[keep], seasons[keep], pts[keep], ast[keep], reb[keep],
        )
    ]
    logger.info("Loaded %d player-season records from %s", len(records), path)
    return records
