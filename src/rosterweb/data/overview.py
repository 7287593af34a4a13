"""Dataset overview: record counts and simple averages over the input."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from rosterweb.core.models import PlayerSeason


@dataclass(frozen=True)
class DatasetOverview:
    """High-level summary of a list of player-season records."""

    total_records: int
    unique_players: int
    unique_teams: int
    unique_seasons: int
    avg_name_length: float
    avg_team_length: float
    avg_points: float
    sample: list[PlayerSeason] = field(default_factory=list)


def summarize_records(records: list[PlayerSeason], sample_size: int = 5) -> DatasetOverview:
    """Count unique players/teams/seasons and average a few fields.

    Averages are 0.0 for an empty record list.
    """
    if not records:
        return DatasetOverview(
            total_records=0,
            unique_players=0,
            unique_teams=0,
            unique_seasons=0,
            avg_name_length=0.0,
            avg_team_length=0.0,
            avg_points=0.0,
        )

    return DatasetOverview(
        total_records=len(records),
        unique_players=len({r.player_name for r in records}),
        unique_teams=len({r.team for r in records}),
        unique_seasons=len({r.season for r in records}),
        avg_name_length=float(np.mean([len(r.player_name) for r in records])),
        avg_team_length=float(np.mean([len(r.team) for r in records])),
        avg_points=float(np.mean([r.pts for r in records])),
        sample=list(records[:sample_size]),
    )
