"""
Project: RosterWeb
File Name: core/models.py
Description:
    Core record type shared across all RosterWeb modules.
    One PlayerSeason is one row of the season-level player dataset:
    a player, the team they played for and the season label.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerSeason:
    """A player's stint with one team in one season.

    Only player_name / team / season drive the teammate network.
    The per-game averages travel with the record for the dataset overview.
    """

    player_name: str
    team: str    # team abbreviation, e.g. "LAL"
    season: str  # season label, e.g. "2019-20"
    pts: float = 0.0  # points per game
    ast: float = 0.0  # assists per game
    reb: float = 0.0  # rebounds per game

    @property
    def group_key(self) -> tuple[str, str]:
        """The (team, season) roster this record belongs to."""
        return (self.team, self.season)
