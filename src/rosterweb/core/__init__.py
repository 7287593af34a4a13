"""Core data models."""

from rosterweb.core.models import PlayerSeason

__all__ = ["PlayerSeason"]
