"""Boundary views for player-coach chemistry."""

from pydantic import BaseModel, Field


class ChemistryDescription(BaseModel):
    """Qualitative relationship summary between a coach and a player."""
    level: str = Field(..., description="excellent, good, neutral, strained, or toxic")
    description: str
    trend: str = Field("stable", description="improving, stable, or declining")


class TeamChemistryDescription(BaseModel):
    """Roster-wide chemistry summary for one coach."""
    level: str
    description: str
    players_evaluated: int = 0
