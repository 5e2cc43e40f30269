"""Boundary views for coach development impact."""

from typing import List

from pydantic import BaseModel, Field


class DevelopmentImpactView(BaseModel):
    """How a coach is expected to affect a player, without any numbers."""
    relationship_quality: str = Field(..., description="excellent, good, neutral, strained, or poor")
    impact_description: str
    development_outlook: str
    focus_areas: List[str] = Field(default_factory=list)


class SkillChangeSummary(BaseModel):
    """Direction of a skill change after progression."""
    skill: str
    improved: bool


class ProgressionSummary(BaseModel):
    """Offseason or in-season progression outcome for display."""
    player_id: str
    influence: str
    description: str
    changes: List[SkillChangeSummary] = Field(default_factory=list)
    is_breakout: bool = False
