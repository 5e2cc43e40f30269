"""Boundary views of players. Only perceived ranges, never true values."""

from typing import List

from pydantic import BaseModel, Field


class SkillView(BaseModel):
    """A skill as scouts see it."""
    name: str
    perceived_min: int = Field(..., ge=1, le=100)
    perceived_max: int = Field(..., ge=1, le=100)


class PlayerView(BaseModel):
    """Player card data safe for display."""
    id: str
    name: str
    position: str
    age: int
    skills: List[SkillView] = Field(default_factory=list)
    has_had_breakout: bool = False
