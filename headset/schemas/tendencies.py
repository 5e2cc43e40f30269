"""Boundary views for coordinator tendencies."""

from typing import List

from pydantic import BaseModel, Field


class TendencyDescription(BaseModel):
    """Qualitative play-calling profile. No raw rates."""
    overall: str
    run_pass_balance: str
    aggressiveness: str
    special_traits: List[str] = Field(default_factory=list)
