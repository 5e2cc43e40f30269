"""Boundary views for coaching staff chemistry."""

from typing import List, Optional

from pydantic import BaseModel, Field


class NotableRelationship(BaseModel):
    """A standout pairing on the staff, named by the coaches involved."""
    coach_ids: List[str] = Field(..., min_length=2, max_length=2)
    description: str
    positive: bool


class StaffChemistryView(BaseModel):
    """Staff harmony as shown on the staff screen."""
    harmony: str = Field(..., description="excellent, good, neutral, strained, or toxic")
    description: str
    strongest: Optional[NotableRelationship] = None
    weakest: Optional[NotableRelationship] = None
