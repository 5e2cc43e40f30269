"""Boundary views for scheme fit."""

from enum import Enum

from pydantic import BaseModel, Field


class FitDescriptionEnum(str, Enum):
    """Three-way fit description shown to the user."""
    GOOD = "Good fit"
    AVERAGE = "Average fit"
    POOR = "Poor fit"


class TransitionStatusEnum(str, Enum):
    """How far along a player is in learning a scheme."""
    LEARNING = "Learning"
    ADJUSTING = "Adjusting"
    FULLY_ADAPTED = "Fully adapted"


class SchemeFitView(BaseModel):
    """Qualitative scheme fit. Raw scores never leave the engine."""
    scheme_name: str = Field(..., description="Display name of the scheme")
    fit_description: FitDescriptionEnum
    transition_status: TransitionStatusEnum
