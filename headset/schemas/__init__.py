"""Boundary-safe view models.

Everything the presentation layer is allowed to see from the coaching
engines. None of these models carry raw chemistry values, raw scheme-fit
scores, or hidden attributes; they are produced by the projection
functions in the engine modules.
"""

from headset.schemas.chemistry import ChemistryDescription, TeamChemistryDescription
from headset.schemas.development import (
    DevelopmentImpactView,
    ProgressionSummary,
    SkillChangeSummary,
)
from headset.schemas.player import PlayerView, SkillView
from headset.schemas.scheme_fit import FitDescriptionEnum, SchemeFitView, TransitionStatusEnum
from headset.schemas.staff import NotableRelationship, StaffChemistryView
from headset.schemas.tendencies import TendencyDescription

__all__ = [
    "ChemistryDescription",
    "DevelopmentImpactView",
    "FitDescriptionEnum",
    "NotableRelationship",
    "PlayerView",
    "ProgressionSummary",
    "SchemeFitView",
    "SkillChangeSummary",
    "SkillView",
    "StaffChemistryView",
    "TeamChemistryDescription",
    "TendencyDescription",
    "TransitionStatusEnum",
]
