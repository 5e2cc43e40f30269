"""Coaching and roster enumerations."""

from headset.core.enums.coaching import (
    DEFENSIVE_SCHEMES,
    OFFENSIVE_SCHEMES,
    ChemistryLevel,
    ChemistryTrend,
    CoachPersonalityType,
    CoachRole,
    DefensiveLean,
    FitLevel,
    InfluenceTier,
    OffensiveLean,
    PlayerPersonalityType,
    RiskTolerance,
    Scheme,
    SkillImportance,
    TreeName,
)
from headset.core.enums.positions import (
    DEFENSIVE_POSITIONS,
    OFFENSIVE_LINE,
    OFFENSIVE_POSITIONS,
    SPECIAL_TEAMS_POSITIONS,
    Position,
    PositionGroup,
)

__all__ = [
    "ChemistryLevel",
    "ChemistryTrend",
    "CoachPersonalityType",
    "CoachRole",
    "DEFENSIVE_POSITIONS",
    "DEFENSIVE_SCHEMES",
    "DefensiveLean",
    "FitLevel",
    "InfluenceTier",
    "OFFENSIVE_LINE",
    "OFFENSIVE_POSITIONS",
    "OFFENSIVE_SCHEMES",
    "OffensiveLean",
    "PlayerPersonalityType",
    "Position",
    "PositionGroup",
    "RiskTolerance",
    "SPECIAL_TEAMS_POSITIONS",
    "Scheme",
    "SkillImportance",
    "TreeName",
]
