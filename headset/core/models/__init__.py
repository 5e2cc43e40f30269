"""Core coaching models."""

from headset.core.models.coach import (
    CareerHistoryEntry,
    Coach,
    CoachAttributes,
    CoachContract,
    CoachingTree,
    CoachPersonality,
    TreePhilosophy,
    career_winning_percentage,
    validate_coach,
    validate_coach_attributes,
    validate_coach_tendencies,
    validate_coaching_tree,
    validate_personality,
)
from headset.core.models.game_state import (
    GameStateContext,
    PlayCallContext,
    Precipitation,
    WeatherCondition,
    create_default_play_call_context,
)
from headset.core.models.player import (
    Player,
    SkillValue,
    project_player,
    project_skill,
    validate_player,
)
from headset.core.models.tendencies import (
    CoordinatorTendencies,
    DefensiveTendencies,
    OffensiveTendencies,
    validate_tendency_profile,
)

__all__ = [
    "CareerHistoryEntry",
    "Coach",
    "CoachAttributes",
    "CoachContract",
    "CoachPersonality",
    "CoachingTree",
    "CoordinatorTendencies",
    "DefensiveTendencies",
    "GameStateContext",
    "OffensiveTendencies",
    "PlayCallContext",
    "Player",
    "Precipitation",
    "SkillValue",
    "TreePhilosophy",
    "WeatherCondition",
    "career_winning_percentage",
    "create_default_play_call_context",
    "project_player",
    "project_skill",
    "validate_coach",
    "validate_coach_attributes",
    "validate_coach_tendencies",
    "validate_coaching_tree",
    "validate_personality",
    "validate_player",
    "validate_tendency_profile",
]
