"""
Player-Coach Chemistry.

Chemistry is a signed value in [-10, 10]. It starts from a weighted sum of
personality match, scheme fit, time together, coaching style, and optional
performance history, and is then moved by discrete events. Events are
replayed in order; each application clamps independently.

Only ChemistryDescription (level, text, trend) crosses the presentation
boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from headset.core.enums import (
    ChemistryLevel,
    ChemistryTrend,
    CoachPersonalityType,
    FitLevel,
    PlayerPersonalityType,
)
from headset.core.models.coach import MAX_CHEMISTRY, MIN_CHEMISTRY, Coach
from headset.core.models.player import Player
from headset.schemas.chemistry import ChemistryDescription, TeamChemistryDescription

logger = logging.getLogger(__name__)

P = PlayerPersonalityType
CP = CoachPersonalityType


# =============================================================================
# Personality Tables
# =============================================================================

# Coach types a player disposition responds well to
PLAYER_COACH_AFFINITIES: Dict[PlayerPersonalityType, FrozenSet[CoachPersonalityType]] = {
    P.TEAM_FIRST: frozenset({CP.PLAYERS_COACH, CP.ANALYTICAL, CP.CONSERVATIVE}),
    P.ME_FIRST: frozenset({CP.AGGRESSIVE, CP.INNOVATIVE}),
    P.QUIET_LEADER: frozenset({CP.ANALYTICAL, CP.OLD_SCHOOL, CP.CONSERVATIVE}),
    P.VOCAL_LEADER: frozenset({CP.AGGRESSIVE, CP.PLAYERS_COACH}),
    P.COACHABLE: frozenset({CP.OLD_SCHOOL, CP.ANALYTICAL, CP.PLAYERS_COACH}),
    P.STUBBORN: frozenset({CP.INNOVATIVE, CP.AGGRESSIVE}),
    P.HARD_WORKER: frozenset({CP.OLD_SCHOOL, CP.CONSERVATIVE, CP.ANALYTICAL}),
    P.NATURAL_TALENT: frozenset({CP.INNOVATIVE, CP.PLAYERS_COACH, CP.AGGRESSIVE}),
}

# Coach types a player disposition clashes with
PLAYER_COACH_CONFLICTS: Dict[PlayerPersonalityType, FrozenSet[CoachPersonalityType]] = {
    P.TEAM_FIRST: frozenset({CP.AGGRESSIVE}),
    P.ME_FIRST: frozenset({CP.CONSERVATIVE, CP.OLD_SCHOOL, CP.ANALYTICAL}),
    P.QUIET_LEADER: frozenset({CP.AGGRESSIVE}),
    P.VOCAL_LEADER: frozenset({CP.CONSERVATIVE}),
    P.COACHABLE: frozenset({CP.AGGRESSIVE}),
    P.STUBBORN: frozenset({CP.OLD_SCHOOL, CP.CONSERVATIVE}),
    P.HARD_WORKER: frozenset({CP.INNOVATIVE}),
    P.NATURAL_TALENT: frozenset({CP.OLD_SCHOOL}),
}

MAX_PERSONALITY_FACTOR = 5

SCHEME_FIT_CHEMISTRY: Dict[FitLevel, int] = {
    FitLevel.PERFECT: 3,
    FitLevel.GOOD: 1,
    FitLevel.NEUTRAL: 0,
    FitLevel.POOR: -1,
    FitLevel.TERRIBLE: -3,
}

MAX_TIME_BONUS = 3.0
HIGH_EGO = 80
HIGH_ADAPTABILITY = 70


# =============================================================================
# Events
# =============================================================================

class ChemistryEventType(Enum):
    PERFORMANCE_EXCELLENT = "performance_excellent"
    PERFORMANCE_POOR = "performance_poor"
    CONTRACT_DISPUTE = "contract_dispute"
    GAME_WINNING_PLAY = "game_winning_play"
    COSTLY_MISTAKE = "costly_mistake"
    SEASON_TOGETHER = "season_together"
    SCHEME_CHANGE = "scheme_change"
    INITIAL_MEETING = "initial_meeting"
    PRACTICE_INCIDENT = "practice_incident"
    MENTORSHIP_MOMENT = "mentorship_moment"


EVENT_MAGNITUDES: Dict[ChemistryEventType, int] = {
    ChemistryEventType.PERFORMANCE_EXCELLENT: 1,
    ChemistryEventType.PERFORMANCE_POOR: -1,
    ChemistryEventType.CONTRACT_DISPUTE: -2,
    ChemistryEventType.GAME_WINNING_PLAY: 2,
    ChemistryEventType.COSTLY_MISTAKE: -2,
    ChemistryEventType.SEASON_TOGETHER: 1,
    ChemistryEventType.SCHEME_CHANGE: -1,
    ChemistryEventType.INITIAL_MEETING: 0,
    ChemistryEventType.PRACTICE_INCIDENT: -1,
    ChemistryEventType.MENTORSHIP_MOMENT: 2,
}

EVENT_DESCRIPTIONS: Dict[ChemistryEventType, str] = {
    ChemistryEventType.PERFORMANCE_EXCELLENT: "Strong season built trust",
    ChemistryEventType.PERFORMANCE_POOR: "Disappointing season created frustration",
    ChemistryEventType.CONTRACT_DISPUTE: "Contract dispute strained the relationship",
    ChemistryEventType.GAME_WINNING_PLAY: "Delivered a game-winning play",
    ChemistryEventType.COSTLY_MISTAKE: "Made a costly mistake in a key moment",
    ChemistryEventType.SEASON_TOGETHER: "Another season working together",
    ChemistryEventType.SCHEME_CHANGE: "Adjusting to a new scheme",
    ChemistryEventType.INITIAL_MEETING: "First met",
    ChemistryEventType.PRACTICE_INCIDENT: "Heated moment at practice",
    ChemistryEventType.MENTORSHIP_MOMENT: "Coach took extra time to mentor",
}

EXCELLENT_SEASON_RATING = 85
POOR_SEASON_RATING = 55


@dataclass(frozen=True)
class ChemistryEvent:
    event_type: ChemistryEventType
    change: int
    description: str
    season: Optional[int] = None


@dataclass(frozen=True)
class ChemistryHistory:
    """Relationship record between one coach and one player.

    Events are append-only; every update returns a new history.
    """

    coach_id: str
    player_id: str
    current_chemistry: int = 0
    seasons_together: int = 0
    events: Tuple[ChemistryEvent, ...] = field(default_factory=tuple)


# =============================================================================
# Initial Chemistry
# =============================================================================

def clamp_chemistry(value: float) -> int:
    return int(max(MIN_CHEMISTRY, min(MAX_CHEMISTRY, round(value))))


def calculate_personality_factor(
    coach: Coach,
    player_type: Optional[PlayerPersonalityType],
) -> int:
    """How well a player's disposition meshes with the coach (-5 to +5)."""
    if player_type is None:
        return 0

    affinities = PLAYER_COACH_AFFINITIES[player_type]
    conflicts = PLAYER_COACH_CONFLICTS[player_type]
    primary = coach.personality.primary
    secondary = coach.personality.secondary

    factor = 0
    if primary in affinities:
        factor += 3
    if secondary is not None and secondary in affinities:
        factor += 2
    if primary in conflicts:
        factor -= 3
    if secondary is not None and secondary in conflicts:
        factor -= 2

    return max(-MAX_PERSONALITY_FACTOR, min(MAX_PERSONALITY_FACTOR, factor))


def calculate_scheme_fit_factor(coach: Coach, fit_level: Optional[FitLevel]) -> int:
    """Scheme contribution. Zero when the coach has no scheme or fit is unknown."""
    if coach.scheme is None or fit_level is None:
        return 0
    return SCHEME_FIT_CHEMISTRY[fit_level]


def calculate_performance_factor(performance_rating: Optional[float]) -> int:
    if performance_rating is None:
        return 0
    if performance_rating >= 85:
        return 3
    if performance_rating >= 75:
        return 1
    if performance_rating <= 50:
        return -2
    if performance_rating <= 60:
        return -1
    return 0


def calculate_time_together_factor(seasons_together: int) -> float:
    return min(MAX_TIME_BONUS, seasons_together * 0.5)


def calculate_coach_style_factor(coach: Coach, player_type: Optional[PlayerPersonalityType]) -> int:
    factor = 0
    if coach.personality.primary is CP.PLAYERS_COACH:
        factor += 1
    if coach.personality.ego > HIGH_EGO and player_type is P.ME_FIRST:
        factor -= 2
    if coach.personality.adaptability > HIGH_ADAPTABILITY:
        factor += 1
    return factor


def calculate_initial_chemistry(
    coach: Coach,
    player: Player,
    fit_level: Optional[FitLevel] = None,
    seasons_together: int = 0,
    performance_rating: Optional[float] = None,
) -> int:
    """Starting chemistry between a coach and a player.

    Args:
        coach: The coach
        player: The player
        fit_level: Player's fit in the coach's scheme, if known
        seasons_together: Seasons already spent together
        performance_rating: Optional 0-100 performance history

    Returns:
        Chemistry in [-10, 10]
    """
    total = (
        calculate_personality_factor(coach, player.personality_type)
        + calculate_scheme_fit_factor(coach, fit_level)
        + calculate_performance_factor(performance_rating)
        + calculate_time_together_factor(seasons_together)
        + calculate_coach_style_factor(coach, player.personality_type)
    )
    return clamp_chemistry(total)


def initialize_chemistry_history(
    coach: Coach,
    player: Player,
    fit_level: Optional[FitLevel] = None,
    performance_rating: Optional[float] = None,
    season: Optional[int] = None,
) -> ChemistryHistory:
    """Start a relationship record with an initial-meeting event."""
    initial = calculate_initial_chemistry(coach, player, fit_level, 0, performance_rating)
    meeting = ChemistryEvent(
        event_type=ChemistryEventType.INITIAL_MEETING,
        change=initial,
        description=EVENT_DESCRIPTIONS[ChemistryEventType.INITIAL_MEETING],
        season=season,
    )
    return ChemistryHistory(
        coach_id=coach.id,
        player_id=player.id,
        current_chemistry=initial,
        events=(meeting,),
    )


# =============================================================================
# Event Application
# =============================================================================

def apply_chemistry_event(chemistry: int, event_type: ChemistryEventType) -> int:
    """Apply one event's fixed magnitude and re-clamp."""
    if event_type not in EVENT_MAGNITUDES:
        raise ValueError(f"Unknown chemistry event: {event_type}")
    return clamp_chemistry(chemistry + EVENT_MAGNITUDES[event_type])


def apply_event_to_history(
    history: ChemistryHistory,
    event_type: ChemistryEventType,
    season: Optional[int] = None,
) -> ChemistryHistory:
    """Return a new history with the event applied and logged."""
    new_value = apply_chemistry_event(history.current_chemistry, event_type)
    event = ChemistryEvent(
        event_type=event_type,
        change=EVENT_MAGNITUDES[event_type],
        description=EVENT_DESCRIPTIONS[event_type],
        season=season,
    )
    logger.debug(
        f"Chemistry {history.coach_id}/{history.player_id}: {event_type.value} "
        f"{history.current_chemistry} -> {new_value}"
    )
    return replace(history, current_chemistry=new_value, events=history.events + (event,))


def advance_chemistry_season(
    history: ChemistryHistory,
    performance_rating: Optional[float] = None,
    season: Optional[int] = None,
) -> ChemistryHistory:
    """Close out a season: credit tenure, then react to how it went."""
    updated = replace(history, seasons_together=history.seasons_together + 1)
    updated = apply_event_to_history(updated, ChemistryEventType.SEASON_TOGETHER, season)

    if performance_rating is not None:
        if performance_rating >= EXCELLENT_SEASON_RATING:
            updated = apply_event_to_history(updated, ChemistryEventType.PERFORMANCE_EXCELLENT, season)
        elif performance_rating <= POOR_SEASON_RATING:
            updated = apply_event_to_history(updated, ChemistryEventType.PERFORMANCE_POOR, season)

    return updated


# =============================================================================
# Lookup and Modifiers
# =============================================================================

def get_chemistry_modifier(
    coach: Coach,
    player_id: str,
    history: Optional[ChemistryHistory] = None,
) -> int:
    """Current chemistry for a pairing; neutral when nothing is known."""
    if history is not None:
        return history.current_chemistry
    if player_id in coach.player_chemistry:
        return clamp_chemistry(coach.player_chemistry[player_id])
    return 0


def get_development_chemistry_modifier(chemistry: int) -> float:
    """Multiplier offset on development (+/-0.2 at the extremes)."""
    return chemistry * 0.02


def get_morale_chemistry_modifier(chemistry: int) -> int:
    return chemistry


def validate_chemistry(value: float) -> bool:
    return MIN_CHEMISTRY <= value <= MAX_CHEMISTRY


# =============================================================================
# Boundary Projection
# =============================================================================

CHEMISTRY_LEVEL_TEXT: Dict[ChemistryLevel, str] = {
    ChemistryLevel.EXCELLENT: "Outstanding chemistry - they work very well together",
    ChemistryLevel.GOOD: "Positive relationship with good communication",
    ChemistryLevel.NEUTRAL: "Professional relationship",
    ChemistryLevel.STRAINED: "Some tension in the relationship",
    ChemistryLevel.TOXIC: "Serious relationship issues affecting performance",
}


def get_chemistry_level(chemistry: float) -> ChemistryLevel:
    if chemistry >= 7:
        return ChemistryLevel.EXCELLENT
    if chemistry >= 3:
        return ChemistryLevel.GOOD
    if chemistry >= -2:
        return ChemistryLevel.NEUTRAL
    if chemistry >= -6:
        return ChemistryLevel.STRAINED
    return ChemistryLevel.TOXIC


def get_chemistry_trend(history: ChemistryHistory) -> ChemistryTrend:
    if len(history.events) < 2:
        return ChemistryTrend.STABLE
    recent = sum(event.change for event in history.events[-3:])
    if recent >= 2:
        return ChemistryTrend.IMPROVING
    if recent <= -2:
        return ChemistryTrend.DECLINING
    return ChemistryTrend.STABLE


def get_chemistry_description(history: Optional[ChemistryHistory]) -> ChemistryDescription:
    """Qualitative view of a relationship."""
    if history is None:
        return ChemistryDescription(
            level=ChemistryLevel.NEUTRAL.value,
            description="Relationship still developing",
            trend=ChemistryTrend.STABLE.value,
        )
    level = get_chemistry_level(history.current_chemistry)
    return ChemistryDescription(
        level=level.value,
        description=CHEMISTRY_LEVEL_TEXT[level],
        trend=get_chemistry_trend(history).value,
    )


def describe_team_chemistry(histories: List[ChemistryHistory]) -> TeamChemistryDescription:
    """Average relationship quality between a coach and a roster."""
    if not histories:
        return TeamChemistryDescription(
            level=ChemistryLevel.NEUTRAL.value,
            description="No players to evaluate",
        )
    average = sum(h.current_chemistry for h in histories) / len(histories)
    level = get_chemistry_level(average)
    return TeamChemistryDescription(
        level=level.value,
        description=CHEMISTRY_LEVEL_TEXT[level],
        players_evaluated=len(histories),
    )
