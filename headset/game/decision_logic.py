"""Decision Logic - coach-driven game management decisions.

Contains logic for:
- Fourth-down decisions (go for it, punt, or field goal)
- Two-minute drill mode
- Offensive tempo

Every decision here is deterministic given the situation and the staff's
tendencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from headset.core.models.coach import Coach
from headset.core.models.game_state import PlayCallContext
from headset.core.models.tendencies import (
    FourthDownAggressiveness,
    OffensiveTendencies,
    TempoPreference,
)
from headset.game.play_calling import kick_distance, resolve_offensive_tendencies

logger = logging.getLogger(__name__)


# =============================================================================
# Fourth Down Decision
# =============================================================================

class FourthDownDecision(Enum):
    """Fourth down decision options."""
    GO_FOR_IT = "go_for_it"
    PUNT = "punt"
    FIELD_GOAL = "field_goal"


class Confidence(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class FourthDownResult:
    """Decision plus how sure the staff is and why."""
    decision: FourthDownDecision
    confidence: Confidence
    rationale: str


COMFORTABLE_KICK = 45  # Longest kick treated as routine
SHORT_KICK = 40


def _decide(decision: FourthDownDecision, confidence: Confidence, rationale: str) -> FourthDownResult:
    return FourthDownResult(decision, confidence, rationale)


def make_fourth_down_decision(
    context: PlayCallContext,
    oc: Optional[Coach] = None,
    hc: Optional[Coach] = None,
) -> FourthDownResult:
    """Decide whether to go for it, punt, or kick a field goal on fourth down.

    Aggressiveness comes from the OC's offensive tendencies, then the head
    coach's, and is average when neither has a profile.

    Args:
        context: Fourth down situation, including the kicker's range
        oc: Offensive coordinator, if any
        hc: Head coach, if any

    Returns:
        FourthDownResult with decision, confidence, and rationale
    """
    tendencies = resolve_offensive_tendencies(oc, hc)
    aggressiveness = (
        tendencies.fourth_down_aggressiveness if tendencies is not None
        else FourthDownAggressiveness.AVERAGE
    )
    aggressive = aggressiveness is FourthDownAggressiveness.AGGRESSIVE

    kick = kick_distance(context.field_position)
    in_range = kick <= context.kicker_range
    distance = context.distance
    field_position = context.field_position
    diff = context.score_differential
    late_game = context.quarter == 4 and context.time_remaining < 300
    end_of_half = context.quarter == 2 and context.time_remaining < 60

    if distance <= 1:
        if aggressive or field_position >= 50:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.HIGH, "Short distance, going for it")
        elif in_range and kick <= SHORT_KICK:
            result = _decide(FourthDownDecision.FIELD_GOAL, Confidence.HIGH, "Short field goal, taking the points")
        elif field_position < 35:
            result = _decide(FourthDownDecision.PUNT, Confidence.MEDIUM, "Deep in own territory, punting")
        else:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.MEDIUM, "Short yardage in plus territory")

    elif in_range and kick <= COMFORTABLE_KICK:
        if late_game and diff < -3:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.MEDIUM, "Need touchdown, going for it")
        else:
            result = _decide(FourthDownDecision.FIELD_GOAL, Confidence.HIGH, "In field goal range, taking points")

    elif in_range:
        if diff <= 0 or end_of_half:
            result = _decide(FourthDownDecision.FIELD_GOAL, Confidence.LOW, "Attempting long field goal")
        else:
            result = _decide(FourthDownDecision.PUNT, Confidence.MEDIUM, "Too long for field goal while winning")

    # No man's land
    elif 35 <= field_position <= 55:
        if aggressive and distance <= 3:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.MEDIUM, "Aggressive approach, going for it")
        elif late_game and diff < -7:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.MEDIUM, "Must have points, going for it")
        else:
            result = _decide(FourthDownDecision.PUNT, Confidence.MEDIUM, "Punting from midfield")

    elif field_position > 55:
        if aggressive and distance <= 4:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.HIGH, "Plus territory, going for it")
        elif distance <= 2 and aggressiveness is not FourthDownAggressiveness.CONSERVATIVE:
            result = _decide(FourthDownDecision.GO_FOR_IT, Confidence.MEDIUM, "Short distance in red zone area")
        else:
            result = _decide(FourthDownDecision.PUNT, Confidence.LOW, "Pinning them deep")

    else:
        result = _decide(
            FourthDownDecision.PUNT, Confidence.HIGH, "Deep in own territory, punting for field position"
        )

    logger.debug(
        f"4th and {distance} at {field_position} ({aggressiveness.value}): "
        f"{result.decision.value} [{result.confidence.value}]"
    )
    return result


# =============================================================================
# Two-Minute Drill
# =============================================================================

class TwoMinuteMode(Enum):
    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CLOCK_KILL = "clock_kill"


def get_two_minute_mode(score_differential: int) -> TwoMinuteMode:
    """Up more than a score kills clock, a one-score lead stays balanced."""
    if score_differential > 7:
        return TwoMinuteMode.CLOCK_KILL
    if score_differential > 0:
        return TwoMinuteMode.BALANCED
    return TwoMinuteMode.AGGRESSIVE


# =============================================================================
# Tempo
# =============================================================================

class Tempo(Enum):
    """Offensive pace options."""
    HURRY_UP = "hurry_up"
    NORMAL = "normal"
    SLOW = "slow"


def select_tempo(context: PlayCallContext, tendencies: Optional[OffensiveTendencies] = None) -> Tempo:
    """Determine offensive pace from the clock, the score, and the play caller.

    Args:
        context: Upcoming snap
        tendencies: Play caller's profile, if any

    Returns:
        Tempo enum
    """
    diff = context.score_differential
    if context.quarter in (2, 4) and context.time_remaining < 120:
        if diff < 0:
            return Tempo.HURRY_UP
        if diff > 7:
            return Tempo.SLOW

    if tendencies is None:
        return Tempo.NORMAL
    if tendencies.tempo_preference is TempoPreference.UPTEMPO:
        return Tempo.NORMAL if diff > 14 else Tempo.HURRY_UP
    if tendencies.tempo_preference is TempoPreference.SLOW:
        return Tempo.SLOW
    return Tempo.NORMAL
