"""
Play Calling.

Picks the concrete play for each snap from the coordinator's tendency
profile. The user never sees any of this; it just happens based on who
they hired as OC and DC.

Two layers live here:
- select_play / select_defensive_call roll a concrete call from a profile
- select_offensive_play_call / select_defensive_play_call resolve which
  coach's profile applies, bend it to the situation, and report the
  probabilities and overrides that went into the call
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from headset.config import get_rng
from headset.core.models.coach import Coach
from headset.core.models.game_state import GameStateContext, PlayCallContext
from headset.core.models.tendencies import (
    DEFAULT_DEFENSIVE_TENDENCIES,
    DEFAULT_OFFENSIVE_TENDENCIES,
    DefensiveTendencies,
    FourthDownAggressiveness,
    OffensiveTendencies,
    RedZoneDefense,
    SituationalPreference,
    ThirdAndLongApproach,
    TwoMinuteApproach,
)
from headset.game.tendencies import (
    DEFAULT_DEFENSIVE_CALL_PROBABILITIES,
    DEFAULT_PLAY_CALL_PROBABILITIES,
    AdjustedDefensiveTendencies,
    AdjustedOffensiveTendencies,
    DefensiveCallProbabilities,
    PlayCallProbabilities,
    calculate_adjusted_defensive_tendencies,
    calculate_adjusted_offensive_tendencies,
    calculate_defensive_call_probabilities,
    calculate_play_call_probabilities,
)
from headset.game.weather import calculate_weather_impact

logger = logging.getLogger(__name__)

DEFAULT_OVERRIDE = "Using default tendencies"


# =============================================================================
# Play Types
# =============================================================================

class PlayType(Enum):
    RUN_INSIDE = "run_inside"
    RUN_OUTSIDE = "run_outside"
    RUN_DRAW = "run_draw"
    RUN_SWEEP = "run_sweep"
    PASS_SHORT = "pass_short"
    PASS_MEDIUM = "pass_medium"
    PASS_DEEP = "pass_deep"
    PASS_SCREEN = "pass_screen"
    PLAY_ACTION_SHORT = "play_action_short"
    PLAY_ACTION_DEEP = "play_action_deep"
    QB_SNEAK = "qb_sneak"
    QB_SCRAMBLE = "qb_scramble"

    @property
    def is_run(self) -> bool:
        return self.value.startswith("run") or self is PlayType.QB_SNEAK

    @property
    def is_deep(self) -> bool:
        return self in (PlayType.PASS_DEEP, PlayType.PLAY_ACTION_DEEP)


class OffensiveFormation(Enum):
    SINGLEBACK = "singleback"
    I_FORMATION = "i_formation"
    SHOTGUN = "shotgun"
    PISTOL = "pistol"
    EMPTY = "empty"
    GOAL_LINE = "goal_line"
    JUMBO = "jumbo"


class Coverage(Enum):
    MAN = "man"
    ZONE = "zone"


@dataclass(frozen=True)
class OffensivePlayCall:
    play_type: PlayType
    target_position: str  # WR1, RB, TE, etc.
    formation: OffensiveFormation


@dataclass(frozen=True)
class DefensivePlayCall:
    coverage: Coverage
    blitz: bool
    press_rate: float  # 0-1


# =============================================================================
# Concrete Play Selection
# =============================================================================

RUN_WEIGHTS: Tuple[Tuple[PlayType, float], ...] = (
    (PlayType.RUN_INSIDE, 0.4),
    (PlayType.RUN_OUTSIDE, 0.25),
    (PlayType.RUN_DRAW, 0.2),
    (PlayType.RUN_SWEEP, 0.15),
)

SCRAMBLE_RATE = 0.02


def calculate_run_probability(tendencies: OffensiveTendencies, state: GameStateContext) -> float:
    """Chance of calling a run on this snap, 0.05-0.9."""
    situational = tendencies.situational
    probability = tendencies.run_pass_split.run / 100

    if state.score_differential >= 14:
        probability += situational.ahead_by_14_plus.run_modifier / 100
    elif state.score_differential <= -14:
        probability += situational.behind_by_14_plus.run_modifier / 100

    if state.weather.is_bad:
        probability += situational.bad_weather.run_modifier / 100

    if state.down == 1:
        probability += 0.05
    elif state.down == 2 and state.distance <= 3:
        probability += 0.2
    elif state.down == 3:
        if state.distance <= 2:
            if situational.third_and_short is SituationalPreference.RUN:
                probability += 0.3
            elif situational.third_and_short is SituationalPreference.PASS:
                probability -= 0.15
        elif state.distance > 7:
            probability -= 0.25
    elif state.down == 4:
        probability += 0.35 if state.distance <= 1 else -0.3

    if state.is_red_zone:
        if situational.red_zone is SituationalPreference.RUN:
            probability += 0.15
        elif situational.red_zone is SituationalPreference.PASS:
            probability -= 0.1

    if state.field_position >= 97:
        probability += 0.25

    if state.is_two_minute_warning and state.score_differential < 14:
        probability -= 0.3

    late = state.quarter in (2, 4, "OT") and state.time_remaining < 120
    if late and state.score_differential < 0:
        probability -= 0.35

    return max(0.05, min(0.9, probability))


def _select_run(state: GameStateContext, rng: random.Random) -> PlayType:
    if state.distance <= 1 and state.down >= 3:
        return PlayType.QB_SNEAK if rng.random() < 0.4 else PlayType.RUN_INSIDE

    # No sweeps backed up against the goal line
    if state.field_position < 5:
        return PlayType.RUN_INSIDE if rng.random() < 0.7 else PlayType.RUN_DRAW

    roll = rng.random()
    for play_type, weight in RUN_WEIGHTS:
        roll -= weight
        if roll <= 0:
            return play_type
    return PlayType.RUN_INSIDE


def _select_pass(tendencies: OffensiveTendencies, state: GameStateContext, rng: random.Random) -> PlayType:
    play_action = rng.random() < tendencies.play_action_rate / 100
    deep_chance = tendencies.deep_shot_rate / 100

    if state.distance > 15:
        deep_chance *= 1.5
    elif state.distance <= 3:
        deep_chance *= 0.5
    if state.is_two_minute_warning:
        deep_chance *= 0.7
    if state.weather.is_bad:
        deep_chance *= 0.5
    if state.is_red_zone:
        deep_chance *= 0.3

    roll = rng.random()
    if roll < deep_chance:
        return PlayType.PLAY_ACTION_DEEP if play_action else PlayType.PASS_DEEP
    if roll < deep_chance + 0.35:
        return PlayType.PASS_MEDIUM
    if roll < deep_chance + 0.55:
        return PlayType.PLAY_ACTION_SHORT if play_action else PlayType.PASS_SHORT
    return PlayType.PASS_SCREEN


def _select_formation(play_type: PlayType, state: GameStateContext, rng: random.Random) -> OffensiveFormation:
    short_yardage = state.distance <= 1 and state.down >= 3
    if play_type.is_run and (state.field_position >= 98 or short_yardage):
        return OffensiveFormation.GOAL_LINE if rng.random() < 0.6 else OffensiveFormation.JUMBO

    roll = rng.random()
    if play_type.is_run:
        if roll < 0.35:
            return OffensiveFormation.SINGLEBACK
        if roll < 0.6:
            return OffensiveFormation.I_FORMATION
        if roll < 0.8:
            return OffensiveFormation.PISTOL
        return OffensiveFormation.SHOTGUN

    if play_type.is_deep:
        return OffensiveFormation.SHOTGUN if roll < 0.6 else OffensiveFormation.PISTOL
    if play_type is PlayType.PASS_SCREEN:
        return OffensiveFormation.SHOTGUN if roll < 0.5 else OffensiveFormation.SINGLEBACK

    if roll < 0.45:
        return OffensiveFormation.SHOTGUN
    if roll < 0.65:
        return OffensiveFormation.SINGLEBACK
    if roll < 0.8:
        return OffensiveFormation.PISTOL
    return OffensiveFormation.EMPTY


def _select_target(play_type: PlayType, rng: random.Random) -> str:
    if play_type in (PlayType.QB_SNEAK, PlayType.QB_SCRAMBLE):
        return "QB"
    if play_type.is_run:
        return "RB"

    roll = rng.random()
    if play_type is PlayType.PASS_SCREEN:
        return "RB" if roll < 0.5 else "WR1" if roll < 0.8 else "TE"
    if play_type.is_deep:
        return "WR1" if roll < 0.6 else "WR2" if roll < 0.85 else "TE"

    for threshold, target in ((0.35, "WR1"), (0.55, "WR2"), (0.7, "TE"), (0.85, "RB")):
        if roll < threshold:
            return target
    return "WR3"


def select_play(
    tendencies: OffensiveTendencies,
    context: PlayCallContext,
    rng: Optional[random.Random] = None,
) -> OffensivePlayCall:
    """Roll a concrete offensive call from a tendency profile.

    Args:
        tendencies: Play caller's profile
        context: Upcoming snap
        rng: Random source; a fresh one from the config when omitted

    Returns:
        OffensivePlayCall with play type, target, and formation
    """
    rng = rng or get_rng()
    state = context.to_game_state()

    # Broken plays
    if rng.random() < SCRAMBLE_RATE:
        return OffensivePlayCall(
            PlayType.QB_SCRAMBLE, "QB", _select_formation(PlayType.QB_SCRAMBLE, state, rng)
        )

    if rng.random() < calculate_run_probability(tendencies, state):
        play_type = _select_run(state, rng)
    else:
        play_type = _select_pass(tendencies, state, rng)

    formation = _select_formation(play_type, state, rng)
    return OffensivePlayCall(play_type, _select_target(play_type, rng), formation)


def select_defensive_call(
    tendencies: DefensiveTendencies,
    context: PlayCallContext,
    offensive_formation: Optional[OffensiveFormation] = None,
    rng: Optional[random.Random] = None,
) -> DefensivePlayCall:
    """Roll coverage, blitz, and press from a defensive profile.

    The offense's formation, when known, shifts the blitz call.
    """
    rng = rng or get_rng()
    state = context.to_game_state()
    situational = tendencies.situational

    blitz_rate = tendencies.blitz_rate / 100
    man_rate = tendencies.man_coverage_rate / 100
    press_rate = tendencies.press_rate / 100

    if state.is_red_zone:
        if situational.red_zone is RedZoneDefense.AGGRESSIVE:
            blitz_rate += 0.15
            press_rate += 0.1
        else:
            blitz_rate -= 0.1

    if state.is_two_minute_warning:
        if situational.two_minute_drill is TwoMinuteApproach.PREVENT:
            blitz_rate -= 0.2
            man_rate -= 0.3
        elif situational.two_minute_drill is TwoMinuteApproach.BLITZ:
            blitz_rate += 0.2

    if state.down == 3 and state.distance > 7:
        if situational.third_and_long is ThirdAndLongApproach.BLITZ:
            blitz_rate += 0.2
        elif situational.third_and_long is ThirdAndLongApproach.COVERAGE:
            blitz_rate -= 0.15
            man_rate -= 0.1

    if offensive_formation is OffensiveFormation.EMPTY:
        blitz_rate += 0.1
        man_rate += 0.1
    elif offensive_formation in (OffensiveFormation.I_FORMATION, OffensiveFormation.GOAL_LINE):
        blitz_rate -= 0.1

    if state.score_differential >= 14:
        blitz_rate -= 0.15
    elif state.score_differential <= -14:
        blitz_rate += 0.1

    blitz_rate = max(0.05, min(0.6, blitz_rate))
    man_rate = max(0.1, min(0.9, man_rate))
    press_rate = max(0.1, min(0.9, press_rate))

    blitz = rng.random() < blitz_rate
    coverage = Coverage.MAN if rng.random() < man_rate else Coverage.ZONE
    if coverage is Coverage.ZONE:
        press_rate *= 0.3

    # Blitzes usually come with man behind them
    if blitz and rng.random() < 0.7:
        return DefensivePlayCall(Coverage.MAN, True, min(0.8, press_rate + 0.2))

    return DefensivePlayCall(coverage, blitz, press_rate)


# =============================================================================
# Coordinator Integration
# =============================================================================

@dataclass
class OffensivePlayCallResult:
    """A play call plus the numbers that produced it. Engine-side only."""

    play_call: OffensivePlayCall
    probabilities: PlayCallProbabilities
    adjusted_tendencies: Optional[AdjustedOffensiveTendencies] = None
    situational_overrides: List[str] = field(default_factory=list)
    used_default_tendencies: bool = False


@dataclass
class DefensivePlayCallResult:
    play_call: DefensivePlayCall
    probabilities: DefensiveCallProbabilities
    adjusted_tendencies: Optional[AdjustedDefensiveTendencies] = None
    situational_overrides: List[str] = field(default_factory=list)
    used_default_tendencies: bool = False


def resolve_offensive_tendencies(oc: Optional[Coach], hc: Optional[Coach]) -> Optional[OffensiveTendencies]:
    """The OC's profile, else the head coach's, else None."""
    for coach in (oc, hc):
        if coach is not None and coach.offensive_tendencies is not None:
            return coach.offensive_tendencies
    return None


def resolve_defensive_tendencies(dc: Optional[Coach], hc: Optional[Coach]) -> Optional[DefensiveTendencies]:
    for coach in (dc, hc):
        if coach is not None and coach.defensive_tendencies is not None:
            return coach.defensive_tendencies
    return None


def select_offensive_play_call(
    oc: Optional[Coach],
    hc: Optional[Coach],
    context: PlayCallContext,
    rng: Optional[random.Random] = None,
) -> OffensivePlayCallResult:
    """Call an offensive play using the staff's tendencies.

    Args:
        oc: Offensive coordinator, if any
        hc: Head coach, consulted when the OC has no offensive profile
        context: Upcoming snap
        rng: Random source; a fresh one from the config when omitted

    Returns:
        OffensivePlayCallResult; flagged when the default profile was used
    """
    rng = rng or get_rng()
    tendencies = resolve_offensive_tendencies(oc, hc)

    if tendencies is None:
        logger.warning("No offensive tendencies on staff, using default profile")
        return OffensivePlayCallResult(
            play_call=select_play(DEFAULT_OFFENSIVE_TENDENCIES, context, rng),
            probabilities=DEFAULT_PLAY_CALL_PROBABILITIES,
            situational_overrides=[DEFAULT_OVERRIDE],
            used_default_tendencies=True,
        )

    overrides: List[str] = []
    weather = calculate_weather_impact(context.weather)
    if weather.run_modifier != 0 or weather.deep_pass_modifier != 0:
        overrides.append(weather.description)

    state = context.to_game_state()
    adjusted = calculate_adjusted_offensive_tendencies(tendencies, state)
    adjusted = AdjustedOffensiveTendencies(
        base=adjusted.base,
        effective_run_rate=max(10, min(85, adjusted.effective_run_rate + weather.run_modifier)),
        effective_deep_rate=max(5, min(40, adjusted.effective_deep_rate + weather.deep_pass_modifier)),
        effective_play_action_rate=adjusted.effective_play_action_rate,
    )

    if state.is_red_zone:
        overrides.append("Red zone adjustments")
    if state.is_two_minute_warning:
        overrides.append("Two-minute drill")
    if abs(state.score_differential) >= 14:
        overrides.append("Protecting large lead" if state.score_differential > 0 else "Comeback mode")

    play_call = select_play(tendencies, context, rng)
    logger.debug(f"Offensive call {play_call.play_type.value} from {play_call.formation.value}, overrides={overrides}")

    return OffensivePlayCallResult(
        play_call=play_call,
        probabilities=calculate_play_call_probabilities(adjusted),
        adjusted_tendencies=adjusted,
        situational_overrides=overrides,
    )


def select_defensive_play_call(
    dc: Optional[Coach],
    hc: Optional[Coach],
    context: PlayCallContext,
    offensive_formation: Optional[OffensiveFormation] = None,
    rng: Optional[random.Random] = None,
) -> DefensivePlayCallResult:
    """Call a defense using the staff's tendencies. Mirrors the offensive side."""
    rng = rng or get_rng()
    tendencies = resolve_defensive_tendencies(dc, hc)

    if tendencies is None:
        logger.warning("No defensive tendencies on staff, using default profile")
        return DefensivePlayCallResult(
            play_call=select_defensive_call(DEFAULT_DEFENSIVE_TENDENCIES, context, offensive_formation, rng),
            probabilities=DEFAULT_DEFENSIVE_CALL_PROBABILITIES,
            situational_overrides=[DEFAULT_OVERRIDE],
            used_default_tendencies=True,
        )

    state = context.to_game_state()
    adjusted = calculate_adjusted_defensive_tendencies(tendencies, state)

    overrides: List[str] = []
    if state.is_red_zone:
        overrides.append("Red zone defense")
    if state.is_two_minute_warning:
        overrides.append("Two-minute drill defense")
    if state.down == 3 and state.distance > 7:
        overrides.append("Third and long situation")
    if abs(state.score_differential) >= 14:
        overrides.append("Protecting lead" if state.score_differential > 0 else "Need stops")

    play_call = select_defensive_call(tendencies, context, offensive_formation, rng)
    logger.debug(f"Defensive call {play_call.coverage.value} blitz={play_call.blitz}, overrides={overrides}")

    return DefensivePlayCallResult(
        play_call=play_call,
        probabilities=calculate_defensive_call_probabilities(adjusted),
        adjusted_tendencies=adjusted,
        situational_overrides=overrides,
    )


# =============================================================================
# Kicking Decisions
# =============================================================================

def kick_distance(field_position: int) -> int:
    """Field goal length from a line of scrimmage; end zone plus snap adds 17."""
    return 100 - field_position + 17


def should_attempt_field_goal(context: PlayCallContext, kicker_range: Optional[int] = None) -> bool:
    """Whether to send the kicker out.

    Only on fourth down, or as the half expires.
    """
    kicker_range = kicker_range if kicker_range is not None else context.kicker_range
    distance = kick_distance(context.field_position)
    if distance > kicker_range:
        return False

    if context.down != 4:
        expiring = context.quarter in (2, 4) and context.time_remaining <= 5
        if not expiring:
            return False

    if distance <= 35:
        return True
    if distance <= 45:
        return context.distance > 2 or context.field_position < 60
    # Long attempts only when not ahead
    return context.score_differential <= 0


def should_punt(context: PlayCallContext, aggressiveness: FourthDownAggressiveness) -> bool:
    if context.down != 4:
        return False
    if context.field_position >= 60 and aggressiveness is FourthDownAggressiveness.AGGRESSIVE:
        return False
    if context.field_position < 35:
        return True
    if context.distance <= 2:
        return aggressiveness is FourthDownAggressiveness.CONSERVATIVE
    if context.distance <= 5:
        return aggressiveness is not FourthDownAggressiveness.AGGRESSIVE
    return aggressiveness is not FourthDownAggressiveness.AGGRESSIVE or context.field_position < 50


# =============================================================================
# Distribution & Validation
# =============================================================================

def get_play_type_distribution(probabilities: PlayCallProbabilities) -> Dict[PlayType, float]:
    """Spread category probabilities across concrete play types.

    Deep shots split 60/40 between straight drop-backs and play action.
    Sneaks and scrambles carry a small fixed share.
    """
    run = probabilities.run
    return {
        PlayType.RUN_INSIDE: run * 0.4,
        PlayType.RUN_OUTSIDE: run * 0.25,
        PlayType.RUN_DRAW: run * 0.2,
        PlayType.RUN_SWEEP: run * 0.15,
        PlayType.PASS_SHORT: probabilities.pass_short,
        PlayType.PASS_MEDIUM: probabilities.pass_medium,
        PlayType.PASS_DEEP: probabilities.pass_deep * 0.6,
        PlayType.PASS_SCREEN: probabilities.screen,
        PlayType.PLAY_ACTION_SHORT: probabilities.play_action * 0.5,
        PlayType.PLAY_ACTION_DEEP: probabilities.play_action * 0.5 + probabilities.pass_deep * 0.4,
        PlayType.QB_SNEAK: 0.01,
        PlayType.QB_SCRAMBLE: 0.02,
    }


def validate_play_calling_integration(
    offensive: Optional[OffensiveTendencies],
    defensive: Optional[DefensiveTendencies],
) -> List[str]:
    """Check profiles against the ranges the play caller handles.

    Returns:
        List of issues, empty when both profiles are usable
    """
    issues = []
    if offensive is not None:
        split = offensive.run_pass_split
        if split.run + split.pass_ != 100:
            issues.append("Offensive run/pass split does not sum to 100")
        if not 0 <= offensive.play_action_rate <= 50:
            issues.append("Play action rate out of valid range")
        if not 0 <= offensive.deep_shot_rate <= 40:
            issues.append("Deep shot rate out of valid range")
    if defensive is not None:
        if not 0 <= defensive.blitz_rate <= 50:
            issues.append("Blitz rate out of valid range")
        if not 0 <= defensive.man_coverage_rate <= 100:
            issues.append("Man coverage rate out of valid range")
        if not 0 <= defensive.press_rate <= 100:
            issues.append("Press rate out of valid range")
    return issues
