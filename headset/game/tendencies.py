"""
Tendency Profiles.

Generates coordinator tendency profiles from a coach's background, bends a
profile to the current game situation, and turns the result into play-call
probabilities. Also produces the number-free description shown to users.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict

from headset.core.enums import CoachPersonalityType, DefensiveLean, OffensiveLean, RiskTolerance, TreeName
from headset.core.models.coach import TreePhilosophy
from headset.core.models.game_state import GameStateContext
from headset.core.models.tendencies import (
    BaseFormation,
    CoordinatorTendencies,
    DefensiveSituational,
    DefensiveTendencies,
    FourthDownAggressiveness,
    OffensiveSituational,
    OffensiveTendencies,
    RedZoneDefense,
    RunPassSplit,
    SituationalPreference,
    SplitModifier,
    TempoPreference,
    ThirdAndLongApproach,
    TwoMinuteApproach,
)
from headset.schemas.tendencies import TendencyDescription


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# =============================================================================
# Adjusted Tendencies
# =============================================================================

@dataclass(frozen=True)
class AdjustedOffensiveTendencies:
    """Base profile plus the rates actually in effect for this snap."""

    base: OffensiveTendencies
    effective_run_rate: float
    effective_deep_rate: float
    effective_play_action_rate: float


@dataclass(frozen=True)
class AdjustedDefensiveTendencies:
    base: DefensiveTendencies
    effective_blitz_rate: float
    effective_man_rate: float
    effective_press_rate: float


def calculate_adjusted_offensive_tendencies(
    tendencies: OffensiveTendencies,
    context: GameStateContext,
) -> AdjustedOffensiveTendencies:
    """Apply score, weather, down-and-distance, and clock situations.

    Run rate is clamped to 10-85, deep rate to 5-40, play action to 5-50.
    """
    if not isinstance(tendencies, OffensiveTendencies):
        raise ValueError(f"Expected offensive tendencies, got {type(tendencies).__name__}")

    run = tendencies.run_pass_split.run
    deep = tendencies.deep_shot_rate
    play_action = tendencies.play_action_rate
    situational = tendencies.situational
    diff = context.score_differential

    if diff >= 14:
        run += situational.ahead_by_14_plus.run_modifier
    elif diff <= -14:
        run += situational.behind_by_14_plus.run_modifier

    if context.weather.is_bad:
        run += situational.bad_weather.run_modifier
        deep -= 5
        play_action -= 5

    if context.down == 3 and context.distance <= 2:
        if situational.third_and_short is SituationalPreference.RUN:
            run += 20
        elif situational.third_and_short is SituationalPreference.PASS:
            run -= 15
            deep += 5

    if context.down == 3 and context.distance > 7:
        run -= 20

    if context.is_red_zone:
        if situational.red_zone is SituationalPreference.RUN:
            run += 15
        elif situational.red_zone is SituationalPreference.PASS:
            run -= 10
        deep = max(5, deep - 10)

    if context.is_two_minute_warning and diff < 14:
        run -= 25
        deep += 5

    if context.is_end_of_half:
        if diff < 0:
            run -= 30
            deep += 10
        elif diff > 7:
            run += 20
            deep -= 10

    return AdjustedOffensiveTendencies(
        base=tendencies,
        effective_run_rate=_clamp(run, 10, 85),
        effective_deep_rate=_clamp(deep, 5, 40),
        effective_play_action_rate=_clamp(play_action, 5, 50),
    )


def calculate_adjusted_defensive_tendencies(
    tendencies: DefensiveTendencies,
    context: GameStateContext,
) -> AdjustedDefensiveTendencies:
    """Apply red zone, two-minute, third-and-long, and score situations.

    Blitz is clamped to 5-55, man coverage to 15-85, press to 10-85.
    """
    if not isinstance(tendencies, DefensiveTendencies):
        raise ValueError(f"Expected defensive tendencies, got {type(tendencies).__name__}")

    blitz = tendencies.blitz_rate
    man = tendencies.man_coverage_rate
    press = tendencies.press_rate
    situational = tendencies.situational
    diff = context.score_differential

    if context.is_red_zone:
        if situational.red_zone is RedZoneDefense.AGGRESSIVE:
            blitz += 15
            press += 10
        else:
            blitz -= 10

    if context.is_two_minute_warning:
        if situational.two_minute_drill is TwoMinuteApproach.PREVENT:
            blitz -= 20
            man -= 25
            press -= 20
        elif situational.two_minute_drill is TwoMinuteApproach.BLITZ:
            blitz += 15
            man += 10
            press += 10

    if context.down == 3 and context.distance > 7:
        if situational.third_and_long is ThirdAndLongApproach.BLITZ:
            blitz += 20
        elif situational.third_and_long is ThirdAndLongApproach.COVERAGE:
            blitz -= 15
            man -= 10
        else:
            blitz += 5

    if diff >= 14:
        blitz -= 15
        man -= 10
    elif diff <= -14:
        blitz += 10
        press += 10

    # Protect a lead late: keep everything in front
    if context.quarter in (2, 4) and context.time_remaining < 60 and diff > 0:
        blitz -= 15
        man -= 20
        press -= 15

    return AdjustedDefensiveTendencies(
        base=tendencies,
        effective_blitz_rate=_clamp(blitz, 5, 55),
        effective_man_rate=_clamp(man, 15, 85),
        effective_press_rate=_clamp(press, 10, 85),
    )


# =============================================================================
# Probabilities
# =============================================================================

@dataclass(frozen=True)
class PlayCallProbabilities:
    run: float
    pass_short: float
    pass_medium: float
    pass_deep: float
    play_action: float
    screen: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "run": self.run,
            "pass_short": self.pass_short,
            "pass_medium": self.pass_medium,
            "pass_deep": self.pass_deep,
            "play_action": self.play_action,
            "screen": self.screen,
        }


@dataclass(frozen=True)
class DefensiveCallProbabilities:
    blitz: float
    man_coverage: float
    zone_coverage: float
    press: float


DEFAULT_PLAY_CALL_PROBABILITIES = PlayCallProbabilities(
    run=0.45, pass_short=0.25, pass_medium=0.15, pass_deep=0.08, play_action=0.04, screen=0.03,
)
DEFAULT_DEFENSIVE_CALL_PROBABILITIES = DefensiveCallProbabilities(
    blitz=0.25, man_coverage=0.4, zone_coverage=0.6, press=0.5,
)

SCREEN_SHARE = 0.1  # Of all passes
SHORT_SHARE = 0.55  # Of the passes left after deep, play action, and screens


def calculate_play_call_probabilities(adjusted: AdjustedOffensiveTendencies) -> PlayCallProbabilities:
    """Split the adjusted rates into per-play-type probabilities.

    Play action counts half here since it can be thrown short or deep.
    """
    pass_share = (100 - adjusted.effective_run_rate) / 100
    deep = pass_share * adjusted.effective_deep_rate / 100
    play_action = pass_share * adjusted.effective_play_action_rate / 100 * 0.5
    screen = pass_share * SCREEN_SHARE
    remaining = pass_share - deep - play_action - screen

    return PlayCallProbabilities(
        run=_clamp(adjusted.effective_run_rate / 100, 0, 1),
        pass_short=_clamp(remaining * SHORT_SHARE, 0, 1),
        pass_medium=_clamp(remaining * (1 - SHORT_SHARE), 0, 1),
        pass_deep=_clamp(deep, 0, 1),
        play_action=_clamp(play_action, 0, 1),
        screen=_clamp(screen, 0, 1),
    )


def calculate_defensive_call_probabilities(adjusted: AdjustedDefensiveTendencies) -> DefensiveCallProbabilities:
    man = adjusted.effective_man_rate / 100
    return DefensiveCallProbabilities(
        blitz=adjusted.effective_blitz_rate / 100,
        man_coverage=man,
        zone_coverage=1 - man,
        press=adjusted.effective_press_rate / 100,
    )


# =============================================================================
# Generation
# =============================================================================

TREE_RUN_SHIFT: Dict[TreeName, int] = {
    TreeName.WALSH: -10,
    TreeName.REID: -10,
    TreeName.SHANAHAN: 5,
    TreeName.PARCELLS: 8,
    TreeName.COUGHLIN: 8,
}

VETERAN_YEARS = 15


def generate_offensive_tendencies(
    tree_name: TreeName,
    philosophy: TreePhilosophy,
    personality: CoachPersonalityType,
    years_experience: int = 0,
) -> OffensiveTendencies:
    """Build an offensive profile from a coach's lineage and temperament.

    Args:
        tree_name: Coaching tree the coach came up in
        philosophy: Leanings inherited from that tree
        personality: Coach's primary personality
        years_experience: Years coaching

    Returns:
        OffensiveTendencies with a split summing to 100
    """
    run = 45 + TREE_RUN_SHIFT.get(tree_name, 0)
    if philosophy.offensive_tendency is OffensiveLean.PASS:
        run -= 5
    elif philosophy.offensive_tendency is OffensiveLean.RUN:
        run += 5

    aggressiveness = FourthDownAggressiveness.AVERAGE
    tempo = TempoPreference.BALANCED
    play_action = 20
    deep = 15

    if personality is CoachPersonalityType.AGGRESSIVE:
        aggressiveness = FourthDownAggressiveness.AGGRESSIVE
        tempo = TempoPreference.UPTEMPO
        deep += 8
    elif personality is CoachPersonalityType.CONSERVATIVE:
        aggressiveness = FourthDownAggressiveness.CONSERVATIVE
        tempo = TempoPreference.SLOW
        deep -= 5
        play_action -= 5
    elif personality is CoachPersonalityType.INNOVATIVE:
        tempo = TempoPreference.UPTEMPO
        play_action += 10
        deep += 5
    elif personality is CoachPersonalityType.OLD_SCHOOL:
        tempo = TempoPreference.SLOW
        run += 5
        play_action += 8
    elif personality is CoachPersonalityType.ANALYTICAL:
        play_action += 3

    # Veterans settle down on fourth down
    if years_experience > VETERAN_YEARS and aggressiveness is FourthDownAggressiveness.AGGRESSIVE:
        aggressiveness = FourthDownAggressiveness.AVERAGE

    if philosophy.risk_tolerance is RiskTolerance.AGGRESSIVE:
        aggressiveness = FourthDownAggressiveness.AGGRESSIVE
        deep += 5
    elif philosophy.risk_tolerance is RiskTolerance.CONSERVATIVE:
        aggressiveness = FourthDownAggressiveness.CONSERVATIVE
        deep -= 5

    run = int(_clamp(run, 0, 100))
    return OffensiveTendencies(
        run_pass_split=RunPassSplit(run=run, pass_=100 - run),
        play_action_rate=int(_clamp(play_action, 5, 50)),
        deep_shot_rate=int(_clamp(deep, 5, 40)),
        fourth_down_aggressiveness=aggressiveness,
        tempo_preference=tempo,
        situational=_generate_offensive_situational(personality, philosophy),
    )


def _generate_offensive_situational(
    personality: CoachPersonalityType,
    philosophy: TreePhilosophy,
) -> OffensiveSituational:
    ahead = SplitModifier(15, -15)
    behind = SplitModifier(-20, 20)
    third_and_short = SituationalPreference.BALANCED
    red_zone = SituationalPreference.BALANCED

    if personality is CoachPersonalityType.AGGRESSIVE:
        ahead = SplitModifier(10, -10)
        third_and_short = SituationalPreference.PASS
    elif personality is CoachPersonalityType.CONSERVATIVE:
        ahead = SplitModifier(25, -25)
        behind = SplitModifier(-15, 15)
        third_and_short = SituationalPreference.RUN
    elif personality is CoachPersonalityType.OLD_SCHOOL:
        third_and_short = SituationalPreference.RUN
        red_zone = SituationalPreference.RUN
    elif personality is CoachPersonalityType.INNOVATIVE:
        third_and_short = SituationalPreference.PASS
        red_zone = SituationalPreference.PASS

    if philosophy.risk_tolerance is RiskTolerance.AGGRESSIVE:
        behind = replace(behind, pass_modifier=behind.pass_modifier + 5)

    return OffensiveSituational(
        ahead_by_14_plus=ahead,
        behind_by_14_plus=behind,
        third_and_short=third_and_short,
        red_zone=red_zone,
        bad_weather=SplitModifier(10, -10),
    )


def generate_defensive_tendencies(
    tree_name: TreeName,
    philosophy: TreePhilosophy,
    personality: CoachPersonalityType,
    years_experience: int = 0,
) -> DefensiveTendencies:
    """Build a defensive profile from a coach's lineage and temperament.

    Blitz ends up in 10-50, man coverage and press in 20-80.
    """
    formation = BaseFormation.FOUR_THREE
    blitz, man, press = 25, 40, 50

    if tree_name is TreeName.BELICHICK:
        formation = BaseFormation.HYBRID
        man, press = 55, 60
    elif tree_name in (TreeName.PARCELLS, TreeName.COUGHLIN):
        man = 50
    elif tree_name is TreeName.DUNGY:
        blitz, man = 20, 35
    elif tree_name is TreeName.PAYTON:
        blitz = 28

    if philosophy.defensive_tendency is DefensiveLean.AGGRESSIVE:
        blitz += 10
        press += 10
    elif philosophy.defensive_tendency is DefensiveLean.CONSERVATIVE:
        blitz -= 10
        man -= 10

    red_zone = RedZoneDefense.AGGRESSIVE
    two_minute = TwoMinuteApproach.NORMAL
    third_and_long = ThirdAndLongApproach.BALANCED

    if personality is CoachPersonalityType.AGGRESSIVE:
        blitz += 10
        press += 10
        two_minute = TwoMinuteApproach.BLITZ
        third_and_long = ThirdAndLongApproach.BLITZ
    elif personality is CoachPersonalityType.CONSERVATIVE:
        blitz -= 10
        red_zone = RedZoneDefense.CONSERVATIVE
        two_minute = TwoMinuteApproach.PREVENT
        third_and_long = ThirdAndLongApproach.COVERAGE
    elif personality is CoachPersonalityType.ANALYTICAL:
        third_and_long = ThirdAndLongApproach.COVERAGE
    elif personality is CoachPersonalityType.INNOVATIVE:
        blitz += 5
        formation = BaseFormation.HYBRID

    if years_experience > VETERAN_YEARS and blitz > 40:
        blitz -= 5

    if philosophy.risk_tolerance is RiskTolerance.AGGRESSIVE:
        blitz += 5
        two_minute = TwoMinuteApproach.BLITZ
    elif philosophy.risk_tolerance is RiskTolerance.CONSERVATIVE:
        blitz -= 5
        two_minute = TwoMinuteApproach.PREVENT

    return DefensiveTendencies(
        base_formation=formation,
        blitz_rate=int(_clamp(blitz, 10, 50)),
        man_coverage_rate=int(_clamp(man, 20, 80)),
        press_rate=int(_clamp(press, 20, 80)),
        situational=DefensiveSituational(
            red_zone=red_zone,
            two_minute_drill=two_minute,
            third_and_long=third_and_long,
        ),
    )


# =============================================================================
# Description
# =============================================================================

def get_tendency_description(tendencies: CoordinatorTendencies) -> TendencyDescription:
    """Qualitative summary of a profile, safe to show users."""
    if isinstance(tendencies, OffensiveTendencies):
        return _describe_offense(tendencies)
    if isinstance(tendencies, DefensiveTendencies):
        return _describe_defense(tendencies)
    raise ValueError(f"Unknown tendency profile: {type(tendencies).__name__}")


def _describe_offense(tendencies: OffensiveTendencies) -> TendencyDescription:
    split = tendencies.run_pass_split
    traits = []

    if split.run >= 55:
        balance = "Run-heavy approach"
    elif split.pass_ >= 60:
        balance = "Pass-focused attack"
    else:
        balance = "Balanced offensive philosophy"

    if tendencies.fourth_down_aggressiveness is FourthDownAggressiveness.AGGRESSIVE:
        aggressiveness = "Aggressive on fourth down decisions"
    elif tendencies.fourth_down_aggressiveness is FourthDownAggressiveness.CONSERVATIVE:
        aggressiveness = "Conservative with game management"
    else:
        aggressiveness = "Calculated approach to risk"

    if tendencies.play_action_rate >= 30:
        traits.append("Heavy play-action usage")
    if tendencies.deep_shot_rate >= 25:
        traits.append("Likes to take deep shots")
    if tendencies.tempo_preference is TempoPreference.UPTEMPO:
        traits.append("Up-tempo pace")
    elif tendencies.tempo_preference is TempoPreference.SLOW:
        traits.append("Methodical pace")

    if split.pass_ >= 60 and tendencies.tempo_preference is TempoPreference.UPTEMPO:
        overall = "Modern, aggressive passing attack"
    elif split.run >= 55:
        overall = "Ground-and-pound mentality"
    elif tendencies.play_action_rate >= 25:
        overall = "Play-action oriented scheme"
    else:
        overall = "Versatile, situation-based approach"

    return TendencyDescription(
        overall=overall,
        run_pass_balance=balance,
        aggressiveness=aggressiveness,
        special_traits=traits,
    )


def _describe_defense(tendencies: DefensiveTendencies) -> TendencyDescription:
    traits = [f"{tendencies.base_formation.value} base defense"]

    if tendencies.man_coverage_rate >= 60:
        balance = "Man coverage preference"
    elif tendencies.man_coverage_rate <= 35:
        balance = "Zone coverage emphasis"
    else:
        balance = "Mixed coverage approach"

    if tendencies.blitz_rate >= 35:
        aggressiveness = "Aggressive, blitz-heavy scheme"
        traits.append("High blitz rate")
    elif tendencies.blitz_rate <= 20:
        aggressiveness = "Conservative, coverage-first approach"
    else:
        aggressiveness = "Situationally aggressive"

    if tendencies.press_rate >= 65:
        traits.append("Likes to press at the line")

    if tendencies.blitz_rate >= 40 and tendencies.man_coverage_rate >= 55:
        overall = "Attacking, high-risk high-reward defense"
    elif tendencies.blitz_rate <= 20 and tendencies.man_coverage_rate <= 40:
        overall = "Bend-but-don't-break mentality"
    else:
        overall = "Adaptable defensive system"

    return TendencyDescription(
        overall=overall,
        run_pass_balance=balance,
        aggressiveness=aggressiveness,
        special_traits=traits,
    )


# =============================================================================
# Similarity
# =============================================================================

def calculate_tendency_similarity(first: CoordinatorTendencies, second: CoordinatorTendencies) -> float:
    """How alike two profiles are, 0-100. Offense against defense is 0."""
    if isinstance(first, OffensiveTendencies) and isinstance(second, OffensiveTendencies):
        similarity = 100.0
        similarity -= abs(first.run_pass_split.run - second.run_pass_split.run) * 0.5
        similarity -= abs(first.play_action_rate - second.play_action_rate) * 0.3
        similarity -= abs(first.deep_shot_rate - second.deep_shot_rate) * 0.3
        if first.fourth_down_aggressiveness is not second.fourth_down_aggressiveness:
            similarity -= 10
        if first.tempo_preference is not second.tempo_preference:
            similarity -= 8
        return _clamp(similarity, 0, 100)

    if isinstance(first, DefensiveTendencies) and isinstance(second, DefensiveTendencies):
        similarity = 100.0
        if first.base_formation is not second.base_formation:
            hybrid = BaseFormation.HYBRID in (first.base_formation, second.base_formation)
            similarity -= 10 if hybrid else 20
        similarity -= abs(first.blitz_rate - second.blitz_rate) * 0.5
        similarity -= abs(first.man_coverage_rate - second.man_coverage_rate) * 0.3
        similarity -= abs(first.press_rate - second.press_rate) * 0.2
        return _clamp(similarity, 0, 100)

    return 0.0
