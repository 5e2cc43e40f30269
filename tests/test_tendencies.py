"""
Tests for tendency profiles.

Tests cover:
- Situational adjustments (offense and defense)
- Probability breakdowns
- Generation from coach background
- Descriptions and similarity
- Tendency model serialization and validation
"""

import pytest

from headset.core.enums import CoachPersonalityType, DefensiveLean, RiskTolerance, TreeName
from headset.core.models.coach import TreePhilosophy
from headset.core.models.game_state import GameStateContext, Precipitation, WeatherCondition
from headset.core.models.tendencies import (
    BaseFormation,
    DefensiveSituational,
    DefensiveTendencies,
    FourthDownAggressiveness,
    OffensiveSituational,
    OffensiveTendencies,
    RedZoneDefense,
    RunPassSplit,
    SituationalPreference,
    TempoPreference,
    ThirdAndLongApproach,
    TwoMinuteApproach,
    tendencies_from_dict,
    validate_defensive_tendencies,
    validate_offensive_tendencies,
)
from headset.game.tendencies import (
    calculate_adjusted_defensive_tendencies,
    calculate_adjusted_offensive_tendencies,
    calculate_defensive_call_probabilities,
    calculate_play_call_probabilities,
    calculate_tendency_similarity,
    generate_defensive_tendencies,
    generate_offensive_tendencies,
    get_tendency_description,
)

CP = CoachPersonalityType


def _rates(adjusted):
    return (adjusted.effective_run_rate, adjusted.effective_deep_rate, adjusted.effective_play_action_rate)


# =============================================================================
# Offensive Adjustments
# =============================================================================

class TestAdjustedOffense:
    """Tests for bending an offensive profile to the situation."""

    def test_neutral_situation(self):
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext())
        assert _rates(adjusted) == (45, 15, 20)

    def test_score(self):
        ahead = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext(score_differential=14))
        behind = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext(score_differential=-21))
        assert ahead.effective_run_rate == 60
        assert behind.effective_run_rate == 25

    def test_bad_weather(self):
        state = GameStateContext(weather=WeatherCondition(precipitation=Precipitation.RAIN))
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        assert _rates(adjusted) == (55, 10, 15)

    def test_dome_is_never_bad_weather(self):
        state = GameStateContext(weather=WeatherCondition(precipitation=Precipitation.RAIN, is_dome=True))
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        assert _rates(adjusted) == (45, 15, 20)

    def test_third_and_short(self):
        runner = OffensiveTendencies(situational=OffensiveSituational(third_and_short=SituationalPreference.RUN))
        passer = OffensiveTendencies(situational=OffensiveSituational(third_and_short=SituationalPreference.PASS))
        state = GameStateContext(down=3, distance=1)
        assert calculate_adjusted_offensive_tendencies(runner, state).effective_run_rate == 65
        adjusted = calculate_adjusted_offensive_tendencies(passer, state)
        assert (adjusted.effective_run_rate, adjusted.effective_deep_rate) == (30, 20)

    def test_third_and_long(self):
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext(down=3, distance=10))
        assert adjusted.effective_run_rate == 25

    def test_red_zone_limits_deep(self):
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext(is_red_zone=True))
        assert adjusted.effective_deep_rate == 5

    def test_two_minute(self):
        state = GameStateContext(is_two_minute_warning=True)
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        assert (adjusted.effective_run_rate, adjusted.effective_deep_rate) == (20, 20)

    def test_end_of_half_trailing(self):
        state = GameStateContext(quarter=4, time_remaining=100, score_differential=-3)
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        assert (adjusted.effective_run_rate, adjusted.effective_deep_rate) == (15, 25)

    def test_clamped(self):
        state = GameStateContext(quarter=4, time_remaining=100, score_differential=-3, is_two_minute_warning=True)
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        assert adjusted.effective_run_rate == 10
        assert adjusted.effective_deep_rate == 30

    def test_wrong_kind_rejected(self):
        with pytest.raises(ValueError):
            calculate_adjusted_offensive_tendencies(DefensiveTendencies(), GameStateContext())


# =============================================================================
# Defensive Adjustments
# =============================================================================

class TestAdjustedDefense:
    """Tests for bending a defensive profile to the situation."""

    @staticmethod
    def _rates(adjusted):
        return (adjusted.effective_blitz_rate, adjusted.effective_man_rate, adjusted.effective_press_rate)

    def test_neutral_situation(self):
        adjusted = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), GameStateContext())
        assert self._rates(adjusted) == (25, 40, 50)

    def test_red_zone(self):
        aggressive = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), GameStateContext(is_red_zone=True))
        assert self._rates(aggressive) == (40, 40, 60)
        careful = DefensiveTendencies(situational=DefensiveSituational(red_zone=RedZoneDefense.CONSERVATIVE))
        assert calculate_adjusted_defensive_tendencies(careful, GameStateContext(is_red_zone=True)).effective_blitz_rate == 15

    def test_two_minute_prevent(self):
        prevent = DefensiveTendencies(situational=DefensiveSituational(two_minute_drill=TwoMinuteApproach.PREVENT))
        adjusted = calculate_adjusted_defensive_tendencies(prevent, GameStateContext(is_two_minute_warning=True))
        assert self._rates(adjusted) == (5, 15, 30)

    def test_third_and_long(self):
        state = GameStateContext(down=3, distance=9)
        coverage = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), state)
        assert self._rates(coverage) == (10, 30, 50)
        blitzer = DefensiveTendencies(situational=DefensiveSituational(third_and_long=ThirdAndLongApproach.BLITZ))
        assert calculate_adjusted_defensive_tendencies(blitzer, state).effective_blitz_rate == 45

    def test_score(self):
        ahead = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), GameStateContext(score_differential=14))
        behind = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), GameStateContext(score_differential=-14))
        assert self._rates(ahead) == (10, 30, 50)
        assert self._rates(behind) == (35, 40, 60)

    def test_protecting_late_lead(self):
        state = GameStateContext(quarter=4, time_remaining=30, score_differential=3)
        adjusted = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), state)
        assert self._rates(adjusted) == (10, 20, 35)

    def test_wrong_kind_rejected(self):
        with pytest.raises(ValueError):
            calculate_adjusted_defensive_tendencies(OffensiveTendencies(), GameStateContext())


# =============================================================================
# Probabilities
# =============================================================================

class TestProbabilities:
    """Tests for turning adjusted rates into call probabilities."""

    def test_offense_sums_to_one(self):
        adjusted = calculate_adjusted_offensive_tendencies(OffensiveTendencies(), GameStateContext())
        probabilities = calculate_play_call_probabilities(adjusted)
        assert probabilities.run == pytest.approx(0.45)
        assert probabilities.pass_deep == pytest.approx(0.0825)
        assert probabilities.play_action == pytest.approx(0.055)
        assert probabilities.screen == pytest.approx(0.055)
        assert sum(probabilities.to_dict().values()) == pytest.approx(1.0)

    def test_offense_in_range(self):
        state = GameStateContext(quarter=4, time_remaining=100, score_differential=-3, is_two_minute_warning=True)
        probabilities = calculate_play_call_probabilities(
            calculate_adjusted_offensive_tendencies(OffensiveTendencies(), state)
        )
        for value in probabilities.to_dict().values():
            assert 0 <= value <= 1

    def test_defense(self):
        adjusted = calculate_adjusted_defensive_tendencies(DefensiveTendencies(), GameStateContext())
        probabilities = calculate_defensive_call_probabilities(adjusted)
        assert probabilities.blitz == pytest.approx(0.25)
        assert probabilities.man_coverage + probabilities.zone_coverage == pytest.approx(1.0)
        assert probabilities.press == pytest.approx(0.5)


# =============================================================================
# Generation
# =============================================================================

class TestGeneration:
    """Tests for building profiles from a coach's background."""

    def test_walsh_analytical(self):
        tendencies = generate_offensive_tendencies(TreeName.WALSH, TreePhilosophy(), CP.ANALYTICAL)
        assert tendencies.run_pass_split == RunPassSplit(35, 65)
        assert tendencies.play_action_rate == 23
        assert tendencies.deep_shot_rate == 15
        assert tendencies.fourth_down_aggressiveness is FourthDownAggressiveness.AVERAGE
        assert validate_offensive_tendencies(tendencies)

    def test_conservative_parcells(self):
        philosophy = TreePhilosophy(risk_tolerance=RiskTolerance.CONSERVATIVE)
        tendencies = generate_offensive_tendencies(TreeName.PARCELLS, philosophy, CP.CONSERVATIVE)
        assert tendencies.run_pass_split.run == 53
        assert tendencies.deep_shot_rate == 5
        assert tendencies.play_action_rate == 15
        assert tendencies.fourth_down_aggressiveness is FourthDownAggressiveness.CONSERVATIVE
        assert tendencies.tempo_preference is TempoPreference.SLOW
        assert tendencies.situational.third_and_short is SituationalPreference.RUN
        assert tendencies.situational.ahead_by_14_plus.run_modifier == 25

    def test_veteran_settles_down(self):
        young = generate_offensive_tendencies(TreeName.GRUDEN, TreePhilosophy(), CP.AGGRESSIVE, 5)
        veteran = generate_offensive_tendencies(TreeName.GRUDEN, TreePhilosophy(), CP.AGGRESSIVE, 20)
        assert young.fourth_down_aggressiveness is FourthDownAggressiveness.AGGRESSIVE
        assert veteran.fourth_down_aggressiveness is FourthDownAggressiveness.AVERAGE
        assert veteran.tempo_preference is TempoPreference.UPTEMPO

    def test_every_combination_valid(self):
        for tree in TreeName:
            for personality in CP:
                for risk in RiskTolerance:
                    philosophy = TreePhilosophy(risk_tolerance=risk)
                    offense = generate_offensive_tendencies(tree, philosophy, personality)
                    defense = generate_defensive_tendencies(tree, philosophy, personality)
                    assert validate_offensive_tendencies(offense)
                    assert 10 <= defense.blitz_rate <= 50
                    assert 20 <= defense.man_coverage_rate <= 80
                    assert 20 <= defense.press_rate <= 80

    def test_belichick_defense(self):
        tendencies = generate_defensive_tendencies(TreeName.BELICHICK, TreePhilosophy(), CP.ANALYTICAL)
        assert tendencies.base_formation is BaseFormation.HYBRID
        assert (tendencies.blitz_rate, tendencies.man_coverage_rate, tendencies.press_rate) == (25, 55, 60)
        assert tendencies.situational.third_and_long is ThirdAndLongApproach.COVERAGE

    def test_cautious_defense(self):
        philosophy = TreePhilosophy(defensive_tendency=DefensiveLean.CONSERVATIVE)
        tendencies = generate_defensive_tendencies(TreeName.DUNGY, philosophy, CP.CONSERVATIVE)
        assert tendencies.blitz_rate == 10
        assert tendencies.man_coverage_rate == 25
        assert tendencies.situational.red_zone is RedZoneDefense.CONSERVATIVE
        assert tendencies.situational.two_minute_drill is TwoMinuteApproach.PREVENT

    def test_attacking_defense(self):
        philosophy = TreePhilosophy(defensive_tendency=DefensiveLean.AGGRESSIVE, risk_tolerance=RiskTolerance.AGGRESSIVE)
        tendencies = generate_defensive_tendencies(TreeName.WALSH, philosophy, CP.AGGRESSIVE)
        assert tendencies.blitz_rate == 50
        assert tendencies.press_rate == 70
        assert tendencies.situational.two_minute_drill is TwoMinuteApproach.BLITZ


# =============================================================================
# Descriptions
# =============================================================================

class TestDescriptions:
    """Descriptions use words, never rates."""

    def test_default_offense(self):
        description = get_tendency_description(OffensiveTendencies())
        assert description.run_pass_balance == "Balanced offensive philosophy"
        assert description.aggressiveness == "Calculated approach to risk"
        assert description.overall == "Versatile, situation-based approach"
        assert description.special_traits == []

    def test_ground_and_pound(self):
        description = get_tendency_description(OffensiveTendencies(run_pass_split=RunPassSplit(60, 40)))
        assert description.run_pass_balance == "Run-heavy approach"
        assert description.overall == "Ground-and-pound mentality"

    def test_air_attack(self):
        tendencies = OffensiveTendencies(
            run_pass_split=RunPassSplit(35, 65),
            deep_shot_rate=25,
            tempo_preference=TempoPreference.UPTEMPO,
            fourth_down_aggressiveness=FourthDownAggressiveness.AGGRESSIVE,
        )
        description = get_tendency_description(tendencies)
        assert description.overall == "Modern, aggressive passing attack"
        assert description.aggressiveness == "Aggressive on fourth down decisions"
        assert description.special_traits == ["Likes to take deep shots", "Up-tempo pace"]

    def test_default_defense(self):
        description = get_tendency_description(DefensiveTendencies())
        assert description.special_traits == ["4-3 base defense"]
        assert description.run_pass_balance == "Mixed coverage approach"
        assert description.aggressiveness == "Situationally aggressive"
        assert description.overall == "Adaptable defensive system"

    def test_attacking_defense(self):
        tendencies = DefensiveTendencies(blitz_rate=45, man_coverage_rate=60, press_rate=70)
        description = get_tendency_description(tendencies)
        assert description.overall == "Attacking, high-risk high-reward defense"
        assert "High blitz rate" in description.special_traits
        assert "Likes to press at the line" in description.special_traits

    def test_unknown_profile(self):
        with pytest.raises(ValueError):
            get_tendency_description("balanced")


# =============================================================================
# Similarity
# =============================================================================

class TestSimilarity:
    """Tests for comparing two profiles."""

    def test_identical(self):
        assert calculate_tendency_similarity(OffensiveTendencies(), OffensiveTendencies()) == 100.0

    def test_mismatched_kinds(self):
        assert calculate_tendency_similarity(OffensiveTendencies(), DefensiveTendencies()) == 0.0

    def test_offense_differences(self):
        other = OffensiveTendencies(
            run_pass_split=RunPassSplit(65, 35),
            fourth_down_aggressiveness=FourthDownAggressiveness.AGGRESSIVE,
        )
        assert calculate_tendency_similarity(OffensiveTendencies(), other) == pytest.approx(80.0)

    def test_formation_differences(self):
        base = DefensiveTendencies()
        assert calculate_tendency_similarity(base, DefensiveTendencies(base_formation=BaseFormation.THREE_FOUR)) == 80.0
        assert calculate_tendency_similarity(base, DefensiveTendencies(base_formation=BaseFormation.HYBRID)) == 90.0


# =============================================================================
# Model
# =============================================================================

class TestTendencyModel:
    """Tests for the tendency dataclasses themselves."""

    def test_from_dict_picks_kind(self):
        offense = OffensiveTendencies(play_action_rate=30)
        defense = DefensiveTendencies(blitz_rate=40)
        assert tendencies_from_dict(offense.to_dict()) == offense
        assert tendencies_from_dict(defense.to_dict()) == defense

    def test_validation(self):
        assert not validate_offensive_tendencies(OffensiveTendencies(run_pass_split=RunPassSplit(50, 60)))
        assert not validate_offensive_tendencies(OffensiveTendencies(deep_shot_rate=41))
        assert validate_defensive_tendencies(DefensiveTendencies(blitz_rate=80))
        assert not validate_defensive_tendencies(DefensiveTendencies(press_rate=101))
