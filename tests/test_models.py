"""
Tests for the player, coach, and game situation models.

Tests cover:
- Skill band validation
- Player and coach serialization
- Range validation
- Boundary projection
- Play call context derivation
"""

from dataclasses import replace

import pytest

from headset.core.enums import CoachRole, Position
from headset.core.models.coach import (
    CareerHistoryEntry,
    Coach,
    CoachAttributes,
    CoachContract,
    CoachingTree,
    CoachPersonality,
    career_winning_percentage,
    validate_coach,
    validate_coach_tendencies,
)
from headset.core.models.game_state import PlayCallContext, WeatherCondition, create_default_play_call_context
from headset.core.models.player import Player, SkillValue, project_player, validate_player
from headset.core.models.tendencies import DefensiveTendencies, OffensiveTendencies


# =============================================================================
# Skills
# =============================================================================

class TestSkillValue:
    """Tests for the hidden value and its perceived band."""

    def test_band_must_contain_true_value(self):
        with pytest.raises(ValueError, match="does not contain"):
            SkillValue(true_value=70, perceived_min=72, perceived_max=80)

    def test_true_value_in_range(self):
        with pytest.raises(ValueError):
            SkillValue(true_value=101, perceived_min=90, perceived_max=100)

    def test_fractional_true_value(self):
        value = SkillValue(true_value=62.4, perceived_min=55, perceived_max=70)
        assert value.range_width == 15

    def test_with_true_value_keeps_band(self):
        updated = SkillValue(60, 50, 70).with_true_value(64.5)
        assert updated.true_value == 64.5
        assert (updated.perceived_min, updated.perceived_max) == (50, 70)

    def test_with_true_value_widens_band(self):
        updated = SkillValue(60, 50, 70).with_true_value(72.3)
        assert updated.perceived_max == 73
        assert updated.perceived_min == 50

    def test_with_true_value_clamps(self):
        assert SkillValue(98, 96, 100).with_true_value(104).true_value == 100.0
        assert SkillValue(3, 1, 5).with_true_value(-5).true_value == 1.0


# =============================================================================
# Player
# =============================================================================

class TestPlayer:
    """Tests for the Player model."""

    def test_with_skills_copies(self, qb_player):
        updated = qb_player.with_skills({"accuracy": SkillValue(65, 55, 75)})
        assert updated.skills["accuracy"].true_value == 65
        assert qb_player.skills["accuracy"].true_value == 60
        assert updated.id == qb_player.id

    def test_to_dict_round_trip(self, qb_player):
        restored = Player.from_dict(qb_player.to_dict())
        assert restored == qb_player

    def test_from_dict_defaults(self):
        player = Player.from_dict({"id": "p1", "position": "WR"})
        assert player.position is Position.WR
        assert player.personality_type is None
        assert player.breakout_meter == 0.0

    def test_validation(self, qb_player):
        assert validate_player(qb_player)
        assert not validate_player(replace(qb_player, age=16))
        assert not validate_player(replace(qb_player, breakout_meter=-1.0))

    def test_str(self, qb_player):
        assert str(qb_player) == "Caleb Marsh (QB)"


class TestProjection:
    """The projected player never carries true values."""

    def test_skills_projected_as_bands(self, qb_player):
        view = project_player(qb_player)
        assert view.name == "Caleb Marsh"
        assert [s.name for s in view.skills] == sorted(qb_player.skills)
        accuracy = next(s for s in view.skills if s.name == "accuracy")
        assert (accuracy.perceived_min, accuracy.perceived_max) == (50, 70)

    def test_no_true_values(self, elite_qb):
        dumped = project_player(elite_qb).model_dump()
        assert "true_value" not in str(dumped)


# =============================================================================
# Coach
# =============================================================================

class TestCoach:
    """Tests for the Coach model."""

    def test_round_trip_with_history(self, offensive_coordinator):
        coach = replace(
            offensive_coordinator,
            contract=CoachContract(years_total=4, years_remaining=2, salary=3500),
            career_history=[CareerHistoryEntry("KC", CoachRole.OFFENSIVE_COORDINATOR, 2019, 2023, 50, 30)],
            staff_chemistry={"hc-1": 4},
        )
        restored = Coach.from_dict(coach.to_dict())
        assert restored == coach
        assert isinstance(restored.tendencies, OffensiveTendencies)

    def test_defensive_profile_round_trip(self, defensive_coordinator):
        restored = Coach.from_dict(defensive_coordinator.to_dict())
        assert restored.defensive_tendencies == DefensiveTendencies()
        assert restored.offensive_tendencies is None

    def test_tree_round_trip(self):
        tree = CoachingTree(mentor_id="mentor-1", generation=3)
        assert CoachingTree.from_dict(tree.to_dict()) == tree

    def test_winning_percentage(self, make_coach):
        coach = make_coach(career_history=[
            CareerHistoryEntry("A", CoachRole.HEAD_COACH, 2010, 2014, wins=40, losses=40),
            CareerHistoryEntry("B", CoachRole.HEAD_COACH, 2015, wins=20, losses=0),
        ])
        assert career_winning_percentage(coach) == pytest.approx(0.6)
        assert career_winning_percentage(make_coach()) == 0.0


class TestCoachValidation:
    """Tests for coach range invariants."""

    def test_fixtures_valid(self, qb_coach, offensive_coordinator, defensive_coordinator):
        assert validate_coach(qb_coach)
        assert validate_coach(offensive_coordinator)
        assert validate_coach(defensive_coordinator)

    def test_attribute_range(self, make_coach):
        coach = make_coach()
        assert not validate_coach(replace(coach, attributes=CoachAttributes(development=0)))
        assert not validate_coach(replace(coach, attributes=CoachAttributes(age=0)))

    def test_personality_range(self, make_coach):
        assert not validate_coach(make_coach(ego=120))
        assert not validate_coach(replace(make_coach(), personality=CoachPersonality(adaptability=0)))

    def test_generation_range(self, make_coach):
        assert not validate_coach(make_coach(generation=5))

    def test_chemistry_range(self, make_coach):
        assert not validate_coach(make_coach(player_chemistry={"p1": 11}))
        assert validate_coach(make_coach(staff_chemistry={"c1": -10}))

    def test_names_required(self, make_coach):
        assert not validate_coach(make_coach(first_name=""))

    def test_tendencies_match_side(self, make_coach):
        assert not validate_coach_tendencies(
            make_coach(role=CoachRole.DEFENSIVE_COORDINATOR, tendencies=OffensiveTendencies())
        )
        assert validate_coach_tendencies(make_coach(tendencies=DefensiveTendencies()))
        assert not validate_coach_tendencies(
            make_coach(role=CoachRole.SPECIAL_TEAMS_COORDINATOR, tendencies=OffensiveTendencies())
        )

    def test_invalid_profile(self, make_coach):
        coach = make_coach(role=CoachRole.DEFENSIVE_COORDINATOR, tendencies=DefensiveTendencies(blitz_rate=120))
        assert not validate_coach_tendencies(coach)


# =============================================================================
# Game Situation
# =============================================================================

class TestPlayCallContext:
    """Tests for deriving situational flags."""

    def test_default_context(self):
        context = create_default_play_call_context()
        assert (context.down, context.distance, context.field_position) == (1, 10, 25)
        assert context.kicker_range == 50

    def test_red_zone(self):
        assert PlayCallContext(field_position=80).to_game_state().is_red_zone
        assert not PlayCallContext(field_position=79).to_game_state().is_red_zone

    def test_two_minute(self):
        assert PlayCallContext(quarter=2, time_remaining=120).to_game_state().is_two_minute_warning
        assert PlayCallContext(quarter=4, time_remaining=30).to_game_state().is_two_minute_warning
        assert not PlayCallContext(quarter=3, time_remaining=30).to_game_state().is_two_minute_warning

    def test_end_of_half(self):
        assert PlayCallContext(quarter=4, time_remaining=100).to_game_state().is_end_of_half
        assert not PlayCallContext(quarter=4, time_remaining=120).to_game_state().is_end_of_half

    def test_weather_carried(self):
        weather = WeatherCondition(wind_speed=25)
        assert PlayCallContext(weather=weather).to_game_state().weather.is_bad
