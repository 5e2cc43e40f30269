"""
Tests for player-coach chemistry.

Tests cover:
- Initial chemistry factors
- Event application and clamping
- Season advancement
- Level thresholds and the qualitative description
"""

import pytest

from headset.core.coaching.chemistry import (
    ChemistryEventType,
    ChemistryHistory,
    advance_chemistry_season,
    apply_chemistry_event,
    apply_event_to_history,
    calculate_coach_style_factor,
    calculate_initial_chemistry,
    calculate_performance_factor,
    calculate_personality_factor,
    calculate_scheme_fit_factor,
    calculate_time_together_factor,
    describe_team_chemistry,
    get_chemistry_description,
    get_chemistry_level,
    get_chemistry_modifier,
    get_development_chemistry_modifier,
    get_morale_chemistry_modifier,
    initialize_chemistry_history,
    validate_chemistry,
)
from headset.core.enums import (
    ChemistryLevel,
    CoachPersonalityType,
    FitLevel,
    PlayerPersonalityType,
    Scheme,
)


# =============================================================================
# Initial Chemistry
# =============================================================================

class TestInitialChemistry:
    """Tests for the starting relationship between coach and player."""

    def test_personality_affinity(self, make_coach):
        """Coachable players respond to old-school coaches."""
        coach = make_coach(primary=CoachPersonalityType.OLD_SCHOOL)
        assert calculate_personality_factor(coach, PlayerPersonalityType.COACHABLE) == 3

    def test_personality_conflict(self, make_coach):
        """Me-first players clash with conservative coaches."""
        coach = make_coach(
            primary=CoachPersonalityType.CONSERVATIVE,
            secondary=CoachPersonalityType.OLD_SCHOOL,
        )
        assert calculate_personality_factor(coach, PlayerPersonalityType.ME_FIRST) == -5

    def test_unknown_personality_neutral(self, make_coach):
        assert calculate_personality_factor(make_coach(), None) == 0

    def test_scheme_factor_needs_scheme(self, make_coach):
        """Coaches without a scheme contribute nothing for fit."""
        assert calculate_scheme_fit_factor(make_coach(), FitLevel.PERFECT) == 0
        coach = make_coach(scheme=Scheme.WEST_COAST)
        assert calculate_scheme_fit_factor(coach, FitLevel.PERFECT) == 3
        assert calculate_scheme_fit_factor(coach, FitLevel.TERRIBLE) == -3
        assert calculate_scheme_fit_factor(coach, None) == 0

    def test_performance_factor(self):
        assert calculate_performance_factor(None) == 0
        assert calculate_performance_factor(90) == 3
        assert calculate_performance_factor(78) == 1
        assert calculate_performance_factor(65) == 0
        assert calculate_performance_factor(58) == -1
        assert calculate_performance_factor(40) == -2

    def test_time_together_capped(self):
        assert calculate_time_together_factor(2) == 1.0
        assert calculate_time_together_factor(20) == 3.0

    def test_coach_style(self, make_coach):
        """Players' coaches and adaptable coaches start warmer; big egos clash with me-first players."""
        warm = make_coach(primary=CoachPersonalityType.PLAYERS_COACH, adaptability=80)
        assert calculate_coach_style_factor(warm, None) == 2
        proud = make_coach(ego=90)
        assert calculate_coach_style_factor(proud, PlayerPersonalityType.ME_FIRST) == -2

    def test_initial_chemistry_clamped(self, make_coach, qb_player):
        """Factors add up but the result stays in [-10, 10]."""
        coach = make_coach(
            primary=CoachPersonalityType.PLAYERS_COACH,
            secondary=CoachPersonalityType.OLD_SCHOOL,
            adaptability=90,
            scheme=Scheme.WEST_COAST,
        )
        chemistry = calculate_initial_chemistry(
            coach, qb_player, FitLevel.PERFECT, seasons_together=10, performance_rating=95
        )
        # 5 + 3 + 3 + 3 + 2 = 16
        assert chemistry == 10

    def test_initial_history(self, make_coach, qb_player):
        """A new history opens with an initial-meeting event."""
        coach = make_coach(primary=CoachPersonalityType.OLD_SCHOOL)
        history = initialize_chemistry_history(coach, qb_player, season=2024)
        assert history.current_chemistry == 3
        assert history.seasons_together == 0
        assert len(history.events) == 1
        assert history.events[0].event_type is ChemistryEventType.INITIAL_MEETING
        assert history.events[0].season == 2024


# =============================================================================
# Events
# =============================================================================

class TestChemistryEvents:
    """Tests for discrete relationship events."""

    def test_event_magnitudes(self):
        assert apply_chemistry_event(0, ChemistryEventType.GAME_WINNING_PLAY) == 2
        assert apply_chemistry_event(0, ChemistryEventType.CONTRACT_DISPUTE) == -2
        assert apply_chemistry_event(0, ChemistryEventType.INITIAL_MEETING) == 0

    def test_events_clamp(self):
        assert apply_chemistry_event(10, ChemistryEventType.MENTORSHIP_MOMENT) == 10
        assert apply_chemistry_event(-9, ChemistryEventType.COSTLY_MISTAKE) == -10

    def test_each_application_clamps(self):
        """Clamping happens per event, so a ceiling hit loses the excess."""
        history = ChemistryHistory(coach_id="c", player_id="p", current_chemistry=9)
        history = apply_event_to_history(history, ChemistryEventType.MENTORSHIP_MOMENT)
        history = apply_event_to_history(history, ChemistryEventType.PRACTICE_INCIDENT)
        assert history.current_chemistry == 9

    def test_history_is_append_only(self):
        original = ChemistryHistory(coach_id="c", player_id="p")
        updated = apply_event_to_history(original, ChemistryEventType.PERFORMANCE_EXCELLENT, season=3)
        assert original.events == ()
        assert len(updated.events) == 1
        assert updated.events[0].change == 1
        assert updated.events[0].season == 3

    def test_unknown_event_rejected(self):
        with pytest.raises(ValueError):
            apply_chemistry_event(0, "not_an_event")


class TestSeasonAdvance:
    """Tests for end-of-season updates."""

    def test_tenure_credited(self):
        history = ChemistryHistory(coach_id="c", player_id="p")
        updated = advance_chemistry_season(history)
        assert updated.seasons_together == 1
        assert updated.current_chemistry == 1

    def test_excellent_season(self):
        history = ChemistryHistory(coach_id="c", player_id="p")
        updated = advance_chemistry_season(history, performance_rating=90)
        assert updated.current_chemistry == 2
        assert updated.events[-1].event_type is ChemistryEventType.PERFORMANCE_EXCELLENT

    def test_poor_season(self):
        history = ChemistryHistory(coach_id="c", player_id="p", current_chemistry=3)
        updated = advance_chemistry_season(history, performance_rating=50)
        assert updated.current_chemistry == 3
        assert [e.event_type for e in updated.events] == [
            ChemistryEventType.SEASON_TOGETHER,
            ChemistryEventType.PERFORMANCE_POOR,
        ]


# =============================================================================
# Modifiers and Levels
# =============================================================================

class TestChemistryModifiers:
    """Tests for lookups used by other engines."""

    def test_history_wins(self, make_coach):
        coach = make_coach(player_chemistry={"p": 5})
        history = ChemistryHistory(coach_id=coach.id, player_id="p", current_chemistry=-4)
        assert get_chemistry_modifier(coach, "p", history) == -4

    def test_falls_back_to_coach_map(self, make_coach):
        coach = make_coach(player_chemistry={"p": 5})
        assert get_chemistry_modifier(coach, "p") == 5
        assert get_chemistry_modifier(coach, "stranger") == 0

    def test_development_modifier(self):
        assert get_development_chemistry_modifier(10) == pytest.approx(0.2)
        assert get_development_chemistry_modifier(-10) == pytest.approx(-0.2)
        assert get_morale_chemistry_modifier(-10) == -10

    def test_validate(self):
        assert validate_chemistry(0)
        assert not validate_chemistry(11)


class TestChemistryLevels:
    """Tests for the qualitative buckets."""

    def test_thresholds(self):
        assert get_chemistry_level(7) is ChemistryLevel.EXCELLENT
        assert get_chemistry_level(6) is ChemistryLevel.GOOD
        assert get_chemistry_level(3) is ChemistryLevel.GOOD
        assert get_chemistry_level(2) is ChemistryLevel.NEUTRAL
        assert get_chemistry_level(-2) is ChemistryLevel.NEUTRAL
        assert get_chemistry_level(-3) is ChemistryLevel.STRAINED
        assert get_chemistry_level(-6) is ChemistryLevel.STRAINED
        assert get_chemistry_level(-7) is ChemistryLevel.TOXIC

    def test_missing_history_description(self):
        description = get_chemistry_description(None)
        assert description.level == "neutral"
        assert description.trend == "stable"

    def test_description_trend(self):
        history = ChemistryHistory(coach_id="c", player_id="p")
        history = apply_event_to_history(history, ChemistryEventType.MENTORSHIP_MOMENT)
        history = apply_event_to_history(history, ChemistryEventType.GAME_WINNING_PLAY)
        description = get_chemistry_description(history)
        assert description.level == "good"
        assert description.trend == "improving"

    def test_description_hides_value(self):
        history = ChemistryHistory(coach_id="c", player_id="p", current_chemistry=8)
        dumped = get_chemistry_description(history).model_dump()
        assert set(dumped) == {"level", "description", "trend"}

    def test_team_description(self):
        histories = [
            ChemistryHistory(coach_id="c", player_id=str(i), current_chemistry=value)
            for i, value in enumerate([8, 6, 4])
        ]
        team = describe_team_chemistry(histories)
        assert team.level == "good"
        assert team.players_evaluated == 3
        assert describe_team_chemistry([]).players_evaluated == 0
