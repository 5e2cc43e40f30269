"""Shared pytest fixtures for Headset tests."""

import random

import pytest

from headset.config import set_config
from headset.core.enums import (
    CoachPersonalityType,
    CoachRole,
    PlayerPersonalityType,
    Position,
    Scheme,
    TreeName,
)
from headset.core.models.coach import (
    Coach,
    CoachAttributes,
    CoachingTree,
    CoachPersonality,
)
from headset.core.models.game_state import PlayCallContext
from headset.core.models.player import Player, SkillValue
from headset.core.models.tendencies import DefensiveTendencies, OffensiveTendencies


def skill(value: float, spread: int = 10) -> SkillValue:
    """A skill with a perceived band of +/- spread around the true value."""
    return SkillValue(
        true_value=value,
        perceived_min=max(1, int(value) - spread),
        perceived_max=min(100, int(value) + spread),
    )


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Every test starts from a config built with no overrides."""
    monkeypatch.delenv("HEADSET_RNG_SEED", raising=False)
    monkeypatch.delenv("HEADSET_KICKER_RANGE", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for stochastic engines."""
    return random.Random(42)


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def make_player():
    """Factory for players; skills maps skill name to true value."""
    def _make(position=Position.QB, age=24, skills=None, **kwargs) -> Player:
        return Player(
            first_name=kwargs.pop("first_name", "Test"),
            last_name=kwargs.pop("last_name", "Player"),
            position=position,
            age=age,
            skills={name: skill(value) for name, value in (skills or {}).items()},
            **kwargs,
        )
    return _make


@pytest.fixture
def qb_player() -> Player:
    """Young quarterback with every QB focus skill at 60."""
    return Player(
        first_name="Caleb",
        last_name="Marsh",
        position=Position.QB,
        age=22,
        personality_type=PlayerPersonalityType.COACHABLE,
        skills={
            "accuracy": skill(60),
            "decision_making": skill(60),
            "pocket_presence": skill(60),
            "presnap": skill(60),
            "arm_strength": skill(60),
        },
    )


@pytest.fixture
def elite_qb() -> Player:
    """Quarterback who clears every West Coast requirement comfortably."""
    return Player(
        first_name="Drew",
        last_name="Cole",
        position=Position.QB,
        age=27,
        skills={
            "accuracy": skill(92, 3),
            "decision_making": skill(88, 3),
            "presnap": skill(85, 3),
        },
    )


@pytest.fixture
def kicker() -> Player:
    return Player(
        first_name="Nate",
        last_name="Boot",
        position=Position.K,
        age=29,
        skills={"kick_power": skill(80), "kick_accuracy": skill(75)},
    )


@pytest.fixture
def cornerback() -> Player:
    return Player(
        first_name="Ray",
        last_name="Island",
        position=Position.CB,
        age=25,
        skills={
            "man_coverage": skill(70),
            "zone_coverage": skill(70),
            "press": skill(70),
        },
    )


# =============================================================================
# Coach Fixtures
# =============================================================================


@pytest.fixture
def make_coach():
    """Factory for coaches; keyword arguments override the defaults."""
    def _make(
        role=CoachRole.HEAD_COACH,
        primary=CoachPersonalityType.ANALYTICAL,
        secondary=None,
        ego=50,
        adaptability=50,
        tree=TreeName.WALSH,
        generation=2,
        development=50,
        motivation=50,
        **kwargs,
    ) -> Coach:
        return Coach(
            first_name=kwargs.pop("first_name", "Test"),
            last_name=kwargs.pop("last_name", "Coach"),
            role=role,
            tree=CoachingTree(tree_name=tree, generation=generation),
            personality=CoachPersonality(
                primary=primary, secondary=secondary, ego=ego, adaptability=adaptability
            ),
            attributes=CoachAttributes(development=development, motivation=motivation),
            **kwargs,
        )
    return _make


@pytest.fixture
def qb_coach(make_coach) -> Coach:
    """Elite developer coaching quarterbacks, no scheme of their own."""
    return make_coach(
        role=CoachRole.QB_COACH,
        development=90,
        first_name="Bill",
        last_name="Walsh",
    )


@pytest.fixture
def offensive_coordinator(make_coach) -> Coach:
    return make_coach(
        role=CoachRole.OFFENSIVE_COORDINATOR,
        scheme=Scheme.WEST_COAST,
        tendencies=OffensiveTendencies(),
        first_name="Andy",
        last_name="Reed",
    )


@pytest.fixture
def defensive_coordinator(make_coach) -> Coach:
    return make_coach(
        role=CoachRole.DEFENSIVE_COORDINATOR,
        scheme=Scheme.COVER_TWO,
        tendencies=DefensiveTendencies(),
        first_name="Tony",
        last_name="Dunn",
    )


# =============================================================================
# Game Fixtures
# =============================================================================


@pytest.fixture
def first_and_ten() -> PlayCallContext:
    """Opening snap of the game."""
    return PlayCallContext()


@pytest.fixture
def fourth_down():
    """Factory for fourth-down situations."""
    def _make(distance=5, field_position=50, score_differential=0, quarter=2,
              time_remaining=600, kicker_range=50) -> PlayCallContext:
        return PlayCallContext(
            down=4,
            distance=distance,
            field_position=field_position,
            score_differential=score_differential,
            quarter=quarter,
            time_remaining=time_remaining,
            kicker_range=kicker_range,
        )
    return _make
