"""Coach evaluation helpers.

Turns a coach's hidden attributes into the multipliers other engines use:
game-day effectiveness, motivation, scheme teaching, and the blended
development bonus across a player's coaches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from headset.core.models.coach import Coach, CoachAttributes

# Attribute weights for a coach's overall rating
OVERALL_WEIGHTS: Dict[str, float] = {
    "development": 0.2,
    "game_day_iq": 0.2,
    "scheme_teaching": 0.15,
    "player_evaluation": 0.15,
    "talent_id": 0.15,
    "motivation": 0.15,
}

QUALITY_TIERS = (
    (90, "elite"),
    (80, "excellent"),
    (70, "good"),
    (55, "average"),
    (40, "poor"),
)

GAME_DAY_MODIFIERS = (
    (90, 0.10),
    (80, 0.07),
    (70, 0.04),
    (60, 0.02),
    (50, 0.0),
    (40, -0.02),
)
GAME_DAY_FLOOR = -0.05

OWN_SCHEME_TEACHING_BONUS = 15

TEACHING_TIERS = (
    (90, "elite"),
    (75, "excellent"),
    (60, "good"),
    (45, "average"),
)

# Share of a player's development bonus owed to each layer of staff
POSITION_COACH_SHARE = 0.6
COORDINATOR_SHARE = 0.25
HEAD_COACH_SHARE = 0.15


def calculate_coach_overall(attributes: CoachAttributes) -> int:
    """Weighted overall rating (1-100) from the hidden attributes."""
    total = sum(getattr(attributes, name) * weight for name, weight in OVERALL_WEIGHTS.items())
    return round(total)


def get_coach_quality_tier(overall: int) -> str:
    for threshold, tier in QUALITY_TIERS:
        if overall >= threshold:
            return tier
    return "liability"


def get_motivation_modifier(motivation: int) -> float:
    """Linear 0.8x (motivation 0) to 1.2x (motivation 100)."""
    return 0.8 + (motivation / 100) * 0.4


def get_game_day_modifier(game_day_iq: int) -> float:
    """Play-calling effectiveness offset from game-day IQ."""
    for threshold, modifier in GAME_DAY_MODIFIERS:
        if game_day_iq >= threshold:
            return modifier
    return GAME_DAY_FLOOR


@dataclass(frozen=True)
class SchemeTeaching:
    effectiveness: int
    yearly_progress: int  # Mastery points gained per season
    max_mastery: float
    quality: str


def calculate_scheme_teaching_effectiveness(coach: Coach, is_own_scheme: bool = False) -> SchemeTeaching:
    """How well a coach installs a scheme.

    A coach teaching their own scheme gets a flat bonus.
    """
    effectiveness = coach.attributes.scheme_teaching
    if is_own_scheme:
        effectiveness = min(100, effectiveness + OWN_SCHEME_TEACHING_BONUS)

    quality = "poor"
    for threshold, tier in TEACHING_TIERS:
        if effectiveness >= threshold:
            quality = tier
            break

    return SchemeTeaching(
        effectiveness=effectiveness,
        yearly_progress=round(effectiveness / 10),
        max_mastery=min(100.0, 50 + effectiveness / 2),
        quality=quality,
    )


def calculate_combined_development_bonus(
    position_coach: Optional[Coach],
    coordinator: Optional[Coach],
    head_coach: Optional[Coach],
) -> float:
    """Blend the development attribute of every coach who touches a player.

    Missing coaches contribute nothing rather than a neutral value.
    """
    total = 0.0
    for coach, share in (
        (position_coach, POSITION_COACH_SHARE),
        (coordinator, COORDINATOR_SHARE),
        (head_coach, HEAD_COACH_SHARE),
    ):
        if coach is not None:
            total += coach.attributes.development * share
    return total
