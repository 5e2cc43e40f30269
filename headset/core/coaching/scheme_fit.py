"""
Scheme Fit Engine.

Scores how well a player's skills suit a scheme's positional requirements,
then applies a transition penalty while the player is still learning it.

Raw and adjusted scores stay inside the engine. The presentation layer gets
a SchemeFitView with a three-way description and a transition status.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from headset.config import get_rng
from headset.core.coaching.schemes import (
    IMPORTANCE_WEIGHTS,
    PositionRequirement,
    SCHEME_DEFINITIONS,
    get_scheme_display_name,
)
from headset.core.enums import FitLevel, Position, PositionGroup, Scheme
from headset.core.models.player import Player
from headset.schemas.scheme_fit import FitDescriptionEnum, SchemeFitView, TransitionStatusEnum

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

NEUTRAL_SCORE = 50.0

# Adjusted score thresholds for each fit level, best first
FIT_THRESHOLDS = (
    (90, FitLevel.PERFECT),
    (75, FitLevel.GOOD),
    (50, FitLevel.NEUTRAL),
    (25, FitLevel.POOR),
)

YEARS_TO_ADAPT = 3
YEAR_TWO_PENALTY = -3.5
EARLY_PENALTY = -7.5
MAX_TRANSITION_PENALTY = -15.0

# Engine-only effectiveness modifier; never surfaced as a number
SCHEME_FIT_MODIFIERS: Dict[FitLevel, float] = {
    FitLevel.PERFECT: 0.15,
    FitLevel.GOOD: 0.07,
    FitLevel.NEUTRAL: 0.0,
    FitLevel.POOR: -0.07,
    FitLevel.TERRIBLE: -0.15,
}

FIT_DESCRIPTIONS: Dict[FitLevel, FitDescriptionEnum] = {
    FitLevel.PERFECT: FitDescriptionEnum.GOOD,
    FitLevel.GOOD: FitDescriptionEnum.GOOD,
    FitLevel.NEUTRAL: FitDescriptionEnum.AVERAGE,
    FitLevel.POOR: FitDescriptionEnum.POOR,
    FitLevel.TERRIBLE: FitDescriptionEnum.POOR,
}


@dataclass(frozen=True)
class SchemeFitScore:
    """Engine-internal fit of one player in one scheme."""

    player_id: str
    scheme: Scheme
    raw_score: float
    years_in_scheme: int
    transition_penalty: float
    adjusted_score: float
    fit_level: FitLevel


# =============================================================================
# Scoring
# =============================================================================

def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _skill_score(true_value: float, minimum: int) -> float:
    if true_value >= minimum + 10:
        return 100.0
    if true_value >= minimum:
        return 75.0
    return max(0.0, 50.0 - (minimum - true_value) * 2)


def _score_requirement(player: Player, requirement: PositionRequirement) -> float:
    total_weight = 0
    weighted = 0.0
    for skill in requirement.skills:
        value = player.skills.get(skill.skill)
        # Unrated skills carry no weight
        if value is None:
            continue
        weight = IMPORTANCE_WEIGHTS[skill.importance]
        weighted += _skill_score(value.true_value, skill.minimum) * weight
        total_weight += weight

    skill_score = weighted / total_weight if total_weight > 0 else NEUTRAL_SCORE
    return _clamp(NEUTRAL_SCORE + (skill_score - NEUTRAL_SCORE) * requirement.weight * 2)


def _plays_for_scheme(position: Position, scheme: Scheme) -> bool:
    group = position.group
    if group is PositionGroup.SPECIAL_TEAMS:
        return False
    return (group is PositionGroup.OFFENSE) == scheme.is_offensive


def calculate_raw_fit(player: Player, scheme: Scheme) -> float:
    """Skill-weighted fit before any transition penalty (0-100).

    Special teams players, players on the other side of the ball, and
    positions the scheme has no requirement for all score a neutral 50.
    """
    if not _plays_for_scheme(player.position, scheme):
        return NEUTRAL_SCORE
    requirement = SCHEME_DEFINITIONS[scheme].requirement_for(player.position)
    if requirement is None:
        return NEUTRAL_SCORE
    return _score_requirement(player, requirement)


def calculate_transition_penalty(years_in_scheme: int) -> float:
    """Deterministic penalty for a player still learning a scheme."""
    if years_in_scheme >= YEARS_TO_ADAPT:
        return 0.0
    if years_in_scheme == 2:
        return YEAR_TWO_PENALTY
    return EARLY_PENALTY


def calculate_random_transition_penalty(
    years_in_scheme: int,
    rng: Optional[random.Random] = None,
) -> int:
    """Stochastic penalty variant: -10..-5 in year one, -5..-2 in year two."""
    if years_in_scheme >= YEARS_TO_ADAPT:
        return 0
    rng = rng or get_rng()
    if years_in_scheme == 2:
        return rng.randint(-5, -2)
    return rng.randint(-10, -5)


def get_fit_level(score: float) -> FitLevel:
    """Map an adjusted score to its ordinal fit level."""
    for threshold, level in FIT_THRESHOLDS:
        if score >= threshold:
            return level
    return FitLevel.TERRIBLE


def calculate_scheme_fit(player: Player, scheme: Scheme, years_in_scheme: int = 0) -> SchemeFitScore:
    """Score a player's fit in a scheme.

    Args:
        player: Player being evaluated
        scheme: Scheme to evaluate against
        years_in_scheme: Seasons the player has spent in this scheme

    Returns:
        SchemeFitScore with raw and adjusted scores and the fit level
    """
    if years_in_scheme < 0:
        raise ValueError(f"years_in_scheme must be >= 0, got {years_in_scheme}")

    raw = calculate_raw_fit(player, scheme)
    penalty = calculate_transition_penalty(years_in_scheme)
    adjusted = _clamp(raw + penalty)
    logger.debug(
        f"Scheme fit {player.id} in {scheme.value}: raw={raw:.1f} "
        f"years={years_in_scheme} adjusted={adjusted:.1f}"
    )

    return SchemeFitScore(
        player_id=player.id,
        scheme=scheme,
        raw_score=raw,
        years_in_scheme=years_in_scheme,
        transition_penalty=penalty,
        adjusted_score=adjusted,
        fit_level=get_fit_level(adjusted),
    )


def get_scheme_fit_modifier(fit_level: FitLevel) -> float:
    """Effectiveness multiplier offset for simulation use only."""
    return SCHEME_FIT_MODIFIERS[fit_level]


# =============================================================================
# Comparisons Across Schemes
# =============================================================================

def _applicable_schemes(player: Player) -> List[Scheme]:
    return [scheme for scheme in Scheme if _plays_for_scheme(player.position, scheme)]


def get_all_scheme_fits(
    player: Player,
    years_by_scheme: Optional[Dict[Scheme, int]] = None,
) -> List[SchemeFitScore]:
    """Fits for every scheme on the player's side of the ball."""
    years_by_scheme = years_by_scheme or {}
    return [
        calculate_scheme_fit(player, scheme, years_by_scheme.get(scheme, 0))
        for scheme in _applicable_schemes(player)
    ]


def get_best_scheme_fit(
    player: Player,
    years_by_scheme: Optional[Dict[Scheme, int]] = None,
) -> Optional[SchemeFitScore]:
    fits = get_all_scheme_fits(player, years_by_scheme)
    if not fits:
        return None
    return max(fits, key=lambda fit: fit.adjusted_score)


def get_worst_scheme_fit(
    player: Player,
    years_by_scheme: Optional[Dict[Scheme, int]] = None,
) -> Optional[SchemeFitScore]:
    fits = get_all_scheme_fits(player, years_by_scheme)
    if not fits:
        return None
    return min(fits, key=lambda fit: fit.adjusted_score)


def compare_scheme_fits(
    player: Player,
    scheme_a: Scheme,
    scheme_b: Scheme,
    years_a: int = 0,
    years_b: int = 0,
) -> Optional[Scheme]:
    """Which of two schemes suits the player better, or None if they tie."""
    fit_a = calculate_scheme_fit(player, scheme_a, years_a)
    fit_b = calculate_scheme_fit(player, scheme_b, years_b)
    if fit_a.adjusted_score > fit_b.adjusted_score:
        return scheme_a
    if fit_b.adjusted_score > fit_a.adjusted_score:
        return scheme_b
    return None


def summarize_team_scheme_fit(fits: List[SchemeFitScore]) -> str:
    """One-line roster summary for a scheme."""
    if not fits:
        return "No players to evaluate"

    strong = sum(1 for f in fits if f.fit_level in (FitLevel.PERFECT, FitLevel.GOOD))
    weak = sum(1 for f in fits if f.fit_level in (FitLevel.POOR, FitLevel.TERRIBLE))
    strong_ratio = strong / len(fits)
    weak_ratio = weak / len(fits)

    if strong_ratio >= 0.7:
        return "Excellent scheme fit across the roster"
    if strong_ratio >= 0.5:
        return "Good scheme fit with some gaps"
    if weak_ratio >= 0.5:
        return "Major scheme fit issues"
    return "Mixed scheme fit - some players adapting"


# =============================================================================
# Scheme History
# =============================================================================

@dataclass(frozen=True)
class PlayerSchemeHistory:
    """Which scheme a player is in and how long they have been in it."""

    player_id: str
    current_scheme: Optional[Scheme] = None
    years_in_current: int = 0
    previous_schemes: tuple = field(default_factory=tuple)


def create_scheme_history(player_id: str, scheme: Optional[Scheme] = None) -> PlayerSchemeHistory:
    return PlayerSchemeHistory(player_id=player_id, current_scheme=scheme)


def advance_scheme_year(history: PlayerSchemeHistory) -> PlayerSchemeHistory:
    """Credit a season in the current scheme."""
    if history.current_scheme is None:
        return history
    return replace(history, years_in_current=history.years_in_current + 1)


def change_scheme(history: PlayerSchemeHistory, new_scheme: Scheme) -> PlayerSchemeHistory:
    """Move a player to a new scheme. Past experience does not carry over."""
    previous = history.previous_schemes
    if history.current_scheme is not None:
        previous = previous + (history.current_scheme,)
    return replace(history, current_scheme=new_scheme, years_in_current=0, previous_schemes=previous)


def validate_scheme_fit_score(score: SchemeFitScore) -> bool:
    if not 0 <= score.raw_score <= 100:
        return False
    if not 0 <= score.adjusted_score <= 100:
        return False
    if score.years_in_scheme < 0:
        return False
    return MAX_TRANSITION_PENALTY <= score.transition_penalty <= 0


# =============================================================================
# Boundary Projection
# =============================================================================

def get_transition_status(years_in_scheme: int) -> TransitionStatusEnum:
    if years_in_scheme >= YEARS_TO_ADAPT:
        return TransitionStatusEnum.FULLY_ADAPTED
    if years_in_scheme == 2:
        return TransitionStatusEnum.ADJUSTING
    return TransitionStatusEnum.LEARNING


def get_scheme_fit_view(score: SchemeFitScore) -> SchemeFitView:
    """Project a fit score to its qualitative view."""
    return SchemeFitView(
        scheme_name=get_scheme_display_name(score.scheme),
        fit_description=FIT_DESCRIPTIONS[score.fit_level],
        transition_status=get_transition_status(score.years_in_scheme),
    )
