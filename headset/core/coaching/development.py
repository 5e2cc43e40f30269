"""
Offseason Development Impact.

Coaches move player skills between seasons. The size of the move comes from
the coach's hidden development attribute, adjusted by chemistry with the
player and the player's fit in the coach's scheme, then scaled by the
coach's motivation and the player's age. The result is spread across the
skills the coach's role works on, and scouts tighten their read of every
skill that changed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from headset.core.coaching.chemistry import clamp_chemistry
from headset.core.coaching.evaluation import get_motivation_modifier
from headset.core.coaching.responsibilities import coach_affects_player, get_impact_areas
from headset.core.coaching.scheme_fit import calculate_scheme_fit
from headset.core.enums import CoachRole, FitLevel, InfluenceTier
from headset.core.models.coach import Coach
from headset.core.models.player import Player, SkillValue
from headset.schemas.development import (
    DevelopmentImpactView,
    ProgressionSummary,
    SkillChangeSummary,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# (minimum development attribute, base impact)
BASE_IMPACT_TABLE = (
    (90, 10),
    (80, 7),
    (70, 5),
    (60, 3),
    (50, 1),
    (40, 0),
    (30, -2),
)
BASE_IMPACT_FLOOR = -5

# Head coaches spread their attention across the whole roster
HEAD_COACH_IMPACT_MULTIPLIER = 0.5

# (minimum chemistry, modifier)
CHEMISTRY_IMPACT_TABLE = (
    (7, 3),
    (4, 2),
    (1, 1),
    (-3, 0),
    (-6, -1),
)
CHEMISTRY_IMPACT_FLOOR = -2

SCHEME_FIT_IMPACT: Dict[FitLevel, int] = {
    FitLevel.PERFECT: 2,
    FitLevel.GOOD: 1,
    FitLevel.NEUTRAL: 0,
    FitLevel.POOR: 0,
    FitLevel.TERRIBLE: -1,
}

# (maximum age, modifier); older players get AGE_MODIFIER_FLOOR
AGE_DEVELOPMENT_TABLE = (
    (23, 1.3),
    (25, 1.15),
    (27, 1.0),
    (29, 0.85),
    (31, 0.6),
    (33, 0.3),
)
AGE_MODIFIER_FLOOR = 0.1

MIN_TRUE_VALUE = 1
MAX_TRUE_VALUE = 99

NOTABLE_CHANGE = 3

# Offseason relationship recalculation
OFFSEASON_SCHEME_CHEMISTRY: Dict[FitLevel, float] = {
    FitLevel.PERFECT: 3,
    FitLevel.GOOD: 1.5,
    FitLevel.NEUTRAL: 0,
    FitLevel.POOR: -1.5,
    FitLevel.TERRIBLE: -3,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# Impact Calculation
# =============================================================================

@dataclass(frozen=True)
class DevelopmentImpact:
    """How much a coach will move a player, before motivation and age."""

    coach_id: str
    player_id: str
    base_impact: float
    chemistry_modifier: int
    scheme_bonus: int
    total_impact: float
    impact_areas: Tuple[str, ...] = field(default_factory=tuple)


def get_base_impact(development: int, role: CoachRole) -> float:
    """Base impact from the development attribute, halved for head coaches."""
    impact = BASE_IMPACT_FLOOR
    for threshold, value in BASE_IMPACT_TABLE:
        if development >= threshold:
            impact = value
            break
    if role is CoachRole.HEAD_COACH:
        return impact * HEAD_COACH_IMPACT_MULTIPLIER
    return float(impact)


def get_chemistry_impact_modifier(chemistry: float) -> int:
    for threshold, value in CHEMISTRY_IMPACT_TABLE:
        if chemistry >= threshold:
            return value
    return CHEMISTRY_IMPACT_FLOOR


def get_scheme_fit_impact(coach: Coach, fit_level: Optional[FitLevel]) -> int:
    if coach.scheme is None or fit_level is None:
        return 0
    return SCHEME_FIT_IMPACT[fit_level]


def calculate_development_impact(
    coach: Coach,
    player: Player,
    chemistry: float = 0,
    fit_level: Optional[FitLevel] = None,
) -> DevelopmentImpact:
    """Impact a coach will have on a player this offseason.

    Args:
        coach: The coach
        player: The player being developed
        chemistry: Current player-coach chemistry
        fit_level: Player's fit in the coach's scheme, if the coach has one

    Returns:
        DevelopmentImpact; all zeros when the coach's role does not reach
        the player's position
    """
    if not coach_affects_player(coach.role, player.position):
        return DevelopmentImpact(
            coach_id=coach.id,
            player_id=player.id,
            base_impact=0.0,
            chemistry_modifier=0,
            scheme_bonus=0,
            total_impact=0.0,
        )

    base = get_base_impact(coach.attributes.development, coach.role)
    chem_mod = get_chemistry_impact_modifier(chemistry)
    scheme_bonus = get_scheme_fit_impact(coach, fit_level)

    return DevelopmentImpact(
        coach_id=coach.id,
        player_id=player.id,
        base_impact=base,
        chemistry_modifier=chem_mod,
        scheme_bonus=scheme_bonus,
        total_impact=base + chem_mod + scheme_bonus,
        impact_areas=tuple(get_impact_areas(coach.role, player.position)),
    )


def get_age_development_modifier(age: int) -> float:
    """
    Development speed by age.

    Args:
        age: Player's age in years

    Returns:
        Multiplier from 1.3 (23 and under) down to 0.1 (34 and over)
    """
    for max_age, modifier in AGE_DEVELOPMENT_TABLE:
        if age <= max_age:
            return modifier
    return AGE_MODIFIER_FLOOR


def calculate_player_coach_chemistry(
    coach: Coach,
    player: Player,
    fit_level: Optional[FitLevel] = None,
    years_together: int = 0,
    team_success: bool = False,
) -> float:
    """Recompute a player-coach relationship at the end of a season.

    Blends the existing relationship with scheme fit, the coach's knack for
    development, tenure, and whether the team won.
    """
    chemistry = coach.player_chemistry.get(player.id, 0) * 0.3
    if coach.scheme is not None and fit_level is not None:
        chemistry += OFFSEASON_SCHEME_CHEMISTRY[fit_level]
    chemistry += (coach.attributes.development - 50) / 25
    chemistry += min(years_together * 0.5, 2)
    if team_success:
        chemistry += 1
    return round(max(-10.0, min(10.0, chemistry)), 1)


# =============================================================================
# Skill Changes
# =============================================================================

@dataclass(frozen=True)
class SkillChange:
    skill: str
    old_value: float
    new_value: float
    change: float


def _narrow(skill: SkillValue, new_value: float, change: float) -> SkillValue:
    """Move a skill and let scouts tighten the perceived band around it."""
    step = 2 if abs(change) > 2 else 1
    low = min(skill.perceived_min + step, math.floor(new_value))
    high = max(skill.perceived_max - step, math.ceil(new_value))
    return SkillValue(
        true_value=new_value,
        perceived_min=max(MIN_TRUE_VALUE, low),
        perceived_max=min(MAX_TRUE_VALUE, high),
        maturity_age=skill.maturity_age,
    )


def apply_skill_changes(player: Player, changes: Dict[str, int]) -> Tuple[Player, List[SkillChange]]:
    """Apply integer skill deltas, returning the new player and what moved.

    Skills the player does not have are ignored.
    """
    updated: Dict[str, SkillValue] = {}
    applied: List[SkillChange] = []

    for name, change in changes.items():
        skill = player.skills.get(name)
        if skill is None or change == 0:
            continue
        new_value = max(MIN_TRUE_VALUE, min(MAX_TRUE_VALUE, skill.true_value + change))
        updated[name] = _narrow(skill, new_value, change)
        applied.append(SkillChange(name, skill.true_value, new_value, new_value - skill.true_value))

    return player.with_skills(updated), applied


# =============================================================================
# Offseason Progression
# =============================================================================

@dataclass
class ProgressionResult:
    """Outcome of one player's offseason under one coach."""

    player_id: str
    updated_player: Player
    impact: DevelopmentImpact
    skill_changes: List[SkillChange] = field(default_factory=list)
    total_change: int = 0
    influence: InfluenceTier = InfluenceTier.MINIMAL
    description: str = ""


def get_influence_tier(total_change: float) -> InfluenceTier:
    if total_change >= 5:
        return InfluenceTier.SIGNIFICANT
    if total_change >= 2:
        return InfluenceTier.MODERATE
    if total_change >= 0:
        return InfluenceTier.MINIMAL
    return InfluenceTier.NEGATIVE


def _format_skill(name: str) -> str:
    return name.replace("_", " ")


def describe_progression(player: Player, total_change: int, skills: List[str]) -> str:
    """Plain-language summary. Mentions skills, never the numbers."""
    if not skills:
        return f"{player.full_name} maintained their current skill level"

    listed = ", ".join(_format_skill(s) for s in skills)
    if total_change >= 7:
        return f"{player.full_name} made exceptional strides in {listed}"
    if total_change >= 4:
        return f"{player.full_name} showed significant improvement in {listed}"
    if total_change >= 2:
        return f"{player.full_name} developed steadily in {listed}"
    if total_change >= 0:
        return f"{player.full_name} made modest gains in {listed}"
    if total_change >= -3:
        return f"{player.full_name} struggled to develop in {listed}"
    return f"{player.full_name} regressed in {listed} under current coaching"


def apply_offseason_progression(
    player: Player,
    coach: Coach,
    fit_level: Optional[FitLevel] = None,
    years_in_scheme: int = 0,
    years_together: int = 0,
    team_success: bool = False,
) -> ProgressionResult:
    """Run one player's offseason development under one coach.

    Args:
        player: Player to develop (not modified)
        coach: Coach doing the developing
        fit_level: Scheme fit; computed from the coach's scheme when omitted
        years_in_scheme: Seasons the player has spent in the coach's scheme
        years_together: Seasons the player and coach have worked together
        team_success: Whether the team had a winning season

    Returns:
        ProgressionResult holding the updated player copy
    """
    if fit_level is None and coach.scheme is not None:
        fit_level = calculate_scheme_fit(player, coach.scheme, years_in_scheme).fit_level

    chemistry = calculate_player_coach_chemistry(coach, player, fit_level, years_together, team_success)
    impact = calculate_development_impact(coach, player, clamp_chemistry(chemistry), fit_level)

    adjusted = round_half_up(
        impact.total_impact
        * get_motivation_modifier(coach.attributes.motivation)
        * get_age_development_modifier(player.age)
    )

    areas = [name for name in impact.impact_areas if name in player.skills]
    if not areas or adjusted == 0:
        return ProgressionResult(
            player_id=player.id,
            updated_player=player,
            impact=impact,
            influence=get_influence_tier(0),
            description=describe_progression(player, 0, []),
        )

    sign = 1 if adjusted > 0 else -1
    per_skill = sign * max(1, round_half_up(abs(adjusted) / len(areas)))
    updated_player, changes = apply_skill_changes(player, {name: per_skill for name in areas})

    # Reported change is the adjusted impact; the per-skill floor of 1 can move more
    result = ProgressionResult(
        player_id=player.id,
        updated_player=updated_player,
        impact=impact,
        skill_changes=changes,
        total_change=adjusted,
        influence=get_influence_tier(adjusted),
        description=describe_progression(player, adjusted, [c.skill for c in changes]),
    )
    logger.debug(f"Offseason progression {player.id} under {coach.id}: {adjusted:+d}")
    return result


@dataclass
class TeamProgressionResult:
    results: List[ProgressionResult] = field(default_factory=list)
    notable: List[ProgressionResult] = field(default_factory=list)


def process_team_progression(
    players: List[Player],
    coach: Coach,
    fit_levels: Optional[Dict[str, FitLevel]] = None,
    team_success: bool = False,
) -> TeamProgressionResult:
    """Run offseason development for a roster under one coach.

    Notable results are those whose total change reaches +/-3.
    """
    fit_levels = fit_levels or {}
    results = [
        apply_offseason_progression(
            player,
            coach,
            fit_level=fit_levels.get(player.id),
            team_success=team_success,
        )
        for player in players
    ]
    notable = [r for r in results if abs(r.total_change) >= NOTABLE_CHANGE]
    if notable:
        logger.info(f"{len(notable)} notable offseason changes under {coach.full_name}")
    return TeamProgressionResult(results=results, notable=notable)


# =============================================================================
# Boundary Projection
# =============================================================================

def _relationship_quality(chemistry_modifier: int) -> str:
    if chemistry_modifier >= 2:
        return "excellent"
    if chemistry_modifier >= 1:
        return "good"
    if chemistry_modifier >= 0:
        return "neutral"
    if chemistry_modifier >= -1:
        return "strained"
    return "poor"


def _impact_text(total_impact: float) -> Tuple[str, str]:
    if total_impact >= 7:
        return ("Elite development environment", "Expect major growth under this coach")
    if total_impact >= 4:
        return ("Strong positive influence", "Should develop well")
    if total_impact >= 2:
        return ("Helpful coaching relationship", "Steady growth expected")
    if total_impact >= 0:
        return ("Limited influence", "Little change expected")
    if total_impact >= -2:
        return ("Slightly hindering development", "May stall under current coaching")
    return ("Harmful to development", "Likely to regress under current coaching")


def get_development_impact_view(impact: DevelopmentImpact) -> DevelopmentImpactView:
    """Qualitative view of a coach's expected influence on a player."""
    description, outlook = _impact_text(impact.total_impact)
    return DevelopmentImpactView(
        relationship_quality=_relationship_quality(impact.chemistry_modifier),
        impact_description=description,
        development_outlook=outlook,
        focus_areas=[_format_skill(s) for s in impact.impact_areas],
    )


def project_progression(result: ProgressionResult) -> ProgressionSummary:
    return ProgressionSummary(
        player_id=result.player_id,
        influence=result.influence.value,
        description=result.description,
        changes=[SkillChangeSummary(skill=_format_skill(c.skill), improved=c.change > 0) for c in result.skill_changes],
    )
