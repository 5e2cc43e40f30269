"""
Staff Chemistry Aggregator.

Rolls pairwise coach-coach chemistry up into a single staff harmony level,
picks out the strongest and weakest relationships, and derives the small
development, game-day, and morale adjustments a functional (or
dysfunctional) staff produces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from headset.core.coaching.relationships import (
    SEVERE_CONFLICT,
    calculate_coach_chemistry,
    detect_staff_conflicts,
)
from headset.core.enums import ChemistryLevel
from headset.core.models.coach import MAX_CHEMISTRY, MIN_CHEMISTRY, Coach
from headset.schemas.staff import NotableRelationship, StaffChemistryView

logger = logging.getLogger(__name__)

# Years two coaches have spent on the same staff, keyed by the pair of ids
YearsTogether = Dict[FrozenSet[str], int]

NOTABLE_THRESHOLD = 3

HARMONY_TEXT: Dict[ChemistryLevel, str] = {
    ChemistryLevel.EXCELLENT: "The staff is unified and pulling in the same direction",
    ChemistryLevel.GOOD: "The staff works well together",
    ChemistryLevel.NEUTRAL: "The staff maintains a professional working relationship",
    ChemistryLevel.STRAINED: "Friction on the staff is starting to show",
    ChemistryLevel.TOXIC: "The staff is dysfunctional and it is affecting the team",
}


def pair_key(coach_a: Coach, coach_b: Coach) -> FrozenSet[str]:
    return frozenset({coach_a.id, coach_b.id})


@dataclass(frozen=True)
class PairChemistry:
    coach_a: Coach
    coach_b: Coach
    chemistry: float


@dataclass
class StaffChemistry:
    """Engine-side staff chemistry. Numbers stay here."""

    overall: float = 0.0
    harmony: ChemistryLevel = ChemistryLevel.NEUTRAL
    pairs: List[PairChemistry] = field(default_factory=list)
    strongest: Optional[PairChemistry] = None
    weakest: Optional[PairChemistry] = None


@dataclass(frozen=True)
class StaffImpact:
    development_modifier: float = 0.0  # +/-0.10
    game_day_modifier: float = 0.0  # +/-0.05
    morale_modifier: float = 0.0  # +/-10 points


def get_staff_harmony(overall: float) -> ChemistryLevel:
    if overall >= 5:
        return ChemistryLevel.EXCELLENT
    if overall >= 2:
        return ChemistryLevel.GOOD
    if overall >= -2:
        return ChemistryLevel.NEUTRAL
    if overall >= -5:
        return ChemistryLevel.STRAINED
    return ChemistryLevel.TOXIC


def _pairs(staff: List[Coach]) -> List[Tuple[Coach, Coach]]:
    return [(a, b) for i, a in enumerate(staff) for b in staff[i + 1:]]


def calculate_staff_chemistry(
    staff: List[Coach],
    years_together: Optional[YearsTogether] = None,
) -> StaffChemistry:
    """Average chemistry across every pair of coaches on a staff.

    Args:
        staff: Coaches on the staff
        years_together: Seasons each pair has worked together

    Returns:
        StaffChemistry; neutral with no pairs when fewer than two coaches
    """
    years_together = years_together or {}
    pairs = [
        PairChemistry(a, b, calculate_coach_chemistry(a, b, years_together.get(pair_key(a, b), 0)))
        for a, b in _pairs(staff)
    ]
    if not pairs:
        return StaffChemistry()

    overall = sum(p.chemistry for p in pairs) / len(pairs)
    overall = max(float(MIN_CHEMISTRY), min(float(MAX_CHEMISTRY), overall))

    best = max(pairs, key=lambda p: p.chemistry)
    worst = min(pairs, key=lambda p: p.chemistry)

    result = StaffChemistry(
        overall=overall,
        harmony=get_staff_harmony(overall),
        pairs=pairs,
        strongest=best if best.chemistry >= NOTABLE_THRESHOLD else None,
        weakest=worst if worst.chemistry <= -NOTABLE_THRESHOLD else None,
    )
    logger.debug(f"Staff chemistry over {len(pairs)} pairs: {overall:.2f} ({result.harmony.value})")
    return result


def calculate_staff_impact(
    staff: List[Coach],
    years_together: Optional[YearsTogether] = None,
) -> StaffImpact:
    """Bounded adjustments a staff's chemistry applies to the team."""
    chemistry = calculate_staff_chemistry(staff, years_together)
    if not chemistry.pairs:
        return StaffImpact()

    severe = sum(1 for c in detect_staff_conflicts(staff) if c.intensity >= SEVERE_CONFLICT)
    overall = chemistry.overall

    return StaffImpact(
        development_modifier=max(-0.1, min(0.1, overall * 0.005 - 0.02 * severe)),
        game_day_modifier=max(-0.05, min(0.05, overall * 0.003 - 0.01 * severe)),
        morale_modifier=max(-10.0, min(10.0, overall * 0.5 - 2 * severe)),
    )


def advance_staff_year(years_together: Optional[YearsTogether], staff: List[Coach]) -> YearsTogether:
    """Credit another season to every pair still on the staff."""
    updated = dict(years_together or {})
    for a, b in _pairs(staff):
        key = pair_key(a, b)
        updated[key] = updated.get(key, 0) + 1
    return updated


# =============================================================================
# Boundary Projection
# =============================================================================

def get_staff_chemistry_view(chemistry: StaffChemistry) -> StaffChemistryView:
    """Harmony level and standout relationships, named by coach only."""
    strongest = None
    if chemistry.strongest is not None:
        a, b = chemistry.strongest.coach_a, chemistry.strongest.coach_b
        strongest = NotableRelationship(
            coach_ids=[a.id, b.id],
            description=f"{a.full_name} and {b.full_name} work well together",
            positive=True,
        )
    weakest = None
    if chemistry.weakest is not None:
        a, b = chemistry.weakest.coach_a, chemistry.weakest.coach_b
        weakest = NotableRelationship(
            coach_ids=[a.id, b.id],
            description=f"Tension between {a.full_name} and {b.full_name}",
            positive=False,
        )
    return StaffChemistryView(
        harmony=chemistry.harmony.value,
        description=HARMONY_TEXT[chemistry.harmony],
        strongest=strongest,
        weakest=weakest,
    )
