"""
Coach-Coach Relationships.

Chemistry between two members of a staff comes from three places:

- Coaching tree lineage (same tree, compatible trees, rival trees, or
  opposite risk philosophies)
- Personality compatibility, read from a symmetric matrix over personality
  types, plus an ego clash when both coaches carry big egos
- Years spent on the same staff

Also detects notable conflicts and synergies on a staff and suggests
personality types that would fit an existing group.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from headset.core.enums import CoachPersonalityType, RiskTolerance, TreeName
from headset.core.models.coach import MAX_CHEMISTRY, MIN_CHEMISTRY, Coach, CoachingTree, CoachPersonality

T = TreeName
CP = CoachPersonalityType


# =============================================================================
# Coaching Trees
# =============================================================================

@dataclass(frozen=True)
class TreeChemistryRange:
    minimum: float
    maximum: float

    @property
    def midpoint(self) -> float:
        return (self.minimum + self.maximum) / 2


class TreeRelationship(Enum):
    SAME_TREE_SAME_GEN = "same_tree_same_gen"
    SAME_TREE_ADJACENT_GEN = "same_tree_adjacent_gen"
    COMPATIBLE_TREES = "compatible_trees"
    CONFLICTING_TREES = "conflicting_trees"
    OPPOSING_PHILOSOPHY = "opposing_philosophy"
    NEUTRAL = "neutral"


DEFAULT_TREE_CHEMISTRY: Dict[TreeRelationship, TreeChemistryRange] = {
    TreeRelationship.SAME_TREE_SAME_GEN: TreeChemistryRange(3, 5),
    TreeRelationship.SAME_TREE_ADJACENT_GEN: TreeChemistryRange(2, 4),
    TreeRelationship.COMPATIBLE_TREES: TreeChemistryRange(1, 2),
    TreeRelationship.CONFLICTING_TREES: TreeChemistryRange(-3, -1),
    TreeRelationship.OPPOSING_PHILOSOPHY: TreeChemistryRange(-2, -1),
    TreeRelationship.NEUTRAL: TreeChemistryRange(0, 0),
}


def _symmetric(pairs: Iterable[Tuple[TreeName, TreeName]]) -> Dict[TreeName, FrozenSet[TreeName]]:
    table: Dict[TreeName, set] = {name: set() for name in TreeName}
    for a, b in pairs:
        table[a].add(b)
        table[b].add(a)
    return {name: frozenset(others) for name, others in table.items()}


COMPATIBLE_TREES: Dict[TreeName, FrozenSet[TreeName]] = _symmetric([
    (T.WALSH, T.HOLMGREN),
    (T.WALSH, T.REID),
    (T.WALSH, T.SHANAHAN),
    (T.WALSH, T.GRUDEN),
    (T.HOLMGREN, T.REID),
    (T.HOLMGREN, T.GRUDEN),
    (T.PARCELLS, T.BELICHICK),
    (T.PARCELLS, T.COUGHLIN),
    (T.PARCELLS, T.PAYTON),
    (T.BELICHICK, T.COUGHLIN),
    (T.DUNGY, T.REID),
])

CONFLICTING_TREES: Dict[TreeName, FrozenSet[TreeName]] = _symmetric([
    (T.WALSH, T.PARCELLS),
    (T.WALSH, T.BELICHICK),
    (T.BELICHICK, T.SHANAHAN),
    (T.BELICHICK, T.DUNGY),
    (T.PARCELLS, T.SHANAHAN),
    (T.COUGHLIN, T.GRUDEN),
])


def _opposing_philosophy(tree_a: CoachingTree, tree_b: CoachingTree) -> bool:
    risks = {tree_a.philosophy.risk_tolerance, tree_b.philosophy.risk_tolerance}
    return risks == {RiskTolerance.AGGRESSIVE, RiskTolerance.CONSERVATIVE}


def get_tree_relationship(tree_a: CoachingTree, tree_b: CoachingTree) -> TreeRelationship:
    """Classify two lineages, strongest relationship first."""
    if tree_a.tree_name == tree_b.tree_name:
        gap = abs(tree_a.generation - tree_b.generation)
        if gap == 0:
            return TreeRelationship.SAME_TREE_SAME_GEN
        if gap == 1:
            return TreeRelationship.SAME_TREE_ADJACENT_GEN
        # Distant relatives in the same tree still speak the same language
        return TreeRelationship.COMPATIBLE_TREES
    if tree_b.tree_name in COMPATIBLE_TREES[tree_a.tree_name]:
        return TreeRelationship.COMPATIBLE_TREES
    if tree_b.tree_name in CONFLICTING_TREES[tree_a.tree_name]:
        return TreeRelationship.CONFLICTING_TREES
    if _opposing_philosophy(tree_a, tree_b):
        return TreeRelationship.OPPOSING_PHILOSOPHY
    return TreeRelationship.NEUTRAL


def calculate_tree_chemistry(tree_a: CoachingTree, tree_b: CoachingTree) -> TreeChemistryRange:
    """Chemistry range implied by two coaches' lineages."""
    return DEFAULT_TREE_CHEMISTRY[get_tree_relationship(tree_a, tree_b)]


# =============================================================================
# Personality Compatibility
# =============================================================================

def _matrix(entries: Dict[Tuple[CoachPersonalityType, CoachPersonalityType], int]) -> Dict[
    CoachPersonalityType, Dict[CoachPersonalityType, int]
]:
    matrix: Dict[CoachPersonalityType, Dict[CoachPersonalityType, int]] = {p: {} for p in CP}
    for (a, b), score in entries.items():
        matrix[a][b] = score
        matrix[b][a] = score
    return matrix


PERSONALITY_COMPATIBILITY: Dict[CoachPersonalityType, Dict[CoachPersonalityType, int]] = _matrix({
    (CP.ANALYTICAL, CP.ANALYTICAL): 2,
    (CP.ANALYTICAL, CP.AGGRESSIVE): -2,
    (CP.ANALYTICAL, CP.CONSERVATIVE): 3,
    (CP.ANALYTICAL, CP.INNOVATIVE): 1,
    (CP.ANALYTICAL, CP.OLD_SCHOOL): 0,
    (CP.ANALYTICAL, CP.PLAYERS_COACH): 1,
    (CP.AGGRESSIVE, CP.AGGRESSIVE): -3,
    (CP.AGGRESSIVE, CP.CONSERVATIVE): -4,
    (CP.AGGRESSIVE, CP.INNOVATIVE): 2,
    (CP.AGGRESSIVE, CP.OLD_SCHOOL): -1,
    (CP.AGGRESSIVE, CP.PLAYERS_COACH): 2,
    (CP.CONSERVATIVE, CP.CONSERVATIVE): 2,
    (CP.CONSERVATIVE, CP.INNOVATIVE): -2,
    (CP.CONSERVATIVE, CP.OLD_SCHOOL): 3,
    (CP.CONSERVATIVE, CP.PLAYERS_COACH): 1,
    (CP.INNOVATIVE, CP.INNOVATIVE): 1,
    (CP.INNOVATIVE, CP.OLD_SCHOOL): -3,
    (CP.INNOVATIVE, CP.PLAYERS_COACH): 2,
    (CP.OLD_SCHOOL, CP.OLD_SCHOOL): 2,
    (CP.OLD_SCHOOL, CP.PLAYERS_COACH): 1,
    (CP.PLAYERS_COACH, CP.PLAYERS_COACH): 3,
})

EGO_CLASH_THRESHOLD = 80
EGO_CLASH_PENALTY = -3


def get_personality_compatibility(a: CoachPersonalityType, b: CoachPersonalityType) -> int:
    return PERSONALITY_COMPATIBILITY[a][b]


def is_personality_conflict(a: CoachPersonalityType, b: CoachPersonalityType) -> bool:
    return get_personality_compatibility(a, b) < -1


def is_personality_synergy(a: CoachPersonalityType, b: CoachPersonalityType) -> bool:
    return get_personality_compatibility(a, b) > 1


def is_ego_clash(a: CoachPersonality, b: CoachPersonality) -> bool:
    return a.ego > EGO_CLASH_THRESHOLD and b.ego > EGO_CLASH_THRESHOLD


def _notable(a: CoachPersonalityType, b: CoachPersonalityType) -> int:
    """Compatibility that matters: only clear conflicts and synergies count."""
    if is_personality_conflict(a, b) or is_personality_synergy(a, b):
        return get_personality_compatibility(a, b)
    return 0


def calculate_personality_chemistry(a: CoachPersonality, b: CoachPersonality) -> int:
    """Personality contribution to coach-coach chemistry, in [-10, 10]."""
    total = _notable(a.primary, b.primary)
    if a.secondary is not None:
        total += _notable(a.secondary, b.primary)
    if b.secondary is not None:
        total += _notable(a.primary, b.secondary)
    if is_ego_clash(a, b):
        total += EGO_CLASH_PENALTY
    return int(max(MIN_CHEMISTRY, min(MAX_CHEMISTRY, total)))


# =============================================================================
# Pair Chemistry
# =============================================================================

TREE_WEIGHT = 0.4
PERSONALITY_WEIGHT = 0.4
TENURE_WEIGHT = 0.2
MAX_TENURE_BONUS = 3.0


def calculate_tenure_bonus(years_together: int) -> float:
    return min(years_together * 0.5, MAX_TENURE_BONUS)


def calculate_coach_chemistry(coach_a: Coach, coach_b: Coach, years_together: int = 0) -> float:
    """Chemistry between two staff members, in [-10, 10]."""
    tree = calculate_tree_chemistry(coach_a.tree, coach_b.tree).midpoint
    personality = calculate_personality_chemistry(coach_a.personality, coach_b.personality)
    tenure = calculate_tenure_bonus(years_together)
    value = tree * TREE_WEIGHT + personality * PERSONALITY_WEIGHT + tenure * TENURE_WEIGHT
    return max(float(MIN_CHEMISTRY), min(float(MAX_CHEMISTRY), value))


# =============================================================================
# Conflicts and Synergies
# =============================================================================

class ConflictType(Enum):
    PHILOSOPHY_CLASH = "philosophy_clash"
    EGO_CLASH = "ego_clash"
    STYLE_MISMATCH = "style_mismatch"
    COMMUNICATION_BREAKDOWN = "communication_breakdown"
    AUTHORITY_CONFLICT = "authority_conflict"


class SynergyType(Enum):
    SHARED_VISION = "shared_vision"
    COMPLEMENTARY_SKILLS = "complementary_skills"
    MENTORSHIP = "mentorship"
    TRUST_BOND = "trust_bond"
    COMMUNICATION_EXCELLENCE = "communication_excellence"


CONFLICT_TEXT: Dict[ConflictType, str] = {
    ConflictType.PHILOSOPHY_CLASH: "fundamentally disagree about how to play the game",
    ConflictType.EGO_CLASH: "both want to be the loudest voice in the room",
    ConflictType.STYLE_MISMATCH: "approach the job very differently",
    ConflictType.COMMUNICATION_BREAKDOWN: "struggle to get on the same page",
    ConflictType.AUTHORITY_CONFLICT: "butt heads over who makes the calls",
}

SYNERGY_TEXT: Dict[SynergyType, str] = {
    SynergyType.SHARED_VISION: "see the game the same way",
    SynergyType.COMPLEMENTARY_SKILLS: "cover each other's blind spots",
    SynergyType.MENTORSHIP: "have a strong teaching relationship",
    SynergyType.TRUST_BOND: "trust each other's judgment",
    SynergyType.COMMUNICATION_EXCELLENCE: "communicate exceptionally well",
}

SEVERE_CONFLICT = 4


@dataclass(frozen=True)
class PersonalityInteraction:
    """Notable conflict or synergy between two coaches.

    Severity (for conflicts) and strength (for synergies) share the 1-5
    ``intensity`` scale.
    """

    coach_ids: Tuple[str, str]
    is_conflict: bool
    kind: str  # ConflictType or SynergyType value
    intensity: int
    description: str

    @property
    def severity_label(self) -> str:
        if self.intensity >= 4:
            return "major" if self.is_conflict else "strong"
        if self.intensity >= 2:
            return "moderate"
        return "minor" if self.is_conflict else "mild"


def calculate_interaction_score(a: Coach, b: Coach) -> float:
    """Primary compatibility, plus 0.3 of the secondaries' when both have one.

    Ego does not enter the score; it only colors the kind of conflict.
    """
    pa, pb = a.personality, b.personality
    score = float(get_personality_compatibility(pa.primary, pb.primary))
    if pa.secondary is not None and pb.secondary is not None:
        score += 0.3 * get_personality_compatibility(pa.secondary, pb.secondary)
    return score


def _conflict_type(a: Coach, b: Coach) -> ConflictType:
    primaries = frozenset({a.personality.primary, b.personality.primary})
    if primaries == {CP.AGGRESSIVE}:
        return ConflictType.EGO_CLASH
    if primaries == {CP.INNOVATIVE, CP.OLD_SCHOOL}:
        return ConflictType.PHILOSOPHY_CLASH
    if primaries == {CP.AGGRESSIVE, CP.CONSERVATIVE}:
        return ConflictType.STYLE_MISMATCH
    if is_ego_clash(a.personality, b.personality):
        return ConflictType.EGO_CLASH
    return ConflictType.STYLE_MISMATCH


def _synergy_type(a: Coach, b: Coach) -> SynergyType:
    if a.personality.primary == b.personality.primary:
        return SynergyType.SHARED_VISION
    primaries = {a.personality.primary, b.personality.primary}
    if CP.PLAYERS_COACH in primaries:
        return SynergyType.MENTORSHIP
    if CP.ANALYTICAL in primaries:
        return SynergyType.COMPLEMENTARY_SKILLS
    if a.personality.adaptability > 60 and b.personality.adaptability > 60:
        return SynergyType.TRUST_BOND
    return SynergyType.COMMUNICATION_EXCELLENCE


def calculate_personality_interaction(a: Coach, b: Coach) -> Optional[PersonalityInteraction]:
    """Classify a pairing as a conflict, a synergy, or neither (None)."""
    score = calculate_interaction_score(a, b)
    if -2 < score < 2:
        return None

    intensity = min(5, math.ceil(abs(score)))
    names = f"{a.full_name} and {b.full_name}"
    if score <= -2:
        kind = _conflict_type(a, b)
        return PersonalityInteraction(
            coach_ids=(a.id, b.id),
            is_conflict=True,
            kind=kind.value,
            intensity=intensity,
            description=f"{names} {CONFLICT_TEXT[kind]}",
        )

    kind = _synergy_type(a, b)
    return PersonalityInteraction(
        coach_ids=(a.id, b.id),
        is_conflict=False,
        kind=kind.value,
        intensity=intensity,
        description=f"{names} {SYNERGY_TEXT[kind]}",
    )


def _pairs(staff: List[Coach]) -> Iterable[Tuple[Coach, Coach]]:
    for i, a in enumerate(staff):
        for b in staff[i + 1:]:
            yield a, b


def detect_staff_conflicts(staff: List[Coach]) -> List[PersonalityInteraction]:
    found = (calculate_personality_interaction(a, b) for a, b in _pairs(staff))
    return [i for i in found if i is not None and i.is_conflict]


def detect_staff_synergies(staff: List[Coach]) -> List[PersonalityInteraction]:
    found = (calculate_personality_interaction(a, b) for a, b in _pairs(staff))
    return [i for i in found if i is not None and not i.is_conflict]


FOUNDATION_PERSONALITIES = [CP.ANALYTICAL, CP.PLAYERS_COACH]


def suggest_compatible_personalities(existing: List[CoachPersonalityType]) -> List[CoachPersonalityType]:
    """Personality types that average at least +1 compatibility with the staff.

    An empty staff, or one nobody fits, gets the foundation types.
    """
    if not existing:
        return list(FOUNDATION_PERSONALITIES)
    suggestions = [
        candidate for candidate in CP
        if sum(get_personality_compatibility(candidate, other) for other in existing) / len(existing) >= 1
    ]
    return suggestions or list(FOUNDATION_PERSONALITIES)


def would_create_conflict(candidate: Coach, staff: List[Coach]) -> bool:
    """Whether hiring the candidate would add a conflict to the staff."""
    for member in staff:
        interaction = calculate_personality_interaction(candidate, member)
        if interaction is not None and interaction.is_conflict:
            return True
    return False
