"""Coach model.

Coaches carry hidden ability attributes, a personality with hidden ego and
adaptability, a coaching-tree lineage, and relationship maps to players and
other staff. Those hidden numbers are read by the coaching engines and are
never projected to the presentation layer directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import uuid4

from headset.core.enums import (
    CoachPersonalityType,
    CoachRole,
    DefensiveLean,
    OffensiveLean,
    RiskTolerance,
    Scheme,
    TreeName,
)
from headset.core.models.tendencies import (
    CoordinatorTendencies,
    DefensiveTendencies,
    OffensiveTendencies,
    tendencies_from_dict,
    validate_tendency_profile,
)

MIN_ATTRIBUTE = 1
MAX_ATTRIBUTE = 100
MIN_CHEMISTRY = -10
MAX_CHEMISTRY = 10


# =============================================================================
# Components
# =============================================================================

@dataclass(frozen=True)
class TreePhilosophy:
    """Leanings inherited from a coaching tree."""
    offensive_tendency: OffensiveLean = OffensiveLean.BALANCED
    defensive_tendency: DefensiveLean = DefensiveLean.BALANCED
    risk_tolerance: RiskTolerance = RiskTolerance.BALANCED


@dataclass(frozen=True)
class CoachingTree:
    """Where a coach learned the game."""
    tree_name: TreeName = TreeName.WALSH
    generation: int = 2  # 1-4, 1 = the tree's founder
    mentor_id: Optional[str] = None
    philosophy: TreePhilosophy = field(default_factory=TreePhilosophy)

    def to_dict(self) -> dict:
        return {
            "tree_name": self.tree_name.value,
            "generation": self.generation,
            "mentor_id": self.mentor_id,
            "offensive_tendency": self.philosophy.offensive_tendency.value,
            "defensive_tendency": self.philosophy.defensive_tendency.value,
            "risk_tolerance": self.philosophy.risk_tolerance.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CoachingTree":
        return cls(
            tree_name=TreeName(data["tree_name"]),
            generation=data.get("generation", 2),
            mentor_id=data.get("mentor_id"),
            philosophy=TreePhilosophy(
                offensive_tendency=OffensiveLean(data.get("offensive_tendency", "balanced")),
                defensive_tendency=DefensiveLean(data.get("defensive_tendency", "balanced")),
                risk_tolerance=RiskTolerance(data.get("risk_tolerance", "balanced")),
            ),
        )


@dataclass(frozen=True)
class CoachPersonality:
    """Temperament of a coach. Ego and adaptability are hidden (1-100)."""
    primary: CoachPersonalityType = CoachPersonalityType.ANALYTICAL
    secondary: Optional[CoachPersonalityType] = None
    ego: int = 50
    adaptability: int = 50

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.value,
            "secondary": self.secondary.value if self.secondary else None,
            "ego": self.ego,
            "adaptability": self.adaptability,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CoachPersonality":
        secondary = data.get("secondary")
        return cls(
            primary=CoachPersonalityType(data["primary"]),
            secondary=CoachPersonalityType(secondary) if secondary else None,
            ego=data.get("ego", 50),
            adaptability=data.get("adaptability", 50),
        )


@dataclass(frozen=True)
class CoachAttributes:
    """Six hidden ability scalars plus the visible career facts."""
    development: int = 50
    game_day_iq: int = 50
    scheme_teaching: int = 50
    player_evaluation: int = 50
    talent_id: int = 50
    motivation: int = 50

    # Visible
    reputation: int = 50
    years_experience: int = 0
    age: int = 45

    HIDDEN = (
        "development",
        "game_day_iq",
        "scheme_teaching",
        "player_evaluation",
        "talent_id",
        "motivation",
    )

    def to_dict(self) -> dict:
        data = {name: getattr(self, name) for name in self.HIDDEN}
        data.update(reputation=self.reputation, years_experience=self.years_experience, age=self.age)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CoachAttributes":
        return cls(**{k: v for k, v in data.items() if k in cls.HIDDEN + ("reputation", "years_experience", "age")})


@dataclass(frozen=True)
class CoachContract:
    years_total: int = 3
    years_remaining: int = 3
    salary: int = 0  # Annual, in thousands
    is_guaranteed: bool = False


@dataclass(frozen=True)
class CareerHistoryEntry:
    """One stint at one team."""
    team_id: str
    role: CoachRole
    year_start: int
    year_end: Optional[int] = None
    wins: int = 0
    losses: int = 0
    playoff_appearances: int = 0
    championships: int = 0


# =============================================================================
# Coach
# =============================================================================

@dataclass
class Coach:
    """
    A member of a coaching staff.

    Relationship maps hold signed chemistry values in [-10, 10], keyed by
    player id or coach id.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    first_name: str = ""
    last_name: str = ""
    role: CoachRole = CoachRole.HEAD_COACH
    team_id: Optional[str] = None
    scheme: Optional[Scheme] = None
    tree: CoachingTree = field(default_factory=CoachingTree)
    personality: CoachPersonality = field(default_factory=CoachPersonality)
    attributes: CoachAttributes = field(default_factory=CoachAttributes)
    tendencies: Optional[CoordinatorTendencies] = None
    contract: Optional[CoachContract] = None
    career_history: List[CareerHistoryEntry] = field(default_factory=list)
    player_chemistry: Dict[str, int] = field(default_factory=dict)
    staff_chemistry: Dict[str, int] = field(default_factory=dict)
    is_available: bool = False
    is_retired: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def offensive_tendencies(self) -> Optional[OffensiveTendencies]:
        return self.tendencies if isinstance(self.tendencies, OffensiveTendencies) else None

    @property
    def defensive_tendencies(self) -> Optional[DefensiveTendencies]:
        return self.tendencies if isinstance(self.tendencies, DefensiveTendencies) else None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "team_id": self.team_id,
            "scheme": self.scheme.value if self.scheme else None,
            "tree": self.tree.to_dict(),
            "personality": self.personality.to_dict(),
            "attributes": self.attributes.to_dict(),
            "tendencies": self.tendencies.to_dict() if self.tendencies else None,
            "contract": vars(self.contract).copy() if self.contract else None,
            "career_history": [
                {**vars(entry), "role": entry.role.value} for entry in self.career_history
            ],
            "player_chemistry": dict(self.player_chemistry),
            "staff_chemistry": dict(self.staff_chemistry),
            "is_available": self.is_available,
            "is_retired": self.is_retired,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Coach":
        """Deserialize from dictionary."""
        scheme = data.get("scheme")
        tendencies = data.get("tendencies")
        contract = data.get("contract")
        return cls(
            id=data["id"],
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            role=CoachRole(data["role"]),
            team_id=data.get("team_id"),
            scheme=Scheme(scheme) if scheme else None,
            tree=CoachingTree.from_dict(data["tree"]),
            personality=CoachPersonality.from_dict(data["personality"]),
            attributes=CoachAttributes.from_dict(data.get("attributes", {})),
            tendencies=tendencies_from_dict(tendencies) if tendencies else None,
            contract=CoachContract(**contract) if contract else None,
            career_history=[
                CareerHistoryEntry(**{**entry, "role": CoachRole(entry["role"])})
                for entry in data.get("career_history", [])
            ],
            player_chemistry=dict(data.get("player_chemistry", {})),
            staff_chemistry=dict(data.get("staff_chemistry", {})),
            is_available=data.get("is_available", False),
            is_retired=data.get("is_retired", False),
        )

    def __str__(self) -> str:
        return f"{self.full_name} ({self.role.value})"


# =============================================================================
# Validation
# =============================================================================

OFFENSIVE_ROLES = frozenset({
    CoachRole.OFFENSIVE_COORDINATOR,
    CoachRole.QB_COACH,
    CoachRole.RB_COACH,
    CoachRole.WR_COACH,
    CoachRole.TE_COACH,
    CoachRole.OL_COACH,
})

DEFENSIVE_ROLES = frozenset({
    CoachRole.DEFENSIVE_COORDINATOR,
    CoachRole.DL_COACH,
    CoachRole.LB_COACH,
    CoachRole.DB_COACH,
})


def validate_coach_attributes(attributes: CoachAttributes) -> bool:
    for name in CoachAttributes.HIDDEN:
        if not MIN_ATTRIBUTE <= getattr(attributes, name) <= MAX_ATTRIBUTE:
            return False
    if not MIN_ATTRIBUTE <= attributes.reputation <= MAX_ATTRIBUTE:
        return False
    return attributes.years_experience >= 0 and attributes.age > 0


def validate_personality(personality: CoachPersonality) -> bool:
    if not isinstance(personality.primary, CoachPersonalityType):
        return False
    if personality.secondary is not None and not isinstance(personality.secondary, CoachPersonalityType):
        return False
    return (
        MIN_ATTRIBUTE <= personality.ego <= MAX_ATTRIBUTE
        and MIN_ATTRIBUTE <= personality.adaptability <= MAX_ATTRIBUTE
    )


def validate_coaching_tree(tree: CoachingTree) -> bool:
    if not isinstance(tree.tree_name, TreeName):
        return False
    if not 1 <= tree.generation <= 4:
        return False
    return isinstance(tree.philosophy.risk_tolerance, RiskTolerance)


def validate_coach_tendencies(coach: Coach) -> bool:
    """Tendencies, if present, must match the side of the ball the role coaches."""
    if coach.tendencies is None:
        return True
    if not validate_tendency_profile(coach.tendencies):
        return False
    if coach.role in OFFENSIVE_ROLES:
        return isinstance(coach.tendencies, OffensiveTendencies)
    if coach.role in DEFENSIVE_ROLES:
        return isinstance(coach.tendencies, DefensiveTendencies)
    if coach.role is CoachRole.HEAD_COACH:
        return True
    # Special teams staff do not call plays
    return False


def validate_coach(coach: Coach) -> bool:
    """Check every range invariant a generator is expected to honor."""
    if not coach.id or not coach.first_name or not coach.last_name:
        return False
    if not validate_coach_attributes(coach.attributes):
        return False
    if not validate_personality(coach.personality):
        return False
    if not validate_coaching_tree(coach.tree):
        return False
    for value in list(coach.player_chemistry.values()) + list(coach.staff_chemistry.values()):
        if not MIN_CHEMISTRY <= value <= MAX_CHEMISTRY:
            return False
    return validate_coach_tendencies(coach)


def career_winning_percentage(coach: Coach) -> float:
    """Winning percentage across every stint in the coach's career."""
    wins = sum(entry.wins for entry in coach.career_history)
    losses = sum(entry.losses for entry in coach.career_history)
    if wins + losses == 0:
        return 0.0
    return wins / (wins + losses)
