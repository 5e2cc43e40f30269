"""Player model.

Players are owned by the roster layer; the coaching engines only read them
and hand back updated copies. Every skill carries a hidden true value and
the perceived band scouts and fans see.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Dict, Optional
from uuid import uuid4

from headset.core.enums import PlayerPersonalityType, Position
from headset.schemas.player import PlayerView, SkillView

MIN_SKILL = 1
MAX_SKILL = 100


@dataclass(frozen=True)
class SkillValue:
    """
    A single skill with its hidden true value and perceived range.

    The perceived band must always contain the true value; construction
    fails otherwise.
    """

    true_value: float
    perceived_min: int
    perceived_max: int
    maturity_age: int = 27

    def __post_init__(self):
        if not MIN_SKILL <= self.true_value <= MAX_SKILL:
            raise ValueError(f"Skill true value {self.true_value} outside {MIN_SKILL}-{MAX_SKILL}")
        if not MIN_SKILL <= self.perceived_min <= self.true_value <= self.perceived_max <= MAX_SKILL:
            raise ValueError(
                f"Perceived range [{self.perceived_min}, {self.perceived_max}] "
                f"does not contain true value {self.true_value}"
            )

    @property
    def range_width(self) -> int:
        return self.perceived_max - self.perceived_min

    def with_true_value(self, value: float) -> "SkillValue":
        """Return a copy at a new true value, widening the band if it no longer fits."""
        value = max(float(MIN_SKILL), min(float(MAX_SKILL), value))
        return replace(
            self,
            true_value=value,
            perceived_min=min(self.perceived_min, math.floor(value)),
            perceived_max=max(self.perceived_max, math.ceil(value)),
        )

    def to_dict(self) -> dict:
        return {
            "true_value": self.true_value,
            "perceived_min": self.perceived_min,
            "perceived_max": self.perceived_max,
            "maturity_age": self.maturity_age,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SkillValue":
        return cls(
            true_value=data["true_value"],
            perceived_min=data["perceived_min"],
            perceived_max=data["perceived_max"],
            maturity_age=data.get("maturity_age", 27),
        )


@dataclass
class Player:
    """
    Represents a football player as seen by the coaching engines.

    Engines never modify a player in place; they return a new Player
    built with dataclasses.replace.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    first_name: str = ""
    last_name: str = ""
    position: Position = Position.QB
    age: int = 22
    experience_years: int = 0

    # Disposition used for player-coach chemistry
    personality_type: Optional[PlayerPersonalityType] = None

    skills: Dict[str, SkillValue] = field(default_factory=dict)

    # Mid-season tracking
    breakout_meter: float = 0.0
    has_had_breakout: bool = False
    mid_season_dev_total: float = 0.0

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}"

    def get_skill(self, name: str) -> Optional[SkillValue]:
        return self.skills.get(name)

    def with_skills(self, updates: Dict[str, SkillValue]) -> "Player":
        """Return a copy with the given skills replaced."""
        skills = dict(self.skills)
        skills.update(updates)
        return replace(self, skills=skills)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position.value,
            "age": self.age,
            "experience_years": self.experience_years,
            "personality_type": self.personality_type.value if self.personality_type else None,
            "skills": {name: skill.to_dict() for name, skill in self.skills.items()},
            "breakout_meter": self.breakout_meter,
            "has_had_breakout": self.has_had_breakout,
            "mid_season_dev_total": self.mid_season_dev_total,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Deserialize from dictionary."""
        personality = data.get("personality_type")
        return cls(
            id=data["id"],
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            position=Position(data["position"]),
            age=data.get("age", 22),
            experience_years=data.get("experience_years", 0),
            personality_type=PlayerPersonalityType(personality) if personality else None,
            skills={
                name: SkillValue.from_dict(skill)
                for name, skill in data.get("skills", {}).items()
            },
            breakout_meter=data.get("breakout_meter", 0.0),
            has_had_breakout=data.get("has_had_breakout", False),
            mid_season_dev_total=data.get("mid_season_dev_total", 0.0),
        )

    def __str__(self) -> str:
        return f"{self.full_name} ({self.position.value})"


def validate_player(player: Player) -> bool:
    """Check range invariants on a player handed in by a generator."""
    if not player.id:
        return False
    if player.age < 18 or player.experience_years < 0:
        return False
    if player.breakout_meter < 0:
        return False
    for skill in player.skills.values():
        if not MIN_SKILL <= skill.perceived_min <= skill.true_value <= skill.perceived_max <= MAX_SKILL:
            return False
    return True


# =============================================================================
# Boundary Projection
# =============================================================================

def project_skill(name: str, skill: SkillValue) -> SkillView:
    """Project a skill to its boundary-safe view (perceived band only)."""
    return SkillView(name=name, perceived_min=skill.perceived_min, perceived_max=skill.perceived_max)


def project_player(player: Player) -> PlayerView:
    """Project a player to the view the presentation layer may see."""
    return PlayerView(
        id=player.id,
        name=player.full_name,
        position=player.position.value,
        age=player.age,
        skills=[project_skill(name, skill) for name, skill in sorted(player.skills.items())],
        has_had_breakout=player.has_had_breakout,
    )
