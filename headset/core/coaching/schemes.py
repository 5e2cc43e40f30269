"""
Scheme Definitions.

Positional requirements for every offensive and defensive scheme. Each
requirement lists the skills a position needs, how much the scheme leans on
each one, and the minimum true value that counts as meeting it. The
position weight (0-1) says how much that position's fit matters to the
scheme as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from headset.core.enums import Position, Scheme, SkillImportance

CRIT = SkillImportance.CRITICAL
IMP = SkillImportance.IMPORTANT
BEN = SkillImportance.BENEFICIAL


@dataclass(frozen=True)
class SkillRequirement:
    skill: str
    importance: SkillImportance
    minimum: int


@dataclass(frozen=True)
class PositionRequirement:
    position: Position
    skills: Tuple[SkillRequirement, ...]
    weight: float


@dataclass(frozen=True)
class SchemeDefinition:
    scheme: Scheme
    display_name: str
    requirements: Tuple[PositionRequirement, ...]

    def requirement_for(self, position: Position) -> Optional[PositionRequirement]:
        for requirement in self.requirements:
            if requirement.position == position:
                return requirement
        return None


def _req(position: Position, weight: float, *skills: Tuple[str, SkillImportance, int]) -> PositionRequirement:
    return PositionRequirement(
        position=position,
        skills=tuple(SkillRequirement(name, importance, minimum) for name, importance, minimum in skills),
        weight=weight,
    )


# =============================================================================
# Offensive Schemes
# =============================================================================

WEST_COAST = SchemeDefinition(Scheme.WEST_COAST, "West Coast Offense", (
    _req(Position.QB, 0.3, ("accuracy", CRIT, 75), ("decision_making", CRIT, 70), ("presnap", IMP, 65)),
    _req(Position.WR, 0.25, ("route_running", CRIT, 75), ("yac", CRIT, 70), ("catching", IMP, 70)),
    _req(Position.RB, 0.15, ("catching", IMP, 65), ("pass_protection", BEN, 55)),
    _req(Position.TE, 0.15, ("route_running", IMP, 65), ("catching", IMP, 65)),
))

AIR_RAID = SchemeDefinition(Scheme.AIR_RAID, "Air Raid Offense", (
    _req(Position.QB, 0.35, ("arm_strength", CRIT, 75), ("accuracy", CRIT, 70), ("decision_making", IMP, 65)),
    _req(Position.WR, 0.35, ("separation", CRIT, 75), ("catching", CRIT, 70), ("route_running", IMP, 65)),
    _req(Position.LT, 0.15, ("pass_block", CRIT, 75), ("footwork", IMP, 65)),
))

SPREAD_OPTION = SchemeDefinition(Scheme.SPREAD_OPTION, "Spread Option Offense", (
    _req(Position.QB, 0.35, ("mobility", CRIT, 80), ("decision_making", CRIT, 70), ("accuracy", IMP, 65)),
    _req(Position.RB, 0.25, ("vision", CRIT, 75), ("cut_ability", IMP, 70), ("breakaway", IMP, 65)),
    _req(Position.WR, 0.15, ("blocking", IMP, 60), ("separation", BEN, 60)),
))

_GUARD_POWER = (("run_block", CRIT, 80), ("power", CRIT, 75), ("pull_ability", IMP, 70))

POWER_RUN = SchemeDefinition(Scheme.POWER_RUN, "Power Run Offense", (
    _req(Position.RB, 0.25, ("power", CRIT, 80), ("vision", IMP, 70), ("fumble_protection", IMP, 65)),
    _req(Position.LG, 0.2, *_GUARD_POWER),
    _req(Position.RG, 0.2, *_GUARD_POWER),
    _req(Position.TE, 0.2, ("blocking", CRIT, 75), ("sealing", IMP, 70)),
))

_TACKLE_ZONE = (("footwork", CRIT, 75), ("run_block", IMP, 70))

ZONE_RUN = SchemeDefinition(Scheme.ZONE_RUN, "Zone Run Offense", (
    _req(Position.RB, 0.3, ("vision", CRIT, 80), ("cut_ability", CRIT, 80), ("breakaway", IMP, 70)),
    _req(Position.C, 0.2, ("run_block", CRIT, 75), ("awareness", CRIT, 75), ("footwork", IMP, 70)),
    _req(Position.LT, 0.15, *_TACKLE_ZONE),
    _req(Position.RT, 0.15, *_TACKLE_ZONE),
))

PLAY_ACTION = SchemeDefinition(Scheme.PLAY_ACTION, "Play Action Heavy Offense", (
    _req(Position.QB, 0.3, ("play_action", CRIT, 80), ("arm_strength", CRIT, 75), ("accuracy", IMP, 70)),
    _req(Position.WR, 0.25, ("tracking", CRIT, 75), ("contested", IMP, 70), ("separation", IMP, 65)),
    _req(Position.RB, 0.2, ("vision", IMP, 70), ("power", IMP, 65)),
    _req(Position.TE, 0.15, ("blocking", IMP, 70), ("catching", BEN, 60)),
))


# =============================================================================
# Defensive Schemes
# =============================================================================

FOUR_THREE_UNDER = SchemeDefinition(Scheme.FOUR_THREE_UNDER, "4-3 Under Defense", (
    _req(Position.DE, 0.25, ("pass_rush", CRIT, 75), ("pursuit", IMP, 70), ("run_defense", IMP, 65)),
    _req(Position.DT, 0.2, ("run_defense", CRIT, 75), ("power", IMP, 70)),
    _req(Position.ILB, 0.25, ("tackling", CRIT, 75), ("coverage", IMP, 70), ("awareness", IMP, 70)),
    _req(Position.OLB, 0.15, ("blitzing", IMP, 70), ("shed_blocks", IMP, 65)),
))

THREE_FOUR = SchemeDefinition(Scheme.THREE_FOUR, "3-4 Defense", (
    _req(Position.DT, 0.2, ("run_defense", CRIT, 80), ("power", CRIT, 80), ("stamina", IMP, 70)),
    _req(Position.DE, 0.15, ("run_defense", CRIT, 75), ("pass_rush", IMP, 65)),
    _req(Position.OLB, 0.3, ("blitzing", CRIT, 80), ("coverage", IMP, 65), ("pursuit", IMP, 70)),
    _req(Position.ILB, 0.2, ("tackling", CRIT, 75), ("zone_coverage", IMP, 70)),
))

COVER_THREE = SchemeDefinition(Scheme.COVER_THREE, "Cover 3 Defense", (
    _req(Position.FS, 0.25, ("zone_coverage", CRIT, 80), ("awareness", CRIT, 75), ("closing", IMP, 70)),
    _req(Position.CB, 0.25, ("zone_coverage", CRIT, 75), ("tackling", IMP, 65), ("awareness", IMP, 70)),
    _req(Position.SS, 0.2, ("tackling", CRIT, 75), ("zone_coverage", IMP, 65)),
    _req(Position.ILB, 0.15, ("zone_coverage", IMP, 70), ("awareness", IMP, 70)),
))

_SAFETY_TWO_DEEP = (("zone_coverage", CRIT, 75), ("closing", CRIT, 75), ("ball_skills", IMP, 70))

COVER_TWO = SchemeDefinition(Scheme.COVER_TWO, "Cover 2 Defense", (
    _req(Position.SS, 0.25, *_SAFETY_TWO_DEEP),
    _req(Position.FS, 0.25, *_SAFETY_TWO_DEEP),
    _req(Position.CB, 0.2, ("tackling", CRIT, 75), ("zone_coverage", IMP, 70), ("closing", IMP, 65)),
    _req(Position.ILB, 0.15, ("zone_coverage", IMP, 70), ("tackling", IMP, 70)),
))

MAN_PRESS = SchemeDefinition(Scheme.MAN_PRESS, "Man Press Defense", (
    _req(Position.CB, 0.35, ("man_coverage", CRIT, 85), ("press", CRIT, 80), ("closing", IMP, 75)),
    _req(Position.SS, 0.2, ("man_coverage", IMP, 70), ("tackling", IMP, 75)),
    _req(Position.FS, 0.2, ("closing", CRIT, 80), ("awareness", IMP, 75)),
    _req(Position.DE, 0.15, ("pass_rush", CRIT, 80), ("finesse", IMP, 70)),
))

BLITZ_HEAVY = SchemeDefinition(Scheme.BLITZ_HEAVY, "Blitz Heavy Defense", (
    _req(Position.OLB, 0.25, ("blitzing", CRIT, 85), ("pursuit", IMP, 75), ("tackling", IMP, 70)),
    _req(Position.ILB, 0.2, ("blitzing", CRIT, 75), ("tackling", IMP, 75), ("awareness", IMP, 70)),
    _req(Position.SS, 0.2, ("tackling", CRIT, 80), ("closing", IMP, 75)),
    _req(Position.CB, 0.2, ("man_coverage", CRIT, 75), ("closing", IMP, 70)),
))


SCHEME_DEFINITIONS: Dict[Scheme, SchemeDefinition] = {
    definition.scheme: definition
    for definition in (
        WEST_COAST,
        AIR_RAID,
        SPREAD_OPTION,
        POWER_RUN,
        ZONE_RUN,
        PLAY_ACTION,
        FOUR_THREE_UNDER,
        THREE_FOUR,
        COVER_THREE,
        COVER_TWO,
        MAN_PRESS,
        BLITZ_HEAVY,
    )
}

IMPORTANCE_WEIGHTS: Dict[SkillImportance, int] = {
    SkillImportance.CRITICAL: 3,
    SkillImportance.IMPORTANT: 2,
    SkillImportance.BENEFICIAL: 1,
}


def get_scheme_definition(scheme: Scheme) -> SchemeDefinition:
    """Look up a scheme's requirements."""
    return SCHEME_DEFINITIONS[scheme]


def get_scheme_display_name(scheme: Scheme) -> str:
    return SCHEME_DEFINITIONS[scheme].display_name


__all__ = [
    "IMPORTANCE_WEIGHTS",
    "PositionRequirement",
    "SCHEME_DEFINITIONS",
    "SchemeDefinition",
    "SkillRequirement",
    "get_scheme_definition",
    "get_scheme_display_name",
]
