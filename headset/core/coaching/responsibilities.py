"""
Coaching responsibilities.

Which players each staff role works with, and which skills that work
lands on.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple

from headset.core.coaching.schemes import SCHEME_DEFINITIONS
from headset.core.enums import (
    DEFENSIVE_POSITIONS,
    OFFENSIVE_LINE,
    OFFENSIVE_POSITIONS,
    SPECIAL_TEAMS_POSITIONS,
    CoachRole,
    Position,
)

ALL_POSITIONS: FrozenSet[Position] = frozenset(Position)

ROLE_POSITIONS: Dict[CoachRole, FrozenSet[Position]] = {
    CoachRole.HEAD_COACH: ALL_POSITIONS,
    CoachRole.OFFENSIVE_COORDINATOR: OFFENSIVE_POSITIONS,
    CoachRole.DEFENSIVE_COORDINATOR: DEFENSIVE_POSITIONS,
    CoachRole.SPECIAL_TEAMS_COORDINATOR: SPECIAL_TEAMS_POSITIONS,
    CoachRole.QB_COACH: frozenset({Position.QB}),
    CoachRole.RB_COACH: frozenset({Position.RB}),
    CoachRole.WR_COACH: frozenset({Position.WR}),
    CoachRole.TE_COACH: frozenset({Position.TE}),
    CoachRole.OL_COACH: OFFENSIVE_LINE,
    CoachRole.DL_COACH: frozenset({Position.DE, Position.DT}),
    CoachRole.LB_COACH: frozenset({Position.OLB, Position.ILB}),
    CoachRole.DB_COACH: frozenset({Position.CB, Position.FS, Position.SS}),
    CoachRole.ST_COACH: SPECIAL_TEAMS_POSITIONS,
}

# Skills a coach works on with a player at each position
POSITION_FOCUS_SKILLS: Dict[Position, Tuple[str, ...]] = {
    Position.QB: ("accuracy", "decision_making", "pocket_presence", "presnap"),
    Position.RB: ("vision", "cut_ability", "pass_protection"),
    Position.WR: ("route_running", "catching", "separation"),
    Position.TE: ("blocking", "route_running", "catching"),
    Position.LT: ("pass_block", "footwork", "awareness"),
    Position.RT: ("pass_block", "footwork", "awareness"),
    Position.LG: ("run_block", "pass_block", "pull_ability"),
    Position.RG: ("run_block", "pass_block", "pull_ability"),
    Position.C: ("awareness", "run_block", "pass_block"),
    Position.DE: ("pass_rush", "pursuit", "finesse"),
    Position.DT: ("run_defense", "power", "awareness"),
    Position.OLB: ("blitzing", "coverage", "tackling"),
    Position.ILB: ("tackling", "zone_coverage", "awareness"),
    Position.CB: ("man_coverage", "zone_coverage", "press"),
    Position.FS: ("zone_coverage", "closing", "awareness"),
    Position.SS: ("tackling", "zone_coverage", "closing"),
    Position.K: ("kick_power", "kick_accuracy"),
    Position.P: ("kick_power", "kick_accuracy"),
}


def _build_position_skills() -> Dict[Position, Tuple[str, ...]]:
    skills: Dict[Position, List[str]] = {
        position: list(focus) for position, focus in POSITION_FOCUS_SKILLS.items()
    }
    for definition in SCHEME_DEFINITIONS.values():
        for requirement in definition.requirements:
            names = skills[requirement.position]
            for skill in requirement.skills:
                if skill.skill not in names:
                    names.append(skill.skill)
    return {position: tuple(names) for position, names in skills.items()}


# Every skill that matters for a position: coaching focus plus scheme demands
POSITION_SKILLS: Dict[Position, Tuple[str, ...]] = _build_position_skills()


def coach_affects_player(role: CoachRole, position: Position) -> bool:
    """Whether a coach in this role works with a player at this position."""
    return position in ROLE_POSITIONS[role]


def get_impact_areas(role: CoachRole, position: Position) -> List[str]:
    """Skills a coach in this role develops for a player at this position.

    Only position coaches have hands-on skill areas. Head coaches and
    coordinators reach players without working any particular skill.

    Returns:
        Skill names, or an empty list for non-position roles and positions
        the role does not cover.
    """
    if not role.is_position_coach or not coach_affects_player(role, position):
        return []
    return list(POSITION_FOCUS_SKILLS[position])


def get_relevant_skills(position: Position) -> List[str]:
    """Skills a game performance can move for a player at this position."""
    return list(POSITION_SKILLS[position])


def get_position_coach_role(position: Position) -> CoachRole:
    """The position coach responsible for a position.

    Raises:
        ValueError: If no position coach covers the position.
    """
    for role, positions in ROLE_POSITIONS.items():
        if role.is_position_coach and position in positions:
            return role
    raise ValueError(f"No position coach covers {position.value}")
