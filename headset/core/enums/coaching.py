"""Coaching enumerations.

Closed sets used as keys for the lookup tables in the coaching engines:
staff roles, personality types, coaching trees, schemes, and the
qualitative levels that are allowed to cross the presentation boundary.
"""

from enum import Enum


# =============================================================================
# Staff
# =============================================================================

class CoachRole(Enum):
    """Position in the coaching hierarchy."""
    HEAD_COACH = "head_coach"
    OFFENSIVE_COORDINATOR = "offensive_coordinator"
    DEFENSIVE_COORDINATOR = "defensive_coordinator"
    SPECIAL_TEAMS_COORDINATOR = "special_teams_coordinator"
    QB_COACH = "qb_coach"
    RB_COACH = "rb_coach"
    WR_COACH = "wr_coach"
    TE_COACH = "te_coach"
    OL_COACH = "ol_coach"
    DL_COACH = "dl_coach"
    LB_COACH = "lb_coach"
    DB_COACH = "db_coach"
    ST_COACH = "st_coach"

    @property
    def is_coordinator(self) -> bool:
        return self in {
            CoachRole.OFFENSIVE_COORDINATOR,
            CoachRole.DEFENSIVE_COORDINATOR,
            CoachRole.SPECIAL_TEAMS_COORDINATOR,
        }

    @property
    def is_position_coach(self) -> bool:
        return self is not CoachRole.HEAD_COACH and not self.is_coordinator


class CoachPersonalityType(Enum):
    """Primary temperament of a coach."""
    ANALYTICAL = "analytical"
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"
    INNOVATIVE = "innovative"
    OLD_SCHOOL = "old_school"
    PLAYERS_COACH = "players_coach"


class PlayerPersonalityType(Enum):
    """Player disposition used when matching with a coach."""
    TEAM_FIRST = "team_first"
    ME_FIRST = "me_first"
    QUIET_LEADER = "quiet_leader"
    VOCAL_LEADER = "vocal_leader"
    COACHABLE = "coachable"
    STUBBORN = "stubborn"
    HARD_WORKER = "hard_worker"
    NATURAL_TALENT = "natural_talent"


# =============================================================================
# Coaching Trees
# =============================================================================

class TreeName(Enum):
    """Coaching lineage a coach descends from."""
    WALSH = "walsh"
    PARCELLS = "parcells"
    BELICHICK = "belichick"
    SHANAHAN = "shanahan"
    REID = "reid"
    COUGHLIN = "coughlin"
    DUNGY = "dungy"
    HOLMGREN = "holmgren"
    GRUDEN = "gruden"
    PAYTON = "payton"


class RiskTolerance(Enum):
    """Risk philosophy inherited from a coaching tree."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


class OffensiveLean(Enum):
    """Tree leaning on offense."""
    PASS = "pass"
    RUN = "run"
    BALANCED = "balanced"


class DefensiveLean(Enum):
    """Tree leaning on defense."""
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"


# =============================================================================
# Schemes
# =============================================================================

class Scheme(Enum):
    """Offensive and defensive systems a coach can install."""
    # Offense
    WEST_COAST = "west_coast"
    AIR_RAID = "air_raid"
    SPREAD_OPTION = "spread_option"
    POWER_RUN = "power_run"
    ZONE_RUN = "zone_run"
    PLAY_ACTION = "play_action"

    # Defense
    FOUR_THREE_UNDER = "four_three_under"
    THREE_FOUR = "three_four"
    COVER_THREE = "cover_three"
    COVER_TWO = "cover_two"
    MAN_PRESS = "man_press"
    BLITZ_HEAVY = "blitz_heavy"

    @property
    def is_offensive(self) -> bool:
        return self in OFFENSIVE_SCHEMES


OFFENSIVE_SCHEMES = frozenset({
    Scheme.WEST_COAST,
    Scheme.AIR_RAID,
    Scheme.SPREAD_OPTION,
    Scheme.POWER_RUN,
    Scheme.ZONE_RUN,
    Scheme.PLAY_ACTION,
})

DEFENSIVE_SCHEMES = frozenset(s for s in Scheme if s not in OFFENSIVE_SCHEMES)


class SkillImportance(Enum):
    """How much a scheme relies on a skill."""
    CRITICAL = "critical"
    IMPORTANT = "important"
    BENEFICIAL = "beneficial"


# =============================================================================
# Qualitative Levels
# =============================================================================

class FitLevel(Enum):
    """Ordinal scheme fit bucket."""
    PERFECT = "perfect"
    GOOD = "good"
    NEUTRAL = "neutral"
    POOR = "poor"
    TERRIBLE = "terrible"


class ChemistryLevel(Enum):
    """Ordinal relationship bucket."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEUTRAL = "neutral"
    STRAINED = "strained"
    TOXIC = "toxic"


class ChemistryTrend(Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class InfluenceTier(Enum):
    """How much a coach moved a player over an offseason."""
    SIGNIFICANT = "significant"
    MODERATE = "moderate"
    MINIMAL = "minimal"
    NEGATIVE = "negative"
