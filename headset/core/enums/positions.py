"""Position definitions for football players."""

from enum import Enum, auto


class PositionGroup(Enum):
    """Side of the ball a position plays on."""

    OFFENSE = auto()
    DEFENSE = auto()
    SPECIAL_TEAMS = auto()


class Position(Enum):
    """Individual player positions."""

    # Offense - Skill positions
    QB = "QB"  # Quarterback
    RB = "RB"  # Running Back
    WR = "WR"  # Wide Receiver
    TE = "TE"  # Tight End

    # Offense - Line
    LT = "LT"  # Left Tackle
    LG = "LG"  # Left Guard
    C = "C"  # Center
    RG = "RG"  # Right Guard
    RT = "RT"  # Right Tackle

    # Defense - Line
    DE = "DE"  # Defensive End
    DT = "DT"  # Defensive Tackle

    # Defense - Linebackers
    OLB = "OLB"  # Outside Linebacker
    ILB = "ILB"  # Inside Linebacker

    # Defense - Secondary
    CB = "CB"  # Cornerback
    FS = "FS"  # Free Safety
    SS = "SS"  # Strong Safety

    # Special Teams
    K = "K"  # Kicker
    P = "P"  # Punter

    @property
    def group(self) -> PositionGroup:
        """Get the position group for this position."""
        if self in OFFENSIVE_POSITIONS:
            return PositionGroup.OFFENSE
        if self in DEFENSIVE_POSITIONS:
            return PositionGroup.DEFENSE
        return PositionGroup.SPECIAL_TEAMS

    @property
    def is_offensive_lineman(self) -> bool:
        """Check if this is an offensive line position."""
        return self in OFFENSIVE_LINE


OFFENSIVE_LINE = frozenset({Position.LT, Position.LG, Position.C, Position.RG, Position.RT})

OFFENSIVE_POSITIONS = frozenset({
    Position.QB,
    Position.RB,
    Position.WR,
    Position.TE,
}) | OFFENSIVE_LINE

DEFENSIVE_POSITIONS = frozenset({
    Position.DE,
    Position.DT,
    Position.OLB,
    Position.ILB,
    Position.CB,
    Position.FS,
    Position.SS,
})

SPECIAL_TEAMS_POSITIONS = frozenset({Position.K, Position.P})
