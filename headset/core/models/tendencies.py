"""
Coordinator Tendencies Model.

A coordinator's declared play-calling distribution plus the situational
overrides applied on top of it. Offensive and defensive tendencies are
distinct types; a coach carries at most one of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# =============================================================================
# Enums
# =============================================================================

class FourthDownAggressiveness(Enum):
    CONSERVATIVE = "conservative"
    AVERAGE = "average"
    AGGRESSIVE = "aggressive"


class TempoPreference(Enum):
    SLOW = "slow"
    BALANCED = "balanced"
    UPTEMPO = "uptempo"


class SituationalPreference(Enum):
    """Run/pass lean for a specific down-and-distance or field zone."""
    RUN = "run"
    PASS = "pass"
    BALANCED = "balanced"


class BaseFormation(Enum):
    FOUR_THREE = "4-3"
    THREE_FOUR = "3-4"
    HYBRID = "hybrid"


class RedZoneDefense(Enum):
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"


class TwoMinuteApproach(Enum):
    PREVENT = "prevent"
    NORMAL = "normal"
    BLITZ = "blitz"


class ThirdAndLongApproach(Enum):
    BLITZ = "blitz"
    COVERAGE = "coverage"
    BALANCED = "balanced"


# =============================================================================
# Offensive Tendencies
# =============================================================================

@dataclass(frozen=True)
class SplitModifier:
    """Shift applied to the run/pass split in a situation."""
    run_modifier: int = 0
    pass_modifier: int = 0


@dataclass(frozen=True)
class RunPassSplit:
    run: int = 45
    pass_: int = 55


@dataclass(frozen=True)
class OffensiveSituational:
    ahead_by_14_plus: SplitModifier = field(default_factory=lambda: SplitModifier(15, -15))
    behind_by_14_plus: SplitModifier = field(default_factory=lambda: SplitModifier(-20, 20))
    third_and_short: SituationalPreference = SituationalPreference.BALANCED
    red_zone: SituationalPreference = SituationalPreference.BALANCED
    bad_weather: SplitModifier = field(default_factory=lambda: SplitModifier(10, -10))


@dataclass(frozen=True)
class OffensiveTendencies:
    """Offensive coordinator play-calling profile."""

    run_pass_split: RunPassSplit = field(default_factory=RunPassSplit)
    play_action_rate: int = 20  # 0-50
    deep_shot_rate: int = 15  # 0-40
    fourth_down_aggressiveness: FourthDownAggressiveness = FourthDownAggressiveness.AVERAGE
    tempo_preference: TempoPreference = TempoPreference.BALANCED
    situational: OffensiveSituational = field(default_factory=OffensiveSituational)

    def to_dict(self) -> dict:
        s = self.situational
        return {
            "kind": "offense",
            "run": self.run_pass_split.run,
            "pass": self.run_pass_split.pass_,
            "play_action_rate": self.play_action_rate,
            "deep_shot_rate": self.deep_shot_rate,
            "fourth_down_aggressiveness": self.fourth_down_aggressiveness.value,
            "tempo_preference": self.tempo_preference.value,
            "situational": {
                "ahead_by_14_plus": [s.ahead_by_14_plus.run_modifier, s.ahead_by_14_plus.pass_modifier],
                "behind_by_14_plus": [s.behind_by_14_plus.run_modifier, s.behind_by_14_plus.pass_modifier],
                "third_and_short": s.third_and_short.value,
                "red_zone": s.red_zone.value,
                "bad_weather": [s.bad_weather.run_modifier, s.bad_weather.pass_modifier],
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OffensiveTendencies":
        s = data.get("situational", {})
        defaults = OffensiveSituational()
        return cls(
            run_pass_split=RunPassSplit(data.get("run", 45), data.get("pass", 55)),
            play_action_rate=data.get("play_action_rate", 20),
            deep_shot_rate=data.get("deep_shot_rate", 15),
            fourth_down_aggressiveness=FourthDownAggressiveness(
                data.get("fourth_down_aggressiveness", "average")
            ),
            tempo_preference=TempoPreference(data.get("tempo_preference", "balanced")),
            situational=OffensiveSituational(
                ahead_by_14_plus=SplitModifier(*s["ahead_by_14_plus"]) if "ahead_by_14_plus" in s else defaults.ahead_by_14_plus,
                behind_by_14_plus=SplitModifier(*s["behind_by_14_plus"]) if "behind_by_14_plus" in s else defaults.behind_by_14_plus,
                third_and_short=SituationalPreference(s.get("third_and_short", "balanced")),
                red_zone=SituationalPreference(s.get("red_zone", "balanced")),
                bad_weather=SplitModifier(*s["bad_weather"]) if "bad_weather" in s else defaults.bad_weather,
            ),
        )


# =============================================================================
# Defensive Tendencies
# =============================================================================

@dataclass(frozen=True)
class DefensiveSituational:
    red_zone: RedZoneDefense = RedZoneDefense.AGGRESSIVE
    two_minute_drill: TwoMinuteApproach = TwoMinuteApproach.NORMAL
    third_and_long: ThirdAndLongApproach = ThirdAndLongApproach.COVERAGE


@dataclass(frozen=True)
class DefensiveTendencies:
    """Defensive coordinator play-calling profile."""

    base_formation: BaseFormation = BaseFormation.FOUR_THREE
    blitz_rate: int = 25  # 0-100
    man_coverage_rate: int = 40  # 0-100
    press_rate: int = 50  # 0-100
    situational: DefensiveSituational = field(default_factory=DefensiveSituational)

    def to_dict(self) -> dict:
        return {
            "kind": "defense",
            "base_formation": self.base_formation.value,
            "blitz_rate": self.blitz_rate,
            "man_coverage_rate": self.man_coverage_rate,
            "press_rate": self.press_rate,
            "situational": {
                "red_zone": self.situational.red_zone.value,
                "two_minute_drill": self.situational.two_minute_drill.value,
                "third_and_long": self.situational.third_and_long.value,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DefensiveTendencies":
        s = data.get("situational", {})
        return cls(
            base_formation=BaseFormation(data.get("base_formation", "4-3")),
            blitz_rate=data.get("blitz_rate", 25),
            man_coverage_rate=data.get("man_coverage_rate", 40),
            press_rate=data.get("press_rate", 50),
            situational=DefensiveSituational(
                red_zone=RedZoneDefense(s.get("red_zone", "aggressive")),
                two_minute_drill=TwoMinuteApproach(s.get("two_minute_drill", "normal")),
                third_and_long=ThirdAndLongApproach(s.get("third_and_long", "coverage")),
            ),
        )


CoordinatorTendencies = Union[OffensiveTendencies, DefensiveTendencies]


def tendencies_from_dict(data: dict) -> CoordinatorTendencies:
    """Rebuild whichever tendency kind a serialized dict describes."""
    if data.get("kind") == "defense":
        return DefensiveTendencies.from_dict(data)
    return OffensiveTendencies.from_dict(data)


# =============================================================================
# Validation
# =============================================================================

def validate_offensive_tendencies(tendencies: OffensiveTendencies) -> bool:
    split = tendencies.run_pass_split
    if split.run < 0 or split.pass_ < 0 or split.run + split.pass_ != 100:
        return False
    if not 0 <= tendencies.play_action_rate <= 50:
        return False
    if not 0 <= tendencies.deep_shot_rate <= 40:
        return False
    return True


def validate_defensive_tendencies(tendencies: DefensiveTendencies) -> bool:
    for rate in (tendencies.blitz_rate, tendencies.man_coverage_rate, tendencies.press_rate):
        if not 0 <= rate <= 100:
            return False
    return True


def validate_tendency_profile(tendencies: CoordinatorTendencies) -> bool:
    """Validate either kind of tendency profile."""
    if isinstance(tendencies, OffensiveTendencies):
        return validate_offensive_tendencies(tendencies)
    return validate_defensive_tendencies(tendencies)


DEFAULT_OFFENSIVE_TENDENCIES = OffensiveTendencies()
DEFAULT_DEFENSIVE_TENDENCIES = DefensiveTendencies()


__all__ = [
    "BaseFormation",
    "CoordinatorTendencies",
    "DEFAULT_DEFENSIVE_TENDENCIES",
    "DEFAULT_OFFENSIVE_TENDENCIES",
    "DefensiveSituational",
    "DefensiveTendencies",
    "FourthDownAggressiveness",
    "OffensiveSituational",
    "OffensiveTendencies",
    "RedZoneDefense",
    "RunPassSplit",
    "SituationalPreference",
    "SplitModifier",
    "TempoPreference",
    "ThirdAndLongApproach",
    "TwoMinuteApproach",
    "tendencies_from_dict",
    "validate_defensive_tendencies",
    "validate_offensive_tendencies",
    "validate_tendency_profile",
]
