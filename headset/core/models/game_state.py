"""Per-play situation models consumed by the play-call engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from headset.config import get_config

Quarter = Union[int, str]  # 1-4 or "OT"


class Precipitation(Enum):
    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"


@dataclass(frozen=True)
class WeatherCondition:
    temperature: int = 70  # Fahrenheit
    precipitation: Precipitation = Precipitation.NONE
    wind_speed: int = 5  # mph
    is_dome: bool = False

    @property
    def is_bad(self) -> bool:
        """Weather that pushes a play caller toward the ground game."""
        if self.is_dome:
            return False
        return self.precipitation is not Precipitation.NONE or self.wind_speed > 15


@dataclass(frozen=True)
class GameStateContext:
    """
    Game situation used for tendency adjustments.

    field_position is yards from the offense's own goal line (0-100).
    score_differential is from the offense's perspective; positive is winning.
    time_remaining is seconds left in the quarter.
    """

    down: int = 1
    distance: int = 10
    field_position: int = 25
    score_differential: int = 0
    time_remaining: int = 900
    quarter: Quarter = 1
    is_red_zone: bool = False
    is_two_minute_warning: bool = False
    weather: WeatherCondition = field(default_factory=WeatherCondition)

    @property
    def is_end_of_half(self) -> bool:
        return self.quarter in (2, 4) and self.time_remaining < 120


@dataclass(frozen=True)
class PlayCallContext:
    """Caller-facing description of the upcoming snap."""

    down: int = 1
    distance: int = 10
    field_position: int = 25
    score_differential: int = 0
    time_remaining: int = 900
    quarter: Quarter = 1
    weather: WeatherCondition = field(default_factory=WeatherCondition)
    kicker_range: int = field(default_factory=lambda: get_config().default_kicker_range)
    is_home_team: bool = True

    def to_game_state(self) -> GameStateContext:
        """Derive the situational flags the tendency engine works from."""
        return GameStateContext(
            down=self.down,
            distance=self.distance,
            field_position=self.field_position,
            score_differential=self.score_differential,
            time_remaining=self.time_remaining,
            quarter=self.quarter,
            is_red_zone=self.field_position >= 80,
            is_two_minute_warning=self.quarter in (2, 4) and self.time_remaining <= 120,
            weather=self.weather,
        )


def create_default_play_call_context() -> PlayCallContext:
    """First and ten at the 25 to open the game, mild weather."""
    return PlayCallContext(
        down=1,
        distance=10,
        field_position=25,
        score_differential=0,
        time_remaining=900,
        quarter=1,
        weather=WeatherCondition(temperature=70, precipitation=Precipitation.NONE, wind_speed=5),
    )
