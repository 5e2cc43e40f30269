"""Weather adjustments to play calling."""

from __future__ import annotations

from dataclasses import dataclass

from headset.core.models.game_state import Precipitation, WeatherCondition


@dataclass(frozen=True)
class WeatherImpact:
    run_modifier: int = 0  # Added to the effective run rate
    deep_pass_modifier: int = 0  # Added to the effective deep rate
    description: str = "Normal conditions"


DOME_IMPACT = WeatherImpact(0, 0, "Dome conditions - no weather impact")


def calculate_weather_impact(weather: WeatherCondition) -> WeatherImpact:
    """Shift toward the run and away from deep shots as conditions worsen.

    Args:
        weather: Conditions at kickoff

    Returns:
        WeatherImpact; a dome cancels everything
    """
    if weather.is_dome:
        return DOME_IMPACT

    run_modifier = 0
    deep_modifier = 0
    notes = []

    if weather.precipitation is Precipitation.RAIN:
        run_modifier += 10
        deep_modifier -= 15
        notes.append("Rain favors running game")
    elif weather.precipitation is Precipitation.SNOW:
        run_modifier += 20
        deep_modifier -= 25
        notes.append("Snow significantly impacts passing")

    if weather.wind_speed >= 20:
        deep_modifier -= 20
        notes.append("High winds limit deep passing")
    elif weather.wind_speed > 15:
        deep_modifier -= 10
        notes.append("Wind affects passing game")
    elif weather.wind_speed > 10:
        deep_modifier -= 5

    if weather.temperature < 32:
        run_modifier += 5
        notes.append("Freezing conditions favor ground game")

    return WeatherImpact(
        run_modifier=run_modifier,
        deep_pass_modifier=deep_modifier,
        description="; ".join(notes) if notes else "Normal conditions",
    )
