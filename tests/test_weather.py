"""Tests for weather effects on play calling."""

from headset.core.models.game_state import Precipitation, WeatherCondition
from headset.game.weather import DOME_IMPACT, calculate_weather_impact


class TestWeatherImpact:
    """Tests for weather modifiers."""

    def test_clear_day(self):
        impact = calculate_weather_impact(WeatherCondition())
        assert impact.run_modifier == 0
        assert impact.deep_pass_modifier == 0
        assert impact.description == "Normal conditions"

    def test_dome_cancels_everything(self):
        blizzard = WeatherCondition(
            temperature=10, precipitation=Precipitation.SNOW, wind_speed=30, is_dome=True
        )
        assert calculate_weather_impact(blizzard) == DOME_IMPACT
        assert not blizzard.is_bad

    def test_rain(self):
        impact = calculate_weather_impact(WeatherCondition(precipitation=Precipitation.RAIN))
        assert (impact.run_modifier, impact.deep_pass_modifier) == (10, -15)
        assert impact.description == "Rain favors running game"

    def test_snow(self):
        impact = calculate_weather_impact(WeatherCondition(precipitation=Precipitation.SNOW))
        assert (impact.run_modifier, impact.deep_pass_modifier) == (20, -25)

    def test_wind_bands(self):
        assert calculate_weather_impact(WeatherCondition(wind_speed=10)).deep_pass_modifier == 0
        assert calculate_weather_impact(WeatherCondition(wind_speed=11)).deep_pass_modifier == -5
        assert calculate_weather_impact(WeatherCondition(wind_speed=16)).deep_pass_modifier == -10
        assert calculate_weather_impact(WeatherCondition(wind_speed=20)).deep_pass_modifier == -20

    def test_light_wind_has_no_note(self):
        """Modest wind trims deep shots without a description."""
        impact = calculate_weather_impact(WeatherCondition(wind_speed=12))
        assert impact.description == "Normal conditions"

    def test_effects_stack(self):
        weather = WeatherCondition(temperature=20, precipitation=Precipitation.SNOW, wind_speed=25)
        impact = calculate_weather_impact(weather)
        assert impact.run_modifier == 25
        assert impact.deep_pass_modifier == -45
        assert impact.description == (
            "Snow significantly impacts passing; High winds limit deep passing; "
            "Freezing conditions favor ground game"
        )

    def test_bad_weather_flag(self):
        assert WeatherCondition(precipitation=Precipitation.RAIN).is_bad
        assert WeatherCondition(wind_speed=16).is_bad
        assert not WeatherCondition(wind_speed=15).is_bad
