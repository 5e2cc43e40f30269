"""Play-call decision engine: weather, tendencies, play selection, game management."""

from headset.game.decision_logic import (
    Confidence,
    FourthDownDecision,
    FourthDownResult,
    Tempo,
    TwoMinuteMode,
    get_two_minute_mode,
    make_fourth_down_decision,
    select_tempo,
)
from headset.game.play_calling import (
    Coverage,
    DefensivePlayCall,
    DefensivePlayCallResult,
    OffensiveFormation,
    OffensivePlayCall,
    OffensivePlayCallResult,
    PlayType,
    get_play_type_distribution,
    select_defensive_call,
    select_defensive_play_call,
    select_offensive_play_call,
    select_play,
    should_attempt_field_goal,
    should_punt,
    validate_play_calling_integration,
)
from headset.game.tendencies import (
    calculate_adjusted_defensive_tendencies,
    calculate_adjusted_offensive_tendencies,
    calculate_defensive_call_probabilities,
    calculate_play_call_probabilities,
    calculate_tendency_similarity,
    generate_defensive_tendencies,
    generate_offensive_tendencies,
    get_tendency_description,
)
from headset.game.weather import WeatherImpact, calculate_weather_impact

__all__ = [
    "Confidence",
    "Coverage",
    "DefensivePlayCall",
    "DefensivePlayCallResult",
    "FourthDownDecision",
    "FourthDownResult",
    "OffensiveFormation",
    "OffensivePlayCall",
    "OffensivePlayCallResult",
    "PlayType",
    "Tempo",
    "TwoMinuteMode",
    "WeatherImpact",
    "calculate_adjusted_defensive_tendencies",
    "calculate_adjusted_offensive_tendencies",
    "calculate_defensive_call_probabilities",
    "calculate_play_call_probabilities",
    "calculate_tendency_similarity",
    "calculate_weather_impact",
    "generate_defensive_tendencies",
    "generate_offensive_tendencies",
    "get_play_type_distribution",
    "get_tendency_description",
    "get_two_minute_mode",
    "make_fourth_down_decision",
    "select_defensive_call",
    "select_defensive_play_call",
    "select_offensive_play_call",
    "select_play",
    "select_tempo",
    "should_attempt_field_goal",
    "should_punt",
    "validate_play_calling_integration",
]
