"""
Engine configuration.

Controls the tunable knobs of the coaching engines and the random source
handed to stochastic functions. All settings can be overridden via
environment variables.
"""

import os
import random
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return int(value)


@dataclass
class EngineConfig:
    """Configuration for the coaching simulation engines."""

    # Random source - unseeded unless HEADSET_RNG_SEED is set
    rng_seed: Optional[int] = field(default_factory=lambda: _env_int("HEADSET_RNG_SEED"))

    # Play calling
    default_kicker_range: int = field(
        default_factory=lambda: int(os.getenv("HEADSET_KICKER_RANGE", "50"))
    )

    # Mid-season development
    mid_season_budget: float = 3.0  # Max cumulative magnitude per season
    breakout_age_limit: int = 25  # Oldest age eligible for a breakout
    breakout_threshold: float = 100.0

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 18 <= self.default_kicker_range <= 70:
            errors.append("HEADSET_KICKER_RANGE must be between 18 and 70")
        if self.mid_season_budget <= 0:
            errors.append("mid_season_budget must be positive")
        if self.breakout_threshold <= 0:
            errors.append("breakout_threshold must be positive")
        return errors


# Singleton config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def set_config(config: Optional[EngineConfig]) -> None:
    """
    Replace the global configuration.

    Passing None resets it so the next get_config() re-reads the environment.
    Useful for testing.
    """
    global _config
    _config = config


def get_rng() -> random.Random:
    """Build a random source for a stochastic engine call.

    Returns a fresh ``random.Random``, seeded from the configuration when a
    seed is set. Never hands out the module-level generator.
    """
    return random.Random(get_config().rng_seed)
