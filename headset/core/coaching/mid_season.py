"""
In-Season Development.

Single games nudge skills: a standout performance can bump one or two
relevant skills, a poor one can cost a little. The season-long total of
those nudges is capped, so one hot month cannot remake a player.

Young players also carry a breakout meter. Standout games fill it, poor
games drain it, and when it fills the player gets a one-time jump that
sits outside the seasonal cap. A player breaks out at most once.

Everything here is stochastic; pass a seeded ``random.Random`` for
reproducible results.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from headset.config import get_config, get_rng
from headset.core.coaching.development import SkillChange
from headset.core.coaching.responsibilities import get_relevant_skills
from headset.core.models.coach import Coach
from headset.core.models.player import Player, SkillValue

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

STANDOUT_SCORE = 85
POOR_SCORE = 25

STANDOUT_GAIN = (0.5, 1.5)
POOR_LOSS = (0.3, 0.8)
MAX_COACH_BONUS = 0.3

METER_GAIN = (15, 25)
METER_LOSS = (5, 10)
BREAKOUT_GAIN = (3, 5)


def get_mid_season_age_modifier(age: int) -> float:
    if age <= 24:
        return 1.3
    if age <= 28:
        return 1.0
    return 0.7


def get_coach_development_bonus(coach: Optional[Coach]) -> float:
    """0 to 0.3, linear in the coach's development attribute."""
    if coach is None:
        return 0.0
    return coach.attributes.development / 100 * MAX_COACH_BONUS


@dataclass
class MidSeasonResult:
    """Outcome of one game's worth of development for one player."""

    updated_player: Player
    skill_changes: List[SkillChange] = field(default_factory=list)
    is_breakout: bool = False
    breakout_description: Optional[str] = None
    description: str = ""
    week: Optional[int] = None


def _shift(skills: Dict[str, SkillValue], name: str, amount: float) -> SkillChange:
    skill = skills[name]
    updated = skill.with_true_value(skill.true_value + amount)
    skills[name] = updated
    return SkillChange(name, skill.true_value, updated.true_value, updated.true_value - skill.true_value)


def _format(names: List[str]) -> str:
    return ", ".join(n.replace("_", " ") for n in names)


def apply_mid_season_progression(
    player: Player,
    performance_score: float,
    coach: Optional[Coach] = None,
    week: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MidSeasonResult:
    """Apply one game's development to a player.

    Args:
        player: Player who just played (not modified)
        performance_score: 0-100 grade for the game
        coach: Coach whose development attribute adds a small bonus, if any
        week: Week of the season, carried into the result
        rng: Random source; a fresh one from the config when omitted

    Returns:
        MidSeasonResult holding the updated player copy
    """
    rng = rng or get_rng()
    config = get_config()
    budget = config.mid_season_budget

    skills = dict(player.skills)
    relevant = [name for name in get_relevant_skills(player.position) if name in skills]
    age_mod = get_mid_season_age_modifier(player.age)
    total = player.mid_season_dev_total
    changes: List[SkillChange] = []
    description = f"{player.full_name} had a steady game"

    standout = performance_score >= STANDOUT_SCORE
    poor = performance_score <= POOR_SCORE

    if standout and abs(total) < budget and relevant:
        count = min(len(relevant), rng.randint(1, 2))
        bonus = get_coach_development_bonus(coach)
        for name in rng.sample(relevant, count):
            room = budget - total
            if room <= 0:
                break
            amount = min(rng.uniform(*STANDOUT_GAIN) * age_mod + bonus, room)
            change = _shift(skills, name, amount)
            if change.change > 0:
                total = min(budget, total + change.change)
                changes.append(change)
        if changes:
            description = f"{player.full_name} built on a standout game with gains in {_format([c.skill for c in changes])}"
    elif poor and abs(total) < budget and relevant:
        name = rng.choice(relevant)
        room = budget + total
        amount = min(rng.uniform(*POOR_LOSS) * age_mod, room)
        if amount > 0:
            change = _shift(skills, name, -amount)
            if change.change < 0:
                total = max(-budget, total + change.change)
                changes.append(change)
                description = f"{player.full_name} took a step back in {_format([name])} after a rough game"

    meter = player.breakout_meter
    has_had_breakout = player.has_had_breakout
    is_breakout = False
    breakout_description = None

    eligible = player.age <= config.breakout_age_limit and not player.has_had_breakout
    if eligible:
        if standout:
            meter += rng.uniform(*METER_GAIN)
        elif poor:
            meter = max(0.0, meter - rng.uniform(*METER_LOSS))

        if meter >= config.breakout_threshold and relevant:
            count = min(len(relevant), rng.randint(2, 3))
            boosted = rng.sample(relevant, count)
            for name in boosted:
                changes.append(_shift(skills, name, rng.randint(*BREAKOUT_GAIN)))
            is_breakout = True
            has_had_breakout = True
            breakout_description = (
                f"{player.full_name} is breaking out, with a jump in {_format(boosted)}"
            )
            description = breakout_description
            logger.info(f"Breakout: {player.full_name} ({player.id}) week {week}")

    updated = replace(
        player,
        skills=skills,
        mid_season_dev_total=total,
        breakout_meter=meter,
        has_had_breakout=has_had_breakout,
    )
    logger.debug(
        f"Mid-season {player.id} week {week}: score={performance_score} "
        f"budget_used={total:.2f} changes={len(changes)}"
    )
    return MidSeasonResult(
        updated_player=updated,
        skill_changes=changes,
        is_breakout=is_breakout,
        breakout_description=breakout_description,
        description=description,
        week=week,
    )


def reset_mid_season_budget(player: Player) -> Player:
    """Start a new season's development budget. The breakout state carries over."""
    return replace(player, mid_season_dev_total=0.0)
