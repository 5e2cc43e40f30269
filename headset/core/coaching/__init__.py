"""
Coaching System.

Hidden-information engines that decide what a coaching staff does to its
players. Every engine works on true values internally and exposes only
qualitative pydantic views at the boundary.

The system is built on five pieces:
1. Scheme Fit - how well a player's skills suit a scheme, with a
   transition penalty while they learn it
2. Chemistry - player-coach relationships that drift with events
3. Development - offseason progression driven by a coach's development
   attribute, plus in-season nudges and the one-time breakout
4. Relationships - coach-coach chemistry from lineage and temperament
5. Staff - the staff-wide harmony those relationships add up to

Example usage:
    from headset.core.coaching import (
        calculate_scheme_fit,
        apply_offseason_progression,
        get_scheme_fit_view,
    )

    # Numbers stay inside the engine
    score = calculate_scheme_fit(player, Scheme.WEST_COAST, years_in_scheme=1)

    # Only the qualitative view crosses to the UI
    view = get_scheme_fit_view(score)

    # Progress a player through the offseason under their position coach
    result = apply_offseason_progression(player, qb_coach, fit_level=score.fit_level)
"""

from headset.core.coaching.chemistry import (
    ChemistryEvent,
    ChemistryEventType,
    ChemistryHistory,
    advance_chemistry_season,
    apply_chemistry_event,
    apply_event_to_history,
    calculate_initial_chemistry,
    describe_team_chemistry,
    get_chemistry_description,
    get_chemistry_level,
    get_chemistry_modifier,
    get_development_chemistry_modifier,
    get_morale_chemistry_modifier,
    initialize_chemistry_history,
    validate_chemistry,
)
from headset.core.coaching.development import (
    DevelopmentImpact,
    ProgressionResult,
    SkillChange,
    TeamProgressionResult,
    apply_offseason_progression,
    apply_skill_changes,
    calculate_development_impact,
    calculate_player_coach_chemistry,
    get_age_development_modifier,
    get_development_impact_view,
    process_team_progression,
    project_progression,
)
from headset.core.coaching.evaluation import (
    calculate_coach_overall,
    calculate_combined_development_bonus,
    calculate_scheme_teaching_effectiveness,
    get_coach_quality_tier,
    get_game_day_modifier,
    get_motivation_modifier,
)
from headset.core.coaching.mid_season import (
    MidSeasonResult,
    apply_mid_season_progression,
    reset_mid_season_budget,
)
from headset.core.coaching.relationships import (
    PersonalityInteraction,
    TreeRelationship,
    calculate_coach_chemistry,
    calculate_personality_chemistry,
    calculate_personality_interaction,
    calculate_tree_chemistry,
    detect_staff_conflicts,
    detect_staff_synergies,
    get_personality_compatibility,
    suggest_compatible_personalities,
    would_create_conflict,
)
from headset.core.coaching.responsibilities import (
    coach_affects_player,
    get_impact_areas,
    get_relevant_skills,
)
from headset.core.coaching.scheme_fit import (
    PlayerSchemeHistory,
    SchemeFitScore,
    calculate_random_transition_penalty,
    calculate_scheme_fit,
    calculate_transition_penalty,
    compare_scheme_fits,
    get_all_scheme_fits,
    get_best_scheme_fit,
    get_fit_level,
    get_scheme_fit_modifier,
    get_scheme_fit_view,
    get_worst_scheme_fit,
    summarize_team_scheme_fit,
)
from headset.core.coaching.schemes import SCHEME_DEFINITIONS, get_scheme_definition
from headset.core.coaching.staff import (
    StaffChemistry,
    StaffImpact,
    advance_staff_year,
    calculate_staff_chemistry,
    calculate_staff_impact,
    get_staff_chemistry_view,
)

__all__ = [
    # Scheme fit
    "SCHEME_DEFINITIONS",
    "PlayerSchemeHistory",
    "SchemeFitScore",
    "calculate_random_transition_penalty",
    "calculate_scheme_fit",
    "calculate_transition_penalty",
    "compare_scheme_fits",
    "get_all_scheme_fits",
    "get_best_scheme_fit",
    "get_fit_level",
    "get_scheme_definition",
    "get_scheme_fit_modifier",
    "get_scheme_fit_view",
    "get_worst_scheme_fit",
    "summarize_team_scheme_fit",
    # Chemistry
    "ChemistryEvent",
    "ChemistryEventType",
    "ChemistryHistory",
    "advance_chemistry_season",
    "apply_chemistry_event",
    "apply_event_to_history",
    "calculate_initial_chemistry",
    "describe_team_chemistry",
    "get_chemistry_description",
    "get_chemistry_level",
    "get_chemistry_modifier",
    "get_development_chemistry_modifier",
    "get_morale_chemistry_modifier",
    "initialize_chemistry_history",
    "validate_chemistry",
    # Development
    "DevelopmentImpact",
    "MidSeasonResult",
    "ProgressionResult",
    "SkillChange",
    "TeamProgressionResult",
    "apply_mid_season_progression",
    "apply_offseason_progression",
    "apply_skill_changes",
    "calculate_development_impact",
    "calculate_player_coach_chemistry",
    "coach_affects_player",
    "get_age_development_modifier",
    "get_development_impact_view",
    "get_impact_areas",
    "get_relevant_skills",
    "process_team_progression",
    "project_progression",
    "reset_mid_season_budget",
    # Evaluation
    "calculate_coach_overall",
    "calculate_combined_development_bonus",
    "calculate_scheme_teaching_effectiveness",
    "get_coach_quality_tier",
    "get_game_day_modifier",
    "get_motivation_modifier",
    # Relationships & staff
    "PersonalityInteraction",
    "StaffChemistry",
    "StaffImpact",
    "TreeRelationship",
    "advance_staff_year",
    "calculate_coach_chemistry",
    "calculate_personality_chemistry",
    "calculate_personality_interaction",
    "calculate_staff_chemistry",
    "calculate_staff_impact",
    "calculate_tree_chemistry",
    "detect_staff_conflicts",
    "detect_staff_synergies",
    "get_personality_compatibility",
    "get_staff_chemistry_view",
    "suggest_compatible_personalities",
    "would_create_conflict",
]
