from typing import List

from core.profile import DimensionScores
from questionnaires.answers import ResolvedAnswer
from scoring.conflict import calculate_conflict_scores
from scoring.context import calculate_context_profile
from scoring.direction import calculate_direction_scores
from scoring.energy import calculate_energy_profile
from scoring.hidden import calculate_hidden_profile
from scoring.ignition import calculate_ignition_scores
from scoring.maturity import calculate_maturity_score
from scoring.motives import calculate_motive_scores
from scoring.operating import calculate_operating_scores
from scoring.validation import calculate_validation_score

"""
Scoring orchestration layer.

This module coordinates the per-dimension calculators.
It does not contain scoring logic itself.
"""


def score_dimensions(answers: List[ResolvedAnswer], shift_threshold: float | None = None) -> DimensionScores:
    """
    Run every dimension calculator over the resolved answers.
    Motive scores are computed first; context shifts are measured against them.
    """
    motives = calculate_motive_scores(answers)

    return DimensionScores(
        motives=motives,
        ignition=calculate_ignition_scores(answers),
        direction=calculate_direction_scores(answers),
        operating=calculate_operating_scores(answers),
        energy=calculate_energy_profile(answers),
        conflicts=calculate_conflict_scores(answers),
        context=calculate_context_profile(answers, motives, shift_threshold),
        hidden=calculate_hidden_profile(answers),
        maturity=calculate_maturity_score(answers),
        validation=calculate_validation_score(answers),
    )
