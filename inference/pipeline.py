"""
Full assessment pipeline.

answers -> catalog lookup -> dimension scores
        -> response-quality analysis (resolved answers, in order)
        -> derived insights -> archetype and persona matching

Every stage is a pure function of its inputs; the only shared state is the
read-only catalog passed in by the caller.
"""
import logging
from typing import List

from core.profile import AssessmentResult, DerivedInsights
from core.standardisation import round1, valid_latency
from inference.answer_converter import ensure_chronological, resolve_answers
from insights.conflict_map import conflict_map
from insights.evolution import motive_evolution
from insights.social_desirability import analyse_social_desirability
from insights.stages import motive_stages
from insights.suggestions import development_suggestions
from insights.sync import sync_summary
from insights.uncertainty import uncertainty_bands
from matching.engine import match_profile
from quality.consistency import analyse_item_consistency
from quality.reliability import assess_reliability
from quality.response_time import analyse_response_times
from questionnaires.answers import Answer
from questionnaires.catalog import QuestionCatalog
from scoring.engine import score_dimensions

logger = logging.getLogger(__name__)


def run_assessment(answers: List[Answer], catalog: QuestionCatalog) -> AssessmentResult:
    ordered, chronological = ensure_chronological(list(answers))
    resolved, skipped = resolve_answers(ordered, catalog)

    scores = score_dimensions(resolved)

    time_profile = analyse_response_times(resolved)
    reliability = assess_reliability(resolved, time_profile)

    motives = scores.motives
    tension_map = conflict_map(motives)
    match = match_profile(motives)

    insights = DerivedInsights(
        stages=motive_stages(motives),
        conflict_map=tension_map,
        uncertainty=uncertainty_bands(motives, reliability.overall),
        evolution=motive_evolution(motives, scores.maturity, scores.hidden, scores.conflicts),
        suggestions=development_suggestions(motives, scores.hidden, tension_map, scores.maturity),
        social_desirability=analyse_social_desirability(motives, reliability, scores.validation),
        item_consistency=analyse_item_consistency(resolved),
        sync=sync_summary(match, motives, scores.maturity, scores.validation),
    )

    total_time = sum(t for t in (valid_latency(a.response_time_ms) for a in resolved) if t is not None)

    logger.info(
        "Scored %d answers (%d resolved, %d skipped): %s %.1f, reliability %.1f (%s)",
        len(ordered), len(resolved), len(skipped),
        match.primary.archetype, match.primary.score,
        reliability.overall, reliability.grade,
    )

    return AssessmentResult(
        question_count=len(ordered),
        resolved_count=len(resolved),
        total_time_ms=round1(total_time),
        chronological=chronological,
        scores=scores,
        response_time=time_profile,
        reliability=reliability,
        insights=insights,
        match=match,
        skipped=skipped,
    )
