"""
Tests for the per-dimension calculators.
"""

from __future__ import annotations

import random

import pytest

from core.motive_components import IGNITION_CONDITIONS, MOTIVE_SOURCES
from questionnaires.answers import Answer
from questionnaires.catalog import QuestionCatalog
from scoring.conflict import calculate_conflict_scores, oscillation_rate, parse_pair
from scoring.context import calculate_context_profile
from scoring.direction import calculate_direction_scores
from scoring.energy import calculate_energy_profile
from scoring.engine import score_dimensions
from scoring.hidden import calculate_hidden_profile
from scoring.ignition import calculate_ignition_scores
from scoring.maturity import calculate_maturity_score, maturity_level
from scoring.motives import calculate_motive_scores
from scoring.operating import calculate_operating_scores
from scoring.validation import calculate_validation_score


def _conflict_catalog(n, pair="freedom_security", with_pole=False):
    items = []
    for i in range(n):
        a, b = pair.split("_")
        options = []
        for v in range(1, 6):
            scores = {}
            if with_pole:
                scores["pole"] = a if v < 3 else b if v > 3 else "balanced"
            options.append({"id": str(v), "value": v, "scores": scores})
        items.append({"id": f"C{i}", "category": "conflict", "subcategory": pair, "options": options})
    return QuestionCatalog.from_dicts(items)


# ── Motives ─────────────────────────────────────────────────────────


def test_one_optimal_answer_per_motive_scores_100(answer, resolve):
    answers = [answer(f"MS-{m}-1", 5, 3000) for m in MOTIVE_SOURCES]
    scores = calculate_motive_scores(resolve(answers))

    assert [s.score for s in scores] == [100.0] * 8
    # ties keep vocabulary order
    assert [s.motive for s in scores] == MOTIVE_SOURCES
    assert [s.rank for s in scores] == list(range(1, 9))
    assert all(s.samples == 1 for s in scores)


def test_motives_ranked_descending(answer, resolve):
    answers = [
        answer("MS-security-1", 5),
        answer("MS-freedom-1", 2),
        answer("MS-achievement-1", 4),
    ]
    scores = calculate_motive_scores(resolve(answers))
    assert scores[0].motive == "security"
    assert scores[1].motive == "achievement"
    # unmeasured motives sit on the neutral default, above freedom's 25
    assert scores[-1].motive == "freedom"
    assert scores[-1].score == 25.0


def test_unmeasured_motive_uses_neutral_default(resolve):
    scores = calculate_motive_scores(resolve([]))
    assert {s.score for s in scores} == {37.5}


@pytest.mark.parametrize("seed", range(5))
def test_ranks_are_permutations_for_random_answer_sets(catalog, seed):
    rng = random.Random(seed)
    answers = []
    for question in catalog:
        if rng.random() < 0.6:
            option = rng.choice(question.options)
            answers.append(Answer(question.id, option.id, option.value, rng.uniform(200, 20000)))

    resolved = [r for r in (catalog.resolve(a) for a in answers) if r is not None]
    scores = score_dimensions(resolved)

    for family in (scores.motives, scores.ignition):
        assert sorted(r.rank for r in family) == list(range(1, len(family) + 1))
        values = [r.score for r in family]
        assert values == sorted(values, reverse=True)
        assert all(0 <= v <= 100 for v in values)

    for d in scores.direction:
        assert d.approach + d.avoidance == pytest.approx(100.0)

    for o in scores.operating:
        assert 0 <= o.score <= 100


# ── Ignition ────────────────────────────────────────────────────────


def test_ignition_scores(answer, resolve):
    scores = calculate_ignition_scores(resolve([answer("IG-deadline", 5), answer("IG-crisis", 1)]))
    assert len(scores) == len(IGNITION_CONDITIONS)
    assert scores[0].condition == "deadline"
    assert scores[0].score == 100.0
    assert scores[-1].condition == "crisis"
    assert scores[-1].score == 0.0


# ── Direction ───────────────────────────────────────────────────────


def test_direction_split_sums_to_100(answer, resolve):
    answers = [answer("DR-achievement-approach", 5), answer("DR-achievement-avoidance", 1)]
    scores = {d.motive: d for d in calculate_direction_scores(resolve(answers))}

    achievement = scores["achievement"]
    assert achievement.approach == 83.3
    assert achievement.avoidance == 16.7
    assert achievement.dominant == "approach"
    assert achievement.balance == pytest.approx(66.6)


def test_direction_tie_favours_approach(resolve):
    scores = calculate_direction_scores(resolve([]))
    assert all(d.approach == 50.0 and d.avoidance == 50.0 for d in scores)
    assert all(d.dominant == "approach" for d in scores)


def test_direction_avoidance_dominant(answer, resolve):
    answers = [answer("DR-security-approach", 1), answer("DR-security-avoidance", 5)]
    security = next(d for d in calculate_direction_scores(resolve(answers)) if d.motive == "security")
    assert security.dominant == "avoidance"


# ── Operating ───────────────────────────────────────────────────────


def test_operating_pole_share(answer, resolve):
    answers = [
        answer("OP-rhythm-1", 5, option_id="R2"),
        answer("OP-rhythm-2", 3, option_id="R1"),
        answer("OP-recharge-1", 5, option_id="L2"),
        answer("OP-recharge-2", 3, option_id="R1"),
    ]
    scores = {o.axis: o for o in calculate_operating_scores(resolve(answers))}

    assert scores["rhythm"].score == 100.0
    assert scores["rhythm"].tendency == "right"
    assert scores["rhythm"].dominant_pole == "spontaneous"

    assert scores["recharge"].score == 37.5
    assert scores["recharge"].tendency == "balanced"
    assert scores["recharge"].dominant_pole == "solitary"

    assert scores["release"].score == 50.0
    assert scores["release"].dominant_pole is None
    assert scores["release"].samples == 0


def test_operating_subcategory_alias():
    catalog = QuestionCatalog.from_dicts([{
        "id": "OPX",
        "category": "operating",
        "subcategory": "relay",
        "options": [{"id": "a", "value": 4, "scores": {"pole": "endurance"}}],
    }])
    resolved = [catalog.resolve(Answer("OPX", "a", 4, 3000))]
    release = next(o for o in calculate_operating_scores(resolved) if o.axis == "release")
    assert release.score == 0.0
    assert release.tendency == "left"


# ── Energy ──────────────────────────────────────────────────────────


def test_energy_derived_figures_use_measured_drain_only(answer, resolve):
    profile = calculate_energy_profile(resolve([answer("EN-drain-control", 5)]))

    assert profile.drain["control"] == 100.0
    assert profile.drain["routine"] == 37.5
    assert profile.sustainability == 20.0
    assert profile.burnout_risk == 100.0
    assert profile.recovery_speed == 22.5
    assert profile.energy_balance == -62.5


def test_energy_defaults_when_nothing_measured(resolve):
    profile = calculate_energy_profile(resolve([]))
    assert profile.sustainability == 70.0
    assert profile.burnout_risk == 45.0
    assert profile.recovery_speed == 47.5
    assert profile.energy_balance == 0.0


def test_energy_charge_and_flow(answer, resolve):
    profile = calculate_energy_profile(resolve([
        answer("EN-charge-creation", 5),
        answer("EN-flow-deep", 5),
    ]))
    assert profile.charge["creation"] == 100.0
    assert profile.flow_patterns["deep_focus"] == 100.0
    assert set(profile.flow_patterns) == {"deep_focus", "challenge", "clarity", "feedback", "environment"}


# ── Conflict ────────────────────────────────────────────────────────


def test_alternating_answers_oscillate():
    catalog = _conflict_catalog(20)
    answers = [
        Answer(f"C{i}", str(v), v, 9000 - i * 200)
        for i, v in enumerate([1, 5] * 10)
    ]
    resolved = [catalog.resolve(a) for a in answers]
    [score] = calculate_conflict_scores(resolved)

    assert score.pair == ("freedom", "security")
    assert score.oscillation_rate == 1.0
    assert score.resolution == "oscillating"
    assert score.samples == 20


def test_slow_intense_answers_are_suppressed():
    catalog = _conflict_catalog(3)
    resolved = [catalog.resolve(Answer(f"C{i}", "5", 5, 9000)) for i in range(3)]
    [score] = calculate_conflict_scores(resolved)

    assert score.oscillation_rate == 0.0
    assert score.intensity == 100.0
    assert score.resolution == "suppressed"
    assert score.dominant_pole == "security"
    assert score.balance_ratio == 0.0


def test_one_sided_answers_are_polarized():
    catalog = _conflict_catalog(2)
    resolved = [catalog.resolve(Answer(f"C{i}", "1", 1, 3000)) for i in range(2)]
    [score] = calculate_conflict_scores(resolved)
    assert score.balance_ratio == 100.0
    assert score.polarization == 100.0
    assert score.resolution == "polarized"
    assert score.dominant_pole == "freedom"


def test_midpoint_answers_split_evenly():
    catalog = _conflict_catalog(2, with_pole=True)
    resolved = [catalog.resolve(Answer(f"C{i}", "3", 3, 3000)) for i in range(2)]
    [score] = calculate_conflict_scores(resolved)
    assert score.balance_ratio == 50.0
    assert score.resolution == "balanced"


def test_conflict_helpers():
    assert parse_pair("achievement_connection") == ("achievement", "connection")
    assert parse_pair("solo") is None
    assert parse_pair(None) is None
    assert oscillation_rate([1]) == 0.0
    assert oscillation_rate([1, 1, -1]) == 0.5


# ── Context ─────────────────────────────────────────────────────────


def test_context_shift_and_stress_response(answer, resolve):
    resolved = resolve([answer("CX-pressure-1", 4, option_id="achievement")])
    baseline = calculate_motive_scores([])
    profile = calculate_context_profile(resolved, baseline, shift_threshold=5.0)

    pressure = profile.get("pressure")
    assert pressure.motive_scores == {"achievement": 75.0}
    assert pressure.dominant_motive == "achievement"
    assert pressure.shifts == {"achievement": 37.5}
    assert profile.stress_response == "fight"


def test_small_shifts_are_not_reported(answer, resolve):
    resolved = resolve([answer("CX-growth-1", 4, option_id="mastery")])
    baseline = calculate_motive_scores(resolve([answer("MS-mastery-1", 4)]))
    profile = calculate_context_profile(resolved, baseline, shift_threshold=5.0)
    assert profile.get("growth").shifts == {}


def test_no_stress_answers_means_no_stress_response(answer, resolve):
    resolved = resolve([answer("CX-normal-1", 4, option_id="security")])
    profile = calculate_context_profile(resolved, calculate_motive_scores([]))
    assert profile.stress_response is None
    assert [c.context for c in profile.contexts] == ["normal"]


# ── Hidden ──────────────────────────────────────────────────────────


def test_slow_shadow_answers_raise_indicator(answer, resolve):
    resolved = resolve([
        answer("HD-shadow-security", 4, 9000),
        answer("MS-achievement-1", 4, 3000),
        answer("MS-mastery-1", 4, 3000),
    ])
    hidden = calculate_hidden_profile(resolved)

    assert hidden.shadow == {"security": 75.0}
    assert hidden.latency_ratios == {"security": 1.8}
    assert len(hidden.indicators) == 1
    assert "security" in hidden.indicators[0]


def test_hidden_labels_scored_separately(answer, resolve):
    hidden = calculate_hidden_profile(resolve([
        answer("HD-projection-recognition", 5),
        answer("HD-compensation-overwork", 1),
    ]))
    assert hidden.projection == {"recognition": 100.0}
    assert hidden.compensation == {"overwork": 0.0}
    assert hidden.shadow == {}
    assert hidden.indicators == []


# ── Maturity ────────────────────────────────────────────────────────


MATURITY_IDS = ["MT-self_awareness", "MT-emotional_reading", "MT-balance",
                "MT-synthesis", "MT-learning", "MT-resilience"]


@pytest.mark.parametrize("value, level, name", [(5, 4, "Transcendent"), (4, 3, "Integrated"), (3, 2, "Developing")])
def test_maturity_levels(answer, resolve, value, level, name):
    score = calculate_maturity_score(resolve([answer(q, value) for q in MATURITY_IDS]))
    assert score.level == level
    assert score.level_name == name
    assert score.awareness == score.integration == score.growth == score.overall


def test_maturity_default_is_level_one(resolve):
    score = calculate_maturity_score(resolve([]))
    assert score.overall == 37.5
    assert score.level == 1


def test_maturity_level_thresholds():
    assert maturity_level(80) == 4
    assert maturity_level(79.9) == 3
    assert maturity_level(60) == 3
    assert maturity_level(40) == 2
    assert maturity_level(39.9) == 1


# ── Validation ──────────────────────────────────────────────────────


def test_validation_flags_social_desirability(answer, resolve):
    score = calculate_validation_score(resolve([answer("VL-honesty-1", 5), answer("VL-honesty-2", 5)]))
    assert score.honesty == 100.0
    assert score.social_desirability == 100.0
    assert score.flags == ["HIGH_SOCIAL_DESIRABILITY"]
    assert score.is_valid is False


def test_validation_defaults(resolve):
    score = calculate_validation_score(resolve([]))
    assert score.consistency == 50.0
    assert score.honesty == 50.0
    assert score.social_desirability == 0.0
    assert score.is_valid is True


def test_low_honesty_flag(answer, resolve):
    score = calculate_validation_score(resolve([answer("VL-check-1", 4), answer("VL-honesty-1", 1)]))
    assert score.consistency == 75.0
    assert "LOW_HONESTY_SCORE" in score.flags
    assert score.is_valid is False


def test_only_honesty_items_count_toward_social_desirability():
    catalog = QuestionCatalog.from_dicts([
        {"id": "V-check", "category": "validation", "social_desirability": True,
         "options": [{"id": "5", "value": 5, "scores": {"check": "consistency"}}]},
        {"id": "V-honesty", "category": "validation", "social_desirability": True,
         "options": [{"id": "2", "value": 2, "scores": {"honesty": "social"}}]},
    ])
    resolved = [catalog.resolve(Answer("V-check", "5", 5, 3000)), catalog.resolve(Answer("V-honesty", "2", 2, 3000))]
    score = calculate_validation_score(resolved)

    assert score.consistency == 100.0
    assert score.social_desirability == 0.0
    assert "HIGH_SOCIAL_DESIRABILITY" not in score.flags
