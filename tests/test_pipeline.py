"""
End-to-end tests for the assessment pipeline and answer conversion.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from core.motive_components import MOTIVE_SOURCES
from inference.answer_converter import answer_from_dict, answers_from_dicts, ensure_chronological
from inference.pipeline import run_assessment
from questionnaires.answers import Answer


def _full_answer_set(catalog, seed):
    rng = random.Random(seed)
    answers = []
    for question in catalog:
        option = rng.choice(question.options)
        answers.append(Answer(question.id, option.id, option.value, rng.uniform(800, 9000)))
    return answers


# ── Answer conversion ──────────────────────────────────────────────


def test_answer_from_dict_accepts_camel_case():
    answer = answer_from_dict({
        "questionId": "MS-achievement-1",
        "optionId": 4,
        "value": 4,
        "responseTimeMs": 2500,
        "timestamp": "2024-05-01T10:00:00Z",
    })
    assert answer.question_id == "MS-achievement-1"
    assert answer.option_id == "4"
    assert answer.response_time_ms == 2500.0
    assert answer.timestamp.year == 2024


@pytest.mark.parametrize(
    "item",
    [
        {"option_id": "1", "value": 1},
        {"question_id": "Q", "option_id": "1", "value": "high"},
        {"question_id": "Q", "option_id": "1", "value": 1, "response_time_ms": "slow"},
        {"question_id": "Q", "option_id": "1", "value": 1, "timestamp": "yesterday"},
    ],
)
def test_answer_from_dict_rejects_bad_shapes(item):
    with pytest.raises(ValueError):
        answer_from_dict(item)


def test_reversed_timestamps_are_reordered(answer, caplog):
    start = datetime(2024, 5, 1, 10, 0, 0)
    answers = [answer(f"MS-{m}-1", 4, timestamp=start - timedelta(seconds=i))
               for i, m in enumerate(MOTIVE_SOURCES[:4])]

    with caplog.at_level("WARNING"):
        ordered, chronological = ensure_chronological(answers)

    assert chronological is False
    assert [a.question_id for a in ordered] == [a.question_id for a in reversed(answers)]
    assert "chronological" in caplog.text


def test_partial_timestamps_leave_order_alone(answer):
    answers = [answer("A", 3, timestamp=datetime(2024, 5, 1)), answer("B", 3)]
    ordered, chronological = ensure_chronological(answers)
    assert chronological is True
    assert ordered == answers


# ── Pipeline ───────────────────────────────────────────────────────


def test_empty_answer_set(catalog):
    result = run_assessment([], catalog)

    assert result.question_count == 0
    assert result.resolved_count == 0
    assert all(m.score == 37.5 for m in result.scores.motives)
    assert result.reliability.overall == 0.0
    assert result.reliability.grade == "F"
    assert result.is_valid is False
    # every archetype misses its primary condition, so the fixed order decides
    assert result.primary_archetype.archetype == "conqueror"
    assert result.primary_archetype.score == 22.5
    assert result.scores.maturity.level == 1


def test_optimal_answers_score_full_motives(catalog, answer):
    answers = [answer(f"MS-{m}-1", 5) for m in MOTIVE_SOURCES]
    result = run_assessment(answers, catalog)
    assert [m.score for m in result.scores.motives] == [100.0] * 8
    assert result.total_time_ms == 24000.0


def test_unknown_questions_are_skipped(catalog, answer):
    answers = [answer("MS-achievement-1", 5), answer("does-not-exist", 3), answer("MS-mastery-1", 9, option_id="9")]
    result = run_assessment(answers, catalog)

    assert result.question_count == 3
    assert result.resolved_count == 1
    assert result.skipped == ["does-not-exist", "MS-mastery-1"]


def test_scoring_is_idempotent(catalog):
    answers = _full_answer_set(catalog, seed=11)
    first = run_assessment(answers, catalog)
    second = run_assessment(list(answers), catalog)
    assert first.to_dict() == second.to_dict()


def test_out_of_order_batch_is_flagged(catalog, answer):
    start = datetime(2024, 5, 1, 10, 0, 0)
    answers = [answer(f"MS-{m}-1", 4, timestamp=start - timedelta(minutes=i))
               for i, m in enumerate(MOTIVE_SOURCES)]
    result = run_assessment(answers, catalog)
    assert result.chronological is False


@pytest.mark.parametrize("seed", range(8))
def test_result_properties_hold_for_random_sets(catalog, seed):
    result = run_assessment(_full_answer_set(catalog, seed), catalog)
    scores = result.scores

    assert sorted(m.rank for m in scores.motives) == list(range(1, 9))
    assert sorted(a.rank for a in result.match.archetypes) == list(range(1, 9))
    assert all(0 <= m.score <= 100 for m in scores.motives)
    assert all(0 <= a.score <= 100 for a in result.match.archetypes)
    assert all(d.approach + d.avoidance == pytest.approx(100.0) for d in scores.direction)
    assert all(30 <= p.similarity <= 100 for p in result.match.personas)
    assert 0 <= result.reliability.overall <= 100
    assert result.resolved_count == len(catalog)

    data = result.to_dict()
    assert set(data) >= {"scores", "reliability", "insights", "match", "response_time"}
    assert isinstance(data["scores"]["conflicts"][0]["pair"], list)


def test_mixed_naive_and_aware_timestamps(catalog, answer):
    answers = [
        answer("MS-achievement-1", 4, timestamp=datetime(2024, 1, 1, 10, 0, 5)),
        answer("MS-mastery-1", 4, timestamp=datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)),
    ]
    ordered, chronological = ensure_chronological(answers)
    assert chronological is False
    assert [a.question_id for a in ordered] == ["MS-mastery-1", "MS-achievement-1"]

    result = run_assessment(answers, catalog)
    assert result.resolved_count == 2
    assert result.chronological is False


def test_naive_timestamp_strings_are_read_as_utc():
    answer = answer_from_dict({"question_id": "Q", "option_id": "1", "value": 1,
                               "timestamp": "2024-01-01T10:00:05"})
    assert answer.timestamp.tzinfo == timezone.utc


def test_unknown_answers_do_not_affect_reliability(catalog, answer, varied_values):
    answers = [answer(f"MS-{m}-{n}", v)
               for (m, n), v in zip([(m, n) for m in MOTIVE_SOURCES for n in (1, 2)], varied_values)]
    stale = [answer(f"STALE-{i}", 5) for i in range(12)]

    clean = run_assessment(answers, catalog)
    noisy = run_assessment(answers + stale, catalog)

    assert noisy.resolved_count == 16
    assert len(noisy.skipped) == 12
    assert noisy.scores.to_dict() == clean.scores.to_dict()
    assert noisy.reliability == clean.reliability
    assert noisy.response_time == clean.response_time
    assert noisy.total_time_ms == clean.total_time_ms
