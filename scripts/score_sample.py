"""
Score a simulated respondent against the sample question bank and print
the headline results.

    python -m scripts.score_sample
"""
from datetime import datetime, timedelta

from config import configure_logging
from fixtures.question_bank import sample_catalog
from inference.pipeline import run_assessment
from questionnaires.answers import Answer
from questionnaires.questions import Category


def build_test_motives():
    return {
        "achievement": 0.85,
        "mastery": 0.70,
        "creation": 0.40,
        "recognition": 0.65,
        "connection": 0.35,
        "security": 0.25,
        "freedom": 0.75,
        "adventure": 0.60,
    }


def _likert_value(level: float) -> int:
    return max(1, min(5, round(1 + 4 * level)))


def simulate_answers(catalog, motives):
    top_motive = max(motives, key=motives.get)
    start = datetime(2024, 1, 1, 9, 0, 0)
    answers = []

    for i, question in enumerate(catalog):
        tag = question.options[0].tag
        motive = getattr(tag, "motive", None) or getattr(tag, "charge", None) or getattr(tag, "shadow", None)

        if question.category == Category.CONTEXT:
            option = question.option(top_motive)
        elif question.category == Category.OPERATING:
            option = question.options[i % len(question.options)]
        elif motive in motives:
            value = _likert_value(motives[motive])
            if getattr(tag, "direction", None) == "avoidance":
                value = 6 - value
            option = next(o for o in question.options if o.value == value)
        else:
            option = question.options[(i % 3) + 1]

        answers.append(Answer(
            question_id=question.id,
            option_id=option.id,
            value=option.value,
            response_time_ms=2200 + (i * 370) % 2800,
            timestamp=start + timedelta(seconds=6 * i),
        ))
    return answers


def main():
    configure_logging()
    catalog = sample_catalog()
    result = run_assessment(simulate_answers(catalog, build_test_motives()), catalog)

    print("\n===== MOTIVE PROFILE =====\n")
    for m in result.scores.motives:
        print(f"{m.rank}. {m.motive:<12} {m.score:5.1f}")

    print("\n===== ARCHETYPES =====\n")
    for a in result.match.archetypes:
        print(f"{a.rank}. {a.emoji} {a.name:<15} {a.score:5.1f}")

    print("\n===== PERSONAS =====\n")
    for p in result.match.personas:
        print(f"{p.rank}. {p.name} ({p.origin})  {p.similarity:.1f}")

    r = result.reliability
    print(f"\nReliability: {r.overall:.1f} ({r.grade}), valid={r.is_valid}")
    for w in r.warnings:
        print(f"  - {w}")

    sync = result.insights.sync
    print(f"\nLevel {sync.level}: {sync.level_name} ({sync.next_level_hint})")


if __name__ == "__main__":
    main()
