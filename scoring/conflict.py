"""
Motive conflict pairs.

Conflict questions carry a subcategory naming the pair, e.g.
"achievement_connection". Each answer puts its weighted value on one side
of the pair (or splits it when balanced), and the sequence of choices is
kept to measure flip-flopping.
"""
from statistics import mean
from typing import Dict, List, Tuple

from core.accumulator import response_time_weight
from core.scores import ConflictScore
from core.standardisation import round1, valid_latency
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import in_category

BALANCED = "balanced"
MIDPOINT = 3

OSCILLATION_THRESHOLD = 0.4
OSCILLATION_MIN_CHOICES = 3
SUPPRESSED_LATENCY_MS = 8000
SUPPRESSED_INTENSITY = 70.0
POLARIZED_THRESHOLD = 40.0


def parse_pair(subcategory: str | None) -> Tuple[str, str] | None:
    if not subcategory:
        return None
    parts = subcategory.split("_")
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


def _side(answer: ResolvedAnswer, pair: Tuple[str, str]) -> str:
    """Which side of the pair an answer chose: the motive name or 'balanced'."""
    pole = answer.tag.pole
    if pole in pair or pole == BALANCED:
        return pole
    if answer.value < MIDPOINT:
        return pair[0]
    if answer.value > MIDPOINT:
        return pair[1]
    return BALANCED


def oscillation_rate(choices: List[int]) -> float:
    """Sign changes between consecutive choices over (n - 1)."""
    if len(choices) < 2:
        return 0.0
    changes = sum(1 for prev, cur in zip(choices, choices[1:]) if prev != cur)
    return changes / (len(choices) - 1)


def classify_resolution(rate: float, choices: int, latency_ms: float,
                        intensity: float, polarization: float) -> str:
    if rate > OSCILLATION_THRESHOLD and choices >= OSCILLATION_MIN_CHOICES:
        return "oscillating"
    if latency_ms > SUPPRESSED_LATENCY_MS and intensity >= SUPPRESSED_INTENSITY:
        return "suppressed"
    if polarization >= POLARIZED_THRESHOLD:
        return "polarized"
    return "balanced"


def calculate_conflict_scores(answers: List[ResolvedAnswer]) -> List[ConflictScore]:
    grouped: Dict[Tuple[str, str], List[ResolvedAnswer]] = {}
    for answer in in_category(answers, Category.CONFLICT):
        pair = parse_pair(answer.subcategory)
        if pair is None:
            continue
        grouped.setdefault(pair, []).append(answer)

    results: List[ConflictScore] = []
    for pair, pair_answers in grouped.items():
        first, second = pair
        mass = {first: 0.0, second: 0.0}
        choices: List[int] = []

        for answer in pair_answers:
            w = answer.weight * response_time_weight(answer.response_time_ms)
            side = _side(answer, pair)
            if side == BALANCED:
                mass[first] += answer.value * w / 2
                mass[second] += answer.value * w / 2
            else:
                mass[side] += answer.value * w
                choices.append(1 if side == first else -1)

        total = mass[first] + mass[second]
        balance_ratio = round1(mass[first] / total * 100) if total > 0 else 50.0
        polarization = round1(abs(balance_ratio - 50) * 2)
        intensity = round1(mean(abs(a.value - MIDPOINT) / 2 * 100 for a in pair_answers))

        latencies = [t for t in (valid_latency(a.response_time_ms) for a in pair_answers) if t is not None]
        avg_latency = round1(mean(latencies)) if latencies else 0.0

        rate = round(oscillation_rate(choices), 3)

        results.append(
            ConflictScore(
                pair=pair,
                balance_ratio=balance_ratio,
                dominant_pole=first if mass[first] >= mass[second] else second,
                polarization=polarization,
                intensity=intensity,
                avg_latency_ms=avg_latency,
                oscillation_rate=rate,
                resolution=classify_resolution(rate, len(choices), avg_latency, intensity, polarization),
                samples=len(pair_answers),
            )
        )
    return results
