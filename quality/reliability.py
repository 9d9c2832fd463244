"""
Deterministic answer-set reliability checks.
Pure pattern analysis over the raw answer values and the response-time profile.
"""
from collections import Counter
from dataclasses import asdict, dataclass, field
from statistics import pvariance
from typing import List

import config
from core.standardisation import clamp, round1
from quality.response_time import ResponseTimeProfile, grade_for
from questionnaires.answers import ResolvedAnswer

EXTREME_VALUES = {1, 5}
MIDPOINT = 3

# (minimum identical run, penalty), checked longest first
STREAK_PENALTIES = ((10, 30), (7, 20), (5, 10))
EXTREME_STREAK_START = 3
EXTREME_STREAK_WARNING = 5
MAX_PENALTY = 50.0

DISTINCT_PENALTIES = {1: 40, 2: 25}
MIN_ANSWERS_FOR_DISTINCT_CHECK = 5

MIDPOINT_PENALTIES = ((0.60, 20), (0.40, 10))
FAST_PENALTIES = ((0.30, 20), (0.15, 10))

STRAIGHT_LINE_RATIO = 0.45
STRAIGHT_LINE_PENALTY = 10

PATTERN_SHARE = 0.7
CONSISTENCY_SHARE = 0.3

WARNING_TEXT = {
    "straight_lining": "Long run of identical answers",
    "extreme_streak": "Long run of extreme answers (all 1s or 5s)",
    "low_distinct_values": "Only one or two different answer values were used",
    "midpoint_overuse": "Heavy use of the neutral midpoint answer",
    "fast_responses": "Many answers were given in under a second",
    "moderate_straight_lining": "One answer value dominates the whole set",
}


@dataclass(frozen=True)
class ReliabilityScore:
    overall: float
    grade: str
    is_valid: bool
    pattern_validity: float
    consistency: float
    penalty: float
    streak_penalty: float
    extreme_penalty: float
    straight_line_penalty: float
    longest_streak: int
    longest_extreme_streak: int
    distinct_values: int
    midpoint_ratio: float
    fast_ratio: float
    straight_line_ratio: float
    variance: float
    flags: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def longest_run(values: List[int], predicate=None) -> int:
    """
    Longest run of consecutive equal values, or of consecutive values
    matching `predicate` when one is given.
    """
    best = current = 0
    previous = None
    for v in values:
        if predicate is not None:
            current = current + 1 if predicate(v) else 0
        else:
            current = current + 1 if v == previous else 1
        previous = v
        best = max(best, current)
    return best


def streak_penalty(length: int) -> float:
    for min_length, penalty in STREAK_PENALTIES:
        if length >= min_length:
            return float(penalty)
    return 0.0


def extreme_streak_penalty(length: int) -> float:
    if length < EXTREME_STREAK_START:
        return 0.0
    return min(MAX_PENALTY, 3 * (length - 2) ** 1.5)


def _tiered(ratio: float, tiers) -> float:
    for threshold, penalty in tiers:
        if ratio > threshold:
            return float(penalty)
    return 0.0


def _no_answers() -> ReliabilityScore:
    return ReliabilityScore(
        overall=0.0, grade="F", is_valid=False, pattern_validity=0.0,
        consistency=0.0, penalty=0.0, streak_penalty=0.0, extreme_penalty=0.0,
        straight_line_penalty=0.0, longest_streak=0, longest_extreme_streak=0,
        distinct_values=0, midpoint_ratio=0.0, fast_ratio=0.0,
        straight_line_ratio=0.0, variance=0.0,
        flags=["no_answers"], warnings=["No answers were submitted"],
    )


def assess_reliability(
    answers: List[ResolvedAnswer],
    time_profile: ResponseTimeProfile,
    min_score: float | None = None,
    max_warnings: int | None = None,
) -> ReliabilityScore:
    """
    Combine straight-lining, extreme-streak, distinct-value, midpoint and
    fast-response checks into one 0-100 reliability figure.

    The result is valid when the figure reaches `min_score` and no more than
    `max_warnings` warnings were raised. Values are read from the selected
    options, the same values the calculators score.
    """
    min_score = config.MIN_RELIABLE_SCORE if min_score is None else min_score
    max_warnings = config.MAX_RELIABILITY_WARNINGS if max_warnings is None else max_warnings

    values = [a.value for a in answers]
    if not values:
        return _no_answers()

    n = len(values)
    flags: List[str] = []

    longest = longest_run(values)
    longest_extreme = longest_run(values, lambda v: v in EXTREME_VALUES)
    same_penalty = streak_penalty(longest)
    extreme_penalty = extreme_streak_penalty(longest_extreme)
    if same_penalty > 0:
        flags.append("straight_lining")
    if longest_extreme >= EXTREME_STREAK_WARNING:
        flags.append("extreme_streak")
    penalty = min(MAX_PENALTY, same_penalty + extreme_penalty)

    distinct = len(set(values))
    distinct_penalty = 0.0
    if n >= MIN_ANSWERS_FOR_DISTINCT_CHECK and distinct in DISTINCT_PENALTIES:
        distinct_penalty = float(DISTINCT_PENALTIES[distinct])
        flags.append("low_distinct_values")

    midpoint_ratio = values.count(MIDPOINT) / n
    midpoint_penalty = _tiered(midpoint_ratio, MIDPOINT_PENALTIES)
    if midpoint_penalty:
        flags.append("midpoint_overuse")

    fast_penalty = _tiered(time_profile.fast_ratio, FAST_PENALTIES)
    if fast_penalty:
        flags.append("fast_responses")

    most_common_count = Counter(values).most_common(1)[0][1]
    straight_line_ratio = most_common_count / n
    straight_line_penalty = 0.0
    if n >= MIN_ANSWERS_FOR_DISTINCT_CHECK and straight_line_ratio >= STRAIGHT_LINE_RATIO:
        straight_line_penalty = float(STRAIGHT_LINE_PENALTY)
        flags.append("moderate_straight_lining")

    pattern_validity = clamp(100 - distinct_penalty - midpoint_penalty - fast_penalty)

    # Without at least two latencies there is no timing evidence either way
    consistency = time_profile.consistency if time_profile.samples >= 2 else 100.0

    overall = clamp(
        PATTERN_SHARE * pattern_validity
        + CONSISTENCY_SHARE * consistency
        - straight_line_penalty
        - penalty
    )
    warnings = [WARNING_TEXT[f] for f in flags]

    return ReliabilityScore(
        overall=round1(overall),
        grade=grade_for(overall),
        is_valid=overall >= min_score and len(warnings) <= max_warnings,
        pattern_validity=round1(pattern_validity),
        consistency=round1(consistency),
        penalty=round1(penalty),
        streak_penalty=same_penalty,
        extreme_penalty=round1(extreme_penalty),
        straight_line_penalty=straight_line_penalty,
        longest_streak=longest,
        longest_extreme_streak=longest_extreme,
        distinct_values=distinct,
        midpoint_ratio=round(midpoint_ratio, 3),
        fast_ratio=time_profile.fast_ratio,
        straight_line_ratio=round(straight_line_ratio, 3),
        variance=round(pvariance(values), 3) if n >= 2 else 0.0,
        flags=flags,
        warnings=warnings,
    )
