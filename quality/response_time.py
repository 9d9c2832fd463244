"""
Response-time profile.

Deterministic statistics over the answer latencies: speed, spread, and
drift between the first and second half of the session. The fatigue figure
assumes the answers are in submission order.
"""
from dataclasses import asdict, dataclass
from typing import List

from core.standardisation import clamp, latency_stats, round1, valid_latency
from questionnaires.answers import ResolvedAnswer

FAST_MS = 1000
SLOW_MS = 10000
OPTIMAL_RANGE_MS = (2000, 6000)

SLOWING_RATIO = 1.3
RUSHING_RATIO = 0.7
MIN_FATIGUE_SAMPLES = 4

# (minimum score, grade)
GRADE_CUTOFFS = ((90, "S"), (75, "A"), (60, "B"), (45, "C"), (30, "D"))


def grade_for(score: float) -> str:
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return "F"


@dataclass(frozen=True)
class ResponseTimeProfile:
    samples: int
    mean_ms: float
    median_ms: float
    fast_ratio: float
    slow_ratio: float
    optimal_ratio: float
    cv: float
    consistency: float
    fatigue_ratio: float
    fatigue: str
    decision_speed: float
    deliberation: float
    quality_score: float
    grade: str

    def to_dict(self) -> dict:
        return asdict(self)


def _fatigue_ratio(latencies: List[float]) -> float:
    if len(latencies) < MIN_FATIGUE_SAMPLES:
        return 1.0
    half = len(latencies) // 2
    first = sum(latencies[:half]) / half
    second = sum(latencies[half:]) / (len(latencies) - half)
    if first <= 0:
        return 1.0
    return second / first


def _fatigue_label(ratio: float) -> str:
    if ratio > SLOWING_RATIO:
        return "slowing"
    if ratio < RUSHING_RATIO:
        return "rushing"
    return "stable"


def empty_profile() -> ResponseTimeProfile:
    return ResponseTimeProfile(
        samples=0, mean_ms=0.0, median_ms=0.0, fast_ratio=0.0, slow_ratio=0.0,
        optimal_ratio=0.0, cv=0.0, consistency=0.0, fatigue_ratio=1.0,
        fatigue="stable", decision_speed=0.0, deliberation=0.0,
        quality_score=0.0, grade="F",
    )


def analyse_response_times(answers: List[ResolvedAnswer]) -> ResponseTimeProfile:
    latencies = [t for t in (valid_latency(a.response_time_ms) for a in answers) if t is not None]
    if not latencies:
        return empty_profile()

    n = len(latencies)
    stats = latency_stats(latencies)

    fast_ratio = sum(1 for t in latencies if t < FAST_MS) / n
    slow_ratio = sum(1 for t in latencies if t > SLOW_MS) / n
    low, high = OPTIMAL_RANGE_MS
    optimal_ratio = sum(1 for t in latencies if low <= t <= high) / n

    consistency = clamp(100 - 60 * stats["cv"])
    fatigue_ratio = _fatigue_ratio(latencies)
    fatigue_penalty = clamp(abs(fatigue_ratio - 1) * 100)

    decision_speed = clamp(100 - stats["median"] / 150)
    deliberation = clamp(optimal_ratio * 100 - fast_ratio * 50 + 20)

    quality = clamp(
        0.35 * optimal_ratio * 100
        + 0.25 * consistency
        + 0.20 * (100 - fast_ratio * 100)
        + 0.10 * (100 - slow_ratio * 100)
        + 0.10 * (100 - fatigue_penalty)
    )

    return ResponseTimeProfile(
        samples=n,
        mean_ms=round1(stats["mean"]),
        median_ms=round1(stats["median"]),
        fast_ratio=round(fast_ratio, 3),
        slow_ratio=round(slow_ratio, 3),
        optimal_ratio=round(optimal_ratio, 3),
        cv=round(stats["cv"], 3),
        consistency=round1(consistency),
        fatigue_ratio=round(fatigue_ratio, 3),
        fatigue=_fatigue_label(fatigue_ratio),
        decision_speed=round1(decision_speed),
        deliberation=round1(deliberation),
        quality_score=round1(quality),
        grade=grade_for(quality),
    )
