import math
from statistics import mean, median, pstdev


SCALE_MIN = 1.0
SCALE_MAX = 5.0


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def rescale(mean_value: float) -> float:
    """
    Map a 1-5 mean onto 0-100: (mean - 1) / 4 * 100, clamped.
    """
    scaled = (mean_value - SCALE_MIN) / (SCALE_MAX - SCALE_MIN) * 100.0
    return clamp(scaled)


def round1(value: float) -> float:
    return round(value, 1)


def assign_ranks(records: list, key: str = "score") -> list:
    """
    Sort records descending by `key` and number them 1..N.

    Python's sort is stable, so equal scores keep their input order.
    Records are returned as new objects via their `with_rank` method.
    """
    ordered = sorted(records, key=lambda r: getattr(r, key), reverse=True)
    return [r.with_rank(i) for i, r in enumerate(ordered, start=1)]


def latency_stats(latencies: list[float]) -> dict[str, float]:
    """
    Mean, median, population standard deviation and coefficient of
    variation for a list of response times.
    """
    if not latencies:
        return {"mean": 0.0, "median": 0.0, "std": 0.0, "cv": 0.0}

    avg = mean(latencies)
    std = pstdev(latencies) if len(latencies) > 1 else 0.0
    cv = std / avg if avg > 0 else 0.0
    return {"mean": avg, "median": median(latencies), "std": std, "cv": cv}


def variance(values: list[float]) -> float:
    """Population variance; 0.0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    avg = sum(values) / len(values)
    return sum((v - avg) ** 2 for v in values) / len(values)


def is_finite(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def valid_latency(response_time_ms) -> float | None:
    """A usable response time in ms, or None when missing, negative or not finite."""
    if not is_finite(response_time_ms) or response_time_ms < 0:
        return None
    return float(response_time_ms)
