"""
Confidence-weighted score accumulation.

Every dimension calculator collects (value, weight, response time) triples
per key and reduces them to a single weighted mean on the 1-5 scale.
"""
from core.standardisation import rescale, valid_latency

# Neutral mean used by every dimension when nothing was measured
NEUTRAL_MEAN = 2.5

# (upper bound in ms, weight). Fast taps and long stalls carry less signal
# than answers given in the 2-4 second deliberation band.
RESPONSE_TIME_CURVE = (
    (500, 0.3),
    (1000, 0.6),
    (2000, 0.85),
    (4000, 1.0),
    (6000, 0.95),
    (10000, 0.8),
    (15000, 0.6),
)
SLOWEST_WEIGHT = 0.4


def response_time_weight(response_time_ms: float | None) -> float:
    response_time_ms = valid_latency(response_time_ms)
    if response_time_ms is None:
        return 1.0
    for upper_ms, weight in RESPONSE_TIME_CURVE:
        if response_time_ms < upper_ms:
            return weight
    return SLOWEST_WEIGHT


class ScoreAccumulator:
    def __init__(self):
        self._values: list[float] = []
        self._weights: list[float] = []
        self._times: list[float | None] = []

    def add(self, value: float, weight: float = 1.0, response_time_ms: float | None = None):
        self._values.append(float(value))
        self._weights.append(float(weight))
        self._times.append(response_time_ms)

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def total_weight(self) -> float:
        return sum(
            w * response_time_weight(t)
            for w, t in zip(self._weights, self._times)
        )

    @property
    def mass(self) -> float:
        """Sum of value x effective weight."""
        return sum(
            v * w * response_time_weight(t)
            for v, w, t in zip(self._values, self._weights, self._times)
        )

    @property
    def response_times(self) -> list[float]:
        return [t for t in map(valid_latency, self._times) if t is not None]

    def mean(self, default: float = NEUTRAL_MEAN) -> float:
        """
        Weighted mean on the 1-5 scale.

        Each sample counts with its structural weight multiplied by the
        response-time weight. Returns `default` when nothing (or only
        zero weight) was accumulated.
        """
        numerator = 0.0
        denominator = 0.0
        for value, weight, rt in zip(self._values, self._weights, self._times):
            w = weight * response_time_weight(rt)
            numerator += value * w
            denominator += w

        if denominator <= 0:
            return default
        return numerator / denominator

    def score(self, default: float = NEUTRAL_MEAN) -> float:
        """Weighted mean rescaled to 0-100."""
        return rescale(self.mean(default))
