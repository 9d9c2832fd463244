from dataclasses import asdict, dataclass
from typing import List

from core.scores import MotiveScore
from core.standardisation import round1

# (minimum score, stage), on the same 20-point bands as the level tables
STAGES = (
    (80.0, "Mastered"),
    (60.0, "Established"),
    (40.0, "Developing"),
    (20.0, "Emerging"),
    (0.0, "Dormant"),
)


@dataclass(frozen=True)
class MotiveStage:
    motive: str
    score: float
    stage: str
    next_stage: str | None
    points_to_next: float
    hint: str

    def to_dict(self) -> dict:
        return asdict(self)


def stage_for(score: float) -> tuple[int, str]:
    """Index into STAGES and the stage name for a 0-100 score."""
    for i, (minimum, name) in enumerate(STAGES):
        if score >= minimum:
            return i, name
    return len(STAGES) - 1, STAGES[-1][1]


def motive_stages(motives: List[MotiveScore]) -> List[MotiveStage]:
    stages: List[MotiveStage] = []
    for m in motives:
        index, name = stage_for(m.score)
        if index == 0:
            stages.append(MotiveStage(m.motive, m.score, name, None, 0.0, "Highest stage reached"))
            continue

        next_minimum, next_name = STAGES[index - 1]
        points = round1(next_minimum - m.score)
        stages.append(
            MotiveStage(
                motive=m.motive,
                score=m.score,
                stage=name,
                next_stage=next_name,
                points_to_next=points,
                hint=f"{points:g} more points to reach {next_name} (at {next_minimum:g})",
            )
        )
    return stages
