"""
Sample question bank for local runs and tests.

A small item bank in the same JSON shape `load_catalog` reads, covering
every category. Item text is omitted: the engine never reads it.
"""
from core.motive_components import (
    CONTEXTS,
    DRAIN_SOURCES,
    FLOW_PATTERNS,
    IGNITION_CONDITIONS,
    MOTIVE_SOURCES,
    OPERATING_AXES,
)
from questionnaires.catalog import QuestionCatalog

CONFLICT_PAIRS = ["achievement_connection", "freedom_security", "mastery_recognition"]
PROJECTION_LABELS = ["recognition", "security", "freedom", "connection"]
COMPENSATION_LABELS = ["overwork", "control"]
MATURITY_ITEMS = [
    ("awareness", "self_awareness"),
    ("awareness", "emotional_reading"),
    ("integration", "balance"),
    ("integration", "synthesis"),
    ("growth", "learning"),
    ("growth", "resilience"),
]


def _likert(qid, category, subcategory=None, is_lite=False, **scores):
    return {
        "id": qid,
        "category": category,
        "subcategory": subcategory,
        "type": "likert",
        "is_lite": is_lite,
        "options": [{"id": str(v), "value": v, "scores": dict(scores)} for v in range(1, 6)],
    }


def _bipolar(qid, axis, left, right):
    # Strong / mild preference for each pole
    return {
        "id": qid,
        "category": "operating",
        "subcategory": axis,
        "type": "bipolar",
        "options": [
            {"id": "L2", "value": 5, "scores": {"axis": axis, "pole": left}},
            {"id": "L1", "value": 3, "scores": {"axis": axis, "pole": left}},
            {"id": "R1", "value": 3, "scores": {"axis": axis, "pole": right}},
            {"id": "R2", "value": 5, "scores": {"axis": axis, "pole": right}},
        ],
    }


def _scenario(qid, context):
    return {
        "id": qid,
        "category": "context",
        "subcategory": context,
        "type": "scenario",
        "options": [
            {"id": motive, "value": 4, "scores": {"context": context, "motive": motive}}
            for motive in MOTIVE_SOURCES
        ],
    }


def build_sample_bank() -> list:
    bank = []

    for motive in MOTIVE_SOURCES:
        for n in (1, 2):
            bank.append(_likert(f"MS-{motive}-{n}", "motive_source", motive, is_lite=n == 1, motive=motive))

    for condition in IGNITION_CONDITIONS:
        bank.append(_likert(f"IG-{condition}", "ignition", condition, ignition=condition))

    for motive in MOTIVE_SOURCES:
        for direction in ("approach", "avoidance"):
            bank.append(_likert(f"DR-{motive}-{direction}", "direction", motive,
                                motive=motive, direction=direction))

    for axis, (left, right) in OPERATING_AXES.items():
        for n in (1, 2):
            bank.append(_bipolar(f"OP-{axis}-{n}", axis, left, right))

    for motive in MOTIVE_SOURCES:
        bank.append(_likert(f"EN-charge-{motive}", "energy", "fuel", charge=motive))
    for stressor in DRAIN_SOURCES:
        bank.append(_likert(f"EN-drain-{stressor}", "energy", "drain", drain=stressor))
    for label in FLOW_PATTERNS:
        bank.append(_likert(f"EN-flow-{label}", "energy", "flow", flow=label))

    for pair in CONFLICT_PAIRS:
        for n in (1, 2, 3):
            bank.append(_likert(f"CF-{pair}-{n}", "conflict", pair))

    for context in CONTEXTS:
        for n in (1, 2):
            bank.append(_scenario(f"CX-{context}-{n}", context))

    for motive in MOTIVE_SOURCES:
        bank.append(_likert(f"HD-shadow-{motive}", "hidden", "shadow", shadow=motive))
    for label in PROJECTION_LABELS:
        bank.append(_likert(f"HD-projection-{label}", "hidden", "projection", projection=label))
    for label in COMPENSATION_LABELS:
        bank.append(_likert(f"HD-compensation-{label}", "hidden", "compensation", compensation=label))

    for subscale, label in MATURITY_ITEMS:
        bank.append(_likert(f"MT-{label}", "maturity", subscale, maturity=label))

    for n in (1, 2):
        bank.append(_likert(f"VL-check-{n}", "validation", "consistency", check="consistency"))
    for n in (1, 2):
        item = _likert(f"VL-honesty-{n}", "validation", "honesty", honesty="social")
        item["social_desirability"] = True
        bank.append(item)

    return bank


SAMPLE_QUESTION_BANK = build_sample_bank()


def sample_catalog() -> QuestionCatalog:
    return QuestionCatalog.from_dicts(SAMPLE_QUESTION_BANK)
