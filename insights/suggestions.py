"""
Rule-based development suggestions.
Each rule fires on one metric and cites it in the suggestion's reason.
"""
from typing import Dict, List

from core.scores import HiddenMotiveProfile, MaturityScore, MotiveScore

SHADOW_TRIGGER = 60.0
TENSION_TRIGGER = 40.0
HIGH_TENSION = 60.0
MATURITY_TRIGGER = 60.0
LOW_MATURITY = 40.0

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def _shadow_suggestion(hidden: HiddenMotiveProfile) -> dict | None:
    if not hidden.shadow:
        return None
    label, score = max(hidden.shadow.items(), key=lambda kv: kv[1])
    if score < SHADOW_TRIGGER:
        return None
    return {
        "area": "shadow",
        "priority": "high",
        "reason": f"Shadow motive '{label}' scored {score:g}",
        "actions": [
            f"Notice situations where {label} quietly drives your choices",
            f"Name one goal that openly serves your need for {label}",
        ],
    }


def _tension_suggestion(conflict_map: Dict) -> dict | None:
    highest = conflict_map.get("highest")
    if not highest or highest["tension"] < TENSION_TRIGGER:
        return None
    a, b = highest["pair"]
    return {
        "area": "conflict",
        "priority": "high" if highest["tension"] >= HIGH_TENSION else "medium",
        "reason": f"Tension between {a} and {b} is {highest['tension']:g}",
        "actions": [
            f"Decide in advance which of {a} or {b} leads in recurring trade-offs",
            f"Look for roles or projects that serve {a} and {b} together",
        ],
    }


def _maturity_suggestion(maturity: MaturityScore) -> dict | None:
    if maturity.overall >= MATURITY_TRIGGER:
        return None
    return {
        "area": "maturity",
        "priority": "high" if maturity.overall < LOW_MATURITY else "medium",
        "reason": f"Overall maturity is {maturity.overall:g} ({maturity.level_name})",
        "actions": [
            "Keep a short weekly reflection on what energised and drained you",
            "Ask for feedback on how you react under pressure",
        ],
    }


def _weakest_motive_suggestion(motives: List[MotiveScore]) -> dict | None:
    if not motives:
        return None
    weakest = min(motives, key=lambda m: (m.score, -m.rank))
    return {
        "area": "motive",
        "priority": "low",
        "reason": f"{weakest.motive.capitalize()} is your weakest motive at {weakest.score:g}",
        "actions": [
            f"Try one small activity this week that rewards {weakest.motive}",
        ],
    }


def development_suggestions(
    motives: List[MotiveScore],
    hidden: HiddenMotiveProfile,
    conflict_map: Dict,
    maturity: MaturityScore,
) -> List[dict]:
    suggestions = [
        _shadow_suggestion(hidden),
        _tension_suggestion(conflict_map),
        _maturity_suggestion(maturity),
        _weakest_motive_suggestion(motives),
    ]
    suggestions = [s for s in suggestions if s is not None]
    suggestions.sort(key=lambda s: PRIORITY_ORDER[s["priority"]])
    return suggestions
