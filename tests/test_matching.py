"""
Tests for archetype scoring and persona similarity.
"""

from __future__ import annotations

import random

import pytest

from core.motive_components import MOTIVE_SOURCES
from core.scores import MotiveScore
from fixtures.archetype_profiles import ARCHETYPE_PROFILES, ARCHETYPES, PERSONA_PROFILES
from matching.aggregate import condition_adjustment, weighted_score
from matching.archetypes import match_archetypes
from matching.engine import match_profile
from matching.personas import match_personas, persona_similarity


def _flat(value):
    return {m: value for m in MOTIVE_SOURCES}


def test_archetype_weights_sum_to_one():
    for profile in ARCHETYPE_PROFILES.values():
        assert sum(profile["weights"].values()) == pytest.approx(1.0)


def test_every_archetype_has_personas():
    assert set(PERSONA_PROFILES) == set(ARCHETYPES)
    for personas in PERSONA_PROFILES.values():
        for _key, _name, _origin, vector in personas:
            assert set(vector) == set(MOTIVE_SOURCES)
            assert all(0 <= v <= 1 for v in vector.values())


def test_maxed_profile_is_clamped():
    matches = {m.archetype: m for m in match_archetypes(_flat(100))}

    assert all(m.score <= 100 for m in matches.values())
    # excluded by security above its ceiling
    assert matches["conqueror"].score == 95.0
    assert matches["conqueror"].adjustment == -5.0
    assert matches["sage"].score == 100.0
    assert matches["sage"].base_score == 100.0


def test_zero_profile_keeps_fixed_order():
    matches = match_archetypes(_flat(0))
    assert all(m.score == 0.0 for m in matches)
    assert [m.archetype for m in matches] == ARCHETYPES
    assert [m.rank for m in matches] == list(range(1, 9))


def test_unmeasured_motives_count_as_zero():
    assert weighted_score({}, {"achievement": 0.5}) == 0.0
    assert weighted_score({"achievement": 80}, {"achievement": 0.5}) == pytest.approx(40.0)


def test_condition_adjustment_rules():
    conditions = {"primary": ("achievement", 70), "secondary": ("freedom", 50), "exclude": ("security", 60)}
    assert condition_adjustment({"achievement": 70, "freedom": 50}, conditions) == 15.0
    assert condition_adjustment({"achievement": 69.9}, conditions) == -15.0
    assert condition_adjustment({"achievement": 80, "security": 60}, conditions) == 10.0
    assert condition_adjustment({"achievement": 80, "security": 61}, conditions) == -5.0


def test_archetype_ranking_for_driven_profile():
    motives = {"achievement": 90, "freedom": 80, "mastery": 60, "recognition": 60,
               "security": 20, "creation": 30, "connection": 30, "adventure": 30}
    matches = match_archetypes(motives)
    assert [m.archetype for m in matches[:2]] == ["conqueror", "rebel"]
    assert matches[0].score == 88.5
    assert matches[1].score == 68.5


def test_exact_persona_vector_scores_100():
    _key, _name, _origin, vector = PERSONA_PROFILES["conqueror"][0]
    user = {m: v * 100 for m, v in vector.items()}

    [top] = match_personas(user, "conqueror", top_n=1)
    assert top.persona == "napoleon"
    assert top.similarity == 100.0
    assert top.rank == 1


def test_similarity_floor():
    worst = {m: 100.0 for m in MOTIVE_SOURCES}
    assert persona_similarity(worst, {m: 0.0 for m in MOTIVE_SOURCES}) == pytest.approx(30.0)

    rng = random.Random(7)
    for _ in range(50):
        user = {m: rng.uniform(0, 100) for m in MOTIVE_SOURCES}
        for archetype in ARCHETYPES:
            for match in match_personas(user, archetype, top_n=6):
                assert 30.0 <= match.similarity <= 100.0


def test_missing_motive_counts_as_midpoint():
    assert persona_similarity({}, _flat(0.5)) == pytest.approx(100.0)


def test_invalid_archetype_rejected():
    with pytest.raises(ValueError):
        match_personas(_flat(50), "wizard")


def test_personas_ranked_and_limited():
    matches = match_personas(_flat(60), "sage")
    assert len(matches) == 3
    assert [m.rank for m in matches] == [1, 2, 3]
    similarities = [m.similarity for m in matches]
    assert similarities == sorted(similarities, reverse=True)


def test_match_profile():
    motives = [MotiveScore(m, 50.0) for m in MOTIVE_SOURCES]
    match = match_profile(motives, top_personas=2)

    assert match.primary.rank == 1
    assert match.secondary.rank == 2
    assert len(match.archetypes) == 8
    assert len(match.personas) == 2
    assert match.primary_persona.archetype == match.primary.archetype
    assert match.to_dict()["primary"]["archetype"] == match.primary.archetype
