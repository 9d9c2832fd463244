"""
Pytest fixtures for the scoring engine. Tests run against the bundled sample
question bank, where every likert option id is its value ("1".."5").
"""

from __future__ import annotations

import pytest

from fixtures.question_bank import sample_catalog
from inference.answer_converter import resolve_answers
from questionnaires.answers import Answer


@pytest.fixture
def catalog():
    return sample_catalog()


@pytest.fixture
def answer():
    """Factory: answer(question_id, value, response_time_ms=3000, option_id=None, timestamp=None)."""

    def _make(question_id, value, response_time_ms=3000.0, option_id=None, timestamp=None):
        return Answer(
            question_id=question_id,
            option_id=option_id if option_id is not None else str(value),
            value=value,
            response_time_ms=response_time_ms,
            timestamp=timestamp,
        )

    return _make


@pytest.fixture
def resolve(catalog):
    """Resolve a list of answers against the sample catalog."""

    def _resolve(answers, against=None):
        resolved, _skipped = resolve_answers(answers, against or catalog)
        return resolved

    return _resolve


@pytest.fixture
def varied_values():
    """20 answer values with no repeats, short extreme runs and an even spread."""
    return [2, 4, 1, 3, 5, 2, 4, 3, 1, 5, 4, 2, 3, 5, 1, 2, 4, 3, 5, 1]


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from api import app

    return TestClient(app)
