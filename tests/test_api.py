"""
Tests for the HTTP surface.
"""

from __future__ import annotations

from core.motive_components import MOTIVE_SOURCES
from fixtures.question_bank import SAMPLE_QUESTION_BANK


def _payload(value=4, response_time_ms=3000):
    return {
        "answers": [
            {"question_id": f"MS-{m}-1", "option_id": str(value), "value": value,
             "response_time_ms": response_time_ms}
            for m in MOTIVE_SOURCES
        ]
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_score_assessment(client):
    response = client.post("/assessment", json=_payload())
    assert response.status_code == 200

    body = response.json()
    result = body["result"]
    assert result["question_count"] == 8
    assert result["resolved_count"] == 8
    assert [m["score"] for m in result["scores"]["motives"]] == [75.0] * 8
    assert result["match"]["primary"]["rank"] == 1
    assert body["message"]


def test_low_reliability_message(client):
    body = client.post("/assessment", json=_payload(value=5, response_time_ms=300)).json()
    assert body["result"]["reliability"]["is_valid"] is False
    assert body["message"] == "Assessment completed with low reliability"


def test_empty_submission_rejected(client):
    assert client.post("/assessment", json={"answers": []}).status_code == 422


def test_out_of_range_value_rejected(client):
    payload = _payload()
    payload["answers"][0]["value"] = 7
    assert client.post("/assessment", json=payload).status_code == 422


def test_negative_response_time_rejected(client):
    assert client.post("/assessment", json=_payload(response_time_ms=-1)).status_code == 422


def test_list_archetypes(client):
    archetypes = client.get("/archetypes").json()["archetypes"]
    assert len(archetypes) == 8
    conqueror = archetypes[0]
    assert conqueror["archetype"] == "conqueror"
    assert conqueror["conditions"]["primary"] == {"motive": "achievement", "threshold": 70}
    assert len(conqueror["personas"]) == 6


def test_question_stats(client):
    stats = client.get("/questions/stats").json()
    assert stats["total"] == len(SAMPLE_QUESTION_BANK)


def test_mixed_timestamp_styles_are_scored(client):
    payload = _payload()
    payload["answers"][0]["timestamp"] = "2024-01-01T10:00:05"
    payload["answers"][1]["timestamp"] = "2024-01-01T10:00:00Z"
    payload["answers"] = payload["answers"][:2]

    response = client.post("/assessment", json=payload)
    assert response.status_code == 200
    assert response.json()["result"]["chronological"] is False
