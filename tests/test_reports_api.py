import pytest
from fastapi.testclient import TestClient

from web.backend.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _request():
    return {
        "dog": {"name": "Rex", "program_day": 12, "total_program_days": 14},
        "activities": [
            {
                "id": "a1",
                "type": "training",
                "start_time": "2026-03-02T09:00:00",
                "duration": 45,
                "notes": "great recall work",
                "skills_worked": ["Recall"],
            },
            {"id": "a2", "type": "play", "start_time": "2026-03-02T10:00:00", "duration": 20},
        ],
        "skill_assessments": [
            {"skill_id": "recall", "skill_name": "Recall", "level": 4, "previous_level": 3}
        ],
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_report(client):
    response = client.post("/api/v1/reports/generate", json=_request())

    assert response.status_code == 200
    data = response.json()
    assert data["mood"] == "good"
    assert data["total_training_minutes"] == 45
    assert "great recall work" in data["highlights"]
    assert data["summary"] == data["training_summary"]
    assert data["skills_practiced"] == ["Recall"]


def test_generate_derives_duration_from_timestamps(client):
    body = _request()
    body["activities"] = [
        {
            "type": "training",
            "start_time": "2026-03-02T09:00:00",
            "end_time": "2026-03-02T10:05:00",
        }
    ]

    response = client.post("/api/v1/reports/generate", json=body)

    assert response.status_code == 200
    assert response.json()["total_training_minutes"] == 65


def test_generate_rejects_negative_duration(client):
    body = _request()
    body["activities"][0]["duration"] = -10

    response = client.post("/api/v1/reports/generate", json=body)

    assert response.status_code == 400
    assert "negative" in response.json()["detail"]


def test_generate_rejects_unknown_activity_type(client):
    body = _request()
    body["activities"][1]["type"] = "grooming"

    response = client.post("/api/v1/reports/generate", json=body)

    assert response.status_code == 400


def test_generate_requires_dog(client):
    body = _request()
    del body["dog"]

    response = client.post("/api/v1/reports/generate", json=body)

    assert response.status_code == 422


def test_quick_report(client):
    body = {"dog_name": "Rex", "activities": _request()["activities"]}

    response = client.post("/api/v1/reports/quick", json=body)

    assert response.status_code == 200
    assert response.json() == {
        "mood": "good",
        "energy_level": "normal",
        "appetite": "good",
        "potty": "normal",
        "total_training_minutes": 45,
    }


def test_list_templates(client):
    response = client.get("/api/v1/reports/templates")

    assert response.status_code == 200
    assert "graduation_ready" in response.json()["templates"]


def test_apply_template(client):
    response = client.get("/api/v1/reports/templates/first_day", params={"dog_name": "Rex"})

    assert response.status_code == 200
    assert response.json()["summary"].startswith("Welcome Rex!")


def test_unknown_template_is_404(client):
    response = client.get("/api/v1/reports/templates/rainy_day", params={"dog_name": "Rex"})

    assert response.status_code == 404
