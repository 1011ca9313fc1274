"""Tests for the training statistics HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _body(**overrides) -> dict:
    body = {
        "action_count": 15000,
        "training_type": "Running",
        "duration_h": 1.5,
        "weight_kg": 75,
    }
    body.update(overrides)
    return body


class TestServiceEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["service"] == "trainings-calculator-api"


class TestTrainingTypes:
    def test_lists_registered_types(self, client):
        response = client.get("/api/v1/trainings/types")
        assert response.status_code == 200
        by_id = {t["training_type"]: t for t in response.json()}
        assert set(by_id) == {"running", "walking", "swimming"}
        assert by_id["swimming"]["display_name"] == "Swimming"
        assert "Плавание" in by_id["swimming"]["aliases"]
        assert "height_cm" in by_id["walking"]["required_fields"]


class TestSummary:
    def test_running_summary(self, client):
        response = client.post("/api/v1/trainings/summary", json=_body())
        assert response.status_code == 200
        data = response.json()
        assert data["training_type"] == "running"
        assert data["distance_km"] == pytest.approx(9.75)
        assert data["mean_speed_kmh"] == pytest.approx(6.5)
        assert data["calories"] == pytest.approx(801.8325)

    def test_unknown_type_is_bad_request(self, client):
        response = client.post("/api/v1/trainings/summary", json=_body(training_type="Cycling"))
        assert response.status_code == 400
        assert "Cycling" in response.json()["detail"]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"weight_kg": 0},
            {"action_count": -1},
            {"duration_h": -0.5},
            {"pool_laps": -3},
        ],
    )
    def test_out_of_range_rejected(self, client, overrides):
        response = client.post("/api/v1/trainings/summary", json=_body(**overrides))
        assert response.status_code == 422


class TestReport:
    def test_walking_report(self, client):
        response = client.post(
            "/api/v1/trainings/report",
            params={"language": "en"},
            json=_body(action_count=9000, training_type="Walking", duration_h=1, weight_kg=70, height_cm=175),
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == (
            "Training type: Walking\n"
            "Duration: 1.00 h.\n"
            "Distance: 5.85 km.\n"
            "Speed: 5.85 km/h\n"
            "Calories burned: 331.08\n"
        )

    def test_russian_report(self, client):
        response = client.post(
            "/api/v1/trainings/report",
            params={"language": "ru"},
            json=_body(action_count=2000, training_type="Swimming", duration_h=1, weight_kg=80,
                       pool_length_m=50, pool_laps=40),
        )
        assert response.status_code == 200
        assert response.text.startswith("Тип тренировки: Плавание\n")
        assert response.text.endswith("Сожгли калорий: 496.00\n")

    def test_unknown_type_returns_sentinel(self, client):
        response = client.post("/api/v1/trainings/report", params={"language": "en"},
                               json=_body(training_type="Unknown"))
        assert response.status_code == 200
        assert response.text == "unknown training type"

    def test_unsupported_language_rejected(self, client):
        response = client.post("/api/v1/trainings/report", params={"language": "de"}, json=_body())
        assert response.status_code == 422


class TestTypeSpecificFields:
    def test_walking_without_height_rejected(self, client):
        response = client.post("/api/v1/trainings/summary",
                               json=_body(action_count=9000, training_type="Walking", duration_h=1, weight_kg=70))
        assert response.status_code == 422
        assert "height_cm" in response.text

    def test_walking_report_without_height_rejected(self, client):
        response = client.post("/api/v1/trainings/report", params={"language": "en"},
                               json=_body(training_type="Ходьба", height_cm=0))
        assert response.status_code == 422

    def test_swimming_without_pool_length_rejected(self, client):
        response = client.post("/api/v1/trainings/summary",
                               json=_body(training_type="Swimming", pool_laps=40))
        assert response.status_code == 422
        assert "pool_length_m" in response.text

    def test_running_ignores_height_and_pool(self, client):
        response = client.post("/api/v1/trainings/summary", json=_body())
        assert response.status_code == 200

    def test_walking_with_height_has_finite_calories(self, client):
        response = client.post("/api/v1/trainings/summary",
                               json=_body(action_count=9000, training_type="Walking", duration_h=1, weight_kg=70,
                                          height_cm=175))
        assert response.status_code == 200
        assert response.json()["calories"] == pytest.approx(331.0817, abs=1e-3)


class TestDevServer:
    def test_run_serves_app_with_uvicorn(self, monkeypatch):
        import app.main as main_module

        calls = []
        monkeypatch.setattr(main_module, "load_dotenv", lambda: calls.append("dotenv"))
        monkeypatch.setattr(main_module.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

        main_module.run()

        assert calls[0] == "dotenv"
        target, kwargs = calls[1]
        assert target == "app.main:app"
        assert kwargs["port"] == 8000
