"""Tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from macro_tracker.api.app import create_app
from macro_tracker.containers import AppContainer

PROFILE_PAYLOAD = {
    "age": 30,
    "height": 175,
    "weight": 70,
    "sex": "male",
    "activity_level": "moderate",
    "goal": "lose",
}

MEAL_PAYLOAD = {
    "description": "Chicken and rice",
    "calories": 500,
    "protein": 40,
    "carbs": 55,
    "fats": 10,
}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def _signup(client: TestClient, email: str = "ana@example.com") -> dict[str, str]:
    response = client.post(
        "/auth/signup",
        json={"email": email, "password": "secret1", "date_of_birth": "1990-05-01"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_signup_and_login(client: TestClient) -> None:
    _signup(client)

    duplicate = client.post(
        "/auth/signup",
        json={
            "email": "ana@example.com",
            "password": "secret1",
            "date_of_birth": "1990-05-01",
        },
    )
    login = client.post(
        "/auth/login", json={"email": "ana@example.com", "password": "secret1"}
    )
    wrong = client.post(
        "/auth/login", json={"email": "ana@example.com", "password": "nope123"}
    )

    assert duplicate.status_code == 409
    assert login.status_code == 200
    assert login.json()["email"] == "ana@example.com"
    assert wrong.status_code == 401


def test_signup_validates_payload(client: TestClient) -> None:
    response = client.post(
        "/auth/signup",
        json={"email": "not-an-email", "password": "123", "date_of_birth": ""},
    )

    assert response.status_code == 422


def test_protected_routes_require_token(client: TestClient) -> None:
    assert client.get("/profile").status_code == 401
    assert (
        client.get("/profile", headers={"Authorization": "Bearer nope"}).status_code
        == 401
    )


def test_profile_lifecycle(client: TestClient) -> None:
    headers = _signup(client)

    missing = client.get("/profile", headers=headers)
    created = client.post("/profile", json=PROFILE_PAYLOAD, headers=headers)
    fetched = client.get("/profile", headers=headers)
    metrics = client.get("/profile/metrics", headers=headers)

    assert missing.status_code == 404
    assert created.status_code == 201
    assert created.json()["target_calories"] == 2056
    assert created.json()["target_protein"] == 140
    assert created.json()["tracked_macros"] == ["protein", "carbs", "fats"]
    assert fetched.json() == created.json()
    assert metrics.json()["category"] == "Normal"

    reset = client.delete("/profile", headers=headers)
    assert reset.status_code == 200
    assert client.get("/profile", headers=headers).status_code == 404


def test_profile_rejects_unknown_enum(client: TestClient) -> None:
    headers = _signup(client)

    response = client.post(
        "/profile", json={**PROFILE_PAYLOAD, "sex": "other"}, headers=headers
    )

    assert response.status_code == 422


def test_food_logs_and_today_stats(client: TestClient) -> None:
    headers = _signup(client)
    client.post("/profile", json=PROFILE_PAYLOAD, headers=headers)

    created = client.post("/food-logs", json=MEAL_PAYLOAD, headers=headers)
    listing = client.get("/food-logs", headers=headers)
    today = client.get("/stats/today", params={"tz": "UTC"}, headers=headers)

    assert created.status_code == 201
    assert created.json()["source"] == "manual"
    assert len(listing.json()["logs"]) == 1
    body = today.json()
    assert body["totals"]["calories"] == 500
    assert body["progress"]["remaining_calories"] == 1556
    assert len(body["logs"]) == 1

    log_id = created.json()["id"]
    assert client.delete(f"/food-logs/{log_id}", headers=headers).status_code == 200
    assert client.delete(f"/food-logs/{log_id}", headers=headers).status_code == 404


def test_food_logs_are_private(client: TestClient) -> None:
    owner = _signup(client)
    other = _signup(client, "bo@example.com")
    created = client.post("/food-logs", json=MEAL_PAYLOAD, headers=owner)

    response = client.delete(f"/food-logs/{created.json()['id']}", headers=other)

    assert response.status_code == 404
    assert client.get("/food-logs", headers=other).json()["logs"] == []


def test_stats_without_profile_and_bad_timezone(client: TestClient) -> None:
    headers = _signup(client)

    today = client.get("/stats/today", headers=headers)
    week = client.get("/stats/week", headers=headers)
    bad = client.get("/stats/week", params={"tz": "Mars/Olympus"}, headers=headers)

    assert today.json()["progress"] is None
    assert len(week.json()["daily"]) == 7
    assert week.json()["days_logged"] == 0
    assert bad.status_code == 400


def test_weights_trend_and_projection(client: TestClient) -> None:
    headers = _signup(client)
    client.post("/profile", json=PROFILE_PAYLOAD, headers=headers)

    logged = client.post("/weights", json={"weight_kg": 69}, headers=headers)
    trend = client.get("/weights", headers=headers)
    projection = client.get(
        "/weights/projection", params={"weeks": 12}, headers=headers
    )

    assert logged.status_code == 201
    assert len(logged.json()["weights"]) == 1
    assert trend.json()["current_kg"] == 69
    assert projection.json() == {"goal": "lose", "weeks": 12, "projected_weight": 63}


def test_projection_requires_profile(client: TestClient) -> None:
    headers = _signup(client)

    response = client.get("/weights/projection", headers=headers)

    assert response.status_code == 404


def test_calculator_endpoints(client: TestClient) -> None:
    targets = client.post(
        "/calculator/targets",
        json={**PROFILE_PAYLOAD},
    )
    bmi = client.post("/calculator/bmi", json={"weight": 100, "height": 175})
    projection = client.post(
        "/calculator/projection",
        json={"current_weight": 80, "goal": "gain", "weeks": 4},
    )

    assert targets.json() == {
        "bmr": 1648.75,
        "tdee": 2556,
        "target_calories": 2056,
        "macros": {"protein": 140, "carbs": 246, "fats": 57, "sugars": 49},
    }
    assert bmi.json()["category"] == "Obese"
    assert projection.json()["projected_weight"] == 81


def test_unknown_log_id_is_not_found(client: TestClient) -> None:
    headers = _signup(client)

    response = client.delete(f"/food-logs/{uuid4()}", headers=headers)

    assert response.status_code == 404


def test_streak_endpoint(client: TestClient) -> None:
    headers = _signup(client)

    before = client.get("/stats/streak", headers=headers)
    client.post("/food-logs", json=MEAL_PAYLOAD, headers=headers)
    after = client.get("/stats/streak", params={"tz": "UTC"}, headers=headers)

    assert before.json() == {"streak": 0}
    assert after.json() == {"streak": 1}


def test_food_log_limit_must_be_positive(client: TestClient) -> None:
    headers = _signup(client)
    client.post("/food-logs", json=MEAL_PAYLOAD, headers=headers)

    negative = client.get("/food-logs", params={"limit": -1}, headers=headers)
    zero = client.get("/food-logs", params={"limit": 0}, headers=headers)
    one = client.get("/food-logs", params={"limit": 1}, headers=headers)

    assert negative.status_code == 422
    assert zero.status_code == 422
    assert len(one.json()["logs"]) == 1


def test_short_password_from_service_maps_to_422(container: AppContainer) -> None:
    app = create_app(container)

    @app.post("/signup-unchecked")
    async def signup_unchecked() -> dict[str, str]:
        container.account_service.signup("ana@example.com", "abc", "1990-05-01")
        return {"status": "ok"}

    response = TestClient(app).post("/signup-unchecked")

    assert response.status_code == 422
    assert "at least 6" in response.json()["detail"]
