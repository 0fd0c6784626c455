"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from fitness_tracker.api.app import create_app
from fitness_tracker.containers import AppContainer
from fitness_tracker.services.catalog import QUOTES


def _start_session(client: TestClient) -> str:
    response = client.post("/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_options_lists_pickers(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    data = client.get("/options").json()

    assert "Aesthetic / Look Better" in data["goals"]
    assert data["muscle_groups"][0] == "Biceps"
    assert data["moods"] == ["Tired", "Stressed", "Happy", "Sad", "Motivated"]
    assert data["unit_system"] == "imperial"


def test_unknown_session_is_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/sessions/{uuid4()}/home")

    assert response.status_code == 404


def test_home_shows_placeholders_for_new_session(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    data = client.get(f"/sessions/{session_id}/home").json()

    assert data["calories"]["in_text"] == "0 kcal"
    assert data["calories"]["status"] == "maintenance"
    assert data["calories"]["status_text"] == "You’re exactly at maintenance today."
    assert data["bmi"]["value"] is None
    assert data["bmi"]["category"] == "Not enough data"
    assert data["bmi"]["text"] == "Enter your height and weight to see your BMI."


def test_logged_entries_flow_into_home(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    client.post(f"/sessions/{session_id}/foods", json={"name": "Rice", "calories": "300"})
    client.post(
        f"/sessions/{session_id}/foods", json={"name": "Chicken", "calories": "250"}
    )
    workout = client.post(
        f"/sessions/{session_id}/workouts",
        json={"name": "Bench", "sets": "3", "reps": "10", "calories": "200"},
    )

    assert workout.status_code == 201
    assert workout.json()["detail"] == "3 sets x 10 reps"

    calories = client.get(f"/sessions/{session_id}/home").json()["calories"]

    assert calories["in"] == 550
    assert calories["out"] == 200
    assert calories["net"] == 350
    assert calories["status"] == "surplus"
    assert calories["status_text"] == "You’re in a calorie surplus today."


def test_invalid_workout_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    check = client.post(
        f"/sessions/{session_id}/workouts/check",
        json={"name": "Bench", "sets": "0", "reps": "10", "calories": "200"},
    )
    response = client.post(
        f"/sessions/{session_id}/workouts",
        json={"name": "Bench", "sets": "0", "reps": "10", "calories": "200"},
    )
    listing = client.get(f"/sessions/{session_id}/workouts").json()

    assert check.json() == {"can_add": False}
    assert response.status_code == 422
    assert listing["workouts"] == []
    assert listing["empty_text"] == "No workouts added yet."


def test_food_listing_and_check(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    empty = client.get(f"/sessions/{session_id}/foods").json()
    check = client.post(
        f"/sessions/{session_id}/foods/check", json={"name": "Rice", "calories": "300"}
    )
    client.post(f"/sessions/{session_id}/foods", json={"name": "Rice", "calories": "300"})
    rejected = client.post(
        f"/sessions/{session_id}/foods", json={"name": "", "calories": "300"}
    )
    listing = client.get(f"/sessions/{session_id}/foods").json()

    assert empty["empty_text"] == "No foods added yet."
    assert check.json() == {"can_add": True}
    assert rejected.status_code == 422
    assert [food["name"] for food in listing["foods"]] == ["Rice"]
    assert listing["total_text"] == "300 kcal"
    assert listing["empty_text"] is None


def test_profile_update_computes_bmi(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    response = client.put(
        f"/sessions/{session_id}/profile",
        json={
            "name": "Sam",
            "age": "29",
            "weight": "154",
            "height_feet": "5",
            "height_inches": "9",
        },
    )

    data = response.json()
    assert response.status_code == 200
    assert data["profile"] == {"name": "Sam", "age": 29, "unit_system": "imperial"}
    assert data["bmi"]["text"] == "BMI: 22.7"
    assert data["bmi"]["category_text"] == "Category: Normal"


def test_profile_with_unparsable_age_keeps_placeholder(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    data = client.put(
        f"/sessions/{session_id}/profile",
        json={"name": "Sam", "age": "old", "weight": "154", "height_feet": "5"},
    ).json()

    assert data["profile"]["age"] is None
    assert data["bmi"]["value"] is None


def test_goal_summary(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    initial = client.get(f"/sessions/{session_id}/goal").json()
    updated = client.put(
        f"/sessions/{session_id}/goal",
        json={"goal": "Gain Muscle", "notes": "Feel stronger"},
    ).json()
    invalid = client.put(f"/sessions/{session_id}/goal", json={"goal": "Fly"})

    assert initial["summary"] == [
        "Goal: Lose Weight",
        "Add some notes about why this goal matters to you.",
    ]
    assert updated["summary"] == ["Goal: Gain Muscle", "Notes: Feel stronger"]
    assert invalid.status_code == 422


def test_recommendations(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    default = client.get("/recommendations").json()
    aesthetic = client.get(
        "/recommendations",
        params={"goal": "Aesthetic / Look Better", "muscle": "Back"},
    ).json()

    assert default["goal"] == "Lose Weight"
    assert default["disclaimer"] is not None
    assert default["muscle_exercises"] == ["Hammer Curl", "Barbell Curl", "Dumbbell Curl"]
    assert aesthetic["exercises"] == []
    assert aesthetic["exercises_placeholder"] == "Pick a goal to see exercise ideas."
    assert aesthetic["muscle_exercises"] == ["Pull-Ups", "Barbell Row", "Lat Pulldown"]


def test_quote_refresh(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    current = client.get(f"/sessions/{session_id}/quote").json()
    happy = client.post(f"/sessions/{session_id}/quote", json={"mood": "Happy"}).json()
    again = client.post(f"/sessions/{session_id}/quote", json={}).json()

    assert current["mood"] == "Tired"
    assert current["quote"] in QUOTES["Tired"]
    assert happy["mood"] == "Happy"
    assert happy["quote"] in QUOTES["Happy"]
    assert happy["text"] == f"“{happy['quote']}”"
    assert again["mood"] == "Happy"


def test_quote_refresh_without_body_keeps_mood(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    response = client.post(f"/sessions/{session_id}/quote")

    assert response.status_code == 200
    data = response.json()
    assert data["mood"] == "Tired"
    assert data["quote"] in QUOTES["Tired"]
