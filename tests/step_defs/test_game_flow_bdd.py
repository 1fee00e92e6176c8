"""
BDD step definitions for the game flow feature (pytest-bdd).
Runs the app through its real lifespan, so the store is created and
initialized the same way the server does it.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, scenarios, then, when

from memequiz.config import Settings
from memequiz.main import create_app

# Load all scenarios from the feature file
scenarios("../features/game_flow.feature")


@pytest.fixture
def game_client(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'memes.db'}",
        memes_dir=str(tmp_path / "memes"),
        secret_key="bdd-secret",
    )
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}


@given("a fresh meme quiz server")
def fresh_server(game_client):
    assert game_client.get("/api/memes").json() == []


@when(parsers.parse('I register as "{username}" with password "{password}"'))
def register(game_client, response, username, password):
    r = game_client.post("/api/register", json={"username": username, "password": password})
    response["status"] = r.status_code


@when(parsers.parse('I log in as "{username}" with password "{password}"'))
def log_in(game_client, response, username, password):
    r = game_client.post("/api/login", json={"username": username, "password": password})
    response["status"] = r.status_code


@when(parsers.parse("I submit a game with score {score:d}"))
def submit_game(game_client, response, score):
    r = game_client.post("/api/game", json={"score": score})
    response["status"] = r.status_code


@then(parsers.parse("the response status should be {status:d}"))
def status_is(response, status):
    assert response["status"] == status


@then(parsers.parse("my game count should be {count:d}"))
def game_count_is(game_client, count):
    r = game_client.get("/api/user/gamecount")
    assert r.status_code == 200
    assert r.json() == {"gameCount": count}


@then(parsers.parse("my history should list exactly one game with score {score:d}"))
def history_has_one_game(game_client, score):
    r = game_client.get("/api/user/history")
    assert r.status_code == 200
    history = r.json()
    assert len(history) == 1
    assert history[0]["score"] == score


@then("my game count request should be rejected")
def game_count_rejected(game_client):
    assert game_client.get("/api/user/gamecount").status_code == 401
