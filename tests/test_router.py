import pytest
from conftest import FIVE_WORDS
from fastapi import FastAPI
from fastapi.testclient import TestClient

from wordmonster.game import VocabularyGame
from wordmonster.models import QuestionType
from wordmonster.router import get_game, router
from wordmonster.vocabulary import WordStore


@pytest.fixture
def game(progress, make_engine):
    return VocabularyGame(
        WordStore(words=FIVE_WORDS), progress, make_engine(QuestionType.EN_TO_ZH)
    )


@pytest.fixture
def client(game):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_game] = lambda: game
    return TestClient(app)


def test_stats(client):
    response = client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "total_words": 5,
        "mastered": 0,
        "unmastered": 5,
        "wrong_words": 0,
    }


def test_session_flow(client, progress):
    response = client.post("/api/session", data={"mode": "normal"})
    assert response.status_code == 200
    body = response.json()
    assert body["phase"] == "active"
    assert body["question"]["prompt"] == "cat"
    assert body["question"]["answer"] is None

    body = client.post("/api/session/choice", data={"value": "狗"}).json()
    assert body["accepted"]
    assert body["question"]["stage"] == "hint"

    body = client.post("/api/session/choice", data={"value": "狗"}).json()
    assert body["result"]["stage"] == "wrong"
    assert body["question"]["answer"] == {"en": "cat", "zh": "猫"}
    assert body["question"]["hearts"] == 2

    body = client.post("/api/session/choice", data={"value": "猫"}).json()
    assert not body["accepted"]

    body = client.post("/api/session/next").json()
    assert body["accepted"]
    assert body["question"]["current_index"] == 1

    assert progress.wrong_counts == {"cat": 2}
    wrong = client.get("/api/wrong-words").json()
    assert wrong == [{"key": "cat", "en": "cat", "zh": "猫", "count": 2}]


def test_spelling_on_choice_question_not_accepted(client):
    client.post("/api/session", data={"mode": "normal"})
    body = client.post("/api/session/spelling", data={"text": "cat"}).json()
    assert not body["accepted"]
    assert body["result"] is None


def test_finish_before_game_over_not_accepted(client):
    client.post("/api/session", data={"mode": "normal"})
    body = client.post("/api/session/finish").json()
    assert not body["accepted"]
    assert body["summary"] is None


def test_no_eligible_words(client):
    response = client.post("/api/session", data={"mode": "review"})
    assert response.status_code == 409
    assert response.json() == {"error": "no eligible words"}


def test_unknown_mode_rejected(client):
    assert client.post("/api/session", data={"mode": "hard"}).status_code == 422


def test_requests_without_session(client):
    assert client.get("/api/session").status_code == 404
    assert client.post("/api/session/next").status_code == 404


def test_return_home(client):
    client.post("/api/session", data={"mode": "normal"})
    assert client.delete("/api/session").json()["status"] == "success"
    assert client.get("/api/session").status_code == 404


def test_reset_mastery_requires_confirm(client, progress):
    client.post("/api/session", data={"mode": "normal"})
    client.post("/api/session/choice", data={"value": "猫"})
    assert progress.mastery == {"cat"}

    assert client.post("/api/mastery/reset").status_code == 400
    assert progress.mastery == {"cat"}

    response = client.post("/api/mastery/reset", data={"confirm": "true"})
    assert response.status_code == 200
    assert response.json()["stats"]["mastered"] == 0
