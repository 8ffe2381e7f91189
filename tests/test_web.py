import pytest
from fastapi.testclient import TestClient

from web.app import app, get_session


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_move_returns_piece_raise(client):
    response = client.post("/api/move", json={"move": " e2e4 "})
    assert response.status_code == 200
    body = response.json()
    assert body["move"] == "e2e4"
    assert body["canonical"] == "e2e4"
    assert body["pgn"] == "1. e2e4"
    assert body["piece_raise"]["square"] == "e4"
    assert body["piece_raise"]["index"] == 28
    assert body["piece_raise"]["binary"] == "11100"
    assert body["piece_raise"]["diagram"].count("#") == 1


@pytest.mark.parametrize(
    "move,detail", [("e2e5", "Not a legal move"), ("abc", "Invalid move format")]
)
def test_rejected_moves(client, session, move, detail):
    response = client.post("/api/move", json={"move": move})
    assert response.status_code == 400
    assert response.json()["detail"] == detail
    assert session.pgn() == "(empty)"


def test_piece_raise_empty(client):
    response = client.get("/api/pieceraise")
    assert response.status_code == 404
    assert response.json()["detail"] == "No pieces raised"


def test_piece_raise_after_move(client):
    client.post("/api/move", json={"move": "a2a3"})
    body = client.get("/api/pieceraise").json()
    assert body == {
        "last_move": "a2a3",
        "square": "a3",
        "index": 16,
        "binary": "10000",
        "diagram": body["diagram"],
    }


def test_remove_last_move(client):
    client.post("/api/move", json={"move": "e2e4"})
    client.post("/api/move", json={"move": "e7e5"})
    body = client.delete("/api/move").json()
    assert body == {"pgn": "1. e2e4", "moves": ["e2e4"]}


def test_position_and_reset(client):
    client.post("/api/move", json={"move": "e2e4"})
    body = client.get("/api/position").json()
    assert body["replay"] == "startpos moves e2e4 "
    assert "Fen: rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1" in body["diagram"]

    body = client.post("/api/reset").json()
    assert body == {"pgn": "(empty)", "moves": []}
