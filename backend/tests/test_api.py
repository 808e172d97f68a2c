import json

from services.chat_session import NEED_MORE_INFO_MESSAGE, RESET_MESSAGE, WELCOME_MESSAGE


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Job Recommendation Chat Server is running"


def test_health(client, registry):
    registry.on_connect("someone")
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["active_sessions"] == 1
    assert data["roles"] == 12


def test_websocket_welcome(client):
    with client.websocket_connect("/ws") as ws:
        data = ws.receive_json()
    assert data == {
        "type": "response",
        "message": WELCOME_MESSAGE,
        "recommendations": [],
        "skills": [],
    }


def test_websocket_conversation(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()

        ws.send_json({"type": "user_message", "content": "I know python and sql"})
        data = ws.receive_json()
        assert data["type"] == "response"
        assert data["skills"] == ["python", "sql"]
        assert data["recommendations"][0] == {
            "title": "Data Analyst",
            "description": (
                "Analyze data to help businesses make informed decisions. Work with "
                "databases, create reports, and identify trends."
            ),
            "matchScore": 25,
        }
        assert len(data["recommendations"]) == 3

        ws.send_json({"type": "reset"})
        data = ws.receive_json()
        assert data == {
            "type": "response",
            "message": RESET_MESSAGE,
            "recommendations": [],
            "skills": [],
        }

        ws.send_json({"type": "user_message", "content": "hi"})
        assert ws.receive_json()["message"] == NEED_MORE_INFO_MESSAGE


def test_websocket_malformed_frame(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()

        ws.send_text("{not json")
        data = ws.receive_json()
        assert data["type"] == "error"
        assert set(data) == {"type", "message"}

        ws.send_json({"content": "python"})
        assert ws.receive_json()["type"] == "error"

        ws.send_text(json.dumps({"type": "user_message", "content": "python"}))
        data = ws.receive_json()
        assert data["type"] == "response"
        assert data["skills"] == ["python"]


def test_websocket_root_path(client):
    with client.websocket_connect("/") as ws:
        assert ws.receive_json()["message"] == WELCOME_MESSAGE


def test_websocket_sessions_independent(client):
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        first.receive_json()
        second.receive_json()

        first.send_json({"type": "user_message", "content": "jest"})
        assert first.receive_json()["skills"] == ["jest"]

        second.send_json({"type": "user_message", "content": "figma"})
        assert second.receive_json()["skills"] == ["figma"]


def test_websocket_disconnect_removes_session(client, registry):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "user_message", "content": "python"})
        ws.receive_json()
        assert len(registry) == 1
    assert len(registry) == 0
