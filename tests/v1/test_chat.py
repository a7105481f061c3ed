# tests/v1/test_chat.py
"""Tests for chat messages, reports and the live stream."""

import pytest
from fastapi import WebSocketDisconnect, status

from inkwell.models.states import UserStatus

MESSAGES = "/api/v1/chat/messages"


def _post(client, account, body: str = "hello"):
    return client.post(MESSAGES, json={"body": body}, headers=account.headers)


def test_post_and_list_messages(client, reader, writer) -> None:
    assert _post(client, reader, "  first  ").status_code == status.HTTP_201_CREATED
    assert _post(client, writer, "second").status_code == status.HTTP_201_CREATED

    history = client.get(MESSAGES).json()

    assert [(m["body"], m["author_name"]) for m in history] == [
        ("first", "Reader"),
        ("second", "Writer"),
    ]


def test_blocked_posters(client, make_account) -> None:
    banned = make_account(status=UserStatus.BANNED)
    unverified = make_account(verified=False)

    assert _post(client, banned).status_code == status.HTTP_403_FORBIDDEN
    assert _post(client, unverified).status_code == status.HTTP_403_FORBIDDEN
    assert _post(client, banned).json()["detail"]["kind"] == "auth"
    assert client.get(MESSAGES).json() == []


def test_empty_message_is_rejected(client, reader) -> None:
    response = _post(client, reader, "   ")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"]["message"] == "Message cannot be empty"


def test_only_admins_delete_messages(client, admin, reader) -> None:
    message = _post(client, reader).json()

    denied = client.delete(f"{MESSAGES}/{message['id']}", headers=reader.headers)
    deleted = client.delete(f"{MESSAGES}/{message['id']}", headers=admin.headers)
    missing = client.delete(f"{MESSAGES}/{message['id']}", headers=admin.headers)

    assert denied.status_code == status.HTTP_403_FORBIDDEN
    assert deleted.status_code == status.HTTP_204_NO_CONTENT
    assert missing.status_code == status.HTTP_404_NOT_FOUND


def test_report_message(client, reader, writer) -> None:
    message = _post(client, writer, "rude words").json()
    url = f"{MESSAGES}/{message['id']}/reports"

    filed = client.post(url, json={"reason": "spam"}, headers=reader.headers)
    duplicate = client.post(url, json={"reason": "spam again"}, headers=reader.headers)

    assert filed.status_code == status.HTTP_201_CREATED
    report = filed.json()
    assert report["status"] == "pending"
    assert report["message_content"] == "rude words"
    assert report["reported_user_id"] == writer.uid
    assert duplicate.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_stream_pushes_full_history(client, reader, writer) -> None:
    with client.websocket_connect(f"/api/v1/chat/stream?token={reader.token}") as websocket:
        assert websocket.receive_json() == []

        assert _post(client, writer, "live").status_code == status.HTTP_201_CREATED

        frame = websocket.receive_json()
        assert [m["body"] for m in frame] == ["live"]


def test_stream_refuses_bad_token(client) -> None:
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/api/v1/chat/stream?token=nonsense") as websocket:
            websocket.receive_json()


def test_stream_requires_verified_email(client, make_account) -> None:
    unverified = make_account(verified=False)

    with client.websocket_connect(f"/api/v1/chat/stream?token={unverified.token}") as websocket:
        error = websocket.receive_json()

    assert error["kind"] == "auth"


def test_stream_reconnect_after_disconnect(client, reader, writer) -> None:
    url = f"/api/v1/chat/stream?token={reader.token}"
    with client.websocket_connect(url) as websocket:
        assert websocket.receive_json() == []

    assert _post(client, writer, "after close").status_code == status.HTTP_201_CREATED

    with client.websocket_connect(url) as websocket:
        assert [m["body"] for m in websocket.receive_json()] == ["after close"]
