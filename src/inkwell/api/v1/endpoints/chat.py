# src/inkwell/api/v1/endpoints/chat.py
"""Live chat endpoints for the Inkwell API."""

from __future__ import annotations

import asyncio
import contextlib
import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from inkwell.api.v1.dependencies import (
    AccessDep,
    CurrentUserDep,
    ServicesDep,
    unwrap,
)
from inkwell.core.errors import AccessError
from inkwell.core.results import Failure
from inkwell.schemas.chat import (
    ChatMessageCreate,
    ChatMessageRecord,
    ReportCreate,
    ReportRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _snapshot_payload(messages: list[ChatMessageRecord]) -> list[dict[str, object]]:
    return [message.model_dump(mode="json") for message in messages]


@router.get("/messages", response_model=list[ChatMessageRecord])
async def list_messages(access: AccessDep) -> list[ChatMessageRecord]:
    """Get the most recent chat history, oldest first."""
    return unwrap(access.list_chat_messages())


@router.post(
    "/messages",
    response_model=ChatMessageRecord,
    status_code=status.HTTP_201_CREATED,
)
async def post_message(
    payload: ChatMessageCreate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ChatMessageRecord:
    """Post to the chat room. Connected streams receive the new history."""
    return unwrap(access.post_chat_message(payload.body, current_user))


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    message_id: int,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> None:
    unwrap(access.delete_chat_message(message_id, current_user))


@router.post(
    "/messages/{message_id}/reports",
    response_model=ReportRecord,
    status_code=status.HTTP_201_CREATED,
)
async def report_message(
    message_id: int,
    payload: ReportCreate,
    access: AccessDep,
    current_user: CurrentUserDep,
) -> ReportRecord:
    """Report a chat message to the moderators."""
    return unwrap(access.submit_report(message_id, payload.reason, current_user))


@router.websocket("/stream")
async def chat_stream(
    websocket: WebSocket,
    services: ServicesDep,
    token: str = Query(...),
) -> None:
    """Stream the chat history: once on connect and again after every change.

    Each frame is the full, creation-ordered snapshot. Anything the client
    sends is ignored; the subscription is released when it disconnects.
    """
    try:
        user = services.identity.current_user(token)
    except AccessError:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    loop = asyncio.get_running_loop()
    snapshots: asyncio.Queue[list[ChatMessageRecord]] = asyncio.Queue()

    result = services.access.subscribe_chat(
        user,
        lambda messages: loop.call_soon_threadsafe(snapshots.put_nowait, messages),
    )
    if isinstance(result, Failure):
        await websocket.send_json({"kind": result.kind.value, "message": result.message})
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    async def forward() -> None:
        while True:
            messages = await snapshots.get()
            await websocket.send_json(_snapshot_payload(messages))

    with result.value:
        sender = asyncio.create_task(forward())
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            logger.debug("Chat stream for %s disconnected", user.uid)
        finally:
            sender.cancel()
            with contextlib.suppress(asyncio.CancelledError, WebSocketDisconnect):
                await sender
