from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from ..constants import room_channel
from ..errors import GameError
from ..state import GameServices

router = APIRouter(prefix="", tags=["ws"])

logger = logging.getLogger(__name__)


@router.websocket("/ws/{code}")
async def room_channel_endpoint(ws: WebSocket, code: str, player_id: Optional[str] = Query(default=None, alias="playerId")):
    """Subscribe a room member to change notifications for *code*."""
    await ws.accept()
    services: GameServices = ws.app.state.services

    try:
        room = await services.machine.registry.load(code)
    except GameError:
        room = None
    if room is None or room.find_player(player_id) is None:
        await ws.close(code=4002)
        return

    channel = room_channel(room.code)
    services.hub.subscribe(channel, ws)
    await ws.send_json({"type": "subscribed", "data": {"channel": channel}})
    try:
        while True:
            await ws.receive_text()
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WebSocket error on %s", channel)
    finally:
        services.hub.unsubscribe(channel, ws)
