"""Room change notifications over websocket channels.

Notifications only say *that* something changed (``event``, ``phase``,
``updatedAt``); subscribers re-fetch their own sanitized view. Delivery is
best-effort: a failing socket is dropped and a failing publish is logged,
never surfaced to the action that triggered it.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, Set

from fastapi import WebSocket

from .constants import room_channel
from .room import Room
from .schemas import RoomEvent

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def trigger(self, channel: str, event: str, data: dict) -> None: ...


class ChannelHub:
    """Websocket subscribers grouped by channel name."""

    def __init__(self) -> None:
        self.channels: Dict[str, Set[WebSocket]] = {}

    def subscribe(self, channel: str, ws: WebSocket) -> None:
        self.channels.setdefault(channel, set()).add(ws)

    def unsubscribe(self, channel: str, ws: WebSocket) -> None:
        subscribers = self.channels.get(channel)
        if subscribers is None:
            return
        subscribers.discard(ws)
        if not subscribers:
            self.channels.pop(channel, None)

    def subscriber_count(self, channel: str) -> int:
        return len(self.channels.get(channel, ()))

    async def trigger(self, channel: str, event: str, data: dict) -> None:
        """Send ``{"type": event, "data": data}`` to every subscriber of *channel*."""
        for ws in list(self.channels.get(channel, ())):
            try:
                await ws.send_json({"type": event, "data": data})
            except Exception:
                # Client disconnected unexpectedly
                logger.debug("Dropping dead subscriber on %s", channel)
                self.unsubscribe(channel, ws)


async def notify_room(
    notifier: Notifier,
    room: Room,
    event: str,
    action: str,
    kicked_player_id: Optional[str] = None,
) -> None:
    payload = RoomEvent(
        event=action,
        phase=room.phase,
        updated_at=room.updated_at,
        kicked_player_id=kicked_player_id,
    )
    try:
        await notifier.trigger(room_channel(room.code), event, payload.to_wire())
    except Exception:
        logger.exception("Failed to notify room %s about %s", room.code, action)


__all__ = ["Notifier", "ChannelHub", "notify_room"]
