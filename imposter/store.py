"""Key-value room stores with expiry.

Both stores hold opaque JSON strings; decoding into :class:`~imposter.room.Room`
happens in :mod:`imposter.registry`. Reads and writes are whole-record, so
concurrent writers to the same room follow last-writer-wins semantics.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Protocol, Tuple

from .constants import ROOM_KEY_PREFIX
from .models import RoomRecord
from .room import now_ms

logger = logging.getLogger(__name__)


class RoomStore(Protocol):
    async def get(self, code: str) -> Optional[str]: ...

    async def set(self, code: str, payload: str, ttl_seconds: int) -> None: ...

    async def delete(self, code: str) -> None: ...

    async def exists(self, code: str) -> bool: ...


class MemoryRoomStore:
    """Process-local store; expired entries are dropped lazily on access."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._data: Dict[str, Tuple[int, str]] = {}

    async def get(self, code: str) -> Optional[str]:
        key = ROOM_KEY_PREFIX + code
        entry = self._data.get(key)
        if entry is None:
            return None
        expires_at, payload = entry
        if expires_at <= self._clock():
            self._data.pop(key, None)
            return None
        return payload

    async def set(self, code: str, payload: str, ttl_seconds: int) -> None:
        self._data[ROOM_KEY_PREFIX + code] = (self._clock() + ttl_seconds * 1000, payload)

    async def delete(self, code: str) -> None:
        self._data.pop(ROOM_KEY_PREFIX + code, None)

    async def exists(self, code: str) -> bool:
        return await self.get(code) is not None


class TortoiseRoomStore:
    """Database-backed store built on the ``RoomRecord`` model."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock

    async def get(self, code: str) -> Optional[str]:
        record = await RoomRecord.filter(code=code).first()
        if record is None:
            return None
        if record.expires_at <= self._clock():
            await record.delete()
            return None
        return record.payload

    async def set(self, code: str, payload: str, ttl_seconds: int) -> None:
        await RoomRecord.update_or_create(
            code=code,
            defaults={"payload": payload, "expires_at": self._clock() + ttl_seconds * 1000},
        )

    async def delete(self, code: str) -> None:
        await RoomRecord.filter(code=code).delete()

    async def exists(self, code: str) -> bool:
        return await self.get(code) is not None

    async def purge_expired(self) -> int:
        deleted = await RoomRecord.filter(expires_at__lte=self._clock()).delete()
        if deleted:
            logger.info("Purged %d expired rooms", deleted)
        return deleted


__all__ = ["RoomStore", "MemoryRoomStore", "TortoiseRoomStore"]
