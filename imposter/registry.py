from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from pydantic import ValidationError as SchemaError

from .constants import ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH
from .errors import NotFoundError, RoomCodeExhaustedError, ValidationError
from .room import Room, now_ms
from .schemas import RoomSettings
from .store import RoomStore

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Create, load, persist and delete rooms in a :class:`RoomStore`."""

    def __init__(
        self,
        store: RoomStore,
        ttl_seconds: int,
        code_attempts: int = 10,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.code_attempts = code_attempts
        self.rng = rng or random.Random()
        self.clock = clock

    def generate_code(self) -> str:
        return "".join(self.rng.choice(ROOM_CODE_ALPHABET) for _ in range(ROOM_CODE_LENGTH))

    async def create(self, admin_name: str, settings: RoomSettings) -> Room:
        admin_name = (admin_name or "").strip()
        if not admin_name:
            raise ValidationError("Admin name is required")

        for _ in range(self.code_attempts):
            code = self.generate_code()
            if not await self.store.exists(code):
                break
        else:
            raise RoomCodeExhaustedError("Could not generate unique room code")

        room = Room.create(code, admin_name, settings, self.clock())
        await self.save(room)
        logger.info("Created room %s for %s", code, admin_name)
        return room

    async def load(self, code: str) -> Optional[Room]:
        payload = await self.store.get(code.upper())
        if payload is None:
            return None
        try:
            return Room.model_validate_json(payload)
        except SchemaError as exc:
            logger.error("Room %s failed to decode: %s", code, exc)
            raise ValidationError("Stored room record is malformed") from exc

    async def get(self, code: str) -> Room:
        room = await self.load(code)
        if room is None:
            raise NotFoundError("Room not found")
        return room

    async def save(self, room: Room) -> None:
        await self.store.set(room.code, room.model_dump_json(by_alias=True), self.ttl_seconds)

    async def delete(self, code: str) -> None:
        await self.store.delete(code.upper())
        logger.info("Deleted room %s", code)


__all__ = ["RoomRegistry"]
