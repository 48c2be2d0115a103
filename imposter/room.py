from __future__ import annotations

import time
import uuid
from typing import List, Optional

from pydantic import Field

from .errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from .schemas import FootballPlayer, RoomPhase, RoomSettings, TrollEvent, WireModel

# NOTE: ``Room`` is the persisted aggregate. It is decoded strictly from the
# store on every request and written back whole, so any helper here only
# mutates the in-memory copy of a single request.


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_player_id(now: int) -> str:
    return f"p_{now}_{uuid.uuid4().hex[:9]}"


class RoomPlayer(WireModel):
    id: str
    name: str
    is_admin: bool = False
    is_imposter: bool = False
    has_revealed: bool = False
    voted_for: Optional[str] = None
    secret_player: Optional[FootballPlayer] = None  # only under "differentPlayers"
    joined_at: int


class Room(WireModel):
    """A multiplayer game session identified by a short code."""

    code: str
    phase: RoomPhase = RoomPhase.WAITING
    players: List[RoomPlayer] = Field(default_factory=list)
    settings: RoomSettings = Field(default_factory=RoomSettings)
    secret_player: Optional[FootballPlayer] = None
    troll_event: Optional[TrollEvent] = None
    starting_player_id: Optional[str] = None
    discussion_end_time: Optional[int] = None
    created_at: int
    updated_at: int

    @classmethod
    def create(cls, code: str, admin_name: str, settings: RoomSettings, now: int) -> "Room":
        admin = RoomPlayer(id=generate_player_id(now), name=admin_name, is_admin=True, joined_at=now)
        return cls(code=code, players=[admin], settings=settings, created_at=now, updated_at=now)

    # -------------------- Lookups -------------------- #

    def find_player(self, player_id: Optional[str]) -> Optional[RoomPlayer]:
        if not player_id:
            return None
        return next((p for p in self.players if p.id == player_id), None)

    def require_player(self, player_id: Optional[str]) -> RoomPlayer:
        player = self.find_player(player_id)
        if player is None:
            raise NotFoundError("Player not found in room")
        return player

    def require_admin(self, player: RoomPlayer, what: str) -> None:
        if not player.is_admin:
            raise ForbiddenError(f"Only admin can {what}")

    @property
    def admin(self) -> Optional[RoomPlayer]:
        return next((p for p in self.players if p.is_admin), None)

    def name_taken(self, name: str) -> bool:
        folded = name.strip().casefold()
        return any(p.name.casefold() == folded for p in self.players)

    def all_revealed(self) -> bool:
        return all(p.has_revealed for p in self.players)

    # -------------------- Player management -------------------- #

    def add_player(self, name: str, now: int, max_players: int) -> RoomPlayer:
        name = name.strip()
        if not name:
            raise ValidationError("Player name is required")
        if self.phase != RoomPhase.WAITING:
            raise ForbiddenError("Game has already started")
        if self.name_taken(name):
            raise ConflictError("Name already taken")
        if len(self.players) >= max_players:
            raise ConflictError("Room is full")
        player = RoomPlayer(id=generate_player_id(now), name=name, joined_at=now)
        self.players.append(player)
        return player

    def remove_player(self, player_id: str) -> RoomPlayer:
        """Remove *player_id*; hands admin to the oldest survivor if needed."""
        player = self.require_player(player_id)
        self.players = [p for p in self.players if p.id != player_id]
        for p in self.players:
            if p.voted_for == player_id:
                p.voted_for = None
        if player.is_admin and self.players:
            successor = min(self.players, key=lambda p: p.joined_at)
            successor.is_admin = True
        return player

    # -------------------- Lifecycle -------------------- #

    def touch(self, now: int) -> None:
        self.updated_at = now

    def reset_for_new_game(self) -> None:
        """Clear every per-game field; roster and settings are retained."""
        self.phase = RoomPhase.WAITING
        self.secret_player = None
        self.troll_event = None
        self.starting_player_id = None
        self.discussion_end_time = None
        for p in self.players:
            p.is_imposter = False
            p.has_revealed = False
            p.voted_for = None
            p.secret_player = None


__all__ = ["Room", "RoomPlayer", "generate_player_id", "now_ms"]
