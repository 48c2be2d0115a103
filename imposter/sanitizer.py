"""Per-player redacted views of a room.

The view is recomputed on every read from the stored room; no redacted copy
is ever persisted.
"""
from __future__ import annotations

from typing import Optional

from .room import Room, RoomPlayer
from .schemas import RoomPhase

_OPEN_PHASES = (RoomPhase.WAITING, RoomPhase.RESULTS)


def _hide(player: RoomPlayer, hide_vote: bool) -> RoomPlayer:
    update = {"is_imposter": False, "secret_player": None}
    if hide_vote:
        update["voted_for"] = None
    return player.model_copy(update=update)


def sanitize_room_for_player(room: Room, player_id: Optional[str]) -> Room:
    """Return the part of *room* that *player_id* is allowed to see."""
    if room.phase in _OPEN_PHASES:
        return room.model_copy(deep=True)

    viewer = room.find_player(player_id)
    if viewer is None:
        return sanitize_for_spectator(room)

    hide_votes = room.phase == RoomPhase.VOTING
    players = [p.model_copy(deep=True) if p.id == viewer.id else _hide(p, hide_votes) for p in room.players]
    return room.model_copy(
        deep=True,
        update={
            "players": players,
            # Imposters never learn the secret player before results.
            "secret_player": None if viewer.is_imposter else room.secret_player,
            "troll_event": None,
        },
    )


def sanitize_for_spectator(room: Room) -> Room:
    """Unknown viewers get every player redacted, and never the secret or troll event."""
    hide_votes = room.phase == RoomPhase.VOTING
    return room.model_copy(
        deep=True,
        update={
            "players": [_hide(p, hide_votes) for p in room.players],
            "secret_player": None,
            "troll_event": None,
        },
    )


__all__ = ["sanitize_room_for_player", "sanitize_for_spectator"]
