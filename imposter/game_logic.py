"""Core room mechanics.

:class:`RoomStateMachine` is the authoritative engine for a room: every
request loads the whole room record, validates the action against the
current phase and the actor's role, mutates the in-memory copy, writes the
whole record back and then publishes a payload-free notification. All
checks run before the first mutation, so a rejected action never persists
anything. There is no version check on write: two concurrent actions on
the same room are last-writer-wins.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Optional, Tuple

from .catalog import PlayerCatalog
from .constants import ROOM_EVENTS
from .errors import ForbiddenError, NotFoundError, ValidationError
from .notifier import Notifier, notify_room
from .registry import RoomRegistry
from .roles import assign_roles, select_starting_player
from .room import Room, RoomPlayer, now_ms
from .sanitizer import sanitize_room_for_player
from .schemas import Action, ActionRequest, RoomPhase, RoomSettings

logger = logging.getLogger(__name__)


def _require_phase(room: Room, message: str, *phases: RoomPhase) -> None:
    if room.phase not in phases:
        raise ForbiddenError(message)


class RoomStateMachine:
    def __init__(
        self,
        registry: RoomRegistry,
        catalog: PlayerCatalog,
        notifier: Notifier,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms,
        max_players: int = 10,
        min_players: int = 3,
    ):
        self.registry = registry
        self.catalog = catalog
        self.notifier = notifier
        self.rng = rng or random.Random()
        self.clock = clock
        self.max_players = max_players
        self.min_players = min_players

    # ---------------------------------------------------------------------
    # Room lifecycle
    # ---------------------------------------------------------------------

    async def create_room(self, admin_name: str, settings: Optional[RoomSettings] = None) -> Room:
        return await self.registry.create(admin_name, settings or RoomSettings())

    async def view_room(self, code: str, player_id: Optional[str]) -> Room:
        if not player_id:
            raise ValidationError("Player ID is required")
        room = await self.registry.get(code)
        if room.find_player(player_id) is None:
            raise ForbiddenError("Player not in room")
        return sanitize_room_for_player(room, player_id)

    async def join_room(self, code: str, player_name: str) -> Tuple[RoomPlayer, Room]:
        if not (player_name or "").strip():
            raise ValidationError("Player name is required")
        room = await self.registry.get(code)
        now = self.clock()
        player = room.add_player(player_name, now, self.max_players)
        room.touch(now)
        await self.registry.save(room)
        await notify_room(self.notifier, room, ROOM_EVENTS["PLAYER_JOINED"], "player_joined")
        return player, sanitize_room_for_player(room, player.id)

    async def leave_room(self, code: str, player_id: Optional[str], admin_id: Optional[str] = None) -> Optional[Room]:
        """Remove a player (self-leave or admin kick).

        Returns the requester's view, or ``None`` when the room was deleted
        because nobody is left.
        """
        if not player_id:
            raise ValidationError("Player ID is required")
        room = await self.registry.get(code)
        if room.find_player(player_id) is None:
            raise NotFoundError("Player not found")

        kick = bool(admin_id) and admin_id != player_id
        if kick:
            admin = room.find_player(admin_id)
            if admin is None or not admin.is_admin:
                raise ForbiddenError("Only admin can kick players")

        removed = room.remove_player(player_id)
        if not room.players:
            await self.registry.delete(room.code)
            return None

        if removed.is_admin:
            logger.info("Room %s: admin passed to %s", room.code, room.admin.name if room.admin else None)
        room.touch(self.clock())
        await self.registry.save(room)
        await notify_room(
            self.notifier, room, ROOM_EVENTS["PLAYER_LEFT"], "player_left", kicked_player_id=player_id
        )
        return sanitize_room_for_player(room, admin_id if kick else player_id)

    # ---------------------------------------------------------------------
    # Action handlers
    # ---------------------------------------------------------------------

    async def _start(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "start the game")
        _require_phase(room, "Game has already started", RoomPhase.WAITING)
        if len(room.players) < self.min_players:
            raise ForbiddenError(f"Need at least {self.min_players} players to start")

        await assign_roles(room, self.catalog, self.rng)
        room.starting_player_id = None
        room.discussion_end_time = None
        room.phase = RoomPhase.REVEALING
        return ROOM_EVENTS["GAME_STARTED"]

    def _reveal(self, room: Room, player: RoomPlayer) -> str:
        _require_phase(room, "Roles can only be revealed during the reveal phase", RoomPhase.REVEALING)
        player.has_revealed = True
        return ROOM_EVENTS["PLAYER_REVEALED"]

    def _discussion(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "start discussion")
        _require_phase(room, "Discussion can only start after the reveal phase", RoomPhase.REVEALING)
        if not room.all_revealed():
            raise ForbiddenError("Not all players have revealed their roles")

        room.starting_player_id = select_starting_player(
            room.players, room.settings.imposter_less_likely_to_start, self.rng
        )
        if room.settings.discussion_time > 0:
            room.discussion_end_time = self.clock() + room.settings.discussion_time * 1000
        else:
            room.discussion_end_time = None
        room.phase = RoomPhase.DISCUSSION
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _voting(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "start voting")
        _require_phase(room, "Voting can only start during discussion", RoomPhase.DISCUSSION)
        for p in room.players:
            p.voted_for = None
        room.phase = RoomPhase.VOTING
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _vote(self, room: Room, player: RoomPlayer, voted_for: Optional[str]) -> str:
        _require_phase(room, "Not in voting phase", RoomPhase.VOTING)
        if not voted_for:
            raise ValidationError("Must specify who to vote for")
        if room.find_player(voted_for) is None:
            raise NotFoundError("Vote target not found in room")
        player.voted_for = voted_for
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _end_voting(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "end voting")
        _require_phase(room, "Not in voting phase", RoomPhase.VOTING)
        room.phase = RoomPhase.RESULTS
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _results(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "skip to results")
        _require_phase(
            room,
            "No game in progress",
            RoomPhase.REVEALING,
            RoomPhase.DISCUSSION,
            RoomPhase.VOTING,
        )
        room.phase = RoomPhase.RESULTS
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _play_again(self, room: Room, player: RoomPlayer) -> str:
        room.require_admin(player, "start new game")
        _require_phase(room, "The current game has not finished", RoomPhase.RESULTS)
        room.reset_for_new_game()
        return ROOM_EVENTS["ROOM_UPDATED"]

    def _update_settings(self, room: Room, player: RoomPlayer, settings: Optional[RoomSettings]) -> str:
        room.require_admin(player, "update settings")
        _require_phase(room, "Can only update settings before game starts", RoomPhase.WAITING)
        if settings is None:
            raise ValidationError("Settings are required")
        room.settings = settings
        return ROOM_EVENTS["ROOM_UPDATED"]

    # ---------------------------------------------------------------------
    # Primary dispatcher used by the action endpoint
    # ---------------------------------------------------------------------

    async def handle_action(self, code: str, request: ActionRequest) -> Room:
        if not request.player_id:
            raise ValidationError("Player ID is required")
        try:
            action = Action(request.action)
        except ValueError:
            raise ValidationError(f"Unknown action: {request.action}") from None

        room = await self.registry.get(code)
        player = room.require_player(request.player_id)

        if action == Action.START:
            event = await self._start(room, player)
        elif action == Action.REVEAL:
            event = self._reveal(room, player)
        elif action == Action.DISCUSSION:
            event = self._discussion(room, player)
        elif action == Action.VOTING:
            event = self._voting(room, player)
        elif action == Action.VOTE:
            event = self._vote(room, player, request.voted_for)
        elif action == Action.END_VOTING:
            event = self._end_voting(room, player)
        elif action == Action.RESULTS:
            event = self._results(room, player)
        elif action == Action.PLAY_AGAIN:
            event = self._play_again(room, player)
        elif action == Action.UPDATE_SETTINGS:
            event = self._update_settings(room, player, request.settings)
        else:
            raise ValidationError(f"Unhandled action: {action.value}")

        room.touch(self.clock())
        await self.registry.save(room)
        await notify_room(self.notifier, room, event, action.value)
        return sanitize_room_for_player(room, player.id)


__all__ = ["RoomStateMachine"]
