from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..roles import tally_votes
from ..room import Room
from ..schemas import ActionRequest, CreateRoomRequest, JoinRoomRequest, RoomPhase
from ..state import GameServices, get_services

router = APIRouter(prefix="/api", tags=["rooms"])


def _room_payload(room: Room) -> dict:
    payload = {"room": room.to_wire()}
    if room.phase == RoomPhase.RESULTS:
        payload["voteResults"] = tally_votes(room.players).to_wire()
    return payload


@router.post("/room")
async def create_room(req: CreateRoomRequest, services: GameServices = Depends(get_services)):
    room = await services.machine.create_room(req.admin_name, req.settings)
    # The room is still waiting, so the unsanitized state holds no secrets.
    return {"code": room.code, "playerId": room.players[0].id, "room": room.to_wire()}


@router.get("/room/{code}")
async def get_room(
    code: str,
    player_id: Optional[str] = Query(default=None, alias="playerId"),
    services: GameServices = Depends(get_services),
):
    room = await services.machine.view_room(code, player_id)
    return _room_payload(room)


@router.post("/room/{code}")
async def join_room(code: str, req: JoinRoomRequest, services: GameServices = Depends(get_services)):
    player, room = await services.machine.join_room(code, req.player_name)
    return {"playerId": player.id, "room": room.to_wire()}


@router.delete("/room/{code}")
async def leave_room(
    code: str,
    player_id: Optional[str] = Query(default=None, alias="playerId"),
    admin_id: Optional[str] = Query(default=None, alias="adminId"),
    services: GameServices = Depends(get_services),
):
    room = await services.machine.leave_room(code, player_id, admin_id)
    if room is None:
        return {"deleted": True}
    return {"room": room.to_wire()}


@router.post("/room/{code}/leave")
async def leave_beacon(
    code: str,
    player_id: Optional[str] = Query(default=None, alias="playerId"),
    services: GameServices = Depends(get_services),
):
    """Tab-close leave sent with ``navigator.sendBeacon``; nobody reads the reply."""
    room = await services.machine.leave_room(code, player_id)
    if room is None:
        return {"deleted": True}
    return {"success": True}


@router.post("/room/{code}/action")
async def perform_action(code: str, req: ActionRequest, services: GameServices = Depends(get_services)):
    room = await services.machine.handle_action(code, req)
    return _room_payload(room)
