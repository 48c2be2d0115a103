from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..errors import NotFoundError
from ..footballers import CLUBS
from ..schemas import PlayerSourceSelection
from ..state import GameServices, get_services

router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("")
async def random_players(
    count: int = Query(default=1, ge=1, le=100),
    current_stars: bool = Query(default=True, alias="currentStars"),
    legends: bool = Query(default=True),
    clubs: Optional[str] = Query(default=None, description="Comma separated club ids"),
    services: GameServices = Depends(get_services),
):
    selection = PlayerSourceSelection(
        current_stars=current_stars,
        legends=legends,
        clubs=[c.strip() for c in (clubs or "").split(",") if c.strip()],
    )
    players = await services.catalog.get_candidates(selection, count)
    return {"players": [p.to_wire() for p in players], "returned": len(players)}


@router.get("/clubs")
async def list_clubs():
    return {"clubs": [club.to_wire() for club in CLUBS]}


@router.get("/team")
async def team_players(name: str = Query(min_length=1), services: GameServices = Depends(get_services)):
    team, players = await services.catalog.team_roster(name)
    if not team:
        raise NotFoundError(f"Team not found: {name}")
    return {"team": team, "players": [p.to_wire() for p in players], "total": len(players)}


@router.get("/search")
async def search_player(name: str = Query(min_length=1), services: GameServices = Depends(get_services)):
    player = await services.catalog.search_player(name)
    return {"players": [player.to_wire()] if player else []}
