from __future__ import annotations

import logging
import random
from typing import Callable, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tortoise.contrib.fastapi import register_tortoise

from .catalog import PlayerCatalog
from .config import Config
from .errors import GameError
from .game_logic import RoomStateMachine
from .notifier import ChannelHub
from .registry import RoomRegistry
from .room import now_ms
from .routers import players as players_router
from .routers import rooms as rooms_router
from .routers import websockets as ws_router
from .state import GameServices
from .store import MemoryRoomStore, RoomStore, TortoiseRoomStore


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(
    config: type[Config] = Config,
    store: Optional[RoomStore] = None,
    catalog: Optional[PlayerCatalog] = None,
    hub: Optional[ChannelHub] = None,
    rng: Optional[random.Random] = None,
    clock: Callable[[], int] = now_ms,
) -> FastAPI:
    """Build the application; collaborators may be injected for tests."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # -----------------------------
    # FastAPI app instance
    # -----------------------------

    app = FastAPI(title="Football Imposter Backend")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------
    # Storage
    # -----------------------------

    if store is None:
        if config.ROOM_STORE == "memory":
            store = MemoryRoomStore(clock)
        else:
            store = TortoiseRoomStore(clock)
            register_tortoise(
                app,
                db_url=config.DATABASE_URL,
                modules={"models": ["imposter.models"]},
                generate_schemas=True,
                add_exception_handlers=True,
            )

    # -----------------------------
    # Game services
    # -----------------------------

    rng = rng or random.Random()
    if catalog is None:
        client = httpx.AsyncClient(base_url=config.SPORTSDB_BASE_URL, timeout=config.SPORTSDB_TIMEOUT)
        catalog = PlayerCatalog(client, config.PLAYER_CACHE_TTL_SECONDS, rng=rng, clock=clock)
    hub = hub or ChannelHub()
    registry = RoomRegistry(store, config.ROOM_TTL_SECONDS, config.ROOM_CODE_ATTEMPTS, rng=rng, clock=clock)
    machine = RoomStateMachine(
        registry,
        catalog,
        hub,
        rng=rng,
        clock=clock,
        max_players=config.MAX_PLAYERS,
        min_players=config.MIN_PLAYERS,
    )
    app.state.services = GameServices(machine=machine, catalog=catalog, hub=hub)

    if isinstance(store, TortoiseRoomStore):
        purge_store = store

        @app.on_event("startup")
        async def purge_expired_rooms():
            await purge_store.purge_expired()

    @app.on_event("shutdown")
    async def close_catalog():
        await catalog.aclose()

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "validation", "detail": _describe(exc)})

    # Register routers
    app.include_router(rooms_router.router)
    app.include_router(players_router.router)
    app.include_router(ws_router.router)

    return app


app = create_app()

__all__ = ["app", "create_app"]
