"""Runtime configuration collected from environment variables."""
from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else default


class Config:
    # Storage
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite://database.db")
    ROOM_STORE = os.environ.get("ROOM_STORE", "tortoise")
    ROOM_TTL_SECONDS = _int_env("ROOM_TTL_SECONDS", 2 * 60 * 60)
    ROOM_CODE_ATTEMPTS = _int_env("ROOM_CODE_ATTEMPTS", 10)

    # Game
    MAX_PLAYERS = _int_env("MAX_PLAYERS", 10)
    MIN_PLAYERS = _int_env("MIN_PLAYERS", 3)

    # Player data (TheSportsDB free tier, no key required)
    SPORTSDB_BASE_URL = os.environ.get("SPORTSDB_BASE_URL", "https://www.thesportsdb.com/api/v1/json/3")
    SPORTSDB_TIMEOUT = float(os.environ.get("SPORTSDB_TIMEOUT", "10"))
    PLAYER_CACHE_TTL_SECONDS = _int_env("PLAYER_CACHE_TTL_SECONDS", 24 * 60 * 60)

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def cors_origins(cls) -> List[str]:
        return [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]

__all__ = ["Config"]
