"""Secret-player candidates from curated lists and live club rosters."""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

import httpx

from .errors import UpstreamError
from .footballers import ALL_CURATED, CLUBS_BY_ID, CURRENT_STARS, LEGENDS
from .room import now_ms
from .schemas import FootballPlayer, PlayerSourceSelection

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TTLCache(Generic[T]):
    """Tiny key/value cache whose entries go stale after *ttl_seconds*."""

    def __init__(self, ttl_seconds: int, clock: Callable[[], int] = now_ms):
        self.ttl_ms = ttl_seconds * 1000
        self.clock = clock
        self._entries: Dict[str, Tuple[int, T]] = {}

    def get(self, key: str) -> Optional[T]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self.clock() - stored_at >= self.ttl_ms:
            del self._entries[key]
            return None
        return value

    def put(self, key: str, value: T) -> None:
        self._entries[key] = (self.clock(), value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _to_player(raw: Dict[str, Any], team_name: Optional[str] = None) -> FootballPlayer:
    return FootballPlayer(
        name=raw.get("strPlayer") or "Unknown",
        team=team_name or raw.get("strTeam") or "Unknown",
        nationality=raw.get("strNationality") or "Unknown",
        position=raw.get("strPosition") or "Unknown",
        photo=raw.get("strCutout") or raw.get("strThumb") or None,
    )


def _is_soccer(raw: Dict[str, Any]) -> bool:
    sport = raw.get("strSport")
    return not sport or sport == "Soccer"


class PlayerCatalog:
    """Supplies candidate secret players for a source selection.

    Club rosters come from TheSportsDB and are cached per club id. The
    catalog never raises for a failing club: the failure is logged and the
    club contributes nothing, so callers always get the curated pools.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache_ttl_seconds: int = 24 * 60 * 60,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.client = client
        self.rng = rng or random.Random()
        self.rosters: TTLCache[List[FootballPlayer]] = TTLCache(cache_ttl_seconds, clock)

    async def aclose(self) -> None:
        await self.client.aclose()

    # -------------------- Upstream helpers -------------------- #

    async def _get_json(self, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        response = await self.client.get(path, params=params)
        response.raise_for_status()
        return response.json() or {}

    async def _fetch_roster(self, team_id: str, team_name: Optional[str]) -> List[FootballPlayer]:
        data = await self._get_json("/lookup_all_players.php", {"id": team_id})
        return [_to_player(raw, team_name) for raw in data.get("player") or []]

    async def club_roster(self, club_id: str) -> List[FootballPlayer]:
        cached = self.rosters.get(club_id)
        if cached is not None:
            return cached

        club = CLUBS_BY_ID.get(club_id)
        try:
            roster = await self._fetch_roster(club_id, club.name if club else None)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to fetch roster for club %s: %s", club_id, exc)
            return []

        # Photo-less entries make for a poor reveal screen.
        roster = [p for p in roster if p.photo]
        self.rosters.put(club_id, roster)
        logger.info("Cached %d players for club %s", len(roster), club_id)
        return roster

    # -------------------- Public API -------------------- #

    async def get_candidates(self, selection: PlayerSourceSelection, count: int) -> List[FootballPlayer]:
        """Return up to *count* distinct candidates drawn from *selection*."""
        if count <= 0:
            return []

        pool: List[FootballPlayer] = []
        if selection.current_stars:
            pool.extend(CURRENT_STARS)
        if selection.legends:
            pool.extend(LEGENDS)
        if selection.clubs:
            rosters = await asyncio.gather(*(self.club_roster(cid) for cid in selection.clubs))
            for roster in rosters:
                pool.extend(roster)

        if not pool:
            pool = list(ALL_CURATED)

        unique: Dict[str, FootballPlayer] = {}
        for player in pool:
            unique.setdefault(player.name.casefold(), player)
        candidates = list(unique.values())
        return self.rng.sample(candidates, k=min(count, len(candidates)))

    async def team_roster(self, team_name: str) -> Tuple[Dict[str, Any], List[FootballPlayer]]:
        """Look a club up by name and return ``(team_info, players)``."""
        try:
            data = await self._get_json("/searchteams.php", {"t": team_name})
            teams = [t for t in data.get("teams") or [] if _is_soccer(t)]
            if not teams:
                return {}, []
            team = teams[0]
            players = await self._fetch_roster(team["idTeam"], team.get("strTeam"))
        except (httpx.HTTPError, ValueError, KeyError) as exc:
            raise UpstreamError(f"Failed to fetch team {team_name}") from exc

        info = {
            "id": team["idTeam"],
            "name": team.get("strTeam"),
            "badge": team.get("strBadge"),
            "league": team.get("strLeague"),
            "country": team.get("strCountry"),
        }
        return info, players

    async def search_player(self, name: str) -> Optional[FootballPlayer]:
        try:
            data = await self._get_json("/searchplayers.php", {"p": name})
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamError(f"Failed to search for {name}") from exc
        match = next((raw for raw in data.get("player") or [] if _is_soccer(raw)), None)
        return _to_player(match) if match else None


__all__ = ["TTLCache", "PlayerCatalog"]
