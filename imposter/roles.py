"""Role assignment: troll roll, imposter draw, secret players, first speaker.

Everything random goes through an explicit ``random.Random`` so games can be
replayed in tests. :func:`assign_roles` gathers every external input (the
secret player candidates) before it touches the room, so a failing player
source leaves the room exactly as it was.
"""
from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .catalog import PlayerCatalog
from .constants import CREWMATE_START_WEIGHT, IMPOSTER_START_WEIGHT
from .errors import UpstreamError
from .room import Room, RoomPlayer
from .schemas import TrollEvent, VoteResults

logger = logging.getLogger(__name__)


def roll_troll_event(troll_chance: int, enabled: Iterable[TrollEvent], rng: random.Random) -> Optional[TrollEvent]:
    """Return the troll event for a new game, or ``None`` when none fires."""
    events = list(dict.fromkeys(enabled))
    if troll_chance <= 0 or not events:
        return None
    if rng.random() * 100 >= troll_chance:
        return None
    return rng.choice(events)


def max_imposters(player_count: int, trolls_enabled: bool) -> int:
    # One seat is held back when trolls are on so "extraImposter" still
    # leaves at least one crewmate.
    return max(1, player_count - (3 if trolls_enabled else 2))


def effective_imposter_count(configured: int, player_count: int, event: Optional[TrollEvent]) -> int:
    if event is None or event == TrollEvent.DIFFERENT_PLAYERS:
        return configured
    if event == TrollEvent.EXTRA_IMPOSTER:
        return min(configured + 1, player_count - 1)
    if event == TrollEvent.ALL_IMPOSTERS:
        return player_count
    if event == TrollEvent.NO_IMPOSTERS:
        return 0
    raise ValueError(f"Unhandled troll event {event!r}")


def pick_imposters(players: Sequence[RoomPlayer], count: int, rng: random.Random) -> List[RoomPlayer]:
    """Flag *count* distinct players as imposters, clearing earlier flags."""
    for p in players:
        p.is_imposter = False
    chosen = [players[i] for i in rng.sample(range(len(players)), k=min(count, len(players)))]
    for p in chosen:
        p.is_imposter = True
    return chosen


def select_starting_player(players: Sequence[RoomPlayer], imposter_less_likely: bool, rng: random.Random) -> str:
    if not players:
        raise ValueError("Cannot pick a starting player from an empty room")
    if not imposter_less_likely:
        return rng.choice(players).id

    weights = [IMPOSTER_START_WEIGHT if p.is_imposter else CREWMATE_START_WEIGHT for p in players]
    remaining = rng.random() * sum(weights)
    for player, weight in zip(players, weights):
        remaining -= weight
        if remaining < 0:
            return player.id
    return players[-1].id


def tally_votes(players: Iterable[RoomPlayer]) -> VoteResults:
    """Count votes; only a strict maximum eliminates, any top tie yields ``None``."""
    votes = Counter(p.voted_for for p in players if p.voted_for)
    eliminated: Optional[str] = None
    if votes:
        top = max(votes.values())
        leaders = [pid for pid, cnt in votes.items() if cnt == top]
        if len(leaders) == 1:
            eliminated = leaders[0]
    return VoteResults(votes=dict(votes), eliminated_id=eliminated)


async def assign_roles(room: Room, catalog: PlayerCatalog, rng: random.Random) -> Optional[TrollEvent]:
    """Set up a new game instance on *room* and return the troll event."""
    settings = room.settings
    players = room.players
    player_count = len(players)

    trolls_enabled = settings.troll_chance > 0 and bool(settings.enabled_troll_events)
    configured = min(settings.imposter_count, max_imposters(player_count, trolls_enabled))
    event = roll_troll_event(settings.troll_chance, settings.enabled_troll_events, rng)
    imposter_count = effective_imposter_count(configured, player_count, event)

    try:
        candidates = await catalog.get_candidates(settings.source_selection, 1)
        individual = []
        if event == TrollEvent.DIFFERENT_PLAYERS:
            individual = await catalog.get_candidates(settings.source_selection, player_count)
    except UpstreamError:
        raise
    except Exception as exc:
        raise UpstreamError("Failed to load secret player") from exc
    if not candidates:
        raise UpstreamError("No secret player available for the selected sources")
    secret = candidates[0]

    for p in players:
        p.has_revealed = False
        p.voted_for = None
        p.secret_player = None
    pick_imposters(players, imposter_count, rng)

    if event == TrollEvent.DIFFERENT_PLAYERS:
        crew = [p for p in players if not p.is_imposter]
        for i, p in enumerate(crew):
            p.secret_player = individual[i] if i < len(individual) else secret

    room.secret_player = secret
    room.troll_event = event
    logger.info(
        "Room %s: %d imposters of %d players, troll event %s",
        room.code, imposter_count, player_count, event.value if event else None,
    )
    return event


__all__ = [
    "roll_troll_event",
    "max_imposters",
    "effective_imposter_count",
    "pick_imposters",
    "select_starting_player",
    "tally_votes",
    "assign_roles",
]
