"""
Pytest fixtures for room engine tests.
"""

import asyncio
import random
from typing import List, Optional

import pytest

from imposter.game_logic import RoomStateMachine
from imposter.registry import RoomRegistry
from imposter.schemas import FootballPlayer, RoomSettings
from imposter.store import MemoryRoomStore


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeCatalog:
    """Candidate source returning a fixed pool in order."""

    def __init__(self, pool: Optional[List[FootballPlayer]] = None, error: Optional[Exception] = None):
        self.pool = pool if pool is not None else [
            FootballPlayer(name=f"Player {i}", team="Test FC", nationality="Testland", position="Forward")
            for i in range(12)
        ]
        self.error = error
        self.calls = []

    async def get_candidates(self, selection, count):
        self.calls.append(count)
        if self.error is not None:
            raise self.error
        return self.pool[:count]


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.events = []

    async def trigger(self, channel, event, data):
        if self.fail:
            raise ConnectionError("transport down")
        self.events.append((channel, event, data))


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store(clock):
    return MemoryRoomStore(clock)


@pytest.fixture
def registry(store, clock):
    return RoomRegistry(store, ttl_seconds=7200, code_attempts=10, rng=random.Random(1), clock=clock)


@pytest.fixture
def machine(registry, catalog, notifier, clock):
    return RoomStateMachine(registry, catalog, notifier, rng=random.Random(7), clock=clock)


@pytest.fixture
def lobby(machine):
    """A waiting room with Alice (admin), Bob and Cara. Returns (code, ids)."""
    room = run(machine.create_room("Alice", RoomSettings(discussion_time=120)))
    bob, _ = run(machine.join_room(room.code, "Bob"))
    cara, _ = run(machine.join_room(room.code, "Cara"))
    return room.code, {"alice": room.players[0].id, "bob": bob.id, "cara": cara.id}
