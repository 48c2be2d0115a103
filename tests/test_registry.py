"""
Tests for room persistence: code generation, expiry and strict decoding.
"""

import random

import pytest
from tortoise import Tortoise, connections

from conftest import FakeClock, run
from imposter.constants import ROOM_CODE_ALPHABET
from imposter.errors import NotFoundError, RoomCodeExhaustedError, ValidationError
from imposter.registry import RoomRegistry
from imposter.schemas import RoomSettings
from imposter.store import MemoryRoomStore, TortoiseRoomStore


def test_generated_codes_avoid_confusable_characters(registry):
    codes = [registry.generate_code() for _ in range(200)]
    assert all(len(c) == 6 and set(c) <= set(ROOM_CODE_ALPHABET) for c in codes)
    assert not set("".join(codes)) & set("0O1I")


def test_create_retries_on_collision(store, registry):
    run(store.set("TAKEN2", "{}", 60))
    codes = iter(["TAKEN2", "TAKEN2", "FRESH3"])
    registry.generate_code = lambda: next(codes)

    room = run(registry.create("Alice", RoomSettings()))
    assert room.code == "FRESH3"


def test_create_gives_up_after_bounded_attempts(store, clock):
    registry = RoomRegistry(store, ttl_seconds=60, code_attempts=3, clock=clock)
    run(store.set("TAKEN2", "{}", 60))
    calls = []

    def always_taken():
        calls.append(1)
        return "TAKEN2"

    registry.generate_code = always_taken
    with pytest.raises(RoomCodeExhaustedError):
        run(registry.create("Alice", RoomSettings()))
    assert len(calls) == 3


def test_rooms_expire_after_ttl(store, registry, clock):
    room = run(registry.create("Alice", RoomSettings()))
    clock.advance(7200 * 1000 - 1)
    assert run(registry.load(room.code)) is not None

    clock.advance(1)
    assert run(registry.load(room.code)) is None
    with pytest.raises(NotFoundError):
        run(registry.get(room.code))


def test_save_refreshes_expiry(registry, clock):
    room = run(registry.create("Alice", RoomSettings()))
    clock.advance(7000 * 1000)
    run(registry.save(room))
    clock.advance(7000 * 1000)
    assert run(registry.load(room.code)) is not None


def test_malformed_record_fails_loudly(store, registry):
    run(store.set("BROKEN", '{"code": "BROKEN", "players": "nope"}', 60))
    with pytest.raises(ValidationError, match="malformed"):
        run(registry.get("BROKEN"))


def test_lookup_is_case_insensitive(registry):
    room = run(registry.create("Alice", RoomSettings()))
    assert run(registry.get(room.code.lower())).code == room.code


def test_tortoise_store_round_trip_and_expiry():
    clock = FakeClock()

    async def scenario():
        await Tortoise.init(db_url="sqlite://:memory:", modules={"models": ["imposter.models"]})
        await Tortoise.generate_schemas()
        try:
            store = TortoiseRoomStore(clock)
            registry = RoomRegistry(store, ttl_seconds=10, rng=random.Random(0), clock=clock)

            room = await registry.create("Alice", RoomSettings(discussion_time=30))
            loaded = await registry.get(room.code)
            assert loaded == room

            loaded.players[0].name = "Alicia"
            await registry.save(loaded)
            assert (await registry.get(room.code)).players[0].name == "Alicia"

            clock.advance(10_000)
            assert await registry.load(room.code) is None
            assert await store.purge_expired() == 0

            other = await registry.create("Bob", RoomSettings())
            clock.advance(10_000)
            assert await store.purge_expired() == 1
            assert not await store.exists(other.code)
        finally:
            await connections.close_all()

    run(scenario())


def test_memory_store_delete():
    store = MemoryRoomStore(FakeClock())
    run(store.set("ABCDEF", "{}", 60))
    run(store.delete("ABCDEF"))
    assert run(store.get("ABCDEF")) is None
