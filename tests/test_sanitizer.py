"""
Tests for per-player redaction of room state.
"""

import pytest

from imposter.room import Room, RoomPlayer
from imposter.sanitizer import sanitize_room_for_player
from imposter.schemas import FootballPlayer, RoomPhase, TrollEvent

SECRET = FootballPlayer(name="Pelé", team="Santos", nationality="Brazil", position="Forward")
OTHER = FootballPlayer(name="Kaká", team="AC Milan", nationality="Brazil", position="Midfielder")


@pytest.fixture
def room():
    return Room(
        code="ABCDEF",
        phase=RoomPhase.REVEALING,
        players=[
            RoomPlayer(id="imp", name="Imp", is_admin=True, is_imposter=True, voted_for="c1", joined_at=1),
            RoomPlayer(id="c1", name="Crew1", voted_for="imp", secret_player=OTHER, joined_at=2),
            RoomPlayer(id="c2", name="Crew2", voted_for="imp", joined_at=3),
        ],
        secret_player=SECRET,
        troll_event=TrollEvent.DIFFERENT_PLAYERS,
        created_at=0,
        updated_at=0,
    )


@pytest.mark.parametrize("phase", [RoomPhase.WAITING, RoomPhase.RESULTS])
def test_open_phases_show_everything(room, phase):
    room.phase = phase
    view = sanitize_room_for_player(room, "c2")
    assert view == room
    assert view is not room


@pytest.mark.parametrize("phase", [RoomPhase.REVEALING, RoomPhase.DISCUSSION, RoomPhase.VOTING])
def test_imposter_never_sees_secret(room, phase):
    room.phase = phase
    view = sanitize_room_for_player(room, "imp")

    assert view.secret_player is None
    assert view.troll_event is None
    assert view.find_player("imp").is_imposter
    assert not any(p.is_imposter for p in view.players if p.id != "imp")
    assert view.find_player("c1").secret_player is None


@pytest.mark.parametrize("phase", [RoomPhase.REVEALING, RoomPhase.DISCUSSION, RoomPhase.VOTING])
def test_crew_sees_secret_but_not_roles(room, phase):
    room.phase = phase
    view = sanitize_room_for_player(room, "c1")

    assert view.secret_player == SECRET
    assert view.troll_event is None
    assert view.find_player("c1").secret_player == OTHER
    assert not view.find_player("imp").is_imposter


def test_votes_hidden_only_while_voting(room):
    room.phase = RoomPhase.VOTING
    view = sanitize_room_for_player(room, "c2")
    assert view.find_player("c2").voted_for == "imp"
    assert view.find_player("imp").voted_for is None
    assert view.find_player("c1").voted_for is None

    room.phase = RoomPhase.DISCUSSION
    view = sanitize_room_for_player(room, "c2")
    assert view.find_player("c1").voted_for == "imp"


def test_unknown_viewer_gets_spectator_view(room):
    room.phase = RoomPhase.DISCUSSION
    view = sanitize_room_for_player(room, "stranger")

    assert view.secret_player is None
    assert view.troll_event is None
    assert all(not p.is_imposter and p.secret_player is None for p in view.players)
    # Votes follow the same rule as for members: visible outside voting.
    assert [p.voted_for for p in view.players] == ["c1", "imp", "imp"]


def test_unknown_viewer_never_sees_votes_during_voting(room):
    room.phase = RoomPhase.VOTING
    view = sanitize_room_for_player(room, "stranger")
    assert all(p.voted_for is None for p in view.players)
    assert view.secret_player is None


def test_source_room_untouched(room):
    snapshot = room.model_copy(deep=True)
    sanitize_room_for_player(room, "c1")
    sanitize_room_for_player(room, None)
    assert room == snapshot
