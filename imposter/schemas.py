"""Pydantic data schemas used across the service.

This module centralises the shared value types (footballers, settings,
phases) and the REST request / response bodies so other modules can import
them from a single location. All models speak camelCase on the wire and
snake_case in Python.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# -----------------------------
# Game vocabulary
# -----------------------------

class RoomPhase(str, Enum):
    WAITING = "waiting"
    REVEALING = "revealing"
    DISCUSSION = "discussion"
    VOTING = "voting"
    RESULTS = "results"


class TrollEvent(str, Enum):
    EXTRA_IMPOSTER = "extraImposter"
    ALL_IMPOSTERS = "allImposters"
    NO_IMPOSTERS = "noImposters"
    DIFFERENT_PLAYERS = "differentPlayers"


ALL_TROLL_EVENTS: List[TrollEvent] = list(TrollEvent)


class Action(str, Enum):
    START = "start"
    REVEAL = "reveal"
    DISCUSSION = "discussion"
    VOTING = "voting"
    VOTE = "vote"
    END_VOTING = "endVoting"
    RESULTS = "results"
    PLAY_AGAIN = "playAgain"
    UPDATE_SETTINGS = "updateSettings"


# -----------------------------
# Footballers & sources
# -----------------------------

class FootballPlayer(WireModel):
    """A candidate secret player."""

    name: str
    team: str
    nationality: str
    position: str
    photo: Optional[str] = None
    hint: Optional[str] = None


class ClubInfo(WireModel):
    id: str  # TheSportsDB team id
    name: str
    short_name: str
    badge: str


class PlayerSourceSelection(WireModel):
    """Which pools the secret player may be drawn from (multi-select)."""

    current_stars: bool = True
    legends: bool = True
    clubs: List[str] = Field(default_factory=list)


class RoomSettings(WireModel):
    """Admin-controlled options. Stored verbatim; clamps apply at game start."""

    discussion_time: int = Field(default=180, ge=0)  # seconds, 0 = no timer
    imposter_count: int = Field(default=1, ge=1)
    imposter_less_likely_to_start: bool = False
    troll_chance: int = Field(default=0, ge=0, le=100)
    enabled_troll_events: List[TrollEvent] = Field(default_factory=lambda: list(ALL_TROLL_EVENTS))
    source_selection: PlayerSourceSelection = Field(default_factory=PlayerSourceSelection)


# -----------------------------
# REST request / response models
# -----------------------------

class CreateRoomRequest(WireModel):
    admin_name: str
    settings: RoomSettings = Field(default_factory=RoomSettings)


class JoinRoomRequest(WireModel):
    player_name: str


class ActionRequest(WireModel):
    # ``action`` stays a plain string so unknown actions surface as a
    # validation error with a readable message instead of a schema error.
    action: str
    player_id: Optional[str] = None
    voted_for: Optional[str] = None
    settings: Optional[RoomSettings] = None


class VoteResults(WireModel):
    votes: Dict[str, int] = Field(default_factory=dict)
    eliminated_id: Optional[str] = None


class RoomEvent(WireModel):
    """Notification payload: never carries room data."""

    event: str
    phase: Optional[RoomPhase] = None
    updated_at: int
    kicked_player_id: Optional[str] = None


__all__ = [
    "WireModel",
    "RoomPhase",
    "TrollEvent",
    "ALL_TROLL_EVENTS",
    "Action",
    "FootballPlayer",
    "ClubInfo",
    "PlayerSourceSelection",
    "RoomSettings",
    "CreateRoomRequest",
    "JoinRoomRequest",
    "ActionRequest",
    "VoteResults",
    "RoomEvent",
]
