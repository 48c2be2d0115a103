"""Per-application runtime services.

The app factory builds one :class:`GameServices` bundle and stores it on
``app.state`` so routers get their collaborators through a dependency
rather than through module-level singletons.
"""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from .catalog import PlayerCatalog
from .game_logic import RoomStateMachine
from .notifier import ChannelHub


@dataclass
class GameServices:
    machine: RoomStateMachine
    catalog: PlayerCatalog
    hub: ChannelHub


def get_services(request: Request) -> GameServices:
    return request.app.state.services

__all__ = ["GameServices", "get_services"]
