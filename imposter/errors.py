"""Error taxonomy for room actions.

Every rejected action raises a :class:`GameError` subclass *before* the room
record is mutated, so a failure never leaves a partial write behind. The
subclasses are ``HTTPException``s, which lets FastAPI map them onto status
codes while the ``kind`` attribute keeps them distinguishable for clients.
"""
from __future__ import annotations

from fastapi import HTTPException, status


class GameError(HTTPException):
    kind = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.detail}


class ValidationError(GameError):
    """Malformed or missing input, including store records of the wrong shape."""

    kind = "validation"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(GameError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(GameError):
    """Missing privilege or an unmet phase precondition."""

    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(GameError):
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT


class UpstreamError(GameError):
    """The player-data source or another collaborator failed."""

    kind = "upstream"
    status_code = status.HTTP_502_BAD_GATEWAY


class RoomCodeExhaustedError(UpstreamError):
    kind = "room_code_exhausted"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

__all__ = [
    "GameError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "ConflictError",
    "UpstreamError",
    "RoomCodeExhaustedError",
]
