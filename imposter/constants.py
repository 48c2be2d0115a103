# Room codes skip the visually confusable 0/O and 1/I.
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6

# Weights for the starting-player draw when imposters are less likely to start.
CREWMATE_START_WEIGHT = 2
IMPOSTER_START_WEIGHT = 1

# Notification events published on a room channel.
ROOM_EVENTS: dict[str, str] = {
    "ROOM_UPDATED": "room-updated",
    "PLAYER_JOINED": "player-joined",
    "PLAYER_LEFT": "player-left",
    "GAME_STARTED": "game-started",
    "PLAYER_REVEALED": "player-revealed",
}

ROOM_KEY_PREFIX = "room:"


def room_channel(code: str) -> str:
    return f"room-{code.upper()}"


__all__ = [
    "ROOM_CODE_ALPHABET",
    "ROOM_CODE_LENGTH",
    "CREWMATE_START_WEIGHT",
    "IMPOSTER_START_WEIGHT",
    "ROOM_EVENTS",
    "ROOM_KEY_PREFIX",
    "room_channel",
]
