"""
HTTP and websocket tests for the FastAPI application.
"""

import random

import httpx
import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from imposter.app import create_app
from imposter.catalog import PlayerCatalog
from imposter.notifier import ChannelHub
from imposter.store import MemoryRoomStore


def sportsdb(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/searchteams.php"):
        return httpx.Response(200, json={"teams": None})
    if request.url.path.endswith("/searchplayers.php"):
        return httpx.Response(200, json={"player": [
            {"strPlayer": "Bukayo Saka", "strTeam": "Arsenal", "strSport": "Soccer",
             "strNationality": "England", "strPosition": "Right Winger"},
        ]})
    return httpx.Response(404)


@pytest.fixture
def hub():
    return ChannelHub()


@pytest.fixture
def client(hub):
    rng = random.Random(11)
    transport = httpx.MockTransport(sportsdb)
    catalog = PlayerCatalog(httpx.AsyncClient(base_url="https://sportsdb.test/api", transport=transport), rng=rng)
    app = create_app(store=MemoryRoomStore(), catalog=catalog, hub=hub, rng=rng)
    with TestClient(app) as c:
        yield c


def create_lobby(client, names=("Bob", "Cara")):
    res = client.post("/api/room", json={"adminName": "Alice", "settings": {"discussionTime": 60}})
    assert res.status_code == 200
    body = res.json()
    ids = {"Alice": body["playerId"]}
    for name in names:
        joined = client.post(f"/api/room/{body['code']}", json={"playerName": name})
        assert joined.status_code == 200
        ids[name] = joined.json()["playerId"]
    return body["code"], ids


def act(client, code, action, player_id, **extra):
    return client.post(f"/api/room/{code}/action", json={"action": action, "playerId": player_id, **extra})


def test_create_room_returns_code_and_admin(client):
    res = client.post("/api/room", json={"adminName": "Alice"})
    body = res.json()

    assert res.status_code == 200
    assert len(body["code"]) == 6
    [admin] = body["room"]["players"]
    assert admin["id"] == body["playerId"]
    assert admin["isAdmin"] is True
    assert body["room"]["phase"] == "waiting"
    assert body["room"]["settings"]["discussionTime"] == 180


def test_full_game_over_http(client):
    code, ids = create_lobby(client)

    started = act(client, code, "start", ids["Alice"])
    assert started.status_code == 200
    assert started.json()["room"]["phase"] == "revealing"
    assert "voteResults" not in started.json()

    # Revealing: a member sees nobody else's role.
    bob_view = client.get(f"/api/room/{code}", params={"playerId": ids["Bob"]}).json()["room"]
    others = [p for p in bob_view["players"] if p["id"] != ids["Bob"]]
    assert not any(p["isImposter"] for p in others)
    assert bob_view["trollEvent"] is None

    for pid in ids.values():
        assert act(client, code, "reveal", pid).status_code == 200
    discussion = act(client, code, "discussion", ids["Alice"]).json()["room"]
    assert discussion["phase"] == "discussion"
    assert discussion["startingPlayerId"] in ids.values()
    assert discussion["discussionEndTime"] is not None

    assert act(client, code, "voting", ids["Alice"]).status_code == 200
    act(client, code, "vote", ids["Alice"], votedFor=ids["Cara"])
    act(client, code, "vote", ids["Bob"], votedFor=ids["Cara"])
    act(client, code, "vote", ids["Cara"], votedFor=ids["Bob"])

    results = act(client, code, "endVoting", ids["Alice"]).json()
    assert results["room"]["phase"] == "results"
    assert results["voteResults"] == {
        "votes": {ids["Cara"]: 2, ids["Bob"]: 1},
        "eliminatedId": ids["Cara"],
    }

    # Results: everything is visible, including the roles.
    final = client.get(f"/api/room/{code}", params={"playerId": ids["Bob"]}).json()
    assert any(p["isImposter"] for p in final["room"]["players"])
    assert final["voteResults"]["eliminatedId"] == ids["Cara"]

    again = act(client, code, "playAgain", ids["Alice"]).json()["room"]
    assert again["phase"] == "waiting"
    assert all(p["votedFor"] is None and not p["isImposter"] for p in again["players"])


def test_room_codes_are_case_insensitive(client):
    code, ids = create_lobby(client, names=())
    res = client.get(f"/api/room/{code.lower()}", params={"playerId": ids["Alice"]})
    assert res.status_code == 200
    assert res.json()["room"]["code"] == code


def test_unknown_room_is_not_found(client):
    res = client.get("/api/room/ZZZZZZ", params={"playerId": "p_1"})
    assert res.status_code == 404
    assert res.json() == {"error": "not_found", "detail": "Room not found"}


def test_view_requires_membership(client):
    code, _ = create_lobby(client, names=())
    assert client.get(f"/api/room/{code}").status_code == 400
    res = client.get(f"/api/room/{code}", params={"playerId": "p_stranger"})
    assert res.status_code == 403
    assert res.json()["error"] == "forbidden"


def test_malformed_body_is_a_validation_error(client):
    res = client.post("/api/room", json={})
    assert res.status_code == 400
    assert res.json()["error"] == "validation"
    assert "adminName" in res.json()["detail"]


def test_out_of_range_settings_are_rejected(client):
    res = client.post("/api/room", json={"adminName": "Alice", "settings": {"trollChance": 150}})
    assert res.status_code == 400


def test_unknown_action(client):
    code, ids = create_lobby(client)
    res = act(client, code, "dance", ids["Alice"])
    assert res.status_code == 400
    assert res.json() == {"error": "validation", "detail": "Unknown action: dance"}


def test_non_admin_cannot_start(client):
    code, ids = create_lobby(client)
    res = act(client, code, "start", ids["Bob"])
    assert res.status_code == 403
    assert res.json()["detail"].startswith("Only admin")


def test_duplicate_name_conflicts(client):
    code, _ = create_lobby(client)
    res = client.post(f"/api/room/{code}", json={"playerName": "bob"})
    assert res.status_code == 409
    assert res.json()["error"] == "conflict"


def test_kick_and_beacon_leave(client):
    code, ids = create_lobby(client)

    kicked = client.delete(f"/api/room/{code}", params={"playerId": ids["Bob"], "adminId": ids["Alice"]})
    assert kicked.status_code == 200
    assert ids["Bob"] not in {p["id"] for p in kicked.json()["room"]["players"]}

    denied = client.delete(f"/api/room/{code}", params={"playerId": ids["Alice"], "adminId": ids["Cara"]})
    assert denied.status_code == 403

    assert client.post(f"/api/room/{code}/leave", params={"playerId": ids["Cara"]}).json() == {"success": True}
    assert client.post(f"/api/room/{code}/leave", params={"playerId": ids["Alice"]}).json() == {"deleted": True}
    assert client.get(f"/api/room/{code}", params={"playerId": ids["Alice"]}).status_code == 404


def test_players_endpoints(client):
    clubs = client.get("/api/players/clubs").json()["clubs"]
    assert len(clubs) == 15
    assert {"id", "name", "shortName", "badge"} == set(clubs[0])

    picks = client.get("/api/players", params={"count": 4, "legends": "false"}).json()
    assert picks["returned"] == 4
    assert all("hint" in p for p in picks["players"])

    assert client.get("/api/players", params={"count": 0}).status_code == 400

    missing = client.get("/api/players/team", params={"name": "Nowhere Rovers"})
    assert missing.status_code == 404

    found = client.get("/api/players/search", params={"name": "Saka"}).json()
    assert found["players"][0]["name"] == "Bukayo Saka"


def test_websocket_receives_change_signals_only(client, hub):
    code, ids = create_lobby(client)

    with client.websocket_connect(f"/ws/{code}?playerId={ids['Bob']}") as ws:
        hello = ws.receive_json()
        assert hello == {"type": "subscribed", "data": {"channel": f"room-{code}"}}
        assert hub.subscriber_count(f"room-{code}") == 1

        act(client, code, "start", ids["Alice"])
        message = ws.receive_json()

    assert message["type"] == "game-started"
    assert set(message["data"]) == {"event", "phase", "updatedAt", "kickedPlayerId"}
    assert message["data"]["event"] == "start"
    assert message["data"]["phase"] == "revealing"


def test_websocket_rejects_non_members(client):
    code, _ = create_lobby(client)
    with pytest.raises(WebSocketDisconnect) as exc:
        with client.websocket_connect(f"/ws/{code}?playerId=p_stranger") as ws:
            ws.receive_json()
    assert exc.value.code == 4002
