from __future__ import annotations

import pytest

from roomstate.api.models import Player, Position, Rectangle, Room, RoomObjects, State, Wall

_ENV_VARS = ("ROOMSTATE_HISTORY_LIMIT", "ROOMSTATE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_roomstate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without ROOMSTATE_* variables.

    Setting then deleting registers each variable with monkeypatch, so values a
    test loads later (e.g. from a .env file) are removed again on teardown.
    """

    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture()
def initial_state() -> State:
    """10x10 room, wall covering x/y 2..4, player1 at (0,0) and player2 at (1,1)."""

    return State(
        room=Room(
            id="room1",
            width=10,
            height=10,
            objects=RoomObjects(
                walls=(Wall(id="1", area=Rectangle(top=2, right=4, bottom=4, left=2)),),
                teleports=(),
            ),
        ),
        players=(
            Player(id="player1", position=Position(x=0, y=0), color="red"),
            Player(id="player2", position=Position(x=1, y=1), color="blue"),
        ),
    )


@pytest.fixture()
def initial_state_wire() -> dict:
    """The same state as `initial_state`, in its JSON wire shape."""

    return {
        "room": {
            "id": "room1",
            "objects": {
                "walls": [{"id": "1", "area": {"top": 2, "right": 4, "bottom": 4, "left": 2}}],
                "teleports": [],
            },
            "width": 10,
            "height": 10,
        },
        "players": [
            {"id": "player1", "position": {"x": 0, "y": 0}, "color": "red"},
            {"id": "player2", "position": {"x": 1, "y": 1}, "color": "blue"},
        ],
    }
