from __future__ import annotations

from pathlib import Path

from roomstate.api.models import Player, Position, Rectangle, Room, RoomObjects, State, Wall
from roomstate.core.parsing import ShapeError, parse_state_json


class ScenarioLoadError(RuntimeError):
    pass


def demo_state() -> State:
    """A 10x10 room with one horizontal wall and two players."""

    return State(
        room=Room(
            id="room1",
            width=10,
            height=10,
            objects=RoomObjects(
                walls=(Wall(id="1", area=Rectangle(top=2, right=8, bottom=3, left=2)),),
                teleports=(),
            ),
        ),
        players=(
            Player(id="player1", position=Position(x=0, y=0), color="green"),
            Player(id="player2", position=Position(x=1, y=7), color="blue"),
        ),
    )


def load_state(path: Path) -> State:
    """Load an initial state from a JSON file in the wire shape (camelCase aliases)."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioLoadError(f"Cannot read scenario file: {path}") from e

    try:
        return parse_state_json(raw)
    except ShapeError as e:
        raise ScenarioLoadError(f"Malformed scenario file {path}:\n{e}") from e
