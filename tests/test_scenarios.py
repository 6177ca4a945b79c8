from __future__ import annotations

import json
from pathlib import Path

import pytest

from roomstate.api.models import MovePlayerEvent, Position, State
from roomstate.core.parsing import ShapeError
from roomstate.scenarios import ScenarioLoadError, demo_state, load_state
from roomstate.transitions import is_event_valid


def test_demo_state_layout() -> None:
    state = demo_state()

    assert (state.room.width, state.room.height) == (10, 10)
    assert [w.id for w in state.room.objects.walls] == ["1"]
    assert state.player_ids() == ("player1", "player2")


def test_demo_wall_blocks_row_three() -> None:
    state = demo_state()

    def move(x: int, y: int) -> MovePlayerEvent:
        return MovePlayerEvent(player_id="player1", position=Position(x=x, y=y))

    assert is_event_valid(state, move(5, 3)) is False
    assert is_event_valid(state, move(8, 2)) is False
    assert is_event_valid(state, move(5, 4)) is True
    assert is_event_valid(state, move(9, 2)) is True


def test_load_state_from_file(tmp_path: Path, initial_state_wire: dict, initial_state: State) -> None:
    path = tmp_path / "room.json"
    path.write_text(json.dumps(initial_state_wire), encoding="utf-8")

    assert load_state(path) == initial_state


def test_demo_state_survives_a_file_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "demo.json"
    path.write_text(demo_state().model_dump_json(by_alias=True), encoding="utf-8")

    assert load_state(path) == demo_state()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ScenarioLoadError) as e:
        load_state(tmp_path / "nope.json")
    assert "Cannot read scenario file" in str(e.value)


def test_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"room": {"id": "r"}, "players": []}), encoding="utf-8")

    with pytest.raises(ScenarioLoadError) as e:
        load_state(path)

    assert isinstance(e.value.__cause__, ShapeError)
    assert "room.width" in str(e.value)
