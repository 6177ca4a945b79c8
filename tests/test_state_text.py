from __future__ import annotations

from roomstate.api.models import Player, Position, Rectangle, RoomObjects, State, Teleport
from roomstate.core.state_text import state_summary
from roomstate.scenarios import demo_state


def test_demo_state_summary() -> None:
    assert state_summary(demo_state()) == "\n".join(
        [
            "Room 'room1' (10x10)",
            "Walls (1):",
            "- 1: x 2..8, y 2..3",
            "Players (2):",
            "- player1 at (0, 0) [green]",
            "- player2 at (1, 7) [blue]",
        ]
    )


def test_players_sorted_by_id_and_teleports_listed() -> None:
    base = demo_state()
    room = base.room.model_copy(
        update={
            "objects": RoomObjects(
                walls=(),
                teleports=(Teleport(id="t1", room_id="room2", area=Rectangle(top=0, right=0, bottom=0, left=9)),),
            )
        }
    )
    state = State(
        room=room,
        players=(
            Player(id="zed", position=Position(x=2.5, y=3.0), color="red"),
            Player(id="amy", position=Position(x=1, y=1), color="blue"),
        ),
    )

    text = state_summary(state)

    assert "Walls (0):" in text
    assert "- t1 -> room 'room2': x 9..0, y 0..0" in text
    assert text.index("- amy") < text.index("- zed")
    assert "- zed at (2.5, 3) [red]" in text
