from __future__ import annotations

from roomstate.api.models import Position, Rectangle, Room


def inside_rectangle(point: Position, rect: Rectangle) -> bool:
    """Containment test, inclusive on all four edges."""

    return rect.left <= point.x <= rect.right and rect.top <= point.y <= rect.bottom


def room_bounds(room: Room) -> Rectangle:
    """The playable area of a room: `[0, width-1] x [0, height-1]`."""

    return Rectangle(top=0, right=room.width - 1, bottom=room.height - 1, left=0)
