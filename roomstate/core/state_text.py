from __future__ import annotations

from roomstate.api.models import Player, Rectangle, State


def _fmt_num(v: int | float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def _fmt_area(area: Rectangle) -> str:
    return (
        f"x {_fmt_num(area.left)}..{_fmt_num(area.right)}, "
        f"y {_fmt_num(area.top)}..{_fmt_num(area.bottom)}"
    )


def _sorted_players(state: State) -> list[Player]:
    return sorted(state.players, key=lambda p: p.id)


def state_summary(state: State) -> str:
    """Deterministic multi-line description of a state, for logs and debugging.

    Players are listed by id rather than insertion order so two states with the
    same occupants read the same.
    """

    room = state.room
    lines: list[str] = [
        f"Room '{room.id}' ({_fmt_num(room.width)}x{_fmt_num(room.height)})",
    ]

    walls = room.objects.walls
    lines.append(f"Walls ({len(walls)}):")
    lines.extend(f"- {w.id}: {_fmt_area(w.area)}" for w in walls)

    teleports = room.objects.teleports
    if teleports:
        lines.append(f"Teleports ({len(teleports)}):")
        lines.extend(f"- {t.id} -> room '{t.room_id}': {_fmt_area(t.area)}" for t in teleports)

    players = _sorted_players(state)
    lines.append(f"Players ({len(players)}):")
    lines.extend(
        f"- {p.id} at ({_fmt_num(p.position.x)}, {_fmt_num(p.position.y)}) [{p.color}]"
        for p in players
    )

    return "\n".join(lines)
