"""Boundary parsing: untyped data in, typed entities out.

Anything arriving from outside the process (a JSON file, a message, user
input) goes through these functions before it reaches the transition engine.
Shape problems become a `ShapeError`; well-formed but semantically odd data
(duplicate ids, a player standing in a wall) parses fine and is left to the
event validators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter, ValidationError

from roomstate.api.models import (
    Player,
    PlayerEvent,
    Position,
    Rectangle,
    Room,
    State,
    Teleport,
    Wall,
)


@dataclass(frozen=True, slots=True)
class ShapeIssue:
    path: tuple[str | int, ...]
    expected: str
    message: str

    @property
    def dotted_path(self) -> str:
        return ".".join(str(p) for p in self.path) or "<root>"


class ShapeError(ValueError):
    """Input did not have the shape of the requested entity."""

    def __init__(self, entity: str, issues: tuple[ShapeIssue, ...]):
        self.entity = entity
        self.issues = issues
        lines = [f"Invalid {entity}:"]
        lines.extend(f"  {i.dotted_path}: {i.message}" for i in issues)
        super().__init__("\n".join(lines))

    @classmethod
    def from_validation_error(cls, entity: str, err: ValidationError) -> "ShapeError":
        issues = tuple(
            ShapeIssue(path=tuple(e["loc"]), expected=e["type"], message=e["msg"])
            for e in err.errors(include_url=False)
        )
        return cls(entity, issues)


_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "Position": TypeAdapter(Position),
    "Rectangle": TypeAdapter(Rectangle),
    "Wall": TypeAdapter(Wall),
    "Teleport": TypeAdapter(Teleport),
    "Room": TypeAdapter(Room),
    "Player": TypeAdapter(Player),
    "State": TypeAdapter(State),
    "PlayerEvent": TypeAdapter(PlayerEvent),
}


def _parse(entity: str, data: Any) -> Any:
    try:
        return _ADAPTERS[entity].validate_python(data)
    except ValidationError as e:
        raise ShapeError.from_validation_error(entity, e) from e


def _parse_json(entity: str, raw: str | bytes) -> Any:
    try:
        return _ADAPTERS[entity].validate_json(raw)
    except ValidationError as e:
        raise ShapeError.from_validation_error(entity, e) from e


def parse_position(data: Any) -> Position:
    return _parse("Position", data)


def parse_rectangle(data: Any) -> Rectangle:
    return _parse("Rectangle", data)


def parse_wall(data: Any) -> Wall:
    return _parse("Wall", data)


def parse_teleport(data: Any) -> Teleport:
    return _parse("Teleport", data)


def parse_room(data: Any) -> Room:
    return _parse("Room", data)


def parse_player(data: Any) -> Player:
    return _parse("Player", data)


def parse_state(data: Any) -> State:
    return _parse("State", data)


def parse_event(data: Any) -> PlayerEvent:
    """Parse one `PlayerEvent`; the `kind` field selects the variant."""

    return _parse("PlayerEvent", data)


def parse_state_json(raw: str | bytes) -> State:
    return _parse_json("State", raw)


def parse_event_json(raw: str | bytes) -> PlayerEvent:
    return _parse_json("PlayerEvent", raw)
