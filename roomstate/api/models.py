from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

Id = StrictStr

# Integer cells or finite real positions; bools, NaN and inf are rejected.
Coordinate = StrictInt | Annotated[float, Field(strict=True, allow_inf_nan=False)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Position(_Frozen):
    x: Coordinate
    y: Coordinate


class Rectangle(_Frozen):
    """Axis-aligned box. All four edges belong to the rectangle."""

    top: Coordinate
    right: Coordinate
    bottom: Coordinate
    left: Coordinate


class Wall(_Frozen):
    id: Id
    area: Rectangle


class Teleport(_Frozen):
    """A region linking to another room.

    Only part of the schema for now; no event consults teleports yet.
    """

    id: Id
    room_id: Id = Field(..., alias="roomId")
    area: Rectangle


class RoomObjects(_Frozen):
    walls: tuple[Wall, ...]
    teleports: tuple[Teleport, ...]


class Room(_Frozen):
    id: Id
    width: Coordinate
    height: Coordinate
    objects: RoomObjects


class Player(_Frozen):
    id: Id
    position: Position

    # Display attribute only; carried through every transition untouched.
    color: StrictStr


class State(_Frozen):
    room: Room
    players: tuple[Player, ...]

    def player_ids(self) -> tuple[str, ...]:
        return tuple(p.id for p in self.players)

    def find_player(self, player_id: str) -> Player | None:
        return next((p for p in self.players if p.id == player_id), None)


class EventKind(StrEnum):
    add = "add"
    remove = "remove"
    move = "move"


class AddPlayerEvent(_Frozen):
    kind: Literal["add"] = "add"
    player: Player


class RemovePlayerEvent(_Frozen):
    kind: Literal["remove"] = "remove"
    player_id: Id = Field(..., alias="playerId")


class MovePlayerEvent(_Frozen):
    kind: Literal["move"] = "move"
    player_id: Id = Field(..., alias="playerId")
    position: Position


PlayerEvent = Annotated[
    AddPlayerEvent | RemovePlayerEvent | MovePlayerEvent,
    Field(discriminator="kind"),
]
