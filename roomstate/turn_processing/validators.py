from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from roomstate.api.models import (
    AddPlayerEvent,
    EventKind,
    MovePlayerEvent,
    PlayerEvent,
    State,
)
from roomstate.core.geometry import inside_rectangle, room_bounds


class EventRejected(ValueError):
    """The event is well-formed but not legal against the given state."""


def _target_player_id(event: PlayerEvent) -> str:
    if isinstance(event, AddPlayerEvent):
        return event.player.id
    return event.player_id


class EventValidator(ABC):
    """A small, composable validation unit for an incoming event."""

    @abstractmethod
    def validate(self, *, state: State, event: PlayerEvent) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PlayerAbsentValidator(EventValidator):
    """Player ids stay unique: the event's player must not exist yet."""

    def validate(self, *, state: State, event: PlayerEvent) -> None:
        player_id = _target_player_id(event)
        if state.find_player(player_id) is not None:
            raise EventRejected(f"Player '{player_id}' already exists")


@dataclass(frozen=True, slots=True)
class PlayerPresentValidator(EventValidator):
    def validate(self, *, state: State, event: PlayerEvent) -> None:
        player_id = _target_player_id(event)
        if state.find_player(player_id) is None:
            raise EventRejected(f"Player '{player_id}' not found")


@dataclass(frozen=True, slots=True)
class InsideRoomValidator(EventValidator):
    """Move targets must lie within the room's playable bounds (edges included)."""

    def validate(self, *, state: State, event: PlayerEvent) -> None:
        if not isinstance(event, MovePlayerEvent):
            return

        bounds = room_bounds(state.room)
        if not inside_rectangle(event.position, bounds):
            p = event.position
            raise EventRejected(
                f"Position ({p.x}, {p.y}) is outside room '{state.room.id}' "
                f"(0..{bounds.right}, 0..{bounds.bottom})"
            )


@dataclass(frozen=True, slots=True)
class OutsideWallsValidator(EventValidator):
    """Move targets must not touch any wall; a wall's edge counts as inside it."""

    def validate(self, *, state: State, event: PlayerEvent) -> None:
        if not isinstance(event, MovePlayerEvent):
            return

        wall = next(
            (w for w in state.room.objects.walls if inside_rectangle(event.position, w.area)),
            None,
        )
        if wall is not None:
            p = event.position
            raise EventRejected(f"Position ({p.x}, {p.y}) is inside wall '{wall.id}'")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[EventValidator, ...]

    def validate(self, *, state: State, event: PlayerEvent) -> None:
        for v in self.validators:
            v.validate(state=state, event=event)


# `add` deliberately skips position checks: spawn points are trusted.
DEFAULT_EVENT_PIPELINES: dict[str, ValidatorPipeline] = {
    EventKind.add: ValidatorPipeline(validators=(PlayerAbsentValidator(),)),
    EventKind.remove: ValidatorPipeline(validators=(PlayerPresentValidator(),)),
    EventKind.move: ValidatorPipeline(
        validators=(
            PlayerPresentValidator(),
            InsideRoomValidator(),
            OutsideWallsValidator(),
        )
    ),
}


def pipeline_for_event(kind: str) -> ValidatorPipeline:
    pipe = DEFAULT_EVENT_PIPELINES.get(kind)
    if pipe is None:
        raise ValueError(f"Unknown event kind: {kind}")
    return pipe
