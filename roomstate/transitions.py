"""Transition engine: decide whether a player event is legal and apply it.

Both entry points are pure. Inputs are never mutated; `apply_event` returns a
new `State` that shares the room and every untouched `Player` with its input,
so old and new states stay valid side by side.
"""

from __future__ import annotations

from typing import assert_never

from roomstate.api.models import (
    AddPlayerEvent,
    MovePlayerEvent,
    PlayerEvent,
    RemovePlayerEvent,
    State,
)
from roomstate.turn_processing.validators import EventRejected, pipeline_for_event


def explain_rejection(state: State, event: PlayerEvent) -> str | None:
    """Return why `event` is illegal against `state`, or None if it is legal."""

    try:
        pipeline_for_event(event.kind).validate(state=state, event=event)
    except EventRejected as e:
        return str(e)
    return None


def is_event_valid(state: State, event: PlayerEvent) -> bool:
    return explain_rejection(state, event) is None


def apply_event(state: State, event: PlayerEvent) -> State:
    """Apply a legal event and return the next state.

    Raises:
        EventRejected: if the event fails validation. No state is produced,
            so a caller can never observe a half-applied or id-duplicating
            transition.
    """

    pipeline_for_event(event.kind).validate(state=state, event=event)

    match event:
        case AddPlayerEvent(player=player):
            players = (*state.players, player)
        case RemovePlayerEvent(player_id=player_id):
            players = tuple(p for p in state.players if p.id != player_id)
        case MovePlayerEvent(player_id=player_id, position=position):
            players = tuple(
                p.model_copy(update={"position": position}) if p.id == player_id else p
                for p in state.players
            )
        case _:
            assert_never(event)

    return state.model_copy(update={"players": players})
