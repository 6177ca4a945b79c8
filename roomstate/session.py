from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from roomstate.api.models import PlayerEvent, State
from roomstate.core.events import AppliedEvent
from roomstate.core.state_text import state_summary
from roomstate.settings import Settings, load_settings
from roomstate.transitions import apply_event
from roomstate.turn_processing.validators import EventRejected

logger = logging.getLogger(__name__)


class SessionError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of dispatching one event.

    - `state`: the session's current state after the dispatch (unchanged on rejection).
    - `reason`: why the event was rejected, None when accepted.
    """

    state: State
    accepted: bool
    reason: str | None
    record: AppliedEvent


class RoomSession:
    """Holds the current room state for a host and replaces it on each accepted event.

    Every state the session has ever held is an independent value, which makes
    undo a matter of keeping the previous references around. Not thread-safe:
    hosts handle one event to completion before dispatching the next.
    """

    def __init__(self, initial: State, *, settings: Settings | None = None):
        settings = settings or load_settings()
        self._state = initial
        self._seq = 0
        self._undo: deque[State] = deque(maxlen=settings.history_limit)
        self._log: deque[AppliedEvent] = deque(maxlen=settings.history_limit)

    @property
    def state(self) -> State:
        return self._state

    @property
    def log(self) -> tuple[AppliedEvent, ...]:
        return tuple(self._log)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    def dispatch(self, event: PlayerEvent) -> DispatchResult:
        self._seq += 1
        try:
            new_state = apply_event(self._state, event)
        except EventRejected as e:
            record = AppliedEvent.now(seq=self._seq, event=event, accepted=False, reason=str(e))
            self._log.append(record)
            logger.info("Rejected %s event #%d: %s", event.kind, self._seq, e)
            return DispatchResult(state=self._state, accepted=False, reason=str(e), record=record)

        self._undo.append(self._state)
        self._state = new_state

        record = AppliedEvent.now(seq=self._seq, event=event, accepted=True)
        self._log.append(record)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Applied %s event #%d\n%s", event.kind, self._seq, state_summary(new_state))
        return DispatchResult(state=new_state, accepted=True, reason=None, record=record)

    def dispatch_many(self, events: Iterable[PlayerEvent]) -> list[DispatchResult]:
        """Dispatch events in the order given; a rejection does not stop the rest."""

        return [self.dispatch(e) for e in events]

    def undo(self) -> State:
        """Restore the state from before the most recent accepted event."""

        if not self._undo:
            raise SessionError("Nothing to undo")
        self._state = self._undo.pop()
        logger.debug("Undo -> %d player(s) in room '%s'", len(self._state.players), self._state.room.id)
        return self._state
