from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from roomstate.api.models import PlayerEvent


@dataclass(frozen=True, slots=True)
class AppliedEvent:
    """One dispatched event as recorded in a session log.

    Rejected events are recorded too, with `accepted=False` and the reason.
    """

    seq: int
    event: PlayerEvent
    accepted: bool
    reason: str | None
    ts: datetime

    @staticmethod
    def now(*, seq: int, event: PlayerEvent, accepted: bool, reason: str | None = None) -> "AppliedEvent":
        return AppliedEvent(seq=seq, event=event, accepted=accepted, reason=reason, ts=datetime.now(UTC))
