"""
Telemetry sinks for attempt records.

Sinks are fire-and-forget. The loader shields itself from sink failures,
so a sink may raise without affecting a load.
"""

import logging
from typing import Protocol, runtime_checkable

from .models import AttemptOutcome, AttemptRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class TelemetrySink(Protocol):
    """Anything that accepts attempt records."""

    def record(self, event: AttemptRecord) -> None:
        ...


class LoggingSink:
    """Write attempt records to the standard logging facility."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def record(self, event: AttemptRecord) -> None:
        payload = event.to_dict()
        if event.outcome == AttemptOutcome.SUCCESS:
            self.log.info(
                f"[ModuleLoader] Success {payload}", extra={"attempt_record": payload}
            )
        elif event.outcome == AttemptOutcome.CANCELLED:
            self.log.warning(
                f"[ModuleLoader] Cancelled {payload}", extra={"attempt_record": payload}
            )
        else:
            self.log.error(
                f"[ModuleLoader] Failure {payload}", extra={"attempt_record": payload}
            )


class MemorySink:
    """Keep attempt records in memory."""

    def __init__(self):
        self.records: list[AttemptRecord] = []

    def record(self, event: AttemptRecord) -> None:
        self.records.append(event)

    def clear(self) -> None:
        self.records.clear()

    def for_resource(self, resource_id: str) -> list[AttemptRecord]:
        return [r for r in self.records if r.resource_id == resource_id]

    def summary(self, resource_id: str | None = None) -> dict:
        """
        Derive the outcome of the latest load from its attempt records.

        The latest load is the one that emitted the most recent record;
        records of concurrent loads are told apart by their `load_id`.

        Returns:
            Dictionary with `attempts` (int) and `outcome` (str or None when
            nothing has been recorded)
        """
        records = self.for_resource(resource_id) if resource_id else self.records
        if not records:
            return {"attempts": 0, "outcome": None}

        load_id = records[-1].load_id
        if load_id is not None:
            latest = [r for r in records if r.load_id == load_id]
        else:
            # Untagged records: attempt indices restart at 1 for every load call
            start = max((i for i, r in enumerate(records) if r.attempt == 1), default=0)
            latest = records[start:]
        return {"attempts": len(latest), "outcome": latest[-1].outcome.value}
