from __future__ import annotations

import threading
from dataclasses import astuple, dataclass, fields
from typing import Any, ClassVar, Protocol


@dataclass(frozen=True)
class Event:
    """Base for audited events. Field order is the order of the event arguments."""

    name: ClassVar[str] = "Event"

    def args(self) -> tuple[Any, ...]:
        return astuple(self)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class DocumentStored(Event):
    name: ClassVar[str] = "DocumentStored"

    id: int
    owner: str
    locator: str
    integrity_hash: str
    timestamp: int


@dataclass(frozen=True)
class DocumentUpdated(Event):
    name: ClassVar[str] = "DocumentUpdated"

    id: int
    owner: str
    new_integrity_hash: str
    timestamp: int


@dataclass(frozen=True)
class DocumentDeactivated(Event):
    name: ClassVar[str] = "DocumentDeactivated"

    id: int
    owner: str
    timestamp: int


@dataclass(frozen=True)
class ContractPaused(Event):
    name: ClassVar[str] = "ContractPaused"

    account: str
    timestamp: int


@dataclass(frozen=True)
class ContractUnpaused(Event):
    name: ClassVar[str] = "ContractUnpaused"

    account: str
    timestamp: int


@dataclass(frozen=True)
class OwnershipTransferred(Event):
    name: ClassVar[str] = "OwnershipTransferred"

    previous_owner: str
    new_owner: str
    timestamp: int


class EventSink(Protocol):
    def emit(self, event: Event) -> None: ...


@dataclass(frozen=True)
class RecordedEvent:
    seq: int
    event: Event


class EventLog:
    """Append-only in-memory event sink.

    Sequence numbers start at 1 and follow emission order. Nothing is ever removed.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: list[RecordedEvent] = []

    def emit(self, event: Event) -> None:
        with self._lock:
            self._entries.append(RecordedEvent(seq=len(self._entries) + 1, event=event))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def last_seq(self) -> int:
        with self._lock:
            return len(self._entries)

    def since(self, seq: int = 0, *, name: str | None = None) -> list[RecordedEvent]:
        """Return entries with `entry.seq > seq`, optionally only those named `name`."""
        start = max(0, int(seq))
        with self._lock:
            out = self._entries[start:]
        if name is not None:
            out = [e for e in out if e.event.name == name]
        return out

    def events(self, name: str | None = None) -> list[Event]:
        return [e.event for e in self.since(0, name=name)]
